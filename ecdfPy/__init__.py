"""ecdfPy: empirical CDF ranks of observations against a reference sample"""

from .ecdfPy import (
    ecdf,
    ecdf_rank
)

from .params import (
    Method,
    sarg
)

from .errors import (
    ECDFError,
    InvalidInputError,
    InvalidArgumentError
)

from .sample import (
    SortedReference,
    build_sorted_reference,
    as_sorted_reference
)

from .order import (
    build_permutation,
    check_permutation
)

from .search import (
    rank_by_binary_search
)

from .merge import (
    rank_by_merge_scan,
    scan_cursor
)

from .utils.bounds import (
    lower_bound,
    lower_bounds
)

__version__ = '0.1.0'


__all__ = [
    'ecdf',
    'ecdf_rank',
    'Method',
    'SortedReference',
    'build_sorted_reference',
    'build_permutation',
    'rank_by_binary_search',
    'rank_by_merge_scan',
    'ECDFError',
    'InvalidInputError',
    'InvalidArgumentError',
    '__version__'
]
