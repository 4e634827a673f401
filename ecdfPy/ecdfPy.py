import numpy as np
from typing import Dict, Optional, Union
from .errors import InvalidArgumentError
from .params import Method, sarg
from .sample import SortedReference, build_sorted_reference
from .search import rank_by_binary_search
from .merge import rank_by_merge_scan


def ecdf_rank(reference: Union[SortedReference, np.ndarray],
              observations: np.ndarray,
              method: Union[str, Method] = "merge",
              permutation: Optional[np.ndarray] = None,
              workers: Optional[int] = None,
              chunks: Optional[int] = None,
              check: Optional[bool] = None,
              verb: int = 0) -> np.ndarray:
    """
    Count, for every observation, the reference values strictly less than it

    Args:
        reference: Reference sample, or a SortedReference to reuse
        observations: Query values
        method: "binary" (independent binary searches) or "merge" (sorted merge scan)
        permutation: Index sort of observations, merge method only (built when None)
        workers: Number of threads (default 1)
        chunks: Number of independent merge blocks, merge method only (default 1)
        check: Whether to fully validate a supplied permutation (default True)
        verb: Verbosity level

    Returns:
        Integer array of ranks aligned with observations
    """
    s = {'method': method}
    for key, val in (('workers', workers), ('chunks', chunks), ('check', check)):
        if val is not None:
            s[key] = val
    s = sarg(s)

    if permutation is not None and s['method'] != Method.MERGE:
        raise InvalidArgumentError("permutation is only used by the merge method")

    ref = build_sorted_reference(reference, verb=verb)

    if s['method'] == Method.BINARY:
        return rank_by_binary_search(observations, ref, workers=s['workers'], verb=verb)
    return rank_by_merge_scan(observations, ref, permutation,
                              check=s['check'],
                              chunks=s['chunks'],
                              workers=s['workers'],
                              verb=verb)


def ecdf(reference: Union[SortedReference, np.ndarray],
         observations: np.ndarray,
         method: Union[str, Method] = "merge",
         permutation: Optional[np.ndarray] = None,
         workers: Optional[int] = None,
         chunks: Optional[int] = None,
         check: Optional[bool] = None,
         verb: int = 0) -> Dict:
    """
    Evaluate the empirical CDF of the reference sample at every observation.

    Args:
        reference: Reference sample, or a SortedReference to reuse
        observations: Query values
        method: "binary" or "merge"
        permutation: Index sort of observations, merge method only
        workers: Number of threads
        chunks: Number of independent merge blocks, merge method only
        check: Whether to fully validate a supplied permutation
        verb: Verbosity level

    Returns:
        Dictionary containing:
            rank: Number of reference values strictly less than each observation
            ecdf: rank / n (zeros when the reference is empty)
            n: Number of reference values
            m: Number of observations
            method: Method used
    """
    ref = build_sorted_reference(reference, verb=verb)
    rank = ecdf_rank(ref, observations, method=method, permutation=permutation,
                     workers=workers, chunks=chunks, check=check, verb=verb)
    n = ref.n
    return {
        'rank': rank,
        'ecdf': rank / n if n > 0 else np.zeros(rank.shape[0]),
        'n': n,
        'm': rank.shape[0],
        'method': sarg(method)['method'].name.lower(),
    }
