import warnings
import numpy as np
from concurrent.futures import ThreadPoolExecutor
from typing import Iterator, Optional, Sequence, Tuple, Union
from .sample import SortedReference, as_sample, as_sorted_reference, check_finite
from .order import build_permutation, check_permutation
from .utils.bounds import lower_bound
from .utils.chunks import partition

def scan_cursor(x: Sequence[float],
                values: Sequence[float],
                permutation: Sequence[int],
                start: int = 0) -> Iterator[Tuple[int, int]]:
    """
    Walk the observations in permutation order with a single cursor into
    the sorted reference values.

    The cursor only moves forward: for each observation it advances while
    the reference value under it is strictly less than the observation,
    and once it reaches len(values) no more comparisons are made.

    Args:
        x: Observation values
        values: Non-decreasing reference values
        permutation: Positions of x in non-decreasing value order
        start: Initial cursor position, must not exceed the lower bound
            of the first visited observation

    Yields:
        (p, j) pairs: original position p and its lower bound j
    """
    n = len(values)
    j = start
    for p in permutation:
        xp = x[p]
        while j < n and values[j] < xp:
            j += 1
        yield p, j

def _merge_block(x: list, values: list, block: list, start: int, result: np.ndarray) -> None:
    for p, j in scan_cursor(x, values, block, start):
        result[p] = j

def rank_by_merge_scan(observations,
                       sorted_reference: Union[SortedReference, np.ndarray],
                       permutation: Optional[np.ndarray] = None,
                       check: bool = True,
                       chunks: int = 1,
                       workers: int = 1,
                       verb: int = 0) -> np.ndarray:
    """
    Rank every observation against the sorted reference with one
    monotone merge scan over the observations in sorted order.

    Total cursor movement is bounded by the reference size, so the scan
    costs O(n + m) once the permutation is known. With chunks > 1 the
    permutation is cut into contiguous blocks; each block seeds its own
    cursor by binary search on its smallest value and the blocks are
    merged independently on a thread pool of `workers` threads.

    Args:
        observations: Query values (m,)
        sorted_reference: SortedReference, or an already sorted array
        permutation: Index sort of observations (built when None)
        check: Whether to run the full bijection/ordering check on permutation
        chunks: Number of independent merge blocks
        workers: Number of threads used when chunks > 1
        verb: Verbosity level

    Returns:
        Integer array (m,) with the number of reference values strictly
        less than each observation, in the original observation order

    Raises:
        InvalidInputError: If observations contain NaN/Inf
        InvalidArgumentError: If permutation does not match observations
    """
    ref = as_sorted_reference(sorted_reference)
    x = as_sample(observations, "observations")
    check_finite(x, "observations")
    if permutation is None:
        permutation = build_permutation(x)
    else:
        permutation = check_permutation(permutation, x, full=check)
    m = x.shape[0]

    if chunks > max(m, 1):
        warnings.warn(f"chunks={chunks} exceeds number of observations ({m}), using {max(m, 1)}")
        chunks = max(m, 1)

    if verb > 0:
        print(f"merge_scan: ranking {m} observations against {ref.n} reference points"
              f" in {max(chunks, 1)} block(s)")

    result = np.empty(m, dtype=int)
    # Python scalars compare much faster than numpy scalars in the scan loop
    xs = x.tolist()
    values = ref.values.tolist()
    order = permutation.tolist()

    ranges = partition(m, chunks)
    if len(ranges) <= 1:
        _merge_block(xs, values, order, 0, result)
        return result

    def merge_range(begin: int, end: int) -> None:
        block = order[begin:end]
        start = lower_bound(ref.values, xs[block[0]])
        if verb > 1:
            print(f"\tmerge_scan: block [{begin}, {end}) starts at cursor {start}")
        _merge_block(xs, values, block, start, result)

    with ThreadPoolExecutor(max_workers=max(1, min(workers, len(ranges)))) as pool:
        futures = [pool.submit(merge_range, begin, end) for begin, end in ranges]
        for future in futures:
            future.result()
    return result
