import numpy as np
from concurrent.futures import ThreadPoolExecutor
from typing import Union
from .sample import SortedReference, as_sample, as_sorted_reference, check_finite
from .utils.bounds import lower_bounds
from .utils.chunks import partition

def rank_by_binary_search(observations,
                          sorted_reference: Union[SortedReference, np.ndarray],
                          workers: int = 1,
                          verb: int = 0) -> np.ndarray:
    """
    Rank every observation against the sorted reference with an
    independent lower-bound binary search per observation.

    Queries do not depend on each other, so with workers > 1 the
    observations are split into contiguous ranges that are searched on
    a thread pool, each writing a disjoint slice of the result.

    Args:
        observations: Query values (m,)
        sorted_reference: SortedReference, or an already sorted array
        workers: Number of threads to spread the queries over
        verb: Verbosity level

    Returns:
        Integer array (m,) with the number of reference values strictly
        less than each observation, in the original observation order

    Raises:
        InvalidInputError: If observations contain NaN/Inf
    """
    ref = as_sorted_reference(sorted_reference)
    x = as_sample(observations, "observations")
    check_finite(x, "observations")
    m = x.shape[0]

    if verb > 0:
        print(f"binary_search: ranking {m} observations against {ref.n} reference points")

    ranges = partition(m, workers)
    if len(ranges) <= 1:
        return lower_bounds(ref.values, x)

    result = np.empty(m, dtype=int)

    def search_range(start: int, stop: int) -> None:
        if verb > 1:
            print(f"\tbinary_search: range [{start}, {stop})")
        result[start:stop] = lower_bounds(ref.values, x[start:stop])

    with ThreadPoolExecutor(max_workers=len(ranges)) as pool:
        futures = [pool.submit(search_range, start, stop) for start, stop in ranges]
        for future in futures:
            future.result()
    return result
