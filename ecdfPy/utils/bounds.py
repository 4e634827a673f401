from typing import Optional
import numpy as np

def lower_bound(values: np.ndarray, x: float, lo: int = 0, hi: Optional[int] = None) -> int:
    """
    Leftmost position in sorted values where x could be inserted keeping order,
    i.e. the number of elements of values[lo:hi] strictly less than x, plus lo.

    Args:
        values: Non-decreasing array
        x: Query value
        lo: First index to search
        hi: One past the last index to search (defaults to len(values))

    Returns:
        Index j with values[lo:j] < x <= values[j:hi]
    """
    if hi is None:
        hi = values.shape[0]
    while lo < hi:
        mid = (lo + hi) // 2
        if values[mid] < x:
            lo = mid + 1
        else:
            hi = mid
    return lo

def lower_bounds(values: np.ndarray, xs: np.ndarray) -> np.ndarray:
    """
    Vectorised lower_bound: run the same binary search for every query in
    lockstep, each query keeping its own [lo, hi) window.

    Args:
        values: Non-decreasing array (n,)
        xs: Query values (m,)

    Returns:
        Integer array (m,) of lower-bound indices in [0, n]
    """
    m = xs.shape[0]
    lo = np.zeros(m, dtype=int)
    hi = np.full(m, values.shape[0], dtype=int)

    # Only the queries whose window is still open are touched each round,
    # so at most ceil(log2(n + 1)) rounds are needed.
    active = np.flatnonzero(lo < hi)
    while active.size > 0:
        mid = (lo[active] + hi[active]) // 2
        less = values[mid] < xs[active]
        lo[active[less]] = mid[less] + 1
        hi[active[~less]] = mid[~less]
        active = active[lo[active] < hi[active]]
    return lo
