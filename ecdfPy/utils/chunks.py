from typing import List, Tuple
import numpy as np

def partition(m: int, parts: int) -> List[Tuple[int, int]]:
    """
    Split the index range [0, m) into contiguous, disjoint, non-empty
    [start, stop) ranges of near-equal size.

    Args:
        m: Number of items
        parts: Requested number of ranges (capped at m)

    Returns:
        List of (start, stop) tuples covering [0, m) in order
    """
    if m == 0:
        return []
    parts = max(1, min(parts, m))
    bounds = np.linspace(0, m, parts + 1).astype(int)
    return [(int(a), int(b)) for a, b in zip(bounds[:-1], bounds[1:]) if b > a]
