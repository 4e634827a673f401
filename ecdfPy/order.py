import numpy as np
from .errors import InvalidArgumentError
from .sample import as_sample, check_finite, is_sorted

def build_permutation(s) -> np.ndarray:
    """
    Obtain the integer order of the indices of s from least to greatest.
    The returned indices o applied to s (e.g. s[o]) would result in a sorted list.

    Args:
        s: Input sample

    Returns:
        Array of indices that would sort the input

    Raises:
        InvalidInputError: If s contains NaN/Inf
    """
    s = as_sample(s, "observations")
    check_finite(s, "observations")
    return np.argsort(s, kind="stable")

def check_permutation(permutation, s: np.ndarray, full: bool = True) -> np.ndarray:
    """
    Validate a permutation of the observations before a merge scan.

    The length and dtype checks are always done. With full=True the
    permutation must also be a bijection onto 0..m-1 that puts s in
    non-decreasing order; both checks are O(m).

    Args:
        permutation: Candidate permutation of the indices of s
        s: Observation sample
        full: Whether to run the bijection and ordering checks

    Returns:
        The permutation as an integer array

    Raises:
        InvalidArgumentError: If any check fails
    """
    permutation = np.asarray(permutation)
    m = s.shape[0]
    if permutation.ndim != 1:
        raise InvalidArgumentError(f"permutation must be 1-D, got shape {permutation.shape}")
    if permutation.shape[0] != m:
        raise InvalidArgumentError(
            f"permutation length ({permutation.shape[0]}) does not match "
            f"number of observations ({m})")
    if m == 0:
        return permutation.astype(int)
    if not np.issubdtype(permutation.dtype, np.integer):
        raise InvalidArgumentError(f"permutation must hold integers, got {permutation.dtype}")
    if full:
        if permutation.min() < 0 or permutation.max() >= m:
            raise InvalidArgumentError(f"permutation has entries outside [0, {m})")
        if np.any(np.bincount(permutation, minlength=m) != 1):
            raise InvalidArgumentError("permutation is not a bijection onto the observations")
        if not is_sorted(s[permutation]):
            raise InvalidArgumentError("permutation does not put observations in non-decreasing order")
    return permutation
