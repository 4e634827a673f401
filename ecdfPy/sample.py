import numpy as np
from dataclasses import dataclass
from typing import Union
from .errors import InvalidInputError, InvalidArgumentError

def as_sample(s, name: str = "sample") -> np.ndarray:
    """
    Coerce an array-like into a 1-D float sample

    Args:
        s: Input values (list, tuple, scalar or array)
        name: Name used in error messages

    Returns:
        1-D float64 array (a view when no conversion is needed)

    Raises:
        InvalidInputError: If s is not numeric or has more than one dimension
    """
    try:
        s = np.atleast_1d(np.asarray(s, dtype=float))
    except (TypeError, ValueError) as exc:
        raise InvalidInputError(f"{name} must be numeric: {exc}") from exc
    if s.ndim != 1:
        raise InvalidInputError(f"{name} must be 1-D, got shape {s.shape}")
    return s

def check_finite(s: np.ndarray, name: str = "sample") -> None:
    """Reject NaN and +/-Inf, for which no total ordering is defined"""
    bad = ~np.isfinite(s)
    if bad.any():
        first = int(np.argmax(bad))
        raise InvalidInputError(
            f"{name} contains {int(bad.sum())} non-finite value(s), "
            f"first at index {first} ({s[first]})")

def is_sorted(s: np.ndarray) -> bool:
    """Check that s is non-decreasing"""
    return bool(np.all(s[1:] >= s[:-1]))

@dataclass(frozen=True)
class SortedReference:
    """Sorted, read-only copy of a reference sample"""
    values: np.ndarray      # non-decreasing, finite, read-only

    @property
    def n(self) -> int:
        """Number of reference points"""
        return self.values.shape[0]

    def __len__(self) -> int:
        return self.n

def _freeze(values: np.ndarray) -> np.ndarray:
    values.flags.writeable = False
    return values

def build_sorted_reference(reference, verb: int = 0) -> SortedReference:
    """
    Sort a reference sample once so it can be shared by every ranker.

    The returned values are a new array; the caller's data is never
    modified or aliased. Duplicates keep their multiplicity.

    Args:
        reference: Reference sample (array-like) or a SortedReference
        verb: Verbosity level

    Returns:
        SortedReference holding the values in non-decreasing order

    Raises:
        InvalidInputError: If reference contains NaN/Inf or is not 1-D
    """
    if isinstance(reference, SortedReference):
        return reference
    s = as_sample(reference, "reference")
    check_finite(s, "reference")
    if verb > 0:
        print(f"sorted_reference: sorting {s.shape[0]} reference points")
    # np.sort always returns a copy
    return SortedReference(values=_freeze(np.sort(s)))

def as_sorted_reference(values: Union[SortedReference, np.ndarray]) -> SortedReference:
    """
    Wrap values that are already sorted, without sorting them again

    Args:
        values: Non-decreasing array-like or a SortedReference

    Returns:
        SortedReference over a read-only copy of values

    Raises:
        InvalidInputError: If values contain NaN/Inf
        InvalidArgumentError: If values are not non-decreasing
    """
    if isinstance(values, SortedReference):
        return values
    s = as_sample(values, "sorted reference")
    check_finite(s, "sorted reference")
    if not is_sorted(s):
        raise InvalidArgumentError("sorted reference is not in non-decreasing order")
    return SortedReference(values=_freeze(s.copy()))
