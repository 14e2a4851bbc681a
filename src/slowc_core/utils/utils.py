import numpy as np
from numpy.typing import ArrayLike

# sqrt(machine eps), the usual tolerance for "numerically equal" series
TIMESTAMP_TOLERANCE = 1.5e-8


def as_float_array(values: ArrayLike, name: str = "values") -> np.ndarray:
    """
    Coerce a sequence of numbers to a 1-D float64 array.

    Args:
        values: list, tuple, or np.array of numbers
        name: field name used in the error message

    Returns:
        np.ndarray: 1-D array of dtype float64

    Raises:
        TypeError: values are missing, non-numeric, or not one-dimensional
    """
    if values is None:
        raise TypeError(f"'{name}' is missing")
    if isinstance(values, (str, bytes)):
        raise TypeError(f"'{name}' must be numeric, got {type(values).__name__}")

    try:
        arr = np.asarray(values, dtype=float)
    except (TypeError, ValueError) as e:
        raise TypeError(f"'{name}' must be numeric: {e}") from e

    if arr.ndim != 1:
        raise TypeError(f"'{name}' must be one-dimensional, got shape {arr.shape}")

    return arr


def timestamps_match(t1: ArrayLike, t2: ArrayLike, tolerance: float = TIMESTAMP_TOLERANCE) -> bool:
    """
    Check two timestamp series for equality within a tolerance.

    Uses the mean relative difference: mean(|t1 - t2|) / mean(|t1|).
    When mean(|t1|) is not above the tolerance (e.g. all-zero timestamps)
    the mean absolute difference is compared instead.

    Returns:
        bool: False (never raises) when the lengths differ
    """
    t1 = np.asarray(t1, dtype=float)
    t2 = np.asarray(t2, dtype=float)
    if t1.shape != t2.shape:
        return False
    if t1.size == 0:
        return True

    # NaN 위치가 다르면 불일치
    nan1 = np.isnan(t1)
    if not np.array_equal(nan1, np.isnan(t2)):
        return False
    valid = ~nan1
    if not valid.any():
        return True

    diff = float(np.mean(np.abs(t1[valid] - t2[valid])))
    scale = float(np.mean(np.abs(t1[valid])))
    if np.isfinite(scale) and scale > tolerance:
        diff = diff / scale

    return diff <= tolerance
