"""
NumPy bridge for IEEE-754 classification.

Vectorised counterparts of the scalar predicates: they reinterpret a whole
float32/float64 array as unsigned integers once and classify with masked
comparisons, producing uint8 category codes (the ``FloatCategory`` values).
"""

import warnings
from typing import Any, Dict, Tuple

import numpy as np

from ..core.classify import FloatCategory
from ..core.formats import FloatFormat, format_for_dtype


def _as_float_array(arr: Any) -> Tuple[np.ndarray, FloatFormat]:
    """Coerce input to a float32/float64 array and find its format."""
    arr = np.asarray(arr)
    if arr.dtype == np.float16:
        warnings.warn(
            "float16 input is widened to float32 for classification.",
            category=UserWarning,
        )
        arr = arr.astype(np.float32)
    return arr, format_for_dtype(arr.dtype)


def to_bits_array(arr: Any) -> np.ndarray:
    """
    Reinterpret a float array as its raw bit patterns.

    Returns a uint64 (float64 input) or uint32 (float32 input) view sharing
    memory with the input array. float16 input is widened to a float32 copy
    first (with a UserWarning), so the result is a view of that copy and
    writes to it do not reach the original array.

    Raises:
        TypeError: If the array is not float32 or float64
    """
    arr, fmt = _as_float_array(arr)
    return arr.view(fmt.uint)


def from_bits_array(bits: Any, dtype: Any = np.float64) -> np.ndarray:
    """
    Build a float array from raw bit patterns.

    Args:
        bits: Integer array (or nested lists) of non-negative bit patterns
        dtype: Target float dtype, float32 or float64

    Returns:
        Array of ``dtype`` with exactly the given encodings
    """
    fmt = format_for_dtype(dtype)
    return np.asarray(bits, dtype=fmt.uint).view(fmt.dtype)


def classify_array(arr: Any) -> np.ndarray:
    """
    Classify every element of a float array.

    Returns:
        uint8 array of FloatCategory codes with the input's shape
    """
    arr, fmt = _as_float_array(arr)
    u = fmt.uint
    magnitude = arr.view(u) & u(fmt.sign_clear_mask)
    exponent_mask = u(fmt.exponent_mask)

    codes = np.full(magnitude.shape, FloatCategory.NORMAL.value, dtype=np.uint8)
    codes[magnitude < u(fmt.min_normal_bits)] = FloatCategory.SUBNORMAL.value
    codes[magnitude == 0] = FloatCategory.ZERO.value
    codes[magnitude == exponent_mask] = FloatCategory.INFINITE.value
    codes[magnitude > exponent_mask] = FloatCategory.NAN.value
    return codes


def category_mask(arr: Any, category: FloatCategory) -> np.ndarray:
    """Return boolean mask of elements in the given category."""
    return classify_array(arr) == category.value


def signbit_array(arr: Any) -> np.ndarray:
    """Return the raw sign bit (0/1) of every element as uint8."""
    arr, fmt = _as_float_array(arr)
    u = fmt.uint
    return ((arr.view(u) >> u(fmt.total_bits - 1)) & u(1)).astype(np.uint8)


def count_categories(arr: Any) -> Dict[str, int]:
    """
    Count elements per category.

    Returns:
        Dictionary with counts for each category name
    """
    codes = classify_array(arr)
    return {
        category.name: int(np.count_nonzero(codes == category.value))
        for category in FloatCategory
    }
