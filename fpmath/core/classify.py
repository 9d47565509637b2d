"""
Floating-point classification.

All predicates read the raw bit pattern rather than comparing numerically,
so they give exact answers for signed zeros and for every NaN payload. The
public predicates are type-generic, like their C macro counterparts: the
format is chosen by :func:`resolve_format` from the argument's type.
"""

from enum import Enum
from typing import Any

from .formats import FloatFormat
from .precision_config import resolve_format


class FloatCategory(Enum):
    """
    IEEE-754 value categories.

    Exactly one category applies to any bit pattern.
    """
    NAN = 0
    INFINITE = 1
    ZERO = 2
    SUBNORMAL = 3
    NORMAL = 4

    def __str__(self) -> str:
        return self.name


FP_NAN = FloatCategory.NAN
FP_INFINITE = FloatCategory.INFINITE
FP_ZERO = FloatCategory.ZERO
FP_SUBNORMAL = FloatCategory.SUBNORMAL
FP_NORMAL = FloatCategory.NORMAL


# ----------------------------------------------------------------------
# Bit-level implementation, shared by every precision
# ----------------------------------------------------------------------

def classify_bits(bits: int, fmt: FloatFormat) -> FloatCategory:
    """Classify a raw bit pattern of the given format."""
    magnitude = bits & fmt.sign_clear_mask
    if magnitude >= fmt.exponent_mask:
        return FP_INFINITE if (magnitude & fmt.mantissa_mask) == 0 else FP_NAN
    if magnitude < fmt.min_normal_bits:
        return FP_ZERO if magnitude == 0 else FP_SUBNORMAL
    return FP_NORMAL


def isfinite_bits(bits: int, fmt: FloatFormat) -> bool:
    # Exponent all ones means infinity or NaN
    return (bits & fmt.exponent_mask) != fmt.exponent_mask


def isinf_bits(bits: int, fmt: FloatFormat) -> bool:
    return (bits & fmt.sign_clear_mask) == fmt.exponent_mask


def isnan_bits(bits: int, fmt: FloatFormat) -> bool:
    return (bits & fmt.sign_clear_mask) > fmt.exponent_mask


def isnormal_bits(bits: int, fmt: FloatFormat) -> bool:
    magnitude = bits & fmt.sign_clear_mask
    return fmt.min_normal_bits <= magnitude < fmt.exponent_mask


def signbit_bits(bits: int, fmt: FloatFormat) -> int:
    return 1 if bits & fmt.sign_mask else 0


# ----------------------------------------------------------------------
# Type-generic predicates
# ----------------------------------------------------------------------

def _bits_of(number: Any):
    fmt = resolve_format(number)
    return fmt.to_bits(number), fmt


def fpclassify(number: Any) -> FloatCategory:
    """
    Categorize a floating-point value.

    Args:
        number: Python float/int or NumPy float32/float64 scalar

    Returns:
        One of FP_NAN, FP_INFINITE, FP_ZERO, FP_SUBNORMAL, FP_NORMAL
    """
    return classify_bits(*_bits_of(number))


def isfinite(number: Any) -> bool:
    """True for zero, subnormal and normal values."""
    return isfinite_bits(*_bits_of(number))


def isinf(number: Any) -> bool:
    """True for positive or negative infinity."""
    return isinf_bits(*_bits_of(number))


def isnan(number: Any) -> bool:
    """True for any NaN, quiet or signaling, of either sign."""
    return isnan_bits(*_bits_of(number))


def isnormal(number: Any) -> bool:
    """True when the value is neither zero, subnormal, infinite nor NaN."""
    return isnormal_bits(*_bits_of(number))


def signbit(number: Any) -> int:
    """
    Return the raw sign bit (0 or 1).

    Unlike ``number < 0`` this distinguishes -0.0 from +0.0 and gives a
    definite answer for NaNs.
    """
    return signbit_bits(*_bits_of(number))


def isunordered(number1: Any, number2: Any) -> bool:
    """True when the two values cannot be ordered, i.e. either is NaN."""
    return isnan(number1) or isnan(number2)
