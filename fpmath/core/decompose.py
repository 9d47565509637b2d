"""
Exponent and significand decomposition.

Double precision functions take and return Python floats; the ``f``-suffixed
variants work in binary32 and return ``numpy.float32``. Both are thin
wrappers around one implementation parameterized by a :class:`FloatFormat`.
"""

from typing import Any, NamedTuple

from .formats import BINARY32, BINARY64, FloatFormat, Scalar

# Values returned by ilogb for zero, infinity and NaN. They lie outside the
# exponent range of every supported format and are pairwise distinct.
FP_ILOGB0 = -2147483647
FP_ILOGBINF = 32767
FP_ILOGBNAN = 2147483647


class FrexpResult(NamedTuple):
    """Normalized fraction and power of two returned by frexp."""
    fraction: Scalar
    exponent: int


def frexp_impl(number: Scalar, fmt: FloatFormat) -> FrexpResult:
    """
    Split ``number`` into a fraction in [0.5, 1) and a power of two.

    Zero, infinity and NaN are returned unchanged with exponent 0. The
    exponent is meaningless for infinity and NaN.
    """
    bits = fmt.to_bits(number)
    exp = fmt.exponent_field(bits)

    if exp == fmt.exponent_field_max or number == 0:
        return FrexpResult(number, 0)

    # Biased field of a value in [0.5, 1)
    half_field = fmt.bias - 1
    exponent = exp - half_field
    if exp == 0:
        # Subnormal: lift into the normal range first so the leading bit
        # sits in the implicit position.
        number = number * fmt.scale_up
        bits = fmt.to_bits(number)
        exponent = fmt.exponent_field(bits) - half_field - fmt.rescale_shift

    fraction = fmt.compose(fmt.sign_field(bits), half_field, bits & fmt.mantissa_mask)
    return FrexpResult(fraction, exponent)


def ilogb_impl(number: Scalar, fmt: FloatFormat) -> int:
    """Unbiased exponent of ``number`` with the significand in [1, 2)."""
    bits = fmt.to_bits(number) & fmt.sign_clear_mask
    if bits == 0:
        return FP_ILOGB0

    exp = bits >> fmt.mantissa_bits
    if exp == fmt.exponent_field_max:
        return FP_ILOGBINF if (bits & fmt.mantissa_mask) == 0 else FP_ILOGBNAN
    if exp == 0:
        # Subnormal: the position of the highest set mantissa bit gives the
        # exponent below min_exponent.
        return bits.bit_length() - 1 - fmt.mantissa_bits + fmt.min_exponent
    return exp - fmt.bias


def logb_impl(number: Scalar, fmt: FloatFormat) -> Scalar:
    exp = ilogb_impl(number, fmt)
    if exp == FP_ILOGB0:
        return -fmt.inf
    if exp == FP_ILOGBINF:
        return fmt.inf
    if exp == FP_ILOGBNAN:
        return fmt.nan
    return fmt.native(exp)


def significand_impl(number: Scalar, fmt: FloatFormat) -> Scalar:
    """
    Normalized significand in [1, 2), keeping the sign of ``number``.

    NaN, infinities and signed zeros are returned unchanged.
    """
    bits = fmt.to_bits(number)
    exp = fmt.exponent_field(bits)
    if exp == fmt.exponent_field_max:
        return number

    mantissa = bits & fmt.mantissa_mask
    if exp == 0:
        if mantissa == 0:
            return number
        # Shift the leading one up into the implicit bit position, then
        # drop it.
        shift = fmt.mantissa_bits + 1 - mantissa.bit_length()
        mantissa = (mantissa << shift) & fmt.mantissa_mask

    return fmt.compose(fmt.sign_field(bits), fmt.bias, mantissa)


# ----------------------------------------------------------------------
# binary64
# ----------------------------------------------------------------------

def frexp(number: Any) -> FrexpResult:
    """
    Decompose a double into ``(fraction, exponent)``.

    ``number == fraction * 2**exponent`` with ``0.5 <= |fraction| < 1``.

    Examples:
        >>> frexp(12.8)
        FrexpResult(fraction=0.8, exponent=4)
    """
    return frexp_impl(BINARY64.coerce(number), BINARY64)


def ilogb(number: Any) -> int:
    """
    Unbiased binary exponent of a double.

    Returns FP_ILOGB0 for ±0, FP_ILOGBINF for ±inf, FP_ILOGBNAN for NaN.
    """
    return ilogb_impl(BINARY64.coerce(number), BINARY64)


def logb(number: Any) -> float:
    """
    Unbiased binary exponent of a double, as a float.

    Returns -inf for ±0, +inf for ±inf and NaN for NaN.
    """
    return logb_impl(BINARY64.coerce(number), BINARY64)


def significand(number: Any) -> float:
    """Significand of a double scaled into [1, 2)."""
    return significand_impl(BINARY64.coerce(number), BINARY64)


def exponent(number: Any) -> int:
    """Raw biased exponent field of a double."""
    return BINARY64.exponent_field(BINARY64.to_bits(number))


def mantissa(number: Any) -> int:
    """Raw mantissa field of a double (without the implicit bit)."""
    return BINARY64.to_bits(number) & BINARY64.mantissa_mask


# ----------------------------------------------------------------------
# binary32
# ----------------------------------------------------------------------

def frexpf(number: Any) -> FrexpResult:
    """Single precision :func:`frexp`."""
    return frexp_impl(BINARY32.coerce(number), BINARY32)


def ilogbf(number: Any) -> int:
    """Single precision :func:`ilogb`."""
    return ilogb_impl(BINARY32.coerce(number), BINARY32)


def logbf(number: Any):
    """Single precision :func:`logb`."""
    return logb_impl(BINARY32.coerce(number), BINARY32)


def significandf(number: Any):
    """Single precision :func:`significand`."""
    return significand_impl(BINARY32.coerce(number), BINARY32)


def exponentf(number: Any) -> int:
    return BINARY32.exponent_field(BINARY32.to_bits(number))


def mantissaf(number: Any) -> int:
    return BINARY32.to_bits(number) & BINARY32.mantissa_mask
