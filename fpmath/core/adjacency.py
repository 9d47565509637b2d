"""Sign manipulation and stepping to adjacent representable values."""

from typing import Any

from .classify import isnan_bits
from .formats import BINARY32, BINARY64, FloatFormat, Scalar


def copysign_impl(magnitude: Scalar, sign_source: Scalar, fmt: FloatFormat) -> Scalar:
    """
    Magnitude bits of ``magnitude`` with the sign bit of ``sign_source``.

    Works on the raw encoding, so it also sets the sign of a NaN and keeps
    its payload.
    """
    bits = fmt.to_bits(magnitude) & fmt.sign_clear_mask
    return fmt.from_bits(bits | (fmt.to_bits(sign_source) & fmt.sign_mask))


def nextafter_impl(from_number: Scalar, toward_number: Scalar, fmt: FloatFormat) -> Scalar:
    """
    Next representable value after ``from_number`` toward ``toward_number``.

    Steps the bit pattern by one, which crosses exponent boundaries, the
    normal/subnormal boundary and the overflow to infinity without special
    cases.
    """
    bits = fmt.to_bits(from_number)
    if isnan_bits(bits, fmt) or isnan_bits(fmt.to_bits(toward_number), fmt):
        return fmt.nan
    # Also maps -0.0 -> +0.0 (and back) to the exact target zero
    if from_number == toward_number:
        return toward_number
    if from_number == 0:
        return fmt.denorm_min if toward_number > 0 else -fmt.denorm_min

    # Away from zero increments the magnitude, toward zero decrements it
    if bool(from_number > 0) ^ bool(from_number > toward_number):
        bits += 1
    else:
        bits -= 1
    return fmt.from_bits(bits)


# ----------------------------------------------------------------------
# binary64
# ----------------------------------------------------------------------

def copysign(magnitude: Any, sign_source: Any) -> float:
    """
    Return ``|magnitude|`` with the sign bit of ``sign_source``.

    This is the portable way to give a NaN a definite sign:
    ``signbit(copysign(nan, -1.0)) == 1``.
    """
    return copysign_impl(BINARY64.coerce(magnitude), BINARY64.coerce(sign_source), BINARY64)


def nextafter(from_number: Any, toward_number: Any) -> float:
    """
    Next double after ``from_number`` in the direction of ``toward_number``.

    - NaN in either argument gives NaN
    - Equal arguments return ``toward_number`` (``nextafter(-0.0, 0.0)`` is ``+0.0``)
    - From zero, the smallest subnormal with the direction's sign
    """
    return nextafter_impl(BINARY64.coerce(from_number), BINARY64.coerce(toward_number), BINARY64)


def nexttoward(from_number: Any, toward_number: Any) -> float:
    """Same as :func:`nextafter`; there is no wider target type to honor."""
    return nextafter(from_number, toward_number)


# ----------------------------------------------------------------------
# binary32
# ----------------------------------------------------------------------

def copysignf(magnitude: Any, sign_source: Any):
    """Single precision :func:`copysign`."""
    return copysign_impl(BINARY32.coerce(magnitude), BINARY32.coerce(sign_source), BINARY32)


def nextafterf(from_number: Any, toward_number: Any):
    """Single precision :func:`nextafter`."""
    return nextafter_impl(BINARY32.coerce(from_number), BINARY32.coerce(toward_number), BINARY32)


def nexttowardf(from_number: Any, toward_number: Any):
    """Single precision :func:`nexttoward`."""
    return nextafterf(from_number, toward_number)
