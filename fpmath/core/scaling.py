"""
Scaling by integral powers of two.

``scalbln`` does the work; ``scalbn`` and ``ldexp`` only differ in the width
of the exponent argument they accept (a C ``int`` rather than a ``long``).
The power of two is never built as a value: the exponent field is adjusted
directly, so huge exponents cannot overflow an intermediate.
"""

import operator
from typing import Any

from .adjacency import copysign_impl
from .formats import BINARY32, BINARY64, FloatFormat, Scalar

# Beyond this magnitude every finite input overflows or underflows in all
# supported formats, so the result is decided without field arithmetic.
EXPONENT_LIMIT = 50000

INT_MIN, INT_MAX = -(1 << 31), (1 << 31) - 1
LONG_MIN, LONG_MAX = -(1 << 63), (1 << 63) - 1


def _check_exponent(exponent: Any, low: int, high: int, ctype: str) -> int:
    n = operator.index(exponent)
    if not low <= n <= high:
        raise OverflowError(f"exponent {n} out of range for a C {ctype}")
    return n


def scalbln_impl(number: Scalar, exponent: int, fmt: FloatFormat) -> Scalar:
    """
    Compute ``number * 2**exponent`` in the given format.

    Infinities, NaN and zeros are returned unchanged. Overflow gives a
    signed infinity and underflow a signed zero. Subnormal results are
    rounded once, to nearest even.
    """
    bits = fmt.to_bits(number)
    exp = fmt.exponent_field(bits)
    shift = fmt.rescale_shift

    if exp == fmt.exponent_field_max:
        return number
    if exp == 0:
        if (bits & fmt.mantissa_mask) == 0:
            return number
        # Subnormal: gain exponent range, remember the shift in exp.
        number = number * fmt.scale_up
        bits = fmt.to_bits(number)
        exp = fmt.exponent_field(bits) - shift

    if exponent < -EXPONENT_LIMIT:
        return copysign_impl(fmt.zero, number, fmt)
    if exponent > EXPONENT_LIMIT or exp + exponent > fmt.exponent_field_max - 1:
        return copysign_impl(fmt.inf, number, fmt)

    exp += exponent
    if exp > 0:
        return fmt.compose(fmt.sign_field(bits), exp, bits & fmt.mantissa_mask)
    if exp <= -shift:
        return copysign_impl(fmt.zero, number, fmt)

    # Subnormal result: encode shift higher, then let one multiplication
    # do the rounding.
    exp += shift
    number = fmt.compose(fmt.sign_field(bits), exp, bits & fmt.mantissa_mask)
    return number * fmt.scale_down


# ----------------------------------------------------------------------
# binary64
# ----------------------------------------------------------------------

def scalbln(number: Any, exponent: int) -> float:
    """
    Multiply a double by ``2**exponent`` (64-bit exponent).

    Raises:
        TypeError: If exponent is not an integer
        OverflowError: If exponent does not fit in a signed 64-bit integer
    """
    n = _check_exponent(exponent, LONG_MIN, LONG_MAX, "long")
    return scalbln_impl(BINARY64.coerce(number), n, BINARY64)


def scalbn(number: Any, exponent: int) -> float:
    """
    Multiply a double by ``2**exponent`` (32-bit exponent).

    Examples:
        >>> scalbn(1.0, 2147483647)
        inf
        >>> scalbn(-1.0, -2147483648)
        -0.0
    """
    n = _check_exponent(exponent, INT_MIN, INT_MAX, "int")
    return scalbln_impl(BINARY64.coerce(number), n, BINARY64)


def ldexp(number: Any, exponent: int) -> float:
    """Multiply a double by ``2**exponent``; inverse of :func:`frexp`."""
    return scalbn(number, exponent)


# ----------------------------------------------------------------------
# binary32
# ----------------------------------------------------------------------

def scalblnf(number: Any, exponent: int):
    """Single precision :func:`scalbln`."""
    n = _check_exponent(exponent, LONG_MIN, LONG_MAX, "long")
    return scalbln_impl(BINARY32.coerce(number), n, BINARY32)


def scalbnf(number: Any, exponent: int):
    """Single precision :func:`scalbn`."""
    n = _check_exponent(exponent, INT_MIN, INT_MAX, "int")
    return scalbln_impl(BINARY32.coerce(number), n, BINARY32)


def ldexpf(number: Any, exponent: int):
    """Single precision :func:`ldexp`."""
    return scalbnf(number, exponent)
