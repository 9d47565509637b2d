"""
Small numeric helpers that round out the C math surface.

These are plain formulas rather than bit manipulation. Like the core they
never raise for numeric input: domain errors give NaN and poles give an
infinity.
"""

import math

import numpy as np

RADIANS_PER_DEGREE = math.pi / 180


def _to_single(value: float) -> np.float32:
    # Out of binary32 range rounds to infinity silently
    with np.errstate(over="ignore"):
        return np.float32(value)


def cbrt(n: float) -> float:
    """
    Real cube root, sign preserving.

    ±0 and ±inf are returned unchanged. A single Newton step refines the
    exp/log estimate.
    """
    value = float(n)
    if value == 0 or math.isinf(value):
        return value

    neg = value < 0
    if neg:
        value = -value

    ret = math.exp(math.log(value) / 3)
    ret = ((value / (ret * ret)) + (2 * ret)) / 3

    return -ret if neg else ret


def root(n: float, base: float) -> float:
    """
    The ``base``-th root of ``n``, i.e. ``n ** (1 / base)``.

    NaN when ``base < 1``, when ``n`` is negative and even, or when a
    negative ``n`` has no real root for the given base.
    """
    if base < 1 or (n % 2 == 0 and n < 0):
        return math.nan
    try:
        return math.pow(n, 1 / base)
    except ValueError:
        return math.nan


def hypot(x: float, y: float) -> float:
    """Euclidean distance ``sqrt(x*x + y*y)``, without rescaling."""
    return math.sqrt(x * x + y * y)


def hypotf(x: float, y: float) -> np.float32:
    """Single precision :func:`hypot`, computed in double and rounded once."""
    return _to_single(hypot(float(x), float(y)))


def log1p(x: float) -> float:
    """
    ``log(1 + x)``, using the series ``x - x**2/2`` near zero.

    Returns -inf at ``x == -1`` and NaN below it.
    """
    if abs(x) > 1e-4:
        with np.errstate(divide="ignore", invalid="ignore"):
            return float(np.log(1.0 + x))
    return (-0.5 * x + 1.0) * x


def deg(x: float) -> float:
    """Radians to degrees."""
    return x / RADIANS_PER_DEGREE


def rad(x: float) -> float:
    """Degrees to radians."""
    return x * RADIANS_PER_DEGREE


def degf(x: float) -> np.float32:
    return _to_single(deg(float(x)))


def radf(x: float) -> np.float32:
    return _to_single(rad(float(x)))


def rep(t: float, length: float) -> float:
    """
    Wrap ``t`` into ``[0, length)`` (or ``(length, 0]`` for negative length).

    Unlike ``%`` this follows floor semantics for floats and returns NaN
    instead of raising for a zero length.
    """
    with np.errstate(divide="ignore", invalid="ignore"):
        t = np.float64(t)
        return float(t - np.floor(t / length) * length)


def repf(t: float, length: float) -> np.float32:
    """Single precision :func:`rep`."""
    return _to_single(rep(float(t), float(length)))


def ult(m: int, n: int, bits: int = 32) -> bool:
    """Unsigned ``m < n`` for integers given in two's complement."""
    mask = (1 << bits) - 1
    return (m & mask) < (n & mask)
