"""
IEEE-754 binary interchange formats and raw bit access.

This module is the only place where a floating-point value is reinterpreted
as an integer (and back). Everything else in ``fpmath`` works on the plain
Python ``int`` bit patterns returned by :meth:`FloatFormat.to_bits`.

Double precision values are Python ``float`` objects. Single precision values
are ``numpy.float32`` scalars, since Python has no native 32-bit float.
"""

from dataclasses import dataclass, field
from numbers import Real
from typing import Any, Type, Union

import numpy as np


Scalar = Union[float, np.floating]


@dataclass(frozen=True)
class FloatFormat:
    """
    Layout of one IEEE-754 binary format.

    Only the field widths are given; masks, limits and the scaling constants
    used by the decomposition and scaling functions are derived once at
    construction time.

    Attributes:
        name: Short name ('binary64', 'binary32')
        dtype: NumPy floating type holding values of this format
        uint: NumPy unsigned integer type of the same width
        native: Callable returning the public scalar type for this format
        total_bits: Width of the whole encoding
        exponent_bits: Width of the biased exponent field
        mantissa_bits: Width of the stored mantissa field
    """

    name: str
    dtype: Type[np.floating]
    uint: Type[np.unsignedinteger]
    native: Any
    total_bits: int
    exponent_bits: int
    mantissa_bits: int

    bias: int = field(init=False)
    all_mask: int = field(init=False)
    sign_mask: int = field(init=False)
    exponent_mask: int = field(init=False)
    mantissa_mask: int = field(init=False)
    sign_clear_mask: int = field(init=False)
    exponent_clear_mask: int = field(init=False)
    mantissa_clear_mask: int = field(init=False)
    exponent_field_max: int = field(init=False)
    min_exponent: int = field(init=False)
    max_exponent: int = field(init=False)
    min_normal_bits: int = field(init=False)
    rescale_shift: int = field(init=False)

    # Named values, in the format's scalar type
    zero: Scalar = field(init=False, repr=False, compare=False)
    inf: Scalar = field(init=False, repr=False, compare=False)
    nan: Scalar = field(init=False, repr=False, compare=False)
    max_value: Scalar = field(init=False, repr=False, compare=False)
    min_normal: Scalar = field(init=False, repr=False, compare=False)
    denorm_min: Scalar = field(init=False, repr=False, compare=False)
    denorm_max: Scalar = field(init=False, repr=False, compare=False)
    epsilon: Scalar = field(init=False, repr=False, compare=False)
    scale_up: Scalar = field(init=False, repr=False, compare=False)
    scale_down: Scalar = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        set_ = object.__setattr__
        bias = (1 << (self.exponent_bits - 1)) - 1
        all_mask = (1 << self.total_bits) - 1
        sign_mask = 1 << (self.total_bits - 1)
        mantissa_mask = (1 << self.mantissa_bits) - 1
        exponent_mask = ((1 << self.exponent_bits) - 1) << self.mantissa_bits

        set_(self, "bias", bias)
        set_(self, "all_mask", all_mask)
        set_(self, "sign_mask", sign_mask)
        set_(self, "exponent_mask", exponent_mask)
        set_(self, "mantissa_mask", mantissa_mask)
        set_(self, "sign_clear_mask", all_mask ^ sign_mask)
        set_(self, "exponent_clear_mask", sign_mask | mantissa_mask)
        set_(self, "mantissa_clear_mask", sign_mask | exponent_mask)
        set_(self, "exponent_field_max", (1 << self.exponent_bits) - 1)
        set_(self, "min_exponent", 1 - bias)
        set_(self, "max_exponent", bias)
        set_(self, "min_normal_bits", 1 << self.mantissa_bits)
        # Enough headroom to lift any subnormal into the normal range:
        # 54 for binary64, 25 for binary32.
        set_(self, "rescale_shift", self.mantissa_bits + 2)

        m = self.mantissa_bits
        set_(self, "zero", self.from_bits(0))
        set_(self, "inf", self.from_bits(exponent_mask))
        # Default quiet NaN: positive sign, top mantissa bit set
        set_(self, "nan", self.from_bits(exponent_mask | (1 << (m - 1))))
        set_(self, "max_value", self.from_bits(exponent_mask - 1))
        set_(self, "min_normal", self.from_bits(1 << m))
        set_(self, "denorm_min", self.from_bits(1))
        set_(self, "denorm_max", self.from_bits(mantissa_mask))
        set_(self, "epsilon", self.from_bits((bias - m) << m))
        set_(self, "scale_up", self.from_bits((bias + self.rescale_shift) << m))
        set_(self, "scale_down", self.from_bits((bias - self.rescale_shift) << m))

    # ------------------------------------------------------------------
    # Bit reinterpretation
    # ------------------------------------------------------------------

    def coerce(self, value: Any) -> Scalar:
        """
        Convert a real number to this format's scalar type.

        Finite values outside the format's range become infinities, the way
        a C conversion would; no warning is emitted.

        Raises:
            TypeError: If value is not a real number
        """
        if isinstance(value, self.dtype):
            return self._box(value)
        if not isinstance(value, (Real, np.floating, np.integer)):
            raise TypeError(f"Unsupported type for {self.name}: {type(value)}")
        try:
            with np.errstate(over="ignore"):
                return self._box(self.dtype(value))
        except OverflowError:
            # Python ints beyond the double range
            return self.inf if value > 0 else -self.inf

    def to_bits(self, value: Any) -> int:
        """Return the raw bit pattern of ``value`` as a non-negative int."""
        value = self.coerce(value)
        if not isinstance(value, self.dtype):
            value = self.dtype(value)
        return int(value.view(self.uint))

    def from_bits(self, bits: int) -> Scalar:
        """
        Build a value from a raw bit pattern.

        The pattern is truncated to the format width, so signed views such
        as ``-1`` (all bits set) are accepted.
        """
        return self._box(self.uint(int(bits) & self.all_mask).view(self.dtype))

    def _box(self, value: np.floating) -> Scalar:
        # NumPy scalar -> public scalar type, without a numeric conversion
        # when they are the same type (keeps signaling NaNs intact).
        if self.native is self.dtype:
            return value
        return self.native(value)

    # ------------------------------------------------------------------
    # Field helpers
    # ------------------------------------------------------------------

    def sign_field(self, bits: int) -> int:
        """Sign bit (0 or 1) of a bit pattern."""
        return (bits >> (self.total_bits - 1)) & 1

    def exponent_field(self, bits: int) -> int:
        """Biased exponent field of a bit pattern."""
        return (bits & self.exponent_mask) >> self.mantissa_bits

    def compose(self, sign: int, exponent_field: int, mantissa: int) -> Scalar:
        """Assemble a value from sign, biased exponent and mantissa fields."""
        bits = (
            ((sign & 1) << (self.total_bits - 1))
            | ((exponent_field & self.exponent_field_max) << self.mantissa_bits)
            | (mantissa & self.mantissa_mask)
        )
        return self.from_bits(bits)

    def __repr__(self) -> str:
        return f"FloatFormat({self.name})"


BINARY64 = FloatFormat(
    name="binary64",
    dtype=np.float64,
    uint=np.uint64,
    native=float,
    total_bits=64,
    exponent_bits=11,
    mantissa_bits=52,
)

BINARY32 = FloatFormat(
    name="binary32",
    dtype=np.float32,
    uint=np.uint32,
    native=np.float32,
    total_bits=32,
    exponent_bits=8,
    mantissa_bits=23,
)


def format_for_dtype(dtype: Any) -> FloatFormat:
    """
    Map a NumPy dtype (or scalar type) to its format.

    Raises:
        TypeError: If the dtype is not float32 or float64
    """
    dt = np.dtype(dtype)
    if dt == np.float64:
        return BINARY64
    if dt == np.float32:
        return BINARY32
    raise TypeError(f"Unsupported floating type: {dt}")


# Scalar accessors for each precision

def double_to_bits(value: Any) -> int:
    return BINARY64.to_bits(value)


def bits_to_double(bits: int) -> float:
    return BINARY64.from_bits(bits)


def single_to_bits(value: Any) -> int:
    return BINARY32.to_bits(value)


def bits_to_single(bits: int) -> np.float32:
    return BINARY32.from_bits(bits)


# C-style limit constants, binary64
DBL_EXP_BIAS = BINARY64.bias
DBL_EXP_BITS = BINARY64.exponent_bits
DBL_EXP_MAX = BINARY64.max_exponent
DBL_EXP_MIN = BINARY64.min_exponent
DBL_MANT_BITS = BINARY64.mantissa_bits
DBL_SGN_MASK = BINARY64.sign_mask
DBL_SGN_CLR_MASK = BINARY64.sign_clear_mask
DBL_EXP_MASK = BINARY64.exponent_mask
DBL_EXP_CLR_MASK = BINARY64.exponent_clear_mask
DBL_MANT_MASK = BINARY64.mantissa_mask
DBL_MANT_CLR_MASK = BINARY64.mantissa_clear_mask
DBL_MAX = BINARY64.max_value
DBL_MIN = BINARY64.min_normal
DBL_DENORM_MIN = BINARY64.denorm_min
DBL_DENORM_MAX = BINARY64.denorm_max
DBL_EPSILON = BINARY64.epsilon

# binary32
FLT_EXP_BIAS = BINARY32.bias
FLT_EXP_BITS = BINARY32.exponent_bits
FLT_EXP_MAX = BINARY32.max_exponent
FLT_EXP_MIN = BINARY32.min_exponent
FLT_MANT_BITS = BINARY32.mantissa_bits
FLT_SGN_MASK = BINARY32.sign_mask
FLT_SGN_CLR_MASK = BINARY32.sign_clear_mask
FLT_EXP_MASK = BINARY32.exponent_mask
FLT_EXP_CLR_MASK = BINARY32.exponent_clear_mask
FLT_MANT_MASK = BINARY32.mantissa_mask
FLT_MANT_CLR_MASK = BINARY32.mantissa_clear_mask
FLT_MAX = BINARY32.max_value
FLT_MIN = BINARY32.min_normal
FLT_DENORM_MIN = BINARY32.denorm_min
FLT_DENORM_MAX = BINARY32.denorm_max
FLT_EPSILON = BINARY32.epsilon
