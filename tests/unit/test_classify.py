"""Unit tests for fpclassify and the classification predicates."""

import math

import numpy as np
import pytest

from fpmath.core import (
    DBL_DENORM_MAX,
    DBL_DENORM_MIN,
    DBL_MAX,
    DBL_MIN,
    FLT_DENORM_MIN,
    FLT_MIN,
    FP_INFINITE,
    FP_NAN,
    FP_NORMAL,
    FP_SUBNORMAL,
    FP_ZERO,
    FloatCategory,
    bits_to_double,
    bits_to_single,
    copysign,
    fpclassify,
    isfinite,
    isinf,
    isnan,
    isnormal,
    isunordered,
    precision_context,
    signbit,
)


DOUBLE_CASES = [
    (0.0, FP_ZERO),
    (-0.0, FP_ZERO),
    (DBL_DENORM_MIN, FP_SUBNORMAL),
    (-DBL_DENORM_MAX, FP_SUBNORMAL),
    (DBL_MIN, FP_NORMAL),
    (-1.0, FP_NORMAL),
    (DBL_MAX, FP_NORMAL),
    (math.inf, FP_INFINITE),
    (-math.inf, FP_INFINITE),
    (math.nan, FP_NAN),
    (bits_to_double(0xFFF0000000000001), FP_NAN),
]

SINGLE_CASES = [
    (np.float32(0.0), FP_ZERO),
    (np.float32(-0.0), FP_ZERO),
    (FLT_DENORM_MIN, FP_SUBNORMAL),
    (np.float32(1e-40), FP_SUBNORMAL),
    (FLT_MIN, FP_NORMAL),
    (np.float32(3.5), FP_NORMAL),
    (np.float32(np.inf), FP_INFINITE),
    (bits_to_single(0x7FC00000), FP_NAN),
    (bits_to_single(0xFF800001), FP_NAN),
]


class TestFpclassify:
    """Category of representative values."""

    @pytest.mark.parametrize("value,expected", DOUBLE_CASES)
    def test_double(self, value, expected):
        assert fpclassify(value) is expected

    @pytest.mark.parametrize("value,expected", SINGLE_CASES)
    def test_single(self, value, expected):
        assert fpclassify(value) is expected

    def test_category_values(self):
        assert [c.value for c in FloatCategory] == [0, 1, 2, 3, 4]
        assert str(FP_SUBNORMAL) == "SUBNORMAL"

    def test_integers_are_classified(self):
        assert fpclassify(0) is FP_ZERO
        assert fpclassify(7) is FP_NORMAL
        assert fpclassify(np.int32(-3)) is FP_NORMAL

    def test_float16_widens_to_single(self):
        # Subnormal in half precision, normal once widened
        assert fpclassify(np.float16(1e-5)) is FP_NORMAL


class TestPredicates:
    """Narrow predicates agree with fpclassify."""

    @pytest.mark.parametrize("value,category", DOUBLE_CASES + SINGLE_CASES)
    def test_agree_with_fpclassify(self, value, category):
        assert isnan(value) == (category is FP_NAN)
        assert isinf(value) == (category is FP_INFINITE)
        assert isnormal(value) == (category is FP_NORMAL)
        assert isfinite(value) == (category not in (FP_NAN, FP_INFINITE))

    def test_match_math_module(self):
        for value in (0.0, 1.5, -DBL_MAX, math.inf, -math.inf, math.nan):
            assert isnan(value) == math.isnan(value)
            assert isinf(value) == math.isinf(value)
            assert isfinite(value) == math.isfinite(value)

    def test_isunordered(self):
        assert isunordered(math.nan, 1.0)
        assert isunordered(1.0, math.nan)
        assert not isunordered(-math.inf, 0.0)


class TestSignbit:
    """signbit reads the raw sign bit."""

    def test_zeros(self):
        assert signbit(0.0) == 0
        assert signbit(-0.0) == 1
        assert signbit(np.float32(-0.0)) == 1

    def test_ordinary_values(self):
        assert signbit(-2.5) == 1
        assert signbit(2.5) == 0
        assert signbit(-math.inf) == 1

    def test_nan_sign(self):
        assert signbit(bits_to_double(0x7FF8000000000000)) == 0
        assert signbit(bits_to_double(0xFFF8000000000000)) == 1
        assert signbit(copysign(math.nan, -1.0)) == 1
        assert signbit(bits_to_single(0xFFC00000)) == 1


class TestDefaultPrecision:
    """Plain Python numbers follow the configured precision."""

    def test_python_float_is_double_by_default(self):
        assert isnormal(1e-40)
        assert fpclassify(1e-310) is FP_SUBNORMAL

    def test_python_float_in_single_context(self):
        with precision_context("float32"):
            assert fpclassify(1e-40) is FP_SUBNORMAL
            assert fpclassify(1e-50) is FP_ZERO
            assert fpclassify(1e39) is FP_INFINITE
            assert not isnormal(1e-40)
        assert isnormal(1e-40)

    def test_numpy_scalars_ignore_context(self):
        with precision_context("float32"):
            assert fpclassify(np.float64(1e-40)) is FP_NORMAL
        assert fpclassify(np.float32(1e-40)) is FP_SUBNORMAL


class TestInvalidInput:
    """Non-real arguments raise TypeError."""

    @pytest.mark.parametrize("value", ["1.0", 1j, None, [1.0]])
    def test_rejected(self, value):
        with pytest.raises(TypeError):
            fpclassify(value)
        with pytest.raises(TypeError):
            signbit(value)
