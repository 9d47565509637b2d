"""Unit tests for scalbln, scalbn and ldexp."""

import math

import numpy as np
import pytest

from fpmath.core import (
    DBL_DENORM_MIN,
    DBL_MAX,
    DBL_MIN,
    FLT_DENORM_MIN,
    FLT_MAX,
    double_to_bits,
    ldexp,
    ldexpf,
    scalbln,
    scalblnf,
    scalbn,
    scalbnf,
    signbit,
)
from fpmath.core.scaling import INT_MAX, INT_MIN, LONG_MAX, LONG_MIN


class TestBoundaries:
    """Extreme exponents saturate to signed infinity or signed zero."""

    def test_int_extremes(self):
        assert scalbn(1.0, INT_MAX) == math.inf
        assert scalbn(-1.0, INT_MAX) == -math.inf

        pos = scalbn(1.0, INT_MIN)
        neg = scalbn(-1.0, INT_MIN)
        assert pos == 0.0 and signbit(pos) == 0
        assert neg == 0.0 and signbit(neg) == 1

    def test_long_extremes(self):
        assert scalbln(2.5, LONG_MAX) == math.inf
        assert signbit(scalbln(-2.5, LONG_MIN)) == 1
        assert scalbln(1.0, 2 ** 40) == math.inf
        assert scalbln(1.0, -(2 ** 40)) == 0.0

    def test_overflow_threshold(self):
        assert scalbn(1.0, 1023) == 2.0 ** 1023
        assert scalbn(1.0, 1024) == math.inf
        assert scalbn(DBL_MAX, 0) == DBL_MAX
        assert scalbn(DBL_MAX, 1) == math.inf
        assert scalbn(0.75, 1024) == 1.5 * 2.0 ** 1023
        assert scalbn(-0.75, 1025) == -math.inf

    def test_subnormal_results(self):
        assert scalbn(1.0, -1022) == DBL_MIN
        assert scalbn(1.0, -1074) == DBL_DENORM_MIN
        assert scalbn(3.0, -1074) == 3 * DBL_DENORM_MIN

    def test_subnormal_rounding_is_to_nearest_even(self):
        # Exactly half the smallest subnormal rounds to zero
        assert scalbn(1.0, -1075) == 0.0
        # Above half rounds up
        assert scalbn(1.5, -1075) == DBL_DENORM_MIN
        # 1.5 ulp rounds to even (2 ulp)
        assert scalbn(3.0, -1075) == 2 * DBL_DENORM_MIN

    def test_deep_underflow_keeps_sign(self):
        result = scalbn(-1.0, -1200)
        assert result == 0.0 and signbit(result) == 1

    def test_subnormal_inputs(self):
        assert scalbn(DBL_DENORM_MIN, 1074) == 1.0
        assert scalbn(DBL_DENORM_MIN, 2000) == 2.0 ** 926
        assert scalbn(DBL_DENORM_MIN, 3000) == math.inf
        assert scalbn(DBL_DENORM_MIN * 4, -1) == DBL_DENORM_MIN * 2
        assert scalbn(DBL_DENORM_MIN, -1) == 0.0


class TestPassThrough:
    """Special inputs are returned unchanged."""

    @pytest.mark.parametrize("n", [INT_MIN, -1, 0, 1, INT_MAX])
    def test_specials(self, n):
        assert scalbn(math.inf, n) == math.inf
        assert scalbn(-math.inf, n) == -math.inf
        assert math.isnan(scalbn(math.nan, n))
        assert double_to_bits(scalbn(0.0, n)) == 0
        assert double_to_bits(scalbn(-0.0, n)) == 1 << 63


class TestAgreement:
    """scalbn agrees with math.ldexp wherever the latter does not raise."""

    @pytest.mark.parametrize("value", [1.0, -1.7, 0.1, 1e300, 3e-310, DBL_MIN, DBL_MAX])
    @pytest.mark.parametrize("n", [-2200, -1100, -1074, -60, -1, 0, 1, 60, 1023, 2200])
    def test_matches_math_ldexp(self, value, n):
        try:
            expected = math.ldexp(value, n)
        except OverflowError:
            expected = math.copysign(math.inf, value)
        assert double_to_bits(scalbn(value, n)) == double_to_bits(expected)

    def test_ldexp_delegates(self):
        assert ldexp(0.8, 4) == 12.8
        assert ldexp(1.0, INT_MAX) == scalbn(1.0, INT_MAX)


class TestArguments:
    """Exponent must be an integer of the declared C width."""

    def test_non_integer_exponent(self):
        with pytest.raises(TypeError):
            scalbn(1.0, 1.5)
        with pytest.raises(TypeError):
            scalbln(1.0, "3")

    def test_numpy_integer_exponent(self):
        assert scalbn(1.0, np.int64(3)) == 8.0

    def test_int_width(self):
        with pytest.raises(OverflowError):
            scalbn(1.0, INT_MAX + 1)
        with pytest.raises(OverflowError):
            ldexp(1.0, INT_MIN - 1)
        # Same exponent is fine for the long variant
        assert scalbln(1.0, INT_MAX + 1) == math.inf

    def test_long_width(self):
        with pytest.raises(OverflowError):
            scalbln(1.0, LONG_MAX + 1)
        with pytest.raises(OverflowError):
            scalblnf(1.0, LONG_MIN - 1)


class TestSinglePrecision:
    """The f variants work in binary32."""

    def test_boundaries(self):
        assert scalbnf(np.float32(1.0), 127) == np.float32(2.0 ** 127)
        assert scalbnf(np.float32(1.0), 128) == np.inf
        assert scalbnf(np.float32(-1.0), INT_MAX) == -np.inf
        assert signbit(scalbnf(np.float32(-1.0), INT_MIN)) == 1
        assert scalbnf(FLT_MAX, 1) == np.inf

    def test_subnormals(self):
        assert scalbnf(np.float32(1.0), -149) == FLT_DENORM_MIN
        assert scalbnf(np.float32(1.0), -150) == 0
        assert scalbnf(FLT_DENORM_MIN, 149) == np.float32(1.0)
        assert scalbnf(FLT_DENORM_MIN, 300) == np.inf

    def test_result_type(self):
        assert isinstance(scalbnf(1.0, 3), np.float32)
        assert isinstance(ldexpf(0.5, 1), np.float32)
        assert ldexpf(np.float32(0.8), 4) == np.float32(12.8)

    def test_long_variant(self):
        assert scalblnf(np.float32(3.0), 2 ** 40) == np.inf
        assert scalblnf(np.float32(3.0), 2) == np.float32(12.0)
