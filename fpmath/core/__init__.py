"""Core IEEE-754 formats, classification and bit-level manipulation."""

from .formats import (
    FloatFormat,
    BINARY64,
    BINARY32,
    format_for_dtype,
    double_to_bits,
    bits_to_double,
    single_to_bits,
    bits_to_single,
    DBL_EXP_BIAS,
    DBL_EXP_BITS,
    DBL_EXP_MAX,
    DBL_EXP_MIN,
    DBL_MANT_BITS,
    DBL_SGN_MASK,
    DBL_SGN_CLR_MASK,
    DBL_EXP_MASK,
    DBL_EXP_CLR_MASK,
    DBL_MANT_MASK,
    DBL_MANT_CLR_MASK,
    DBL_MAX,
    DBL_MIN,
    DBL_DENORM_MIN,
    DBL_DENORM_MAX,
    DBL_EPSILON,
    FLT_EXP_BIAS,
    FLT_EXP_BITS,
    FLT_EXP_MAX,
    FLT_EXP_MIN,
    FLT_MANT_BITS,
    FLT_SGN_MASK,
    FLT_SGN_CLR_MASK,
    FLT_EXP_MASK,
    FLT_EXP_CLR_MASK,
    FLT_MANT_MASK,
    FLT_MANT_CLR_MASK,
    FLT_MAX,
    FLT_MIN,
    FLT_DENORM_MIN,
    FLT_DENORM_MAX,
    FLT_EPSILON,
)

from .precision_config import PrecisionConfig, PrecisionMode, precision_context, resolve_format

from .classify import (
    FloatCategory,
    FP_NAN,
    FP_INFINITE,
    FP_ZERO,
    FP_SUBNORMAL,
    FP_NORMAL,
    fpclassify,
    isfinite,
    isinf,
    isnan,
    isnormal,
    signbit,
    isunordered,
)

from .decompose import (
    FrexpResult,
    FP_ILOGB0,
    FP_ILOGBINF,
    FP_ILOGBNAN,
    frexp,
    ilogb,
    logb,
    significand,
    exponent,
    mantissa,
    frexpf,
    ilogbf,
    logbf,
    significandf,
    exponentf,
    mantissaf,
)

from .scaling import scalbln, scalbn, ldexp, scalblnf, scalbnf, ldexpf

from .adjacency import (
    copysign,
    nextafter,
    nexttoward,
    copysignf,
    nextafterf,
    nexttowardf,
)

__all__ = [
    # Formats and bit access
    "FloatFormat",
    "BINARY64",
    "BINARY32",
    "format_for_dtype",
    "double_to_bits",
    "bits_to_double",
    "single_to_bits",
    "bits_to_single",

    # Limits and masks
    "DBL_EXP_BIAS",
    "DBL_EXP_BITS",
    "DBL_EXP_MAX",
    "DBL_EXP_MIN",
    "DBL_MANT_BITS",
    "DBL_SGN_MASK",
    "DBL_SGN_CLR_MASK",
    "DBL_EXP_MASK",
    "DBL_EXP_CLR_MASK",
    "DBL_MANT_MASK",
    "DBL_MANT_CLR_MASK",
    "DBL_MAX",
    "DBL_MIN",
    "DBL_DENORM_MIN",
    "DBL_DENORM_MAX",
    "DBL_EPSILON",
    "FLT_EXP_BIAS",
    "FLT_EXP_BITS",
    "FLT_EXP_MAX",
    "FLT_EXP_MIN",
    "FLT_MANT_BITS",
    "FLT_SGN_MASK",
    "FLT_SGN_CLR_MASK",
    "FLT_EXP_MASK",
    "FLT_EXP_CLR_MASK",
    "FLT_MANT_MASK",
    "FLT_MANT_CLR_MASK",
    "FLT_MAX",
    "FLT_MIN",
    "FLT_DENORM_MIN",
    "FLT_DENORM_MAX",
    "FLT_EPSILON",

    # Configuration
    "PrecisionConfig",
    "PrecisionMode",
    "precision_context",
    "resolve_format",

    # Classification
    "FloatCategory",
    "FP_NAN",
    "FP_INFINITE",
    "FP_ZERO",
    "FP_SUBNORMAL",
    "FP_NORMAL",
    "fpclassify",
    "isfinite",
    "isinf",
    "isnan",
    "isnormal",
    "signbit",
    "isunordered",

    # Decomposition
    "FrexpResult",
    "FP_ILOGB0",
    "FP_ILOGBINF",
    "FP_ILOGBNAN",
    "frexp",
    "ilogb",
    "logb",
    "significand",
    "exponent",
    "mantissa",
    "frexpf",
    "ilogbf",
    "logbf",
    "significandf",
    "exponentf",
    "mantissaf",

    # Scaling
    "scalbln",
    "scalbn",
    "ldexp",
    "scalblnf",
    "scalbnf",
    "ldexpf",

    # Sign and adjacency
    "copysign",
    "nextafter",
    "nexttoward",
    "copysignf",
    "nextafterf",
    "nexttowardf",
]
