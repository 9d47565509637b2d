# MIT License
# See LICENSE file in the project root for full license text.
"""
fpmath: C standard floating-point manipulation functions for Python.

Bit-exact implementations of the <math.h> functions Python's ``math`` module
leaves out (``ilogb``, ``logb``, ``scalbn``, ``significand``, ``fpclassify``,
``signbit``...), for double precision (Python ``float``) and, with an ``f``
suffix, single precision (``numpy.float32``). Special values never raise:
NaN, signed infinities and signed zeros are returned in-band exactly as C
specifies.
"""

import logging

__version__ = "0.1.0"
__author__ = "fpmath Team"
__email__ = "fpmath@example.com"

logging.getLogger(__name__).addHandler(logging.NullHandler())

from .core import (
    # Formats and bit access
    FloatFormat,
    BINARY64,
    BINARY32,
    double_to_bits,
    bits_to_double,
    single_to_bits,
    bits_to_single,
    # Limits
    DBL_EXP_BIAS,
    DBL_MANT_BITS,
    DBL_MAX,
    DBL_MIN,
    DBL_DENORM_MIN,
    DBL_DENORM_MAX,
    DBL_EPSILON,
    FLT_EXP_BIAS,
    FLT_MANT_BITS,
    FLT_MAX,
    FLT_MIN,
    FLT_DENORM_MIN,
    FLT_DENORM_MAX,
    FLT_EPSILON,
    # Configuration
    PrecisionConfig,
    PrecisionMode,
    precision_context,
    # Classification
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
    # Decomposition
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
    # Scaling
    scalbln,
    scalbn,
    ldexp,
    scalblnf,
    scalbnf,
    ldexpf,
    # Sign and adjacency
    copysign,
    nextafter,
    nexttoward,
    copysignf,
    nextafterf,
    nexttowardf,
)

from .utils import cbrt, root, hypot, hypotf, log1p, deg, rad, degf, radf

__all__ = [
    # Version info
    "__version__",
    "__author__",
    "__email__",
    # Formats and bit access
    "FloatFormat",
    "BINARY64",
    "BINARY32",
    "double_to_bits",
    "bits_to_double",
    "single_to_bits",
    "bits_to_single",
    # Limits
    "DBL_EXP_BIAS",
    "DBL_MANT_BITS",
    "DBL_MAX",
    "DBL_MIN",
    "DBL_DENORM_MIN",
    "DBL_DENORM_MAX",
    "DBL_EPSILON",
    "FLT_EXP_BIAS",
    "FLT_MANT_BITS",
    "FLT_MAX",
    "FLT_MIN",
    "FLT_DENORM_MIN",
    "FLT_DENORM_MAX",
    "FLT_EPSILON",
    # Configuration
    "PrecisionConfig",
    "PrecisionMode",
    "precision_context",
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
    # Numeric helpers
    "cbrt",
    "root",
    "hypot",
    "hypotf",
    "log1p",
    "deg",
    "rad",
    "degf",
    "radf",
]
