"""
Global precision configuration for fpmath.

The type-generic predicates (``fpclassify``, ``isnan``, ``signbit``...) pick
the IEEE format from the argument's type, like the C macros do. NumPy scalars
carry their own width; plain Python numbers have none, so they are read in
the default precision managed here. By default this is binary64, which is
what a Python ``float`` really is.
"""

import logging
from enum import Enum
from typing import Any, Type, Union

import numpy as np

from .formats import BINARY32, BINARY64, FloatFormat, Scalar

logger = logging.getLogger(__name__)


class PrecisionMode(Enum):
    """Supported precision modes."""
    FLOAT32 = np.float32
    FLOAT64 = np.float64

    @property
    def numpy_dtype(self):
        """Get the numpy dtype for this precision."""
        return self.value

    @property
    def bits(self) -> int:
        """Get the number of bits for this precision."""
        return np.dtype(self.value).itemsize * 8

    @property
    def format(self) -> FloatFormat:
        """Get the IEEE format descriptor for this precision."""
        return BINARY32 if self is PrecisionMode.FLOAT32 else BINARY64


_MODE_NAMES = {
    'float32': PrecisionMode.FLOAT32,
    'single': PrecisionMode.FLOAT32,
    'binary32': PrecisionMode.FLOAT32,
    'float64': PrecisionMode.FLOAT64,
    'double': PrecisionMode.FLOAT64,
    'binary64': PrecisionMode.FLOAT64,
}


class PrecisionConfig:
    """
    Global precision configuration.

    Only affects how plain Python numbers are interpreted by the
    type-generic functions. The explicitly typed functions (``frexp`` vs
    ``frexpf`` and so on) never consult it.
    """

    _default_mode: PrecisionMode = PrecisionMode.FLOAT64

    @classmethod
    def set_precision(cls, mode: Union[PrecisionMode, str]) -> None:
        """
        Set the default precision mode.

        Args:
            mode: PrecisionMode enum or string ('float32', 'float64',
                'single', 'double')

        Raises:
            ValueError: If mode is not supported
        """
        if isinstance(mode, str):
            if mode not in _MODE_NAMES:
                raise ValueError(f"Unsupported precision mode: {mode}")
            mode = _MODE_NAMES[mode]

        if not isinstance(mode, PrecisionMode):
            raise ValueError(f"Invalid precision mode: {mode}")

        if mode is not cls._default_mode:
            logger.debug("Default precision changed: %s -> %s",
                         cls._default_mode.name, mode.name)
        cls._default_mode = mode

    @classmethod
    def get_precision(cls) -> PrecisionMode:
        """Get the current default precision mode."""
        return cls._default_mode

    @classmethod
    def get_format(cls) -> FloatFormat:
        """Get the IEEE format for the current precision."""
        return cls._default_mode.format

    @classmethod
    def get_dtype(cls) -> Type[np.floating]:
        """Get the numpy dtype for the current precision."""
        return cls._default_mode.numpy_dtype

    @classmethod
    def reset(cls) -> None:
        """Restore the binary64 default."""
        cls.set_precision(PrecisionMode.FLOAT64)

    @classmethod
    def get_epsilon(cls) -> Scalar:
        """Get machine epsilon for current precision."""
        return cls.get_format().epsilon

    @classmethod
    def get_max(cls) -> Scalar:
        """Get maximum finite value for current precision."""
        return cls.get_format().max_value

    @classmethod
    def get_min(cls) -> Scalar:
        """Get minimum positive normal value for current precision."""
        return cls.get_format().min_normal

    @classmethod
    def get_denorm_min(cls) -> Scalar:
        """Get minimum positive subnormal value for current precision."""
        return cls.get_format().denorm_min


def resolve_format(value: Any) -> FloatFormat:
    """
    Select the IEEE format a scalar argument should be read in.

    - numpy.float64 -> binary64, numpy.float32 -> binary32
    - numpy.float16 -> binary32 (exact widening)
    - Python float/int and numpy integers -> the configured default

    Raises:
        TypeError: For non-real values and unsupported floating types
    """
    if isinstance(value, np.floating):
        if isinstance(value, np.float64):
            return BINARY64
        if isinstance(value, (np.float32, np.float16)):
            return BINARY32
        raise TypeError(f"Unsupported floating type: {type(value)}")
    if isinstance(value, (bool, int, float, np.integer)):
        return PrecisionConfig.get_format()
    raise TypeError(f"Unsupported type for IEEE classification: {type(value)}")


# Context manager for temporary precision changes
class precision_context:
    """
    Context manager for temporary precision changes.

    Example:
        with precision_context('float32'):
            # Python floats are now read as binary32
            isnormal(1e-40)  # False: subnormal in single precision
        # Back to previous precision
    """

    def __init__(self, mode: Union[PrecisionMode, str]):
        self.new_mode = mode
        self.old_mode = None

    def __enter__(self):
        self.old_mode = PrecisionConfig.get_precision()
        PrecisionConfig.set_precision(self.new_mode)
        return self

    def __exit__(self, _exc_type, _exc_val, _exc_tb):
        PrecisionConfig.set_precision(self.old_mode)
