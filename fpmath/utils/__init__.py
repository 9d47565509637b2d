"""Numeric helpers that are not tied to the IEEE bit layout."""

from .numeric import (
    RADIANS_PER_DEGREE,
    cbrt,
    root,
    hypot,
    hypotf,
    log1p,
    deg,
    rad,
    degf,
    radf,
    rep,
    repf,
    ult,
)

__all__ = [
    "RADIANS_PER_DEGREE",
    "cbrt",
    "root",
    "hypot",
    "hypotf",
    "log1p",
    "deg",
    "rad",
    "degf",
    "radf",
    "rep",
    "repf",
    "ult",
]
