"""Bridges between fpmath and array libraries."""

from .numpy_bridge import (
    to_bits_array,
    from_bits_array,
    classify_array,
    category_mask,
    signbit_array,
    count_categories,
)

__all__ = [
    "to_bits_array",
    "from_bits_array",
    "classify_array",
    "category_mask",
    "signbit_array",
    "count_categories",
]
