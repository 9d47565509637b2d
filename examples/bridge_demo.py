"""
Demonstration of the NumPy bridge.

This example classifies whole arrays at once, inspects their raw bit
patterns and compares single and double precision limits.
"""

import os
import sys

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

import numpy as np

import fpmath as fm
from fpmath.bridge import classify_array, count_categories, from_bits_array, signbit_array, to_bits_array
from fpmath.core import PrecisionConfig, PrecisionMode


def demonstrate_precision_limits():
    """Show the limits of each supported precision."""
    print("=== Precision Limits ===\n")

    for mode in PrecisionMode:
        with fm.precision_context(mode):
            print(f"{mode.name} ({mode.bits} bits):")
            print(f"  Max value: {PrecisionConfig.get_max():.6e}")
            print(f"  Min normal: {PrecisionConfig.get_min():.6e}")
            print(f"  Min subnormal: {PrecisionConfig.get_denorm_min():.6e}")
            print(f"  Epsilon: {PrecisionConfig.get_epsilon():.6e}")
            print()


def demonstrate_array_classification():
    """Classify an array with every category in it."""
    print("=== Array Classification ===\n")

    arr = np.array([0.0, -0.0, 5e-324, 1.0, -2.5, np.inf, np.nan])
    codes = classify_array(arr)
    for value, code in zip(arr, codes):
        print(f"  {value!r:>24} -> {fm.FloatCategory(int(code))}")

    print(f"\nCounts: {count_categories(arr)}")
    print(f"Sign bits: {signbit_array(arr).tolist()}")


def demonstrate_bit_views():
    """Show raw bit patterns and building arrays from them."""
    print("\n=== Bit Views ===\n")

    arr = np.array([1.0, -0.5, 0.1], dtype=np.float32)
    for value, bits in zip(arr, to_bits_array(arr)):
        print(f"  {value!r:>18} = {int(bits):#010x}")

    # Quiet NaN with a payload, kept exactly
    nans = from_bits_array([0x7FF8000000000ABC, 0xFFF8000000000001])
    print(f"\nNaN payloads: {[hex(int(b)) for b in to_bits_array(nans)]}")


if __name__ == "__main__":
    print("fpmath NumPy Bridge Demo")
    print("========================\n")

    demonstrate_precision_limits()
    demonstrate_array_classification()
    demonstrate_bit_views()
