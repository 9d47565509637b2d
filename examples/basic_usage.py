"""Basic usage example of the fpmath library.

This example walks through the bit-level view of floating point numbers:
classification, decomposition, scaling and stepping between neighbours.
"""

import sys
import os
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

import fpmath as fm


def demonstrate_classification():
    """Show fpclassify and the predicates."""
    print("=== Classification ===\n")

    for value in (0.0, -0.0, 5e-324, 1.0, float('inf'), float('nan')):
        print(f"fpclassify({value!r:>8}) = {fm.fpclassify(value)!s:<9}  signbit = {fm.signbit(value)}")

    # Python floats are binary64 unless told otherwise
    print(f"\nisnormal(1e-40) = {fm.isnormal(1e-40)}")
    with fm.precision_context('float32'):
        print(f"isnormal(1e-40) in single precision = {fm.isnormal(1e-40)}")


def demonstrate_decomposition():
    """Show frexp, ilogb, logb and significand."""
    print("\n=== Decomposition ===\n")

    fraction, exponent = fm.frexp(12.8)
    print(f"frexp(12.8) = ({fraction}, {exponent})")
    print(f"ilogb(12.8) = {fm.ilogb(12.8)}")
    print(f"logb(0.0) = {fm.logb(0.0)}")
    print(f"significand(12.8) = {fm.significand(12.8)}")

    # Subnormals are normalised first
    print(f"frexp(5e-324) = {tuple(fm.frexp(5e-324))}")
    print(f"ilogb(0.0) = {fm.ilogb(0.0)} (FP_ILOGB0)")


def demonstrate_scaling():
    """Show scalbn/ldexp saturation and rounding."""
    print("\n=== Scaling ===\n")

    print(f"ldexp(0.8, 4) = {fm.ldexp(0.8, 4)}")
    print(f"scalbn(1.0, 1024) = {fm.scalbn(1.0, 1024)}")
    print(f"scalbn(-1.0, -2000) = {fm.scalbn(-1.0, -2000)}")
    print(f"scalbn(3.0, -1075) = {fm.scalbn(3.0, -1075)!r} (rounded to even)")
    print(f"ldexpf(0.8, 4) = {fm.ldexpf(0.8, 4)!r}")

    try:
        fm.scalbn(1.0, 2 ** 31)
    except OverflowError as e:
        print(f"scalbn(1.0, 2**31) -> OverflowError: {e}")
    print(f"scalbln(1.0, 2**31) = {fm.scalbln(1.0, 2 ** 31)}")


def demonstrate_adjacency():
    """Show nextafter and copysign."""
    print("\n=== Neighbours and Signs ===\n")

    print(f"nextafter(1.0, 2.0) = {fm.nextafter(1.0, 2.0)!r}")
    print(f"nextafter(0.0, -1.0) = {fm.nextafter(0.0, -1.0)!r}")
    print(f"nextafter(-0.0, 0.0) = {fm.nextafter(-0.0, 0.0)!r}")
    print(f"nextafter(DBL_MAX, inf) = {fm.nextafter(fm.DBL_MAX, float('inf'))}")

    negative_nan = fm.copysign(float('nan'), -1.0)
    print(f"signbit(copysign(nan, -1.0)) = {fm.signbit(negative_nan)}")
    print(f"bits of copysign(nan, -1.0) = {fm.double_to_bits(negative_nan):#018x}")


if __name__ == "__main__":
    print("fpmath: IEEE-754 Bit-Level Math Demo")
    print("====================================\n")

    demonstrate_classification()
    demonstrate_decomposition()
    demonstrate_scaling()
    demonstrate_adjacency()
