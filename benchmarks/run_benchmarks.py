"""
Benchmark suite for fpmath.

This script times the scalar bit-level operations and compares the
vectorised NumPy bridge against per-element classification.
"""

import os
import sys

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

import argparse
import json
import platform
import time
from datetime import datetime

import numpy as np

import fpmath as fm
from fpmath.bridge import classify_array


def _time(func, iterations):
    """Return mean seconds per call and calls per second."""
    start = time.perf_counter()
    for _ in range(iterations):
        func()
    elapsed = time.perf_counter() - start
    return {
        "iterations": iterations,
        "mean_time": elapsed / iterations,
        "operations_per_second": iterations / elapsed if elapsed > 0 else float("inf"),
    }


class Benchmarks:
    """Run benchmarks for fpmath."""

    def __init__(self, output_dir="benchmark_results", iterations=20000):
        self.output_dir = output_dir
        self.iterations = iterations
        os.makedirs(output_dir, exist_ok=True)
        self.results = {}

    def run_scalar_benchmarks(self):
        """Benchmark the scalar operations on normal and subnormal input."""
        print("\n=== Scalar Benchmarks ===")

        cases = {
            "fpclassify": lambda: fm.fpclassify(1.5),
            "frexp_normal": lambda: fm.frexp(12.8),
            "frexp_subnormal": lambda: fm.frexp(5e-320),
            "ilogb": lambda: fm.ilogb(12.8),
            "significand_subnormal": lambda: fm.significand(5e-320),
            "scalbn_normal": lambda: fm.scalbn(1.5, 10),
            "scalbn_underflow": lambda: fm.scalbn(3.0, -1075),
            "nextafter": lambda: fm.nextafter(1.0, 2.0),
            "copysign": lambda: fm.copysign(1.0, -0.0),
            "frexpf": lambda: fm.frexpf(12.8),
        }
        results = {name: _time(func, self.iterations) for name, func in cases.items()}
        for name, result in results.items():
            print(f"  {name}: {result['operations_per_second']:,.0f} ops/sec")

        self.results["scalar"] = results
        return results

    def run_array_benchmarks(self):
        """Compare array classification with a Python loop."""
        print("\n=== Array Benchmarks ===")

        results = {}
        rng = np.random.default_rng(0)
        for size in (1000, 100000):
            bits = rng.integers(0, 2 ** 64 - 1, size=size, dtype=np.uint64, endpoint=True)
            arr = bits.view(np.float64)

            vectorised = _time(lambda: classify_array(arr), 10)
            results[f"classify_array_{size}"] = vectorised
            print(f"  classify_array({size}): {vectorised['mean_time'] * 1000:.3f} ms")

            if size <= 1000:
                looped = _time(lambda: [fm.fpclassify(v) for v in arr], 10)
                results[f"fpclassify_loop_{size}"] = looped
                print(f"  fpclassify loop({size}): {looped['mean_time'] * 1000:.3f} ms")

        self.results["array"] = results
        return results

    def save_results(self):
        """Save all benchmark results."""
        timestamp = datetime.now().isoformat()

        output = {
            "timestamp": timestamp,
            "results": self.results,
            "system_info": {
                "python": platform.python_version(),
                "numpy": np.__version__,
                "platform": platform.platform(),
                "fpmath": fm.__version__,
            },
        }

        filename = os.path.join(self.output_dir, f"benchmarks_{timestamp}.json")
        with open(filename, "w") as f:
            json.dump(output, f, indent=2, default=str)

        print(f"\nResults saved to {filename}")


def main():
    """Run all benchmarks."""
    parser = argparse.ArgumentParser(description="Run fpmath benchmarks")
    parser.add_argument(
        "--output", default="benchmark_results", help="Output directory for results"
    )
    parser.add_argument(
        "--iterations", type=int, default=20000, help="Calls per scalar benchmark"
    )
    parser.add_argument(
        "--suite",
        nargs="+",
        choices=["scalar", "array", "all"],
        default=["all"],
        help="Benchmark suites to run",
    )

    args = parser.parse_args()

    print("fpmath Benchmarks")
    print("=================")

    benchmarks = Benchmarks(args.output, args.iterations)

    suites = {
        "scalar": benchmarks.run_scalar_benchmarks,
        "array": benchmarks.run_array_benchmarks,
    }

    if "all" in args.suite:
        to_run = list(suites.values())
    else:
        to_run = [suites[name] for name in args.suite]

    for func in to_run:
        func()

    benchmarks.save_results()


if __name__ == "__main__":
    main()
