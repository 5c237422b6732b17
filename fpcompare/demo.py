"""Command that prints a short tour of the comparison functions."""

from __future__ import annotations

import argparse

import numpy as np

from fpcompare.compare import (
    ToleranceType,
    are_equal,
    greater_than,
    greater_than_or_equal,
    is_zero,
)

__all__ = ["run_examples", "main"]


def _answer(label, result):
    return f"{label} {'true' if result else 'false'}"


def run_examples():
    """Return the example report as a list of lines."""
    d1 = 1.0
    d2 = 1.0 + 1e-12
    d3 = 1.1

    f1 = np.float32(1.0)
    f2 = np.float32(1.0) + np.float32(1e-7)
    f3 = np.float32(1.0) + np.float32(1e-5)

    val1 = 100.0
    val2 = 100.5

    return [
        "--- Double Precision Examples ---",
        _answer("are_equal(d1, d2) [default comb. tol]?", are_equal(d1, d2)),
        _answer("are_equal(d1, d3) [default]?", are_equal(d1, d3)),
        _answer("greater_than(d3, d1) [default]?", greater_than(d3, d1)),
        _answer("is_zero(1e-13)?", is_zero(1e-13)),
        _answer(
            "is_zero(1e-3, 1e-2, ToleranceType.ABSOLUTE)?",
            is_zero(1e-3, 1e-2, ToleranceType.ABSOLUTE),
        ),
        "",
        "--- Single Precision (float32) Examples ---",
        _answer("are_equal(f1, f2)?", are_equal(f1, f2)),
        _answer("greater_than_or_equal(f3, f1)?", greater_than_or_equal(f3, f1)),
        _answer("greater_than_or_equal(f1, f2)?", greater_than_or_equal(f1, f2)),
        "",
        "--- Custom-Precision & ToleranceType Example ---",
        _answer("are_equal(val1, val2) [default]?", are_equal(val1, val2)),
        _answer(
            "are_equal(val1, val2, tol=0.01, RELATIVE)?",
            are_equal(val1, val2, 0.01, ToleranceType.RELATIVE),
        ),
        _answer(
            "are_equal(val1, val2, tol=0.5, ABSOLUTE)?",
            are_equal(val1, val2, 0.5, ToleranceType.ABSOLUTE),
        ),
    ]


def main(argv=None):
    """Print the example report and return the exit status."""
    parser = argparse.ArgumentParser(
        prog="fpcompare",
        description="Show tolerance-based floating-point comparisons.",
    )
    parser.parse_args(argv)
    print("\n".join(run_examples()))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())