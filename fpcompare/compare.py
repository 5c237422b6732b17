"""Tolerance-based comparison of floating-point numbers.

Every comparison works in the precision of its operands: NumPy scalars
such as ``numpy.float32`` are compared in that precision with that type's
machine epsilon, while plain Python numbers are compared as 64-bit floats.
"""

from __future__ import annotations

import enum
from numbers import Real

import numpy as np

__all__ = [
    "ToleranceType",
    "default_tolerance",
    "is_close",
    "is_greater",
    "is_less",
    "is_greater_equal",
    "is_less_equal",
    "is_zero",
    "are_equal",
    "greater_than",
    "greater_than_or_equal",
    "less_than",
    "less_than_or_equal",
]

_EPSILON_FACTOR = 4


class ToleranceType(enum.Enum):
    """Which tolerances a precision value stands for."""

    ABSOLUTE = "absolute"
    RELATIVE = "relative"
    COMBINED = "combined"


def _float_type(*values):
    """Return the NumPy floating type in which *values* are to be compared."""
    numpy_types = []
    for value in values:
        if isinstance(value, (bool, np.bool_)) or not isinstance(value, Real):
            raise TypeError(
                f"expected a real number, got {type(value).__name__}"
            )
        if isinstance(value, np.floating):
            numpy_types.append(type(value))
    if numpy_types:
        return np.result_type(*numpy_types).type
    return np.float64


def _resolve_type(value):
    if isinstance(value, type):
        if issubclass(value, np.floating):
            return value
        if issubclass(value, float):
            return np.float64
        raise TypeError(f"{value.__name__} is not a floating-point type")
    return _float_type(value)


def default_tolerance(value):
    """Return four machine epsilons in the floating type of *value*.

    *value* may be a number or a floating-point type.
    """
    ftype = _resolve_type(value)
    return ftype(np.finfo(ftype).eps * _EPSILON_FACTOR)


def _tolerance_or_default(ftype, tol):
    if tol is None:
        return default_tolerance(ftype)
    _float_type(tol)
    return ftype(tol)


def _close(ftype, a, b, rtol, atol):
    x, y = ftype(a), ftype(b)
    rtol = _tolerance_or_default(ftype, rtol)
    atol = _tolerance_or_default(ftype, atol)
    if not (np.isfinite(x) and np.isfinite(y)):
        return False
    with np.errstate(all="ignore"):
        return bool(abs(x - y) <= atol + rtol * max(abs(x), abs(y)))


def _split_precision(ftype, precision, tolerance):
    """Turn a precision and tolerance type into ``(rtol, atol)``."""
    tolerance = ToleranceType(tolerance)
    precision = _tolerance_or_default(ftype, precision)
    zero = ftype(0)
    if tolerance is ToleranceType.ABSOLUTE:
        return zero, precision
    if tolerance is ToleranceType.RELATIVE:
        return precision, zero
    return precision, precision


def is_close(a, b, rtol=None, atol=None):
    """Return True if *a* and *b* are finite and within tolerance of each other.

    The test is ``|a - b| <= atol + rtol * max(|a|, |b|)``; both tolerances
    default to four machine epsilons.
    """
    return _close(_float_type(a, b), a, b, rtol, atol)


def is_greater(a, b, rtol=None, atol=None):
    """Return True if *a* exceeds *b* and the two are not close."""
    ftype = _float_type(a, b)
    return bool(ftype(a) > ftype(b)) and not _close(ftype, a, b, rtol, atol)


def is_less(a, b, rtol=None, atol=None):
    """Return True if *a* is below *b* and the two are not close."""
    ftype = _float_type(a, b)
    return bool(ftype(a) < ftype(b)) and not _close(ftype, a, b, rtol, atol)


def is_greater_equal(a, b, rtol=None, atol=None):
    """Return True if *a* exceeds *b* or the two are close."""
    ftype = _float_type(a, b)
    return bool(ftype(a) > ftype(b)) or _close(ftype, a, b, rtol, atol)


def is_less_equal(a, b, rtol=None, atol=None):
    """Return True if *a* is below *b* or the two are close."""
    ftype = _float_type(a, b)
    return bool(ftype(a) < ftype(b)) or _close(ftype, a, b, rtol, atol)


def is_zero(v, precision=None, tolerance=ToleranceType.COMBINED):
    """Return True if *v* is zero within *precision*."""
    ftype = _float_type(v)
    rtol, atol = _split_precision(ftype, precision, tolerance)
    return _close(ftype, v, ftype(0), rtol, atol)


def are_equal(a, b, precision=None, tolerance=ToleranceType.COMBINED):
    """Return True if *a* and *b* are equal within *precision*."""
    ftype = _float_type(a, b)
    rtol, atol = _split_precision(ftype, precision, tolerance)
    return _close(ftype, a, b, rtol, atol)


def greater_than(a, b, precision=None, tolerance=ToleranceType.COMBINED):
    """Return True if *a* is greater than *b* beyond *precision*."""
    ftype = _float_type(a, b)
    rtol, atol = _split_precision(ftype, precision, tolerance)
    return is_greater(ftype(a), ftype(b), rtol, atol)


def greater_than_or_equal(a, b, precision=None, tolerance=ToleranceType.COMBINED):
    """Return True if *a* is greater than or equal to *b* within *precision*."""
    ftype = _float_type(a, b)
    rtol, atol = _split_precision(ftype, precision, tolerance)
    return is_greater_equal(ftype(a), ftype(b), rtol, atol)


def less_than(a, b, precision=None, tolerance=ToleranceType.COMBINED):
    """Return True if *a* is less than *b* beyond *precision*."""
    ftype = _float_type(a, b)
    rtol, atol = _split_precision(ftype, precision, tolerance)
    return is_less(ftype(a), ftype(b), rtol, atol)


def less_than_or_equal(a, b, precision=None, tolerance=ToleranceType.COMBINED):
    """Return True if *a* is less than or equal to *b* within *precision*."""
    ftype = _float_type(a, b)
    rtol, atol = _split_precision(ftype, precision, tolerance)
    return is_less_equal(ftype(a), ftype(b), rtol, atol)