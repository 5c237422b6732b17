# fpcompare

Compare floating-point numbers without being caught out by rounding error.
Every comparison takes a tolerance and says how to apply it: as an absolute
bound, as a bound relative to the size of the operands, or as both at once.

Two values `a` and `b` count as close when

    |a - b| <= atol + rtol * max(|a|, |b|)

NaN and infinity are never close to anything, themselves included.

## Installation

    pip install fpcompare

## Usage

```python
from fpcompare.compare import (
    ToleranceType,
    are_equal,
    greater_than,
    is_zero,
)

are_equal(1.0, 1.0 + 1e-12)          # False: default tolerance is 4 * epsilon
are_equal(1.0, 1.1)                  # False
greater_than(1.1, 1.0)               # True

is_zero(1e-3, 1e-2, ToleranceType.ABSOLUTE)   # True

are_equal(100.0, 100.5, 0.01, ToleranceType.RELATIVE)  # True
are_equal(100.0, 100.5, 0.5, ToleranceType.ABSOLUTE)   # True
```

All functions live in `fpcompare.compare`:

- `is_zero(v, precision=None, tolerance=ToleranceType.COMBINED)`
- `are_equal(a, b, precision=None, tolerance=ToleranceType.COMBINED)`
- `greater_than`, `greater_than_or_equal`, `less_than`, `less_than_or_equal`,
  each taking `(a, b, precision=None, tolerance=ToleranceType.COMBINED)`
- `is_close`, `is_greater`, `is_less`, `is_greater_equal`, `is_less_equal`,
  each taking `(a, b, rtol=None, atol=None)` for when the two tolerances
  are to be set separately
- `default_tolerance(value)`

### Precision and default tolerance

Each comparison works in the precision of its operands. NumPy scalars such as
`numpy.float32` are compared in that precision, and plain Python numbers
(floats and integers) are compared as 64-bit floats. When operands of
different NumPy floating types are mixed, the wider type is used.

When no precision or tolerance is given, it defaults to four times the machine
epsilon of that type. `default_tolerance(value)` returns this default; `value`
may be a number or a floating-point type such as `float` or `numpy.float32`.

### Tolerance types

- `ToleranceType.ABSOLUTE`: only `atol = precision`
- `ToleranceType.RELATIVE`: only `rtol = precision`
- `ToleranceType.COMBINED` (default): both are set to `precision`

The `tolerance` argument also accepts the member values `"absolute"`,
`"relative"` and `"combined"`; anything else raises `ValueError`.

### Ordered comparisons

`greater_than(a, b)` and `less_than(a, b)` are true only when the inequality
holds and the values are not close. `greater_than_or_equal(a, b)` and
`less_than_or_equal(a, b)` are true when the inequality holds or the values
are close, even if the inequality does not strictly hold. The inequality
itself is tested plainly, so `greater_than_or_equal(float("inf"), 1.0)` is
true even though infinity is never close to anything.

### Errors

Booleans and anything that is not a real number (strings, `None`, arrays)
raise `TypeError`, whether passed as an operand or as a tolerance.

## Demonstration

To print a set of worked examples:

    fpcompare-demo

The same report is available as a list of lines from
`fpcompare.demo.run_examples()`.

## Limitations

The functions compare single scalar values only; they do not work element-wise
on arrays or sequences.