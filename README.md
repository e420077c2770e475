# qfkit

Building blocks for quantitative finance work in Python. It is built on numpy.

## Modules

- `qfkit.core`: library-wide constants, such as `VERSION_STRING`, `DAYS_PER_YEAR` and `M_1_SQRT2PI`. It also holds the error type `QfError` and the check helper `ensure(condition, message)`. You can append more text to a `QfError` with `<<`.
- `qfkit.errorfunction`: `erf`, `erfc`, `inverf` and `inverfc`. `inverfc(p)` returns `100.0` for `p <= 0` and `-100.0` for `p >= 2`.
- `qfkit.distributions`: the abstract `UnivariateDistribution` and its subclass `NormalDistribution(mu=0.0, sigma=1.0)`. `NormalDistribution` has `pdf`, `cdf` and `invcdf`.
- `qfkit.piecewise`: `PiecewisePolynomial`, a right-continuous piecewise polynomial curve that extrapolates flat outside its breakpoints. It supports:
  - values and derivatives (`eval`, `eval_many`, calling the curve);
  - integrals (`integral`, `integrals`);
  - arithmetic with a constant in place (`+=`, `-=`, `*=`, `/=`);
  - sums and products of two curves (`+`, `*`).
- `qfkit.registry`: `ObjectRegistry`, a store of named objects.
  - Names are trimmed and upper-cased.
  - Empty names and names containing blanks are rejected.
  - Each `set` under a name raises that name's version by one.
- `qfkit.convert`: checked conversions of Python and numpy values to plain values. Examples are `as_int` (signed 32-bit), `as_double`, `as_string` (ASCII), `as_int_vec`, `as_dbl_vec`, `as_dbl_matrix`, `as_str_vec` and `get_field`.
- `qfkit.echo`: functions that send a value through the conversions and give it back. They are useful for checking how an input will be read, for example `echo_int`, `echo_dbl_array` and `echo_dbl_vec_field`.

Invalid input raises `qfkit.core.QfError`. Examples are a non-positive `sigma`, a probability outside (0, 1), breakpoints that are not strictly increasing, and a value that cannot be converted.

## Installation

```
pip install qfkit
```

To run the tests:

```
pip install "qfkit[test]"
pytest
```

## Examples

```python
from qfkit.errorfunction import erf, inverf
from qfkit.distributions import NormalDistribution

erf(0.0)                       # 0.0
normal = NormalDistribution()
normal.cdf(0.0)                # 0.5
normal.invcdf(0.975)           # about 1.96
```

Curves:

```python
from qfkit.piecewise import PiecewisePolynomial

curve = PiecewisePolynomial.from_values([0.0, 1.0, 2.0], [1.0, 2.0, 4.0], 1)
curve(0.5)                     # 1.5
curve.eval(0.5, 1)             # 1.0, the slope on [0, 1)
curve.integral(0.0, 2.0)       # 4.5
curve.eval_many([0.5, 1.5])    # array([1.5, 3. ])

steps = PiecewisePolynomial.from_values([0.0, 1.0], [1.0, 3.0], 0)
total = curve + steps          # breakpoints are merged
```

Registry:

```python
from qfkit.registry import ObjectRegistry

registry = ObjectRegistry()
registry.set(" spot ", 100.0)  # ("SPOT", 1)
registry.set("Spot", 101.0)    # ("SPOT", 2)
registry.get("spot")           # 101.0
registry.names()               # ["SPOT"]
```

Conversions:

```python
from qfkit.convert import as_dbl_matrix, get_field
from qfkit.echo import echo_int

echo_int(2**31)                           # -2147483648
as_dbl_matrix([[1, 2], [3, 4]])           # 2x2 float64 array
get_field({"rates": [0.01, 0.02]}, "rates")
```

## What this package does not do

This package has no option pricers and no forward-price function. It also has no flat, all-in-one function interface and no command-line program. You work with the modules above directly.