"""Piecewise polynomial curves with flat extrapolation."""

import math
import numbers
from typing import Iterable

import numpy as np

from qfkit.core import QfError, ensure

_ORDER_MESSAGE = "PiecewisePolynomial: breakpoints must be in strict increasing order"


class PiecewisePolynomial:
    """A curve made of polynomial pieces between increasing breakpoints.

    The piece for ``[x_j, x_{j+1})`` is ``sum_i c[i, j] * (x - x_j) ** i``,
    so the curve is right continuous.  Outside the breakpoint range the
    curve is extrapolated flat.
    """

    def __init__(self, breakpoints: Iterable[float], order: int = 0) -> None:
        order = int(order)
        ensure(order >= 0, "PiecewisePolynomial: order must be non-negative")
        x = np.array(breakpoints, dtype=np.float64)
        if x.ndim == 0:
            x = x.reshape(1)
        ensure(x.ndim == 1, "PiecewisePolynomial: breakpoints must be one dimensional")
        ensure(not np.any(x[:-1] >= x[1:]), _ORDER_MESSAGE)
        self._x = x
        self._c = np.zeros((order + 1, x.size), dtype=np.float64)

    @classmethod
    def from_values(cls, breakpoints, values, order: int = 0) -> "PiecewisePolynomial":
        """Piecewise constant (order 0) or continuous linear (order 1) curve through values."""
        order = int(order)
        ensure(
            0 <= order < 2,
            "PiecewisePolynomial: only 0th and 1st order polynomials can be constructed from values",
        )
        curve = cls(breakpoints, order)
        y = np.array(values, dtype=np.float64).ravel()
        n = len(curve)
        ensure(y.size == n, "PiecewisePolynomial: unequal number of breakpoints and values")
        curve._c[0, :] = y
        if order == 1 and n > 0:
            ensure(n >= 2, "PiecewisePolynomial: a linear curve needs at least two breakpoints")
            x = curve._x
            curve._c[1, :-1] = (y[1:] - y[:-1]) / (x[1:] - x[:-1])
            curve._c[1, -1] = curve._c[1, -2]
        return curve

    def __len__(self) -> int:
        return int(self._x.size)

    def __repr__(self) -> str:
        return f"PiecewisePolynomial(breakpoints={self._x.tolist()!r}, order={self.order})"

    @property
    def order(self) -> int:
        """Highest polynomial order of the pieces."""
        return self._c.shape[0] - 1

    @property
    def breakpoints(self) -> np.ndarray:
        """A copy of the breakpoints."""
        return self._x.copy()

    @property
    def coefficients(self) -> np.ndarray:
        """A copy of the coefficient matrix; row i holds the order-i coefficients."""
        return self._c.copy()

    def coefficient(self, i: int, j: int) -> float:
        """The order-``i`` coefficient of the piece starting at breakpoint ``j``."""
        return float(self._c[i, j])

    # Evaluation

    def _require_points(self) -> None:
        if self._x.size == 0:
            raise QfError("PiecewisePolynomial: curve has no breakpoints")

    def _index(self, x: float) -> int:
        """Greatest index with breakpoint <= x, or -1 when x is left of all."""
        return int(np.searchsorted(self._x, x, side="right")) - 1

    def _derivative(self, idx: int, h: float, k: int) -> float:
        order = self.order
        val = 0.0
        for i in range(order - k, -1, -1):
            val = float(self._c[i + k, idx]) * math.factorial(i + k) + val * h / (i + 1)
        return val

    def _primitive(self, idx: int, h: float, k: int) -> float:
        if (idx == 0 and h < 0) or (idx == len(self) - 1 and h > 0):
            return float(self._c[0, idx]) * h**k / math.factorial(k)
        val = 0.0
        for i in range(self.order + k, k - 1, -1):
            val = float(self._c[i - k, idx]) + val * h / (i + 1)
        for i in range(k - 1, -1, -1):
            val = val * h / (i + 1)
        return val

    def __call__(self, x: float) -> float:
        return self.eval(x, 0)

    def eval(self, x: float, k: int = 0) -> float:
        """Value (k = 0) or k-th derivative of the curve at ``x``."""
        k = int(k)
        ensure(k >= 0, "PiecewisePolynomial: derivative order must be non-negative")
        self._require_points()
        x = float(x)
        xs = self._x
        if x < xs[0]:
            return float(self._c[0, 0]) if k == 0 else 0.0
        if xs[-1] <= x:
            return float(self._c[0, -1]) if k == 0 else 0.0
        idx = self._index(x)
        return self._derivative(idx, x - float(xs[idx]), k)

    def eval_many(self, xs, k: int = 0) -> np.ndarray:
        """Value or k-th derivative at each point of ``xs``."""
        points = np.atleast_1d(np.asarray(xs, dtype=np.float64))
        ensure(points.ndim == 1, "PiecewisePolynomial: points must be one dimensional")
        return np.array([self.eval(x, k) for x in points], dtype=np.float64)

    def integral(self, a: float, b: float) -> float:
        """Integral of the curve from ``a`` to ``b``."""
        a, b = float(a), float(b)
        if a == b:
            return 0.0
        sign = 1
        if a > b:
            a, b = b, a
            sign = -1
        self._require_points()
        x = self._x
        i0, i1 = self._index(a), self._index(b)
        if i0 == i1:
            return sign * float(self._c[0, max(i0, 0)]) * (b - a)

        val = 0.0
        if i0 == -1:
            i0 = 0
            val += float(self._c[0, 0]) * (float(x[0]) - a)
        if a > x[i0]:
            left = float(x[i0])
            val = self._primitive(i0, float(x[i0 + 1]) - left, 1) - self._primitive(i0, a - left, 1)
            i0 += 1
        for idx in range(i0, i1):
            val += self._primitive(idx, float(x[idx + 1]) - float(x[idx]), 1)
        val += self._primitive(i1, b - float(x[i1]), 1)
        return sign * val

    def integrals(self, x_start: float, xs, stepwise: bool = False) -> np.ndarray:
        """Integrals from ``x_start`` to each point; differences of them if ``stepwise``."""
        points = np.atleast_1d(np.asarray(xs, dtype=np.float64))
        result = np.array([self.integral(x_start, x) for x in points], dtype=np.float64)
        if stepwise and result.size > 1:
            result[1:] = np.diff(result)
        return result

    # Arithmetic with constants

    def __iadd__(self, other):
        if not isinstance(other, numbers.Real):
            return NotImplemented
        self._c[0, :] += float(other)
        return self

    def __isub__(self, other):
        if not isinstance(other, numbers.Real):
            return NotImplemented
        self._c[0, :] -= float(other)
        return self

    def __imul__(self, other):
        if not isinstance(other, numbers.Real):
            return NotImplemented
        self._c *= float(other)
        return self

    def __itruediv__(self, other):
        if not isinstance(other, numbers.Real):
            return NotImplemented
        self._c /= float(other)
        return self

    # Polynomial algebra

    def _merged(self, other: "PiecewisePolynomial", order: int) -> "PiecewisePolynomial":
        return PiecewisePolynomial(np.union1d(self._x, other._x), order)

    def __add__(self, other):
        if not isinstance(other, PiecewisePolynomial):
            return NotImplemented
        order = max(self.order, other.order)
        result = self._merged(other, order)
        points = result._x
        for i in range(order + 1):
            total = self.eval_many(points, i) + other.eval_many(points, i)
            result._c[i, :] += total / math.factorial(i)
        return result

    def __mul__(self, other):
        if not isinstance(other, PiecewisePolynomial):
            return NotImplemented
        order = self.order + other.order
        result = self._merged(other, order)
        points = result._x
        mine = [self.eval_many(points, k) / math.factorial(k) for k in range(order + 1)]
        theirs = [other.eval_many(points, k) / math.factorial(k) for k in range(order + 1)]
        for i in range(order + 1):
            for k in range(i + 1):
                result._c[i, :] += mine[k] * theirs[i - k]
        return result