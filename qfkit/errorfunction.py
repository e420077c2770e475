"""The error function, its complement and their inverses."""

import math

from qfkit.core import ensure

# Halley-step derivative factor, 2 / sqrt(pi).
_TWO_OVER_SQRT_PI = 2.0 / math.sqrt(math.pi)

# Rational approximation used as the starting point of the inversion.
_GUESS_SCALE = -0.70711
_GUESS_NUM = (2.30753, 0.27061)
_GUESS_DEN = (1.0, 0.99229, 0.04481)


def _erfc_nonnegative(z: float) -> float:
    ensure(z >= 0.0, "erfccheb requires non-negative argument")
    return math.erfc(z)


def erf(x: float) -> float:
    """Return erf(x)."""
    x = float(x)
    if x >= 0.0:
        return 1.0 - _erfc_nonnegative(x)
    return _erfc_nonnegative(-x) - 1.0


def erfc(x: float) -> float:
    """Return 1 - erf(x)."""
    x = float(x)
    if x >= 0.0:
        return _erfc_nonnegative(x)
    return 2.0 - _erfc_nonnegative(-x)


def _sqrt_or_nan(x: float) -> float:
    return math.sqrt(x) if x >= 0.0 else math.nan


def _initial_guess(t: float) -> float:
    num = _GUESS_NUM[0] + t * _GUESS_NUM[1]
    den = _GUESS_DEN[0] + t * (_GUESS_DEN[1] + t * _GUESS_DEN[2])
    return _GUESS_SCALE * (num / den - t)


def inverfc(p: float) -> float:
    """Return x such that erfc(x) == p, for p in (0, 2); +/-100 outside."""
    p = float(p)
    if p >= 2.0:
        return -100.0
    if p <= 0.0:
        return 100.0
    pp = p if p < 1.0 else 2.0 - p
    x = _initial_guess(math.sqrt(-2.0 * math.log(pp / 2.0)))
    for _ in range(2):
        err = erfc(x) - pp
        x += err / (_TWO_OVER_SQRT_PI * math.exp(-_sqrt_or_nan(x)) - x * err)
        x = max(x, 0.0) if not math.isnan(x) else x
    return x if p < 1.0 else -x


def inverf(p: float) -> float:
    """Return x such that erf(x) == p."""
    return inverfc(1.0 - float(p))