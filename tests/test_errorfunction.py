import math

import pytest

from qfkit.core import QfError
from qfkit.errorfunction import erf, erfc, inverf, inverfc

POINTS = [-4.0, -2.5, -1.0, -0.3, 0.0, 0.2, 0.7, 1.5, 3.0, 5.0]


@pytest.mark.parametrize("x", POINTS)
def test_erf_matches_stdlib(x):
    assert erf(x) == pytest.approx(math.erf(x), abs=1e-13)


@pytest.mark.parametrize("x", POINTS)
def test_erfc_matches_stdlib(x):
    assert erfc(x) == pytest.approx(math.erfc(x), rel=1e-12, abs=1e-300)


@pytest.mark.parametrize("x", POINTS)
def test_erf_is_odd(x):
    assert erf(-x) == -erf(x)


@pytest.mark.parametrize("x", POINTS)
def test_erf_and_erfc_sum_to_one(x):
    assert erf(x) + erfc(x) == pytest.approx(1.0, abs=1e-14)


def test_erf_at_zero():
    assert erf(0.0) == pytest.approx(0.0, abs=1e-15)


def test_erf_limits():
    assert erf(math.inf) == 1.0
    assert erf(-math.inf) == -1.0


def test_erf_of_nan_raises():
    with pytest.raises(QfError, match="non-negative"):
        erf(math.nan)


@pytest.mark.parametrize("x", [-2.5, -1.2, -0.4, 0.05, 0.5, 1.0, 1.8, 2.5])
def test_inverf_round_trip(x):
    assert inverf(erf(x)) == pytest.approx(x, abs=5e-3)


@pytest.mark.parametrize("x", [-2.0, -0.6, 0.3, 1.1, 2.2])
def test_inverfc_round_trip(x):
    assert inverfc(erfc(x)) == pytest.approx(x, abs=5e-3)


@pytest.mark.parametrize("p", [0.1, 0.5, 0.9])
def test_inverf_is_odd(p):
    assert inverf(-p) == pytest.approx(-inverf(p), abs=1e-9)


def test_inverf_at_zero_is_near_zero():
    assert abs(inverf(0.0)) < 1e-3


@pytest.mark.parametrize("p", [2.0, 2.5, 10.0])
def test_inverfc_at_or_above_two(p):
    assert inverfc(p) == -100.0


@pytest.mark.parametrize("p", [0.0, -0.5])
def test_inverfc_at_or_below_zero(p):
    assert inverfc(p) == 100.0


def test_inverf_is_increasing_on_grid():
    values = [inverf(p) for p in (-0.99, -0.7, -0.3, 0.1, 0.4, 0.8, 0.99)]
    assert values == sorted(values)