"""Univariate distributions."""

import math
from abc import ABC, abstractmethod

from qfkit.core import M_1_SQRT2PI, M_SQRT1_2, M_SQRT2, ensure
from qfkit.errorfunction import erfc, inverfc


class UnivariateDistribution(ABC):
    """Base class for univariate distributions."""

    @abstractmethod
    def pdf(self, x: float) -> float:
        """Probability density function."""

    @abstractmethod
    def cdf(self, x: float) -> float:
        """Cumulative distribution function."""

    @abstractmethod
    def invcdf(self, p: float) -> float:
        """Inverse cumulative distribution function."""


class NormalDistribution(UnivariateDistribution):
    """The normal distribution with mean ``mu`` and deviation ``sigma``."""

    def __init__(self, mu: float = 0.0, sigma: float = 1.0) -> None:
        ensure(sigma > 0, "error: sigma must be positive")
        self.mu = float(mu)
        self.sigma = float(sigma)

    def __repr__(self) -> str:
        return f"NormalDistribution(mu={self.mu!r}, sigma={self.sigma!r})"

    def pdf(self, x: float) -> float:
        z = (x - self.mu) / self.sigma
        return (M_1_SQRT2PI / self.sigma) * math.exp(-0.5 * z * z)

    def cdf(self, x: float) -> float:
        return 0.5 * erfc(-M_SQRT1_2 * (x - self.mu) / self.sigma)

    def invcdf(self, p: float) -> float:
        ensure(0 < p < 1, "error: prob. must be in (0,1)")
        return -M_SQRT2 * self.sigma * inverfc(2.0 * p) + self.mu