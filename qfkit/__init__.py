"""Quantitative finance building blocks: error function, normal distribution, piecewise curves, registry and conversions."""

__version__ = "0.5.0"

__all__ = [
    "convert",
    "core",
    "distributions",
    "echo",
    "errorfunction",
    "piecewise",
    "registry",
]