[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "qfkit"
version = "0.5.0"
description = "Quantitative finance building blocks: error function, normal distribution, piecewise polynomial curves, a versioned object registry and checked value conversions"
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = [
    "quantitative finance",
    "error function",
    "normal distribution",
    "piecewise polynomial",
    "interpolation",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Financial and Insurance Industry",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Office/Business :: Financial :: Investment",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["qfkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
