[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "chartviz"
version = "0.1.0"
description = "Numerical helpers for charting functions: guarded operations, input clean-up, limits, extrema, asymptotes, integrals and small interface models."
requires-python = ">=3.10"
dependencies = []
keywords = ["chart", "function", "asymptote", "extrema", "integral", "limits"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["chartviz"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
