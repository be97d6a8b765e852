[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "volray"
version = "0.1.0"
description = "Fixed-point value formats, binary serialization, small-vector math, sequence helpers and harmonic relaxation for volume ray tracing"
requires-python = ">=3.10"
dependencies = []
keywords = ["ray tracing", "fixed point", "harmonic", "serialization", "permutation", "volume"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["volray"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
