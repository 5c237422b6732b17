[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fpcompare"
version = "1.0.0"
description = "Tolerance-aware comparison of floating-point numbers with absolute, relative and combined tolerances"
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = ["floating-point", "comparison", "tolerance", "epsilon", "numerics"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
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
test = [
    "pytest",
    "numpy",
]

[project.scripts]
fpcompare-demo = "fpcompare.demo:main"

[tool.hatch.build.targets.wheel]
packages = ["fpcompare"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
