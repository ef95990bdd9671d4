[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "matrixcalc"
version = "0.1.0"
description = "Interactive terminal calculator for up to 26 named matrices"
requires-python = ">=3.10"
dependencies = []
keywords = ["matrix", "calculator", "linear algebra", "gauss", "determinant", "terminal"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: End Users/Desktop",
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

[project.scripts]
matrixcalc = "matrixcalc.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["matrixcalc"]

[tool.pytest.ini_options]
addopts = "-ra"
