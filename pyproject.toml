[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "satdpll"
version = "0.1.0"
description = "A DPLL satisfiability solver for CNF systems written as ternary interval vectors"
requires-python = ">=3.10"
dependencies = []
keywords = ["sat", "dpll", "cnf", "boolean", "solver", "interval"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Education",
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
satdpll = "satdpll.solver:main"

[tool.hatch.build.targets.wheel]
packages = ["satdpll"]

[tool.pytest.ini_options]
addopts = "-ra"
