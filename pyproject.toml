[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tspsolve"
version = "0.1.0"
description = "Travelling salesman tour solvers for TSPLIB-style coordinate files: MST approximation, Held-Karp and a randomized 2-opt heuristic"
requires-python = ">=3.10"
dependencies = []
keywords = ["tsp", "travelling salesman", "held-karp", "2-opt", "minimum spanning tree", "optimization"]
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
tspsolve = "tspsolve.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["tspsolve"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
