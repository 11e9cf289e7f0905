[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "olysolve"
version = "0.1.0"
description = "Solvers for olympiad-style algorithmic problems: flows, matchings, link-cut trees, modular combinatorics and geometry."
requires-python = ">=3.10"
dependencies = [
    "sortedcontainers",
]
keywords = [
    "algorithms",
    "competitive-programming",
    "max-flow",
    "link-cut-tree",
    "matching",
    "combinatorics",
    "graph-theory",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Education",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["olysolve"]

[tool.hatch.build.targets.sdist]
include = [
    "olysolve",
    "tests",
    "README.md",
    "pyproject.toml",
]

[tool.pytest.ini_options]
addopts = "-ra"
