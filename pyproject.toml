[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "frontierdd"
version = "0.1.0"
description = "Top-down, breadth-first construction of decision diagrams from specs, with vtree and benchmark-averaging tools"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "decision diagram",
    "zdd",
    "bdd",
    "vtree",
    "graphviz",
    "combinatorics",
]
classifiers = [
    "Development Status :: 3 - Alpha",
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

[project.scripts]
frontierdd-vtree = "frontierdd.vtree:main"
frontierdd-average = "frontierdd.average:main"

[tool.hatch.build.targets.wheel]
packages = ["frontierdd"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
