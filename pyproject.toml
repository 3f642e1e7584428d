[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tetrifit"
version = "0.1.0"
description = "Fit a set of tetrominoes into the smallest square the search can reach."
requires-python = ">=3.10"
dependencies = []
keywords = ["tetromino", "puzzle", "packing", "backtracking", "solver"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
tetrifit = "tetrifit.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["tetrifit"]

[tool.pytest.ini_options]
addopts = "-ra"
