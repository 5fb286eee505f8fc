[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "adventsolve"
version = "2022.0.0"
description = "Solvers for daily programming puzzles, with shared text-parsing helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["puzzles", "advent", "parsing"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["adventsolve"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
