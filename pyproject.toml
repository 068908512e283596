[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "aockit"
version = "0.1.0"
description = "Toolkit for solving daily programming puzzles: input parsing, grid maps, A* path finding and small math helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["puzzles", "advent", "grid", "astar", "parsing"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
aockit = "aockit.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["aockit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
