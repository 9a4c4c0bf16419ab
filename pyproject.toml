[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "nicehand"
version = "0.1.0"
description = "Heuristic Texas Hold'em strategy advice, game-state validation, result caching and tournament ICM strategy helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["poker", "holdem", "strategy", "icm", "tournament", "heuristics"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
nicehand-demo = "nicehand.demo:main"

[tool.hatch.build.targets.wheel]
packages = ["nicehand"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
