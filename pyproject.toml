[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "typesomething"
version = "0.1.0"
description = "Building blocks for a two-lane terminal rhythm game: scrolling notes, hit judgement and an animated title menu."
requires-python = ">=3.10"
dependencies = []
keywords = ["rhythm", "game", "terminal", "console", "ansi"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Arcade",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["typesomething"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
