[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tinyarcade"
version = "0.1.0"
description = "Two small arcade games, OpenSimplex noise in 2, 3 and 4 dimensions, and a section timer"
requires-python = ">=3.10"
keywords = ["games", "flappy", "platformer", "simplex", "noise", "timer"]
classifiers = [
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Intended Audience :: End Users/Desktop",
    "Topic :: Games/Entertainment",
]
dependencies = ["pygame"]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
tinyarcade-flappy = "tinyarcade.flappy:main"
tinyarcade-maker = "tinyarcade.maker:main"

[tool.hatch.build.targets.wheel]
packages = ["tinyarcade"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
