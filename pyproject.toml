[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sokoban"
version = "0.1.0"
description = "A tile-based Sokoban puzzle game with levels drawn as small images"
requires-python = ">=3.10"
keywords = ["sokoban", "puzzle", "game", "pygame"]
classifiers = [
    "Development Status :: 3 - Alpha",
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
dependencies = [
    "pillow",
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
sokoban = "sokoban.app:main"

[tool.hatch.build.targets.wheel]
packages = ["sokoban"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
