[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tile2048"
version = "0.1.0"
description = "The 2048 sliding-tile puzzle with configurable board size and a networked leaderboard client"
requires-python = ">=3.10"
dependencies = []
keywords = ["2048", "puzzle", "game", "tkinter", "leaderboard"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: X11 Applications",
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

[project.gui-scripts]
tile2048 = "tile2048.ui:main"

[tool.hatch.build.targets.wheel]
packages = ["tile2048"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
