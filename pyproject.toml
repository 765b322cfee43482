[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "snakeplay"
version = "0.1.0"
description = "A terminal snake game with a small set of list and string puzzle solutions"
requires-python = ">=3.10"
dependencies = []
keywords = ["snake", "game", "terminal", "curses", "puzzles"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console :: Curses",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX",
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

[project.scripts]
snakeplay = "snakeplay.tui:main"

[tool.hatch.build.targets.wheel]
packages = ["snakeplay"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
