[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gameboard"
version = "0.1.0"
description = "A menu-driven game board with a splash screen, a game registry and Tic-Tac-Toe, shown in a pygame window"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["game", "tic-tac-toe", "menu", "pygame", "board game"]
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
    "Topic :: Games/Entertainment :: Board Games",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
gameboard = "gameboard.app:main"

[tool.hatch.build.targets.wheel]
packages = ["gameboard"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
