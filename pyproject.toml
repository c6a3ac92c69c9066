[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mazegame"
version = "0.1.0"
description = "A small 2D maze game with an actor/component engine, steering behaviours and A* path finding"
requires-python = ">=3.10"
keywords = ["game", "maze", "pathfinding", "a-star", "steering", "pygame"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Arcade",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
mazegame = "mazegame.engine:main"

[tool.hatch.build.targets.wheel]
packages = ["mazegame"]

[tool.pytest.ini_options]
addopts = "-ra"
