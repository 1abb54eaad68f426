[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dungeon"
version = "0.0.1"
description = "A top-down dungeon action game: fight through rooms, collect keys and defeat the boss."
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["game", "dungeon", "arcade", "pygame", "action"]
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
    "Topic :: Games/Entertainment :: Arcade",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
dungeon = "dungeon.game:main"

[tool.hatch.build.targets.wheel]
packages = ["dungeon"]

[tool.pytest.ini_options]
addopts = "-ra"
