[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "roguest"
version = "0.1.0"
description = "A small text roguelike played in the terminal"
requires-python = ">=3.10"
keywords = ["roguelike", "game", "terminal", "text-adventure", "rpg"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Russian",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Role-Playing",
]
dependencies = [
    "termcolor",
    "blessed",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
roguest = "roguest.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["roguest"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
