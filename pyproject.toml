[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "arachnid"
version = "0.1.0"
description = "A small top-down 2D game with a player, a spider boss and a tiled world, built on pygame."
requires-python = ">=3.10"
keywords = ["game", "2d", "pygame", "sprites", "tilemap", "camera"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
arachnid = "arachnid.game:main"

[tool.hatch.build.targets.wheel]
packages = ["arachnid"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
