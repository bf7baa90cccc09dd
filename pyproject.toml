[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "samurai-engine"
version = "0.1.0"
description = "A small 2D game engine: scenes, game objects, timing, rendering and sound on top of pygame."
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["game", "engine", "2d", "pygame", "scene", "vector"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment",
    "Topic :: Software Development :: Libraries :: pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["samurai_engine"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
