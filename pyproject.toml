[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "boxarena"
version = "0.1.0"
description = "Building blocks for a small networked arcade game: menu pages, widgets, and client/server game state with input replay"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["game", "arcade", "multiplayer", "pygame", "prediction", "replay"]
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
    "Topic :: Games/Entertainment :: Arcade",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["boxarena"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
