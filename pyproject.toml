[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bubbleworld"
version = "0.1.0"
description = "Tile maps, sprite animation, bitmap text and stage logic for a bubble-shooting arcade game"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "arcade", "tilemap", "sprite", "platformer", "bitmap-font"]
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
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["bubbleworld"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
