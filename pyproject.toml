[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tmxviewer"
version = "0.1.0"
description = "A small viewer for Tiled TMX maps with a movable player entity"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["tmx", "tiled", "tilemap", "viewer", "pygame"]
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
    "Topic :: Multimedia :: Graphics :: Viewers",
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
tmxviewer = "tmxviewer.game:main"

[tool.hatch.build.targets.wheel]
packages = ["tmxviewer"]

[tool.pytest.ini_options]
addopts = "-ra"
