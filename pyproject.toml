[build-system]
requires = ["setuptools>=64"]
build-backend = "setuptools.build_meta"

[project]
name = "crateshift"
version = "0.1.0"
description = "A box-pushing puzzle game with thirty unlockable levels, limited undo and a pause board"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["sokoban", "puzzle", "game", "pygame", "boxes"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
crateshift = "crateshift.app:main"

[tool.setuptools.packages.find]
include = ["crateshift*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
