[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tunedeck"
version = "0.1.0"
description = "A small desktop music player with a shuffled playlist, sorting, search and announcement breaks"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["music", "player", "playlist", "mp3", "wav", "audio", "tkinter"]
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
    "Topic :: Multimedia :: Sound/Audio :: Players",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
tunedeck = "tunedeck.app:main"

[tool.hatch.build.targets.wheel]
packages = ["tunedeck"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
