[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "kordlib"
version = "0.1.0"
description = "Music theory building blocks: pitches, octaves, named pitches, notes, chord modifiers, known chords and note sample files."
requires-python = ">=3.10"
dependencies = []
keywords = ["music", "music-theory", "notes", "chords", "pitch", "octave"]
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
    "Topic :: Multimedia :: Sound/Audio",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["kordlib"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
