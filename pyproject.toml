[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pixelclock"
version = "0.1.0"
description = "Clockfaces, sprites and a tiny graphics engine for 64x64 pixel LED matrix clocks"
requires-python = ">=3.10"
keywords = ["clock", "pixel-art", "led-matrix", "sprites", "clockface", "rgb565"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
    "Topic :: Multimedia :: Graphics",
]
dependencies = [
    "pillow",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["pixelclock"]

[tool.hatch.build.targets.sdist]
include = ["pixelclock", "tests"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
