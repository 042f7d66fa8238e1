[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "guitartuner"
version = "1.0.0"
description = "Autocorrelation pitch detection for guitar strings from 8-bit samples, with an HD44780 display driver"
requires-python = ">=3.10"
dependencies = []
keywords = ["guitar", "tuner", "pitch", "autocorrelation", "audio", "hd44780"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Multimedia :: Sound/Audio :: Analysis",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
guitartuner = "guitartuner.app:main"

[tool.hatch.build.targets.wheel]
packages = ["guitartuner"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
