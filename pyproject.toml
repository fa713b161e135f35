[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "jagkit"
version = "0.1.0"
description = "Atari Jaguar runtime helpers and reference routines in Python: 32-bit division, a section profiler, Dhrystone, an 8x8 font, a text screen and a sprite scroller"
requires-python = ">=3.10"
dependencies = []
keywords = ["jaguar", "atari", "dhrystone", "bitmap-font", "profiler", "scroller", "retro"]
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
    "Topic :: Software Development :: Embedded Systems",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["jagkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
