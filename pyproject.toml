[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cryptoquip"
version = "0.2.0"
description = "Download the daily Cryptoquip puzzle, crop it and lay it out on a letter-size page"
requires-python = ">=3.11"
keywords = ["cryptoquip", "puzzle", "cryptogram", "printing"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
]
dependencies = [
    "beautifulsoup4>=4.12",
    "requests>=2.31",
    "pillow>=10.0",
]

[project.optional-dependencies]
test = [
    "pytest>=7.4",
    "responses>=0.24",
]

[project.scripts]
cryptoquip = "cryptoquip.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["cryptoquip"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py311"
