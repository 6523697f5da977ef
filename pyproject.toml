[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "connect_four"
version = "0.1.0"
description = "Two-player Connect Four in the terminal with a per-player countdown timer window"
requires-python = ">=3.10"
keywords = ["connect four", "board game", "terminal", "timer", "pygame"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Board Games",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
connect-four = "connect_four.app:main"

[tool.hatch.build.targets.wheel]
packages = ["connect_four"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
