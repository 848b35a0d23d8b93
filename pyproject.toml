[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bitguess"
version = "0.1.0"
description = "A number-guessing game that finds your secret number between 0 and 63 in six yes/no questions"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "guessing", "binary", "state machine", "puzzle"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Education",
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
test = ["pytest"]

[project.scripts]
bitguess = "bitguess.states:main"

[tool.hatch.build.targets.wheel]
packages = ["bitguess"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
