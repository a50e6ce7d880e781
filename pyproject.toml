[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ashfall"
version = "0.1.0"
description = "A short text adventure of survival in a burned land, played in the terminal"
requires-python = ">=3.10"
dependencies = []
keywords = ["text adventure", "interactive fiction", "terminal game", "survival"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: English",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
ashfall = "ashfall.game:main"

[tool.hatch.build.targets.wheel]
packages = ["ashfall"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
