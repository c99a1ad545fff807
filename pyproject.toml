[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bikerental"
version = "0.1.0"
description = "A small bike rental system driven by a script of menu commands"
requires-python = ">=3.10"
dependencies = []
keywords = ["bike", "rental", "simulation", "batch"]
classifiers = [
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Environment :: Console",
    "Topic :: Office/Business",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
bikerental = "bikerental.app:main"

[tool.hatch.build.targets.wheel]
packages = ["bikerental"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
