[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "widgettree"
version = "0.1.0"
description = "A widget tree, in-memory terminal frame and cell model for text user interfaces"
requires-python = ">=3.10"
dependencies = []
keywords = ["tui", "terminal", "widget", "tree", "frame", "cell", "cursor"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: User Interfaces",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["widgettree"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
