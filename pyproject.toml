[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sanjiquest"
version = "0.1.0"
description = "A short text adventure about a ship's cook hunting rare ingredients, plus a small command-line skeleton"
requires-python = ">=3.10"
dependencies = []
keywords = ["text adventure", "interactive fiction", "game", "terminal"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Portuguese (Brazilian)",
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
sanjiquest = "sanjiquest.adventure:main"
sanjiquest-template = "sanjiquest.template:main"

[tool.hatch.build.targets.wheel]
packages = ["sanjiquest"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
