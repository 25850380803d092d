[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "purrmart"
version = "0.1.0"
description = "Containers, input readers and menu art for the Purrmart console shop game"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "shop", "simulation", "data-structures", "console"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["purrmart"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
