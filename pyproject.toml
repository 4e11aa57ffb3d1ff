[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hexproducts"
version = "0.1.0"
description = "A small product catalogue with a command line, an HTTP API and SQLite storage"
requires-python = ">=3.10"
dependencies = []
keywords = ["products", "catalogue", "sqlite", "wsgi", "ports-and-adapters"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Environment :: Web Environment",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
hexproducts = "hexproducts.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["hexproducts"]

[tool.pytest.ini_options]
addopts = "-ra"
