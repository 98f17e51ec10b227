[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "boltwire"
version = "0.1.0"
description = "Encoding and decoding of Bolt PackStream values used by graph database servers"
requires-python = ">=3.10"
dependencies = []
keywords = ["bolt", "packstream", "graph", "database", "serialization", "codec"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Database",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["boltwire"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
