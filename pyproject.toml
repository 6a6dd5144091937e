[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "revdist"
version = "0.1.0"
description = "Fixed-point unit shares, epochs and Merkle leaf records for revenue distribution accounting"
requires-python = ">=3.10"
dependencies = []
keywords = ["revenue", "distribution", "fixed-point", "shares", "rewards", "merkle"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Financial",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["revdist"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
