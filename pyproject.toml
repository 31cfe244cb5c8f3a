[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fieacore"
version = "0.1.0"
description = "Core containers and runtime-type utilities for a data-driven game engine: a singly linked list, a chained hash map, datum type tags, RTTI helpers and an abstract factory registry."
requires-python = ">=3.10"
dependencies = []
keywords = ["containers", "hashmap", "linked-list", "factory", "rtti", "game-engine"]
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
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["fieacore"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
