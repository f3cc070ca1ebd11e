[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "corestructs"
version = "0.1.0"
description = "Small, readable implementations of classic data structures: vector, circular queue, singly linked list, sorted priority queue, max-heap and binary search tree."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "data-structures",
    "vector",
    "queue",
    "circular-buffer",
    "linked-list",
    "priority-queue",
    "heap",
    "binary-search-tree",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
corestructs = "corestructs.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["corestructs"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
