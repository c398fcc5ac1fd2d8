[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "containerkit"
version = "0.1.0"
description = "Classic container types: doubly linked list, AVL tree and sorted map"
requires-python = ">=3.10"
dependencies = []
keywords = ["containers", "linked-list", "avl", "avl-tree", "binary-search-tree", "sorted-map"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Typing :: Typed",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["containerkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
