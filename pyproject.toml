[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bintrees_kit"
version = "0.1.0"
description = "Plain binary trees, binary search trees, AVL trees and max heaps built from linked nodes"
requires-python = ">=3.10"
dependencies = []
keywords = ["binary tree", "bst", "avl", "heap", "data structures", "traversal"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["bintrees_kit"]

[tool.pytest.ini_options]
addopts = "-ra"
