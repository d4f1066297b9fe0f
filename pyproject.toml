[build-system]
requires = ["setuptools>=61"]
build-backend = "setuptools.build_meta"

[project]
name = "algokit"
version = "0.1.0"
description = "Classic algorithms on arrays, heaps, linked lists, binary trees, greedy choices and recursion."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "binary search",
    "binary tree",
    "linked list",
    "heap",
    "greedy",
    "backtracking",
]
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

[tool.setuptools]
packages = ["algokit"]

[tool.pytest.ini_options]
addopts = "-ra"
