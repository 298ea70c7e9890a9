[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dstructs"
version = "0.1.0"
description = "Classic data structures: a graph, a binary heap, binary search trees and a runway reservation schedule"
requires-python = ">=3.10"
dependencies = []
keywords = ["data structures", "graph", "heap", "binary search tree", "bfs", "dfs"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["dstructs"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
