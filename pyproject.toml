[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "algotoolkit"
version = "0.1.0"
description = "Classic data structures and algorithms: sorting, lists, stacks, queues, trees, heaps, hash tables, shortest paths and locality-sensitive hashing."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "data-structures",
    "sorting",
    "heap",
    "binary-search-tree",
    "hash-table",
    "shortest-paths",
    "dijkstra",
    "bellman-ford",
    "floyd-warshall",
    "lsh",
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
algotoolkit-lsh-benchmark = "algotoolkit.lsh:main"

[tool.hatch.build.targets.wheel]
packages = ["algotoolkit"]

[tool.hatch.build.targets.sdist]
include = ["algotoolkit", "tests"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
