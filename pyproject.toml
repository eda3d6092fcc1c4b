[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "algolab"
version = "0.1.0"
description = "Classic data structures and algorithms with small file-driven command-line drivers"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "data-structures",
    "aa-tree",
    "binomial-heap",
    "hash-table",
    "b-tree",
    "radix-sort",
    "prefix-function",
    "minimum-spanning-tree",
    "order-statistics",
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
    "Topic :: Education",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
algolab-aatree = "algolab.aatree:main"
algolab-battle = "algolab.battle:main"
algolab-findsubstr = "algolab.findsubstr:main"
algolab-hashset = "algolab.hashset:main"
algolab-kth = "algolab.orderstats:main"
algolab-kth-stream = "algolab.orderstats:main_streaming"
algolab-btreecheck = "algolab.btreecheck:main"
algolab-median = "algolab.median:main"
algolab-minmaxqueue = "algolab.minmaxqueue:main"
algolab-mst = "algolab.mst:main"
algolab-priorityqueue = "algolab.priorityqueue:main"
algolab-radixsort = "algolab.radixsort:main"

[tool.hatch.build.targets.wheel]
packages = ["algolab"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
