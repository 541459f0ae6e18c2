[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "graphsearch"
version = "0.1.0"
description = "Small graph search algorithms: breadth-first, bidirectional and greedy best-first search"
requires-python = ">=3.10"
dependencies = []
keywords = ["graph", "bfs", "search", "greedy-best-first", "bidirectional-search"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
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

[project.scripts]
graphsearch = "graphsearch.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["graphsearch"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
