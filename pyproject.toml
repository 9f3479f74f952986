[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "graphsolve"
version = "0.1.0"
description = "Classic graph and grid algorithms: connectivity, bipartite colouring, shortest paths, cycles, topological order and maze escapes."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "graph",
    "algorithms",
    "dijkstra",
    "bellman-ford",
    "floyd-warshall",
    "bfs",
    "dfs",
    "topological-sort",
    "grid",
    "maze",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
graphsolve = "graphsolve.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["graphsolve"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
strict = true
