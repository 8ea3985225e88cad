[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "daalab"
version = "0.1.0"
description = "Classic algorithms: sorting with operation counts, Horspool string search, knapsack, sum of subsets, n-queens and graph algorithms over matrices."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "sorting",
    "graphs",
    "dynamic-programming",
    "backtracking",
    "horspool",
    "dijkstra",
    "floyd",
    "prim",
    "knapsack",
    "n-queens",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
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
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = [
    "pytest",
    "hypothesis",
]

[project.scripts]
daalab = "daalab.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["daalab"]

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
