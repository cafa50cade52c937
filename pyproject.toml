[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dpgraphs"
version = "0.1.0"
description = "Dynamic-programming and graph-search routines: subsequences, grid DP, components, cycles and maze search"
requires-python = ">=3.10"
dependencies = []
keywords = ["dynamic programming", "graphs", "bfs", "dfs", "lcs", "lis", "maze"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
dpgraphs = "dpgraphs.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["dpgraphs"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
