[build-system]
requires = ["setuptools>=64"]
build-backend = "setuptools.build_meta"

[project]
name = "coursenet"
version = "0.1.0"
description = "A small social network store with an interactive menu, plus teaching graph, grid and bag tools"
requires-python = ">=3.10"
dependencies = []
keywords = ["social network", "graph", "bfs", "dfs", "teaching", "quicksort"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
coursenet = "coursenet.cli:main"
coursenet-showfile = "coursenet.showfile:main"

[tool.setuptools.packages.find]
include = ["coursenet*"]

[tool.pytest.ini_options]
addopts = "-ra"
