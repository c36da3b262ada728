[build-system]
requires = ["setuptools>=64"]
build-backend = "setuptools.build_meta"

[project]
name = "labkit"
version = "0.1.0"
description = "Small command-driven exercises: battle simulation, graph queries, number theory, polynomials and a library ledger"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "graphs",
    "dijkstra",
    "vertex-cover",
    "karatsuba",
    "closest-pair",
    "inversions",
    "sieve",
    "exercises",
]
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
labkit-battle = "labkit.battle:main"
labkit-even-paths = "labkit.even_paths:main"
labkit-kingdom = "labkit.kingdom:main"
labkit-islands = "labkit.islands:main"
labkit-chess = "labkit.chess:main"
labkit-graph = "labkit.graph_ops:main"
labkit-numbers = "labkit.number_tools:main"
labkit-poly = "labkit.polynomials:main"
labkit-library = "labkit.library:main"

[tool.setuptools.packages.find]
include = ["labkit*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
