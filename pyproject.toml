[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ssca2bench"
version = "2.2.0"
description = "Graph analysis benchmark: scalable data generation, graph construction, subgraph extraction and betweenness centrality"
requires-python = ">=3.10"
dependencies = []
keywords = ["benchmark", "graph", "betweenness-centrality", "r-mat", "torus", "lcg"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Benchmark",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
ssca2bench = "ssca2bench.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["ssca2bench"]

[tool.pytest.ini_options]
addopts = "-ra"
