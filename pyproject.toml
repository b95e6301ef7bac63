[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pqbench"
version = "0.1.0"
description = "Compare the running time of a binary max-heap and an array-backed priority queue"
requires-python = ">=3.10"
dependencies = []
keywords = ["priority queue", "heap", "benchmark", "data structures"]
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
    "Topic :: System :: Benchmark",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
pqbench = "pqbench.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["pqbench"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
