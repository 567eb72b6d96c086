[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "benchjson"
version = "0.1.0"
description = "Write benchmark results as JSON reports: context block, per-run records, aggregates and complexity fits."
requires-python = ">=3.10"
dependencies = []
keywords = ["benchmark", "json", "reporter", "performance", "microbenchmark"]
classifiers = [
    "Development Status :: 4 - Beta",
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

[tool.hatch.build.targets.wheel]
packages = ["benchjson"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
