[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dsworkbook"
version = "0.1.0"
description = "Classic data structures and algorithms: stacks, queues, lists, trees, heaps, graphs and sorting."
requires-python = ">=3.10"
dependencies = []
keywords = ["data structures", "algorithms", "graphs", "trees", "sorting", "education"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
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

[tool.hatch.build.targets.wheel]
packages = ["dsworkbook"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
