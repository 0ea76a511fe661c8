[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "algocollection"
version = "0.1.0"
description = "A collection of classic array, string, stack, backtracking, linked-list, tree and graph algorithms."
requires-python = ">=3.10"
dependencies = []
keywords = ["algorithms", "data-structures", "arrays", "linked-list", "binary-tree", "backtracking"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["algocollection"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
