[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "algokit"
version = "0.1.0"
description = "Classic array, string, lexical-order and data-structure algorithms"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "data-structures",
    "anagrams",
    "deque",
    "stack",
    "lexicographic",
]
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
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["algokit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"
