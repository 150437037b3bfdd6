[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "introalgos"
version = "0.1.0"
description = "Classic introductory algorithms: searching, sorting, maximum subarray and matrix multiplication."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "binary search",
    "linear search",
    "merge sort",
    "insertion sort",
    "maximum subarray",
    "divide and conquer",
    "strassen",
    "matrix multiplication",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
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
test = [
    "pytest",
    "hypothesis",
]

[project.scripts]
introalgos = "introalgos.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["introalgos"]

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
disallow_untyped_defs = true
warn_unused_ignores = true
