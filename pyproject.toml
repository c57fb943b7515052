[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "listabench"
version = "0.1.0"
description = "Sequential and linked record lists with comparison and move counters and classic sorting algorithms"
requires-python = ">=3.10"
dependencies = []
keywords = ["data structures", "linked list", "sorting", "education", "benchmark"]
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
listabench = "listabench.menu:main"

[tool.hatch.build.targets.wheel]
packages = ["listabench"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
