[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "virgil"
version = "0.1.4"
description = "Extract symbols, imports and comments from syntax trees of C, C#, Go and Java code"
requires-python = ">=3.10"
dependencies = []
keywords = ["code-analysis", "symbols", "imports", "comments", "syntax-tree"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["virgil"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
