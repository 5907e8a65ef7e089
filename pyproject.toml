[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dirtree"
version = "1.0.0"
description = "Print an indented tree listing of a directory's files and subdirectories."
requires-python = ">=3.10"
dependencies = []
keywords = ["tree", "cli", "utility", "directory", "listing"]
classifiers = [
    "Development Status :: 5 - Production/Stable",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
dirtree = "dirtree.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["dirtree"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
