[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "symhashkit"
version = "0.1.0"
description = "Toolbox for cracking and demangling hashed symbol names from game executables"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "symbols",
    "hash",
    "demangler",
    "reverse-engineering",
    "djb2",
    "codewarrior",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Disassemblers",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
symhashkit = "symhashkit.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["symhashkit"]

[tool.hatch.build.targets.sdist]
include = ["symhashkit", "tests", "pyproject.toml", "README.md"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
