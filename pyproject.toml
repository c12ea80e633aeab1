[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "merustmar"
version = "0.1.0"
description = "Lexer, syntax tree and tree-walking evaluator for a small programming language with Myanmar-script keywords"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "interpreter",
    "lexer",
    "evaluator",
    "abstract syntax tree",
    "programming language",
    "myanmar",
    "burmese",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Natural Language :: Burmese",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Interpreters",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["merustmar"]

[tool.hatch.build.targets.sdist]
include = ["merustmar", "tests", "pyproject.toml", "README.md"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
