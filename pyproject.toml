[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "wnlang"
version = "0.1.0"
description = "A tree-walking interpreter for a small statically typed scripting language"
requires-python = ">=3.10"
dependencies = []
keywords = ["interpreter", "language", "lexer", "parser", "scripting"]
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
    "Environment :: Console",
    "Topic :: Software Development :: Interpreters",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
wnlang = "wnlang.interpreter:main"

[tool.hatch.build.targets.wheel]
packages = ["wnlang"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
