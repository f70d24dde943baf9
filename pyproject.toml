[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "minilex"
version = "0.1.0"
description = "A small shell-style tokenizer with quote handling, operator detection and retokenizing"
requires-python = ">=3.10"
dependencies = []
keywords = ["shell", "lexer", "tokenizer", "quotes", "pipes", "redirection"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Shells",
    "Topic :: Text Processing :: General",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
minilex = "minilex.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["minilex"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
