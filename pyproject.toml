[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ylibc"
version = "0.1.0"
description = "A small C-style runtime library: character classes, 48-bit random numbers, string helpers, printf/scanf formatting and a line-oriented console."
requires-python = ">=3.10"
dependencies = []
keywords = ["libc", "printf", "scanf", "ctype", "rand48", "strings", "console"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[project.scripts]
ylibc-console = "ylibc.terminal:main"

[tool.hatch.build.targets.wheel]
packages = ["ylibc"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
