[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "yellowbelt"
version = "0.1.0"
description = "A dated event database with a condition query language, a bus route directory, expression bracketing and a set of everyday algorithms."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "event database",
    "query language",
    "condition parser",
    "bus routes",
    "algorithms",
    "merge sort",
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
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
yellowbelt-db = "yellowbelt.cli:main"
yellowbelt-buses = "yellowbelt.buses:main"
yellowbelt-expression = "yellowbelt.expression:main"

[tool.hatch.build.targets.wheel]
packages = ["yellowbelt"]

[tool.hatch.build.targets.sdist]
include = ["yellowbelt", "tests", "pyproject.toml", "README.md"]

[tool.pytest.ini_options]
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
