[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sjreader"
version = "0.1.0"
description = "A small, lenient, pull-style JSON reader that yields raw token slices"
requires-python = ">=3.10"
dependencies = []
keywords = ["json", "parser", "pull-parser", "tokenizer", "pretty-print"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: File Formats :: JSON",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
sjreader-print = "sjreader.printer:main"
sjreader-demo = "sjreader.demos:main"

[tool.hatch.build.targets.wheel]
packages = ["sjreader"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
