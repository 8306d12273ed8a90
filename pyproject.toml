[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "shimkit"
version = "0.1.0"
description = "Small everyday helpers: hashing, deep copies, money conversion, list utilities, JSON extraction from model replies, paths, text and time strings."
requires-python = ">=3.10"
dependencies = []
keywords = ["utilities", "helpers", "money", "json", "llm", "paging", "serial-number", "duration"]
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
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: Utilities",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["shimkit"]

[tool.pytest.ini_options]
addopts = "-ra"
