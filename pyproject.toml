[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "findreplace"
version = "0.1.0"
description = "Find and replace logic for text editors: search flags, regular expressions, wrap-around search and saved form state"
requires-python = ">=3.10"
dependencies = []
keywords = ["find", "replace", "search", "regex", "text editor"]
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
    "Topic :: Text Editors :: Text Processing",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["findreplace"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
