[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rak"
version = "0.1.0"
description = "Bytecode chunks, values, tokens and scopes for the Rak programming language"
requires-python = ">=3.10"
dependencies = []
keywords = ["rak", "compiler", "bytecode", "programming-language"]
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
    "Topic :: Software Development :: Compilers",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["rak"]

[tool.hatch.build.targets.sdist]
include = ["rak", "tests", "README.md", "pyproject.toml"]

[tool.pytest.ini_options]
addopts = "-ra"
