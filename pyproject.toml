[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mdsl"
version = "0.1.0"
description = "Lexer and Pratt parser for a small C-like expression and statement language"
requires-python = ">=3.10"
dependencies = []
keywords = ["lexer", "parser", "pratt", "compiler", "language", "ast"]
classifiers = [
    "Development Status :: 2 - Pre-Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Compilers",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
mdsl = "mdsl.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["mdsl"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
