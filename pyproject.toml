[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bebopc"
version = "0.1.0"
description = "Keyword tables, a keyword lexer and console line I/O for the Bebop language"
requires-python = ">=3.10"
dependencies = []
keywords = ["lexer", "tokenizer", "compiler", "bebop", "keywords"]
classifiers = [
    "Development Status :: 2 - Pre-Alpha",
    "Environment :: Console",
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

[project.scripts]
bebopc-lex = "bebopc.lexer:main"
bebopc-echo = "bebopc.console:main"

[tool.hatch.build.targets.wheel]
packages = ["bebopc"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
