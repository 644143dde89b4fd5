[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "byteparse"
version = "0.1.0"
description = "Small parser functions for binary numbers, text floats and parser sequencing"
requires-python = ">=3.10"
dependencies = []
keywords = ["parser", "binary", "endianness", "combinator", "float"]
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
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["byteparse"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
