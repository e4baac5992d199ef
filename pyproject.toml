[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pdfkiln"
version = "0.1.0"
description = "Building blocks for writing PDF documents: page sizes, text layout, resources, cross-reference tables, patterns and shadings."
requires-python = ">=3.10"
dependencies = []
keywords = ["pdf", "document", "shading", "xref", "typesetting"]
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
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: Printing",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["pdfkiln"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
