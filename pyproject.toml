[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ca65docs"
version = "0.1.0"
description = "Convert the ca65 assembler HTML manual into per-keyword Markdown documentation stored as JSON"
requires-python = ">=3.10"
dependencies = []
keywords = ["ca65", "cc65", "6502", "assembler", "html", "markdown", "documentation"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Processing :: Markup :: HTML",
    "Topic :: Software Development :: Documentation",
    "Topic :: Software Development :: Assemblers",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
ca65docs = "ca65docs.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["ca65docs"]

[tool.pytest.ini_options]
addopts = "-ra"
