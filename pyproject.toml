[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mdextras"
version = "0.6.1"
description = "Building blocks for Markdown extensions: attributes, tables, footnotes, typography, smart quotes and raw HTML scanning"
requires-python = ">=3.10"
dependencies = []
keywords = ["markdown", "commonmark", "gfm", "tables", "footnotes", "typographer", "smartquotes"]
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
    "Topic :: Text Processing :: Markup :: Markdown",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["mdextras"]

[tool.pytest.ini_options]
addopts = "-ra"
