[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "memomark"
version = "0.1.0"
description = "A small Markdown parser that builds a node tree and renders it as HTML, plain text or Markdown."
requires-python = ">=3.10"
dependencies = []
keywords = ["markdown", "parser", "ast", "html", "notes"]
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
    "Topic :: Text Processing :: Markup :: Markdown",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["memomark"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
