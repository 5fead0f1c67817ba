[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "highlite"
version = "0.1.0"
description = "Regex-driven syntax highlighting with YAML syntax definitions"
requires-python = ">=3.10"
keywords = ["syntax", "highlighting", "lexer", "yaml", "regex"]
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
    "Topic :: Text Processing :: Filters",
    "Topic :: Software Development :: Libraries :: Python Modules",
]
dependencies = [
    "pyyaml",
    "regex",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["highlite"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
