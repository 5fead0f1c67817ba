"""Regex-based syntax highlighting driven by YAML syntax definitions."""

__version__ = "0.1.0"