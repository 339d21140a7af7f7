"""Maintain the authors list of a version-controlled project."""

__version__ = "0.1.0"
