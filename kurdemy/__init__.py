"""Kurdemy - stack configuration and validation for fullstack scaffolds."""

__version__ = "1.0.0"
