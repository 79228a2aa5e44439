"""Fixing of reported problems in .env files, with file helpers."""

__version__ = "0.1.0"