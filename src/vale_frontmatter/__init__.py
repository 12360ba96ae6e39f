"""Lint markdown front matter with Vale while keeping original line numbers."""
__version__ = "1.0.0"
