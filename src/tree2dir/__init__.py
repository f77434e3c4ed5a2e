"""Turn ASCII tree diagrams into directories and files."""

__version__ = "1.0.0"
