"""Filter a development environment snapshot before entering a shell."""

__version__ = "0.1.0"
