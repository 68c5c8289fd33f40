"""A short text adventure about a ship's cook, and a small command-line skeleton."""

__version__ = "0.1.0"