"""Solutions to classic algorithm exercises as plain Python functions, grouped by topic."""

__version__ = "0.1.0"