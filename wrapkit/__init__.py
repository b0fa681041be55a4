"""Display-width-aware word wrapping, filling, columns and indentation of text."""

__version__ = "0.16.1"

__all__ = ["__version__"]