"""Plain-text double-entry journal parser and reporting engine."""

__version__ = "0.1.0"

__all__ = ["__version__"]
