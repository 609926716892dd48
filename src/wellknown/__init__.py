"""Deep link generators for calendar apps."""

__version__ = "0.1.0"
