"""Solar panel layout planning for roof outlines."""

__version__ = "1.0.0"
