"""Protocols shared between the application and domain layers."""

from .strategies import TilingStrategy

__all__ = ["TilingStrategy"]
