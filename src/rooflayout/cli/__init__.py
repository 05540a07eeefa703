"""Command line interface for roof layout generation."""
