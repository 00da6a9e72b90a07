"""Parsing, validation, raycasting and software rendering for .cub scenes."""

__version__ = "0.1.0"