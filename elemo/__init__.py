"""Elemo persistence layer: storage contracts and cache-coherent repositories."""

__version__ = "1.0.0"
