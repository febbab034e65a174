"""Particle-grid Lenia model: vectors, colours, grid layout, kernel profiles, settings and monitor helpers."""

__version__ = "0.1.0"
__all__ = ["vectors", "colors", "lenia", "kernels", "settings", "monitors"]