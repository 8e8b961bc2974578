"""Perimeter print-order planning for layered 3D printing."""

__version__ = "1.1.0"
