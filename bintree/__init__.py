"""Linked binary trees: construction, traversal, measurement, ASCII rendering and demos."""

__version__ = "0.1.0"
__all__ = ["tree", "printer", "demo"]