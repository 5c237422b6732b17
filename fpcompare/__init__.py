"""Tolerance-aware comparison of floating-point numbers, with a demonstration command."""

__version__ = "1.0.0"
__all__ = ["compare", "demo"]