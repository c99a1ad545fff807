"""A small bike rental system driven by a script of menu commands."""

__version__ = "0.1.0"
__all__ = ["__version__"]