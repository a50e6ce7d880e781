"""A terminal text adventure of survival in a burned land: story graph, engine and command."""

__version__ = "0.1.0"
__all__ = ["__version__"]