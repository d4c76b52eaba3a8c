"""Pathfinder 2e NPC generator with a web page, a generation proxy and model-written descriptions."""

__version__ = "0.1.0"
__all__ = ["__version__"]