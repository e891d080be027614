"""Node graph model, editor logic and a text-view command for visual scripting."""

__version__ = "0.1.0"
__all__ = ["__version__"]