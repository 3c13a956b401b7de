"""A desktop music player with playlist sorting, search and announcement breaks."""

__version__ = "0.1.0"
__all__ = ["__version__"]