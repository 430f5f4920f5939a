"""Building blocks for a raycasting maze: XPM textures, colours, player state and movement."""

__version__ = "0.1.0"
__all__ = ["__version__"]