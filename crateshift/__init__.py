"""A box-pushing puzzle game: board rules, level files, pygame drawing and the game loop."""

__version__ = "0.1.0"
__all__ = ["__version__"]