"""A small 2D arcade game: game logic, menus and a pygame window."""

__version__ = "0.1.0"