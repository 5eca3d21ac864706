"""A tile-based Sokoban puzzle game: level loading, game logic, rendering and the game window."""

__version__ = "0.1.0"