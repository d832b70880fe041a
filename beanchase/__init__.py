"""A maze-chasing arcade game built on pygame: maps, ghosts, scenes and the game loop."""

__version__ = "0.1.0"