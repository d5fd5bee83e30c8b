"""A small text-based dungeon crawler: model, random generation, views and game loop."""

__version__ = "0.1.0"