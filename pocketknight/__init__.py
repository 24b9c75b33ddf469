"""Collision model, animations, tile sets, assets, goblins and explosions for a top-down arcade game."""

__version__ = "0.1.0"