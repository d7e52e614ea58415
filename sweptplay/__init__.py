"""Platformer game core: assets, game objects, swept AABB collision, Mario, a demo scene and simpler characters."""

__version__ = "0.1.0"
__all__ = ["assets", "gameobject", "collision", "entities", "mario", "scene", "classic"]