"""Logic for a bubble-shooting arcade game: sprites, bitmap text, tiles, tile maps, stages and scene state."""

__version__ = "0.1.0"
__all__ = ["sprite", "text", "tiles", "tilemap", "levels", "scene"]