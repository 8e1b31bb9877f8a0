"""A small top-down 2D game on pygame: camera, graphics, sprites, drawing, entities, a tiled world, a player and a spider."""

__version__ = "0.1.0"
__all__ = ["camera", "graphics", "sprite", "draw", "entity", "world", "player", "spider", "game"]