"""A tile-based world: a tile map, its tileset and a pre-rendered tile layer."""

from __future__ import annotations

import logging
from typing import Optional

import pygame

from arachnid.camera import Camera
from arachnid.draw import draw_rect
from arachnid.graphics import Graphics
from arachnid.sprite import Sprite, SpriteError, SpriteManager

log = logging.getLogger(__name__)

_BOUNDS_TILE_SIZE = 64
_BOUNDS_COLOR = (255, 0, 0, 255)


class World:
    """A grid of tile indices; zero means no tile, n means frame n - 1 of the tileset."""

    def __init__(self, width: int, height: int) -> None:
        if not width or not height:
            raise ValueError("can't make a world with no height or width")
        self.tile_width = int(width)
        self.tile_height = int(height)
        self.tilemap = bytearray(self.tile_width * self.tile_height)
        self.background: Optional[Sprite] = None
        self.tileset: Optional[Sprite] = None
        self.tile_layer: Optional[Sprite] = None
        self.space = None

    def _index(self, x: int, y: int) -> int:
        if not (0 <= x < self.tile_width and 0 <= y < self.tile_height):
            raise IndexError(f"tile ({x}, {y}) is outside the world")
        return x + y * self.tile_width

    def tile(self, x: int, y: int) -> int:
        """The tile index at column ``x``, row ``y``."""
        return self.tilemap[self._index(x, y)]

    def set_tile(self, x: int, y: int, value: int) -> None:
        """Set the tile index at column ``x``, row ``y`` (0 to 255)."""
        self.tilemap[self._index(x, y)] = value

    def _tiles(self):
        for y in range(self.tile_height):
            for x in range(self.tile_width):
                value = self.tilemap[x + y * self.tile_width]
                if value:
                    yield x, y, value

    def build_tile_layer(self, sprites: SpriteManager, graphics: Graphics) -> Optional[Sprite]:
        """Render every tile onto one surface held by a new sprite."""
        if self.tileset is None:
            return None
        if self.tile_layer is not None:
            sprites.free(self.tile_layer)
        layer = sprites.new()
        self.tile_layer = layer
        fw, fh = self.tileset.frame_w, self.tileset.frame_h
        layer.frame_w = self.tile_width * fw
        layer.frame_h = self.tile_height * fh
        layer.surface = graphics.create_surface(layer.frame_w, layer.frame_h)
        for x, y, value in self._tiles():
            sprites.draw_to_surface(
                self.tileset, (x * fw, y * fh), None, None, value - 1, layer.surface
            )
        layer.texture = layer.surface
        return layer

    def draw(self, sprites: SpriteManager) -> None:
        """Draw the background and every non-empty tile."""
        sprites.draw_image(self.background, (0, 0))
        if self.tileset is None:
            return
        fw, fh = self.tileset.frame_w, self.tileset.frame_h
        for x, y, _ in self._tiles():
            sprites.draw(self.tileset, (x * fw, y * fh), None, None, None, None, None, 1)

    def draw_bounds(self, surface: pygame.Surface) -> None:
        """Outline every non-empty tile in red on a 64-pixel grid."""
        size = _BOUNDS_TILE_SIZE
        for x, y, _ in self._tiles():
            draw_rect(surface, (x * size, y * size, size, size), _BOUNDS_COLOR)

    def setup_camera(self, camera: Camera) -> bool:
        """Bind ``camera`` to the tile layer's extent; False if no layer was built."""
        if self.tile_layer is None or self.tile_layer.surface is None:
            log.warning("no tile layer set for world")
            return False
        width, height = self.tile_layer.surface.get_size()
        camera.set_bounds((0, 0, width, height))
        camera.apply_bounds()
        camera.enable_binding(True)
        return True

    def free(self, sprites: SpriteManager) -> None:
        """Release the world's sprites and tile data."""
        sprites.free(self.background)
        sprites.free(self.tileset)
        self.space = None
        self.tilemap = bytearray()


def _try_load(load, *args) -> Optional[Sprite]:
    try:
        return load(*args)
    except SpriteError as exc:
        log.warning("%s", exc)
        return None


def world_test_new(sprites: Optional[SpriteManager]) -> World:
    """A 65 by 45 world walled in by tile 1 on every edge."""
    width, height = 65, 45
    world = World(width, height)
    if sprites is not None:
        world.background = _try_load(sprites.load_image, "images/backgrounds/bg_flat.png")
        world.tileset = _try_load(
            sprites.load_all, "images/backgrounds/Backgroundsample.png", 16, 16, 1, True
        )
    for x in range(width):
        world.set_tile(x, 0, 1)
        world.set_tile(x, height - 1, 1)
    for y in range(height):
        world.set_tile(0, y, 1)
        world.set_tile(width - 1, y, 1)
    return world