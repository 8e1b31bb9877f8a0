"""Sprite sheets: loading, reference-counted caching and drawing of frames."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Sequence

import pygame

from arachnid.graphics import Graphics

log = logging.getLogger(__name__)

Vector = Sequence[float]


class SpriteError(Exception):
    """Raised when a sprite cannot be allocated or loaded."""


@dataclass
class Sprite:
    """One slot of the sprite manager: an image split into equally sized frames."""

    ref_count: int = 0
    filepath: str = ""
    texture: Optional[pygame.Surface] = None
    surface: Optional[pygame.Surface] = None
    frames_per_line: int = 0
    frame_w: int = 0
    frame_h: int = 0

    def _clear(self) -> None:
        self.ref_count = 0
        self.filepath = ""
        self.texture = None
        self.surface = None
        self.frames_per_line = 0
        self.frame_w = 0
        self.frame_h = 0


class SpriteManager:
    """A fixed pool of sprites that shares images loaded from the same file."""

    def __init__(self, graphics: Graphics, max_sprites: int) -> None:
        if not max_sprites:
            raise ValueError("cannot initialize a sprite manager for zero sprites")
        self.graphics = graphics
        self.max_sprites = int(max_sprites)
        self._slots = [Sprite() for _ in range(self.max_sprites)]
        log.info("sprite system initialized")

    def __enter__(self) -> "SpriteManager":
        return self

    def __exit__(self, *exc) -> None:
        self.close()

    def new(self) -> Sprite:
        """Take a free slot, recycling a released one if no blank slot is left."""
        for sprite in self._slots:
            if sprite.ref_count == 0 and sprite.texture is None:
                sprite._clear()
                sprite.ref_count = 1
                return sprite
        for sprite in self._slots:
            if sprite.ref_count <= 0:
                self.delete(sprite)
                sprite.ref_count = 1
                return sprite
        raise SpriteError("out of sprite addresses")

    def get_by_filename(self, filename: str) -> Optional[Sprite]:
        """Return the slot holding the image loaded from ``filename``, if any."""
        if not filename:
            raise ValueError("cannot find blank filename")
        for sprite in self._slots:
            if sprite.filepath == filename:
                return sprite
        return None

    def load_all(
        self,
        filename: str,
        frame_width: int,
        frame_height: int,
        frames_per_line: int,
        keep_surface: bool,
    ) -> Sprite:
        """Load a sprite sheet, or share the copy already in memory.

        A frame width or height of -1 means the whole image.
        """
        if not filename:
            raise ValueError("cannot find blank filename")
        filename = str(filename)
        sprite = self.get_by_filename(filename)
        if sprite is not None:
            sprite.ref_count += 1
            return sprite
        try:
            loaded = pygame.image.load(filename)
        except (pygame.error, OSError) as exc:
            raise SpriteError(f"failed to load sprite image {filename}") from exc
        sprite = self.new()
        try:
            converted = self.graphics.screen_convert(loaded)
        except (pygame.error, ValueError, RuntimeError) as exc:
            self.free(sprite)
            raise SpriteError(f"failed to load sprite image {filename}") from exc
        sprite.texture = converted
        sprite.frame_h = converted.get_height() if frame_height == -1 else int(frame_height)
        sprite.frame_w = converted.get_width() if frame_width == -1 else int(frame_width)
        sprite.frames_per_line = int(frames_per_line)
        sprite.filepath = filename
        sprite.surface = converted.copy() if keep_surface else None
        return sprite

    def load_image(self, filename: str) -> Sprite:
        """Load a whole image as a single-frame sprite."""
        return self.load_all(filename, -1, -1, 1, False)

    def free(self, sprite: Optional[Sprite]) -> None:
        """Drop one reference; the data stays cached until the slot is needed."""
        if sprite is None:
            return
        sprite.ref_count -= 1

    def delete(self, sprite: Optional[Sprite]) -> None:
        """Remove the sprite's image data and reset the slot."""
        if sprite is None:
            return
        sprite._clear()

    def clear_all(self) -> None:
        """Delete every loaded sprite without closing the manager."""
        for sprite in self._slots:
            self.delete(sprite)

    def close(self) -> None:
        """Delete all sprites and release the pool."""
        self.clear_all()
        self._slots = []
        self.max_sprites = 0
        log.info("sprite system closed")

    def render(
        self,
        sprite: Optional[Sprite],
        position: Vector,
        scale: Optional[Vector] = None,
        center: Optional[Vector] = None,
        rotation: Optional[float] = None,
        flip: Optional[Vector] = None,
        color: Optional[Sequence[int]] = None,
        clip: Optional[Sequence[float]] = None,
        frame: int = 0,
    ) -> None:
        """Draw one frame of ``sprite`` onto the render surface with all options.

        ``clip`` is (left, top, right, bottom) as fractions of the frame;
        (0, 0, 1, 1) draws the whole frame.
        """
        if sprite is None or sprite.texture is None:
            return
        target_surface = self.graphics.surface
        if target_surface is None:
            raise RuntimeError("graphics not yet initialized")
        cx, cy, cz, cw = (0.0, 0.0, 1.0, 1.0) if clip is None else clip
        sx, sy = 1.0, 1.0
        flip_x = flip_y = False
        if scale is not None:
            sx, sy = scale[0], scale[1]
            if sx < 0:
                flip_x = True
                sx = -sx
            if sy < 0:
                flip_y = True
                sy = -sy
        ox, oy = 0.0, 0.0
        rx, ry = 0, 0
        if center is not None:
            ox, oy = center[0], center[1]
            rx, ry = int(ox), int(oy)
        angle = 0.0
        if rotation is not None:
            angle = float(rotation)
            rx, ry = int(int(ox) * abs(sx)), int(int(oy) * abs(sy))
        if flip is not None:
            flip_x = flip_x or bool(flip[0])
            flip_y = flip_y or bool(flip[1])

        fw, fh = sprite.frame_w, sprite.frame_h
        fpl = sprite.frames_per_line or 1
        cell = pygame.Rect(
            int(frame % fpl * fw + cx * fw),
            int(frame // fpl * fh + cy * fh),
            int(fw * cz - cx * fw),
            int(fh * cw - cy * fh),
        )
        target = pygame.Rect(
            int(position[0] - sx * ox + cx * fw * sx),
            int(position[1] - sy * oy + cy * fh * sy),
            int(fw * sx * cz - cx * fw * sx),
            int(fh * sy * cw - cy * fh * sy),
        )
        cell = cell.clip(sprite.texture.get_rect())
        if cell.width <= 0 or cell.height <= 0 or target.width <= 0 or target.height <= 0:
            return
        image = sprite.texture.subsurface(cell)
        if image.get_size() != target.size:
            image = pygame.transform.scale(image, target.size)
        if flip_x or flip_y:
            image = pygame.transform.flip(image, flip_x, flip_y)
        if color is not None:
            image = image.copy()
            image.fill(pygame.Color(*color), special_flags=pygame.BLEND_RGBA_MULT)
        if angle:
            rotated = pygame.transform.rotate(image, -angle)
            offset = pygame.math.Vector2(target.width / 2 - rx, target.height / 2 - ry).rotate(angle)
            new_center = (target.x + rx + offset.x, target.y + ry + offset.y)
            rect = rotated.get_rect(center=(round(new_center[0]), round(new_center[1])))
            target_surface.blit(rotated, rect.topleft)
        else:
            target_surface.blit(image, target.topleft)

    def draw(
        self,
        sprite: Optional[Sprite],
        position: Vector,
        scale: Optional[Vector] = None,
        center: Optional[Vector] = None,
        rotation: Optional[float] = None,
        flip: Optional[Vector] = None,
        color: Optional[Sequence[int]] = None,
        frame: int = 0,
    ) -> None:
        """Draw one frame of ``sprite`` without clipping."""
        self.render(sprite, position, scale, center, rotation, flip, color, None, frame)

    def draw_image(self, sprite: Optional[Sprite], position: Vector) -> None:
        """Draw the first frame of ``sprite`` with its top-left corner at ``position``."""
        self.draw(sprite, position, None, None, None, None, None, 0)

    def draw_to_surface(
        self,
        sprite: Optional[Sprite],
        position: Vector,
        scale: Optional[Vector],
        center: Optional[Vector],
        frame: int,
        surface: Optional[pygame.Surface],
    ) -> None:
        """Draw one frame onto ``surface``; the sprite must have kept its surface."""
        if sprite is None:
            raise ValueError("no sprite provided to draw")
        if sprite.surface is None:
            raise ValueError("sprite does not contain surface to draw with")
        if surface is None:
            raise ValueError("no surface provided to draw to")
        sx, sy = (1.0, 1.0) if scale is None else (scale[0], scale[1])
        ox, oy = (0.0, 0.0) if center is None else (center[0], center[1])
        fpl = sprite.frames_per_line or 1
        cell = pygame.Rect(
            frame % fpl * sprite.frame_w,
            frame // fpl * sprite.frame_h,
            sprite.frame_w,
            sprite.frame_h,
        )
        target = pygame.Rect(
            int(position[0] - sx * ox),
            int(position[1] - sy * oy),
            int(sprite.frame_w * sx),
            int(sprite.frame_h * sy),
        )
        cell = cell.clip(sprite.surface.get_rect())
        if cell.width <= 0 or cell.height <= 0 or target.width <= 0 or target.height <= 0:
            return
        image = sprite.surface.subsurface(cell)
        if image.get_size() != target.size:
            image = pygame.transform.scale(image, target.size)
        surface.blit(image, target.topleft)