"""The game's entry point and main loop."""

from __future__ import annotations

import argparse
import logging
from typing import Optional, Sequence

import pygame

from arachnid.camera import Camera
from arachnid.draw import draw_rect
from arachnid.entity import EntityManager
from arachnid.graphics import Graphics
from arachnid.player import player_new
from arachnid.spider import spider_new
from arachnid.sprite import Sprite, SpriteError, SpriteManager
from arachnid.world import world_test_new

log = logging.getLogger(__name__)

SCREEN_SIZE = (1200, 720)
MOUSE_FRAMES = 16
MOUSE_COLOR = (255, 100, 255, 200)
HITBOX_COLOR = (255, 255, 252, 255)
LOG_FILE = "gf2d.log"


def advance_mouse_frame(frame: float) -> float:
    """Step the mouse pointer animation, wrapping back to the first frame."""
    frame += 0.1
    if frame >= MOUSE_FRAMES:
        frame = 0.0
    return frame


def _load_pointer(sprites: SpriteManager) -> Optional[Sprite]:
    try:
        return sprites.load_all("images/pointer.png", 32, 32, 16, False)
    except SpriteError as exc:
        log.warning("%s", exc)
        return None


def _parse_args(argv: Optional[Sequence[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="arachnid", description="Run the game.")
    parser.add_argument(
        "--frames",
        type=int,
        default=None,
        help="quit after this many frames instead of waiting for Escape",
    )
    return parser.parse_args(argv)


def _run(frame_limit: Optional[int]) -> None:
    width, height = SCREEN_SIZE
    with Graphics("gf2d", width, height, width, height, (0, 0, 0, 255), False) as graphics:
        graphics.set_frame_delay(16)
        with SpriteManager(graphics, 1024) as sprites, EntityManager(1024, sprites) as entities:
            pygame.mouse.set_visible(False)
            camera = Camera()
            camera.set_size(SCREEN_SIZE)

            mouse = _load_pointer(sprites)
            player = player_new(entities, camera)
            log.info("mouse loaded")
            spider_new(entities)
            world = world_test_new(sprites)
            log.info("world loaded")
            world.setup_camera(camera)

            mouse_frame = 0.0
            frames = 0
            done = False
            while not done:
                for event in pygame.event.get():
                    if event.type == pygame.QUIT:
                        done = True
                keys = pygame.key.get_pressed()
                mx, my = pygame.mouse.get_pos()
                mouse_frame = advance_mouse_frame(mouse_frame)

                entities.think_all()
                entities.update_all()

                graphics.clear_screen()
                world.draw(sprites)
                world.draw_bounds(graphics.surface)
                entities.draw_all()
                for entity in entities.active():
                    x, y = entity.position
                    draw_rect(
                        graphics.surface,
                        (x, y, entity.bounds[2], entity.bounds[3]),
                        HITBOX_COLOR,
                    )
                sprites.draw(
                    mouse, (mx, my), None, None, None, None, MOUSE_COLOR, int(mouse_frame)
                )
                graphics.next_frame()

                if keys[pygame.K_ESCAPE]:
                    done = True
                frames += 1
                if frame_limit is not None and frames >= frame_limit:
                    done = True

            entities.free(player)
            world.free(sprites)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Open the window and run the game until Escape is pressed."""
    args = _parse_args(argv)
    root = logging.getLogger()
    handler = logging.FileHandler(LOG_FILE, mode="w")
    handler.setLevel(logging.INFO)
    handler.setFormatter(logging.Formatter("%(asctime)s %(name)s: %(message)s"))
    previous_level = root.level
    root.addHandler(handler)
    root.setLevel(logging.INFO)
    try:
        log.info("---==== BEGIN ====---")
        _run(args.frames)
        log.info("---==== END ====---")
    finally:
        root.removeHandler(handler)
        root.setLevel(previous_level)
        handler.close()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())