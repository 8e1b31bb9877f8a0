"""The player-controlled entity."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Any

import pygame

from arachnid.camera import Camera
from arachnid.entity import Entity, EntityManager
from arachnid.sprite import SpriteError

log = logging.getLogger(__name__)

PLAYER_SPEED = 3
_FRAME_COUNT = 16


@dataclass
class PlayerData:
    """Per-player state."""

    classname: str = ""


def direction_from_keys(right: bool, left: bool, up: bool, down: bool) -> tuple[float, float]:
    """Unnormalised movement direction; left wins over right and down over up."""
    x = y = 0.0
    if right:
        x = 1.0
    if left:
        x = -1.0
    if up:
        y = -1.0
    if down:
        y = 1.0
    return (x, y)


def _is_down(pressed: Any, key: int) -> bool:
    try:
        return bool(pressed[key])
    except (KeyError, IndexError):
        return False


def player_think(entity: Entity, pressed: Any) -> None:
    """Set the player's velocity from the arrow or WASD keys in ``pressed``."""
    x, y = direction_from_keys(
        _is_down(pressed, pygame.K_RIGHT) or _is_down(pressed, pygame.K_d),
        _is_down(pressed, pygame.K_LEFT) or _is_down(pressed, pygame.K_a),
        _is_down(pressed, pygame.K_UP) or _is_down(pressed, pygame.K_w),
        _is_down(pressed, pygame.K_DOWN) or _is_down(pressed, pygame.K_s),
    )
    length = math.hypot(x, y)
    if length:
        x, y = x / length, y / length
    entity.velocity = (x * PLAYER_SPEED, y * PLAYER_SPEED)


def player_update(entity: Entity, camera: Camera) -> None:
    """Advance the animation, move by the velocity and centre the camera on the player."""
    entity.frame += 0.1
    if entity.frame >= _FRAME_COUNT:
        entity.frame = 0
    entity.position = (
        entity.position[0] + entity.velocity[0],
        entity.position[1] + entity.velocity[1],
    )
    camera.center_on(entity.position)


def _player_free(entity: Entity) -> None:
    entity.data = None


def _think_from_keyboard(entity: Entity) -> None:
    player_think(entity, pygame.key.get_pressed())


def player_new(manager: EntityManager, camera: Camera) -> Entity:
    """Spawn the player at the origin, driven by the keyboard and followed by ``camera``."""
    entity = manager.new()
    if manager.sprites is not None:
        try:
            entity.sprite = manager.sprites.load_all("images/protago.png", 64, 64, 4, False)
        except SpriteError as exc:
            log.warning("%s", exc)
    entity.frame = 0.0
    entity.position = (0.0, 0.0)
    entity.bounds = (0.0, 0.0, 56.0, 56.0)
    entity.think = _think_from_keyboard
    entity.update = lambda e: player_update(e, camera)
    entity.free = _player_free
    entity.data = PlayerData()
    return entity