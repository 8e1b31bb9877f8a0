"""The spider boss: a body entity with six leg entities around it."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional

from arachnid.entity import Entity, EntityManager
from arachnid.sprite import Sprite, SpriteError

log = logging.getLogger(__name__)

SPIDER_POSITION = (500.0, -50.0)
SPIDER_SIZE = 567
LEG_SIZE = 128

LEG_RIGHT = 0
LEG_LEFT = 1

_LEG_SPRITES = {
    LEG_RIGHT: "images/SpiderLeg.png",
    LEG_LEFT: "images/SpiderLegI.png",
}

# Offset from the spider body, and which way the leg faces.
LEG_LAYOUT = (
    ((440.0, 380.0), LEG_RIGHT),
    ((9.0, 380.0), LEG_LEFT),
    ((480.0, 280.0), LEG_RIGHT),
    ((-31.0, 280.0), LEG_LEFT),
    ((440.0, 200.0), LEG_RIGHT),
    ((9.0, 200.0), LEG_LEFT),
)


@dataclass
class SpiderData:
    """Per-spider state: the legs spawned with it."""

    classname: str = ""
    legs: list[Entity] = field(default_factory=list)


@dataclass
class LegData:
    """Per-leg state."""

    classname: str = ""


def _load_sprite(manager: EntityManager, filename: str, size: int, keep: bool) -> Optional[Sprite]:
    if manager.sprites is None:
        return None
    try:
        return manager.sprites.load_all(filename, size, size, 16, keep)
    except SpriteError as exc:
        log.warning("%s", exc)
        return None


def leg_new(
    manager: EntityManager,
    base: Entity,
    offset: tuple[float, float],
    direction: int,
) -> Entity:
    """Spawn a leg at ``offset`` from ``base``; direction 0 faces right, 1 faces left."""
    entity = manager.new()
    filename = _LEG_SPRITES.get(direction)
    if filename is not None:
        entity.sprite = _load_sprite(manager, filename, LEG_SIZE, False)
    entity.frame = 0.0
    x = base.position[0] + offset[0]
    y = base.position[1] + offset[1]
    entity.position = (x, y)
    entity.bounds = (x, y, float(LEG_SIZE), float(LEG_SIZE))
    # Legs have no behaviour of their own: no think, update or free callbacks.
    entity.think = None
    entity.update = None
    entity.free = None
    entity.data = LegData()
    return entity


def spider_new(manager: EntityManager) -> Entity:
    """Spawn the spider body and its six legs."""
    entity = manager.new()
    entity.frame = 0.0
    entity.position = SPIDER_POSITION
    x, y = entity.position
    entity.bounds = (x, y, float(SPIDER_SIZE), float(SPIDER_SIZE))
    data = SpiderData()
    data.legs = [leg_new(manager, entity, offset, direction) for offset, direction in LEG_LAYOUT]
    entity.sprite = _load_sprite(manager, "images/SpiderBase.png", SPIDER_SIZE, True)
    entity.data = data
    return entity