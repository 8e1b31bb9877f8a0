"""Game entities and the fixed-size pool that owns them."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Callable, Iterator, Optional

from arachnid.sprite import Sprite, SpriteManager

log = logging.getLogger(__name__)

Vector = tuple[float, float]
Bounds = tuple[float, float, float, float]


class EntityError(Exception):
    """Raised when no entity slot is available."""


class EntityTeam(IntEnum):
    """Which side an entity fights for."""

    NONE = 0
    PLAYER = 1
    MONSTER = 2
    PICKUP = 3


class CollisionLayer(IntEnum):
    """Layer an entity collides on; checked with a bitwise and."""

    NONE = 1
    PLAYER = 2
    MONSTER = 3
    PICKUP = 4
    PLAYER_ATTACK = 5
    MONSTER_ATTACK = 6
    ALL = 7


@dataclass(eq=False)
class Entity:
    """One live object in the game with optional behaviour callbacks."""

    inuse: bool = False
    sprite: Optional[Sprite] = None
    frame: float = 0.0
    position: Vector = (0.0, 0.0)
    velocity: Vector = (0.0, 0.0)
    bounds: Bounds = (0.0, 0.0, 0.0, 0.0)
    collision_layer: int = 0
    team: EntityTeam = EntityTeam.NONE
    think: Optional[Callable[["Entity"], None]] = None
    update: Optional[Callable[["Entity"], None]] = None
    free: Optional[Callable[["Entity"], None]] = None
    data: Any = None

    def think_step(self) -> None:
        """Run the think callback, if any."""
        if self.think is not None:
            self.think(self)

    def update_step(self) -> None:
        """Run the update callback, if any."""
        if self.update is not None:
            self.update(self)

    def update_position(self, resolution: Vector) -> None:
        """Move one unit along the velocity's direction, kept on a screen of ``resolution``."""
        vx, vy = self.velocity
        length = math.hypot(vx, vy)
        if length:
            vx, vy = vx / length, vy / length
        self.velocity = (vx, vy)
        screen_x, screen_y = resolution
        x, y = self.position[0] + vx, self.position[1] + vy
        bx, by, bw, bh = self.bounds
        if x + bx < 0:
            x = 0 - bx
        if y + by < 0:
            y = 0 - by
        if x + bx > screen_x:
            x = screen_x - bx
        if y + by > screen_y:
            y = screen_y - by
        self.position = (x, y)
        self.bounds = (x, y, bw, bh)

    def layer_check(self, layer: int) -> int:
        """Bits shared between this entity's collision layer and ``layer``."""
        return int(self.collision_layer) & int(layer)


class EntityManager:
    """A fixed pool of entity slots."""

    def __init__(self, max_entities: int, sprites: Optional[SpriteManager]) -> None:
        if not max_entities:
            raise ValueError("cannot allocate 0 entities")
        self.max_entities = int(max_entities)
        self.sprites = sprites
        self._slots = [Entity() for _ in range(self.max_entities)]
        log.info("entity system initialized")

    def __enter__(self) -> "EntityManager":
        return self

    def __exit__(self, *exc) -> None:
        self.close()

    def new(self) -> Entity:
        """Claim a free slot and return a blank, active entity."""
        for index, slot in enumerate(self._slots):
            if slot.inuse:
                continue
            entity = Entity(inuse=True)
            self._slots[index] = entity
            return entity
        raise EntityError("no more available entities")

    def free(self, entity: Optional[Entity]) -> None:
        """Release the entity's sprite, run its free callback and return its slot."""
        if entity is None:
            return
        if self.sprites is not None:
            self.sprites.free(entity.sprite)
        entity.sprite = None
        if entity.free is not None:
            entity.free(entity)
        entity.inuse = False

    def clear_all(self, ignore: Optional[Entity] = None) -> None:
        """Free every active entity except ``ignore``."""
        for entity in self._slots:
            if entity is ignore or not entity.inuse:
                continue
            self.free(entity)

    def active(self) -> Iterator[Entity]:
        """Iterate over the entities currently in use."""
        return (entity for entity in list(self._slots) if entity.inuse)

    def think_all(self) -> None:
        """Run think on every active entity."""
        for entity in self.active():
            entity.think_step()

    def update_all(self) -> None:
        """Run update on every active entity."""
        for entity in self.active():
            entity.update_step()

    def draw_all(self) -> None:
        """Draw the current frame of every active entity that has a sprite."""
        if self.sprites is None:
            return
        for entity in self.active():
            if entity.sprite is not None:
                self.sprites.render(
                    entity.sprite,
                    entity.position,
                    None,
                    None,
                    None,
                    None,
                    None,
                    None,
                    int(entity.frame),
                )

    def close(self) -> None:
        """Free all entities and release the pool."""
        self.clear_all(None)
        self._slots = []
        self.max_entities = 0