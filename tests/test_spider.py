import pytest

from arachnid.entity import Entity, EntityError, EntityManager
from arachnid.spider import LEG_LAYOUT, LegData, SpiderData, leg_new, spider_new
from arachnid.sprite import Sprite, SpriteError


class RecordingSprites:
    def __init__(self, fail=False):
        self.loaded = []
        self.fail = fail

    def load_all(self, filename, frame_width, frame_height, frames_per_line, keep_surface):
        if self.fail:
            raise SpriteError(f"failed to load sprite image {filename}")
        self.loaded.append((filename, frame_width, frame_height, frames_per_line, keep_surface))
        return Sprite(ref_count=1, filepath=filename, frame_w=frame_width, frame_h=frame_height)

    def free(self, sprite):
        pass


def test_spider_position_and_bounds():
    manager = EntityManager(16, None)
    spider = spider_new(manager)
    assert spider.position == (500.0, -50.0)
    assert spider.bounds == (500.0, -50.0, 567.0, 567.0)


def test_spider_spawns_six_legs():
    manager = EntityManager(16, None)
    spider = spider_new(manager)
    assert isinstance(spider.data, SpiderData)
    assert len(spider.data.legs) == 6
    assert len(list(manager.active())) == 7


def test_legs_are_placed_relative_to_spider():
    manager = EntityManager(16, None)
    spider = spider_new(manager)
    for leg, (offset, _) in zip(spider.data.legs, LEG_LAYOUT):
        assert leg.position == (
            spider.position[0] + offset[0],
            spider.position[1] + offset[1],
        )
        assert leg.bounds[:2] == leg.position
        assert leg.bounds[2:] == (128.0, 128.0)


def test_leg_sprite_depends_on_direction():
    sprites = RecordingSprites()
    manager = EntityManager(4, sprites)
    base = manager.new()
    right = leg_new(manager, base, (0, 0), 0)
    left = leg_new(manager, base, (0, 0), 1)
    assert right.sprite.filepath == "images/SpiderLeg.png"
    assert left.sprite.filepath == "images/SpiderLegI.png"


def test_leg_with_unknown_direction_has_no_sprite():
    sprites = RecordingSprites()
    manager = EntityManager(4, sprites)
    base = manager.new()
    leg = leg_new(manager, base, (1, 2), 7)
    assert leg.sprite is None
    assert sprites.loaded == []


def test_spider_body_sprite_is_loaded_after_legs():
    sprites = RecordingSprites()
    manager = EntityManager(16, sprites)
    spider = spider_new(manager)
    assert sprites.loaded[-1] == ("images/SpiderBase.png", 567, 567, 16, True)
    assert len(sprites.loaded) == 7
    assert spider.sprite.filepath == "images/SpiderBase.png"


def test_missing_images_leave_sprites_empty():
    manager = EntityManager(16, RecordingSprites(fail=True))
    spider = spider_new(manager)
    assert spider.sprite is None
    assert all(leg.sprite is None for leg in spider.data.legs)


def test_leg_callbacks_do_not_move_it():
    manager = EntityManager(4, None)
    base = manager.new()
    base.position = (3.0, 4.0)
    leg = leg_new(manager, base, (1.0, 1.0), 0)
    before = leg.position
    leg.think_step()
    leg.update_step()
    assert leg.position == before
    assert isinstance(leg.data, LegData)


def test_freeing_a_leg_returns_its_slot():
    manager = EntityManager(4, None)
    base = manager.new()
    leg = leg_new(manager, base, (0.0, 0.0), 1)
    manager.free(leg)
    assert leg.inuse is False
    assert leg not in list(manager.active())


def test_spider_needs_room_for_all_legs():
    manager = EntityManager(3, None)
    with pytest.raises(EntityError):
        spider_new(manager)


def test_leg_new_raises_when_pool_full():
    manager = EntityManager(1, None)
    base = manager.new()
    with pytest.raises(EntityError):
        leg_new(manager, base, (0, 0), 0)
    assert isinstance(base, Entity)