import pytest

from sweptplay.collision import CollisionEvent
from sweptplay.entities import (
    BRICK_BBOX_HEIGHT,
    BRICK_BBOX_WIDTH,
    COIN_BBOX_HEIGHT,
    COIN_BBOX_WIDTH,
    GOOMBA_BBOX_HEIGHT,
    GOOMBA_BBOX_HEIGHT_DIE,
    GOOMBA_BBOX_WIDTH,
    GOOMBA_DIE_TIMEOUT,
    GOOMBA_STATE_DIE,
    GOOMBA_STATE_WALKING,
    GOOMBA_WALKING_SPEED,
    ID_ANI_GOOMBA_DIE,
    ID_ANI_GOOMBA_WALKING,
    Brick,
    Coin,
    Goomba,
    Platform,
)


class FakeClock:
    def __init__(self, now=1000):
        self.now = now

    def __call__(self):
        return self.now


def test_brick_box_is_centered():
    brick = Brick(40.0, 120.0)
    left, top, right, bottom = brick.bounding_box()
    assert right - left == BRICK_BBOX_WIDTH
    assert bottom - top == BRICK_BBOX_HEIGHT
    assert (left + right) / 2 == brick.x
    assert (top + bottom) / 2 == brick.y


def test_brick_blocks_and_coin_does_not():
    assert Brick(0, 0).is_blocking() is True
    assert Coin(0, 0).is_blocking() is False


def test_coin_box_size():
    left, top, right, bottom = Coin(100.0, 64.0).bounding_box()
    assert right - left == COIN_BBOX_WIDTH
    assert bottom - top == COIN_BBOX_HEIGHT


def test_platform_only_collides_from_above():
    p = Platform(90.0, 126.0, 16, 15, 16, 1, 2, 3)
    assert p.is_direction_collidable(0, -1) is True
    assert p.is_direction_collidable(0, 1) is False
    assert p.is_direction_collidable(1, 0) is False
    assert p.is_direction_collidable(-1, 0) is False


def test_platform_box_single_cell():
    p = Platform(8.0, 8.0, 16, 16, 1, 1, 2, 3)
    assert p.bounding_box() == (0.0, 0.0, 8.0, 16.0)


def test_platform_box_height_equals_cell_height():
    p = Platform(90.0, 126.0, 16, 15, 16, 1, 2, 3)
    left, top, right, bottom = p.bounding_box()
    assert bottom - top == p.cell_height
    assert left == p.x - p.cell_width / 2


@pytest.mark.parametrize(
    "length, expected",
    [
        (0, []),
        (1, [7]),
        (2, [7, 9]),
        (4, [7, 8, 8, 9]),
    ],
)
def test_platform_cell_sprite_ids(length, expected):
    p = Platform(0.0, 0.0, 16, 15, length, 7, 8, 9)
    assert p.cell_sprite_ids() == expected


def test_goomba_starts_walking_left():
    g = Goomba(200.0, 40.0, clock=FakeClock())
    assert g.state == GOOMBA_STATE_WALKING
    assert g.vx == -GOOMBA_WALKING_SPEED
    assert g.animation_id() == ID_ANI_GOOMBA_WALKING
    assert g.is_collidable() is True
    assert g.is_blocking() is False


def test_goomba_box_sizes():
    g = Goomba(200.0, 40.0, clock=FakeClock())
    left, top, right, bottom = g.bounding_box()
    assert right - left == GOOMBA_BBOX_WIDTH
    assert bottom - top == GOOMBA_BBOX_HEIGHT


def test_goomba_die_keeps_feet_on_ground():
    g = Goomba(200.0, 40.0, clock=FakeClock())
    bottom_before = g.bounding_box()[3]
    g.set_state(GOOMBA_STATE_DIE)
    left, top, right, bottom = g.bounding_box()
    assert bottom == bottom_before
    assert bottom - top == GOOMBA_BBOX_HEIGHT_DIE
    assert (g.vx, g.vy, g.ay) == (0.0, 0.0, 0.0)
    assert g.animation_id() == ID_ANI_GOOMBA_DIE


def test_goomba_removed_after_die_timeout():
    clock = FakeClock(5000)
    g = Goomba(200.0, 40.0, clock=clock)
    g.set_state(GOOMBA_STATE_DIE)
    clock.now += GOOMBA_DIE_TIMEOUT
    g.update(16, [])
    assert g.deleted is False
    clock.now += 1
    g.update(16, [])
    assert g.deleted is True


def test_goomba_falls_freely_without_obstacles():
    g = Goomba(200.0, 40.0, clock=FakeClock())
    g.update(10, [])
    assert g.vy > 0
    assert g.y > 40.0
    assert g.x < 200.0


def test_goomba_lands_on_brick():
    brick = Brick(100.0, 120.0)
    g = Goomba(100.0, 104.0, clock=FakeClock())
    g.update(50, [brick])
    assert g.vy == 0.0
    assert g.bounding_box()[3] <= brick.bounding_box()[1]
    assert g.x < 100.0


def test_goomba_turns_at_blocking_wall():
    g = Goomba(0.0, 0.0, clock=FakeClock())
    g.on_collision_with(CollisionEvent(0.5, 1.0, 0.0, obj=Brick(0, 0), src_obj=g))
    assert g.vx == GOOMBA_WALKING_SPEED


def test_goomba_ignores_other_goombas_and_coins():
    g = Goomba(0.0, 0.0, clock=FakeClock())
    other = Goomba(10.0, 0.0, clock=FakeClock())
    g.on_collision_with(CollisionEvent(0.5, 1.0, 0.0, obj=other, src_obj=g))
    g.on_collision_with(CollisionEvent(0.5, 1.0, 0.0, obj=Coin(5, 0), src_obj=g))
    assert g.vx == -GOOMBA_WALKING_SPEED


def test_goomba_vertical_hit_stops_fall():
    g = Goomba(0.0, 0.0, clock=FakeClock())
    g.vy = 0.3
    g.on_collision_with(CollisionEvent(0.2, 0.0, -1.0, obj=Brick(0, 20), src_obj=g))
    assert g.vy == 0.0
    assert g.vx == -GOOMBA_WALKING_SPEED