"""Scene objects that Mario meets: bricks, coins, cloud platforms and goombas."""

from __future__ import annotations

import time
from typing import Any, Callable, Sequence

from .collision import process
from .gameobject import GameObject

ID_ANI_BRICK = 10000
BRICK_WIDTH = 16
BRICK_BBOX_WIDTH = 16
BRICK_BBOX_HEIGHT = 16

ID_ANI_COIN = 11000
COIN_WIDTH = 10
COIN_BBOX_WIDTH = 10
COIN_BBOX_HEIGHT = 16

GOOMBA_GRAVITY = 0.002
GOOMBA_WALKING_SPEED = 0.05

GOOMBA_BBOX_WIDTH = 16
GOOMBA_BBOX_HEIGHT = 14
GOOMBA_BBOX_HEIGHT_DIE = 7

GOOMBA_DIE_TIMEOUT = 500

GOOMBA_STATE_WALKING = 100
GOOMBA_STATE_DIE = 200

ID_ANI_GOOMBA_WALKING = 5000
ID_ANI_GOOMBA_DIE = 5001

Clock = Callable[[], int]


def monotonic_ms() -> int:
    """Milliseconds from a monotonic clock."""
    return int(time.monotonic() * 1000)


def _centered_box(x: float, y: float, width: int, height: int) -> tuple[float, float, float, float]:
    left = x - width // 2
    top = y - height // 2
    return left, top, left + width, top + height


class Brick(GameObject):
    """A solid, static block."""

    animation_id = ID_ANI_BRICK

    def bounding_box(self) -> tuple[float, float, float, float]:
        return _centered_box(self.x, self.y, BRICK_BBOX_WIDTH, BRICK_BBOX_HEIGHT)


class Coin(GameObject):
    """A collectible that does not block movement."""

    animation_id = ID_ANI_COIN

    def bounding_box(self) -> tuple[float, float, float, float]:
        return _centered_box(self.x, self.y, COIN_BBOX_WIDTH, COIN_BBOX_HEIGHT)

    def is_blocking(self) -> bool:
        return False


class Platform(GameObject):
    """A row of cells that can only be landed on from above."""

    def __init__(
        self,
        x: float,
        y: float,
        cell_width: float,
        cell_height: float,
        length: int,
        sprite_id_begin: int,
        sprite_id_middle: int,
        sprite_id_end: int,
    ) -> None:
        super().__init__(x, y)
        self.cell_width = cell_width
        self.cell_height = cell_height
        self.length = length
        self.sprite_id_begin = sprite_id_begin
        self.sprite_id_middle = sprite_id_middle
        self.sprite_id_end = sprite_id_end

    def bounding_box(self) -> tuple[float, float, float, float]:
        half_width = self.cell_width / 2
        left = self.x - half_width
        top = self.y - self.cell_height / 2
        right = left + self.cell_width * self.length - half_width
        bottom = top + self.cell_height
        return left, top, right, bottom

    def is_direction_collidable(self, nx: float, ny: float) -> bool:
        return nx == 0 and ny == -1

    def cell_sprite_ids(self) -> list[int]:
        """Sprite id of each cell, left to right."""
        if self.length <= 0:
            return []
        ids = [self.sprite_id_begin]
        ids.extend([self.sprite_id_middle] * max(self.length - 2, 0))
        if self.length > 1:
            ids.append(self.sprite_id_end)
        return ids


class Goomba(GameObject):
    """A walking enemy that turns at walls and vanishes shortly after dying."""

    def __init__(self, x: float, y: float, clock: Clock | None = None) -> None:
        super().__init__(x, y)
        self._clock = clock or monotonic_ms
        self.ax = 0.0
        self.ay = GOOMBA_GRAVITY
        self.die_start: int | None = None
        self.set_state(GOOMBA_STATE_WALKING)

    def bounding_box(self) -> tuple[float, float, float, float]:
        height = GOOMBA_BBOX_HEIGHT_DIE if self.state == GOOMBA_STATE_DIE else GOOMBA_BBOX_HEIGHT
        return _centered_box(self.x, self.y, GOOMBA_BBOX_WIDTH, height)

    def update(self, dt: float, co_objects: Sequence[GameObject] | None = None) -> None:
        self.vy += self.ay * dt
        self.vx += self.ax * dt

        if (
            self.state == GOOMBA_STATE_DIE
            and self.die_start is not None
            and self._clock() - self.die_start > GOOMBA_DIE_TIMEOUT
        ):
            self.deleted = True
            return

        process(self, dt, co_objects)

    def set_state(self, state: int) -> None:
        super().set_state(state)
        if state == GOOMBA_STATE_DIE:
            self.die_start = self._clock()
            self.y += (GOOMBA_BBOX_HEIGHT - GOOMBA_BBOX_HEIGHT_DIE) // 2
            self.vx = 0.0
            self.vy = 0.0
            self.ay = 0.0
        elif state == GOOMBA_STATE_WALKING:
            self.vx = -GOOMBA_WALKING_SPEED

    def animation_id(self) -> int:
        return ID_ANI_GOOMBA_DIE if self.state == GOOMBA_STATE_DIE else ID_ANI_GOOMBA_WALKING

    def is_collidable(self) -> bool:
        return True

    def is_blocking(self) -> bool:
        return False

    def on_no_collision(self, dt: float) -> None:
        self.x += self.vx * dt
        self.y += self.vy * dt

    def on_collision_with(self, event: Any) -> None:
        if not event.obj.is_blocking():
            return
        if isinstance(event.obj, Goomba):
            return
        if event.ny != 0:
            self.vy = 0.0
        elif event.nx != 0:
            self.vx = -self.vx