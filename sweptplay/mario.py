"""The player character: movement states, levels, and reactions to enemies and coins."""

from __future__ import annotations

from typing import Any, Sequence

from .collision import process
from .entities import GOOMBA_STATE_DIE, Clock, Coin, Goomba, monotonic_ms
from .gameobject import GameObject

MARIO_WALKING_SPEED = 0.1
MARIO_RUNNING_SPEED = 0.2

MARIO_ACCEL_WALK_X = 0.0005
MARIO_ACCEL_RUN_X = 0.0007

MARIO_JUMP_SPEED_Y = 0.5
MARIO_JUMP_RUN_SPEED_Y = 0.6

MARIO_GRAVITY = 0.002

MARIO_JUMP_DEFLECT_SPEED = 0.4

MARIO_STATE_DIE = -10
MARIO_STATE_IDLE = 0
MARIO_STATE_WALKING_RIGHT = 100
MARIO_STATE_WALKING_LEFT = 200

MARIO_STATE_JUMP = 300
MARIO_STATE_RELEASE_JUMP = 301

MARIO_STATE_RUNNING_RIGHT = 400
MARIO_STATE_RUNNING_LEFT = 500

MARIO_STATE_SIT = 600
MARIO_STATE_SIT_RELEASE = 601

ID_ANI_MARIO_IDLE_RIGHT = 400
ID_ANI_MARIO_IDLE_LEFT = 401

ID_ANI_MARIO_WALKING_RIGHT = 500
ID_ANI_MARIO_WALKING_LEFT = 501

ID_ANI_MARIO_RUNNING_RIGHT = 600
ID_ANI_MARIO_RUNNING_LEFT = 601

ID_ANI_MARIO_JUMP_WALK_RIGHT = 700
ID_ANI_MARIO_JUMP_WALK_LEFT = 701

ID_ANI_MARIO_JUMP_RUN_RIGHT = 800
ID_ANI_MARIO_JUMP_RUN_LEFT = 801

ID_ANI_MARIO_SIT_RIGHT = 900
ID_ANI_MARIO_SIT_LEFT = 901

ID_ANI_MARIO_BRACE_RIGHT = 1000
ID_ANI_MARIO_BRACE_LEFT = 1001

ID_ANI_MARIO_DIE = 999

ID_ANI_MARIO_SMALL_IDLE_RIGHT = 1100
ID_ANI_MARIO_SMALL_IDLE_LEFT = 1102

ID_ANI_MARIO_SMALL_WALKING_RIGHT = 1200
ID_ANI_MARIO_SMALL_WALKING_LEFT = 1201

ID_ANI_MARIO_SMALL_RUNNING_RIGHT = 1300
ID_ANI_MARIO_SMALL_RUNNING_LEFT = 1301

ID_ANI_MARIO_SMALL_BRACE_RIGHT = 1400
ID_ANI_MARIO_SMALL_BRACE_LEFT = 1401

ID_ANI_MARIO_SMALL_JUMP_WALK_RIGHT = 1500
ID_ANI_MARIO_SMALL_JUMP_WALK_LEFT = 1501

ID_ANI_MARIO_SMALL_JUMP_RUN_RIGHT = 1600
ID_ANI_MARIO_SMALL_JUMP_RUN_LEFT = 1601

GROUND_Y = 160.0

MARIO_LEVEL_SMALL = 1
MARIO_LEVEL_BIG = 2

MARIO_BIG_BBOX_WIDTH = 14
MARIO_BIG_BBOX_HEIGHT = 24
MARIO_BIG_SITTING_BBOX_WIDTH = 14
MARIO_BIG_SITTING_BBOX_HEIGHT = 16

MARIO_SIT_HEIGHT_ADJUST = (MARIO_BIG_BBOX_HEIGHT - MARIO_BIG_SITTING_BBOX_HEIGHT) // 2

MARIO_SMALL_BBOX_WIDTH = 13
MARIO_SMALL_BBOX_HEIGHT = 12

MARIO_UNTOUCHABLE_TIME = 2500

_BIG_ANIMATIONS = {
    "jump_run": (ID_ANI_MARIO_JUMP_RUN_RIGHT, ID_ANI_MARIO_JUMP_RUN_LEFT),
    "jump_walk": (ID_ANI_MARIO_JUMP_WALK_RIGHT, ID_ANI_MARIO_JUMP_WALK_LEFT),
    "sit": (ID_ANI_MARIO_SIT_RIGHT, ID_ANI_MARIO_SIT_LEFT),
    "idle": (ID_ANI_MARIO_IDLE_RIGHT, ID_ANI_MARIO_IDLE_LEFT),
    "brace": (ID_ANI_MARIO_BRACE_RIGHT, ID_ANI_MARIO_BRACE_LEFT),
    "run": (ID_ANI_MARIO_RUNNING_RIGHT, ID_ANI_MARIO_RUNNING_LEFT),
    "walk": (ID_ANI_MARIO_WALKING_RIGHT, ID_ANI_MARIO_WALKING_LEFT),
}

_SMALL_ANIMATIONS = {
    "jump_run": (ID_ANI_MARIO_SMALL_JUMP_RUN_RIGHT, ID_ANI_MARIO_SMALL_JUMP_RUN_LEFT),
    "jump_walk": (ID_ANI_MARIO_SMALL_JUMP_WALK_RIGHT, ID_ANI_MARIO_SMALL_JUMP_WALK_LEFT),
    "sit": (ID_ANI_MARIO_SIT_RIGHT, ID_ANI_MARIO_SIT_LEFT),
    "idle": (ID_ANI_MARIO_SMALL_IDLE_RIGHT, ID_ANI_MARIO_SMALL_IDLE_LEFT),
    "brace": (ID_ANI_MARIO_SMALL_BRACE_RIGHT, ID_ANI_MARIO_SMALL_BRACE_LEFT),
    "run": (ID_ANI_MARIO_SMALL_RUNNING_RIGHT, ID_ANI_MARIO_SMALL_RUNNING_LEFT),
    "walk": (ID_ANI_MARIO_SMALL_WALKING_RIGHT, ID_ANI_MARIO_SMALL_WALKING_LEFT),
}


class Mario(GameObject):
    """The player, driven by states set from keyboard input."""

    def __init__(self, x: float, y: float, clock: Clock | None = None) -> None:
        super().__init__(x, y)
        self._clock = clock or monotonic_ms
        self.sitting = False
        self.max_vx = 0.0
        self.ax = 0.0
        self.ay = MARIO_GRAVITY
        self.level = MARIO_LEVEL_BIG
        self.untouchable = 0
        self.untouchable_start: int | None = None
        self.on_platform = False
        self.coins = 0

    def update(self, dt: float, co_objects: Sequence[GameObject] | None = None) -> None:
        self.vy += self.ay * dt
        self.vx += self.ax * dt

        if abs(self.vx) > abs(self.max_vx):
            self.vx = self.max_vx

        if (
            self.untouchable_start is None
            or self._clock() - self.untouchable_start > MARIO_UNTOUCHABLE_TIME
        ):
            self.untouchable_start = None
            self.untouchable = 0

        process(self, dt, co_objects)

    def on_no_collision(self, dt: float) -> None:
        self.x += self.vx * dt
        self.y += self.vy * dt
        self.on_platform = False

    def on_collision_with(self, event: Any) -> None:
        obj = event.obj
        if event.ny != 0 and obj.is_blocking():
            self.vy = 0.0
            if event.ny < 0:
                self.on_platform = True
        elif event.nx != 0 and obj.is_blocking():
            self.vx = 0.0

        if isinstance(obj, Goomba):
            self._on_collision_with_goomba(event)
        elif isinstance(obj, Coin):
            self._on_collision_with_coin(event)

    def _on_collision_with_goomba(self, event: Any) -> None:
        goomba = event.obj
        if event.ny < 0:
            # Jumped on top: kill it and bounce off.
            if goomba.state != GOOMBA_STATE_DIE:
                goomba.set_state(GOOMBA_STATE_DIE)
                self.vy = -MARIO_JUMP_DEFLECT_SPEED
        elif self.untouchable == 0 and goomba.state != GOOMBA_STATE_DIE:
            if self.level > MARIO_LEVEL_SMALL:
                self.level = MARIO_LEVEL_SMALL
                self.start_untouchable()
            else:
                self.set_state(MARIO_STATE_DIE)

    def _on_collision_with_coin(self, event: Any) -> None:
        event.obj.delete()
        self.coins += 1

    def _pick(self, table: dict[str, tuple[int, int]]) -> int:
        facing_right_in_air = self.nx >= 0
        facing_right = self.nx > 0
        ani = -1
        if not self.on_platform:
            key = "jump_run" if abs(self.ax) == MARIO_ACCEL_RUN_X else "jump_walk"
            ani = table[key][0 if facing_right_in_air else 1]
        elif self.sitting:
            ani = table["sit"][0 if facing_right else 1]
        elif self.vx == 0:
            ani = table["idle"][0 if facing_right else 1]
        elif self.vx > 0:
            if self.ax < 0:
                ani = table["brace"][0]
            elif self.ax == MARIO_ACCEL_RUN_X:
                ani = table["run"][0]
            elif self.ax == MARIO_ACCEL_WALK_X:
                ani = table["walk"][0]
        else:
            if self.ax > 0:
                ani = table["brace"][1]
            elif self.ax == -MARIO_ACCEL_RUN_X:
                ani = table["run"][1]
            elif self.ax == -MARIO_ACCEL_WALK_X:
                ani = table["walk"][1]
        if ani == -1:
            ani = table["idle"][0]
        return ani

    def animation_id(self) -> int:
        """Id of the animation matching the current state, or -1 for an unknown level."""
        if self.state == MARIO_STATE_DIE:
            return ID_ANI_MARIO_DIE
        if self.level == MARIO_LEVEL_BIG:
            return self._pick(_BIG_ANIMATIONS)
        if self.level == MARIO_LEVEL_SMALL:
            return self._pick(_SMALL_ANIMATIONS)
        return -1

    def set_state(self, state: int) -> None:
        # Dying is final.
        if self.state == MARIO_STATE_DIE:
            return

        if state == MARIO_STATE_RUNNING_RIGHT:
            if not self.sitting:
                self.max_vx = MARIO_RUNNING_SPEED
                self.ax = MARIO_ACCEL_RUN_X
                self.nx = 1
        elif state == MARIO_STATE_RUNNING_LEFT:
            if not self.sitting:
                self.max_vx = -MARIO_RUNNING_SPEED
                self.ax = -MARIO_ACCEL_RUN_X
                self.nx = -1
        elif state == MARIO_STATE_WALKING_RIGHT:
            if not self.sitting:
                self.max_vx = MARIO_WALKING_SPEED
                self.ax = MARIO_ACCEL_WALK_X
                self.nx = 1
        elif state == MARIO_STATE_WALKING_LEFT:
            if not self.sitting:
                self.max_vx = -MARIO_WALKING_SPEED
                self.ax = -MARIO_ACCEL_WALK_X
                self.nx = -1
        elif state == MARIO_STATE_JUMP:
            if not self.sitting and self.on_platform:
                if abs(self.vx) == MARIO_RUNNING_SPEED:
                    self.vy = -MARIO_JUMP_RUN_SPEED_Y
                else:
                    self.vy = -MARIO_JUMP_SPEED_Y
        elif state == MARIO_STATE_RELEASE_JUMP:
            if self.vy < 0:
                self.vy += MARIO_JUMP_SPEED_Y / 2
        elif state == MARIO_STATE_SIT:
            if self.on_platform and self.level != MARIO_LEVEL_SMALL:
                state = MARIO_STATE_IDLE
                self.sitting = True
                self.vx = 0.0
                self.vy = 0.0
                self.y += MARIO_SIT_HEIGHT_ADJUST
        elif state == MARIO_STATE_SIT_RELEASE:
            if self.sitting:
                self.sitting = False
                state = MARIO_STATE_IDLE
                self.y -= MARIO_SIT_HEIGHT_ADJUST
        elif state == MARIO_STATE_IDLE:
            self.ax = 0.0
            self.vx = 0.0
        elif state == MARIO_STATE_DIE:
            self.vy = -MARIO_JUMP_DEFLECT_SPEED
            self.vx = 0.0
            self.ax = 0.0

        super().set_state(state)

    def bounding_box(self) -> tuple[float, float, float, float]:
        if self.level == MARIO_LEVEL_BIG:
            if self.sitting:
                width, height = MARIO_BIG_SITTING_BBOX_WIDTH, MARIO_BIG_SITTING_BBOX_HEIGHT
            else:
                width, height = MARIO_BIG_BBOX_WIDTH, MARIO_BIG_BBOX_HEIGHT
        else:
            width, height = MARIO_SMALL_BBOX_WIDTH, MARIO_SMALL_BBOX_HEIGHT
        left = self.x - width // 2
        top = self.y - height // 2
        return left, top, left + width, top + height

    def set_level(self, level: int) -> None:
        # Lift a small Mario so the bigger box does not sink into the ground.
        if self.level == MARIO_LEVEL_SMALL:
            self.y -= (MARIO_BIG_BBOX_HEIGHT - MARIO_SMALL_BBOX_HEIGHT) // 2
        self.level = level

    def start_untouchable(self) -> None:
        self.untouchable = 1
        self.untouchable_start = self._clock()

    def is_collidable(self) -> bool:
        return self.state != MARIO_STATE_DIE

    def is_blocking(self) -> bool:
        return self.state != MARIO_STATE_DIE and self.untouchable == 0