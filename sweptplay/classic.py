"""Earlier, simpler Mario variants: a screen-bouncing sprite and a ground-bound walker."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable

from .mario import (
    GROUND_Y,
    ID_ANI_MARIO_BRACE_LEFT,
    ID_ANI_MARIO_BRACE_RIGHT,
    ID_ANI_MARIO_IDLE_LEFT,
    ID_ANI_MARIO_IDLE_RIGHT,
    ID_ANI_MARIO_JUMP_RUN_LEFT,
    ID_ANI_MARIO_JUMP_RUN_RIGHT,
    ID_ANI_MARIO_JUMP_WALK_LEFT,
    ID_ANI_MARIO_JUMP_WALK_RIGHT,
    ID_ANI_MARIO_RUNNING_LEFT,
    ID_ANI_MARIO_RUNNING_RIGHT,
    ID_ANI_MARIO_SIT_LEFT,
    ID_ANI_MARIO_SIT_RIGHT,
    ID_ANI_MARIO_WALKING_LEFT,
    ID_ANI_MARIO_WALKING_RIGHT,
    MARIO_ACCEL_RUN_X,
    MARIO_ACCEL_WALK_X,
    MARIO_GRAVITY,
    MARIO_JUMP_RUN_SPEED_Y,
    MARIO_JUMP_SPEED_Y,
    MARIO_RUNNING_SPEED,
    MARIO_STATE_IDLE,
    MARIO_STATE_JUMP,
    MARIO_STATE_RELEASE_JUMP,
    MARIO_STATE_RUNNING_LEFT,
    MARIO_STATE_RUNNING_RIGHT,
    MARIO_STATE_SIT,
    MARIO_STATE_SIT_RELEASE,
    MARIO_STATE_WALKING_LEFT,
    MARIO_STATE_WALKING_RIGHT,
    MARIO_WALKING_SPEED,
)
from .scene import Key

logger = logging.getLogger(__name__)

MARIO_WIDTH = 14
DEFAULT_SCREEN_WIDTH = 320

ID_ANI_BOUNCING_RIGHT = 500
ID_ANI_BOUNCING_LEFT = 501

SIT_HEIGHT_ADJUST = 4.0
RIGHT_EDGE_X = 290.0


@dataclass
class BouncingMario:
    """Moves horizontally at a constant speed and turns back at the screen edges."""

    x: float
    y: float
    vx: float
    vy: float = 0.0
    screen_width: int = DEFAULT_SCREEN_WIDTH

    def update(self, dt: float) -> None:
        self.x += self.vx * dt
        limit = self.screen_width - MARIO_WIDTH
        if self.x <= 0 or self.x >= limit:
            self.vx = -self.vx
            if self.x <= 0:
                self.x = 0.0
            else:
                self.x = float(limit)

    def animation_id(self) -> int:
        return ID_ANI_BOUNCING_RIGHT if self.vx > 0 else ID_ANI_BOUNCING_LEFT


@dataclass
class GroundMario:
    """Walks, runs, jumps and sits on a flat ground line, driven by states."""

    x: float = 0.0
    y: float = 0.0
    vx: float = 0.0
    vy: float = 0.0
    nx: int = 1
    state: int = -1
    sitting: bool = False
    max_vx: float = 0.0
    ax: float = 0.0

    def update(self, dt: float) -> None:
        self.x += self.vx * dt
        self.y += self.vy * dt

        self.vy += MARIO_GRAVITY * dt
        self.vx += self.ax * dt

        if abs(self.vx) > abs(self.max_vx):
            self.vx = self.max_vx

        logger.debug("vx = %0.5f", self.vx)

        if self.y > GROUND_Y:
            self.vy = 0.0
            self.y = GROUND_Y

        if self.vx > 0 and self.x > RIGHT_EDGE_X:
            self.x = RIGHT_EDGE_X
        if self.vx < 0 and self.x < 0:
            self.x = 0.0

    def set_state(self, state: int) -> None:
        on_ground = self.y == GROUND_Y
        if state == MARIO_STATE_RUNNING_RIGHT:
            if not self.sitting:
                self.max_vx, self.ax, self.nx = MARIO_RUNNING_SPEED, MARIO_ACCEL_RUN_X, 1
        elif state == MARIO_STATE_RUNNING_LEFT:
            if not self.sitting:
                self.max_vx, self.ax, self.nx = -MARIO_RUNNING_SPEED, -MARIO_ACCEL_RUN_X, -1
        elif state == MARIO_STATE_WALKING_RIGHT:
            if not self.sitting:
                self.max_vx, self.ax, self.nx = MARIO_WALKING_SPEED, MARIO_ACCEL_WALK_X, 1
        elif state == MARIO_STATE_WALKING_LEFT:
            if not self.sitting:
                self.max_vx, self.ax, self.nx = -MARIO_WALKING_SPEED, -MARIO_ACCEL_WALK_X, -1
        elif state == MARIO_STATE_JUMP:
            if not self.sitting and on_ground:
                if abs(self.vx) == MARIO_RUNNING_SPEED:
                    self.vy = -MARIO_JUMP_RUN_SPEED_Y
                else:
                    self.vy = -MARIO_JUMP_SPEED_Y
        elif state == MARIO_STATE_RELEASE_JUMP:
            if self.vy < 0:
                self.vy += MARIO_JUMP_SPEED_Y / 2
        elif state == MARIO_STATE_SIT:
            if on_ground:
                state = MARIO_STATE_IDLE
                self.sitting = True
                self.vx = 0.0
                self.vy = 0.0
        elif state == MARIO_STATE_SIT_RELEASE:
            self.sitting = False
            state = MARIO_STATE_IDLE
        elif state == MARIO_STATE_IDLE:
            self.ax = 0.0
            self.vx = 0.0

        self.state = state

    def animation_id(self) -> int:
        ani = -1
        if self.y < GROUND_Y:
            if abs(self.ax) == MARIO_ACCEL_RUN_X:
                ani = ID_ANI_MARIO_JUMP_RUN_RIGHT if self.nx >= 0 else ID_ANI_MARIO_JUMP_RUN_LEFT
            else:
                ani = ID_ANI_MARIO_JUMP_WALK_RIGHT if self.nx >= 0 else ID_ANI_MARIO_JUMP_WALK_LEFT
        elif self.sitting:
            ani = ID_ANI_MARIO_SIT_RIGHT if self.nx > 0 else ID_ANI_MARIO_SIT_LEFT
        elif self.vx == 0:
            ani = ID_ANI_MARIO_IDLE_RIGHT if self.nx > 0 else ID_ANI_MARIO_IDLE_LEFT
        elif self.vx > 0:
            if self.ax < 0:
                ani = ID_ANI_MARIO_BRACE_RIGHT
            elif self.ax == MARIO_ACCEL_RUN_X:
                ani = ID_ANI_MARIO_RUNNING_RIGHT
            elif self.ax == MARIO_ACCEL_WALK_X:
                ani = ID_ANI_MARIO_WALKING_RIGHT
        else:
            if self.ax > 0:
                ani = ID_ANI_MARIO_BRACE_LEFT
            elif self.ax == -MARIO_ACCEL_RUN_X:
                ani = ID_ANI_MARIO_RUNNING_LEFT
            elif self.ax == -MARIO_ACCEL_WALK_X:
                ani = ID_ANI_MARIO_WALKING_LEFT
        return ID_ANI_MARIO_IDLE_RIGHT if ani == -1 else ani

    def render_offset(self) -> float:
        """Vertical drawing offset; a sitting Mario is drawn lower."""
        return SIT_HEIGHT_ADJUST if self.sitting else 0.0


def apply_key_state(mario: GroundMario, is_key_down: Callable[[Key], bool]) -> None:
    """Apply the keys held this frame; sitting takes priority over moving."""
    running = is_key_down(Key.A)
    if is_key_down(Key.RIGHT):
        mario.set_state(MARIO_STATE_RUNNING_RIGHT if running else MARIO_STATE_WALKING_RIGHT)
    elif is_key_down(Key.LEFT):
        mario.set_state(MARIO_STATE_RUNNING_LEFT if running else MARIO_STATE_WALKING_LEFT)
    else:
        mario.set_state(MARIO_STATE_IDLE)

    if is_key_down(Key.DOWN):
        mario.set_state(MARIO_STATE_SIT)


def apply_key_down(mario: GroundMario, key: int) -> None:
    logger.debug("KeyDown: %d", key)
    if key == Key.S:
        mario.set_state(MARIO_STATE_JUMP)


def apply_key_up(mario: GroundMario, key: int) -> None:
    logger.debug("KeyUp: %d", key)
    if key == Key.S:
        mario.set_state(MARIO_STATE_RELEASE_JUMP)
    elif key == Key.DOWN:
        mario.set_state(MARIO_STATE_SIT_RELEASE)