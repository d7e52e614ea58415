"""The sample level: asset tables, scene layout, keyboard mapping and a headless runner."""

from __future__ import annotations

import argparse
import logging
from enum import IntEnum
from typing import Callable, Sequence

from .assets import (
    ID_SPRITE_BRICK,
    ID_SPRITE_CLOUD_BEGIN,
    ID_SPRITE_CLOUD_END,
    ID_SPRITE_CLOUD_MIDDLE,
    ID_SPRITE_COIN,
    ID_SPRITE_GOOMBA_DIE,
    ID_SPRITE_GOOMBA_WALK,
    ID_SPRITE_MARIO_BIG_BRACE_LEFT,
    ID_SPRITE_MARIO_BIG_BRACE_RIGHT,
    ID_SPRITE_MARIO_BIG_IDLE_LEFT,
    ID_SPRITE_MARIO_BIG_IDLE_RIGHT,
    ID_SPRITE_MARIO_BIG_JUMP_RUN_LEFT,
    ID_SPRITE_MARIO_BIG_JUMP_RUN_RIGHT,
    ID_SPRITE_MARIO_BIG_JUMP_WALK_LEFT,
    ID_SPRITE_MARIO_BIG_JUMP_WALK_RIGHT,
    ID_SPRITE_MARIO_BIG_RUNNING_LEFT,
    ID_SPRITE_MARIO_BIG_RUNNING_RIGHT,
    ID_SPRITE_MARIO_BIG_SIT_LEFT,
    ID_SPRITE_MARIO_BIG_SIT_RIGHT,
    ID_SPRITE_MARIO_BIG_WALKING_LEFT,
    ID_SPRITE_MARIO_BIG_WALKING_RIGHT,
    ID_SPRITE_MARIO_DIE,
    ID_SPRITE_MARIO_SMALL_BRACE_LEFT,
    ID_SPRITE_MARIO_SMALL_BRACE_RIGHT,
    ID_SPRITE_MARIO_SMALL_IDLE_LEFT,
    ID_SPRITE_MARIO_SMALL_IDLE_RIGHT,
    ID_SPRITE_MARIO_SMALL_JUMP_RUN_LEFT,
    ID_SPRITE_MARIO_SMALL_JUMP_RUN_RIGHT,
    ID_SPRITE_MARIO_SMALL_JUMP_WALK_LEFT,
    ID_SPRITE_MARIO_SMALL_JUMP_WALK_RIGHT,
    ID_SPRITE_MARIO_SMALL_RUNNING_LEFT,
    ID_SPRITE_MARIO_SMALL_RUNNING_RIGHT,
    ID_SPRITE_MARIO_SMALL_WALKING_LEFT,
    ID_SPRITE_MARIO_SMALL_WALKING_RIGHT,
    ID_TEX_ENEMY,
    ID_TEX_MARIO,
    ID_TEX_MISC,
    Animation,
    AnimationRegistry,
    SpriteRegistry,
    Texture,
    TextureRegistry,
)
from .entities import (
    BRICK_WIDTH,
    COIN_WIDTH,
    ID_ANI_BRICK,
    ID_ANI_COIN,
    ID_ANI_GOOMBA_DIE,
    ID_ANI_GOOMBA_WALKING,
    Brick,
    Clock,
    Coin,
    Goomba,
    Platform,
)
from .gameobject import ID_TEX_BBOX, GameObject
from .mario import (
    GROUND_Y,
    ID_ANI_MARIO_BRACE_LEFT,
    ID_ANI_MARIO_BRACE_RIGHT,
    ID_ANI_MARIO_DIE,
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
    ID_ANI_MARIO_SMALL_BRACE_LEFT,
    ID_ANI_MARIO_SMALL_BRACE_RIGHT,
    ID_ANI_MARIO_SMALL_IDLE_LEFT,
    ID_ANI_MARIO_SMALL_IDLE_RIGHT,
    ID_ANI_MARIO_SMALL_JUMP_RUN_LEFT,
    ID_ANI_MARIO_SMALL_JUMP_RUN_RIGHT,
    ID_ANI_MARIO_SMALL_JUMP_WALK_LEFT,
    ID_ANI_MARIO_SMALL_JUMP_WALK_RIGHT,
    ID_ANI_MARIO_SMALL_RUNNING_LEFT,
    ID_ANI_MARIO_SMALL_RUNNING_RIGHT,
    ID_ANI_MARIO_SMALL_WALKING_LEFT,
    ID_ANI_MARIO_SMALL_WALKING_RIGHT,
    ID_ANI_MARIO_WALKING_LEFT,
    ID_ANI_MARIO_WALKING_RIGHT,
    MARIO_LEVEL_BIG,
    MARIO_LEVEL_SMALL,
    MARIO_STATE_IDLE,
    MARIO_STATE_JUMP,
    MARIO_STATE_RELEASE_JUMP,
    MARIO_STATE_RUNNING_LEFT,
    MARIO_STATE_RUNNING_RIGHT,
    MARIO_STATE_SIT,
    MARIO_STATE_SIT_RELEASE,
    MARIO_STATE_WALKING_LEFT,
    MARIO_STATE_WALKING_RIGHT,
    Mario,
)

logger = logging.getLogger(__name__)

SCREEN_WIDTH = 320
SCREEN_HEIGHT = 240
MAX_FRAME_RATE = 100

TEXTURES_DIR = "textures"
TEXTURE_PATH_MARIO = f"{TEXTURES_DIR}/mario_transparent.png"
TEXTURE_PATH_MISC = f"{TEXTURES_DIR}/misc_transparent.png"
TEXTURE_PATH_ENEMY = f"{TEXTURES_DIR}/enemies_transparent.png"
TEXTURE_PATH_BBOX = f"{TEXTURES_DIR}/bbox.png"

MARIO_START_X = 20.0
MARIO_START_Y = 10.0

BRICK_X = 0.0
GOOMBA_X = 200.0
COIN_X = 100.0

BRICK_Y = GROUND_Y + 20.0
NUM_BRICKS = 70

_TEXTURES = (
    (ID_TEX_MARIO, TEXTURE_PATH_MARIO),
    (ID_TEX_ENEMY, TEXTURE_PATH_ENEMY),
    (ID_TEX_MISC, TEXTURE_PATH_MISC),
    (ID_TEX_BBOX, TEXTURE_PATH_BBOX),
)

# (sprite id, left, top, right, bottom, texture id)
_SPRITES = (
    # Big Mario
    (ID_SPRITE_MARIO_BIG_IDLE_RIGHT + 1, 246, 154, 259, 181, ID_TEX_MARIO),
    (ID_SPRITE_MARIO_BIG_IDLE_LEFT + 1, 186, 154, 199, 181, ID_TEX_MARIO),
    (ID_SPRITE_MARIO_BIG_WALKING_RIGHT + 2, 275, 154, 290, 181, ID_TEX_MARIO),
    (ID_SPRITE_MARIO_BIG_WALKING_RIGHT + 3, 304, 154, 321, 181, ID_TEX_MARIO),
    (ID_SPRITE_MARIO_BIG_WALKING_LEFT + 2, 155, 154, 170, 181, ID_TEX_MARIO),
    (ID_SPRITE_MARIO_BIG_WALKING_LEFT + 3, 125, 154, 140, 181, ID_TEX_MARIO),
    (ID_SPRITE_MARIO_BIG_RUNNING_RIGHT + 1, 334, 154, 355, 181, ID_TEX_MARIO),
    (ID_SPRITE_MARIO_BIG_RUNNING_RIGHT + 2, 334, 154, 355, 181, ID_TEX_MARIO),
    (ID_SPRITE_MARIO_BIG_RUNNING_RIGHT + 3, 392, 154, 413, 181, ID_TEX_MARIO),
    (ID_SPRITE_MARIO_BIG_RUNNING_LEFT + 1, 91, 154, 112, 181, ID_TEX_MARIO),
    (ID_SPRITE_MARIO_BIG_RUNNING_LEFT + 2, 65, 154, 86, 181, ID_TEX_MARIO),
    (ID_SPRITE_MARIO_BIG_RUNNING_LEFT + 3, 34, 154, 55, 181, ID_TEX_MARIO),
    (ID_SPRITE_MARIO_BIG_JUMP_WALK_RIGHT + 1, 395, 275, 412, 302, ID_TEX_MARIO),
    (ID_SPRITE_MARIO_BIG_JUMP_WALK_LEFT + 1, 35, 275, 52, 302, ID_TEX_MARIO),
    (ID_SPRITE_MARIO_BIG_JUMP_RUN_RIGHT + 1, 394, 195, 413, 222, ID_TEX_MARIO),
    (ID_SPRITE_MARIO_BIG_JUMP_RUN_LEFT + 1, 35, 195, 52, 222, ID_TEX_MARIO),
    (ID_SPRITE_MARIO_BIG_SIT_RIGHT + 1, 426, 239, 441, 256, ID_TEX_MARIO),
    (ID_SPRITE_MARIO_BIG_SIT_LEFT + 1, 5, 239, 20, 256, ID_TEX_MARIO),
    (ID_SPRITE_MARIO_BIG_BRACE_RIGHT + 1, 425, 154, 442, 181, ID_TEX_MARIO),
    (ID_SPRITE_MARIO_BIG_BRACE_LEFT + 1, 5, 154, 22, 181, ID_TEX_MARIO),
    (ID_SPRITE_MARIO_DIE + 1, 215, 120, 231, 135, ID_TEX_MARIO),
    # Small Mario
    (ID_SPRITE_MARIO_SMALL_IDLE_RIGHT + 1, 247, 0, 259, 15, ID_TEX_MARIO),
    (ID_SPRITE_MARIO_SMALL_IDLE_LEFT + 1, 187, 0, 198, 15, ID_TEX_MARIO),
    (ID_SPRITE_MARIO_SMALL_WALKING_RIGHT + 2, 275, 0, 291, 15, ID_TEX_MARIO),
    (ID_SPRITE_MARIO_SMALL_WALKING_RIGHT + 3, 306, 0, 320, 15, ID_TEX_MARIO),
    (ID_SPRITE_MARIO_SMALL_WALKING_LEFT + 2, 155, 0, 170, 15, ID_TEX_MARIO),
    (ID_SPRITE_MARIO_SMALL_WALKING_LEFT + 3, 125, 0, 139, 15, ID_TEX_MARIO),
    (ID_SPRITE_MARIO_SMALL_RUNNING_RIGHT + 1, 275, 0, 290, 15, ID_TEX_MARIO),
    (ID_SPRITE_MARIO_SMALL_RUNNING_RIGHT + 2, 306, 0, 321, 15, ID_TEX_MARIO),
    (ID_SPRITE_MARIO_SMALL_RUNNING_RIGHT + 3, 335, 0, 350, 15, ID_TEX_MARIO),
    (ID_SPRITE_MARIO_SMALL_RUNNING_LEFT + 1, 155, 0, 170, 15, ID_TEX_MARIO),
    (ID_SPRITE_MARIO_SMALL_RUNNING_LEFT + 2, 125, 0, 140, 15, ID_TEX_MARIO),
    (ID_SPRITE_MARIO_SMALL_RUNNING_LEFT + 3, 95, 0, 110, 15, ID_TEX_MARIO),
    (ID_SPRITE_MARIO_SMALL_BRACE_LEFT + 1, 6, 0, 19, 15, ID_TEX_MARIO),
    (ID_SPRITE_MARIO_SMALL_BRACE_RIGHT + 1, 426, 0, 439, 15, ID_TEX_MARIO),
    (ID_SPRITE_MARIO_SMALL_JUMP_WALK_LEFT + 1, 35, 80, 50, 95, ID_TEX_MARIO),
    (ID_SPRITE_MARIO_SMALL_JUMP_WALK_RIGHT + 1, 395, 80, 410, 95, ID_TEX_MARIO),
    (ID_SPRITE_MARIO_SMALL_JUMP_RUN_LEFT + 1, 65, 40, 80, 55, ID_TEX_MARIO),
    (ID_SPRITE_MARIO_SMALL_JUMP_RUN_RIGHT + 1, 365, 40, 380, 55, ID_TEX_MARIO),
    # Goomba
    (ID_SPRITE_GOOMBA_WALK + 1, 4, 13, 22, 30, ID_TEX_ENEMY),
    (ID_SPRITE_GOOMBA_WALK + 2, 24, 13, 42, 30, ID_TEX_ENEMY),
    (ID_SPRITE_GOOMBA_DIE + 1, 44, 19, 62, 30, ID_TEX_ENEMY),
    # Brick
    (ID_SPRITE_BRICK + 1, 372, 153, 387, 168, ID_TEX_MISC),
    # Coin
    (ID_SPRITE_COIN + 1, 303, 99, 312, 114, ID_TEX_MISC),
    (ID_SPRITE_COIN + 2, 321, 99, 330, 114, ID_TEX_MISC),
    (ID_SPRITE_COIN + 3, 338, 99, 347, 114, ID_TEX_MISC),
    # Cloud platform
    (ID_SPRITE_CLOUD_BEGIN, 390, 117, 405, 132, ID_TEX_MISC),
    (ID_SPRITE_CLOUD_MIDDLE, 408, 117, 423, 132, ID_TEX_MISC),
    (ID_SPRITE_CLOUD_END, 426, 117, 441, 132, ID_TEX_MISC),
)

# (animation id, default frame time, sprite ids)
_ANIMATIONS = (
    (ID_ANI_MARIO_IDLE_RIGHT, 100, (ID_SPRITE_MARIO_BIG_IDLE_RIGHT + 1,)),
    (ID_ANI_MARIO_IDLE_LEFT, 100, (ID_SPRITE_MARIO_BIG_IDLE_LEFT + 1,)),
    (ID_ANI_MARIO_WALKING_RIGHT, 100, (
        ID_SPRITE_MARIO_BIG_IDLE_RIGHT + 1,
        ID_SPRITE_MARIO_BIG_WALKING_RIGHT + 2,
        ID_SPRITE_MARIO_BIG_WALKING_RIGHT + 3,
    )),
    (ID_ANI_MARIO_WALKING_LEFT, 100, (
        ID_SPRITE_MARIO_BIG_IDLE_LEFT + 1,
        ID_SPRITE_MARIO_BIG_WALKING_LEFT + 2,
        ID_SPRITE_MARIO_BIG_WALKING_LEFT + 3,
    )),
    (ID_ANI_MARIO_RUNNING_RIGHT, 50, (
        ID_SPRITE_MARIO_BIG_RUNNING_RIGHT + 1,
        ID_SPRITE_MARIO_BIG_RUNNING_RIGHT + 2,
        ID_SPRITE_MARIO_BIG_RUNNING_RIGHT + 3,
    )),
    (ID_ANI_MARIO_RUNNING_LEFT, 50, (
        ID_SPRITE_MARIO_BIG_RUNNING_LEFT + 1,
        ID_SPRITE_MARIO_BIG_RUNNING_LEFT + 2,
        ID_SPRITE_MARIO_BIG_RUNNING_LEFT + 3,
    )),
    (ID_ANI_MARIO_JUMP_WALK_RIGHT, 100, (ID_SPRITE_MARIO_BIG_JUMP_WALK_RIGHT + 1,)),
    (ID_ANI_MARIO_JUMP_WALK_LEFT, 100, (ID_SPRITE_MARIO_BIG_JUMP_WALK_LEFT + 1,)),
    (ID_ANI_MARIO_JUMP_RUN_RIGHT, 100, (ID_SPRITE_MARIO_BIG_JUMP_RUN_RIGHT + 1,)),
    (ID_ANI_MARIO_JUMP_RUN_LEFT, 100, (ID_SPRITE_MARIO_BIG_JUMP_RUN_LEFT + 1,)),
    (ID_ANI_MARIO_SIT_RIGHT, 100, (ID_SPRITE_MARIO_BIG_SIT_RIGHT + 1,)),
    (ID_ANI_MARIO_SIT_LEFT, 100, (ID_SPRITE_MARIO_BIG_SIT_LEFT + 1,)),
    (ID_ANI_MARIO_BRACE_RIGHT, 100, (ID_SPRITE_MARIO_BIG_BRACE_RIGHT + 1,)),
    (ID_ANI_MARIO_BRACE_LEFT, 100, (ID_SPRITE_MARIO_BIG_BRACE_LEFT + 1,)),
    (ID_ANI_MARIO_DIE, 100, (ID_SPRITE_MARIO_DIE + 1,)),
    (ID_ANI_MARIO_SMALL_IDLE_RIGHT, 100, (ID_SPRITE_MARIO_SMALL_IDLE_RIGHT + 1,)),
    (ID_ANI_MARIO_SMALL_WALKING_RIGHT, 100, (
        ID_SPRITE_MARIO_SMALL_IDLE_RIGHT + 1,
        ID_SPRITE_MARIO_SMALL_WALKING_RIGHT + 2,
        ID_SPRITE_MARIO_SMALL_WALKING_RIGHT + 3,
    )),
    (ID_ANI_MARIO_SMALL_IDLE_LEFT, 100, (ID_SPRITE_MARIO_SMALL_IDLE_LEFT + 1,)),
    (ID_ANI_MARIO_SMALL_WALKING_LEFT, 100, (
        ID_SPRITE_MARIO_SMALL_IDLE_LEFT + 1,
        ID_SPRITE_MARIO_SMALL_WALKING_LEFT + 2,
        ID_SPRITE_MARIO_SMALL_WALKING_LEFT + 3,
    )),
    (ID_ANI_MARIO_SMALL_RUNNING_RIGHT, 50, (
        ID_SPRITE_MARIO_SMALL_RUNNING_RIGHT + 1,
        ID_SPRITE_MARIO_SMALL_RUNNING_RIGHT + 2,
        ID_SPRITE_MARIO_SMALL_RUNNING_RIGHT + 3,
    )),
    (ID_ANI_MARIO_SMALL_RUNNING_LEFT, 50, (
        ID_SPRITE_MARIO_SMALL_RUNNING_LEFT + 1,
        ID_SPRITE_MARIO_SMALL_RUNNING_LEFT + 2,
        ID_SPRITE_MARIO_SMALL_RUNNING_LEFT + 3,
    )),
    (ID_ANI_MARIO_SMALL_BRACE_LEFT, 100, (ID_SPRITE_MARIO_SMALL_BRACE_LEFT + 1,)),
    (ID_ANI_MARIO_SMALL_BRACE_RIGHT, 100, (ID_SPRITE_MARIO_SMALL_BRACE_RIGHT + 1,)),
    (ID_ANI_MARIO_SMALL_JUMP_WALK_RIGHT, 100, (ID_SPRITE_MARIO_SMALL_JUMP_WALK_RIGHT + 1,)),
    (ID_ANI_MARIO_SMALL_JUMP_WALK_LEFT, 100, (ID_SPRITE_MARIO_SMALL_JUMP_WALK_LEFT + 1,)),
    (ID_ANI_MARIO_SMALL_JUMP_RUN_LEFT, 100, (ID_SPRITE_MARIO_SMALL_JUMP_RUN_LEFT + 1,)),
    (ID_ANI_MARIO_SMALL_JUMP_RUN_RIGHT, 100, (ID_SPRITE_MARIO_SMALL_JUMP_RUN_RIGHT + 1,)),
    (ID_ANI_GOOMBA_WALKING, 100, (ID_SPRITE_GOOMBA_WALK + 1, ID_SPRITE_GOOMBA_WALK + 2)),
    (ID_ANI_GOOMBA_DIE, 100, (ID_SPRITE_GOOMBA_DIE + 1,)),
    (ID_ANI_BRICK, 100, (ID_SPRITE_BRICK + 1,)),
    (ID_ANI_COIN, 300, (ID_SPRITE_COIN + 1, ID_SPRITE_COIN + 2, ID_SPRITE_COIN + 3)),
)


def load_assets(
    textures: TextureRegistry,
    sprites: SpriteRegistry,
    animations: AnimationRegistry,
) -> None:
    """Fill the registries with every texture, sprite and animation of the level."""
    for texture_id, path in _TEXTURES:
        textures.add(texture_id, Texture(path))

    for sprite_id, left, top, right, bottom, texture_id in _SPRITES:
        sprites.add(sprite_id, left, top, right, bottom, textures.get(texture_id))

    for animation_id, default_time, sprite_ids in _ANIMATIONS:
        animation = Animation(default_time, sprites)
        for sprite_id in sprite_ids:
            animation.add(sprite_id)
        animations.add(animation_id, animation)


class Scene:
    """The objects of the sample level and a camera that follows Mario."""

    def __init__(self, clock: Clock | None = None, screen_width: int = SCREEN_WIDTH) -> None:
        self._clock = clock
        self.screen_width = screen_width
        self.objects: list[GameObject] = []
        self.cam_x = 0.0
        self.cam_y = 0.0
        self.mario = Mario(MARIO_START_X, MARIO_START_Y, clock)
        self.reload()

    def reload(self) -> None:
        """Throw away every object and rebuild the level from its layout."""
        self.objects = []
        add = self.objects.append

        # Main ground
        for i in range(NUM_BRICKS):
            add(Brick(i * BRICK_WIDTH * 1.0, BRICK_Y))

        # Short, low platform
        for i in range(1, 3):
            add(Brick(i * BRICK_WIDTH * 1.0, BRICK_Y - 44.0))

        # Vertical columns
        for i in range(10):
            add(Brick(0.0, BRICK_Y - i * BRICK_WIDTH))
        for offset, height in ((300.0, 3), (400.0, 4), (500.0, 5)):
            for i in range(1, height):
                add(Brick(BRICK_X + offset, BRICK_Y - i * BRICK_WIDTH))

        # Cloud platform
        add(Platform(
            90.0, GROUND_Y - 34.0, 16, 15, 16,
            ID_SPRITE_CLOUD_BEGIN, ID_SPRITE_CLOUD_MIDDLE, ID_SPRITE_CLOUD_END,
        ))

        self.mario = Mario(MARIO_START_X, MARIO_START_Y, self._clock)
        add(self.mario)

        for j in range(4):
            add(Goomba(GOOMBA_X + j * 60, GROUND_Y - 120.0, self._clock))

        for i in range(10):
            add(Coin(COIN_X + i * (COIN_WIDTH * 2), GROUND_Y - 96.0))

    def purge_deleted(self) -> int:
        """Drop objects marked as deleted; return how many were dropped."""
        before = len(self.objects)
        self.objects = [obj for obj in self.objects if not obj.deleted]
        return before - len(self.objects)

    def update(self, dt: float) -> None:
        """Advance every object by ``dt`` milliseconds and move the camera."""
        co_objects = list(self.objects)
        for obj in co_objects:
            obj.update(dt, co_objects)

        self.purge_deleted()

        cam_x = self.mario.x - self.screen_width // 2
        self.cam_x = max(cam_x, 0.0)
        self.cam_y = 0.0


class Key(IntEnum):
    """Keyboard scan codes used by the sample."""

    ONE = 0x02
    TWO = 0x03
    R = 0x13
    A = 0x1E
    S = 0x1F
    LEFT = 0xCB
    RIGHT = 0xCD
    DOWN = 0xD0


class SampleKeyHandler:
    """Turns key events and held keys into Mario states."""

    def __init__(self, scene: Scene) -> None:
        self.scene = scene

    def on_key_down(self, key: int) -> None:
        logger.debug("KeyDown: %d", key)
        mario = self.scene.mario
        if key == Key.DOWN:
            mario.set_state(MARIO_STATE_SIT)
        elif key == Key.S:
            mario.set_state(MARIO_STATE_JUMP)
        elif key == Key.ONE:
            mario.set_level(MARIO_LEVEL_SMALL)
        elif key == Key.TWO:
            mario.set_level(MARIO_LEVEL_BIG)
        elif key == Key.R:
            self.scene.reload()

    def on_key_up(self, key: int) -> None:
        logger.debug("KeyUp: %d", key)
        mario = self.scene.mario
        if key == Key.S:
            mario.set_state(MARIO_STATE_RELEASE_JUMP)
        elif key == Key.DOWN:
            mario.set_state(MARIO_STATE_SIT_RELEASE)

    def key_state(self, is_key_down: Callable[[Key], bool]) -> None:
        """Apply the keys held this frame; ``is_key_down`` reports each key."""
        mario = self.scene.mario
        running = is_key_down(Key.A)
        if is_key_down(Key.RIGHT):
            mario.set_state(MARIO_STATE_RUNNING_RIGHT if running else MARIO_STATE_WALKING_RIGHT)
        elif is_key_down(Key.LEFT):
            mario.set_state(MARIO_STATE_RUNNING_LEFT if running else MARIO_STATE_WALKING_LEFT)
        else:
            mario.set_state(MARIO_STATE_IDLE)


class _SimulatedClock:
    def __init__(self) -> None:
        self.now = 0

    def __call__(self) -> int:
        return self.now


def main(argv: Sequence[str] | None = None) -> int:
    """Run the level without a display for a number of frames and print a summary."""
    parser = argparse.ArgumentParser(description="Run the sample level headless.")
    parser.add_argument("--frames", type=int, default=100, help="number of frames to run")
    parser.add_argument(
        "--dt", type=int, default=1000 // MAX_FRAME_RATE, help="milliseconds per frame"
    )
    parser.add_argument(
        "--hold",
        action="append",
        default=[],
        choices=[key.name for key in Key],
        help="key held down for the whole run (may be repeated)",
    )
    args = parser.parse_args(argv)
    if args.frames < 0 or args.dt <= 0:
        parser.error("--frames must be >= 0 and --dt must be > 0")

    textures, sprites, animations = TextureRegistry(), SpriteRegistry(), AnimationRegistry()
    load_assets(textures, sprites, animations)

    clock = _SimulatedClock()
    scene = Scene(clock)
    handler = SampleKeyHandler(scene)
    held = {Key[name] for name in args.hold}

    for key in held:
        handler.on_key_down(key)
    for _ in range(args.frames):
        clock.now += args.dt
        handler.key_state(lambda key: key in held)
        scene.update(args.dt)

    mario = scene.mario
    print(f"frames: {args.frames}")
    print(f"mario: x={mario.x:.2f} y={mario.y:.2f} state={mario.state} level={mario.level}")
    print(f"coins: {mario.coins}")
    print(f"objects: {len(scene.objects)}")
    print(f"camera: x={scene.cam_x:.2f} y={scene.cam_y:.2f}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())