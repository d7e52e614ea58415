"""Textures, sprites and frame-timed animations, with registries keyed by id."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

logger = logging.getLogger(__name__)

ID_TEX_MARIO = 0
ID_TEX_ENEMY = 10
ID_TEX_MISC = 20

ID_SPRITE_MARIO = 10000
ID_SPRITE_MARIO_BIG = ID_SPRITE_MARIO + 1000
ID_SPRITE_MARIO_BIG_IDLE = ID_SPRITE_MARIO_BIG + 100
ID_SPRITE_MARIO_BIG_IDLE_LEFT = ID_SPRITE_MARIO_BIG_IDLE + 10
ID_SPRITE_MARIO_BIG_IDLE_RIGHT = ID_SPRITE_MARIO_BIG_IDLE + 20

ID_SPRITE_MARIO_BIG_WALKING = ID_SPRITE_MARIO_BIG + 200
ID_SPRITE_MARIO_BIG_WALKING_LEFT = ID_SPRITE_MARIO_BIG_WALKING + 10
ID_SPRITE_MARIO_BIG_WALKING_RIGHT = ID_SPRITE_MARIO_BIG_WALKING + 20
ID_SPRITE_MARIO_BIG_RUNNING = ID_SPRITE_MARIO_BIG + 300
ID_SPRITE_MARIO_BIG_RUNNING_LEFT = ID_SPRITE_MARIO_BIG_RUNNING + 10
ID_SPRITE_MARIO_BIG_RUNNING_RIGHT = ID_SPRITE_MARIO_BIG_RUNNING + 20
ID_SPRITE_MARIO_BIG_JUMP = ID_SPRITE_MARIO_BIG + 400
ID_SPRITE_MARIO_BIG_JUMP_WALK = ID_SPRITE_MARIO_BIG_JUMP + 10
ID_SPRITE_MARIO_BIG_JUMP_WALK_LEFT = ID_SPRITE_MARIO_BIG_JUMP_WALK + 2
ID_SPRITE_MARIO_BIG_JUMP_WALK_RIGHT = ID_SPRITE_MARIO_BIG_JUMP_WALK + 6
ID_SPRITE_MARIO_BIG_JUMP_RUN = ID_SPRITE_MARIO_BIG_JUMP + 20
ID_SPRITE_MARIO_BIG_JUMP_RUN_LEFT = ID_SPRITE_MARIO_BIG_JUMP_RUN + 2
ID_SPRITE_MARIO_BIG_JUMP_RUN_RIGHT = ID_SPRITE_MARIO_BIG_JUMP_RUN + 6
ID_SPRITE_MARIO_BIG_SIT = ID_SPRITE_MARIO_BIG + 500
ID_SPRITE_MARIO_BIG_SIT_LEFT = ID_SPRITE_MARIO_BIG_SIT + 10
ID_SPRITE_MARIO_BIG_SIT_RIGHT = ID_SPRITE_MARIO_BIG_SIT + 20
ID_SPRITE_MARIO_BIG_BRACE = ID_SPRITE_MARIO_BIG + 600
ID_SPRITE_MARIO_BIG_BRACE_LEFT = ID_SPRITE_MARIO_BIG_BRACE + 10
ID_SPRITE_MARIO_BIG_BRACE_RIGHT = ID_SPRITE_MARIO_BIG_BRACE + 20

ID_SPRITE_MARIO_DIE = ID_SPRITE_MARIO + 3000

ID_SPRITE_MARIO_SMALL = ID_SPRITE_MARIO + 2000
ID_SPRITE_MARIO_SMALL_IDLE = ID_SPRITE_MARIO_SMALL + 100
ID_SPRITE_MARIO_SMALL_IDLE_LEFT = ID_SPRITE_MARIO_SMALL_IDLE + 10
ID_SPRITE_MARIO_SMALL_IDLE_RIGHT = ID_SPRITE_MARIO_SMALL_IDLE + 20

ID_SPRITE_MARIO_SMALL_WALKING = ID_SPRITE_MARIO_SMALL + 200
ID_SPRITE_MARIO_SMALL_WALKING_LEFT = ID_SPRITE_MARIO_SMALL_WALKING + 10
ID_SPRITE_MARIO_SMALL_WALKING_RIGHT = ID_SPRITE_MARIO_SMALL_WALKING + 20
ID_SPRITE_MARIO_SMALL_RUNNING = ID_SPRITE_MARIO_SMALL + 300
ID_SPRITE_MARIO_SMALL_RUNNING_LEFT = ID_SPRITE_MARIO_SMALL_RUNNING + 10
ID_SPRITE_MARIO_SMALL_RUNNING_RIGHT = ID_SPRITE_MARIO_SMALL_RUNNING + 20
ID_SPRITE_MARIO_SMALL_JUMP = ID_SPRITE_MARIO_SMALL + 400
ID_SPRITE_MARIO_SMALL_JUMP_WALK = ID_SPRITE_MARIO_SMALL_JUMP + 10
ID_SPRITE_MARIO_SMALL_JUMP_WALK_LEFT = ID_SPRITE_MARIO_SMALL_JUMP_WALK + 2
ID_SPRITE_MARIO_SMALL_JUMP_WALK_RIGHT = ID_SPRITE_MARIO_SMALL_JUMP_WALK + 6
ID_SPRITE_MARIO_SMALL_JUMP_RUN = ID_SPRITE_MARIO_SMALL_JUMP + 20
ID_SPRITE_MARIO_SMALL_JUMP_RUN_LEFT = ID_SPRITE_MARIO_SMALL_JUMP_RUN + 2
ID_SPRITE_MARIO_SMALL_JUMP_RUN_RIGHT = ID_SPRITE_MARIO_SMALL_JUMP_RUN + 6

ID_SPRITE_MARIO_SMALL_SIT = ID_SPRITE_MARIO_SMALL + 500
ID_SPRITE_MARIO_SMALL_SIT_LEFT = ID_SPRITE_MARIO_SMALL_SIT + 10
ID_SPRITE_MARIO_SMALL_SIT_RIGHT = ID_SPRITE_MARIO_SMALL_SIT + 20

ID_SPRITE_MARIO_SMALL_BRACE = ID_SPRITE_MARIO_SMALL + 500
ID_SPRITE_MARIO_SMALL_BRACE_LEFT = ID_SPRITE_MARIO_SMALL_BRACE + 10
ID_SPRITE_MARIO_SMALL_BRACE_RIGHT = ID_SPRITE_MARIO_SMALL_BRACE + 20

ID_SPRITE_BRICK = 20000

ID_SPRITE_GOOMBA = 30000
ID_SPRITE_GOOMBA_WALK = ID_SPRITE_GOOMBA + 1000
ID_SPRITE_GOOMBA_DIE = ID_SPRITE_GOOMBA + 2000

ID_SPRITE_COIN = 40000

ID_SPRITE_CLOUD = 50000
ID_SPRITE_CLOUD_BEGIN = ID_SPRITE_CLOUD + 1000
ID_SPRITE_CLOUD_MIDDLE = ID_SPRITE_CLOUD + 2000
ID_SPRITE_CLOUD_END = ID_SPRITE_CLOUD + 3000


@dataclass
class Texture:
    """An image loaded from a file; size is -1 until known."""

    path: str
    width: int = -1
    height: int = -1


@dataclass
class Sprite:
    """A rectangular region of a texture."""

    sprite_id: int
    left: int
    top: int
    right: int
    bottom: int
    texture: Texture | None = None

    @property
    def width(self) -> int:
        return self.right - self.left

    @property
    def height(self) -> int:
        return self.bottom - self.top


class TextureRegistry:
    """Textures by id."""

    def __init__(self) -> None:
        self._textures: dict[int, Texture] = {}

    def add(self, texture_id: int, texture: Texture) -> Texture:
        self._textures[texture_id] = texture
        return texture

    def get(self, texture_id: int) -> Texture:
        try:
            return self._textures[texture_id]
        except KeyError:
            raise KeyError(f"texture ID {texture_id} not found") from None

    def __contains__(self, texture_id: object) -> bool:
        return texture_id in self._textures

    def __len__(self) -> int:
        return len(self._textures)


class SpriteRegistry:
    """Sprites by id."""

    def __init__(self) -> None:
        self._sprites: dict[int, Sprite] = {}

    def add(self, sprite_id: int, left: int, top: int, right: int, bottom: int,
            texture: Texture | None) -> Sprite:
        sprite = Sprite(sprite_id, left, top, right, bottom, texture)
        self._sprites[sprite_id] = sprite
        return sprite

    def get(self, sprite_id: int) -> Sprite:
        try:
            return self._sprites[sprite_id]
        except KeyError:
            raise KeyError(f"sprite ID {sprite_id} not found") from None

    def __contains__(self, sprite_id: object) -> bool:
        return sprite_id in self._sprites

    def __len__(self) -> int:
        return len(self._sprites)


@dataclass(frozen=True)
class AnimationFrame:
    """A sprite shown for a number of milliseconds."""

    sprite: Sprite
    time: int


@dataclass
class Animation:
    """A looping sequence of frames, advanced by wall-clock milliseconds."""

    default_time: int
    sprites: SpriteRegistry
    frames: list[AnimationFrame] = field(default_factory=list)
    current_frame: int = -1
    last_frame_time: int = -1

    def add(self, sprite_id: int, time: int = 0) -> AnimationFrame:
        """Append the sprite with this id; a time of 0 means the default time."""
        frame = AnimationFrame(self.sprites.get(sprite_id), time or self.default_time)
        self.frames.append(frame)
        return frame

    def frame_at(self, now: int) -> AnimationFrame:
        """Advance the animation to tick ``now`` and return the frame to draw."""
        if not self.frames:
            raise ValueError("animation has no frames")
        if self.current_frame == -1:
            self.current_frame = 0
            self.last_frame_time = now
        elif now - self.last_frame_time > self.frames[self.current_frame].time:
            self.current_frame = (self.current_frame + 1) % len(self.frames)
            self.last_frame_time = now
        return self.frames[self.current_frame]


class AnimationRegistry:
    """Animations by id."""

    def __init__(self) -> None:
        self._animations: dict[int, Animation] = {}

    def add(self, animation_id: int, animation: Animation) -> Animation:
        if animation_id in self._animations:
            logger.warning("Animation %d already exists", animation_id)
        self._animations[animation_id] = animation
        return animation

    def get(self, animation_id: int) -> Animation:
        try:
            return self._animations[animation_id]
        except KeyError:
            raise KeyError(f"animation ID {animation_id} not found") from None

    def __contains__(self, animation_id: object) -> bool:
        return animation_id in self._animations

    def __len__(self) -> int:
        return len(self._animations)