"""Base class for everything that lives in a scene."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Sequence

if TYPE_CHECKING:
    pass

ID_TEX_BBOX = -100


class GameObject(ABC):
    """A positioned, moving object that takes part in collision handling."""

    def __init__(self, x: float = 0.0, y: float = 0.0) -> None:
        self.x = x
        self.y = y
        self.vx = 0.0
        self.vy = 0.0
        self.nx = 1
        self.state = -1
        self.deleted = False

    @abstractmethod
    def bounding_box(self) -> tuple[float, float, float, float]:
        """Return (left, top, right, bottom)."""

    def update(self, dt: float, co_objects: Sequence[GameObject] | None = None) -> None:
        """Advance the object by ``dt`` milliseconds; does nothing by default."""

    def set_state(self, state: int) -> None:
        self.state = state

    def delete(self) -> None:
        self.deleted = True

    def is_collidable(self) -> bool:
        """Whether this object looks for collisions while it moves."""
        return False

    def is_blocking(self) -> bool:
        """Whether the collision framework pushes other objects out of this one."""
        return True

    def is_direction_collidable(self, nx: float, ny: float) -> bool:
        """Whether a hit with the given normal counts."""
        return True

    def on_no_collision(self, dt: float) -> None:
        """Called when a move of ``dt`` met nothing."""

    def on_collision_with(self, event: Any) -> None:
        """Called for each collision event that concerns this object."""