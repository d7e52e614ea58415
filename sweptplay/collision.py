"""Swept AABB collision detection and a simple resolution framework."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence

from .gameobject import GameObject

BLOCK_PUSH_FACTOR = 0.01

_NO_HIT = (-1.0, 0.0, 0.0)


@dataclass(eq=False)
class CollisionEvent:
    """A potential collision between a moving source object and a target.

    ``dx`` and ``dy`` hold the movement of the source relative to the target.
    """

    t: float
    nx: float
    ny: float
    dx: float = 0.0
    dy: float = 0.0
    obj: GameObject | None = None
    src_obj: GameObject | None = None
    deleted: bool = False

    def was_collided(self) -> bool:
        """True when the hit falls within this frame and its direction counts."""
        return (
            0.0 <= self.t <= 1.0
            and self.obj is not None
            and self.obj.is_direction_collidable(self.nx, self.ny)
        )


def swept_aabb(
    ml: float, mt: float, mr: float, mb: float,
    dx: float, dy: float,
    sl: float, st: float, sr: float, sb: float,
) -> tuple[float, float, float]:
    """Sweep a moving box by (dx, dy) against a static box.

    Returns ``(t, nx, ny)``: the fraction of the move at which the boxes first
    touch and the normal of the face that was hit, or ``(-1.0, 0.0, 0.0)``
    when they do not meet.
    """
    # Broad phase: the box covering the whole move must touch the static box.
    bl = ml if dx > 0 else ml + dx
    bt = mt if dy > 0 else mt + dy
    br = mr + dx if dx > 0 else mr
    bb = mb + dy if dy > 0 else mb

    if br < sl or bl > sr or bb < st or bt > sb:
        return _NO_HIT

    if dx == 0 and dy == 0:
        return _NO_HIT

    if dx == 0:
        tx_entry, tx_exit = -9999999.0, 99999999.0
    elif dx > 0:
        tx_entry, tx_exit = (sl - mr) / dx, (sr - ml) / dx
    else:
        tx_entry, tx_exit = (sr - ml) / dx, (sl - mr) / dx

    if dy == 0:
        ty_entry, ty_exit = -99999999999.0, 99999999999.0
    elif dy > 0:
        ty_entry, ty_exit = (st - mb) / dy, (sb - mt) / dy
    else:
        ty_entry, ty_exit = (sb - mt) / dy, (st - mb) / dy

    if (tx_entry < 0.0 and ty_entry < 0.0) or tx_entry > 1.0 or ty_entry > 1.0:
        return _NO_HIT

    t_entry = max(tx_entry, ty_entry)
    t_exit = min(tx_exit, ty_exit)

    if t_entry > t_exit:
        return _NO_HIT

    if tx_entry > ty_entry:
        return t_entry, (-1.0 if dx > 0 else 1.0), 0.0
    return t_entry, 0.0, (-1.0 if dy > 0 else 1.0)


def sweep(src: GameObject, dt: float, dest: GameObject) -> CollisionEvent:
    """Sweep ``src`` against ``dest`` over ``dt`` milliseconds, both moving."""
    dx = src.vx * dt - dest.vx * dt
    dy = src.vy * dt - dest.vy * dt

    ml, mt, mr, mb = src.bounding_box()
    sl, st, sr, sb = dest.bounding_box()

    t, nx, ny = swept_aabb(ml, mt, mr, mb, dx, dy, sl, st, sr, sb)
    return CollisionEvent(t, nx, ny, dx, dy, dest, src)


def scan(src: GameObject, dt: float, dests: Iterable[GameObject]) -> list[CollisionEvent]:
    """Return the events of ``src`` against each of ``dests`` that collide this frame."""
    return [e for e in (sweep(src, dt, dest) for dest in dests) if e.was_collided()]


def filter_events(
    events: Sequence[CollisionEvent],
    filter_block: bool = True,
    filter_x: bool = True,
    filter_y: bool = True,
) -> tuple[CollisionEvent | None, CollisionEvent | None]:
    """Pick the earliest event on each axis.

    With ``filter_block`` only events against blocking objects are considered.
    An axis whose flag is off yields ``None``.
    """
    min_tx = min_ty = 1.0
    col_x: CollisionEvent | None = None
    col_y: CollisionEvent | None = None

    for event in events:
        if event.deleted or event.obj is None or event.obj.deleted:
            continue
        if filter_block and not event.obj.is_blocking():
            continue
        if filter_x and event.nx != 0 and event.t < min_tx:
            min_tx, col_x = event.t, event
        if filter_y and event.ny != 0 and event.t < min_ty:
            min_ty, col_y = event.t, event

    return col_x, col_y


def process(src: GameObject, dt: float, co_objects: Iterable[GameObject] | None) -> None:
    """Move ``src`` by one frame, stopping it at blocking objects.

    Blocking hits are resolved axis by axis; every non-blocking hit is then
    reported to ``src.on_collision_with`` as well.
    """
    events: list[CollisionEvent] = []
    if src.is_collidable() and co_objects is not None:
        events = scan(src, dt, co_objects)

    if not events:
        src.on_no_collision(dt)
    else:
        col_x, col_y = filter_events(events)

        x, y = src.x, src.y
        dx = src.vx * dt
        dy = src.vy * dt

        if col_x is not None and col_y is not None:
            if col_y.t < col_x.t:
                y += col_y.t * dy + col_y.ny * BLOCK_PUSH_FACTOR
                src.x, src.y = x, y
                src.on_collision_with(col_y)

                # Re-check the X hit from the corrected position.
                col_x.deleted = True
                events.append(sweep(src, dt, col_x.obj))
                col_x_other, _ = filter_events(events, True, True, False)

                if col_x_other is not None:
                    x += col_x_other.t * dx + col_x_other.nx * BLOCK_PUSH_FACTOR
                    src.on_collision_with(col_x_other)
                else:
                    x += dx
            else:
                x += col_x.t * dx + col_x.nx * BLOCK_PUSH_FACTOR
                src.x, src.y = x, y
                src.on_collision_with(col_x)

                # Re-check the Y hit from the corrected position.
                col_y.deleted = True
                events.append(sweep(src, dt, col_y.obj))
                _, col_y_other = filter_events(events, True, False, True)

                if col_y_other is not None:
                    y += col_y_other.t * dy + col_y_other.ny * BLOCK_PUSH_FACTOR
                    src.on_collision_with(col_y_other)
                else:
                    y += dy
        elif col_x is not None:
            x += col_x.t * dx + col_x.nx * BLOCK_PUSH_FACTOR
            y += dy
            src.on_collision_with(col_x)
        elif col_y is not None:
            x += dx
            y += col_y.t * dy + col_y.ny * BLOCK_PUSH_FACTOR
            src.on_collision_with(col_y)
        else:
            x += dx
            y += dy

        src.x, src.y = x, y

    for event in events:
        if event.deleted or event.obj is None or event.obj.is_blocking():
            continue
        src.on_collision_with(event)