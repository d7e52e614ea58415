# sweptplay

The game logic of a small side-scrolling platformer: the world, the physics
and the collisions. It has no window or graphics layer. A front end of your
own can draw and drive it.

## What is inside

- `sweptplay.assets` has the registries for textures, sprites and animations:
  `TextureRegistry`, `SpriteRegistry` and `AnimationRegistry`. A lookup of an
  unknown id raises `KeyError`. `Animation` holds looping frames. Each frame
  is shown for a number of milliseconds. `Animation.frame_at(now)` advances
  the animation and returns the frame to draw at tick `now`.
- `sweptplay.gameobject` has the `GameObject` base class. Every object has a
  position, a speed, a facing direction, a state and a bounding box.
- `sweptplay.collision` has swept AABB collision:
  - `swept_aabb` sweeps one moving box against a static box and returns
    `(t, nx, ny)`.
  - `sweep` checks two moving objects against each other.
  - `scan` and `filter_events` collect the candidate hits and pick the
    earliest hit on each axis.
  - `process` moves one object for one frame. It stops the object at blocking
    objects and then reports every non-blocking hit to the object.
- `sweptplay.entities` has the level objects:
  - `Brick` is solid.
  - `Coin` does not block and can be collected.
  - `Platform` can only be landed on from above.
  - `Goomba` walks, turns at walls and is removed 500 ms after it dies.
- `sweptplay.mario` has the player, `Mario`. He walks, runs, jumps and sits.
  He can be big or small. He is invulnerable for a while after a hit, and he
  counts the coins he collects. `Mario.animation_id()` returns the animation
  that matches his current state.
- `sweptplay.scene` has the demo level:
  - `Scene` builds the level, steps it frame by frame with `update(dt)` and
    moves a camera that follows Mario.
  - `load_assets` fills the three registries.
  - `SampleKeyHandler` maps `Key` presses and held keys onto Mario's states.
    `S` jumps, `DOWN` sits, `A` runs, `1` and `2` set his level and `R`
    reloads the level.
- `sweptplay.classic` has two simpler characters:
  - `BouncingMario` moves at a constant speed and turns back at the screen
    edges.
  - `GroundMario` walks, runs, jumps and sits on a fixed ground line. The
    functions `apply_key_state`, `apply_key_down` and `apply_key_up` drive it.

Times are in milliseconds and distances are in pixels. An object's position
is the centre of its bounding box.

## Installing

```
pip install .
```

## Running the demo

```
sweptplay
sweptplay --frames 300 --dt 10 --hold RIGHT --hold A
```

This runs the demo level with a simulated clock and no display. Then it
prints Mario's position, state and level, his coin count, the number of
objects left and the camera position. It has three options:

- `--frames` sets the number of frames. The default is 100.
- `--dt` sets the milliseconds per frame. The default is 10.
- `--hold` names a `Key` that is held down for the whole run. You can give it
  more than once.

## Using it from code

```python
from sweptplay.scene import Scene, SampleKeyHandler, Key

scene = Scene()
handler = SampleKeyHandler(scene)

held = {Key.RIGHT}
for _ in range(100):
    handler.key_state(lambda key: key in held)
    scene.update(10)

print(scene.mario.x, scene.mario.y, scene.mario.coins)
```

`Scene`, `Mario` and `Goomba` take an optional `clock`. This is a callable
that returns milliseconds, and it makes the timers deterministic.

## What it does not do

- It draws nothing and opens no window.
- It reads no keyboard. You supply input through `SampleKeyHandler` or the
  `classic` key functions.
- It does not load images. A `Texture` records only a path and a size.
- The demo level is built in code. It is not read from a file.