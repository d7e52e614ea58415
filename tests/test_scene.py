import pytest

from sweptplay.assets import (
    ID_SPRITE_BRICK,
    ID_SPRITE_COIN,
    ID_TEX_MISC,
    AnimationRegistry,
    SpriteRegistry,
    TextureRegistry,
)
from sweptplay.entities import ID_ANI_BRICK, ID_ANI_COIN, Brick, Coin, Goomba, Platform
from sweptplay.gameobject import ID_TEX_BBOX
from sweptplay.mario import (
    ID_ANI_MARIO_DIE,
    ID_ANI_MARIO_SMALL_JUMP_RUN_RIGHT,
    MARIO_ACCEL_RUN_X,
    MARIO_ACCEL_WALK_X,
    MARIO_JUMP_SPEED_Y,
    MARIO_LEVEL_BIG,
    MARIO_LEVEL_SMALL,
    MARIO_STATE_IDLE,
    MARIO_STATE_RUNNING_RIGHT,
    MARIO_STATE_WALKING_LEFT,
    Mario,
)
from sweptplay.scene import (
    MARIO_START_X,
    MARIO_START_Y,
    NUM_BRICKS,
    TEXTURE_PATH_MISC,
    Key,
    SampleKeyHandler,
    Scene,
    load_assets,
    main,
)


class FakeClock:
    def __init__(self):
        self.now = 0

    def __call__(self):
        return self.now


@pytest.fixture
def registries():
    textures, sprites, animations = TextureRegistry(), SpriteRegistry(), AnimationRegistry()
    load_assets(textures, sprites, animations)
    return textures, sprites, animations


@pytest.fixture
def scene():
    return Scene(FakeClock())


def test_load_assets_textures(registries):
    textures, _, _ = registries
    assert textures.get(ID_TEX_MISC).path == TEXTURE_PATH_MISC
    assert ID_TEX_BBOX in textures


def test_load_assets_brick_sprite(registries):
    textures, sprites, _ = registries
    sprite = sprites.get(ID_SPRITE_BRICK + 1)
    assert (sprite.left, sprite.top, sprite.right, sprite.bottom) == (372, 153, 387, 168)
    assert sprite.texture is textures.get(ID_TEX_MISC)


def test_load_assets_animations(registries):
    _, sprites, animations = registries
    coin = animations.get(ID_ANI_COIN)
    assert coin.default_time == 300
    assert [f.sprite for f in coin.frames] == [
        sprites.get(ID_SPRITE_COIN + 1),
        sprites.get(ID_SPRITE_COIN + 2),
        sprites.get(ID_SPRITE_COIN + 3),
    ]
    assert ID_ANI_BRICK in animations
    assert ID_ANI_MARIO_DIE in animations
    assert ID_ANI_MARIO_SMALL_JUMP_RUN_RIGHT in animations


def test_every_animation_frame_uses_loaded_sprite(registries):
    _, sprites, animations = registries
    for animation_id in (ID_ANI_BRICK, ID_ANI_COIN, ID_ANI_MARIO_DIE):
        for frame in animations.get(animation_id).frames:
            assert frame.sprite is sprites.get(frame.sprite.sprite_id)


def test_reload_layout(scene):
    goombas = [o for o in scene.objects if isinstance(o, Goomba)]
    coins = [o for o in scene.objects if isinstance(o, Coin)]
    platforms = [o for o in scene.objects if isinstance(o, Platform)]
    marios = [o for o in scene.objects if isinstance(o, Mario)]
    assert len(goombas) == 4
    assert len(coins) == 10
    assert len(platforms) == 1
    assert marios == [scene.mario]
    assert (scene.mario.x, scene.mario.y) == (MARIO_START_X, MARIO_START_Y)
    bricks = [o for o in scene.objects if isinstance(o, Brick)]
    assert len(bricks) > NUM_BRICKS


def test_reload_rebuilds(scene):
    old_mario = scene.mario
    count = len(scene.objects)
    scene.mario.x = 999.0
    scene.reload()
    assert len(scene.objects) == count
    assert scene.mario is not old_mario
    assert scene.mario.x == MARIO_START_X


def test_purge_deleted(scene):
    coin = next(o for o in scene.objects if isinstance(o, Coin))
    count = len(scene.objects)
    coin.delete()
    assert scene.purge_deleted() == 1
    assert coin not in scene.objects
    assert len(scene.objects) == count - 1


def test_update_lands_mario_and_keeps_camera(scene):
    for _ in range(100):
        scene.update(10)
    assert scene.mario.on_platform is True
    assert scene.mario.vy == 0.0
    assert scene.mario.y > MARIO_START_Y
    assert (scene.cam_x, scene.cam_y) == (0.0, 0.0)


def test_update_purges_deleted_goomba(scene):
    goomba = next(o for o in scene.objects if isinstance(o, Goomba))
    goomba.delete()
    scene.update(10)
    assert goomba not in scene.objects


def test_key_lookup_by_scan_code():
    assert Key(0x1F) is Key.S
    assert Key(0xD0) is Key.DOWN


def test_key_state_running_right(scene):
    handler = SampleKeyHandler(scene)
    handler.key_state(lambda key: key in {Key.RIGHT, Key.A})
    assert scene.mario.state == MARIO_STATE_RUNNING_RIGHT
    assert scene.mario.ax == MARIO_ACCEL_RUN_X


def test_key_state_walking_left(scene):
    handler = SampleKeyHandler(scene)
    handler.key_state(lambda key: key == Key.LEFT)
    assert scene.mario.state == MARIO_STATE_WALKING_LEFT
    assert scene.mario.ax == -MARIO_ACCEL_WALK_X


def test_key_state_idle(scene):
    handler = SampleKeyHandler(scene)
    handler.key_state(lambda key: key == Key.RIGHT)
    handler.key_state(lambda key: False)
    assert scene.mario.state == MARIO_STATE_IDLE
    assert scene.mario.vx == 0.0


def test_jump_and_release(scene):
    handler = SampleKeyHandler(scene)
    scene.mario.on_platform = True
    handler.on_key_down(Key.S)
    assert scene.mario.vy == -MARIO_JUMP_SPEED_Y
    handler.on_key_up(Key.S)
    assert scene.mario.vy == pytest.approx(-MARIO_JUMP_SPEED_Y / 2)


def test_sit_and_release(scene):
    handler = SampleKeyHandler(scene)
    scene.mario.on_platform = True
    y = scene.mario.y
    handler.on_key_down(Key.DOWN)
    assert scene.mario.sitting is True
    handler.on_key_up(Key.DOWN)
    assert scene.mario.sitting is False
    assert scene.mario.y == y


def test_level_keys(scene):
    handler = SampleKeyHandler(scene)
    handler.on_key_down(Key.ONE)
    assert scene.mario.level == MARIO_LEVEL_SMALL
    handler.on_key_down(Key.TWO)
    assert scene.mario.level == MARIO_LEVEL_BIG


def test_reset_key(scene):
    handler = SampleKeyHandler(scene)
    old = scene.mario
    handler.on_key_down(Key.R)
    assert scene.mario is not old
    assert scene.mario in scene.objects


def test_main_prints_summary(capsys):
    assert main(["--frames", "5"]) == 0
    out = capsys.readouterr().out
    assert "frames: 5" in out
    assert "coins: 0" in out


def test_main_rejects_bad_dt():
    with pytest.raises(SystemExit):
        main(["--dt", "0"])