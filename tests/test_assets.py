import logging

import pytest

from sweptplay.assets import (
    ID_SPRITE_MARIO_BIG_IDLE_RIGHT,
    ID_SPRITE_MARIO_SMALL_BRACE,
    ID_SPRITE_MARIO_SMALL_SIT,
    Animation,
    AnimationRegistry,
    Sprite,
    SpriteRegistry,
    Texture,
    TextureRegistry,
)


@pytest.fixture
def sprites():
    registry = SpriteRegistry()
    tex = Texture("textures/misc.png", 512, 256)
    registry.add(1, 303, 99, 312, 114, tex)
    registry.add(2, 321, 99, 330, 114, tex)
    registry.add(3, 338, 99, 347, 114, tex)
    return registry


def test_texture_defaults_to_unknown_size():
    tex = Texture("a.png")
    assert (tex.width, tex.height) == (-1, -1)


def test_texture_registry_round_trip():
    registry = TextureRegistry()
    tex = Texture("mario.png", 10, 20)
    registry.add(5, tex)
    assert registry.get(5) is tex
    assert 5 in registry
    assert len(registry) == 1


def test_texture_registry_missing_raises():
    with pytest.raises(KeyError):
        TextureRegistry().get(42)


def test_sprite_registry_stores_rectangle(sprites):
    sprite = sprites.get(2)
    assert (sprite.left, sprite.top, sprite.right, sprite.bottom) == (321, 99, 330, 114)
    assert sprite.sprite_id == 2
    assert sprite.texture.path == "textures/misc.png"


def test_sprite_size():
    sprite = Sprite(7, 246, 154, 259, 181)
    assert sprite.width == 259 - 246
    assert sprite.height == 181 - 154


def test_sprite_registry_overwrites(sprites):
    sprites.add(1, 0, 0, 4, 4, None)
    assert sprites.get(1).right == 4
    assert len(sprites) == 3


def test_sprite_registry_missing_raises(sprites):
    with pytest.raises(KeyError):
        sprites.get(999)


def test_animation_add_uses_default_time(sprites):
    ani = Animation(300, sprites)
    frame = ani.add(1)
    assert frame.time == 300
    assert frame.sprite is sprites.get(1)


def test_animation_add_explicit_time(sprites):
    ani = Animation(100, sprites)
    assert ani.add(1, 1000).time == 1000


def test_animation_add_missing_sprite(sprites):
    ani = Animation(100, sprites)
    with pytest.raises(KeyError):
        ani.add(12345)
    assert ani.frames == []


def test_animation_first_frame_then_advances(sprites):
    ani = Animation(100, sprites)
    for sid in (1, 2, 3):
        ani.add(sid)
    assert ani.frame_at(1000).sprite.sprite_id == 1
    assert ani.frame_at(1050).sprite.sprite_id == 1
    assert ani.frame_at(1100).sprite.sprite_id == 1
    assert ani.frame_at(1101).sprite.sprite_id == 2
    assert ani.frame_at(1202).sprite.sprite_id == 3
    assert ani.frame_at(1303).sprite.sprite_id == 1


def test_animation_single_frame_stays(sprites):
    ani = Animation(100, sprites)
    ani.add(3)
    seen = {ani.frame_at(t).sprite.sprite_id for t in range(0, 2000, 150)}
    assert seen == {3}


def test_animation_empty_raises(sprites):
    with pytest.raises(ValueError):
        Animation(100, sprites).frame_at(0)


def test_animation_registry_round_trip(sprites):
    registry = AnimationRegistry()
    ani = Animation(100, sprites)
    registry.add(500, ani)
    assert registry.get(500) is ani
    assert 500 in registry


def test_animation_registry_warns_on_duplicate(sprites, caplog):
    registry = AnimationRegistry()
    first = Animation(100, sprites)
    second = Animation(50, sprites)
    registry.add(500, first)
    with caplog.at_level(logging.WARNING):
        registry.add(500, second)
    assert registry.get(500) is second
    assert "already exists" in caplog.text


def test_animation_registry_missing_raises():
    with pytest.raises(KeyError):
        AnimationRegistry().get(501)


def test_overlapping_asset_ids_share_registry_slot():
    registry = SpriteRegistry()
    registry.add(ID_SPRITE_MARIO_BIG_IDLE_RIGHT + 1, 246, 154, 259, 181, None)
    assert registry.get(11121).right == 259
    registry.add(ID_SPRITE_MARIO_SMALL_SIT + 1, 1, 2, 3, 4, None)
    registry.add(ID_SPRITE_MARIO_SMALL_BRACE + 1, 5, 6, 7, 8, None)
    assert registry.get(ID_SPRITE_MARIO_SMALL_SIT + 1).left == 5
    assert len(registry) == 2