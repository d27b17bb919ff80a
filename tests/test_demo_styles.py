from __future__ import annotations

from mod_backgrounds.demo import DemoWorld, RecordingSpriteBatch, build_demo_loader
from mod_backgrounds.textures import BackgroundTextureTable


def test_biome_change_crossfades_between_styles() -> None:
    world = DemoWorld(biome="crystal")
    loader = build_demo_loader(world, transition_speed=0.25)
    sprite_batch = RecordingSpriteBatch()

    for _ in range(4):
        loader.update_frame(sprite_batch)
    assert loader.fades == [1.0, 0.0]

    world.biome = "dunes"
    _, surface_frame = loader.update_frame(sprite_batch)
    assert surface_frame.style == 1
    assert loader.fades == [0.5, 0.25]

    layers = loader.surface_resolver.crossfade_layers(loader.fades)
    assert [layer.slot for layer in layers] == [0, 1]


def test_dunes_skip_default_close_draw() -> None:
    world = DemoWorld(biome="dunes")
    loader = build_demo_loader(world)
    sprite_batch = RecordingSpriteBatch()

    _, surface_frame = loader.update_frame(sprite_batch)

    assert surface_frame.drew_default_close is False
    assert surface_frame.close_texture != -1
    assert sprite_batch.draws == []


def test_crystal_rewrites_close_params_and_draws() -> None:
    textures = BackgroundTextureTable()
    loader = build_demo_loader(DemoWorld(biome="crystal"), textures=textures)
    sprite_batch = RecordingSpriteBatch()

    _, surface_frame = loader.update_frame(sprite_batch)

    assert len(sprite_batch.draws) == 1
    texture, params = sprite_batch.draws[0]
    assert textures.texture_for(texture) == "DemoMod/Backgrounds/CrystalSurfaceStyleClose"
    assert params.scale == 1.25
    assert params.parallax == 0.4


def test_blood_moon_global_forces_crystal_backdrop() -> None:
    world = DemoWorld(biome="dunes", blood_moon=True)
    loader = build_demo_loader(world)

    _, surface_frame = loader.update_frame(RecordingSpriteBatch())

    assert surface_frame.style == 0


def test_cavern_only_below_min_depth() -> None:
    world = DemoWorld(biome="crystal", depth=10)
    loader = build_demo_loader(world)

    shallow, _ = loader.update_frame(RecordingSpriteBatch())
    world.depth = 500
    deep, _ = loader.update_frame(RecordingSpriteBatch())

    assert shallow.style == -1
    assert shallow.textures == [-1, -1, -1, -1]
    assert deep.style == 0
    assert -1 not in deep.textures


def test_fades_decay_in_a_biome_without_a_style() -> None:
    world = DemoWorld(biome="crystal")
    loader = build_demo_loader(world, transition_speed=0.25)
    sprite_batch = RecordingSpriteBatch()
    for _ in range(4):
        loader.update_frame(sprite_batch)

    world.biome = "forest"
    for _ in range(4):
        _, surface_frame = loader.update_frame(sprite_batch)

    assert surface_frame.style == -1
    assert loader.fades == [0.0, 0.0]
    assert loader.surface_resolver.crossfade_layers(loader.fades) == []


def test_caller_texture_table_receives_demo_textures() -> None:
    textures = BackgroundTextureTable()

    build_demo_loader(DemoWorld(), textures=textures)

    assert len(textures) == 10
    assert textures.get_background_slot("DemoMod/Backgrounds/CavernUg3") == 9
