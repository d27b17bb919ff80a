import pytest

from mod_backgrounds.textures import BackgroundTextureTable


def test_reserve_assigns_sequential_slots_from_offset() -> None:
    table = BackgroundTextureTable(first_slot=200)

    assert table.reserve("DemoMod/Backgrounds/Far") == 200
    assert table.reserve("DemoMod/Backgrounds/Mid") == 201
    assert table.reserve("DemoMod/Backgrounds/Far") == 200
    assert len(table) == 2
    assert table.texture_for(201) == "DemoMod/Backgrounds/Mid"
    assert table.texture_for(5) is None


def test_unknown_texture_resolves_to_no_texture() -> None:
    table = BackgroundTextureTable()

    assert table.get_background_slot("Missing/Texture") == -1


def test_invalid_arguments() -> None:
    with pytest.raises(ValueError):
        BackgroundTextureTable(first_slot=-1)
    with pytest.raises(ValueError):
        BackgroundTextureTable().reserve("")
