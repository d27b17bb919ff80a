from __future__ import annotations

import pytest

from mod_backgrounds.registry import DuplicateStyleError, RegistryPhaseError, StyleRegistry
from mod_backgrounds.styles import UgBgStyle


class StubUgStyle(UgBgStyle):
    mod = "TestMod"

    def __init__(self, name: str) -> None:
        self._name = name

    @property
    def name(self) -> str:
        return self._name

    def fill_texture_array(self, texture_slots: list[int]) -> None:
        pass


def test_slots_follow_registration_order() -> None:
    registry: StyleRegistry[StubUgStyle] = StyleRegistry("underground")
    styles = [StubUgStyle(f"Style{index}") for index in range(5)]

    slots = [registry.register(style) for style in styles]

    assert slots == [0, 1, 2, 3, 4]
    assert [style.slot for style in styles] == slots
    assert registry.count() == 5
    assert list(registry) == styles


def test_double_registration_fails_fast() -> None:
    registry: StyleRegistry[StubUgStyle] = StyleRegistry("underground")
    style = StubUgStyle("Once")
    registry.register(style)

    with pytest.raises(DuplicateStyleError):
        registry.register(style)

    assert registry.count() == 1
    assert style.slot == 0


def test_duplicate_full_name_rejected() -> None:
    registry: StyleRegistry[StubUgStyle] = StyleRegistry("underground")
    registry.register(StubUgStyle("Same"))

    with pytest.raises(DuplicateStyleError):
        registry.register(StubUgStyle("Same"))


def test_style_registered_elsewhere_is_rejected() -> None:
    first: StyleRegistry[StubUgStyle] = StyleRegistry("underground")
    second: StyleRegistry[StubUgStyle] = StyleRegistry("underground")
    style = StubUgStyle("Shared")
    first.register(style)

    with pytest.raises(DuplicateStyleError):
        second.register(style)


def test_register_after_seal_raises() -> None:
    registry: StyleRegistry[StubUgStyle] = StyleRegistry("underground")
    registry.seal()

    with pytest.raises(RegistryPhaseError):
        registry.register(StubUgStyle("Late"))


def test_require_sealed_before_resolving() -> None:
    registry: StyleRegistry[StubUgStyle] = StyleRegistry("underground")

    with pytest.raises(RegistryPhaseError):
        registry.require_sealed()

    registry.seal()
    registry.require_sealed()


def test_get_and_find() -> None:
    registry: StyleRegistry[StubUgStyle] = StyleRegistry("underground")
    style = StubUgStyle("Caves")
    registry.register(style)

    assert registry.get(0) is style
    assert registry.get(1) is None
    assert registry.get(-1) is None
    assert registry.find("TestMod/Caves") is style
    with pytest.raises(KeyError):
        registry.find("TestMod/Missing")


def test_unload_reopens_load_phase() -> None:
    registry: StyleRegistry[StubUgStyle] = StyleRegistry("underground")
    style = StubUgStyle("Caves")
    registry.register(style)
    registry.seal()

    registry.unload()

    assert registry.count() == 0
    assert registry.sealed is False
    assert style.slot is None
    assert registry.register(style) == 0
