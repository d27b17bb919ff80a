from __future__ import annotations

import pytest
from pydantic import ValidationError

from mod_backgrounds.config import Settings


def test_settings_read_prefixed_environment(monkeypatch) -> None:
    monkeypatch.setenv("MOD_BACKGROUNDS_TRANSITION_SPEED", "0.2")
    monkeypatch.setenv("MOD_BACKGROUNDS_DEFAULT_SURFACE_STYLE", "4")
    monkeypatch.setenv("MOD_BACKGROUNDS_STRICT_BUFFERS", "false")

    loaded = Settings()

    assert loaded.transition_speed == 0.2
    assert loaded.default_surface_style == 4
    assert loaded.strict_buffers is False


def test_transition_speed_must_be_positive(monkeypatch) -> None:
    monkeypatch.setenv("MOD_BACKGROUNDS_TRANSITION_SPEED", "0")

    with pytest.raises(ValidationError):
        Settings()
