"""Contracts implemented by background style extensions.

Underground and surface styles receive a slot when they are registered and are
asked once per frame whether they want to be shown. Global styles are not tied
to any slot; they observe and may rewrite the outcome of both categories.
Every hook has a body so a style only overrides what it cares about.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Protocol

from mod_backgrounds.models import NO_TEXTURE, CloseLayerParams


class SpriteBatch(Protocol):
    """Drawing surface owned by the rendering layer."""

    def draw_close_background(self, texture: int, params: CloseLayerParams) -> None:
        """Draw the closest surface layer with the engine's default routine."""


class TextureSlotResolver(Protocol):
    """Maps a mod-local texture identifier to an engine-global background slot."""

    def get_background_slot(self, texture: str) -> int:
        """Return the slot for ``texture`` or ``-1`` when it is unknown."""


class BackgroundStyle:
    """Identity shared by every registered style."""

    mod: str = ""
    _slot: int | None = None
    is_active: bool = False

    @property
    def name(self) -> str:
        return type(self).__name__

    @property
    def full_name(self) -> str:
        return f"{self.mod}/{self.name}"

    @property
    def slot(self) -> int | None:
        """Slot assigned at registration, ``None`` before that."""
        return self._slot

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.full_name} slot={self._slot}>"


class UgBgStyle(BackgroundStyle, ABC):
    """Underground background style."""

    def choose_bg_style(self) -> bool:
        """Whether this style's activation condition currently holds."""
        return False

    @abstractmethod
    def fill_texture_array(self, texture_slots: list[int]) -> None:
        """Write the texture ids for the four underground layers.

        Index 0 is the sky/ground border, 1 the ground/rock transition,
        2 the ground/rock border and 3 the rock layer.
        """


class SurfaceBgStyle(BackgroundStyle, ABC):
    """Surface background style."""

    def choose_bg_style(self) -> bool:
        """Whether this style's activation condition currently holds."""
        return False

    @abstractmethod
    def modify_far_fades(self, fades: list[float], transition_speed: float) -> None:
        """Move this style's fade toward 1 and every other fade toward 0.

        Called on every registered surface style each frame; ``is_active`` tells
        the style whether it is the one currently shown. A style that is not
        shown should still lower its own entry. Each value should move
        by at most ``transition_speed`` and stay within [0, 1].
        """

    def choose_far_texture(self) -> int:
        return NO_TEXTURE

    def choose_middle_texture(self) -> int:
        return NO_TEXTURE

    def pre_draw_close_background(self, sprite_batch: SpriteBatch) -> bool:
        """Return False to skip the engine's own close background draw."""
        return True

    def choose_close_texture(self, params: CloseLayerParams) -> int:
        """Pick the close layer texture; ``params`` may be rewritten in place."""
        return NO_TEXTURE


class GlobalBgStyle(BackgroundStyle):
    """Hooks that apply to every background style regardless of slot."""

    def choose_ug_bg_style(self, style: int) -> int:
        return style

    def choose_surface_bg_style(self, style: int) -> int:
        return style

    def fill_ug_texture_array(self, style: int, texture_slots: list[int]) -> None:
        """Rewrite the underground textures chosen for ``style`` in place."""

    def modify_far_surface_fades(self, style: int, fades: list[float], transition_speed: float) -> None:
        """Adjust the surface fade vector; ``style`` is the slot being shown."""
