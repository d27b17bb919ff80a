"""Per-frame selection of the underground background style."""

from __future__ import annotations

import logging

from mod_backgrounds.global_styles import GlobalStyleBroadcaster
from mod_backgrounds.models import NO_TEXTURE, UG_TEXTURE_LAYERS, UgFrame
from mod_backgrounds.registry import StyleRegistry
from mod_backgrounds.styles.interfaces import UgBgStyle

from .common import check_buffer, first_claiming_slot


class UgBackgroundResolver:
    """Picks the underground style for a frame and fills its texture array."""

    def __init__(
        self,
        registry: StyleRegistry[UgBgStyle],
        broadcaster: GlobalStyleBroadcaster,
        *,
        strict_buffers: bool = True,
        logger: logging.Logger | None = None,
    ) -> None:
        self._registry = registry
        self._broadcaster = broadcaster
        self._strict_buffers = strict_buffers
        self._logger = logger or logging.getLogger("mod_backgrounds.resolvers.underground")

    def choose_style(self, default_style: int = NO_TEXTURE) -> int:
        style = first_claiming_slot(self._registry, default_style)
        return self._broadcaster.choose_ug_bg_style(style)

    def fill_texture_array(self, style: int, texture_slots: list[int]) -> None:
        ug_style = self._registry.get(style)
        if ug_style is not None:
            ug_style.fill_texture_array(texture_slots)
        self._broadcaster.fill_ug_texture_array(style, texture_slots)

    def resolve(self, texture_slots: list[int], default_style: int = NO_TEXTURE) -> UgFrame:
        """Select the frame's style and let it and the globals fill ``texture_slots`` in place."""
        self._registry.require_sealed()
        self._broadcaster.require_sealed()
        if self._strict_buffers:
            check_buffer("texture_slots", texture_slots, UG_TEXTURE_LAYERS)

        style = self.choose_style(default_style)
        self.fill_texture_array(style, texture_slots)
        self._logger.debug("ug_style_resolved", extra={"ug_style": style, "textures": list(texture_slots)})
        return UgFrame(style=style, textures=texture_slots)
