"""Dispatch of global background hooks over every registered global style."""

from __future__ import annotations

import logging
from typing import Iterator

from mod_backgrounds.registry import StyleRegistry
from mod_backgrounds.styles.interfaces import GlobalBgStyle


class GlobalStyleBroadcaster:
    """Runs each global hook as an ordered fold over the registered globals.

    Every global sees the result left by the globals registered before it, so
    registration order decides who has the last word.
    """

    def __init__(self, *, logger: logging.Logger | None = None) -> None:
        self._logger = logger or logging.getLogger("mod_backgrounds.global_styles")
        self._registry: StyleRegistry[GlobalBgStyle] = StyleRegistry(
            "global", assign_slots=False, logger=self._logger
        )

    @property
    def sealed(self) -> bool:
        return self._registry.sealed

    def register(self, global_style: GlobalBgStyle) -> None:
        self._registry.register(global_style)

    def seal(self) -> None:
        self._registry.seal()

    def require_sealed(self) -> None:
        self._registry.require_sealed()

    def unload(self) -> None:
        self._registry.unload()

    def find(self, full_name: str) -> GlobalBgStyle:
        return self._registry.find(full_name)

    def count(self) -> int:
        return self._registry.count()

    def __iter__(self) -> Iterator[GlobalBgStyle]:
        return iter(self._registry)

    def choose_ug_bg_style(self, style: int) -> int:
        for global_style in self._registry:
            chosen = global_style.choose_ug_bg_style(style)
            if chosen != style:
                self._logger.debug(
                    "ug_style_overridden",
                    extra={"global_style": global_style.full_name, "from_style": style, "to_style": chosen},
                )
            style = chosen
        return style

    def choose_surface_bg_style(self, style: int) -> int:
        for global_style in self._registry:
            chosen = global_style.choose_surface_bg_style(style)
            if chosen != style:
                self._logger.debug(
                    "surface_style_overridden",
                    extra={"global_style": global_style.full_name, "from_style": style, "to_style": chosen},
                )
            style = chosen
        return style

    def fill_ug_texture_array(self, style: int, texture_slots: list[int]) -> None:
        for global_style in self._registry:
            global_style.fill_ug_texture_array(style, texture_slots)

    def modify_far_surface_fades(self, style: int, fades: list[float], transition_speed: float) -> None:
        for global_style in self._registry:
            global_style.modify_far_surface_fades(style, fades, transition_speed)
