"""Per-frame selection and crossfading of surface background styles."""

from __future__ import annotations

import logging

from mod_backgrounds.global_styles import GlobalStyleBroadcaster
from mod_backgrounds.models import NO_TEXTURE, CloseLayerParams, FadedLayer, SurfaceFrame
from mod_backgrounds.registry import StyleRegistry
from mod_backgrounds.styles.interfaces import SpriteBatch, SurfaceBgStyle

from .common import check_buffer, first_claiming_slot, keep_unless_opinion


class SurfaceBackgroundResolver:
    """Picks the surface style for a frame and drives the shared fade vector.

    The fade vector is never adjusted here: every registered style is handed the
    vector and trusted to push its own entry the right way.
    """

    def __init__(
        self,
        registry: StyleRegistry[SurfaceBgStyle],
        broadcaster: GlobalStyleBroadcaster,
        *,
        strict_buffers: bool = True,
        logger: logging.Logger | None = None,
    ) -> None:
        self._registry = registry
        self._broadcaster = broadcaster
        self._strict_buffers = strict_buffers
        self._logger = logger or logging.getLogger("mod_backgrounds.resolvers.surface")

    def choose_style(self, default_style: int = NO_TEXTURE) -> int:
        style = first_claiming_slot(self._registry, default_style)
        return self._broadcaster.choose_surface_bg_style(style)

    def modify_far_fades(self, style: int, fades: list[float], transition_speed: float) -> None:
        for surface_style in self._registry:
            surface_style.is_active = surface_style.slot == style
            surface_style.modify_far_fades(fades, transition_speed)
        self._broadcaster.modify_far_surface_fades(style, fades, transition_speed)

    def resolve(
        self,
        fades: list[float],
        transition_speed: float,
        sprite_batch: SpriteBatch,
        *,
        default_style: int = NO_TEXTURE,
        far_texture: int = NO_TEXTURE,
        middle_texture: int = NO_TEXTURE,
        close_texture: int = NO_TEXTURE,
        close_params: CloseLayerParams | None = None,
    ) -> SurfaceFrame:
        """Run one frame of surface resolution.

        ``far_texture``, ``middle_texture`` and ``close_texture`` are the
        caller's current choices; they survive whenever the style has no
        opinion. The default close layer is drawn through ``sprite_batch``
        at most once, and not at all when the style's pre-draw hook says so.
        """
        self._registry.require_sealed()
        self._broadcaster.require_sealed()
        if self._strict_buffers:
            check_buffer("fades", fades, self._registry.count())

        style = self.choose_style(default_style)
        self.modify_far_fades(style, fades, transition_speed)

        frame = SurfaceFrame(
            style=style,
            far_texture=far_texture,
            middle_texture=middle_texture,
            close_texture=close_texture,
            close_params=close_params if close_params is not None else CloseLayerParams(),
        )

        draw_default = True
        surface_style = self._registry.get(style)
        if surface_style is not None:
            frame.far_texture = keep_unless_opinion(surface_style.choose_far_texture(), far_texture)
            frame.middle_texture = keep_unless_opinion(surface_style.choose_middle_texture(), middle_texture)
            draw_default = surface_style.pre_draw_close_background(sprite_batch)
            frame.close_texture = keep_unless_opinion(
                surface_style.choose_close_texture(frame.close_params), close_texture
            )

        if draw_default and frame.close_texture != NO_TEXTURE:
            sprite_batch.draw_close_background(frame.close_texture, frame.close_params)
            frame.drew_default_close = True

        self._logger.debug(
            "surface_style_resolved",
            extra={
                "surface_style": style,
                "far_texture": frame.far_texture,
                "middle_texture": frame.middle_texture,
                "close_texture": frame.close_texture,
                "drew_default_close": frame.drew_default_close,
            },
        )
        return frame

    def crossfade_layers(self, fades: list[float]) -> list[FadedLayer]:
        """Far and middle layers of every style still visible, weighted by its fade."""
        if self._strict_buffers:
            check_buffer("fades", fades, self._registry.count())

        layers: list[FadedLayer] = []
        for surface_style in self._registry:
            alpha = fades[surface_style.slot]
            if alpha <= 0.0:
                continue
            layers.append(
                FadedLayer(
                    slot=surface_style.slot,
                    far_texture=surface_style.choose_far_texture(),
                    middle_texture=surface_style.choose_middle_texture(),
                    alpha=alpha,
                )
            )
        return layers
