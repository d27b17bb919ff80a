"""Process-wide owner of the background style registries and session state."""

from __future__ import annotations

import logging

from mod_backgrounds.config import settings
from mod_backgrounds.global_styles import GlobalStyleBroadcaster
from mod_backgrounds.models import NO_TEXTURE, CloseLayerParams, SurfaceFrame, UgFrame, empty_texture_array
from mod_backgrounds.registry import StyleRegistry
from mod_backgrounds.resolvers import SurfaceBackgroundResolver, UgBackgroundResolver
from mod_backgrounds.styles.fades import reset_fades
from mod_backgrounds.styles.interfaces import BackgroundStyle, GlobalBgStyle, SpriteBatch, SurfaceBgStyle, UgBgStyle


class BackgroundStyleLoader:
    """Registers styles during loading and resolves both categories every frame.

    Lifecycle: ``add_*`` while loading, ``seal`` once every mod is loaded,
    ``update_frame`` once per rendered frame, ``unload`` to start over.
    """

    def __init__(
        self,
        *,
        transition_speed: float | None = None,
        default_ug_style: int | None = None,
        default_surface_style: int | None = None,
        strict_buffers: bool | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self._transition_speed = settings.transition_speed if transition_speed is None else transition_speed
        if not 0.0 < self._transition_speed <= 1.0:
            raise ValueError(f"transition_speed must be in (0, 1], got {self._transition_speed}")
        self._default_ug_style = settings.default_ug_style if default_ug_style is None else default_ug_style
        self._default_surface_style = (
            settings.default_surface_style if default_surface_style is None else default_surface_style
        )
        strict = settings.strict_buffers if strict_buffers is None else strict_buffers
        self._logger = logger or logging.getLogger("mod_backgrounds.loader")

        self.ug_styles: StyleRegistry[UgBgStyle] = StyleRegistry("underground")
        self.surface_styles: StyleRegistry[SurfaceBgStyle] = StyleRegistry("surface")
        self.global_styles = GlobalStyleBroadcaster()
        self.ug_resolver = UgBackgroundResolver(self.ug_styles, self.global_styles, strict_buffers=strict)
        self.surface_resolver = SurfaceBackgroundResolver(
            self.surface_styles, self.global_styles, strict_buffers=strict
        )
        self._fades: list[float] = []

    @property
    def loaded(self) -> bool:
        return self.ug_styles.sealed and self.surface_styles.sealed and self.global_styles.sealed

    @property
    def fades(self) -> list[float]:
        """The session fade vector, one entry per surface style."""
        return self._fades

    @property
    def transition_speed(self) -> float:
        return self._transition_speed

    def add_ug_style(self, style: UgBgStyle) -> int:
        return self.ug_styles.register(style)

    def add_surface_style(self, style: SurfaceBgStyle) -> int:
        return self.surface_styles.register(style)

    def add_global_style(self, style: GlobalBgStyle) -> None:
        self.global_styles.register(style)

    def add_style(self, style: BackgroundStyle) -> int | None:
        """Register ``style`` with the registry matching its category."""
        if isinstance(style, UgBgStyle):
            return self.add_ug_style(style)
        if isinstance(style, SurfaceBgStyle):
            return self.add_surface_style(style)
        if isinstance(style, GlobalBgStyle):
            self.add_global_style(style)
            return None
        raise TypeError(f"Not a background style: {style!r}")

    def seal(self) -> None:
        """Finish loading and start a fresh session."""
        self.ug_styles.seal()
        self.surface_styles.seal()
        self.global_styles.seal()
        self.start_session()

    def start_session(self) -> None:
        self._fades = reset_fades(self.surface_styles.count())
        self._logger.info("session_started", extra={"surface_styles": len(self._fades)})

    def update_frame(
        self,
        sprite_batch: SpriteBatch,
        *,
        texture_slots: list[int] | None = None,
        far_texture: int = NO_TEXTURE,
        middle_texture: int = NO_TEXTURE,
        close_texture: int = NO_TEXTURE,
        close_params: CloseLayerParams | None = None,
    ) -> tuple[UgFrame, SurfaceFrame]:
        """Resolve the underground style, then the surface style, for one frame."""
        ug_frame = self.ug_resolver.resolve(
            texture_slots if texture_slots is not None else empty_texture_array(),
            self._default_ug_style,
        )
        surface_frame = self.surface_resolver.resolve(
            self._fades,
            self._transition_speed,
            sprite_batch,
            default_style=self._default_surface_style,
            far_texture=far_texture,
            middle_texture=middle_texture,
            close_texture=close_texture,
            close_params=close_params,
        )
        return ug_frame, surface_frame

    def unload(self) -> None:
        self.ug_styles.unload()
        self.surface_styles.unload()
        self.global_styles.unload()
        self._fades = []
        self._logger.info("styles_unloaded")
