"""Background style contracts and helpers."""

from .fades import fade_out, reset_fades, step_fades_toward
from .interfaces import (
    BackgroundStyle,
    GlobalBgStyle,
    SpriteBatch,
    SurfaceBgStyle,
    TextureSlotResolver,
    UgBgStyle,
)

__all__ = [
    "BackgroundStyle",
    "GlobalBgStyle",
    "SpriteBatch",
    "SurfaceBgStyle",
    "TextureSlotResolver",
    "UgBgStyle",
    "fade_out",
    "reset_fades",
    "step_fades_toward",
]
