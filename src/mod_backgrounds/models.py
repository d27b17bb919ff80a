from __future__ import annotations

from dataclasses import dataclass, field

NO_TEXTURE = -1
UG_TEXTURE_LAYERS = 4


@dataclass(slots=True)
class CloseLayerParams:
    """Draw parameters a surface style may rewrite for the closest layer."""

    scale: float = 1.0
    parallax: float = 0.0
    a: float = 0.0
    b: float = 0.0


@dataclass(slots=True)
class UgFrame:
    style: int
    textures: list[int]


@dataclass(slots=True)
class SurfaceFrame:
    style: int
    far_texture: int = NO_TEXTURE
    middle_texture: int = NO_TEXTURE
    close_texture: int = NO_TEXTURE
    close_params: CloseLayerParams = field(default_factory=CloseLayerParams)
    drew_default_close: bool = False


@dataclass(slots=True)
class FadedLayer:
    """One surface style's far/middle layer weighted by its current fade."""

    slot: int
    far_texture: int
    middle_texture: int
    alpha: float


def empty_texture_array() -> list[int]:
    return [NO_TEXTURE] * UG_TEXTURE_LAYERS
