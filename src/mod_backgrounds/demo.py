"""Demo styles driven by a simulated world, used by the CLI and tests."""

from __future__ import annotations

from dataclasses import dataclass, field

from mod_backgrounds.loader import BackgroundStyleLoader
from mod_backgrounds.models import CloseLayerParams
from mod_backgrounds.styles.fades import fade_out, step_fades_toward
from mod_backgrounds.styles.interfaces import GlobalBgStyle, SpriteBatch, SurfaceBgStyle, UgBgStyle
from mod_backgrounds.textures import BackgroundTextureTable

DEMO_MOD = "DemoMod"


@dataclass(slots=True)
class DemoWorld:
    """Mutable world signals the demo styles react to."""

    biome: str = "forest"
    depth: int = 0
    blood_moon: bool = False


@dataclass(slots=True)
class RecordingSpriteBatch:
    """Sprite batch that remembers default close-layer draws instead of drawing."""

    draws: list[tuple[int, CloseLayerParams]] = field(default_factory=list)

    def draw_close_background(self, texture: int, params: CloseLayerParams) -> None:
        self.draws.append((texture, params))


class _DemoSurfaceStyle(SurfaceBgStyle):
    mod = DEMO_MOD
    biome = ""

    def __init__(self, world: DemoWorld, textures: BackgroundTextureTable) -> None:
        self._world = world
        prefix = f"{DEMO_MOD}/Backgrounds/{self.name}"
        self._far = textures.reserve(f"{prefix}Far")
        self._middle = textures.reserve(f"{prefix}Mid")
        self._close = textures.reserve(f"{prefix}Close")

    def choose_bg_style(self) -> bool:
        return self._world.biome == self.biome

    def modify_far_fades(self, fades: list[float], transition_speed: float) -> None:
        if self.is_active:
            step_fades_toward(fades, self.slot, transition_speed)
        else:
            fade_out(fades, self.slot, transition_speed)

    def choose_far_texture(self) -> int:
        return self._far

    def choose_middle_texture(self) -> int:
        return self._middle

    def choose_close_texture(self, params: CloseLayerParams) -> int:
        return self._close


class CrystalSurfaceStyle(_DemoSurfaceStyle):
    biome = "crystal"

    def choose_close_texture(self, params: CloseLayerParams) -> int:
        params.scale *= 1.25
        params.parallax = 0.4
        return self._close


class DuneSurfaceStyle(_DemoSurfaceStyle):
    biome = "dunes"

    def pre_draw_close_background(self, sprite_batch: SpriteBatch) -> bool:
        # Dunes have no close layer.
        return False


class CrystalCavernUgStyle(UgBgStyle):
    mod = DEMO_MOD

    def __init__(self, world: DemoWorld, textures: BackgroundTextureTable, min_depth: int = 300) -> None:
        self._world = world
        self._min_depth = min_depth
        self._layers = [
            textures.reserve(f"{DEMO_MOD}/Backgrounds/CavernUg{index}") for index in range(4)
        ]

    def choose_bg_style(self) -> bool:
        return self._world.biome == "crystal" and self._world.depth >= self._min_depth

    def fill_texture_array(self, texture_slots: list[int]) -> None:
        texture_slots[:] = self._layers


class BloodMoonGlobalStyle(GlobalBgStyle):
    """Forces the crystal surface backdrop during a blood moon."""

    mod = DEMO_MOD

    def __init__(self, world: DemoWorld, surface_style: SurfaceBgStyle) -> None:
        self._world = world
        self._surface_style = surface_style

    def choose_surface_bg_style(self, style: int) -> int:
        if self._world.blood_moon and self._surface_style.slot is not None:
            return self._surface_style.slot
        return style


def build_demo_loader(
    world: DemoWorld,
    *,
    textures: BackgroundTextureTable | None = None,
    transition_speed: float | None = None,
) -> BackgroundStyleLoader:
    """Register the demo styles on a new loader and seal it."""
    if textures is None:
        textures = BackgroundTextureTable()
    loader = BackgroundStyleLoader(transition_speed=transition_speed)

    crystal = CrystalSurfaceStyle(world, textures)
    loader.add_style(crystal)
    loader.add_style(DuneSurfaceStyle(world, textures))
    loader.add_style(CrystalCavernUgStyle(world, textures))
    loader.add_style(BloodMoonGlobalStyle(world, crystal))

    loader.seal()
    return loader
