"""CLI entrypoint for inspecting and simulating background style resolution."""

from __future__ import annotations

import typer
from rich import print
from rich.table import Table

from mod_backgrounds.config import settings
from mod_backgrounds.demo import DemoWorld, RecordingSpriteBatch, build_demo_loader
from mod_backgrounds.telemetry.logging import configure_logging
from mod_backgrounds.textures import BackgroundTextureTable

app = typer.Typer(help="Background style registry and per-frame resolver")


@app.callback()
def _main(log_level: str = typer.Option(None, help="Override MOD_BACKGROUNDS_LOG_LEVEL")) -> None:
    configure_logging(log_level or settings.log_level)


@app.command()
def start() -> None:
    """Show runtime configuration."""
    print(
        {
            "app_name": settings.app_name,
            "log_level": settings.log_level,
            "transition_speed": settings.transition_speed,
            "default_ug_style": settings.default_ug_style,
            "default_surface_style": settings.default_surface_style,
            "strict_buffers": settings.strict_buffers,
        }
    )


@app.command()
def slots() -> None:
    """List the demo styles and the slots they were given."""
    textures = BackgroundTextureTable()
    loader = build_demo_loader(DemoWorld(), textures=textures)

    table = Table(title="Registered background styles")
    table.add_column("category")
    table.add_column("slot", justify="right")
    table.add_column("style")
    for style in loader.ug_styles:
        table.add_row("underground", str(style.slot), style.full_name)
    for style in loader.surface_styles:
        table.add_row("surface", str(style.slot), style.full_name)
    for style in loader.global_styles:
        table.add_row("global", "-", style.full_name)
    print(table)
    print({"textures_reserved": len(textures)})


@app.command()
def simulate(
    frames: int = typer.Option(20, min=1, help="Number of frames to resolve"),
    biome: str = typer.Option("crystal", help="Biome for the first frames"),
    switch_biome: str = typer.Option(None, help="Biome to move to partway through"),
    switch_frame: int = typer.Option(None, help="Frame at which the biome changes"),
    depth: int = typer.Option(0, help="Player depth below the surface"),
    blood_moon: bool = typer.Option(False, help="Let the demo global style force the crystal backdrop"),
    transition_speed: float = typer.Option(None, help="Override MOD_BACKGROUNDS_TRANSITION_SPEED"),
) -> None:
    """Resolve a run of frames with the demo styles and print the fade vector."""
    if switch_biome and switch_frame is None:
        raise typer.BadParameter("--switch-frame is required with --switch-biome")
    if transition_speed is not None and not 0.0 < transition_speed <= 1.0:
        raise typer.BadParameter("--transition-speed must be in (0, 1]")

    world = DemoWorld(biome=biome, depth=depth, blood_moon=blood_moon)
    loader = build_demo_loader(world, transition_speed=transition_speed)
    sprite_batch = RecordingSpriteBatch()

    table = Table(title=f"{frames} frames at transition speed {loader.transition_speed}")
    table.add_column("frame", justify="right")
    table.add_column("biome")
    table.add_column("ug style", justify="right")
    table.add_column("surface style", justify="right")
    table.add_column("fades")
    table.add_column("close drawn")

    for frame in range(frames):
        if switch_biome and frame == switch_frame:
            world.biome = switch_biome
        ug_frame, surface_frame = loader.update_frame(sprite_batch)
        table.add_row(
            str(frame),
            world.biome,
            str(ug_frame.style),
            str(surface_frame.style),
            ", ".join(f"{value:.2f}" for value in loader.fades),
            "yes" if surface_frame.drew_default_close else "no",
        )

    print(table)
    print({"final_fades": [round(value, 4) for value in loader.fades], "close_draws": len(sprite_batch.draws)})


if __name__ == "__main__":
    app()
