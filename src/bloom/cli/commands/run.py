from typing import Annotated

import typer

from bloom.lsystem.composer import RadialComposer
from bloom.lsystem.renderer import RadialBloomRenderer
from bloom.lsystem.settings import RadialBloomSettings
from bloom.runtime.game_loop import GameLoop
from bloom.utilities.env import Configuration, LineRasterStrategy
from bloom.utilities.logging import get_logger

logger = get_logger(__name__)


def run_command(
    iterations: Annotated[
        int | None, typer.Option("--iterations", help="Rewriting passes")
    ] = None,
    branches: Annotated[
        int | None, typer.Option("--branches", help="Radial copies of the plant")
    ] = None,
    fps: Annotated[int | None, typer.Option("--fps", help="Target frame rate")] = None,
    width: Annotated[int | None, typer.Option("--width")] = None,
    height: Annotated[int | None, typer.Option("--height")] = None,
    raster: Annotated[
        LineRasterStrategy | None,
        typer.Option("--raster", help="Line rasterizer to draw with"),
    ] = None,
    frames: Annotated[
        int | None,
        typer.Option("--frames", help="Stop after this many frames"),
    ] = None,
) -> None:
    try:
        settings = RadialBloomSettings.from_environment(
            iterations=iterations, branches=branches
        )
        default_width, default_height = Configuration.window_size()
        size = (width or default_width, height or default_height)
        composer = RadialComposer(settings, origin=(size[0] / 2, size[1] / 2))
        loop = GameLoop(size=size, max_fps=fps)
    except ValueError as exc:
        logger.error("Invalid configuration: %s", exc)
        raise typer.Exit(code=1)

    loop.add_renderer(RadialBloomRenderer(composer=composer, raster_strategy=raster))
    loop.start(max_frames=frames)
