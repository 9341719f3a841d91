from typing import Annotated

import typer

from bloom.lsystem.composer import RadialComposer
from bloom.lsystem.grammar import TurtleCommand
from bloom.lsystem.settings import RadialBloomSettings
from bloom.lsystem.turtle import Pose, interpret
from bloom.utilities.logging import get_logger

logger = get_logger(__name__)


def describe_command(
    iterations: Annotated[
        int | None, typer.Option("--iterations", help="Rewriting passes")
    ] = None,
    branches: Annotated[
        int | None, typer.Option("--branches", help="Radial copies of the plant")
    ] = None,
) -> None:
    """Expand the grammar and summarize one fully grown branch without drawing."""
    try:
        settings = RadialBloomSettings.from_environment(
            iterations=iterations, branches=branches
        )
    except ValueError as exc:
        logger.error("Invalid configuration: %s", exc)
        raise typer.Exit(code=1)

    composer = RadialComposer(settings)
    sequence = composer.sequence
    grown = interpret(
        sequence,
        len(sequence),
        angle_step=settings.angle_step,
        start_pose=Pose(segment_length=settings.initial_length),
        style=settings.style,
    )

    typer.echo(f"axiom: {settings.grammar.axiom}")
    typer.echo(f"rules: {len(settings.grammar.rules)}")
    typer.echo(f"symbols: {len(sequence)}")
    typer.echo(f"forward steps: {sequence.count(TurtleCommand.FORWARD)}")
    typer.echo(f"max bracket depth: {sequence.max_depth()}")
    typer.echo(f"branches: {settings.branch_count}")
    typer.echo(
        f"segments per branch: {len(grown.segments)} "
        f"({grown.auxiliary_triggers} auxiliary pairs)"
    )
    typer.echo(f"segments per frame: {len(grown.segments) * settings.branch_count}")
