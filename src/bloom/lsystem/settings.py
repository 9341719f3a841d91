from __future__ import annotations

import math
from dataclasses import dataclass, field

from bloom.lsystem.clock import PRIMARY_ROTATION_SPEED, SECONDARY_ROTATION_SPEED
from bloom.lsystem.grammar import Grammar
from bloom.lsystem.state import BRANCH_JITTER_AMPLITUDE, PROGRESS_INCREMENT
from bloom.lsystem.turtle import RGB, TurtleStyle
from bloom.utilities.env import Configuration

REFERENCE_GRAMMAR = Grammar(
    axiom="F",
    rules={"F": "FF[+++F][---F][+F][-F]F"},
    angle_step_deg=20.0,
    iterations=4,
)
LIGHT_ORANGE: RGB = (230.0, 120.0, 30.0)
DEEP_ORANGE: RGB = (160.0, 30.0, 10.0)
BRANCH_PHASE_STRIDE = 0.5


def lerp_color(start: RGB, end: RGB, ratio: float) -> RGB:
    return (
        start[0] + (end[0] - start[0]) * ratio,
        start[1] + (end[1] - start[1]) * ratio,
        start[2] + (end[2] - start[2]) * ratio,
    )


def growth_rate_for_pointer(
    pointer_x: float, width: float, growth_range: tuple[float, float]
) -> float:
    """Map a pointer x coordinate across ``[0, width]`` onto ``growth_range``."""
    low, high = growth_range
    if width <= 0 or math.isnan(pointer_x):
        return low
    ratio = min(max(pointer_x / width, 0.0), 1.0)
    return low + (high - low) * ratio


@dataclass(frozen=True)
class RadialBloomSettings:
    grammar: Grammar = REFERENCE_GRAMMAR
    max_iterations: int | None = 6
    initial_length: float = 5.0
    branch_count: int = 6
    light_color: RGB = LIGHT_ORANGE
    deep_color: RGB = DEEP_ORANGE
    style: TurtleStyle = field(default_factory=TurtleStyle)
    primary_speed: float = PRIMARY_ROTATION_SPEED
    secondary_speed: float = SECONDARY_ROTATION_SPEED
    progress_increment: float = PROGRESS_INCREMENT
    branch_jitter_amplitude: float = BRANCH_JITTER_AMPLITUDE
    branch_phase_stride: float = BRANCH_PHASE_STRIDE
    growth_rate: float = 5.0
    growth_rate_range: tuple[float, float] = (1.0, 15.0)

    def __post_init__(self) -> None:
        if self.branch_count < 1:
            raise ValueError("branch_count must be at least 1")
        if self.initial_length <= 0:
            raise ValueError("initial_length must be > 0")
        if self.growth_rate < 0:
            raise ValueError("growth_rate must be >= 0")

    @property
    def angle_step(self) -> float:
        return math.radians(self.grammar.angle_step_deg)

    def branch_color(self, index: int) -> RGB:
        # index / branch_count never reaches 1, so the last branch stays short of deep_color
        return lerp_color(
            self.light_color, self.deep_color, index / self.branch_count
        )

    def clamp_growth_rate(self, rate: float) -> float:
        low, high = self.growth_rate_range
        if math.isnan(rate):
            return low
        return min(max(rate, low), high)

    @classmethod
    def from_environment(
        cls,
        *,
        iterations: int | None = None,
        branches: int | None = None,
    ) -> "RadialBloomSettings":
        grammar = REFERENCE_GRAMMAR.with_iterations(
            iterations if iterations is not None else Configuration.lsystem_iterations()
        )
        return cls(
            grammar=grammar,
            max_iterations=Configuration.lsystem_max_iterations(),
            branch_count=(
                branches if branches is not None else Configuration.lsystem_branches()
            ),
            growth_rate=Configuration.growth_rate(),
            growth_rate_range=Configuration.growth_rate_range(),
        )
