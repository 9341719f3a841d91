from __future__ import annotations

from dataclasses import dataclass, replace

from bloom.lsystem.clock import AnimationClock
from bloom.lsystem.grammar import ExpandedSequence
from bloom.lsystem.settings import RadialBloomSettings
from bloom.lsystem.state import RadialBloomState
from bloom.lsystem.turtle import RGB, Pose, TurtlePass, interpret
from bloom.runtime.surface import DrawingSurface
from bloom.utilities.logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class BranchFrame:
    index: int
    draw_limit: int
    # relative to the globally rotated composition
    rotation: float
    color: RGB
    rotation_phase: float


@dataclass(frozen=True)
class BranchRender:
    frame: BranchFrame
    turtle: TurtlePass


class RadialComposer:
    """Owns one expanded sequence and animates ``branch_count`` copies of it.

    Each render pass recomputes every segment from the current state, so the
    drawing surface has to be cleared before each frame.
    """

    def __init__(
        self,
        settings: RadialBloomSettings | None = None,
        *,
        origin: tuple[float, float] = (0.0, 0.0),
    ) -> None:
        self.settings = settings or RadialBloomSettings()
        self.sequence = ExpandedSequence.from_grammar(
            self.settings.grammar, max_iterations=self.settings.max_iterations
        )
        self.state = self.initial_state(origin=origin)

    @property
    def sequence_length(self) -> int:
        return len(self.sequence)

    def initial_state(
        self, *, origin: tuple[float, float] = (0.0, 0.0)
    ) -> RadialBloomState:
        return RadialBloomState.initial(
            sequence_length=self.sequence_length,
            branch_count=self.settings.branch_count,
            growth_rate=self.settings.growth_rate,
            origin=origin,
            clock=AnimationClock(
                primary_speed=self.settings.primary_speed,
                secondary_speed=self.settings.secondary_speed,
            ),
        )

    def advance(self, state: RadialBloomState) -> RadialBloomState:
        return state.advance(
            progress_increment=self.settings.progress_increment,
            jitter_amplitude=self.settings.branch_jitter_amplitude,
        )

    def update(self) -> RadialBloomState:
        self.state = self.advance(self.state)
        return self.state

    def with_growth_rate(
        self, state: RadialBloomState, rate: float
    ) -> RadialBloomState:
        return replace(state, growth_rate=self.settings.clamp_growth_rate(rate))

    def set_growth_rate(self, rate: float) -> None:
        self.state = self.with_growth_rate(self.state, rate)

    def resize(self, width: int, height: int) -> None:
        self.state = replace(self.state, origin=(width / 2, height / 2))

    def branch_frames(self, state: RadialBloomState | None = None) -> list[BranchFrame]:
        state = state or self.state
        frames = []
        for index, branch in enumerate(state.branches):
            frames.append(
                BranchFrame(
                    index=index,
                    draw_limit=state.effective_limit(branch),
                    rotation=branch.angular_offset + branch.rotation_jitter,
                    color=self.settings.branch_color(index),
                    rotation_phase=state.clock.secondary
                    + index * self.settings.branch_phase_stride,
                )
            )
        return frames

    def render_pass(self, state: RadialBloomState | None = None) -> list[BranchRender]:
        state = state or self.state
        start_pose = Pose(segment_length=self.settings.initial_length)
        renders = []
        for frame in self.branch_frames(state):
            style = replace(self.settings.style, base_color=frame.color)
            renders.append(
                BranchRender(
                    frame=frame,
                    turtle=interpret(
                        self.sequence,
                        frame.draw_limit,
                        angle_step=self.settings.angle_step,
                        start_pose=start_pose,
                        style=style,
                        rotation_phase=frame.rotation_phase,
                    ),
                )
            )
        return renders

    def draw(
        self, surface: DrawingSurface, state: RadialBloomState | None = None
    ) -> int:
        """Draw one frame onto ``surface`` and return the number of segments."""
        state = state or self.state
        drawn = 0
        surface.save()
        surface.translate(*state.origin)
        surface.rotate(state.clock.primary)
        for render in self.render_pass(state):
            surface.save()
            surface.rotate(render.frame.rotation)
            for segment in render.turtle.segments:
                surface.draw_line(
                    segment.start, segment.end, segment.color, segment.width
                )
            surface.restore()
            drawn += len(render.turtle.segments)
        surface.restore()
        return drawn
