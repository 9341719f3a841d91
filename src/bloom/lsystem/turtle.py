from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass, field, replace

from bloom.lsystem.grammar import (ExpandedSequence, TurtleCommand,
                                   bracket_depth)

Point = tuple[float, float]
RGB = tuple[float, float, float]
RGBA = tuple[float, float, float, float]


@dataclass(frozen=True)
class Pose:
    x: float = 0.0
    y: float = 0.0
    heading: float = 0.0
    segment_length: float = 5.0

    @property
    def position(self) -> Point:
        return (self.x, self.y)

    def distance_from_origin(self) -> float:
        return math.hypot(self.x, self.y)

    def advanced(self, length: float) -> "Pose":
        return replace(
            self,
            x=self.x + math.cos(self.heading) * length,
            y=self.y + math.sin(self.heading) * length,
        )

    def turned(self, delta: float) -> "Pose":
        return replace(self, heading=self.heading + delta)


class PoseStack:
    """Bounded push/pop store of pose snapshots.

    Popping an empty stack yields ``None``. Pushing beyond ``capacity`` raises
    ``OverflowError``; ``interpret`` sizes the stack from the sequence's
    bracket depth so a walk never reaches it.
    """

    def __init__(self, capacity: int | None = None) -> None:
        self.capacity = capacity
        self._poses: list[Pose] = []
        self.max_depth = 0

    def push(self, pose: Pose) -> None:
        if self.capacity is not None and len(self._poses) >= self.capacity:
            raise OverflowError(f"PoseStack capacity of {self.capacity} exceeded")
        self._poses.append(pose)
        self.max_depth = max(self.max_depth, len(self._poses))

    def pop(self) -> Pose | None:
        if not self._poses:
            return None
        return self._poses.pop()

    @property
    def depth(self) -> int:
        return len(self._poses)

    def __len__(self) -> int:
        return len(self._poses)


@dataclass(frozen=True)
class AuxiliaryBranchStyle:
    interval: int = 6
    min_distance: float = 50.0
    angle_factor: float = 2.0
    length_factor: float = 0.9
    red_factor: float = 1.1
    green_factor: float = 0.9
    blue_factor: float = 0.8
    alpha: float = 180.0

    def tint(self, base: RGB, fade: float) -> RGBA:
        red, green, blue = base
        return (
            min(red * self.red_factor, 255.0),
            green * self.green_factor,
            blue * self.blue_factor,
            self.alpha * fade,
        )


@dataclass(frozen=True)
class TurtleStyle:
    base_color: RGB = (230.0, 120.0, 30.0)
    max_fade_distance: float = 500.0
    min_fade: float = 0.1
    stroke_width: float = 1.2
    alpha: float = 200.0
    shrink_factor: float = 0.8
    jitter_amplitude: float = 0.05
    jitter_frequency: float = 0.1
    auxiliary: AuxiliaryBranchStyle = field(default_factory=AuxiliaryBranchStyle)

    def fade_ratio(self, distance: float) -> float:
        ratio = 1.0 - distance / self.max_fade_distance
        return min(max(ratio, self.min_fade), 1.0)

    def turn_jitter(self, rotation_phase: float) -> float:
        return math.sin(rotation_phase * self.jitter_frequency) * self.jitter_amplitude


@dataclass(frozen=True)
class Segment:
    start: Point
    end: Point
    color: RGBA
    width: float
    fade: float
    auxiliary: bool = False


@dataclass(frozen=True)
class TurtlePass:
    segments: tuple[Segment, ...]
    final_pose: Pose
    stack_depth: int
    max_stack_depth: int
    forward_steps: int
    auxiliary_triggers: int


def _decoded(
    sequence: ExpandedSequence | Sequence[TurtleCommand] | str,
) -> tuple[Sequence[TurtleCommand], int]:
    """Commands plus the bracket depth that bounds the pose stack."""
    if isinstance(sequence, str):
        sequence = ExpandedSequence.from_text(sequence)
    if isinstance(sequence, ExpandedSequence):
        return sequence.commands, sequence.max_depth()
    return sequence, bracket_depth(sequence)


def interpret(
    sequence: ExpandedSequence | Sequence[TurtleCommand] | str,
    draw_limit: int,
    *,
    angle_step: float,
    start_pose: Pose | None = None,
    style: TurtleStyle | None = None,
    rotation_phase: float = 0.0,
) -> TurtlePass:
    """Walk ``sequence[:draw_limit]`` and emit styled line segments.

    ``angle_step`` is in radians. ``draw_limit`` is clamped to the sequence
    bounds. Every forward step whose count is a multiple of the auxiliary
    interval, and whose start lies beyond the auxiliary minimum distance,
    also emits a pair of tinted side branches that leave the pose untouched.
    """
    commands, capacity = _decoded(sequence)
    style = style or TurtleStyle()
    aux = style.auxiliary
    pose = start_pose or Pose()
    stack = PoseStack(capacity=capacity)
    limit = min(max(int(draw_limit), 0), len(commands))

    jitter = style.turn_jitter(rotation_phase)
    aux_angle = angle_step * aux.angle_factor
    red, green, blue = style.base_color

    segments: list[Segment] = []
    steps = 0
    triggers = 0

    for command in commands[:limit]:
        match command:
            case TurtleCommand.FORWARD:
                distance = pose.distance_from_origin()
                fade = style.fade_ratio(distance)
                width = style.stroke_width * fade
                nxt = pose.advanced(pose.segment_length)
                segments.append(
                    Segment(
                        start=pose.position,
                        end=nxt.position,
                        color=(red, green, blue, style.alpha * fade),
                        width=width,
                        fade=fade,
                    )
                )
                pose = nxt
                steps += 1
                if steps % aux.interval == 0 and distance > aux.min_distance:
                    triggers += 1
                    aux_color = aux.tint(style.base_color, fade)
                    aux_length = pose.segment_length * aux.length_factor
                    for delta in (aux_angle, -aux_angle):
                        tip = pose.turned(delta).advanced(aux_length)
                        segments.append(
                            Segment(
                                start=pose.position,
                                end=tip.position,
                                color=aux_color,
                                width=width,
                                fade=fade,
                                auxiliary=True,
                            )
                        )
            case TurtleCommand.TURN_RIGHT:
                pose = pose.turned(angle_step + jitter)
            case TurtleCommand.TURN_LEFT:
                pose = pose.turned(-(angle_step + jitter))
            case TurtleCommand.PUSH:
                stack.push(pose)
                pose = replace(
                    pose, segment_length=pose.segment_length * style.shrink_factor
                )
            case TurtleCommand.POP:
                restored = stack.pop()
                if restored is not None:
                    pose = restored
            case _:
                pass

    return TurtlePass(
        segments=tuple(segments),
        final_pose=pose,
        stack_depth=stack.depth,
        max_stack_depth=stack.max_depth,
        forward_steps=steps,
        auxiliary_triggers=triggers,
    )
