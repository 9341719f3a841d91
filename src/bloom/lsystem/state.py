from __future__ import annotations

import math
from dataclasses import dataclass, field, replace

from bloom.lsystem.clock import AnimationClock

PROGRESS_INCREMENT = 0.001
BRANCH_JITTER_AMPLITUDE = 0.2


@dataclass(frozen=True)
class BranchState:
    angular_offset: float
    progress: float = 0.0
    rotation_jitter: float = 0.0

    @classmethod
    def radial(cls, index: int, count: int) -> "BranchState":
        return cls(angular_offset=2 * math.pi * index / count)

    def advance(
        self,
        *,
        secondary_phase: float,
        progress_increment: float = PROGRESS_INCREMENT,
        jitter_amplitude: float = BRANCH_JITTER_AMPLITUDE,
    ) -> "BranchState":
        progress = self.progress
        if progress < 1.0:
            progress = min(progress + max(progress_increment, 0.0), 1.0)
        return replace(
            self,
            progress=progress,
            rotation_jitter=math.sin(secondary_phase) * jitter_amplitude,
        )

    def draw_limit(self, sequence_length: int) -> int:
        return math.floor(sequence_length * self.progress)


@dataclass(frozen=True)
class RadialBloomState:
    sequence_length: int
    branches: tuple[BranchState, ...]
    clock: AnimationClock = field(default_factory=AnimationClock)
    draw_length: float = 0.0
    growth_rate: float = 5.0
    origin: tuple[float, float] = (0.0, 0.0)

    @classmethod
    def initial(
        cls,
        *,
        sequence_length: int,
        branch_count: int,
        growth_rate: float,
        origin: tuple[float, float] = (0.0, 0.0),
        clock: AnimationClock | None = None,
    ) -> "RadialBloomState":
        return cls(
            sequence_length=sequence_length,
            branches=tuple(
                BranchState.radial(index, branch_count)
                for index in range(branch_count)
            ),
            clock=clock or AnimationClock(),
            growth_rate=growth_rate,
            origin=origin,
        )

    @property
    def fully_grown(self) -> bool:
        return self.draw_length >= self.sequence_length and all(
            branch.progress >= 1.0 for branch in self.branches
        )

    def advance(
        self,
        *,
        progress_increment: float = PROGRESS_INCREMENT,
        jitter_amplitude: float = BRANCH_JITTER_AMPLITUDE,
    ) -> "RadialBloomState":
        clock = self.clock.tick()
        draw_length = self.draw_length
        if draw_length < self.sequence_length:
            draw_length = min(
                draw_length + max(self.growth_rate, 0.0), float(self.sequence_length)
            )
        return replace(
            self,
            clock=clock,
            draw_length=draw_length,
            branches=tuple(
                branch.advance(
                    secondary_phase=clock.secondary,
                    progress_increment=progress_increment,
                    jitter_amplitude=jitter_amplitude,
                )
                for branch in self.branches
            ),
        )

    def effective_limit(self, branch: BranchState) -> int:
        """Number of symbols drawn for ``branch`` this frame."""
        bound = min(self.draw_length, branch.draw_limit(self.sequence_length))
        return max(math.ceil(bound), 0)
