from __future__ import annotations

from dataclasses import dataclass, replace

PRIMARY_ROTATION_SPEED = 0.003
SECONDARY_ROTATION_SPEED = 0.0005


@dataclass(frozen=True)
class AnimationClock:
    """Two unbounded rotation phases advanced once per tick."""

    primary: float = 0.0
    secondary: float = 0.0
    primary_speed: float = PRIMARY_ROTATION_SPEED
    secondary_speed: float = SECONDARY_ROTATION_SPEED
    ticks: int = 0

    def tick(self) -> "AnimationClock":
        return replace(
            self,
            primary=self.primary + self.primary_speed,
            secondary=self.secondary + self.secondary_speed,
            ticks=self.ticks + 1,
        )
