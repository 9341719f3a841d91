from __future__ import annotations

import time
from typing import Generic, TypeVar, final

import pygame

from bloom.runtime.streams import FrameStreams
from bloom.utilities.logging import get_logger

logger = get_logger(__name__)

StateT = TypeVar("StateT")


class AtomicBaseRenderer(Generic[StateT]):
    """Base renderer that draws from an immutable state snapshot.

    Subclasses implement ``real_process``; ``process`` wraps it with frame
    timing so every renderer reports its cost the same way.
    """

    def __init__(self) -> None:
        self.initialized = False
        self.warmup = True
        self._state: StateT | None = None

    def initialize(
        self,
        window: pygame.Surface,
        clock: pygame.time.Clock,
        streams: FrameStreams,
    ) -> None:
        if self.warmup and self._state is not None:
            self.process(window, clock)
        self.initialized = True

    @property
    def state(self) -> StateT:
        assert self._state is not None
        return self._state

    def set_state(self, state: StateT) -> None:
        self._state = state

    @property
    def name(self):
        return self.__class__.__name__

    @final
    def process(self, window: pygame.Surface, clock: pygame.time.Clock) -> None:
        start_ns = time.perf_counter_ns()
        self.real_process(window=window, clock=clock)
        duration_ms = (time.perf_counter_ns() - start_ns) / 1_000_000
        logger.debug(
            "renderer.frame",
            extra={
                "renderer": self.name,
                "duration_ms": duration_ms,
            },
        )

    def real_process(self, window: pygame.Surface, clock: pygame.time.Clock) -> None:
        raise NotImplementedError("Please implement")

    def reset(self) -> None:
        pass
