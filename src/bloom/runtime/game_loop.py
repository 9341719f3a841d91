from __future__ import annotations

from typing import TYPE_CHECKING, Any, TypeVar

import pygame
from reactivex import operators as ops

from bloom.runtime.event_handler import PygameEventHandler
from bloom.runtime.streams import FrameStreams
from bloom.runtime.surface import BACKGROUND
from bloom.utilities.env import Configuration
from bloom.utilities.logging import get_logger

if TYPE_CHECKING:
    from bloom.renderers.stateful import StatefulBaseRenderer

logger = get_logger(__name__)

RendererT = TypeVar("RendererT", bound="StatefulBaseRenderer[Any]")
WINDOW_TITLE = "bloom"


class GameLoop:
    """Drive renderers at a fixed cadence: one tick, then one render, per frame."""

    def __init__(
        self,
        size: tuple[int, int] | None = None,
        max_fps: int | None = None,
        streams: FrameStreams | None = None,
    ) -> None:
        self.size = size or Configuration.window_size()
        self.max_fps = max_fps or Configuration.max_fps()
        self.streams = streams or FrameStreams()
        self.event_handler = PygameEventHandler(self.streams)
        self.renderers: list["StatefulBaseRenderer[Any]"] = []
        self.screen: pygame.Surface | None = None
        self.clock: pygame.time.Clock | None = None
        self.initialized = False
        self.running = False
        self.frame_count = 0

        self.streams.window.pipe(
            ops.filter(lambda window: window is not None),
        ).subscribe(on_next=self._track_screen)

    def add_renderer(self, renderer: RendererT) -> RendererT:
        self.renderers.append(renderer)
        return renderer

    def start(self, max_frames: int | None = None) -> None:
        logger.info("Starting GameLoop")
        if not self.renderers:
            raise RuntimeError("Unable to start as no renderers were added.")

        self._ensure_initialized()
        for renderer in self.renderers:
            renderer.initialize(self.screen, self.clock, self.streams)

        self.running = True
        logger.info("Entering main loop at %s fps.", self.max_fps)
        try:
            self._run_main_loop(max_frames)
        finally:
            for renderer in self.renderers:
                renderer.reset()
            self.streams.complete()
            pygame.quit()
            logger.info("GameLoop stopped after %s frames.", self.frame_count)

    def set_screen(self, screen: pygame.Surface) -> None:
        self.streams.window.on_next(screen)

    def set_clock(self, clock: pygame.time.Clock) -> None:
        self.clock = clock
        self.streams.clock.on_next(clock)

    def tick(self) -> None:
        self.frame_count += 1
        self.streams.game_tick.on_next(self.frame_count)

    def _track_screen(self, screen: pygame.Surface) -> None:
        self.screen = screen

    def _ensure_initialized(self) -> None:
        if self.initialized:
            return
        self._initialize_screen()
        self.initialized = True

    def _initialize_screen(self) -> None:
        pygame.init()
        screen = pygame.display.set_mode(self.size, pygame.RESIZABLE)
        pygame.display.set_caption(WINDOW_TITLE)
        self.set_screen(screen)
        self.set_clock(pygame.time.Clock())
        if self.screen is None or self.clock is None:
            raise RuntimeError("GameLoop failed to initialize display surfaces")

    def _one_loop(self) -> None:
        if self.screen is None:
            raise RuntimeError("GameLoop screen is not initialized")
        self.screen.fill(BACKGROUND)
        for renderer in self.renderers:
            renderer.process(self.screen, self.clock)
        pygame.display.flip()

    def _run_main_loop(self, max_frames: int | None) -> None:
        if self.clock is None:
            raise RuntimeError("GameLoop failed to initialize display clock")
        clock = self.clock
        while self.running:
            self.running = self.event_handler.handle_events()
            if not self.running:
                break
            self.tick()
            self._one_loop()
            clock.tick(self.max_fps)
            if max_frames is not None and self.frame_count >= max_frames:
                self.running = False
