from __future__ import annotations

import pygame

from bloom.runtime.streams import FrameStreams
from bloom.utilities.logging import get_logger

logger = get_logger(__name__)


class PygameEventHandler:
    def __init__(self, streams: FrameStreams) -> None:
        self._streams = streams

    def handle_events(self) -> bool:
        running = True
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.VIDEORESIZE:
                logger.info("Window resized to %sx%s", event.w, event.h)
                self._streams.window.on_next(pygame.display.get_surface())
            elif event.type == pygame.MOUSEMOTION:
                self._streams.pointer.on_next(event.pos)
        return running
