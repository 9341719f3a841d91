from __future__ import annotations

import pygame

from bloom.lsystem.composer import RadialComposer
from bloom.lsystem.provider import RadialBloomStateProvider
from bloom.lsystem.settings import RadialBloomSettings
from bloom.lsystem.state import RadialBloomState
from bloom.renderers.stateful import StatefulBaseRenderer
from bloom.runtime.streams import FrameStreams
from bloom.runtime.surface import ImageDrawingSurface, PygameDrawingSurface
from bloom.utilities.env import Configuration, LineRasterStrategy
from bloom.utilities.logging import get_logger

logger = get_logger(__name__)


class RadialBloomRenderer(StatefulBaseRenderer[RadialBloomState]):
    """Render the rotating radial L-system onto a black background."""

    def __init__(
        self,
        composer: RadialComposer | None = None,
        builder: RadialBloomStateProvider | None = None,
        raster_strategy: LineRasterStrategy | None = None,
    ) -> None:
        self.composer = composer or RadialComposer(RadialBloomSettings.from_environment())
        self._builder = builder
        super().__init__(builder=builder)
        self.raster_strategy = raster_strategy or Configuration.line_raster_strategy()
        self.set_state(self.composer.state)
        self.last_segment_count = 0
        self._reported_full_growth = False

    def initialize(
        self,
        window: pygame.Surface,
        clock: pygame.time.Clock,
        streams: FrameStreams,
    ) -> None:
        if self._builder is None:
            self._builder = RadialBloomStateProvider(streams, self.composer)
            self.builder = self._builder
        super().initialize(window, clock, streams)

    def real_process(self, window: pygame.Surface, clock: pygame.time.Clock) -> None:
        width, height = window.get_size()
        if width == 0 or height == 0:
            return

        if self.raster_strategy is LineRasterStrategy.PIL:
            surface = ImageDrawingSurface((width, height))
            self.last_segment_count = self.composer.draw(surface, self.state)
            window.blit(surface.to_surface(), (0, 0))
        else:
            pygame_surface = PygameDrawingSurface(window)
            pygame_surface.clear()
            self.last_segment_count = self.composer.draw(pygame_surface, self.state)

        if self.state.fully_grown and not self._reported_full_growth:
            self._reported_full_growth = True
            logger.info(
                "Radial bloom fully grown after %s ticks (%s segments per frame)",
                self.state.clock.ticks,
                self.last_segment_count,
            )
