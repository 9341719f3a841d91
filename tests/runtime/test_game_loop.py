from __future__ import annotations

import pygame
import pytest

from bloom.lsystem.renderer import RadialBloomRenderer
from bloom.runtime.event_handler import PygameEventHandler
from bloom.runtime.game_loop import GameLoop
from bloom.utilities.env import LineRasterStrategy


class TestGameLoop:
    """Exercise the frame loop headlessly so tick and render stay in lockstep."""

    def test_start_requires_renderer(self) -> None:
        """Ensure starting without renderers fails fast."""
        loop = GameLoop(size=(32, 32))

        with pytest.raises(RuntimeError):
            loop.start()

    def test_one_loop_requires_screen(self) -> None:
        """Verify rendering before display setup raises a clear error."""
        loop = GameLoop(size=(32, 32))

        with pytest.raises(RuntimeError, match="screen is not initialized"):
            loop._one_loop()

    def test_runs_bounded_number_of_frames(self, make_composer) -> None:
        """Confirm the loop ticks once per frame and stops at the frame limit."""
        loop = GameLoop(size=(64, 48), max_fps=1000)
        renderer = loop.add_renderer(
            RadialBloomRenderer(
                composer=make_composer(iterations=1, branch_count=2),
                raster_strategy=LineRasterStrategy.PYGAME,
            )
        )

        loop.start(max_frames=3)

        assert loop.frame_count == 3
        assert renderer.state.clock.ticks == 3
        assert renderer.state.origin == (32.0, 24.0)
        assert renderer._subscription is None

    def test_tick_publishes_frame_number(self) -> None:
        """Check each tick is broadcast on the game tick stream."""
        loop = GameLoop(size=(32, 32))
        seen = []
        loop.streams.game_tick.subscribe(on_next=seen.append)

        loop.tick()
        loop.tick()

        assert seen == [None, 1, 2]


class TestPygameEventHandler:
    """Cover translation of pygame events into stream updates."""

    def test_pointer_motion_is_published(self, streams, pygame_display) -> None:
        """Ensure mouse motion feeds the pointer stream."""
        handler = PygameEventHandler(streams)
        seen = []
        streams.pointer.subscribe(on_next=seen.append)
        pygame.event.post(
            pygame.event.Event(
                pygame.MOUSEMOTION, pos=(3, 4), rel=(0, 0), buttons=(0, 0, 0)
            )
        )

        assert handler.handle_events() is True
        assert seen[-1] == (3, 4)

    def test_quit_stops_the_loop(self, streams, pygame_display) -> None:
        """Verify a quit event asks the loop to stop."""
        handler = PygameEventHandler(streams)
        pygame.event.post(pygame.event.Event(pygame.QUIT))

        assert handler.handle_events() is False
