import pygame
import pytest
from hypothesis import HealthCheck, settings

from bloom.lsystem.composer import RadialComposer
from bloom.lsystem.settings import REFERENCE_GRAMMAR, RadialBloomSettings
from bloom.runtime.streams import FrameStreams

settings.register_profile(
    "default",
    suppress_health_check=[HealthCheck.function_scoped_fixture],
)
settings.load_profile("default")


class StubWindow:
    def __init__(self, width: int, height: int) -> None:
        self._size = (width, height)

    def get_size(self) -> tuple[int, int]:
        return self._size


class RecordingSurface:
    """Drawing surface double that records every call in order."""

    def __init__(self) -> None:
        self.calls: list[tuple] = []
        self.lines: list[tuple] = []
        self.depth = 0

    def draw_line(self, start, end, color, width) -> None:
        self.lines.append((start, end, color, width))
        self.calls.append(("draw_line",))

    def translate(self, dx, dy) -> None:
        self.calls.append(("translate", dx, dy))

    def rotate(self, angle) -> None:
        self.calls.append(("rotate", angle))

    def save(self) -> None:
        self.depth += 1
        self.calls.append(("save",))

    def restore(self) -> None:
        self.depth -= 1
        self.calls.append(("restore",))

    def clear(self) -> None:
        self.calls.append(("clear",))


@pytest.fixture(autouse=True)
def dummy_sdl_video_driver(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    monkeypatch.setenv("SDL_AUDIODRIVER", "dummy")
    yield


@pytest.fixture()
def streams() -> FrameStreams:
    return FrameStreams()


@pytest.fixture()
def make_composer():
    def _make(iterations: int = 2, **overrides) -> RadialComposer:
        settings = RadialBloomSettings(
            grammar=REFERENCE_GRAMMAR.with_iterations(iterations),
            **overrides,
        )
        return RadialComposer(settings)

    return _make


@pytest.fixture()
def recording_surface() -> RecordingSurface:
    return RecordingSurface()


@pytest.fixture()
def stub_window():
    return StubWindow


@pytest.fixture()
def pygame_display():
    pygame.display.init()
    pygame.display.set_mode((1, 1))
    yield
    pygame.quit()
