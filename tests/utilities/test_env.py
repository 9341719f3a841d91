from __future__ import annotations

import pytest

from bloom.utilities.env import Configuration, LineRasterStrategy

BLOOM_VARS = (
    "BLOOM_LSYSTEM_ITERATIONS",
    "BLOOM_LSYSTEM_MAX_ITERATIONS",
    "BLOOM_LSYSTEM_BRANCHES",
    "BLOOM_GROWTH_RATE",
    "BLOOM_GROWTH_RATE_MIN",
    "BLOOM_GROWTH_RATE_MAX",
    "BLOOM_MAX_FPS",
    "BLOOM_WINDOW_WIDTH",
    "BLOOM_WINDOW_HEIGHT",
    "BLOOM_LINE_RASTER_STRATEGY",
)


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in BLOOM_VARS:
        monkeypatch.delenv(name, raising=False)


class TestConfiguration:
    """Validate environment-driven configuration so deployments get predictable defaults."""

    def test_defaults(self) -> None:
        """Confirm unset variables fall back to the reference plant."""
        assert Configuration.lsystem_iterations() == 4
        assert Configuration.lsystem_max_iterations() == 6
        assert Configuration.lsystem_branches() == 6
        assert Configuration.growth_rate() == 5.0
        assert Configuration.growth_rate_range() == (1.0, 15.0)
        assert Configuration.max_fps() == 30
        assert Configuration.window_size() == (800, 800)
        assert Configuration.line_raster_strategy() is LineRasterStrategy.PIL

    def test_overrides(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Ensure each variable overrides its default."""
        monkeypatch.setenv("BLOOM_LSYSTEM_ITERATIONS", "2")
        monkeypatch.setenv("BLOOM_LSYSTEM_BRANCHES", "3")
        monkeypatch.setenv("BLOOM_WINDOW_WIDTH", "640")
        monkeypatch.setenv("BLOOM_WINDOW_HEIGHT", "480")
        monkeypatch.setenv("BLOOM_LINE_RASTER_STRATEGY", " PyGame ")

        assert Configuration.lsystem_iterations() == 2
        assert Configuration.lsystem_branches() == 3
        assert Configuration.window_size() == (640, 480)
        assert Configuration.line_raster_strategy() is LineRasterStrategy.PYGAME

    def test_zero_branches_rejected(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Verify a plant without branches is refused at configuration time."""
        monkeypatch.setenv("BLOOM_LSYSTEM_BRANCHES", "0")

        with pytest.raises(ValueError):
            Configuration.lsystem_branches()

    def test_inverted_growth_range_rejected(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Check a maximum below the minimum growth rate raises."""
        monkeypatch.setenv("BLOOM_GROWTH_RATE_MIN", "10")
        monkeypatch.setenv("BLOOM_GROWTH_RATE_MAX", "2")

        with pytest.raises(ValueError, match="BLOOM_GROWTH_RATE_MAX"):
            Configuration.growth_rate_range()

    def test_unknown_raster_strategy_rejected(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Ensure unknown rasterizers are reported with the accepted values."""
        monkeypatch.setenv("BLOOM_LINE_RASTER_STRATEGY", "opengl")

        with pytest.raises(ValueError, match="'pil' or 'pygame'"):
            Configuration.line_raster_strategy()
