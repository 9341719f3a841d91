import os

from bloom.utilities.env.enums import LineRasterStrategy
from bloom.utilities.env.parsing import _env_int

DEFAULT_MAX_FPS = 30
DEFAULT_WINDOW_WIDTH = 800
DEFAULT_WINDOW_HEIGHT = 800
DEFAULT_LINE_RASTER_STRATEGY = LineRasterStrategy.PIL


class DisplayConfiguration:
    @classmethod
    def max_fps(cls) -> int:
        return _env_int("BLOOM_MAX_FPS", default=DEFAULT_MAX_FPS, minimum=1)

    @classmethod
    def window_size(cls) -> tuple[int, int]:
        width = _env_int("BLOOM_WINDOW_WIDTH", default=DEFAULT_WINDOW_WIDTH, minimum=1)
        height = _env_int(
            "BLOOM_WINDOW_HEIGHT", default=DEFAULT_WINDOW_HEIGHT, minimum=1
        )
        return width, height

    @classmethod
    def line_raster_strategy(cls) -> LineRasterStrategy:
        strategy = os.environ.get(
            "BLOOM_LINE_RASTER_STRATEGY", DEFAULT_LINE_RASTER_STRATEGY.value
        ).strip().lower()
        try:
            return LineRasterStrategy(strategy)
        except ValueError as exc:
            raise ValueError(
                "BLOOM_LINE_RASTER_STRATEGY must be 'pil' or 'pygame'"
            ) from exc
