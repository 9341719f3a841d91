"""Drawing surfaces with a composable affine transform stack."""

from __future__ import annotations

import math
from typing import Protocol

import numpy as np
import pygame
from PIL import Image, ImageDraw

Point = tuple[float, float]
RGBA = tuple[float, float, float, float]
BACKGROUND = (0, 0, 0)


class DrawingSurface(Protocol):
    def draw_line(self, start: Point, end: Point, color: RGBA, width: float) -> None: ...

    def translate(self, dx: float, dy: float) -> None: ...

    def rotate(self, angle: float) -> None: ...

    def save(self) -> None: ...

    def restore(self) -> None: ...

    def clear(self) -> None: ...


class TransformStack:
    """Current transform plus saved snapshots; restore on an empty stack is a no-op."""

    def __init__(self) -> None:
        self._matrix = np.identity(3, dtype=np.float64)
        self._saved: list[np.ndarray] = []

    @property
    def matrix(self) -> np.ndarray:
        return self._matrix

    @property
    def depth(self) -> int:
        return len(self._saved)

    def translate(self, dx: float, dy: float) -> None:
        step = np.array(
            [[1.0, 0.0, dx], [0.0, 1.0, dy], [0.0, 0.0, 1.0]], dtype=np.float64
        )
        self._matrix = self._matrix @ step

    def rotate(self, angle: float) -> None:
        c = math.cos(angle)
        s = math.sin(angle)
        step = np.array(
            [[c, -s, 0.0], [s, c, 0.0], [0.0, 0.0, 1.0]], dtype=np.float64
        )
        self._matrix = self._matrix @ step

    def save(self) -> None:
        self._saved.append(self._matrix.copy())

    def restore(self) -> None:
        if self._saved:
            self._matrix = self._saved.pop()

    def apply(self, point: Point) -> Point:
        x, y, _ = self._matrix @ np.array([point[0], point[1], 1.0])
        return (float(x), float(y))


def _channel(value: float) -> int:
    return int(min(max(round(value), 0), 255))


def _pixel_width(width: float) -> int:
    return max(1, round(width))


class _TransformingSurface:
    def __init__(self) -> None:
        self.transform = TransformStack()

    def translate(self, dx: float, dy: float) -> None:
        self.transform.translate(dx, dy)

    def rotate(self, angle: float) -> None:
        self.transform.rotate(angle)

    def save(self) -> None:
        self.transform.save()

    def restore(self) -> None:
        self.transform.restore()


class ImageDrawingSurface(_TransformingSurface):
    """Pillow-backed surface that alpha-blends every line.

    The base image is opaque RGB; ImageDraw only blends RGBA fills onto it.
    """

    def __init__(self, size: tuple[int, int]) -> None:
        super().__init__()
        self.size = size
        self.image = Image.new("RGB", size, BACKGROUND)
        self._draw = ImageDraw.Draw(self.image, "RGBA")

    def clear(self) -> None:
        self._draw.rectangle(
            [(0, 0), (self.size[0], self.size[1])], fill=BACKGROUND
        )

    def draw_line(self, start: Point, end: Point, color: RGBA, width: float) -> None:
        self._draw.line(
            [self.transform.apply(start), self.transform.apply(end)],
            fill=tuple(_channel(channel) for channel in color),
            width=_pixel_width(width),
        )

    def to_surface(self) -> pygame.Surface:
        surface = pygame.image.frombuffer(self.image.tobytes(), self.size, "RGB")
        # frombuffer shares the image memory; copy to decouple it
        return surface.copy()


class PygameDrawingSurface(_TransformingSurface):
    """Draws straight onto a pygame surface.

    pygame lines do not blend, so alpha is premultiplied against the black
    background instead.
    """

    def __init__(self, window: pygame.Surface) -> None:
        super().__init__()
        self.window = window

    def clear(self) -> None:
        self.window.fill(BACKGROUND)

    def draw_line(self, start: Point, end: Point, color: RGBA, width: float) -> None:
        alpha = min(max(color[3], 0.0), 255.0) / 255.0
        rgb = tuple(_channel(channel * alpha) for channel in color[:3])
        pygame.draw.line(
            self.window,
            rgb,
            self.transform.apply(start),
            self.transform.apply(end),
            _pixel_width(width),
        )
