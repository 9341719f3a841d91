from __future__ import annotations

import math

import pygame
import pytest

from bloom.runtime.surface import (ImageDrawingSurface, PygameDrawingSurface,
                                   TransformStack)


class TestTransformStack:
    """Cover the affine stack every drawing surface composes through."""

    def test_translate_then_rotate_applies_rotation_first(self) -> None:
        """Verify later transforms act in the local frame of earlier ones."""
        stack = TransformStack()
        stack.translate(10.0, 20.0)
        stack.rotate(math.pi / 2)

        assert stack.apply((1.0, 0.0)) == pytest.approx((10.0, 21.0))

    def test_restore_returns_to_saved_matrix(self) -> None:
        """Ensure restore undoes every transform made since the matching save."""
        stack = TransformStack()
        stack.translate(3.0, 4.0)
        stack.save()
        stack.rotate(1.0)
        stack.translate(7.0, 7.0)

        stack.restore()

        assert stack.depth == 0
        assert stack.apply((0.0, 0.0)) == pytest.approx((3.0, 4.0))

    def test_restore_on_empty_stack_is_noop(self) -> None:
        """Confirm an unmatched restore keeps the current transform."""
        stack = TransformStack()
        stack.translate(1.0, 2.0)

        stack.restore()

        assert stack.apply((0.0, 0.0)) == pytest.approx((1.0, 2.0))


class TestImageDrawingSurface:
    """Cover the Pillow rasterizer that alpha-blends lines."""

    def test_blends_translucent_lines_over_black(self) -> None:
        """Verify half-transparent red lands at roughly half intensity."""
        surface = ImageDrawingSurface((10, 10))

        surface.draw_line((0.0, 5.0), (9.0, 5.0), (255.0, 0.0, 0.0, 128.0), 1.0)

        red, green, blue = surface.image.getpixel((5, 5))
        assert red == pytest.approx(128, abs=1)
        assert (green, blue) == (0, 0)

    def test_faint_line_does_not_erase_bright_line(self) -> None:
        """Ensure a faint stroke crossing a bright one only tints it slightly."""
        surface = ImageDrawingSurface((10, 10))
        surface.draw_line((0.0, 5.0), (9.0, 5.0), (230.0, 120.0, 30.0, 200.0), 1.0)
        bright = surface.image.getpixel((5, 5))

        surface.draw_line((5.0, 0.0), (5.0, 9.0), (255.0, 255.0, 255.0, 20.0), 1.0)

        crossed = surface.image.getpixel((5, 5))
        assert crossed[0] >= bright[0]
        assert crossed[1] >= bright[1]
        assert crossed[0] >= 180
        assert surface.image.getpixel((5, 1))[0] == pytest.approx(20, abs=1)

    def test_clear_resets_to_background(self) -> None:
        """Ensure clear wipes previously drawn lines."""
        surface = ImageDrawingSurface((10, 10))
        surface.draw_line((0.0, 5.0), (9.0, 5.0), (255.0, 255.0, 255.0, 255.0), 2.0)

        surface.clear()

        assert surface.image.getextrema()[0] == (0, 0)

    def test_to_surface_matches_size(self) -> None:
        """Check conversion produces a pygame surface with the same pixels."""
        surface = ImageDrawingSurface((12, 8))
        surface.draw_line((0.0, 3.0), (11.0, 3.0), (0.0, 255.0, 0.0, 255.0), 1.0)

        converted = surface.to_surface()

        assert converted.get_size() == (12, 8)
        assert tuple(converted.get_at((4, 3)))[:3] == (0, 255, 0)

    def test_lines_follow_transform(self) -> None:
        """Verify line endpoints are mapped through the current transform."""
        surface = ImageDrawingSurface((10, 10))
        surface.translate(5.0, 0.0)
        surface.rotate(math.pi / 2)

        surface.draw_line((0.0, 0.0), (9.0, 0.0), (255.0, 255.0, 255.0, 255.0), 1.0)

        assert surface.image.getpixel((5, 6))[:3] == (255, 255, 255)
        assert surface.image.getpixel((2, 6))[:3] == (0, 0, 0)


class TestPygameDrawingSurface:
    """Cover the direct pygame rasterizer."""

    def test_premultiplies_alpha_against_black(self) -> None:
        """Ensure translucency is approximated by darkening the colour."""
        window = pygame.Surface((10, 10))
        surface = PygameDrawingSurface(window)

        surface.draw_line((0.0, 5.0), (9.0, 5.0), (255.0, 0.0, 0.0, 128.0), 1.0)

        assert tuple(window.get_at((5, 5)))[:3] == (128, 0, 0)

    def test_thin_strokes_still_draw(self) -> None:
        """Check strokes thinner than a pixel round up to one pixel."""
        window = pygame.Surface((10, 10))
        surface = PygameDrawingSurface(window)

        surface.draw_line((0.0, 2.0), (9.0, 2.0), (255.0, 255.0, 255.0, 255.0), 0.12)

        assert tuple(window.get_at((4, 2)))[:3] == (255, 255, 255)
