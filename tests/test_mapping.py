from __future__ import annotations

import pytest

from layered_sprites.geometry import BoundingBox, PixelRect
from layered_sprites.mapping import full_source_and_screen_rect, source_and_screen_rect
from layered_sprites.viewport import LayerViewport, ScreenViewport


def _xywh(rect: PixelRect) -> tuple[float, float, float, float]:
    return (rect.left, rect.top, rect.width, rect.height)


def _default_viewports() -> tuple[LayerViewport, ScreenViewport]:
    # 480 x 320 layer window drawn 2:1 into a 960 x 640 screen region offset by (10, 20).
    return LayerViewport.from_size(240.0, 160.0, 480.0, 320.0), ScreenViewport(10, 20, 960, 640)


def test_fully_visible_bound_uses_whole_bitmap() -> None:
    lv, sv = _default_viewports()
    bound = BoundingBox(100.0, 100.0, 20.0, 30.0)

    mapped = source_and_screen_rect(bound, 64, 96, lv, sv)

    assert mapped is not None
    assert _xywh(mapped.source) == pytest.approx((0.0, 0.0, 64.0, 96.0))
    assert mapped.screen.left == pytest.approx(10 + 2.0 * 80.0)
    assert mapped.screen.top == pytest.approx(20 + 2.0 * (320.0 - 130.0))
    assert mapped.screen.width == pytest.approx(80.0)
    assert mapped.screen.height == pytest.approx(120.0)


def test_fully_visible_bound_keeps_fractional_area() -> None:
    lv = LayerViewport.from_size(50.0, -20.0, 300.0, 120.0)
    sv = ScreenViewport(7, 3, 811, 419)
    bound = BoundingBox(12.5, -31.0, 17.25, 9.5)

    mapped = source_and_screen_rect(bound, 33, 21, lv, sv)

    assert mapped is not None
    layer_fraction = (bound.width * bound.height) / (lv.width * lv.height)
    screen_fraction = mapped.screen.area / (sv.width * sv.height)
    assert screen_fraction == pytest.approx(layer_fraction)
    # Horizontal and vertical fractions are preserved independently as well.
    assert mapped.screen.width / sv.width == pytest.approx(bound.width / lv.width)
    assert mapped.screen.height / sv.height == pytest.approx(bound.height / lv.height)


def test_partially_visible_bound_is_clipped_on_both_rects() -> None:
    lv = LayerViewport.from_size(240.0, 160.0, 480.0, 320.0)
    sv = ScreenViewport(0, 0, 480, 320)
    # Straddles the left edge: only the right half is visible.
    bound = BoundingBox(0.0, 160.0, 20.0, 20.0)

    mapped = source_and_screen_rect(bound, 40, 40, lv, sv)

    assert mapped is not None
    assert mapped.source == PixelRect(20.0, 0.0, 20.0, 40.0)
    assert mapped.screen == PixelRect(0.0, 140.0, 20.0, 40.0)


def test_clipping_at_top_selects_lower_part_of_bitmap() -> None:
    lv = LayerViewport.from_size(240.0, 160.0, 480.0, 320.0)
    sv = ScreenViewport(0, 0, 480, 320)
    # Top half sticks out above the viewport (layer space is y-up).
    bound = BoundingBox(100.0, 320.0, 10.0, 10.0)

    mapped = source_and_screen_rect(bound, 100, 100, lv, sv)

    assert mapped is not None
    assert mapped.source.top == pytest.approx(50.0)
    assert mapped.source.height == pytest.approx(50.0)
    assert mapped.screen.top == pytest.approx(0.0)
    assert mapped.screen.height == pytest.approx(10.0)


def test_disjoint_bound_is_not_mapped() -> None:
    lv, sv = _default_viewports()

    assert source_and_screen_rect(BoundingBox(1000.0, 1000.0, 5.0, 5.0), 8, 8, lv, sv) is None
    assert full_source_and_screen_rect(BoundingBox(-50.0, 160.0, 5.0, 5.0), 8, 8, lv, sv) is None


def test_touching_edge_counts_as_disjoint() -> None:
    lv, sv = _default_viewports()
    bound = BoundingBox(490.0, 160.0, 10.0, 10.0)  # left edge == viewport right edge

    assert source_and_screen_rect(bound, 8, 8, lv, sv) is None


def test_empty_bitmap_is_not_mapped() -> None:
    lv, sv = _default_viewports()

    assert source_and_screen_rect(BoundingBox(100.0, 100.0, 5.0, 5.0), 0, 8, lv, sv) is None


def test_unclipped_mapping_spills_past_viewport() -> None:
    lv = LayerViewport.from_size(240.0, 160.0, 480.0, 320.0)
    sv = ScreenViewport(0, 0, 480, 320)
    bound = BoundingBox(0.0, 160.0, 20.0, 20.0)

    mapped = full_source_and_screen_rect(bound, 40, 40, lv, sv)

    assert mapped is not None
    assert mapped.source == PixelRect(0.0, 0.0, 40.0, 40.0)
    assert mapped.screen == PixelRect(-20.0, 140.0, 40.0, 40.0)
