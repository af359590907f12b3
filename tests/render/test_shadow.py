"""影マスク（時刻による明るさと固定の穴パターン）のテスト。"""

from __future__ import annotations

from datetime import datetime

import numpy as np
import pytest

from pirouette.render.canvas import Canvas
from pirouette.render.shadow import ShadowMask, composite_shadow, day_progress, shadow_brightness


def test_day_progress_from_wall_clock() -> None:
    assert day_progress(datetime(2024, 5, 1, 0, 0, 0)) == 0.0
    assert day_progress(datetime(2024, 5, 1, 12, 0, 0)) == pytest.approx(0.5)
    assert day_progress(datetime(2024, 5, 1, 18, 0, 0)) == pytest.approx(0.75)
    assert 0.0 <= day_progress(datetime(2024, 5, 1, 23, 59, 59)) < 1.0


def test_brightness_peaks_at_noon_and_bottoms_at_midnight() -> None:
    assert shadow_brightness(0.5, minimum=20, maximum=150) == pytest.approx(150.0)
    assert shadow_brightness(0.0, minimum=20, maximum=150) == pytest.approx(20.0)
    assert shadow_brightness(1.0, minimum=20, maximum=150) == pytest.approx(20.0, abs=1e-9)


def test_mask_pattern_is_fixed_by_seed() -> None:
    a = ShadowMask(400, 300)
    b = ShadowMask(400, 300)

    assert 3 <= a.window_count <= 7
    assert len(a.holes) == a.window_count**2
    assert a.origin == b.origin
    for ha, hb in zip(a.holes, b.holes):
        np.testing.assert_array_equal(ha, hb)


def test_mask_window_dimensions_follow_canvas() -> None:
    mask = ShadowMask(400, 300)
    assert mask.window_width == pytest.approx(40.0)
    assert mask.window_height == pytest.approx(60.0)
    assert mask.window_margin == pytest.approx(40.0 / 3.0)
    assert 0.0 <= mask.origin[0] < 200.0
    assert 0.0 <= mask.origin[1] < 150.0


def test_holes_are_sheared_parallelograms() -> None:
    """穴は x に比例して y が下がる（せん断）。"""
    mask = ShadowMask(400, 300, seed=3)
    hole = mask.holes[0]
    assert hole[1, 1] > hole[0, 1]
    assert hole[1, 0] - hole[0, 0] == pytest.approx(mask.window_width)


def test_update_refills_gray_and_recuts_same_holes() -> None:
    mask = ShadowMask(400, 300, seed=11)
    holes_before = mask.holes

    for level in (20.0, 150.0):
        pixels = np.asarray(mask.update(level))
        alpha = pixels[..., 3]
        opaque = pixels[alpha == 255]

        assert set(np.unique(alpha).tolist()) <= {0, 255}
        assert np.all(opaque[:, :3] == int(level))
        cx, cy = holes_before[0].mean(axis=0)
        assert pixels[int(cy), int(cx), 3] == 0

    assert mask.holes is holes_before
    assert mask.brightness == 150.0


def test_composite_multiplies_only_outside_holes() -> None:
    """黒いマスクを乗算すると、穴の内側だけ元の色が残る。"""
    canvas = Canvas(400, 300)
    canvas.clear((255, 255, 255))
    mask = ShadowMask(400, 300, seed=11)
    mask.update(0.0)

    composite_shadow(canvas, mask, blur=0.0, offset=0.0)
    out = np.asarray(canvas.to_image())

    cx, cy = mask.holes[0].mean(axis=0)
    assert tuple(out[int(cy), int(cx)]) == (255, 255, 255)
    assert np.any(np.all(out == 0, axis=-1))


def test_white_mask_leaves_canvas_unchanged() -> None:
    canvas = Canvas(120, 80, render_scale=2.0)
    canvas.clear((200, 100, 50))
    mask = ShadowMask(120, 80)
    mask.update(255.0)

    composite_shadow(canvas, mask, blur=5.0, offset=10.0)
    out = np.asarray(canvas.to_image())
    assert out.shape == (80, 120, 3)
    assert np.all(out == (200, 100, 50))


def test_shade_is_reused_until_brightness_or_size_changes() -> None:
    mask = ShadowMask(160, 100, seed=2)
    mask.update(80.0)
    first = mask.shade((160, 100), blur_px=3.0, offset_px=4)

    mask.update(80.0)
    assert mask.shade((160, 100), blur_px=3.0, offset_px=4) is first

    mask.update(81.0)
    second = mask.shade((160, 100), blur_px=3.0, offset_px=4)
    assert second is not first
    assert mask.shade((320, 200), blur_px=6.0, offset_px=8).size == (320, 200)
    assert mask.shade((320, 200), blur_px=6.0, offset_px=8) is not second


def test_shade_requires_update_first() -> None:
    with pytest.raises(RuntimeError):
        ShadowMask(40, 30).shade((40, 30), blur_px=0.0, offset_px=0)


def test_cached_shade_gives_same_composite_as_fresh_mask() -> None:
    mask = ShadowMask(120, 80, seed=5)
    fresh = ShadowMask(120, 80, seed=5)
    outputs = []
    for m, repeats in ((mask, 3), (fresh, 1)):
        m.update(60.0)
        for _ in range(repeats):
            canvas = Canvas(120, 80)
            canvas.clear((240, 200, 120))
            composite_shadow(canvas, m, blur=2.0, offset=3.0)
        outputs.append(canvas.to_image().tobytes())
    assert outputs[0] == outputs[1]
