"""組み込み 30 motif の形状と純粋性に関するテスト群。"""

from __future__ import annotations

import math

import numpy as np
import pytest

from pirouette.core.motif_pen import MotifPen, layer_scales
from pirouette.core.motifs import build_motif
from pirouette.core.sketch_config import MOTIF_COUNT

ALL_MOTIFS = list(range(MOTIF_COUNT))
COMPOSITE_OF = {16: 4, 17: 1, 18: 0, 27: 22}


def test_layer_scales_step_by_reciprocal() -> None:
    """1/layers 刻みで、ちょうど layers 個になる。"""
    assert layer_scales(4) == (1.0, 0.75, 0.5, 0.25)
    assert len(layer_scales(3)) == 3
    assert layer_scales(1) == (1.0,)
    with pytest.raises(ValueError):
        layer_scales(0)


@pytest.mark.parametrize("index", ALL_MOTIFS)
def test_motif_is_pure(index: int) -> None:
    """同じ引数で 2 回評価すると配列が完全一致する。"""
    a = build_motif(index, 23.0, 4)
    b = build_motif(index, 23.0, 4)

    np.testing.assert_array_equal(a.coords, b.coords)
    np.testing.assert_array_equal(a.offsets, b.offsets)
    np.testing.assert_array_equal(a.slots, b.slots)


@pytest.mark.parametrize("index", ALL_MOTIFS)
def test_motif_produces_polygons_near_the_tile(index: int) -> None:
    d = 23.0
    geom = build_motif(index, d, 4)

    assert geom.n_polygons >= 1
    assert np.all(np.isfinite(geom.coords))
    assert np.all(np.abs(geom.coords) <= d)
    assert np.all(np.diff(geom.offsets) >= 3)


@pytest.mark.parametrize("index", ALL_MOTIFS)
def test_fill_slots_start_at_motif_base(index: int) -> None:
    """色 index は「描いた motif の index + 0 始まりのカウンタ」。"""
    geom = build_motif(index, 23.0, 3)
    base = COMPOSITE_OF.get(index, index)
    first = geom.n_polygons // 4 if index in COMPOSITE_OF else geom.n_polygons

    assert int(geom.slots.min()) == base
    assert int(geom.slots.max()) < base + 3 * 2
    assert np.all(np.diff(geom.slots[:first]) >= 0)


def test_centered_squares_shrink_per_layer() -> None:
    d = 40.0
    geom = build_motif(0, d, 4)

    widths = [float(np.ptp(poly[:, 0])) for poly, _ in geom.polygons()]
    assert widths == pytest.approx([40.0, 30.0, 20.0, 10.0])
    assert geom.slots.tolist() == [0, 1, 2, 3]


def test_corner_squares_share_top_left_corner() -> None:
    geom = build_motif(1, 40.0, 4)
    for poly, _ in geom.polygons():
        np.testing.assert_allclose(poly.min(axis=0), [-20.0, -20.0], atol=1e-5)


def test_stepped_pyramid_adds_steps_below_0_8() -> None:
    """scl < 0.8 の層だけ段差用の 2 枚目を重ねる。"""
    geom = build_motif(2, 40.0, 4)
    assert geom.n_polygons == 1 + 2 + 2 + 2
    assert geom.slots.tolist() == list(range(2, 2 + 7))


def test_hollow_square_uses_two_fills_per_layer() -> None:
    geom = build_motif(3, 40.0, 2)
    assert geom.slots.tolist() == [3, 4, 5, 6]


def test_hexagon_vertices_lie_on_radius() -> None:
    geom = build_motif(9, 40.0, 1)
    (poly, _), = geom.polygons()
    assert poly.shape == (6, 2)
    np.testing.assert_allclose(np.hypot(poly[:, 0], poly[:, 1]), 20.0, atol=1e-4)


def test_five_pointed_star_alternates_radii() -> None:
    geom = build_motif(29, 40.0, 1)
    (poly, _), = geom.polygons()
    radii = np.hypot(poly[:, 0], poly[:, 1])
    np.testing.assert_allclose(radii[0::2], 20.0, atol=1e-4)
    np.testing.assert_allclose(radii[1::2], 10.0, atol=1e-4)


def test_four_pointed_star_has_eight_vertices() -> None:
    geom = build_motif(28, 40.0, 1)
    (poly, _), = geom.polygons()
    assert poly.shape == (8, 2)
    np.testing.assert_allclose(
        np.hypot(poly[:, 0], poly[:, 1]), 20.0 / math.cos(math.radians(20.0)), atol=1e-4
    )


def test_rotated_cross_is_scaled_down() -> None:
    """45 度回転 + 1/sqrt(2) 縮小で外接円が元の 1/sqrt(2) になる。"""
    plain = build_motif(13, 40.0, 1).coords
    rotated = build_motif(14, 40.0, 1).coords
    r_plain = np.hypot(plain[:, 0], plain[:, 1]).max()
    r_rot = np.hypot(rotated[:, 0], rotated[:, 1]).max()
    assert r_rot == pytest.approx(r_plain / math.sqrt(2.0), rel=1e-5)


def test_dot_grid_has_nine_dots_per_layer() -> None:
    geom = build_motif(15, 40.0, 2)
    assert geom.n_polygons == 18
    assert geom.slots.tolist() == [15] * 9 + [16] * 9


def test_pen_applies_transforms_in_call_order() -> None:
    """translate → rotate の順に積むと、点はまず回転してから平行移動する。"""
    pen = MotifPen(base=0)
    pen.translate(10.0, 0.0)
    pen.rotate(math.pi / 2)
    pen.fill()
    pen.polygon([(1.0, 0.0), (1.0, 1.0), (0.0, 1.0)])
    (poly, _), = pen.build().polygons()
    np.testing.assert_allclose(poly[0], [10.0, 1.0], atol=1e-6)


def test_transformed_matches_pen_rotation() -> None:
    pen = MotifPen(base=0)
    pen.fill()
    pen.polygon([(1.0, 0.0), (1.0, 1.0), (0.0, 1.0)])
    geom = pen.build().transformed(rotate=math.pi / 2, translate=(10.0, 0.0))
    np.testing.assert_allclose(geom.coords[0], [10.0, 1.0], atol=1e-6)


def test_pen_exposes_only_the_verbs_motifs_use() -> None:
    public = {name for name in dir(MotifPen) if not name.startswith("_")}
    assert public == {
        "build",
        "ellipse",
        "fill",
        "path",
        "polygon",
        "quad",
        "rect",
        "rotate",
        "scale",
        "translate",
        "triangle",
    }
