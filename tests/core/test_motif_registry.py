"""motif レジストリ（dispatch と合成展開）のテスト。"""

from __future__ import annotations

import numpy as np
import pytest

from pirouette.core.motif_pen import MotifPen
from pirouette.core.motif_registry import MAX_COMPOSITE_DEPTH, MotifEntry, MotifRegistry
from pirouette.core.motifs import build_motif, motif_registry
from pirouette.core.sketch_config import MOTIF_COUNT


def _square(pen: MotifPen, d: float, layers: int) -> None:
    pen.fill()
    pen.rect(0.0, 0.0, d, d, center=True)


def test_catalog_covers_every_index() -> None:
    assert motif_registry.indices() == tuple(range(MOTIF_COUNT))
    assert len(motif_registry) == MOTIF_COUNT


def test_composites_are_declared_by_data() -> None:
    composites = {i: e.composite_of for i, e in motif_registry.items() if e.is_composite}
    assert composites == {16: 4, 17: 1, 18: 0, 27: 22}


def test_duplicate_index_raises_unless_overwrite() -> None:
    reg = MotifRegistry()
    reg._register(MotifEntry(index=0, name="a", category="test", func=_square))
    with pytest.raises(ValueError):
        reg._register(MotifEntry(index=0, name="b", category="test", func=_square))

    reg._register(MotifEntry(index=0, name="b", category="test", func=_square), overwrite=True)
    assert reg[0].name == "b"


def test_unknown_index_raises_key_error() -> None:
    with pytest.raises(KeyError):
        build_motif(MOTIF_COUNT, 20.0, 4)


@pytest.mark.parametrize(("size", "layers"), [(0.0, 4), (-1.0, 4), (20.0, 0)])
def test_invalid_size_or_layers_raise(size: float, layers: int) -> None:
    with pytest.raises(ValueError):
        build_motif(0, size, layers)


def test_nested_composite_is_rejected() -> None:
    """合成の中の合成は MAX_COMPOSITE_DEPTH を超えるため ValueError。"""
    assert MAX_COMPOSITE_DEPTH == 1
    reg = MotifRegistry()
    reg._register(MotifEntry(index=0, name="square", category="test", func=_square))
    reg._register(MotifEntry(index=1, name="quad", category="composite", composite_of=0))
    reg._register(MotifEntry(index=2, name="quad_quad", category="composite", composite_of=1))

    assert reg.build(1, 20.0, 1).n_polygons == 4
    with pytest.raises(ValueError):
        reg.build(2, 20.0, 1)
    with pytest.raises(ValueError):
        motif_registry.build(18, 20.0, 4, depth=1)


def test_composite_places_half_size_copies_in_quadrants() -> None:
    d = 40.0
    geom = build_motif(18, d, 1)

    assert geom.n_polygons == 4
    centers = [poly.mean(axis=0) for poly, _ in geom.polygons()]
    np.testing.assert_allclose(
        centers,
        [[-10.0, -10.0], [10.0, -10.0], [10.0, 10.0], [-10.0, 10.0]],
        atol=1e-4,
    )
    for poly, _ in geom.polygons():
        assert np.ptp(poly[:, 0]) == pytest.approx(d / 2)


def test_composite_slots_use_sub_motif_base_and_restart_per_quadrant() -> None:
    geom = build_motif(27, 40.0, 4)
    assert geom.slots.tolist() == [22, 23, 24, 25] * 4


def test_registry_build_sets_color_base_to_index() -> None:
    reg = MotifRegistry()
    reg._register(MotifEntry(index=7, name="square", category="test", func=_square))
    assert reg.build(7, 10.0, 1).slots.tolist() == [7]
