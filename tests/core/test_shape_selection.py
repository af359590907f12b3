from __future__ import annotations

import numpy as np
import pytest

from pirouette.core.shape_selection import resolve_selected_motif, select_shapes
from pirouette.core.sketch_config import MOTIF_COUNT


@pytest.mark.parametrize("count", [1, 8, 24, 30])
def test_selection_is_sorted_unique_subset(count: int) -> None:
    selection = select_shapes(np.random.default_rng(123), count)

    assert len(selection) == count
    assert list(selection) == sorted(set(selection))
    assert all(0 <= v < MOTIF_COUNT for v in selection)


def test_same_seed_gives_same_selection() -> None:
    assert select_shapes(np.random.default_rng(5), 8) == select_shapes(np.random.default_rng(5), 8)


def test_full_selection_is_the_whole_catalog() -> None:
    assert select_shapes(np.random.default_rng(0), MOTIF_COUNT) == tuple(range(MOTIF_COUNT))


@pytest.mark.parametrize("count", [0, -1, MOTIF_COUNT + 1])
def test_invalid_count_raises(count: int) -> None:
    with pytest.raises(ValueError):
        select_shapes(np.random.default_rng(0), count)


def test_resolve_wraps_noise_index() -> None:
    selection = (2, 5, 11)
    assert resolve_selected_motif(selection, 0) == 2
    assert resolve_selected_motif(selection, 4) == 5
    assert resolve_selected_motif(selection, 5) == 11
    with pytest.raises(ValueError):
        resolve_selected_motif((), 0)
