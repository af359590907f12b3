# どこで: `src/pirouette/core/shape_selection.py`。
# 何を: セッション中に使う motif index の部分集合（ShapeSelection）を選ぶ。
# なぜ: セッションごとに見た目の語彙を絞り、キャンバス再初期化までは固定するため。

from __future__ import annotations

import numpy as np

from pirouette.core.sketch_config import MOTIF_COUNT

ShapeSelection = tuple[int, ...]
"""昇順・重複なしの motif index 列。"""


def select_shapes(
    rng: np.random.Generator,
    count: int,
    *,
    catalog_size: int = MOTIF_COUNT,
) -> ShapeSelection:
    """`catalog_size` 個の motif から `count` 個を非復元抽出し、昇順で返す。

    Raises
    ------
    ValueError
        `count` が 1 未満（空の選択は NORMAL セルの描画を定義できない）、
        または `catalog_size` を超える場合。
    """
    if count < 1:
        raise ValueError(f"shape selection が空になります: count={count}")
    if count > catalog_size:
        raise ValueError(f"count がカタログ数を超えています: count={count}, catalog={catalog_size}")

    picked = rng.choice(catalog_size, size=int(count), replace=False)
    return tuple(sorted(int(v) for v in picked))


def resolve_selected_motif(selection: ShapeSelection, n: int) -> int:
    """ノイズ由来の整数 n を、選択中の motif index に解決する。"""

    if not selection:
        raise ValueError("shape selection が空です")
    return selection[n % len(selection)]


__all__ = ["ShapeSelection", "resolve_selected_motif", "select_shapes"]
