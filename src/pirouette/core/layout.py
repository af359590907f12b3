# どこで: `src/pirouette/core/layout.py`。
# 何を: キャンバス寸法からグリッド配置（ブロック数・マージン）を求め、各セルを位置カテゴリに分類する。
# なぜ: 配置計算を描画から切り離し、中央寄せやカテゴリ分割の不変条件を単体で検証できるようにするため。

from __future__ import annotations

import enum
import math
from collections.abc import Iterator
from dataclasses import dataclass


class CellCategory(enum.Enum):
    """セルの位置カテゴリ（優先順: CORNER → BORDER → MATTE → NORMAL）。"""

    CORNER = "CORNER"
    BORDER = "BORDER"
    MATTE = "MATTE"
    NORMAL = "NORMAL"

    @property
    def is_structural(self) -> bool:
        """額縁側（2 パス目で上に描く）カテゴリなら True。"""

        return self is not CellCategory.NORMAL


@dataclass(frozen=True, slots=True)
class GridGeometry:
    """1 フレーム分のグリッド配置。

    Notes
    -----
    `offset_w` / `offset_h` は中央寄せ後のマージン（px）。
    `block_cols * block_size + 2 * offset_w == canvas_width` が常に成り立つ。
    """

    canvas_width: float
    canvas_height: float
    block_size: float
    offset_w: float
    offset_h: float
    block_cols: int
    block_rows: int

    @property
    def i_max(self) -> int:
        return self.block_cols - 1

    @property
    def j_max(self) -> int:
        return self.block_rows - 1

    @property
    def is_empty(self) -> bool:
        return self.block_cols <= 0 or self.block_rows <= 0

    def cell_origin(self, i: int, j: int) -> tuple[float, float]:
        """セル (i, j) の左上ピクセル座標を返す。"""

        return (
            self.offset_w + i * self.block_size,
            self.offset_h + j * self.block_size,
        )

    def outer_rect(self) -> tuple[float, float, float, float]:
        """グリッド外周の (left, top, right, bottom) を返す。"""

        return (
            self.offset_w,
            self.offset_h,
            self.canvas_width - self.offset_w,
            self.canvas_height - self.offset_h,
        )


def _fit_axis(span: float, margin: float, block_size: float) -> tuple[int, float]:
    """1 軸ぶんの (ブロック数, 中央寄せ後マージン) を返す。"""

    count = max(0, math.floor((span - margin * 2.0) / block_size))
    return count, (span - block_size * count) / 2.0


def compute_grid_geometry(
    canvas_width: float,
    canvas_height: float,
    *,
    block_size: float,
    margin_ratio: float,
) -> GridGeometry:
    """キャンバス寸法からグリッド配置を求める。

    Parameters
    ----------
    canvas_width, canvas_height : float
        キャンバス寸法（px）。
    block_size : float
        公称ブロックサイズ B（px）。
    margin_ratio : float
        初期マージンを `canvas_width / margin_ratio` とする比率。

    Returns
    -------
    GridGeometry
        ブロック数は初期マージン内に収まる最大整数。マージンは左右/上下で等しく再計算される。

    Notes
    -----
    縦方向の初期マージンは、中央寄せ後の横マージンをそのまま使う。
    """
    if block_size <= 0:
        raise ValueError("block_size は正の値である必要がある")

    block_cols, offset_w = _fit_axis(float(canvas_width), float(canvas_width) / margin_ratio, block_size)
    block_rows, offset_h = _fit_axis(float(canvas_height), offset_w, block_size)

    return GridGeometry(
        canvas_width=float(canvas_width),
        canvas_height=float(canvas_height),
        block_size=float(block_size),
        offset_w=offset_w,
        offset_h=offset_h,
        block_cols=block_cols,
        block_rows=block_rows,
    )


def classify_cell(
    i: int,
    j: int,
    i_max: int,
    j_max: int,
    *,
    border_width: int,
    matte_width: int,
) -> CellCategory:
    """セル (i, j) の位置カテゴリを O(1) で返す。

    Parameters
    ----------
    i, j : int
        列 / 行 index。
    i_max, j_max : int
        最大列 / 行 index（= 数 - 1）。
    border_width : int
        構造ボーダー幅（セル数）。
    matte_width : int
        マット幅（セル数）。構造ボーダーの内側から数える。
    """
    bw = border_width
    left = i < bw
    right = i > i_max - bw
    top = j < bw
    bottom = j > j_max - bw

    if (left or right) and (top or bottom):
        return CellCategory.CORNER
    if left or right or top or bottom:
        return CellCategory.BORDER

    inner = matte_width + bw
    if i < inner or j > j_max - inner or i > i_max - inner or j < inner:
        return CellCategory.MATTE
    return CellCategory.NORMAL


def iter_cells(geometry: GridGeometry) -> Iterator[tuple[int, int]]:
    """行優先（j 外側, i 内側）でセル index を列挙する。"""

    for j in range(geometry.block_rows):
        for i in range(geometry.block_cols):
            yield i, j


def has_normal_cells(geometry: GridGeometry, *, border_width: int, matte_width: int) -> bool:
    """NORMAL セルが 1 つでも存在するかを返す。"""

    inner = 2 * (matte_width + border_width)
    return geometry.block_cols - inner > 0 and geometry.block_rows - inner > 0


def should_cast_long_shadow(
    geometry: GridGeometry, *, border_width: int, matte_width: int
) -> bool:
    """Long shadow を描けるだけの内側がグリッドにあるかを返す。

    マット幅が min(列数, 行数) 以上、または NORMAL セルが無い場合は False。
    """
    if geometry.is_empty:
        return False
    if matte_width >= min(geometry.block_cols, geometry.block_rows):
        return False
    return has_normal_cells(geometry, border_width=border_width, matte_width=matte_width)


__all__ = [
    "CellCategory",
    "GridGeometry",
    "classify_cell",
    "compute_grid_geometry",
    "has_normal_cells",
    "iter_cells",
    "should_cast_long_shadow",
]
