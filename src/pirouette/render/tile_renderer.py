# どこで: `src/pirouette/render/tile_renderer.py`。
# 何を: グリッドの各セルを「何をどこにどう描くか」の計画（TilePlan）へ解決し、2 パスで Canvas に描く。
# なぜ: ノイズ/乱数による motif 選択と回転を純粋な計画段に閉じ、描画順の不変条件（NORMAL が先）を検証可能にするため。

from __future__ import annotations

import math
from dataclasses import dataclass
from functools import lru_cache

import numpy as np

from pirouette.core.color import RGB255, hsb_to_rgb255
from pirouette.core.layout import CellCategory, GridGeometry, classify_cell, iter_cells
from pirouette.core.motif_geometry import MotifGeometry
from pirouette.core.motifs import build_motif
from pirouette.core.noise import noise3
from pirouette.core.palette import Palette
from pirouette.core.shape_selection import ShapeSelection, resolve_selected_motif
from pirouette.core.sketch_config import SketchConfig
from pirouette.render.canvas import Canvas

STRUCTURAL_DARK: RGB255 = hsb_to_rgb255(0.0, 0.0, 20.0)
MATTE_WHITE: RGB255 = hsb_to_rgb255(0.0, 0.0, 100.0)

# 隣接ブロック間の継ぎ目を隠すため、ブロックは 1px 大きく描く。
_SEAM_OVERLAP = 1.0


@dataclass(frozen=True, slots=True)
class TilePlan:
    """1 セル分の描画計画。

    `motif_index` と `rotation` は NORMAL セルのときだけ意味を持つ。
    """

    i: int
    j: int
    category: CellCategory
    x: float
    y: float
    motif_index: int | None = None
    rotation: float = 0.0


def tile_noise_index(
    x: float,
    y: float,
    *,
    canvas_width: float,
    canvas_height: float,
    frame_count: int,
    animation_speed: float,
    selection_size: int,
) -> int:
    """セル左上 (x, y) のノイズ値を `[0, 2 * selection_size)` の整数へ写す。"""

    value = noise3(
        canvas_width / 2.0 + x / canvas_width,
        canvas_height / 2.0 + y / canvas_height,
        frame_count / animation_speed,
    )
    return int(value * selection_size * 2)


def plan_tiles(
    geometry: GridGeometry,
    config: SketchConfig,
    selection: ShapeSelection,
    rng: np.random.Generator,
    *,
    frame_count: int,
) -> list[TilePlan]:
    """グリッド全セルの描画計画を描画順で返す。

    Notes
    -----
    1 パス目に NORMAL セル、2 パス目に CORNER/BORDER/MATTE セルを並べる。
    各パス内は行優先（j 外側, i 内側）。`rng` は NORMAL セルの回転にだけ、この順で消費する。
    """
    if not selection:
        raise ValueError("shape selection が空です")

    normal: list[TilePlan] = []
    structural: list[TilePlan] = []
    if geometry.is_empty:
        return normal

    steps = int(config.rotation_steps)
    for i, j in iter_cells(geometry):
        category = classify_cell(
            i,
            j,
            geometry.i_max,
            geometry.j_max,
            border_width=config.border_width,
            matte_width=config.matte_width,
        )
        x, y = geometry.cell_origin(i, j)
        if category.is_structural:
            structural.append(TilePlan(i=i, j=j, category=category, x=x, y=y))
            continue

        n = tile_noise_index(
            x,
            y,
            canvas_width=geometry.canvas_width,
            canvas_height=geometry.canvas_height,
            frame_count=frame_count,
            animation_speed=config.animation_speed,
            selection_size=len(selection),
        )
        rotation = (2.0 * math.pi / steps) * int(rng.integers(steps))
        normal.append(
            TilePlan(
                i=i,
                j=j,
                category=category,
                x=x,
                y=y,
                motif_index=resolve_selected_motif(selection, n),
                rotation=rotation,
            )
        )
    return normal + structural


@lru_cache(maxsize=256)
def _cached_motif(index: int, size: float, layers: int) -> MotifGeometry:
    return build_motif(index, size, layers)


def structural_color(category: CellCategory) -> RGB255:
    if category is CellCategory.MATTE:
        return MATTE_WHITE
    return STRUCTURAL_DARK


def draw_tiles(
    canvas: Canvas,
    plans: list[TilePlan],
    palette: Palette,
    *,
    block_size: float,
    layers: int,
) -> None:
    """計画どおりにセルを描く。"""

    if not palette:
        raise ValueError("palette が空です")

    size = float(block_size) + _SEAM_OVERLAP
    half = block_size / 2.0
    s = canvas.render_scale
    n_colors = len(palette)
    for plan in plans:
        if plan.category.is_structural:
            canvas.fill_rect(plan.x, plan.y, size, size, structural_color(plan.category))
            continue

        assert plan.motif_index is not None
        # 内部バッファ座標へ一度に変換する。
        geom = _cached_motif(plan.motif_index, size, int(layers)).transformed(
            scale=s,
            rotate=plan.rotation,
            translate=((plan.x + half) * s, (plan.y + half) * s),
        )
        flat = geom.coords.ravel().tolist()
        offsets = geom.offsets.tolist()
        for k, slot in enumerate(geom.slots.tolist()):
            canvas.fill_pixel_polygon(
                flat[2 * offsets[k] : 2 * offsets[k + 1]], palette[slot % n_colors]
            )


__all__ = [
    "MATTE_WHITE",
    "STRUCTURAL_DARK",
    "TilePlan",
    "draw_tiles",
    "plan_tiles",
    "structural_color",
    "tile_noise_index",
]
