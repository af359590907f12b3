# どこで: `src/pirouette/core/motifs/organic.py`。
# 何を: ベジエ輪郭で作る有機的な motif（波/S 字/パズル片）を登録する。

from __future__ import annotations

from pirouette.core.motif_pen import MotifPen, layer_scales
from pirouette.core.motif_registry import motif


@motif(6, category="organic")
def wave(pen: MotifPen, d: float, layers: int) -> None:
    for scl in layer_scales(layers):
        pen.fill()
        s = (d / 2.0) * scl
        (
            pen.path((-s, -s / 2.0))
            .bezier_to(-s / 2.0, -s, 0.0, -s / 2.0, s / 2.0, -s / 4.0)
            .bezier_to(s, 0.0, s / 2.0, s / 2.0, 0.0, s)
            .bezier_to(-s / 4.0, s / 2.0, -s / 2.0, s / 4.0, -s, -s / 2.0)
            .close()
        )


@motif(10, category="organic")
def s_curve(pen: MotifPen, d: float, layers: int) -> None:
    """隣接タイルの辺中点とつながる S 字。"""

    for scl in layer_scales(layers):
        pen.fill()
        s = (d / 2.0) * scl
        h = s / 2.0
        (
            pen.path((-s, -s))
            .bezier_to(-h, -s, -h, -h, 0.0, -h)
            .bezier_to(h, -h, h, 0.0, s, 0.0)
            .bezier_to(h, 0.0, h, h, 0.0, h)
            .bezier_to(-h, h, -h, s, -s, s)
            .line_to(-s, s)
            .close()
        )


@motif(11, category="organic")
def puzzle_piece(pen: MotifPen, d: float, layers: int) -> None:
    for scl in layer_scales(layers):
        pen.fill()
        s = (d / 2.0) * scl
        h = s / 2.0
        q = s / 4.0
        (
            pen.path((-s, -s))
            .line_to(q, -s)
            # 上の突起
            .bezier_to(h, -s, h, -h, q, -h)
            .line_to(s, -h)
            .line_to(s, q)
            # 右の突起
            .bezier_to(s, h, h, h, h, q)
            .line_to(h, s)
            .line_to(-q, s)
            # 下のくぼみ
            .bezier_to(-h, s, -h, h, -q, h)
            .line_to(-s, h)
            .line_to(-s, -q)
            # 左のくぼみ
            .bezier_to(-s, -h, -h, -h, -h, -q)
            .line_to(-h, -s)
            .close()
        )
