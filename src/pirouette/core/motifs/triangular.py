# どこで: `src/pirouette/core/motifs/triangular.py`。
# 何を: 三角形ベースの motif を登録する。

from __future__ import annotations

from pirouette.core.motif_pen import MotifPen, layer_scales
from pirouette.core.motif_registry import motif


@motif(21, category="triangular")
def right_triangle(pen: MotifPen, d: float, layers: int) -> None:
    """直角が左下に来る三角形。"""

    for scl in layer_scales(layers):
        pen.fill()
        r = (d / 2.0) * scl
        pen.triangle(-r, -r, -r, r, r, r)


@motif(22, category="triangular")
def corner_triangle(pen: MotifPen, d: float, layers: int) -> None:
    pen.translate(-d / 2.0, -d / 2.0)
    for scl in layer_scales(layers):
        pen.fill()
        pen.triangle(0.0, 0.0, d * scl, 0.0, 0.0, d * scl)


@motif(23, category="triangular")
def expanding_triangle(pen: MotifPen, d: float, layers: int) -> None:
    """左上角から上辺と対角線に沿って広がる三角形。"""

    pen.translate(-d / 2.0, -d / 2.0)
    for scl in layer_scales(layers):
        pen.fill()
        # (0,0)→(d,0) と (0,0)→(d,d) をそれぞれ scl で内分した点
        pen.triangle(0.0, 0.0, d * scl, 0.0, d * scl, d * scl)


@motif(24, category="triangular")
def up_triangle(pen: MotifPen, d: float, layers: int) -> None:
    half = d / 2.0
    for scl in layer_scales(layers):
        pen.fill()
        pen.triangle(-half * scl, half, 0.0, -half + d * (1.0 - scl), half * scl, half)


@motif(25, category="triangular")
def double_triangle(pen: MotifPen, d: float, layers: int) -> None:
    half = d / 2.0
    for scl in layer_scales(layers):
        pen.fill()
        pen.triangle(-half * scl, 0.0, half * scl, 0.0, 0.0, half * scl)
        pen.triangle(-half * scl, -half, half * scl, -half, 0.0, half * scl - half)


@motif(26, category="triangular")
def double_corner_triangles(pen: MotifPen, d: float, layers: int) -> None:
    pen.translate(-d / 2.0, -d / 2.0)
    for scl in layer_scales(layers):
        pen.fill()
        pen.triangle(0.0, 0.0, d * scl, 0.0, 0.0, d * scl)
        pen.triangle(d, d, d - scl * d, d, d, d - scl * d)
