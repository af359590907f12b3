# どこで: `src/pirouette/core/motifs/geometric.py`。
# 何を: 矩形/菱形/十字/ドット等の幾何 motif を登録する。
# なぜ: タイル内で同心レイヤを重ねる基本語彙を、描画 API 非依存の多角形として与えるため。

from __future__ import annotations

import math

from pirouette.core.motif_pen import MotifPen, layer_scales
from pirouette.core.motif_registry import motif


@motif(0, category="geometric")
def centered_squares(pen: MotifPen, d: float, layers: int) -> None:
    """中心基準の正方形を縮小しながら重ねる。"""

    for scl in layer_scales(layers):
        pen.fill()
        pen.rect(0.0, 0.0, d * scl, d * scl, center=True)


@motif(1, category="geometric")
def corner_squares(pen: MotifPen, d: float, layers: int) -> None:
    """左上角を基準に正方形を縮小しながら重ねる。"""

    pen.translate(-d / 2.0, -d / 2.0)
    for scl in layer_scales(layers):
        pen.fill()
        pen.rect(0.0, 0.0, d * scl, d * scl)


@motif(2, category="geometric")
def stepped_pyramid(pen: MotifPen, d: float, layers: int) -> None:
    for scl in layer_scales(layers):
        pen.fill()
        size = d * scl
        gap = size / (layers + 1)
        pen.rect(0.0, 0.0, size, size, center=True)
        if scl < 0.8:
            pen.fill()
            pen.rect(gap / 2.0, gap / 2.0, size - gap, size - gap, center=True)


@motif(3, category="geometric")
def hollow_square(pen: MotifPen, d: float, layers: int) -> None:
    for scl in layer_scales(layers):
        size = d * scl
        pen.fill()
        pen.rect(0.0, 0.0, size, size, center=True)
        # 中央の抜きは別色で上塗りする
        pen.fill()
        pen.rect(0.0, 0.0, size * 0.5, size * 0.5, center=True)


@motif(4, category="geometric")
def l_tetromino(pen: MotifPen, d: float, layers: int) -> None:
    for scl in layer_scales(layers):
        pen.fill()
        size = (d / 2.0) * scl
        pen.rect(-size / 4.0, 0.0, size / 2.0, size * 2.0, center=True)
        pen.rect(size / 4.0, size / 2.0, size, size / 2.0, center=True)


@motif(5, category="geometric")
def hourglass(pen: MotifPen, d: float, layers: int) -> None:
    for scl in layer_scales(layers):
        pen.fill()
        size = (d / 2.0) * scl
        pen.triangle(-size, -size, size, -size, 0.0, 0.0)
        pen.triangle(-size, size, size, size, 0.0, 0.0)


def _checker(pen: MotifPen, d: float, layers: int, *, shift: float) -> None:
    for scl in layer_scales(layers):
        pen.fill()
        size = (d / 2.0) * scl
        pen.rect(-size / 2.0, -size / 2.0, size, size, center=True)
        pen.rect(size * shift, size * shift, size, size, center=True)
        pen.fill()
        pen.rect(size / 2.0, -size / 2.0, size, size, center=True)
        pen.rect(-size / 2.0, size / 2.0, size, size, center=True)


@motif(7, category="geometric")
def checkerboard(pen: MotifPen, d: float, layers: int) -> None:
    _checker(pen, d, layers, shift=1.0 / 2.0)


@motif(8, category="geometric")
def offset_checkerboard(pen: MotifPen, d: float, layers: int) -> None:
    """右下の升だけ 1/3 にずらした市松。"""

    _checker(pen, d, layers, shift=1.0 / 3.0)


@motif(9, category="geometric")
def hexagon(pen: MotifPen, d: float, layers: int) -> None:
    for scl in layer_scales(layers):
        pen.fill()
        radius = (d / 2.0) * scl
        pen.polygon(
            (math.cos(2.0 * math.pi * k / 6.0) * radius, math.sin(2.0 * math.pi * k / 6.0) * radius)
            for k in range(6)
        )


@motif(12, category="geometric")
def plus(pen: MotifPen, d: float, layers: int) -> None:
    for scl in layer_scales(layers):
        pen.fill()
        pen.rect(0.0, 0.0, d * scl, (d / 3.0) * scl, center=True)
        pen.rect(0.0, 0.0, (d / 3.0) * scl, d * scl, center=True)


def _notched_cross_outline(e: float) -> list[tuple[float, float]]:
    h = e / 2.0
    return [
        (e, -h),
        (e, h),
        (h, h),
        (h, e),
        (-h, e),
        (-h, h),
        (-e, h),
        (-e, -h),
        (-h, -h),
        (-h, -e),
        (h, -e),
        (h, -h),
    ]


@motif(13, category="geometric")
def notched_cross(pen: MotifPen, d: float, layers: int) -> None:
    for scl in layer_scales(layers):
        pen.fill()
        pen.polygon(_notched_cross_outline((d / 2.0) * scl))


@motif(14, category="geometric")
def rotated_notched_cross(pen: MotifPen, d: float, layers: int) -> None:
    """45 度回して 1/sqrt(2) に縮めた切り欠き十字。"""

    pen.rotate(math.pi / 4.0)
    pen.scale(1.0 / math.sqrt(2.0))
    for scl in layer_scales(layers):
        pen.fill()
        pen.polygon(_notched_cross_outline((d / 2.0) * scl))


@motif(15, category="geometric")
def dot_grid(pen: MotifPen, d: float, layers: int) -> None:
    for scl in layer_scales(layers):
        pen.fill()
        dot = (d / 8.0) * scl
        spacing = (d / 4.0) * scl
        for i in (-1, 0, 1):
            for j in (-1, 0, 1):
                pen.ellipse(i * spacing, j * spacing, dot, dot)


def _diamond(pen: MotifPen, d: float, layers: int) -> None:
    for scl in layer_scales(layers):
        pen.fill()
        r = (d / 2.0) * scl
        pen.quad(0.0, -r, r, 0.0, 0.0, r, -r, 0.0)


@motif(19, category="geometric")
def diamond(pen: MotifPen, d: float, layers: int) -> None:
    _diamond(pen, d, layers)


@motif(20, category="geometric")
def simple_diamond(pen: MotifPen, d: float, layers: int) -> None:
    _diamond(pen, d, layers)
