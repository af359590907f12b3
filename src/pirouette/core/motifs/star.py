# どこで: `src/pirouette/core/motifs/star.py`。
# 何を: 尖った星形 motif を登録する。

from __future__ import annotations

import math

from pirouette.core.motif_pen import MotifPen, layer_scales, star_points
from pirouette.core.motif_registry import motif

_FOUR_POINT_SPREAD = math.radians(20.0)


@motif(28, category="star")
def four_pointed_star(pen: MotifPen, d: float, layers: int) -> None:
    """4 方向それぞれに ±20 度の 2 頂点を置く星形。"""

    a = _FOUR_POINT_SPREAD
    for scl in layer_scales(layers):
        pen.fill()
        r = (d / 2.0) * scl / math.cos(a)
        pts: list[tuple[float, float]] = []
        for k in range(4):
            angle = math.pi / 2.0 * k
            pts.append((math.cos(angle - a) * r, math.sin(angle - a) * r))
            pts.append((math.cos(angle + a) * r, math.sin(angle + a) * r))
        pen.polygon(pts)


@motif(29, category="star")
def five_pointed_star(pen: MotifPen, d: float, layers: int) -> None:
    for scl in layer_scales(layers):
        pen.fill()
        pen.polygon(star_points(5, (d / 2.0) * scl, (d / 4.0) * scl))
