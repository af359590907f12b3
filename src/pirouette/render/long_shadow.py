# どこで: `src/pirouette/render/long_shadow.py`。
# 何を: グリッド外周から角度 θ 方向へ伸びる 1 枚の長い影（6 角形）を求めて描く。

from __future__ import annotations

import math

import numpy as np

from pirouette.core.color import RGBA255, hsb_to_rgb255, with_alpha
from pirouette.core.layout import GridGeometry
from pirouette.render.canvas import Canvas

LONG_SHADOW_HSB = (220.0, 10.0, 0.0)


def _select_corners(geometry: GridGeometry, theta: float) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
    """θ の象限から、影を落とす 3 隅（外側, 中央, 外側）を選ぶ。"""

    left, top, right, bottom = geometry.outer_rect()
    top_right = np.array([right, top], dtype=np.float64)
    bottom_right = np.array([right, bottom], dtype=np.float64)
    bottom_left = np.array([left, bottom], dtype=np.float64)
    top_left = np.array([left, top], dtype=np.float64)

    if theta < -math.pi / 2.0:
        return bottom_left, top_left, top_right
    if theta < 0.0:
        return top_left, top_right, bottom_right
    if theta < math.pi / 2.0:
        return top_right, bottom_right, bottom_left
    return bottom_right, bottom_left, top_left


def long_shadow_polygon(geometry: GridGeometry, theta: float) -> np.ndarray:
    """長い影の 6 頂点を shape (6, 2) で返す。

    Notes
    -----
    外側 2 点は `max(W, H)`、中央の点は `max(W, H) + sqrt((W/2)^2 + (H/2)^2)` だけ θ 方向へ伸ばす。
    頂点順は 元の 3 隅 → 伸ばした 3 点（逆順）。
    """
    w = geometry.canvas_width
    h = geometry.canvas_height
    p0, p1, p2 = _select_corners(geometry, float(theta))

    direction = np.array([math.cos(theta), math.sin(theta)], dtype=np.float64)
    reach = max(w, h)
    reach_mid = reach + math.sqrt((w / 2.0) ** 2 + (h / 2.0) ** 2)

    return np.stack(
        [
            p0,
            p1,
            p2,
            p2 + direction * reach,
            p1 + direction * reach_mid,
            p0 + direction * reach,
        ]
    )


def long_shadow_color(opacity: float) -> RGBA255:
    """影色 HSB(220, 10, 0) に `opacity`（0..100）を付けた RGBA を返す。"""

    return with_alpha(hsb_to_rgb255(*LONG_SHADOW_HSB), float(opacity) / 100.0)


def draw_long_shadow(canvas: Canvas, geometry: GridGeometry, *, theta: float, opacity: float) -> None:
    canvas.blend_polygon(long_shadow_polygon(geometry, theta), long_shadow_color(opacity))


__all__ = ["LONG_SHADOW_HSB", "draw_long_shadow", "long_shadow_color", "long_shadow_polygon"]
