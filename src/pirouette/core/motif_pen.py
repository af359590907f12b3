# どこで: `src/pirouette/core/motif_pen.py`。
# 何を: motif 関数が塗り多角形を積み上げるための小さな描画ペン（矩形/楕円/ベジエ等の平坦化）を提供する。
# なぜ: 各 motif を「座標の列挙」だけに集中させ、塗り色カウンタと局所変換をペン側で一元管理するため。

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence

import numpy as np

from pirouette.core.motif_geometry import MotifGeometry

ARC_SEGMENTS = 48
"""1 周あたりの分割数。楕円はこの密度で平坦化する。"""

BEZIER_SEGMENTS = 12

Point = tuple[float, float]


def layer_scales(layers: int) -> tuple[float, ...]:
    """1.0 から 1/layers 刻みで減る層スケールを `layers` 個返す。"""

    if layers < 1:
        raise ValueError(f"layers は 1 以上である必要がある: got={layers}")
    return tuple(1.0 - k / layers for k in range(layers))


class MotifPen:
    """1 回の motif 評価ぶんの塗り多角形を蓄積するペン。

    Notes
    -----
    `fill()` を呼ぶたびにパレット巡回カウンタが 1 進み、以降の図形はその色 index を持つ。
    色 index は `base + カウンタ` で、パレット長での剰余は描画側が取る。
    カウンタはペン（= motif 呼び出し 1 回）ごとに 0 から始まる。
    """

    def __init__(self, *, base: int) -> None:
        self._base = int(base)
        self._counter = 0
        self._current = int(base)
        self._matrix = np.eye(3, dtype=np.float64)
        self._polygons: list[np.ndarray] = []
        self._slots: list[int] = []

    # --- 状態 ---

    def fill(self) -> int:
        """パレット巡回カウンタを進め、以降の図形の色 index を返す。"""

        self._current = self._base + self._counter
        self._counter += 1
        return self._current

    def translate(self, x: float, y: float) -> None:
        m = np.array([[1.0, 0.0, x], [0.0, 1.0, y], [0.0, 0.0, 1.0]], dtype=np.float64)
        self._matrix = self._matrix @ m

    def rotate(self, angle: float) -> None:
        c = math.cos(angle)
        s = math.sin(angle)
        m = np.array([[c, -s, 0.0], [s, c, 0.0], [0.0, 0.0, 1.0]], dtype=np.float64)
        self._matrix = self._matrix @ m

    def scale(self, s: float) -> None:
        m = np.array([[s, 0.0, 0.0], [0.0, s, 0.0], [0.0, 0.0, 1.0]], dtype=np.float64)
        self._matrix = self._matrix @ m

    # --- 図形 ---

    def polygon(self, points: Iterable[Point]) -> None:
        pts = np.asarray(list(points), dtype=np.float64).reshape(-1, 2)
        if pts.shape[0] < 3:
            return
        homo = np.concatenate([pts, np.ones((pts.shape[0], 1))], axis=1)
        xy = (homo @ self._matrix.T)[:, :2]
        self._polygons.append(xy)
        self._slots.append(self._current)

    def rect(self, x: float, y: float, w: float, h: float, *, center: bool = False) -> None:
        if center:
            x -= w / 2.0
            y -= h / 2.0
        self.polygon([(x, y), (x + w, y), (x + w, y + h), (x, y + h)])

    def triangle(self, x1: float, y1: float, x2: float, y2: float, x3: float, y3: float) -> None:
        self.polygon([(x1, y1), (x2, y2), (x3, y3)])

    def quad(
        self,
        x1: float,
        y1: float,
        x2: float,
        y2: float,
        x3: float,
        y3: float,
        x4: float,
        y4: float,
    ) -> None:
        self.polygon([(x1, y1), (x2, y2), (x3, y3), (x4, y4)])

    def ellipse(self, cx: float, cy: float, w: float, h: float) -> None:
        t = np.linspace(0.0, 2.0 * math.pi, ARC_SEGMENTS, endpoint=False)
        self.polygon(np.stack([cx + np.cos(t) * w / 2.0, cy + np.sin(t) * h / 2.0], axis=1))

    def path(self, start: Point) -> PathBuilder:
        return PathBuilder(self, start)

    # --- 出力 ---

    def build(self) -> MotifGeometry:
        if not self._polygons:
            coords = np.zeros((0, 2), dtype=np.float32)
        else:
            coords = np.concatenate(self._polygons, axis=0)
        offsets = np.zeros(len(self._polygons) + 1, dtype=np.int32)
        offsets[1:] = np.cumsum([p.shape[0] for p in self._polygons], dtype=np.int64)
        return MotifGeometry(coords=coords, offsets=offsets, slots=np.asarray(self._slots))


class PathBuilder:
    """直線とベジエで閉じた輪郭を組み立て、`close()` でペンへ渡す。"""

    def __init__(self, pen: MotifPen, start: Point) -> None:
        self._pen = pen
        self._points: list[Point] = [(float(start[0]), float(start[1]))]

    def line_to(self, x: float, y: float) -> PathBuilder:
        self._points.append((float(x), float(y)))
        return self

    def bezier_to(
        self,
        c1x: float,
        c1y: float,
        c2x: float,
        c2y: float,
        x: float,
        y: float,
    ) -> PathBuilder:
        p0 = np.asarray(self._points[-1], dtype=np.float64)
        p1 = np.array([c1x, c1y], dtype=np.float64)
        p2 = np.array([c2x, c2y], dtype=np.float64)
        p3 = np.array([x, y], dtype=np.float64)
        t = np.linspace(0.0, 1.0, BEZIER_SEGMENTS + 1)[1:, None]
        mt = 1.0 - t
        pts = mt**3 * p0 + 3.0 * mt**2 * t * p1 + 3.0 * mt * t**2 * p2 + t**3 * p3
        self._points.extend((float(px), float(py)) for px, py in pts)
        return self

    def close(self) -> None:
        self._pen.polygon(self._points)


def star_points(n_points: int, outer: float, inner: float, phase: float = 0.0) -> Sequence[Point]:
    """外径/内径を交互に取る星形の頂点列を返す。"""

    out: list[Point] = []
    for k in range(n_points * 2):
        angle = phase + math.pi * k / n_points
        r = outer if k % 2 == 0 else inner
        out.append((math.cos(angle) * r, math.sin(angle) * r))
    return out


__all__ = [
    "ARC_SEGMENTS",
    "BEZIER_SEGMENTS",
    "MotifPen",
    "PathBuilder",
    "layer_scales",
    "star_points",
]
