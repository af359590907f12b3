# どこで: `src/pirouette/core/motif_geometry.py`。
# 何を: motif の評価結果である「塗り多角形列」のモデルと、連結・アフィン変換を提供する。
# なぜ: motif を描画 API から切り離し、同じ入力から同じ幾何が出ることを配列比較で検証できるようにするため。

from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True, slots=True)
class MotifGeometry:
    """motif を評価した結果の塗り多角形列。

    Parameters
    ----------
    coords : np.ndarray
        float32 型 shape (N, 2) の頂点配列（タイル中心が原点）。
    offsets : np.ndarray
        int32 型 shape (M+1,) の多角形開始インデックス配列。
    slots : np.ndarray
        int32 型 shape (M,) の多角形ごとの塗りスロット（パレット巡回カウンタの値）。

    Notes
    -----
    不変性を契約とし、配列は writeable=False で保持する。
    多角形は暗黙に閉じているものとし、終点の複製は持たない。
    """

    coords: np.ndarray
    offsets: np.ndarray
    slots: np.ndarray

    def __post_init__(self) -> None:
        """配列形状と整合性を検証し、不変条件を満たす形に固定する。"""
        coords = np.asarray(self.coords, dtype=np.float32)
        offsets = np.asarray(self.offsets, dtype=np.int32)
        slots = np.asarray(self.slots, dtype=np.int32)

        if coords.ndim != 2 or coords.shape[1] != 2:
            raise ValueError("coords は shape (N,2) の 2 次元配列である必要がある")
        if offsets.ndim != 1 or offsets.size == 0:
            raise ValueError("offsets は少なくとも 1 要素の 1 次元配列である必要がある")
        if offsets[0] != 0:
            raise ValueError("offsets[0] は 0 である必要がある")
        if offsets[-1] != coords.shape[0]:
            raise ValueError("offsets[-1] は coords 行数と一致する必要がある")
        if np.any(np.diff(offsets) < 0):
            raise ValueError("offsets は単調非減少である必要がある")
        if slots.shape != (offsets.size - 1,):
            raise ValueError("slots は多角形数と同じ長さである必要がある")

        coords.setflags(write=False)
        offsets.setflags(write=False)
        slots.setflags(write=False)

        object.__setattr__(self, "coords", coords)
        object.__setattr__(self, "offsets", offsets)
        object.__setattr__(self, "slots", slots)

    @property
    def n_polygons(self) -> int:
        return int(self.offsets.size - 1)

    def polygons(self) -> list[tuple[np.ndarray, int]]:
        """(頂点配列, 塗りスロット) を描画順で返す。"""

        out: list[tuple[np.ndarray, int]] = []
        for k in range(self.n_polygons):
            start = int(self.offsets[k])
            end = int(self.offsets[k + 1])
            out.append((self.coords[start:end], int(self.slots[k])))
        return out

    def transformed(
        self,
        *,
        translate: tuple[float, float] = (0.0, 0.0),
        rotate: float = 0.0,
        scale: float = 1.0,
    ) -> MotifGeometry:
        """スケール → 回転（rad） → 平行移動 の順で変換した新しい幾何を返す。"""

        xy = self.coords.astype(np.float64)
        if scale != 1.0:
            xy = xy * float(scale)
        if rotate != 0.0:
            c = math.cos(rotate)
            s = math.sin(rotate)
            rot = np.array([[c, s], [-s, c]], dtype=np.float64)
            xy = xy @ rot
        tx, ty = translate
        if tx != 0.0 or ty != 0.0:
            xy = xy + np.array([tx, ty], dtype=np.float64)
        return MotifGeometry(coords=xy, offsets=self.offsets, slots=self.slots)


def empty_motif_geometry() -> MotifGeometry:
    return MotifGeometry(
        coords=np.zeros((0, 2), dtype=np.float32),
        offsets=np.zeros((1,), dtype=np.int32),
        slots=np.zeros((0,), dtype=np.int32),
    )


def concat_motif_geometries(*geometries: MotifGeometry) -> MotifGeometry:
    """複数の MotifGeometry を描画順を保って連結する。"""

    if not geometries:
        return empty_motif_geometry()

    coords = np.concatenate([g.coords for g in geometries], axis=0)
    slots = np.concatenate([g.slots for g in geometries], axis=0)

    new_offsets: list[int] = [0]
    offset_base = 0
    for g in geometries:
        # 先頭 0 を除いた差分部分だけをシフトして足し込む。
        new_offsets.extend((g.offsets[1:] + offset_base).tolist())
        offset_base += int(g.offsets[-1])

    return MotifGeometry(
        coords=coords,
        offsets=np.asarray(new_offsets, dtype=np.int32),
        slots=slots,
    )


__all__ = ["MotifGeometry", "concat_motif_geometries", "empty_motif_geometry"]
