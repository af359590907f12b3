# src/pirouette/core/motif_registry.py
# motif index から塗り多角形生成関数を引くレジストリ。
# 合成 motif（4 象限に別 motif を並べるもの）は宣言的に登録し、展開深さを制限する。

from __future__ import annotations

from collections.abc import ItemsView
from dataclasses import dataclass
from typing import Callable

from pirouette.core.motif_geometry import MotifGeometry, concat_motif_geometries
from pirouette.core.motif_pen import MotifPen

MotifFunc = Callable[[MotifPen, float, int], None]

MAX_COMPOSITE_DEPTH = 1
"""合成 motif の展開を許す最大深さ（合成の中の合成は作らない）。"""

_QUADRANTS = ((-1.0, -1.0), (1.0, -1.0), (1.0, 1.0), (-1.0, 1.0))


@dataclass(frozen=True, slots=True)
class MotifEntry:
    """登録済み motif 1 件。

    `func` と `composite_of` はどちらか一方だけが埋まる。
    """

    index: int
    name: str
    category: str
    func: MotifFunc | None = None
    composite_of: int | None = None

    @property
    def is_composite(self) -> bool:
        return self.composite_of is not None


class MotifRegistry:
    """motif index と生成関数を対応付けるレジストリ。

    Notes
    -----
    登録された関数のシグネチャは ``func(pen, d, layers) -> None`` を想定する。
    関数はペンへ多角形を積むだけで、描画状態やグローバル状態には触れない。
    """

    def __init__(self) -> None:
        self._items: dict[int, MotifEntry] = {}

    def _register(self, entry: MotifEntry, *, overwrite: bool = False) -> None:
        if not overwrite and entry.index in self._items:
            raise ValueError(f"motif index {entry.index} は既に登録されている")
        self._items[entry.index] = entry

    def get(self, index: int) -> MotifEntry:
        """index に対応するエントリを返す。

        Raises
        ------
        KeyError
            未登録の index が指定された場合。
        """
        return self._items[index]

    def __contains__(self, index: object) -> bool:
        return index in self._items

    def __getitem__(self, index: int) -> MotifEntry:
        return self.get(index)

    def __len__(self) -> int:
        return len(self._items)

    def items(self) -> ItemsView[int, MotifEntry]:
        return self._items.items()

    def indices(self) -> tuple[int, ...]:
        return tuple(sorted(self._items))

    def build(self, index: int, size: float, layers: int, *, depth: int = 0) -> MotifGeometry:
        """motif を評価してタイル中心原点の MotifGeometry を返す。

        Parameters
        ----------
        index : int
            motif index。塗り色 index の基準値にもなる。
        size : float
            タイル一辺 d（px）。
        layers : int
            同心レイヤ数。
        depth : int, optional
            合成の展開深さ（内部用）。

        Raises
        ------
        ValueError
            size が正でない、layers が 1 未満、または合成の深さが上限を超えた場合。
        KeyError
            未登録の index の場合。
        """
        if size <= 0:
            raise ValueError(f"motif size は正の値である必要がある: got={size}")
        if layers < 1:
            raise ValueError(f"motif layers は 1 以上である必要がある: got={layers}")

        entry = self.get(int(index))
        if entry.composite_of is not None:
            if depth >= MAX_COMPOSITE_DEPTH:
                raise ValueError(
                    f"合成 motif の展開深さが上限を超えた: index={entry.index}, depth={depth}"
                )
            sub = self.build(entry.composite_of, size / 2.0, layers, depth=depth + 1)
            q = size / 4.0
            return concat_motif_geometries(
                *(sub.transformed(translate=(sx * q, sy * q)) for sx, sy in _QUADRANTS)
            )

        assert entry.func is not None
        pen = MotifPen(base=entry.index)
        entry.func(pen, float(size), int(layers))
        return pen.build()


motif_registry = MotifRegistry()
"""グローバルな motif レジストリインスタンス。"""


def motif(index: int, *, category: str, overwrite: bool = False):
    """グローバル motif レジストリ用デコレータ。関数名を motif 名として登録する。

    Examples
    --------
    @motif(0, category="geometric")
    def centered_squares(pen, d, layers):
        ...
    """

    def decorator(f: MotifFunc) -> MotifFunc:
        motif_registry._register(
            MotifEntry(index=int(index), name=f.__name__, category=category, func=f),
            overwrite=overwrite,
        )
        return f

    return decorator


def register_composite(index: int, name: str, *, of: int, overwrite: bool = False) -> None:
    """`of` の motif を半分の大きさで 4 象限に並べる合成 motif を登録する。"""

    motif_registry._register(
        MotifEntry(index=int(index), name=name, category="composite", composite_of=int(of)),
        overwrite=overwrite,
    )


def build_motif(index: int, size: float, layers: int) -> MotifGeometry:
    """グローバルレジストリで motif を評価する。"""

    return motif_registry.build(index, size, layers)


__all__ = [
    "MAX_COMPOSITE_DEPTH",
    "MotifEntry",
    "MotifFunc",
    "MotifRegistry",
    "build_motif",
    "motif",
    "motif_registry",
    "register_composite",
]
