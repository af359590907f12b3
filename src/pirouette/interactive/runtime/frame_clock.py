# どこで: `src/pirouette/interactive/runtime/frame_clock.py`。
# 何を: 描画パイプラインに渡すフレーム番号と壁時計時刻の生成規則を提供する。
# なぜ: アニメーション位相（フレーム番号）と影の明るさ（時刻）の時間源を差し替え可能にするため。

from __future__ import annotations

from datetime import datetime
from typing import Callable


class FrameClock:
    """単調増加のフレームカウンタと壁時計。

    Notes
    -----
    `frame_count` は 1 から始まる（最初の描画フレームが 1）。
    `now()` は既定で `datetime.now`。テストでは固定時刻を差し込める。
    """

    def __init__(self, *, now: Callable[[], datetime] | None = None) -> None:
        self._frame_count = 0
        self._now = now if now is not None else datetime.now

    @property
    def frame_count(self) -> int:
        """現在のフレーム番号を返す。"""

        return int(self._frame_count)

    def now(self) -> datetime:
        """現在の壁時計時刻を返す。"""

        return self._now()

    def tick(self) -> int:
        """フレームを 1 つ進め、新しいフレーム番号を返す。"""

        self._frame_count += 1
        return self._frame_count
