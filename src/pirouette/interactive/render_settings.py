# どこで: `src/pirouette/interactive/render_settings.py`。
# 何を: interactive 描画設定の束を表すデータクラスを定義する。
# なぜ: `run` の引数を簡潔に保ちつつ、ウィンドウ側の設定を一元管理するため。

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class RenderSettings:
    """リアルタイム描画に用いる設定値の集合。"""

    canvas_size: tuple[int, int] = (1280, 800)
    window_position: tuple[int, int] = (25, 25)
    render_scale: float = 1.0
    fps: float = 30.0
    caption: str = "pirouette"
