# どこで: `src/pirouette/interactive/sketch_window.py`。
# 何を: ライブ描画用のリサイズ可能な pyglet ウィンドウを生成する。
# なぜ: pyglet 依存をこの層に閉じ込め、core/render をヘッドレスに保つため。

from __future__ import annotations

import pyglet
from pyglet.window import Window

from pirouette.interactive.render_settings import RenderSettings


def create_sketch_window(settings: RenderSettings) -> Window:
    """設定に基づき描画ウィンドウを生成する。"""

    canvas_w, canvas_h = settings.canvas_size
    window = pyglet.window.Window(  # type: ignore[abstract]
        width=int(canvas_w),
        height=int(canvas_h),
        resizable=True,
        caption=settings.caption,
    )
    window.set_location(*settings.window_position)
    return window
