# どこで: `src/pirouette/interactive/runtime/window_loop.py`。
# 何を: スケッチウィンドウ 1 枚を pyglet の app loop（`pyglet.app.run()`）で一定 fps で再描画し続ける。
# なぜ: OS 依存のイベント配送を pyglet に任せ、描画頻度だけをこちらで制御するため。

from __future__ import annotations

from typing import Any, Callable

import pyglet


class WindowLoop:
    """ウィンドウを閉じるまで `draw_frame` を回す。"""

    def __init__(self, window: Any, draw_frame: Callable[[], None], *, fps: float) -> None:
        """ループを初期化する。

        Parameters
        ----------
        window : pyglet.window.Window
            描画先ウィンドウ。
        draw_frame : Callable[[], None]
            1 フレーム分の描画処理（back buffer へ描くだけで `flip()` は呼ばない）。
        fps : float
            目標フレームレート。`<=0` の場合はスロットリングしない。
        """

        self._window = window
        self._draw_frame = draw_frame
        self._fps = float(fps)

    def _redraw(self, dt: float) -> None:
        self._window.draw(dt)

    def _on_close(self) -> None:
        # 閉じた後に再描画が走らないよう、先にスケジュールを外す。
        pyglet.clock.unschedule(self._redraw)
        pyglet.app.exit()

    def run(self) -> None:
        """ウィンドウが閉じられるまでループを実行する。"""

        self._window.push_handlers(on_close=self._on_close, on_draw=self._draw_frame)

        if self._fps <= 0:
            pyglet.clock.schedule(self._redraw)
        else:
            pyglet.clock.schedule_interval(self._redraw, 1.0 / self._fps)

        try:
            pyglet.app.run(interval=None)
        finally:
            pyglet.clock.unschedule(self._redraw)
