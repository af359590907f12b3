# どこで: `src/pirouette/interactive/runtime/sketch_window_system.py`。
# 何を: SketchSession の 1 フレームを描画ウィンドウへ転送し、ウィンドウのリサイズをセッションへ伝えるサブシステム。
# なぜ: `run()` を「配線」に寄せ、描画とリサイズ反応の責務を独立させるため。

from __future__ import annotations

import logging
from typing import Any

import pyglet
from PIL import Image

from pirouette.interactive.runtime.frame_clock import FrameClock
from pirouette.render.frame_pipeline import SketchSession, render_frame

_logger = logging.getLogger(__name__)


def _to_display_image(image: Image.Image) -> Any:
    """Pillow の RGB 画像を blit 可能な pyglet 画像へ変換する。

    Pillow は上の行から、pyglet は下の行から並ぶため、負の pitch で上下を合わせる。
    """
    width, height = image.size
    return pyglet.image.ImageData(width, height, "RGB", image.tobytes(), pitch=-width * 3)


class SketchWindowSystem:
    """描画ウィンドウのサブシステム。

    Parameters
    ----------
    session : SketchSession
        描画対象のセッション。
    window : pyglet.window.Window
        描画先。`push_handlers` / `clear` / `width` / `height` / `close` を使う。
    clock : FrameClock | None
        フレーム番号と時刻の供給元。None なら壁時計。
    """

    def __init__(
        self,
        session: SketchSession,
        *,
        window: Any,
        clock: FrameClock | None = None,
    ) -> None:
        self._session = session
        self._clock = clock if clock is not None else FrameClock()
        # 直前に表示できたフレーム。描画に失敗したフレームではこれを出し直す。
        self._last_image: Any = None

        self.window = window
        self.window.push_handlers(on_resize=self._on_resize)

    def _on_resize(self, width: int, height: int) -> None:
        # 戻り値 None で pyglet 既定の on_resize（viewport 更新）も続けて走る。
        self._session.resize(int(width), int(height))

    def draw_frame(self) -> None:
        """1 フレーム分の描画を行う（`flip()` は呼ばない）。"""

        frame_count = self._clock.tick()
        try:
            image = render_frame(self._session, frame_count, self._clock.now())
        except Exception:
            _logger.exception("frame %s failed; keeping previous image", frame_count)
        else:
            self._last_image = _to_display_image(image)

        self.window.clear()
        if self._last_image is not None:
            self._last_image.blit(0, 0, width=self.window.width, height=self.window.height)

    def close(self) -> None:
        """ウィンドウを閉じる。"""

        self.window.close()
