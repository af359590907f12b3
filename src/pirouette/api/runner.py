"""
どこで: `src/pirouette/api/runner.py`。公開 API のランナー実装。
何を: 設定ロード → セッション生成 → pyglet ウィンドウ → ループ、を配線してスケッチをリアルタイム表示する。
なぜ: `python -m pirouette` / `main.py` から 1 関数で起動できる経路を用意するため。
"""

from __future__ import annotations

import logging
from pathlib import Path

import pyglet

from pirouette.core.logging_config import setup_default_logging
from pirouette.core.runtime_config import runtime_config, set_config_path
from pirouette.interactive.render_settings import RenderSettings
from pirouette.interactive.runtime.sketch_window_system import SketchWindowSystem
from pirouette.interactive.runtime.window_loop import WindowLoop
from pirouette.interactive.sketch_window import create_sketch_window
from pirouette.render.frame_pipeline import SketchSession

_logger = logging.getLogger(__name__)


def run(
    *,
    config_path: str | Path | None = None,
    canvas_size: tuple[int, int] | None = None,
    render_scale: float | None = None,
    fps: float | None = None,
    seed: int | None = None,
) -> None:
    """pyglet ウィンドウを生成し、スケッチをリアルタイム描画する。

    Parameters
    ----------
    config_path : str | Path | None
        明示 config.yaml。None なら既定の探索（`./.pirouette/` → `~/.config/pirouette/`）。
    canvas_size : tuple[int, int] | None
        初期ウィンドウサイズ（px）。None なら `window.size`。
    render_scale : float | None
        内部スーパーサンプリング倍率。None なら `window.render_scale`。
    fps : float | None
        目標フレームレート。None なら `window.fps`。
    seed : int | None
        形の選択に使う乱数シード。None なら毎回異なる選択になる。

    Returns
    -------
    None
        ウィンドウを閉じると制御を返す。
    """

    if config_path is not None:
        set_config_path(config_path)
    cfg = runtime_config()
    setup_default_logging(cfg.log_level)

    settings = RenderSettings(
        canvas_size=canvas_size if canvas_size is not None else cfg.window_size,
        window_position=cfg.window_position,
        render_scale=float(render_scale) if render_scale is not None else cfg.render_scale,
        fps=float(fps) if fps is not None else cfg.fps,
    )
    _logger.debug("render settings: %s", settings)

    # vsync はウィンドウ作成時に参照されるため、ここで固定しておく。
    pyglet.options["vsync"] = True

    session = SketchSession(
        cfg.sketch,
        settings.canvas_size,
        render_scale=settings.render_scale,
        seed=seed,
    )
    system = SketchWindowSystem(session, window=create_sketch_window(settings))

    loop = WindowLoop(system.window, system.draw_frame, fps=settings.fps)
    try:
        loop.run()
    finally:
        system.close()
