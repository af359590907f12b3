# どこで: `src/pirouette/api/__init__.py`。
# 何を: 公開 API パッケージとして run と、ヘッドレス描画用の SketchSession/render_frame を再エクスポートする。
# なぜ: ユーザーコードからシンプルに API を import できるようにするため。

from __future__ import annotations

from pirouette.render.frame_pipeline import SketchSession, render_frame

__all__ = ["SketchSession", "render_frame", "run"]


def run(*args, **kwargs):
    """公開 run API へのラッパ（遅延インポートで pyglet 依存を後回しにする）。"""

    from .runner import run as _run

    return _run(*args, **kwargs)
