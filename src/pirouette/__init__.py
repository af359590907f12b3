# どこで: `src/pirouette/__init__.py`。
# 何を: ルート `pirouette` パッケージを定義する。
# なぜ: import 起点を `pirouette` に統一するため。

from __future__ import annotations

from pirouette.api import SketchSession, render_frame, run

__all__ = ["SketchSession", "render_frame", "run"]
