# どこで: `src/pirouette/interactive/runtime/__init__.py`。
# 何を: interactive 実行時の「ループ/サブシステム」実装をまとめるパッケージ定義。

from __future__ import annotations

__all__ = []
