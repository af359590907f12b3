"""
どこで: `src/pirouette/core/logging_config.py`。
何を: アプリ側で設定が無い場合に最小限のロギング構成を 1 度だけ適用する。
なぜ: 各モジュールは `logging.getLogger(__name__)` だけを使い、構成は起動点に寄せるため。
"""

from __future__ import annotations

import logging


def setup_default_logging(level: int | str = "INFO") -> None:
    """最小限のロギング設定を 1 度だけ適用する。

    - ルートロガーにハンドラが既にあれば何もしない（no-op）
    - `run()` / CLI から呼び出す想定
    """
    if isinstance(level, str):
        lvl = getattr(logging, level.upper(), logging.INFO)
    else:
        lvl = int(level)

    root = logging.getLogger()
    if root.handlers:
        return
    logging.basicConfig(
        level=lvl,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


__all__ = ["setup_default_logging"]
