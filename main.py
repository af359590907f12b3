"""
どこで: リポジトリ直下 `main.py`。
何を: 同梱設定のままスケッチを起動する。
なぜ: インストール前の動作確認用の最小エントリポイントとして利用するため。
"""

import sys

sys.path.append("src")

from pirouette import run

CANVAS_WIDTH = 1280
CANVAS_HEIGHT = 800


if __name__ == "__main__":
    run(
        canvas_size=(CANVAS_WIDTH, CANVAS_HEIGHT),
        render_scale=2.0,
    )
