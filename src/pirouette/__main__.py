"""
どこで: `src/pirouette/__main__.py`。
何を: `python -m pirouette` / `pirouette` コマンドの CLI を提供する。
"""

from __future__ import annotations

import argparse
from collections.abc import Sequence


def _parse_size(text: str) -> tuple[int, int]:
    try:
        w_s, h_s = text.lower().split("x", 1)
        size = (int(w_s), int(h_s))
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"WIDTHxHEIGHT 形式で指定してください: {text!r}") from exc
    if size[0] <= 0 or size[1] <= 0:
        raise argparse.ArgumentTypeError(f"サイズは正の値である必要があります: {text!r}")
    return size


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pirouette",
        description="Animated tile-grid sketch with time-of-day window shadows.",
    )
    parser.add_argument("--config", default=None, help="config.yaml のパス")
    parser.add_argument("--size", type=_parse_size, default=None, help="初期ウィンドウサイズ（例: 1280x800）")
    parser.add_argument("--render-scale", type=float, default=None, help="内部スーパーサンプリング倍率")
    parser.add_argument("--fps", type=float, default=None, help="目標フレームレート")
    parser.add_argument("--seed", type=int, default=None, help="形の選択に使う乱数シード")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    from pirouette.api import run

    run(
        config_path=args.config,
        canvas_size=args.size,
        render_scale=args.render_scale,
        fps=args.fps,
        seed=args.seed,
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
