"""
どこで: `src/pirouette/core/motifs/__init__.py`。
何を: 組み込み motif を import してグローバルレジストリへ登録し、評価 API を再公開する。
"""

from __future__ import annotations

from pirouette.core.motifs import composite, geometric, organic, star, triangular  # noqa: F401
from pirouette.core.motif_registry import build_motif, motif_registry

__all__ = ["build_motif", "motif_registry"]
