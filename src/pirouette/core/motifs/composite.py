# どこで: `src/pirouette/core/motifs/composite.py`。
# 何を: 別 motif を半分の大きさで 4 象限に並べる合成 motif を宣言する。
# なぜ: 合成を関数の再帰呼び出しではなくデータとして持ち、展開深さをレジストリ側で制限するため。

from __future__ import annotations

from pirouette.core.motif_registry import register_composite

register_composite(16, "quad_l_tetromino", of=4)
register_composite(17, "quad_corner_squares", of=1)
register_composite(18, "quad_centered_squares", of=0)
register_composite(27, "quad_corner_triangles", of=22)
