# どこで: `src/pirouette/render/canvas.py`。
# 何を: 論理座標（px）で塗り多角形を受け取り、render_scale 倍の Pillow RGBA 画像へラスタライズする。
# なぜ: 描画段から Pillow の座標/スーパーサンプリング事情を隠し、出力サイズを論理サイズに揃えるため。

from __future__ import annotations

from collections.abc import Iterable, Sequence

import numpy as np
from PIL import Image, ImageDraw

from pirouette.core.color import RGB255, RGBA255


class Canvas:
    """スーパーサンプリング付きの RGBA キャンバス。

    Parameters
    ----------
    width, height : int
        論理サイズ（px）。`to_image()` はこのサイズで返す。
    render_scale : float
        内部バッファの倍率。1 より大きい場合は LANCZOS で縮小してエッジを滑らかにする。
    """

    def __init__(self, width: int, height: int, *, render_scale: float = 1.0) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"canvas size は正の値である必要がある: got={(width, height)}")
        if render_scale <= 0:
            raise ValueError(f"render_scale は正の値である必要がある: got={render_scale}")
        self.width = int(width)
        self.height = int(height)
        self.render_scale = float(render_scale)
        self._image = Image.new("RGBA", self.pixel_size, (0, 0, 0, 255))
        self._draw = ImageDraw.Draw(self._image)

    @property
    def pixel_size(self) -> tuple[int, int]:
        """内部バッファのピクセルサイズ。"""

        return (
            max(1, int(round(self.width * self.render_scale))),
            max(1, int(round(self.height * self.render_scale))),
        )

    @property
    def image(self) -> Image.Image:
        """内部バッファ（render_scale 倍）。直接書き換える場合は呼び出し側の責任。"""

        return self._image

    def _scaled(self, points: Iterable[Sequence[float]] | np.ndarray) -> list[float]:
        """論理座標を内部バッファ座標へ写し、Pillow が受け取る平坦な列にする。"""

        pts = np.asarray(points, dtype=np.float64).reshape(-1, 2)
        return (pts * self.render_scale).ravel().tolist()

    def clear(self, color: RGB255) -> None:
        self._draw.rectangle([(0, 0), self._image.size], fill=(*color, 255))

    def fill_rect(self, x: float, y: float, w: float, h: float, color: RGB255) -> None:
        self.fill_polygon([(x, y), (x + w, y), (x + w, y + h), (x, y + h)], color)

    def fill_polygon(self, points: Iterable[Sequence[float]] | np.ndarray, color: RGB255) -> None:
        """不透明色で多角形を塗る。頂点が 3 未満なら何もしない。"""

        pts = self._scaled(points)
        if len(pts) < 6:
            return
        self._draw.polygon(pts, fill=(*color, 255))

    def fill_pixel_polygon(self, flat: Sequence[float], color: RGB255) -> None:
        """内部バッファ座標の平坦な頂点列 `[x0, y0, x1, y1, ...]` をそのまま塗る。"""

        if len(flat) < 6:
            return
        self._draw.polygon(flat, fill=(*color, 255))

    def blend_polygon(self, points: Iterable[Sequence[float]] | np.ndarray, color: RGBA255) -> None:
        """半透明色で多角形を重ねる（source-over）。"""

        pts = self._scaled(points)
        if len(pts) < 6:
            return
        overlay = Image.new("RGBA", self._image.size, (0, 0, 0, 0))
        ImageDraw.Draw(overlay).polygon(pts, fill=color)
        self._image.alpha_composite(overlay)

    def replace_image(self, image: Image.Image) -> None:
        """内部バッファを同サイズの画像で差し替える（合成処理の結果を戻す用）。"""

        if image.size != self._image.size:
            raise ValueError(
                f"canvas バッファとサイズが一致しない: got={image.size}, expected={self._image.size}"
            )
        self._image = image.convert("RGBA")
        self._draw = ImageDraw.Draw(self._image)

    def to_image(self) -> Image.Image:
        """論理サイズの RGB 画像を返す。"""

        out = self._image.convert("RGB")
        if out.size != (self.width, self.height):
            out = out.resize((self.width, self.height), Image.Resampling.LANCZOS)
        return out


__all__ = ["Canvas"]
