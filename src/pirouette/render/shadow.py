# どこで: `src/pirouette/render/shadow.py`。
# 何を: 窓の形に穴を抜いた影マスク（ShadowMask）を保持し、時刻に応じた明るさで塗り直してキャンバスへ乗算合成する。
# なぜ: 穴の配置はキャンバスの寿命中固定、明るさだけを毎フレーム変える、という分担をこのモジュールに閉じるため。

from __future__ import annotations

import logging
import math
from datetime import datetime

import numpy as np
from PIL import Image, ImageChops, ImageDraw, ImageFilter

from pirouette.core.color import gray255
from pirouette.render.canvas import Canvas

_logger = logging.getLogger(__name__)

SHADOW_SHEAR = math.pi / 12.0
MIN_WINDOWS = 3
MAX_WINDOWS_EXCLUSIVE = 8
SECONDS_PER_DAY = 86400.0


def day_progress(now: datetime) -> float:
    """壁時計の時/分/秒から 1 日の経過率 [0, 1) を返す。"""

    total = now.hour * 3600 + now.minute * 60 + now.second
    return float(total) / SECONDS_PER_DAY


def shadow_brightness(progress: float, *, minimum: float, maximum: float) -> float:
    """`minimum + (maximum - minimum) * sin(pi * progress)` を返す。"""

    return float(minimum) + (float(maximum) - float(minimum)) * math.sin(math.pi * float(progress))


class ShadowMask:
    """キャンバスと同サイズの影マスク。

    Notes
    -----
    生成時に専用の乱数列（既定シードはキャンバス面積）から窓数と原点を決め、
    せん断済みの穴多角形を固定する。以後 `update()` は背景の明るさだけを変える。
    """

    def __init__(self, width: int, height: int, *, seed: int | None = None) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"shadow mask size は正の値である必要がある: got={(width, height)}")
        self.width = int(width)
        self.height = int(height)
        rng = np.random.default_rng(self.width * self.height if seed is None else seed)

        self.window_count = int(rng.integers(MIN_WINDOWS, MAX_WINDOWS_EXCLUSIVE))
        self.window_width = self.width / 10.0
        self.window_height = self.height / 5.0
        self.window_margin = min(self.window_width, self.window_height) / 3.0
        self.origin = (
            float(rng.random()) * self.width / 2.0,
            float(rng.random()) * self.height / 2.0,
        )
        self.holes = self._hole_polygons()
        self.brightness: float | None = None
        self.image = Image.new("RGBA", (self.width, self.height), (0, 0, 0, 0))
        self._shade_key: tuple[float, tuple[int, int], float, int] | None = None
        self._shade: Image.Image | None = None
        _logger.debug(
            "shadow mask created: size=%sx%s windows=%s origin=(%.1f, %.1f)",
            self.width,
            self.height,
            self.window_count,
            self.origin[0],
            self.origin[1],
        )

    def _hole_polygons(self) -> tuple[np.ndarray, ...]:
        ox, oy = self.origin
        shear = math.tan(SHADOW_SHEAR)
        step_x = self.window_width + self.window_margin
        step_y = self.window_height + self.window_margin
        w = self.window_width
        h = self.window_height

        holes: list[np.ndarray] = []
        for j in range(self.window_count):
            for i in range(self.window_count):
                x = i * step_x
                y = j * step_y
                rect = np.array([[x, y], [x + w, y], [x + w, y + h], [x, y + h]], dtype=np.float64)
                # y 方向せん断（y' = y + x * tan）→ 原点へ平行移動
                sheared = np.stack([rect[:, 0] + ox, rect[:, 1] + rect[:, 0] * shear + oy], axis=1)
                holes.append(sheared)
        return tuple(holes)

    def update(self, brightness: float) -> Image.Image:
        """背景をグレー `brightness`（0..255）で塗り直し、同じ穴を抜き直す。

        明るさが前回と同じなら塗り直さずに現在の画像を返す。
        """
        if self.brightness is not None and float(brightness) == self.brightness:
            return self.image

        self.brightness = float(brightness)
        image = Image.new("RGBA", (self.width, self.height), (*gray255(brightness), 255))
        draw = ImageDraw.Draw(image)
        for hole in self.holes:
            draw.polygon([(float(x), float(y)) for x, y in hole], fill=(0, 0, 0, 0))
        self.image = image
        return image

    def shade(self, pixel_size: tuple[int, int], *, blur_px: float, offset_px: int) -> Image.Image:
        """乗算用の RGB 影画像（ぼかし・はみ出し・切り出し済み）を返す。

        結果は (明るさ, ピクセルサイズ, ぼかし半径, はみ出し幅) ごとに保持し、
        いずれかが変わったときだけ作り直す。穴の配置は生成時に固定なのでキーに含めない。
        """
        if self.brightness is None:
            raise RuntimeError("shade() の前に update() を呼ぶ必要がある")

        size = (int(pixel_size[0]), int(pixel_size[1]))
        key = (self.brightness, size, float(blur_px), int(offset_px))
        if self._shade is not None and key == self._shade_key:
            return self._shade

        pw, ph = size
        o = int(offset_px)
        white = Image.new("RGBA", self.image.size, (255, 255, 255, 255))
        flat = Image.alpha_composite(white, self.image).convert("RGB")
        stretched = flat.resize((pw + 2 * o, ph + 2 * o), Image.Resampling.BILINEAR)
        if blur_px > 0:
            stretched = stretched.filter(ImageFilter.GaussianBlur(radius=float(blur_px)))
        self._shade = stretched.crop((o, o, o + pw, o + ph))
        self._shade_key = key
        _logger.debug("shadow shade rebuilt: brightness=%.1f size=%sx%s", self.brightness, pw, ph)
        return self._shade


def composite_shadow(canvas: Canvas, mask: ShadowMask, *, blur: float, offset: float) -> None:
    """影マスクをぼかしてキャンバスへ乗算合成する。

    マスクは四辺を `offset` だけ広げた矩形に引き伸ばして置くため、ぼかしの縁はキャンバス外に出る。
    穴（透明部）は乗算で色を変えない白として扱う。
    """
    s = canvas.render_scale
    shade = mask.shade(
        canvas.pixel_size,
        blur_px=float(blur) * s,
        offset_px=int(round(float(offset) * s)),
    )
    canvas.replace_image(ImageChops.multiply(canvas.image.convert("RGB"), shade))


__all__ = [
    "SHADOW_SHEAR",
    "ShadowMask",
    "composite_shadow",
    "day_progress",
    "shadow_brightness",
]
