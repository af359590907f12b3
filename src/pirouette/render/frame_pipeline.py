# どこで: `src/pirouette/render/frame_pipeline.py`。
# 何を: セッション状態（形の選択・影マスク）と 1 フレームの描画手順（背景 → 長い影 → タイル → 影マスク）を束ねる。
# なぜ: フレームごとの状態を明示的な FrameContext に集め、ウィンドウ無しでも同じ画像を得られるようにするため。

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime

import numpy as np
from PIL import Image

from pirouette.core.color import hsb_to_rgb255
from pirouette.core.layout import GridGeometry, compute_grid_geometry, should_cast_long_shadow
from pirouette.core.palette import Palette, select_palette
from pirouette.core.shape_selection import ShapeSelection, select_shapes
from pirouette.core.sketch_config import SketchConfig
from pirouette.render.canvas import Canvas
from pirouette.render.long_shadow import draw_long_shadow
from pirouette.render.shadow import ShadowMask, composite_shadow, day_progress, shadow_brightness
from pirouette.render.tile_renderer import draw_tiles, plan_tiles

_logger = logging.getLogger(__name__)


def frame_seed(width: int, height: int) -> int:
    """フレームの乱数シード（キャンバス面積）。"""

    return int(width) * int(height)


@dataclass(frozen=True, slots=True)
class FrameContext:
    """1 フレームで共有する読み取り専用の状態。"""

    frame_count: int
    now: datetime
    canvas_size: tuple[int, int]
    palette: Palette
    geometry: GridGeometry


class SketchSession:
    """キャンバス 1 枚ぶんの寿命を持つ状態。

    Notes
    -----
    形の選択はセッション生成時に 1 度だけ決め、リサイズでは変えない。
    影マスクはキャンバスサイズに従属し、リサイズのたびに作り直す。
    """

    def __init__(
        self,
        config: SketchConfig,
        canvas_size: tuple[int, int],
        *,
        render_scale: float = 1.0,
        seed: int | None = None,
        shadow_seed: int | None = None,
    ) -> None:
        width, height = (int(canvas_size[0]), int(canvas_size[1]))
        if width <= 0 or height <= 0:
            raise ValueError(f"canvas size は正の値である必要がある: got={canvas_size}")
        if render_scale <= 0:
            raise ValueError(f"render_scale は正の値である必要がある: got={render_scale}")

        self.config = config
        self.render_scale = float(render_scale)
        self._shadow_seed = shadow_seed
        self._canvas_size = (width, height)
        self.selection: ShapeSelection = select_shapes(
            np.random.default_rng(seed), config.total_shapes
        )
        self.shadow_mask: ShadowMask | None = self._create_shadow_mask()
        _logger.info(
            "session created: canvas=%sx%s shapes=%s",
            width,
            height,
            list(self.selection),
        )

    @property
    def canvas_size(self) -> tuple[int, int]:
        return self._canvas_size

    def _create_shadow_mask(self) -> ShadowMask | None:
        if not self.config.shadow_enabled:
            return None
        width, height = self._canvas_size
        return ShadowMask(width, height, seed=self._shadow_seed)

    def resize(self, width: int, height: int) -> None:
        """キャンバスサイズを更新し、影マスクを作り直す。"""

        if width <= 0 or height <= 0:
            # 最小化などで 0 が来ることがある。次の正のサイズまで保留する。
            _logger.debug("resize ignored: %sx%s", width, height)
            return
        if (int(width), int(height)) == self._canvas_size:
            return
        self._canvas_size = (int(width), int(height))
        self.shadow_mask = self._create_shadow_mask()
        _logger.info("canvas resized: %sx%s", width, height)


def build_frame_context(
    session: SketchSession,
    frame_count: int,
    now: datetime,
) -> tuple[FrameContext, np.random.Generator]:
    """フレームの乱数列を面積で再シードし、パレットとグリッドを確定する。

    Returns
    -------
    tuple[FrameContext, np.random.Generator]
        パレット選択まで消費済みの乱数列を併せて返す（続きはタイルの回転が消費する）。
    """
    width, height = session.canvas_size
    config = session.config
    rng = np.random.default_rng(frame_seed(width, height))
    palette = select_palette(
        rng,
        use_random=config.use_random_palette,
        force_index=config.force_palette_index,
    )
    geometry = compute_grid_geometry(
        width,
        height,
        block_size=config.block_size,
        margin_ratio=config.margin_ratio,
    )
    ctx = FrameContext(
        frame_count=int(frame_count),
        now=now,
        canvas_size=(width, height),
        palette=palette,
        geometry=geometry,
    )
    return ctx, rng


def render_frame(
    session: SketchSession,
    frame_count: int,
    now: datetime | None = None,
) -> Image.Image:
    """1 フレームを描画し、キャンバスと同サイズの RGB 画像を返す。"""

    if now is None:
        now = datetime.now()
    ctx, rng = build_frame_context(session, frame_count, now)
    config = session.config
    width, height = ctx.canvas_size

    canvas = Canvas(width, height, render_scale=session.render_scale)
    canvas.clear(hsb_to_rgb255(0.0, 0.0, config.background_brightness))

    geometry = ctx.geometry
    if should_cast_long_shadow(
        geometry, border_width=config.border_width, matte_width=config.matte_width
    ):
        draw_long_shadow(
            canvas,
            geometry,
            theta=config.shadow_angle,
            opacity=config.shadow_opacity,
        )
    else:
        _logger.debug(
            "long shadow skipped: grid=%sx%s matte=%s",
            geometry.block_cols,
            geometry.block_rows,
            config.matte_width,
        )

    plans = plan_tiles(geometry, config, session.selection, rng, frame_count=ctx.frame_count)
    draw_tiles(
        canvas,
        plans,
        ctx.palette,
        block_size=config.block_size,
        layers=config.shape_layers,
    )

    mask = session.shadow_mask
    if mask is not None:
        brightness = shadow_brightness(
            day_progress(ctx.now),
            minimum=config.shadow_brightness_min,
            maximum=config.shadow_brightness_max,
        )
        mask.update(brightness)
        composite_shadow(canvas, mask, blur=config.shadow_blur, offset=config.shadow_offset)

    return canvas.to_image()


__all__ = [
    "FrameContext",
    "SketchSession",
    "build_frame_context",
    "frame_seed",
    "render_frame",
]
