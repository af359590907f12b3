# どこで: `src/pirouette/core/sketch_config.py`。
# 何を: タイル描画パイプラインが読む静的オプション（SketchConfig）と、その検証付き生成を提供する。
# なぜ: パイプラインの各段に「読み取り専用の設定束」を 1 つだけ渡し、暗黙のグローバル値を無くすため。

from __future__ import annotations

import math
from collections.abc import Mapping
from dataclasses import dataclass, fields
from typing import Any

from pirouette.core.palette import COLOR_SCHEMES, scheme_by_name

MOTIF_COUNT = 30


@dataclass(frozen=True, slots=True)
class SketchConfig:
    """パイプラインの静的オプション。

    Notes
    -----
    すべて読み取り専用。フレーム処理中に書き換えてはならない。
    brightness 系は `background_brightness` のみ HSB の 0..100、
    `shadow_brightness_*` は 0..255 のグレー値。
    """

    block_size: float = 22.0
    border_width: int = 1
    matte_width: int = 6
    margin_ratio: float = 22.0
    total_shapes: int = 24
    shape_layers: int = 4
    animation_speed: float = 4000.0
    rotation_steps: int = 4
    shadow_enabled: bool = True
    shadow_blur: float = 30.0
    shadow_offset: float = 30.0
    shadow_angle: float = math.pi / 8
    shadow_opacity: float = 10.0
    background_brightness: float = 80.0
    shadow_brightness_min: float = 20.0
    shadow_brightness_max: float = 150.0
    use_random_palette: bool = False
    force_palette_index: int = 34

    def __post_init__(self) -> None:
        if self.block_size <= 0:
            raise ValueError(f"block_size は正の値である必要がある: got={self.block_size}")
        if self.border_width < 0:
            raise ValueError(f"border_width は 0 以上である必要がある: got={self.border_width}")
        if self.matte_width < 0:
            raise ValueError(f"matte_width は 0 以上である必要がある: got={self.matte_width}")
        if self.margin_ratio <= 2:
            # margin_ratio <= 2 だとマージンだけでキャンバス幅を使い切る。
            raise ValueError(f"margin_ratio は 2 より大きい必要がある: got={self.margin_ratio}")
        if not 1 <= self.total_shapes <= MOTIF_COUNT:
            raise ValueError(
                f"total_shapes は 1..{MOTIF_COUNT} である必要がある: got={self.total_shapes}"
            )
        if self.shape_layers < 1:
            raise ValueError(f"shape_layers は 1 以上である必要がある: got={self.shape_layers}")
        if self.animation_speed <= 0:
            raise ValueError(
                f"animation_speed は正の値である必要がある: got={self.animation_speed}"
            )
        if self.rotation_steps < 1:
            raise ValueError(f"rotation_steps は 1 以上である必要がある: got={self.rotation_steps}")
        if self.shadow_blur < 0 or self.shadow_offset < 0:
            raise ValueError("shadow_blur / shadow_offset は 0 以上である必要がある")
        if not 0.0 <= self.shadow_opacity <= 100.0:
            raise ValueError(f"shadow_opacity は 0..100 である必要がある: got={self.shadow_opacity}")
        if self.shadow_brightness_max < self.shadow_brightness_min:
            raise ValueError("shadow_brightness_max は shadow_brightness_min 以上である必要がある")
        if not 0 <= self.force_palette_index < len(COLOR_SCHEMES):
            raise ValueError(
                "force_palette_index がカタログ範囲外です: "
                f"got={self.force_palette_index}, size={len(COLOR_SCHEMES)}"
            )


_BOOL_KEYS = frozenset({"shadow_enabled", "use_random_palette"})
_INT_KEYS = frozenset(
    {
        "border_width",
        "matte_width",
        "total_shapes",
        "shape_layers",
        "rotation_steps",
        "force_palette_index",
    }
)


def _coerce_field(name: str, value: Any) -> Any:
    key = f"sketch.{name}"
    if name in _BOOL_KEYS:
        if not isinstance(value, bool):
            raise RuntimeError(f"{key} は bool である必要があります: got={value!r}")
        return value
    if isinstance(value, bool):
        raise RuntimeError(f"{key} は数値である必要があります: got={value!r}")
    if name == "force_palette_index" and isinstance(value, str):
        # 配色名でも指定できる（例: "Benedictus"）。
        try:
            return COLOR_SCHEMES.index(scheme_by_name(value))
        except KeyError as exc:
            raise RuntimeError(f"{key} に未知の配色名が指定されました: got={value!r}") from exc
    if name in _INT_KEYS:
        try:
            iv = int(value)
        except Exception as exc:
            raise RuntimeError(f"{key} は整数である必要があります: got={value!r}") from exc
        if iv != value:
            raise RuntimeError(f"{key} は整数である必要があります: got={value!r}")
        return iv
    try:
        return float(value)
    except Exception as exc:
        raise RuntimeError(f"{key} は数値である必要があります: got={value!r}") from exc


def sketch_config_from_mapping(data: Mapping[str, Any]) -> SketchConfig:
    """YAML の `sketch` セクションから SketchConfig を生成する。

    未知キーは設定ミスとして RuntimeError にする。欠けたキーは dataclass の既定値で埋める。
    """

    known = {f.name for f in fields(SketchConfig)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise RuntimeError(f"sketch に未知のキーがあります: {unknown}")

    kwargs = {name: _coerce_field(name, value) for name, value in data.items()}
    return SketchConfig(**kwargs)


__all__ = ["MOTIF_COUNT", "SketchConfig", "sketch_config_from_mapping"]
