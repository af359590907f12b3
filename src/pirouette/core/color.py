"""
どこで: `src/pirouette/core/color.py`。
何を: 色指定の正規化/変換（Hex, HSB(360/100/100), RGB255）を一元化する。
なぜ: パレット・構造セル・影の色を同じ色表現で扱うため。
"""

from __future__ import annotations

RGB255 = tuple[int, int, int]
RGBA255 = tuple[int, int, int, int]


def _clamp255(v: float) -> int:
    iv = int(round(float(v)))
    return 0 if iv < 0 else 255 if iv > 255 else iv


def parse_hex_color(s: str) -> RGB255:
    """Hex 文字列から RGB255 を返す。

    受理形式: "#RRGGBB", "RRGGBB"。大文字/小文字は不問。
    """
    t = s.strip()
    if t.startswith("#"):
        t = t[1:]
    if len(t) != 6:
        raise ValueError(f"invalid hex color length: '{s}' (expected RRGGBB)")
    try:
        r = int(t[0:2], 16)
        g = int(t[2:4], 16)
        b = int(t[4:6], 16)
    except ValueError as e:
        raise ValueError(f"invalid hex color: '{s}'") from e
    return (r, g, b)


def hsb_to_rgb255(hue: float, saturation: float, brightness: float) -> RGB255:
    """HSB（hue 0..360, saturation 0..100, brightness 0..100）を RGB255 に変換する。"""

    h = (float(hue) % 360.0) / 60.0
    s = min(max(float(saturation), 0.0), 100.0) / 100.0
    v = min(max(float(brightness), 0.0), 100.0) / 100.0

    sector = int(h) % 6
    f = h - int(h)
    p = v * (1.0 - s)
    q = v * (1.0 - s * f)
    t = v * (1.0 - s * (1.0 - f))
    r, g, b = (
        (v, t, p),
        (q, v, p),
        (p, v, t),
        (p, q, v),
        (t, p, v),
        (v, p, q),
    )[sector]
    return _clamp255(r * 255.0), _clamp255(g * 255.0), _clamp255(b * 255.0)


def gray255(level: float) -> RGB255:
    """0..255 のグレー値を RGB255 に変換する（範囲外は clamp）。"""

    g = _clamp255(level)
    return (g, g, g)


def with_alpha(rgb: RGB255, alpha01: float) -> RGBA255:
    """RGB255 に 0..1 のアルファを付けた RGBA255 を返す。"""

    r, g, b = rgb
    return (int(r), int(g), int(b), _clamp255(float(alpha01) * 255.0))


__all__ = ["RGB255", "RGBA255", "gray255", "hsb_to_rgb255", "parse_hex_color", "with_alpha"]
