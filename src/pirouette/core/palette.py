"""
どこで: `src/pirouette/core/palette.py`。
何を: 名前付き配色（ColorScheme）の静的カタログと、フレームごとの Palette 選択を提供する。
なぜ: 配色の定義と「選んで並べ替える」処理を分け、カタログを不変に保つため。
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

import numpy as np

from pirouette.core.color import RGB255, parse_hex_color

PALETTE_SIZE = 5

Palette = tuple[RGB255, ...]
"""フレームで使う色の並び。`palette[n % len(palette)]` で参照するため順序に意味がある。"""


@dataclass(frozen=True, slots=True)
class ColorScheme:
    """名前付きの 5 色配色。"""

    name: str
    colors: tuple[str, ...]

    def __post_init__(self) -> None:
        if len(self.colors) != PALETTE_SIZE:
            raise ValueError(
                f"ColorScheme '{self.name}' は {PALETTE_SIZE} 色である必要がある: got={len(self.colors)}"
            )
        for c in self.colors:
            parse_hex_color(c)

    def rgb(self) -> Palette:
        """配色を RGB255 の列で返す（カタログ順）。"""

        return tuple(parse_hex_color(c) for c in self.colors)


COLOR_SCHEMES: tuple[ColorScheme, ...] = (
    ColorScheme("Benedictus", ("#F27EA9", "#366CD9", "#5EADF2", "#636E73", "#F2E6D8")),
    ColorScheme("Cross", ("#D962AF", "#58A6A6", "#8AA66F", "#F29F05", "#F26D6D")),
    ColorScheme("Demuth", ("#222940", "#D98E04", "#F2A950", "#BF3E21", "#F2F2F2")),
    ColorScheme("Hiroshige", ("#1B618C", "#55CCD9", "#F2BC57", "#F2DAAC", "#F24949")),
    ColorScheme("Hokusai Blue", ("#023059", "#459DBF", "#87BF60", "#D9D16A", "#F2F2F2")),
    ColorScheme("Java", ("#632973", "#02734A", "#F25C05", "#F29188", "#F2E0DF")),
    ColorScheme("Kandinsky", ("#8D95A6", "#0A7360", "#F28705", "#D98825", "#F2F2F2")),
    ColorScheme("Monet", ("#4146A6", "#063573", "#5EC8F2", "#8C4E03", "#D98A29")),
    ColorScheme("Nizami", ("#034AA6", "#72B6F2", "#73BFB1", "#F2A30F", "#F26F63")),
    ColorScheme("Renoir", ("#303E8C", "#F2AE2E", "#F28705", "#D91414", "#F2F2F2")),
    ColorScheme("VanGogh", ("#424D8C", "#84A9BF", "#C1D9CE", "#F2B705", "#F25C05")),
    ColorScheme("Mono", ("#D9D7D8", "#3B5159", "#5D848C", "#7CA2A6", "#262321")),
    ColorScheme("RiverSide", ("#906FA6", "#025951", "#252625", "#D99191", "#F2F2F2")),
    ColorScheme("Cyberpunk", ("#FF006E", "#8338EC", "#3A86FF", "#06FFA5", "#FFBE0B")),
    ColorScheme("Sunset", ("#FF9A8B", "#F78CA0", "#F9748F", "#FD868C", "#FE9A8B")),
    ColorScheme("Ocean", ("#003F5C", "#2F4B7C", "#665191", "#A05195", "#D45087")),
    ColorScheme("Forest", ("#355E3B", "#228B22", "#32CD32", "#9ACD32", "#ADFF2F")),
    ColorScheme("Ivy", ("#1E3F20", "#345830", "#5A8C42", "#98BF64", "#D0DDAF")),
    ColorScheme("Jade", ("#084C61", "#177E89", "#49A9A1", "#9DCDC0", "#E5F1EF")),
    ColorScheme("Gold", ("#654C0F", "#9B7506", "#E5A810", "#F7CE5B", "#FEEEB7")),
    ColorScheme("Autumn", ("#6F1D1B", "#BB9457", "#432818", "#99582A", "#FFE6A7")),
    ColorScheme("Minimalist BW", ("#FFFFFF", "#F5F5F5", "#EBEBEB", "#DCDCDC", "#000000")),
    ColorScheme("Earth & Sky", ("#87CEEB", "#4682B4", "#556B2F", "#8B4513", "#F5DEB3")),
    ColorScheme("Vintage Modern", ("#EAE0D5", "#C6BBAF", "#596E79", "#212D40", "#11151C")),
    ColorScheme("Pastel Dream", ("#FFC0CB", "#B19CD9", "#77DD77", "#FFD1DC", "#FDFD96")),
    ColorScheme("Deep Space", ("#000033", "#000066", "#4B0082", "#8A2BE2", "#E6E6FA")),
    ColorScheme("Neon Pop", ("#39FF14", "#FF2079", "#08F7FE", "#F5D300", "#FF073A")),
    ColorScheme("Grayscale", ("#222222", "#555555", "#888888", "#BBBBBB", "#EEEEEE")),
    ColorScheme("Jewel Tones", ("#6A0572", "#AB83A1", "#2E1A47", "#2699A6", "#44AF69")),
    ColorScheme("Summer Breeze", ("#FFB347", "#FF6961", "#FFD1DC", "#77DD77", "#AEC6CF")),
    ColorScheme("Retro Arcade", ("#FF6F61", "#6B5B95", "#88B04B", "#F7CAC9", "#92A8D1")),
    ColorScheme("Iceberg", ("#073B4C", "#118AB2", "#06D6A0", "#FFD166", "#EF476F")),
    ColorScheme("Moss", ("#556B2F", "#8FBC8F", "#B2BABB", "#D5DBDB", "#FDFEFE")),
    ColorScheme("Citrus", ("#FFB300", "#FF773D", "#FF5252", "#FFE066", "#C1F0B8")),
    ColorScheme("Desert", ("#C19A6B", "#FFE4B5", "#D2B48C", "#DEB887", "#A0522D")),
    ColorScheme("Aurora", ("#140152", "#3D087B", "#8D6FC1", "#35A7FF", "#70FFDA")),
    ColorScheme("B", ("#D5DBDB", "#222222", "#222222", "#222222", "#222222")),
    ColorScheme("W", ("#140152", "#3D087B", "#8D6FC1", "#35A7FF", "#70FFDA")),
)


def scheme_by_name(name: str, schemes: Sequence[ColorScheme] = COLOR_SCHEMES) -> ColorScheme:
    """名前で配色を引く。見つからなければ KeyError。"""

    for scheme in schemes:
        if scheme.name == name:
            return scheme
    raise KeyError(name)


def select_palette(
    rng: np.random.Generator,
    *,
    use_random: bool,
    force_index: int = 0,
    schemes: Sequence[ColorScheme] = COLOR_SCHEMES,
) -> Palette:
    """カタログから配色を 1 つ選び、色順をシャッフルした Palette を返す。

    Parameters
    ----------
    rng : np.random.Generator
        フレームのシード済み乱数列。配色選択（random 時）→ シャッフルの順に消費する。
    use_random : bool
        True ならカタログから一様に選ぶ。False なら `force_index` を使う。
    force_index : int
        `use_random=False` のときの配色 index。
    schemes : Sequence[ColorScheme]
        配色カタログ。変更しない。

    Returns
    -------
    Palette
        選んだ配色の 5 色を並べ替えたもの（同じ多重集合）。

    Raises
    ------
    ValueError
        カタログが空、または `force_index` が範囲外の場合。
    """
    if not schemes:
        raise ValueError("配色カタログが空です")

    if use_random:
        index = int(rng.integers(len(schemes)))
    else:
        index = int(force_index)
        if not 0 <= index < len(schemes):
            raise ValueError(f"force_index がカタログ範囲外です: got={index}, size={len(schemes)}")

    colors = schemes[index].rgb()
    order = rng.permutation(len(colors))
    return tuple(colors[int(i)] for i in order)


__all__ = [
    "COLOR_SCHEMES",
    "PALETTE_SIZE",
    "ColorScheme",
    "Palette",
    "scheme_by_name",
    "select_palette",
]
