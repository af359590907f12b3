"""
どこで: `src/pirouette/core/noise.py`。
何を: 3D Perlin ノイズを重ねた 0..1 のノイズ場を提供する。
なぜ: セルごとの motif 選択を「位置と時間で滑らかに変わる」擬似乱数で決めるため。
"""

from __future__ import annotations

import numpy as np
from numba import njit  # type: ignore[import-untyped]

NOISE_OCTAVES = 4
NOISE_FALLOFF = 0.5
_ONE_MINUS_EPS = 1.0 - 1e-12

# Ken Perlin improved noise の標準置換テーブル。
_PERM_256 = (
    151, 160, 137, 91, 90, 15, 131, 13, 201, 95, 96, 53, 194, 233, 7, 225,
    140, 36, 103, 30, 69, 142, 8, 99, 37, 240, 21, 10, 23, 190, 6, 148,
    247, 120, 234, 75, 0, 26, 197, 62, 94, 252, 219, 203, 117, 35, 11, 32,
    57, 177, 33, 88, 237, 149, 56, 87, 174, 20, 125, 136, 171, 168, 68, 175,
    74, 165, 71, 134, 139, 48, 27, 166, 77, 146, 158, 231, 83, 111, 229, 122,
    60, 211, 133, 230, 220, 105, 92, 41, 55, 46, 245, 40, 244, 102, 143, 54,
    65, 25, 63, 161, 1, 216, 80, 73, 209, 76, 132, 187, 208, 89, 18, 169,
    200, 196, 135, 130, 116, 188, 159, 86, 164, 100, 109, 198, 173, 186, 3, 64,
    52, 217, 226, 250, 124, 123, 5, 202, 38, 147, 118, 126, 255, 82, 85, 212,
    207, 206, 59, 227, 47, 16, 58, 17, 182, 189, 28, 42, 223, 183, 170, 213,
    119, 248, 152, 2, 44, 154, 163, 70, 221, 153, 101, 155, 167, 43, 172, 9,
    129, 22, 39, 253, 19, 98, 108, 110, 79, 113, 224, 232, 178, 185, 112, 104,
    218, 246, 97, 228, 251, 34, 242, 193, 238, 210, 144, 12, 191, 179, 162, 241,
    81, 51, 145, 235, 249, 14, 239, 107, 49, 192, 214, 31, 181, 199, 106, 157,
    184, 84, 204, 176, 115, 121, 50, 45, 127, 4, 150, 254, 138, 236, 205, 93,
    222, 114, 67, 29, 24, 72, 243, 141, 128, 195, 78, 66, 215, 61, 156, 180,
)  # fmt: skip

_GRAD3_12 = (
    (1, 1, 0), (-1, 1, 0), (1, -1, 0), (-1, -1, 0),
    (1, 0, 1), (-1, 0, 1), (1, 0, -1), (-1, 0, -1),
    (0, 1, 1), (0, -1, 1), (0, 1, -1), (0, -1, -1),
)  # fmt: skip

NOISE_PERMUTATION_TABLE = np.concatenate([np.asarray(_PERM_256, dtype=np.int32)] * 2)
NOISE_GRADIENTS_3D = np.asarray(_GRAD3_12, dtype=np.float64)


@njit(cache=True)
def _fade(t):
    return t * t * t * (t * (t * 6.0 - 15.0) + 10.0)


@njit(cache=True)
def _lerp(a, b, t):
    return a + t * (b - a)


@njit(cache=True)
def _grad(hash_val, x, y, z, grad3):
    g = grad3[int(hash_val) % 12]
    return g[0] * x + g[1] * y + g[2] * z


@njit(cache=True)
def perlin_noise_3d(x, y, z, perm, grad3):
    """3 次元 Perlin ノイズ（おおよそ -1..1）。"""
    X = int(np.floor(x)) & 255
    Y = int(np.floor(y)) & 255
    Z = int(np.floor(z)) & 255

    x -= np.floor(x)
    y -= np.floor(y)
    z -= np.floor(z)

    u = _fade(x)
    v = _fade(y)
    w = _fade(z)

    A = perm[X] + Y
    AA = perm[A & 511] + Z
    AB = perm[(A + 1) & 511] + Z
    B = perm[(X + 1) & 255] + Y
    BA = perm[B & 511] + Z
    BB = perm[(B + 1) & 511] + Z

    return _lerp(
        _lerp(
            _lerp(_grad(perm[AA & 511], x, y, z, grad3), _grad(perm[BA & 511], x - 1, y, z, grad3), u),
            _lerp(_grad(perm[AB & 511], x, y - 1, z, grad3), _grad(perm[BB & 511], x - 1, y - 1, z, grad3), u),
            v,
        ),
        _lerp(
            _lerp(
                _grad(perm[(AA + 1) & 511], x, y, z - 1, grad3),
                _grad(perm[(BA + 1) & 511], x - 1, y, z - 1, grad3),
                u,
            ),
            _lerp(
                _grad(perm[(AB + 1) & 511], x, y - 1, z - 1, grad3),
                _grad(perm[(BB + 1) & 511], x - 1, y - 1, z - 1, grad3),
                u,
            ),
            v,
        ),
        w,
    )


@njit(cache=True)
def _fractal_noise(x, y, z, octaves, falloff, perm, grad3):
    total = 0.0
    amp = 1.0
    amp_sum = 0.0
    freq = 1.0
    for _ in range(octaves):
        total += amp * (perlin_noise_3d(x * freq, y * freq, z * freq, perm, grad3) + 1.0) * 0.5
        amp_sum += amp
        amp *= falloff
        freq *= 2.0
    value = total / amp_sum
    if value < 0.0:
        return 0.0
    if value >= 1.0:
        return _ONE_MINUS_EPS
    return value


def noise3(
    x: float,
    y: float,
    z: float,
    *,
    octaves: int = NOISE_OCTAVES,
    falloff: float = NOISE_FALLOFF,
) -> float:
    """オクターブ合成した 3D ノイズ値を [0, 1) で返す。

    同じ (x, y, z) には常に同じ値を返す（置換テーブルは固定）。
    """
    if octaves < 1:
        raise ValueError("octaves は 1 以上である必要がある")
    return float(
        _fractal_noise(
            float(x),
            float(y),
            float(z),
            int(octaves),
            float(falloff),
            NOISE_PERMUTATION_TABLE,
            NOISE_GRADIENTS_3D,
        )
    )


__all__ = ["NOISE_FALLOFF", "NOISE_OCTAVES", "noise3", "perlin_noise_3d"]
