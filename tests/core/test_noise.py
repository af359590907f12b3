"""ノイズ場の値域・決定性・連続性のテスト。"""

from __future__ import annotations

import pytest

from pirouette.core.noise import noise3


def test_noise_is_in_unit_interval() -> None:
    for k in range(200):
        v = noise3(640.0 + k * 0.013, 400.0 + k * 0.007, k / 4000.0)
        assert 0.0 <= v < 1.0


def test_noise_is_deterministic() -> None:
    assert noise3(1.25, 2.5, 3.75) == noise3(1.25, 2.5, 3.75)


def test_noise_changes_smoothly_over_time() -> None:
    """1 フレーム分（1/4000）の時間差では値はほとんど変わらない。"""
    a = noise3(640.3, 400.2, 10.0)
    b = noise3(640.3, 400.2, 10.0 + 1.0 / 4000.0)
    assert abs(a - b) < 1e-2


def test_noise_varies_over_space() -> None:
    values = {round(noise3(0.5 + i * 0.37, 0.5, 0.0), 6) for i in range(20)}
    assert len(values) > 1


def test_invalid_octaves_raises() -> None:
    with pytest.raises(ValueError):
        noise3(0.0, 0.0, 0.0, octaves=0)
