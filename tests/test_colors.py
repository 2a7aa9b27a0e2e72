from __future__ import annotations

import sys
from pathlib import Path

import pytest

sys.path.append(str(Path(__file__).resolve().parents[1]))

from templatecreator.core.colors import adjust_color, normalize_hex


def test_adjust_color_zero_percent_is_identity() -> None:
    assert adjust_color("#808080", 0) == "#808080"


def test_adjust_color_lightens_black_without_overflow() -> None:
    assert adjust_color("#000000", 50) == "#7f7f7f"
    assert adjust_color("#000000", 200) == "#ffffff"


def test_adjust_color_saturated_white_stays_white() -> None:
    assert adjust_color("#ffffff", 50) == "#ffffff"


def test_adjust_color_darkens_and_clamps_at_zero() -> None:
    assert adjust_color("#ffffff", -10) == "#e6e6e6"
    assert adjust_color("#101010", -50) == "#000000"


def test_adjust_color_shifts_channels_independently() -> None:
    assert adjust_color("#ff0080", 20) == "#ff33b3"


def test_adjust_color_rejects_invalid_input() -> None:
    with pytest.raises(ValueError):
        adjust_color("#fff", 10)
    with pytest.raises(ValueError):
        adjust_color("not-a-color", 10)


def test_normalize_hex_expands_and_falls_back() -> None:
    assert normalize_hex("#ABC", "#000000") == "#aabbcc"
    assert normalize_hex("347419", "#000000") == "#347419"
    assert normalize_hex("", "#123456") == "#123456"
    assert normalize_hex(None, "#123456") == "#123456"
    assert normalize_hex("red", "#123456") == "#123456"
