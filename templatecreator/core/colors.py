"""Hex color helpers used when deriving shades for the generated CSS."""

from __future__ import annotations

import math
import re

_HEX_RE = re.compile(r"^#?([0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")


def _clamp(channel: int) -> int:
    return max(0, min(255, channel))


def adjust_color(color: str, percent: float) -> str:
    """Lighten (positive) or darken (negative) ``color`` by ``percent``.

    Every channel is shifted by ``round(2.55 * percent)`` and clamped to
    ``0..255``. Halves round towards positive infinity.
    """

    value = color.strip().lstrip("#")
    if len(value) != 6 or not _HEX_RE.match(value):
        raise ValueError(f"Not a #rrggbb color: {color!r}")
    num = int(value, 16)
    amount = math.floor(2.55 * percent + 0.5)
    red = _clamp((num >> 16) + amount)
    green = _clamp(((num >> 8) & 0xFF) + amount)
    blue = _clamp((num & 0xFF) + amount)
    return f"#{red:02x}{green:02x}{blue:02x}"


def normalize_hex(color: object, default: str) -> str:
    """Return ``color`` as lower-case ``#rrggbb`` or ``default`` if invalid."""

    if not color or not isinstance(color, str):
        return default
    match = _HEX_RE.match(color.strip())
    if not match:
        return default
    digits = match.group(1).lower()
    if len(digits) == 3:
        digits = "".join(ch * 2 for ch in digits)
    return "#" + digits
