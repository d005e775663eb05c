"""
colors.py — HSL color value and channel arithmetic.

Pure helpers, no randomness and no rendering.

    Color        — immutable (hue, saturation, lightness) value object
    DeltaReport  — per-channel absolute difference between two colors
    shift_channel(color, channel, amount)
    channel_deltas(a, b)
"""

import colorsys
from dataclasses import dataclass, replace

HUE        = "hue"
SATURATION = "saturation"
LIGHTNESS  = "lightness"
CHANNELS   = (HUE, SATURATION, LIGHTNESS)


# ──────────────────────────── Color ──────────────────────────────
@dataclass(frozen=True)
class Color:
    """A point in cylindrical HSL space (h in degrees, s and l in percent)."""
    hue: float
    saturation: float
    lightness: float

    def to_rgb(self) -> tuple[int, int, int]:
        """8-bit RGB triple, for whoever draws the color."""
        r, g, b = colorsys.hls_to_rgb(
            (self.hue % 360) / 360.0,
            self.lightness / 100.0,
            self.saturation / 100.0,
        )
        return round(r * 255), round(g * 255), round(b * 255)


# ───────────────────────── DeltaReport ───────────────────────────
@dataclass(frozen=True)
class DeltaReport:
    hue: float
    saturation: float
    lightness: float

    def __str__(self) -> str:
        return (
            f"ΔH: {self.hue:.1f}° | "
            f"ΔS: {self.saturation:.1f}% | "
            f"ΔL: {self.lightness:.1f}%"
        )


# ───────────────────────── Arithmetic ────────────────────────────
def _clamp(value: float, lo: float = 0, hi: float = 100) -> float:
    return max(lo, min(hi, value))


def shift_channel(color: Color, channel: str, amount: float) -> Color:
    """
    Return a copy of `color` with one channel moved by `amount`.

    Hue is circular and wraps modulo 360. Saturation and lightness clamp
    into [0, 100], so near the edges the applied change can be smaller
    than `amount`.
    """
    if channel == HUE:
        return replace(color, hue=(color.hue + amount) % 360)
    if channel == SATURATION:
        return replace(color, saturation=_clamp(color.saturation + amount))
    if channel == LIGHTNESS:
        return replace(color, lightness=_clamp(color.lightness + amount))
    raise ValueError(f"unknown channel: {channel!r}")


def channel_deltas(a: Color, b: Color) -> DeltaReport:
    """
    Absolute per-channel differences. Hue is compared as a plain number,
    not around the circle, so 358 vs 3 reports 355.
    """
    return DeltaReport(
        hue=abs(a.hue - b.hue),
        saturation=abs(a.saturation - b.saturation),
        lightness=abs(a.lightness - b.lightness),
    )
