"""
planner.py — Difficulty planner.

Completely isolated from game state, rendering and input.
Receives a score (and a random source) and returns what the next round
should look like.

Strategy:
  - Grid density steps up with the score (2x2 → 5x5).
  - The perceptual gap shrinks by 1 every 2 points, down to a floor.
  - The odd color differs from the base in exactly one HSL channel.
"""

import random

from .colors import CHANNELS, Color, shift_channel
from .config import (
    GRID_STEPS, MIN_GAP, MAX_GAP,
    HUE_RANGE, SATURATION_RANGE, LIGHTNESS_RANGE,
)


def derive_grid_size(score: int) -> int:
    """Side length of the grid for a given score."""
    size = GRID_STEPS[0][1]
    for min_score, step_size in GRID_STEPS:
        if score >= min_score:
            size = step_size
    return size


def derive_perceptual_gap(score: int) -> int:
    """Channel offset for the odd cell: 15 at score 0, minus 1 every 2 points."""
    return max(MIN_GAP, MAX_GAP - score // 2)


def generate_base_color(rng: random.Random) -> Color:
    """A mid-tone, moderately saturated color."""
    return Color(
        hue=rng.randrange(*HUE_RANGE),
        saturation=rng.randrange(*SATURATION_RANGE),
        lightness=rng.randrange(*LIGHTNESS_RANGE),
    )


def generate_odd_color(base: Color, score: int, rng: random.Random) -> Color:
    """
    Return `base` shifted by the perceptual gap along one random channel,
    in a random direction.

    Parameters
    ----------
    base  : the color every other cell is painted with
    score : current score (drives the gap)
    rng   : random source; the caller owns seeding
    """
    gap = derive_perceptual_gap(score)
    channel = rng.choice(CHANNELS)
    sign = rng.choice((1, -1))
    return shift_channel(base, channel, gap * sign)


def pick_odd_index(grid_size: int, rng: random.Random) -> int:
    return rng.randrange(grid_size * grid_size)
