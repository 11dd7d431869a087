"""Shared test helpers.

Import from here instead of duplicating candidate builders in test files.
"""

from __future__ import annotations

from nuri.color import Color
from nuri.extract import ExtractedColor

NEAR_BLACK = Color(18, 18, 18)
NEAR_WHITE = Color(238, 238, 238)


def oklch_candidate(l: float, c: float, h: float, weight: float) -> ExtractedColor:
    """Extracted colour built from an Oklch request (gamut-clamped)."""
    return ExtractedColor(Color.from_oklch(l, c, h), weight)
