from __future__ import annotations

import math
from typing import Dict, Tuple

from .assign import AnsiPalette, brighten, replace_slots
from .color import BLACK, Color
from .constants import BRIGHT_DELTA, CONTRAST_STEP
from .mode import ThemeMode

"""
Optional accent-vs-background contrast enforcement and contrast reporting.

assign_slots never calls into this module; callers opt in with
enforce_min_contrast(palette, min_ratio, mode).
"""

ACCENT_SLOTS: Tuple[int, ...] = (1, 2, 3, 4, 5, 6, 9, 10, 11, 12, 13, 14)


def accent_contrast_report(palette: AnsiPalette) -> Tuple[float, float]:
    """(foreground ratio, dimmest accent ratio) against the background."""
    bg = palette.background
    fg_ratio = Color.contrast_ratio(palette.foreground, bg)
    min_accent = min(Color.contrast_ratio(palette[i], bg) for i in ACCENT_SLOTS)
    return fg_ratio, min_accent


def _lift_until(
    color: Color, background: Color, min_ratio: float, direction: float
) -> Color:
    """Step lightness in `direction` until min_ratio is met or the range ends."""
    max_steps = int(math.ceil(1.0 / CONTRAST_STEP)) + 1
    current = color
    for _ in range(max_steps):
        if Color.contrast_ratio(current, background) >= min_ratio:
            break
        lightness = current.to_oklch()[0]
        if (direction > 0 and lightness >= 1.0) or (direction < 0 and lightness <= 0.0):
            break
        stepped = current.adjust_lightness(direction * CONTRAST_STEP)
        if stepped == current:
            break
        current = stepped
    return current


def _repair_order(
    normal: Color, bright: Color, mode: ThemeMode
) -> Tuple[Color, Color]:
    """Restore bright-over-normal lightness, moving whichever slot gains contrast."""
    if bright.to_oklch()[0] > normal.to_oklch()[0]:
        return normal, bright
    if mode == ThemeMode.DARK:
        return brighten(normal)
    lowered = bright.adjust_lightness(-BRIGHT_DELTA)
    if lowered.to_oklch()[0] < bright.to_oklch()[0]:
        return lowered, bright
    return brighten(BLACK)


def enforce_min_contrast(
    palette: AnsiPalette, min_ratio: float, mode: ThemeMode
) -> AnsiPalette:
    """
    Move accent slots (1-6, 9-14) away from the background in Oklch lightness
    until each reaches min_ratio against it, where the gamut allows.

    Dark mode lifts accents, light mode darkens them. Base slots are untouched
    and special colours are re-derived.
    """
    if min_ratio <= 1.0:
        return palette

    bg = palette.background
    direction = 1.0 if mode == ThemeMode.DARK else -1.0
    updates: Dict[int, Color] = {
        i: _lift_until(palette[i], bg, min_ratio, direction) for i in ACCENT_SLOTS
    }
    for i in range(1, 7):
        updates[i], updates[i + 8] = _repair_order(updates[i], updates[i + 8], mode)

    return replace_slots(palette, updates, mode)


__all__ = ["ACCENT_SLOTS", "accent_contrast_report", "enforce_min_contrast"]
