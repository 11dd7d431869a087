# nuri/mode.py
from __future__ import annotations

from enum import Enum
from typing import Optional, Sequence, Union

from .constants import AUTO_LIGHT_THRESHOLD
from .extract import ExtractedColor

"""
Theme mode selection helpers.

Exports:
- ThemeMode
- decide_auto_mode(colors, *, threshold=0.5) -> ThemeMode
- effective_mode(requested, colors) -> ThemeMode

Notes:
- "auto" picks LIGHT when the pixel-weighted mean Oklch lightness of the
  extracted colours is at least `threshold`; otherwise DARK.
"""


class ThemeMode(str, Enum):
    DARK = "dark"
    LIGHT = "light"


RequestedMode = Union[ThemeMode, str, None]


def decide_auto_mode(
    colors: Sequence[ExtractedColor], *, threshold: float = AUTO_LIGHT_THRESHOLD
) -> ThemeMode:
    """
    Heuristic:
      - weighted mean lightness >= threshold -> LIGHT
      - else (including no colours at all) -> DARK
    """
    total = sum(ec.weight for ec in colors)
    if total <= 0.0:
        return ThemeMode.DARK
    mean_l = sum(ec.color.to_oklch()[0] * ec.weight for ec in colors) / total
    return ThemeMode.LIGHT if mean_l >= threshold else ThemeMode.DARK


def effective_mode(
    requested: RequestedMode, colors: Sequence[ExtractedColor]
) -> ThemeMode:
    """
    Resolve a user-requested mode into a concrete one.
    - ThemeMode / "dark" / "light" stay as is
    - None / "auto" -> decide_auto_mode(...)
    """
    if isinstance(requested, ThemeMode):
        return requested
    if requested is None or requested == "auto":
        return decide_auto_mode(colors)
    try:
        return ThemeMode(str(requested).lower())
    except ValueError:
        raise ValueError(f"unknown theme mode: {requested!r}") from None


def parse_mode(value: Optional[str]) -> RequestedMode:
    """argparse helper: 'dark' | 'light' | 'auto' (case-insensitive)."""
    if value is None:
        return None
    v = value.strip().lower()
    if v == "auto":
        return "auto"
    return ThemeMode(v)


__all__ = [
    "ThemeMode",
    "RequestedMode",
    "decide_auto_mode",
    "effective_mode",
    "parse_mode",
]
