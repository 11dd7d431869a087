from __future__ import annotations

"""
Slot assignment: weighted colours + mode -> 16-slot ANSI palette.

Exports:
  AnsiPalette
  assign_slots(colors, mode) -> AnsiPalette
  derive_special_colors(slots, mode) -> dict
  brighten(normal, delta) -> (normal, bright)

Policy:
  1. chromatic filter (Oklch chroma > CHROMA_MIN)
  2. accents 1..6 by nearest hue; hue-rotate when farther than HUE_MATCH_MAX;
     fixed default accent when nothing is chromatic
  3. bases 0/7/8/15 from the darkest / lightest candidate, polarity by mode
  4. brights 9..14 = accents + BRIGHT_DELTA lightness
  5. background/foreground/cursor/selection derived from the slots

Every input, including an empty one, produces a complete palette.
"""

from dataclasses import dataclass, replace
from typing import Dict, List, Optional, Sequence, Tuple

from .color import WHITE, Color
from .constants import (
    ACCENT_TARGETS,
    BRIGHT_DELTA,
    CHROMA_MIN,
    DARK_BG_C_MAX,
    DARK_BG_L_MAX,
    DARK_BRIGHT_BLACK_C_MAX,
    DARK_BRIGHT_BLACK_L,
    DARK_FG_C_MAX,
    DARK_FG_L,
    DARK_WHITE_C_MAX,
    DARK_WHITE_L,
    DEFAULT_ACCENT_C,
    DEFAULT_ACCENT_L,
    FALLBACK_DARK_L,
    FALLBACK_LIGHT_L,
    HUE_MATCH_MAX,
    LIGHT_BG_C_MAX,
    LIGHT_BG_L_MIN,
    LIGHT_BRIGHT_BLACK_C_MAX,
    LIGHT_BRIGHT_BLACK_L,
    LIGHT_FG_C_MAX,
    LIGHT_FG_L_MAX,
    LIGHT_WHITE_C_MAX,
    LIGHT_WHITE_L,
    SELECTION_C_FLOOR,
    SELECTION_C_SCALE,
    SELECTION_L_NUDGE,
)
from .core_types import OklchTuple, clamp_value, hue_difference_degrees
from .extract import ExtractedColor
from .mode import ThemeMode

SLOT_COUNT = 16
SLOT_NAMES: Tuple[str, ...] = (
    "black",
    "red",
    "green",
    "yellow",
    "blue",
    "magenta",
    "cyan",
    "white",
)


@dataclass(frozen=True)
class AnsiPalette:
    """ANSI slots 0..15 plus the derived special colours."""

    slots: Tuple[Color, ...]
    background: Color
    foreground: Color
    cursor_color: Color
    cursor_text: Color
    selection_bg: Color
    selection_fg: Color

    def __post_init__(self) -> None:
        slots = tuple(self.slots)
        if len(slots) != SLOT_COUNT:
            raise ValueError(f"expected {SLOT_COUNT} slots, got {len(slots)}")
        for i, c in enumerate(slots):
            if not isinstance(c, Color):
                raise TypeError(f"slot {i} is not a Color: {c!r}")
        object.__setattr__(self, "slots", slots)

    def __getitem__(self, index: int) -> Color:
        return self.slots[index]

    def __len__(self) -> int:
        return SLOT_COUNT

    def normal(self) -> Tuple[Color, ...]:
        return self.slots[:8]

    def bright(self) -> Tuple[Color, ...]:
        return self.slots[8:]

    def specials(self) -> Dict[str, Color]:
        return {
            "background": self.background,
            "foreground": self.foreground,
            "cursor_color": self.cursor_color,
            "cursor_text": self.cursor_text,
            "selection_bg": self.selection_bg,
            "selection_fg": self.selection_fg,
        }


# Candidate helpers


def _with_lch(
    lch: OklchTuple,
    *,
    lightness: Optional[float] = None,
    chroma_max: Optional[float] = None,
    hue: Optional[float] = None,
) -> Color:
    L, C, h = lch
    if lightness is not None:
        L = lightness
    if chroma_max is not None:
        C = min(C, chroma_max)
    if hue is not None:
        h = hue
    return Color.from_oklch(L, C, h)


def _pick_accent(
    target_hue: float, chromatic: List[OklchTuple], color_of: List[Color]
) -> Color:
    if not chromatic:
        return Color.from_oklch(DEFAULT_ACCENT_L, DEFAULT_ACCENT_C, target_hue)

    best_i = 0
    best_d = hue_difference_degrees(chromatic[0][2], target_hue)
    for i in range(1, len(chromatic)):
        d = hue_difference_degrees(chromatic[i][2], target_hue)
        if d < best_d:
            best_i, best_d = i, d

    if best_d <= HUE_MATCH_MAX:
        return color_of[best_i]
    # hue rotation keeps lightness and chroma
    return _with_lch(chromatic[best_i], hue=target_hue)


def _extremes(lchs: List[OklchTuple]) -> Tuple[OklchTuple, OklchTuple]:
    """(darkest, lightest) by Oklch lightness; neutral fallbacks when empty."""
    if not lchs:
        return (FALLBACK_DARK_L, 0.0, 0.0), (FALLBACK_LIGHT_L, 0.0, 0.0)
    darkest = min(lchs, key=lambda t: t[0])
    lightest = max(lchs, key=lambda t: t[0])
    return darkest, lightest


def _base_slots(
    darkest: OklchTuple, lightest: OklchTuple, mode: ThemeMode
) -> Dict[int, Color]:
    if mode == ThemeMode.LIGHT:
        return {
            0: _with_lch(
                lightest,
                lightness=max(lightest[0], LIGHT_BG_L_MIN),
                chroma_max=LIGHT_BG_C_MAX,
            ),
            7: _with_lch(
                darkest, lightness=LIGHT_WHITE_L, chroma_max=LIGHT_WHITE_C_MAX
            ),
            8: _with_lch(
                lightest,
                lightness=LIGHT_BRIGHT_BLACK_L,
                chroma_max=LIGHT_BRIGHT_BLACK_C_MAX,
            ),
            15: _with_lch(
                darkest,
                lightness=min(darkest[0], LIGHT_FG_L_MAX),
                chroma_max=LIGHT_FG_C_MAX,
            ),
        }
    return {
        0: _with_lch(
            darkest,
            lightness=min(darkest[0], DARK_BG_L_MAX),
            chroma_max=DARK_BG_C_MAX,
        ),
        7: _with_lch(lightest, lightness=DARK_WHITE_L, chroma_max=DARK_WHITE_C_MAX),
        8: _with_lch(
            darkest,
            lightness=DARK_BRIGHT_BLACK_L,
            chroma_max=DARK_BRIGHT_BLACK_C_MAX,
        ),
        15: _with_lch(lightest, lightness=DARK_FG_L, chroma_max=DARK_FG_C_MAX),
    }


def brighten(normal: Color, delta: float = BRIGHT_DELTA) -> Tuple[Color, Color]:
    """
    Bright variant of an accent, guaranteed lighter than the (returned) normal.

    When the gamut ceiling stops the lift, the bright colour becomes white;
    a normal colour that is itself white is lowered by delta first.
    """
    if normal == WHITE:
        normal = normal.adjust_lightness(-delta)
    bright = normal.adjust_lightness(delta)
    if bright.to_oklch()[0] <= normal.to_oklch()[0]:
        bright = WHITE
    return normal, bright


def derive_special_colors(
    slots: Sequence[Color], mode: ThemeMode
) -> Dict[str, Color]:
    """Background, foreground, cursor and selection colours from the slots."""
    background = slots[0]
    foreground = slots[15]

    sel_l, sel_c, sel_h = slots[4].to_oklch()
    nudge = SELECTION_L_NUDGE if mode == ThemeMode.DARK else -SELECTION_L_NUDGE
    selection_bg = Color.from_oklch(
        clamp_value(sel_l + nudge, 0.0, 1.0),
        max(sel_c * SELECTION_C_SCALE, SELECTION_C_FLOOR),
        sel_h,
    )

    return {
        "background": background,
        "foreground": foreground,
        "cursor_color": foreground,
        "cursor_text": background,
        "selection_bg": selection_bg,
        "selection_fg": foreground,
    }


def build_palette(slots: Sequence[Color], mode: ThemeMode) -> AnsiPalette:
    """Wrap 16 slots into an AnsiPalette with freshly derived specials."""
    return AnsiPalette(slots=tuple(slots), **derive_special_colors(slots, mode))


def assign_slots(colors: Sequence[ExtractedColor], mode: ThemeMode) -> AnsiPalette:
    """
    Map extracted colours onto the 16 ANSI slots plus special colours.
    Total: never raises for any candidate set, including an empty one.
    """
    color_of = [ec.color for ec in colors]
    lchs = [c.to_oklch() for c in color_of]

    chromatic_idx = [i for i, lch in enumerate(lchs) if lch[1] > CHROMA_MIN]
    chromatic = [lchs[i] for i in chromatic_idx]
    chromatic_colors = [color_of[i] for i in chromatic_idx]

    darkest, lightest = _extremes(lchs)
    by_slot = _base_slots(darkest, lightest, mode)
    for slot, target_hue, _name in ACCENT_TARGETS:
        accent = _pick_accent(target_hue, chromatic, chromatic_colors)
        by_slot[slot], by_slot[slot + 8] = brighten(accent)

    return build_palette(tuple(by_slot[i] for i in range(SLOT_COUNT)), mode)


def replace_slots(
    palette: AnsiPalette, updates: Dict[int, Color], mode: ThemeMode
) -> AnsiPalette:
    """New palette with some slots replaced and specials re-derived."""
    slots = list(palette.slots)
    for index, color in updates.items():
        slots[index] = color
    return replace(palette, slots=tuple(slots), **derive_special_colors(slots, mode))


__all__ = [
    "SLOT_COUNT",
    "SLOT_NAMES",
    "AnsiPalette",
    "brighten",
    "derive_special_colors",
    "build_palette",
    "assign_slots",
    "replace_slots",
]
