# nuri/preview.py
from __future__ import annotations

"""
Truecolor terminal preview of a palette. Read-only over its inputs.
"""

import sys
from typing import List, Optional, Sequence, TextIO

from .assign import AnsiPalette
from .color import Color
from .constants import PREVIEW_DARK_TEXT_LUMINANCE
from .contrast import accent_contrast_report
from .extract import ExtractedColor

RESET = "\x1b[0m"
SHORT_NAMES = ("Blk", "Red", "Grn", "Yel", "Blu", "Mag", "Cyn", "Wht")
MAX_SWATCHES = 12


def fg_escape(c: Color) -> str:
    """24-bit foreground escape."""
    return f"\x1b[38;2;{c.r};{c.g};{c.b}m"


def bg_escape(c: Color) -> str:
    """24-bit background escape."""
    return f"\x1b[48;2;{c.r};{c.g};{c.b}m"


def label_escape(bg: Color) -> str:
    """Black or white label text, whichever reads better on bg."""
    if bg.relative_luminance() > PREVIEW_DARK_TEXT_LUMINANCE:
        return "\x1b[38;2;0;0;0m"
    return "\x1b[38;2;255;255;255m"


def _slot_row(colors: Sequence[Color]) -> str:
    cells = [
        f"{bg_escape(c)}{label_escape(c)} {name:^5} {RESET}"
        for c, name in zip(colors, SHORT_NAMES)
    ]
    return "  " + "".join(cells)


def render_preview(
    palette: AnsiPalette, extracted: Optional[Sequence[ExtractedColor]] = None
) -> str:
    """Multi-line preview string: slot rows, sample text, accents, contrast."""
    bg = palette.background
    fg = palette.foreground
    lines: List[str] = [""]

    lines.append(_slot_row(palette.normal()))
    lines.append(_slot_row(palette.bright()))
    lines.append("")

    lines.append(
        f"  {bg_escape(bg)}{fg_escape(fg)}"
        f"  The quick brown fox jumps over the lazy dog  {RESET}"
    )
    lines.append("")

    accents = "".join(
        f"{fg_escape(palette[i])}{SHORT_NAMES[i]}{RESET}{bg_escape(bg)} "
        for i in range(1, 7)
    )
    lines.append(f"  {bg_escape(bg)}  {accents}{RESET}")
    lines.append("")

    if extracted:
        swatches = "".join(
            f"{bg_escape(ec.color)}  {RESET}" for ec in extracted[:MAX_SWATCHES]
        )
        lines.append(f"  Extracted: {swatches}")
        lines.append("")

    fg_ratio, min_accent = accent_contrast_report(palette)
    lines.append(f"  Foreground contrast: {fg_ratio:.1f}:1")
    lines.append(f"  Dimmest accent:      {min_accent:.1f}:1")
    lines.append("")
    return "\n".join(lines)


def print_preview(
    palette: AnsiPalette,
    extracted: Optional[Sequence[ExtractedColor]] = None,
    stream: Optional[TextIO] = None,
) -> None:
    print(render_preview(palette, extracted), file=stream or sys.stdout, flush=True)


__all__ = [
    "RESET",
    "fg_escape",
    "bg_escape",
    "label_escape",
    "render_preview",
    "print_preview",
]
