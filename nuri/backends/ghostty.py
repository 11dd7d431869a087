# nuri/backends/ghostty.py
from __future__ import annotations

from typing import List

from ..assign import AnsiPalette
from .base import ThemeBackend


class GhosttyBackend(ThemeBackend):
    """Ghostty theme file: key = value lines, no extension."""

    name = "Ghostty"
    extension = ""
    subdir = ("ghostty", "themes")

    def serialize(self, palette: AnsiPalette, theme_name: str) -> str:
        p = palette
        lines: List[str] = [
            f"background = {p.background.to_hex()}",
            f"foreground = {p.foreground.to_hex()}",
            f"cursor-color = {p.cursor_color.to_hex()}",
            f"cursor-text = {p.cursor_text.to_hex()}",
            f"selection-background = {p.selection_bg.to_hex()}",
            f"selection-foreground = {p.selection_fg.to_hex()}",
        ]
        lines.extend(f"palette = {i}={c.to_hex()}" for i, c in enumerate(p.slots))
        return "\n".join(lines) + "\n"


__all__ = ["GhosttyBackend"]
