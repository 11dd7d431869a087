# nuri/backends/zellij.py
from __future__ import annotations

from ..assign import AnsiPalette
from .base import ThemeBackend

# KDL key -> ANSI slot
_SLOT_KEYS = (
    ("black", 0),
    ("red", 1),
    ("green", 2),
    ("yellow", 3),
    ("blue", 4),
    ("magenta", 5),
    ("cyan", 6),
    ("white", 7),
    ("orange", 11),
)


def _kdl_string(text: str) -> str:
    return '"' + text.replace("\\", "\\\\").replace('"', '\\"') + '"'


class ZellijBackend(ThemeBackend):
    """Zellij theme in KDL, one `themes` block per file."""

    name = "Zellij"
    extension = ".kdl"
    subdir = ("zellij", "themes")

    def serialize(self, palette: AnsiPalette, theme_name: str) -> str:
        entries = [
            ("fg", palette.foreground),
            ("bg", palette.background),
        ] + [(key, palette[slot]) for key, slot in _SLOT_KEYS]
        body = "\n".join(f'        {key} "{c.to_hex()}"' for key, c in entries)
        return f"themes {{\n    {_kdl_string(theme_name)} {{\n{body}\n    }}\n}}\n"


__all__ = ["ZellijBackend"]
