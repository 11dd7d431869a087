# nuri/backends/neovim.py
from __future__ import annotations

from typing import List

from ..assign import AnsiPalette
from .base import ThemeBackend

# (highlight group, fg attribute, bg attribute) as palette attribute names / slots
_HIGHLIGHTS = (
    ("Normal", "foreground", "background"),
    ("Cursor", "cursor_text", "cursor_color"),
    ("Visual", "selection_fg", "selection_bg"),
    ("Comment", 8, None),
    ("String", 2, None),
    ("Number", 3, None),
    ("Function", 4, None),
    ("Keyword", 5, None),
    ("Type", 6, None),
    ("Error", 1, None),
    ("LineNr", 8, None),
)


def _lua_string(text: str) -> str:
    return '"' + text.replace("\\", "\\\\").replace('"', '\\"') + '"'


class NeovimBackend(ThemeBackend):
    """Neovim colorscheme in Lua: terminal colours plus a few base groups."""

    name = "Neovim"
    extension = ".lua"
    subdir = ("nvim", "colors")

    def serialize(self, palette: AnsiPalette, theme_name: str) -> str:
        specials = palette.specials()

        def hex_of(ref) -> str:
            color = palette[ref] if isinstance(ref, int) else specials[ref]
            return color.to_hex()

        lines: List[str] = [
            'vim.cmd("highlight clear")',
            'if vim.fn.exists("syntax_on") == 1 then vim.cmd("syntax reset") end',
            f"vim.g.colors_name = {_lua_string(theme_name)}",
            "",
        ]
        lines.extend(
            f'vim.g.terminal_color_{i} = "{c.to_hex()}"'
            for i, c in enumerate(palette.slots)
        )
        lines.append("")
        lines.append("local hl = vim.api.nvim_set_hl")
        for group, fg_ref, bg_ref in _HIGHLIGHTS:
            attrs = [f'fg = "{hex_of(fg_ref)}"']
            if bg_ref is not None:
                attrs.append(f'bg = "{hex_of(bg_ref)}"')
            lines.append(f'hl(0, "{group}", {{ {", ".join(attrs)} }})')
        return "\n".join(lines) + "\n"


__all__ = ["NeovimBackend"]
