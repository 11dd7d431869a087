# nuri/backends/__init__.py
"""
Theme output targets.

Provides:
  Target         : closed set of supported targets (ghostty, zellij, neovim)
  get_backend(t) : the backend instance for a target
  parse_targets(text) : "ghostty,zellij" -> [Target.GHOSTTY, Target.ZELLIJ]
"""

from __future__ import annotations

from enum import Enum
from typing import Dict, List

from .base import ThemeBackend, check_theme_name, config_home
from .ghostty import GhosttyBackend
from .neovim import NeovimBackend
from .zellij import ZellijBackend


class Target(str, Enum):
    GHOSTTY = "ghostty"
    ZELLIJ = "zellij"
    NEOVIM = "neovim"


_BACKENDS: Dict[Target, ThemeBackend] = {
    Target.GHOSTTY: GhosttyBackend(),
    Target.ZELLIJ: ZellijBackend(),
    Target.NEOVIM: NeovimBackend(),
}


def get_backend(target: Target) -> ThemeBackend:
    return _BACKENDS[Target(target)]


def parse_targets(text: str) -> List[Target]:
    """Comma-separated target names, order kept, duplicates dropped."""
    out: List[Target] = []
    for part in text.split(","):
        name = part.strip().lower()
        if not name:
            continue
        target = Target(name)
        if target not in out:
            out.append(target)
    return out


__all__ = [
    "Target",
    "ThemeBackend",
    "check_theme_name",
    "config_home",
    "get_backend",
    "parse_targets",
    "GhosttyBackend",
    "ZellijBackend",
    "NeovimBackend",
]
