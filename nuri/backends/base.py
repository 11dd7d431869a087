# nuri/backends/base.py
from __future__ import annotations

"""
Shared behaviour for theme output targets.

A backend only knows how to turn an AnsiPalette into text and where its
themes live; writing and installing are common.
"""

import os
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional

from ..assign import AnsiPalette


def config_home() -> Path:
    """$XDG_CONFIG_HOME, falling back to ~/.config."""
    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg)
    return Path(os.environ.get("HOME") or Path.home()) / ".config"


def check_theme_name(theme_name: str) -> str:
    """
    Theme names become file names inside a themes directory.

    Raises:
      ValueError: empty, "." or "..", or containing a path separator
    """
    separators = {"/", os.sep} | ({os.altsep} if os.altsep else set())
    if theme_name in ("", ".", "..") or any(s in theme_name for s in separators):
        raise ValueError(f"invalid theme name: {theme_name!r}")
    return theme_name


class ThemeBackend(ABC):
    """Base class: subclasses set name / extension and implement serialize()."""

    name: str = ""
    extension: str = ""
    subdir: tuple = ()

    @abstractmethod
    def serialize(self, palette: AnsiPalette, theme_name: str) -> str:
        """Full theme file contents."""

    def themes_dir(self) -> Path:
        return config_home().joinpath(*self.subdir)

    def theme_path(self, theme_name: str) -> Path:
        return self.themes_dir() / f"{check_theme_name(theme_name)}{self.extension}"

    def write_to(self, palette: AnsiPalette, theme_name: str, path: Path) -> Path:
        """Write the serialized theme to an arbitrary path."""
        path = Path(path)
        path.write_text(self.serialize(palette, theme_name), encoding="utf-8")
        return path

    def install(
        self,
        palette: AnsiPalette,
        theme_name: str,
        no_clobber: bool = False,
        directory: Optional[Path] = None,
    ) -> Path:
        """
        Write the theme into the target's standard theme directory.

        Raises:
          FileExistsError: no_clobber is set and the theme already exists
          ValueError: theme_name is not a plain file name
        """
        check_theme_name(theme_name)
        dst_dir = Path(directory) if directory is not None else self.themes_dir()
        dst = dst_dir / f"{theme_name}{self.extension}"
        if no_clobber and dst.exists():
            raise FileExistsError(f"theme already exists: {dst}")
        dst_dir.mkdir(parents=True, exist_ok=True)
        return self.write_to(palette, theme_name, dst)


__all__ = ["config_home", "check_theme_name", "ThemeBackend"]
