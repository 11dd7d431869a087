# nuri/__init__.py
"""
nuri package.

Purpose:
  Turn a wallpaper image into a 16-slot ANSI terminal colour theme. See
  nuri/cli.py for the command line.

Public API:
  Color            : immutable sRGB colour with Lab / Oklch / WCAG helpers.
  load_and_prepare : image path -> Lab pixel rows (downsampled to 256px).
  extract_colors   : Lab pixels -> weighted representative colours (k-means).
  assign_slots     : weighted colours + ThemeMode -> AnsiPalette.
  ThemeMode        : DARK / LIGHT.
  backends         : Ghostty / Zellij / Neovim serializers.

Quick start:
  from nuri import load_and_prepare, extract_colors, assign_slots, ThemeMode
  palette = assign_slots(extract_colors(load_and_prepare("wall.png"), 16), ThemeMode.DARK)
"""

__version__ = "0.1.0"

# Re-export namespaces for convenience.
from . import colour_convert
from . import core_types
from . import backends

from .color import Color  # noqa: E402,F401
from .image_io import (  # noqa: E402,F401
    ImageLoadError,
    ImageNotFound,
    UnsupportedOrCorruptFormat,
    load_and_prepare,
)
from .extract import ExtractedColor, extract_colors  # noqa: E402,F401
from .mode import ThemeMode  # noqa: E402,F401
from .assign import AnsiPalette, assign_slots  # noqa: E402,F401

__all__ = [
    "__version__",
    "colour_convert",
    "core_types",
    "backends",
    "Color",
    "ImageLoadError",
    "ImageNotFound",
    "UnsupportedOrCorruptFormat",
    "load_and_prepare",
    "ExtractedColor",
    "extract_colors",
    "ThemeMode",
    "AnsiPalette",
    "assign_slots",
]
