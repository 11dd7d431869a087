# nuri/constants.py
"""
Tunables used across the project.

- Image preparation (MAX_DIM)
- Clustering (KMEANS_*)
- Slot assignment (CHROMA_MIN, ACCENT_TARGETS, base/bright/selection knobs)
- Contrast extension (CONTRAST_*)
"""
from __future__ import annotations

from typing import List, Tuple

# =================
# Image preparation
# =================
MAX_DIM: int = 256

# ==========
# Clustering
# ==========
DEFAULT_CLUSTERS: int = 16
KMEANS_MAX_ITER: int = 100
KMEANS_TOL: float = 0.01  # max centroid shift in Lab units
KMEANS_CHUNK_ELEMS: int = 1_048_576  # pixel-centroid distances per block (8 MB float64)

# ===============
# Slot assignment
# ===============
CHROMA_MIN: float = 0.02
HUE_MATCH_MAX: float = 60.0

# (slot, target hue in degrees, name)
ACCENT_TARGETS: List[Tuple[int, float, str]] = [
    (1, 25.0, "red"),
    (2, 145.0, "green"),
    (3, 90.0, "yellow"),
    (4, 260.0, "blue"),
    (5, 325.0, "magenta"),
    (6, 195.0, "cyan"),
]

DEFAULT_ACCENT_L: float = 0.65
DEFAULT_ACCENT_C: float = 0.15

FALLBACK_DARK_L: float = 0.15
FALLBACK_LIGHT_L: float = 0.93

# Dark mode bases
DARK_BG_L_MAX: float = 0.15
DARK_BG_C_MAX: float = 0.04
DARK_WHITE_L: float = 0.85
DARK_WHITE_C_MAX: float = 0.02
DARK_BRIGHT_BLACK_L: float = 0.40
DARK_BRIGHT_BLACK_C_MAX: float = 0.04
DARK_FG_L: float = 0.93
DARK_FG_C_MAX: float = 0.02

# Light mode bases
LIGHT_BG_L_MIN: float = 0.93
LIGHT_BG_C_MAX: float = 0.02
LIGHT_WHITE_L: float = 0.20
LIGHT_WHITE_C_MAX: float = 0.02
LIGHT_BRIGHT_BLACK_L: float = 0.60
LIGHT_BRIGHT_BLACK_C_MAX: float = 0.04
LIGHT_FG_L_MAX: float = 0.15
LIGHT_FG_C_MAX: float = 0.02

BRIGHT_DELTA: float = 0.12

SELECTION_L_NUDGE: float = 0.10
SELECTION_C_SCALE: float = 0.60
SELECTION_C_FLOOR: float = 0.01

# ==================
# Contrast extension
# ==================
CONTRAST_STEP: float = 0.02
AUTO_LIGHT_THRESHOLD: float = 0.5
PREVIEW_DARK_TEXT_LUMINANCE: float = 0.4

__all__ = [
    "MAX_DIM",
    "DEFAULT_CLUSTERS",
    "KMEANS_MAX_ITER",
    "KMEANS_TOL",
    "KMEANS_CHUNK_ELEMS",
    "CHROMA_MIN",
    "HUE_MATCH_MAX",
    "ACCENT_TARGETS",
    "DEFAULT_ACCENT_L",
    "DEFAULT_ACCENT_C",
    "FALLBACK_DARK_L",
    "FALLBACK_LIGHT_L",
    "DARK_BG_L_MAX",
    "DARK_BG_C_MAX",
    "DARK_WHITE_L",
    "DARK_WHITE_C_MAX",
    "DARK_BRIGHT_BLACK_L",
    "DARK_BRIGHT_BLACK_C_MAX",
    "DARK_FG_L",
    "DARK_FG_C_MAX",
    "LIGHT_BG_L_MIN",
    "LIGHT_BG_C_MAX",
    "LIGHT_WHITE_L",
    "LIGHT_WHITE_C_MAX",
    "LIGHT_BRIGHT_BLACK_L",
    "LIGHT_BRIGHT_BLACK_C_MAX",
    "LIGHT_FG_L_MAX",
    "LIGHT_FG_C_MAX",
    "BRIGHT_DELTA",
    "SELECTION_L_NUDGE",
    "SELECTION_C_SCALE",
    "SELECTION_C_FLOOR",
    "CONTRAST_STEP",
    "AUTO_LIGHT_THRESHOLD",
    "PREVIEW_DARK_TEXT_LUMINANCE",
]
