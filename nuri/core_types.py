# nuri/core_types.py
from __future__ import annotations

"""
Type aliases shared across the pipeline, plus the few scalar helpers and
array validators every stage needs.
"""

from typing import Tuple

import numpy as np
from numpy.typing import NDArray

# Scalar views of a colour
RGBTuple = Tuple[int, int, int]
OklchTuple = Tuple[float, float, float]  # (lightness 0..1, chroma, hue 0..360)
LabTuple = Tuple[float, float, float]
HexStr = str  # '#rrggbb', lowercase

# Arrays
U8Image = NDArray[np.uint8]  # (H, W, 3) sRGB
Lab = NDArray[np.float64]  # (..., 3) CIE Lab, D65
Oklab = NDArray[np.float64]  # (..., 3)
Oklch = NDArray[np.float64]  # (..., 3), hue in degrees

_HEX_DIGITS = frozenset("0123456789abcdef")


def clamp_value(value: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, value))


def hue_difference_degrees(hue_a: float, hue_b: float) -> float:
    """Shortest angular distance between two hues, in [0, 180]."""
    d = (hue_a - hue_b) % 360.0
    return min(d, 360.0 - d)


def rgb_to_hex(rgb: RGBTuple) -> HexStr:
    r, g, b = rgb
    return "#" + "".join(format(int(v), "02x") for v in (r, g, b))


def hex_to_rgb(hex_str: str) -> RGBTuple:
    """'#rrggbb' or shorthand '#rgb', any case."""
    digits = hex_str.strip().lower()
    if digits[:1] != "#" or not set(digits[1:]) <= _HEX_DIGITS:
        raise ValueError(f"not a hex colour: {hex_str!r}")
    digits = digits[1:]
    if len(digits) == 3:
        digits = "".join(ch * 2 for ch in digits)
    if len(digits) != 6:
        raise ValueError(f"expected '#rrggbb' or '#rgb', got {hex_str!r}")
    return (int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))


def assert_u8_image_rgb(image: np.ndarray) -> U8Image:
    """Reject anything but a uint8 (H, W, 3) array."""
    if image.dtype != np.uint8 or image.ndim != 3 or image.shape[2] != 3:
        raise TypeError(
            f"expected a uint8 (H, W, 3) image, got {image.dtype} {image.shape}"
        )
    return image


def assert_lab_rows(pixels: np.ndarray) -> Lab:
    """(N, 3) float64 view of pixel rows; an empty input becomes (0, 3)."""
    arr = np.asarray(pixels, dtype=np.float64)
    if arr.size == 0:
        return arr.reshape(0, 3)
    if arr.ndim != 2 or arr.shape[1] != 3:
        raise ValueError(f"expected (N,3) Lab rows, got shape {arr.shape}")
    return arr


__all__ = [
    "RGBTuple",
    "OklchTuple",
    "LabTuple",
    "HexStr",
    "U8Image",
    "Lab",
    "Oklab",
    "Oklch",
    "clamp_value",
    "hue_difference_degrees",
    "rgb_to_hex",
    "hex_to_rgb",
    "assert_u8_image_rgb",
    "assert_lab_rows",
]
