# nuri/color.py
from __future__ import annotations

"""
Immutable 8-bit sRGB colour value with Lab / Oklch views and WCAG maths.
"""

from dataclasses import dataclass
from typing import Optional

import numpy as np

from .colour_convert import (
    lab_to_rgb,
    oklab_to_oklch,
    oklab_to_rgb,
    oklch_to_oklab,
    relative_luminance as _relative_luminance,
    rgb_to_lab,
    rgb_to_oklab,
)
from .core_types import (
    HexStr,
    LabTuple,
    OklchTuple,
    RGBTuple,
    clamp_value,
    hex_to_rgb,
    rgb_to_hex,
)


@dataclass(frozen=True)
class Color:
    """
    sRGB colour, 8 bits per channel.

    Two colours are equal iff their channels match exactly. Every constructor
    that goes through another colour space clamps channel-wise into the sRGB
    gamut, which can drift the apparent hue of very saturated requests.
    """

    r: int
    g: int
    b: int

    def __post_init__(self) -> None:
        for name in ("r", "g", "b"):
            value = getattr(self, name)
            if isinstance(value, (bool, np.bool_)) or not isinstance(
                value, (int, np.integer)
            ):
                raise TypeError(f"channel {name} must be an int, got {value!r}")
            if not 0 <= int(value) <= 255:
                raise ValueError(f"channel {name} out of range [0, 255]: {value}")
            # normalise NumPy integers so equality and hashing stay plain
            object.__setattr__(self, name, int(value))

    # Constructors

    @classmethod
    def from_rgb(cls, rgb: RGBTuple) -> Color:
        return cls(int(rgb[0]), int(rgb[1]), int(rgb[2]))

    @classmethod
    def from_hex(cls, hex_str: HexStr) -> Color:
        return cls.from_rgb(hex_to_rgb(hex_str))

    @classmethod
    def from_oklch(cls, lightness: float, chroma: float, hue: float) -> Color:
        """
        Nearest 8-bit sRGB colour for an Oklch triple.

        Lightness is clamped to [0, 1], chroma to >= 0, hue wrapped to [0, 360).
        Out-of-gamut results are clamped channel-wise.
        """
        lch = np.array(
            [
                clamp_value(float(lightness), 0.0, 1.0),
                max(0.0, float(chroma)),
                float(hue) % 360.0,
            ],
            dtype=np.float64,
        )
        return cls._from_u8_row(oklab_to_rgb(oklch_to_oklab(lch)))

    @classmethod
    def from_lab(cls, lightness: float, a: float, b: float) -> Color:
        """Nearest 8-bit sRGB colour for a CIE Lab (D65) triple."""
        lab = np.array([lightness, a, b], dtype=np.float64)
        return cls._from_u8_row(lab_to_rgb(lab))

    @classmethod
    def _from_u8_row(cls, row: np.ndarray) -> Color:
        return cls(int(row[0]), int(row[1]), int(row[2]))

    # Views

    @property
    def rgb(self) -> RGBTuple:
        return (self.r, self.g, self.b)

    def _u8(self) -> np.ndarray:
        return np.array(self.rgb, dtype=np.uint8)

    def to_oklab(self) -> LabTuple:
        ok = rgb_to_oklab(self._u8())
        return (float(ok[0]), float(ok[1]), float(ok[2]))

    def to_oklch(self) -> OklchTuple:
        """(lightness, chroma, hue_deg). Achromatic colours report hue 0."""
        lch = oklab_to_oklch(rgb_to_oklab(self._u8()))
        return (float(lch[0]), float(lch[1]), float(lch[2]))

    def to_lab(self) -> LabTuple:
        lab = rgb_to_lab(self._u8())
        return (float(lab[0]), float(lab[1]), float(lab[2]))

    def to_hex(self) -> HexStr:
        """Lowercase '#rrggbb'."""
        return rgb_to_hex(self.rgb)

    # Derivations

    def with_oklch(
        self,
        lightness: Optional[float] = None,
        chroma: Optional[float] = None,
        hue: Optional[float] = None,
    ) -> Color:
        """Replace some Oklch components and re-clamp into sRGB."""
        cur_l, cur_c, cur_h = self.to_oklch()
        return Color.from_oklch(
            cur_l if lightness is None else lightness,
            cur_c if chroma is None else chroma,
            cur_h if hue is None else hue,
        )

    def adjust_lightness(self, delta: float) -> Color:
        """Oklch lightness + delta (clamped to [0, 1]); chroma and hue kept."""
        cur_l, cur_c, cur_h = self.to_oklch()
        return Color.from_oklch(clamp_value(cur_l + delta, 0.0, 1.0), cur_c, cur_h)

    # WCAG

    def relative_luminance(self) -> float:
        return float(_relative_luminance(self._u8()))

    @staticmethod
    def contrast_ratio(a: Color, b: Color) -> float:
        """WCAG contrast ratio in [1, 21]; argument order does not matter."""
        la = a.relative_luminance()
        lb = b.relative_luminance()
        lighter, darker = (la, lb) if la >= lb else (lb, la)
        return (lighter + 0.05) / (darker + 0.05)

    def __str__(self) -> str:
        return self.to_hex()


BLACK = Color(0, 0, 0)
WHITE = Color(255, 255, 255)

__all__ = ["Color", "BLACK", "WHITE"]
