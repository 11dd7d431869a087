# nuri/colour_convert.py
from __future__ import annotations

"""
Colour conversions and metrics (sRGB, D65).

Exports:
  rgb_to_linear(srgb) / linear_to_rgb(linear)
  rgb_to_lab(rgb)     / lab_to_rgb(lab)
  rgb_to_oklab(rgb)   / oklab_to_rgb(oklab)
  oklab_to_oklch(oklab) / oklch_to_oklab(oklch)
  relative_luminance(rgb)

All functions are vectorised over (..., 3) arrays and return float64, except
the *_to_rgb functions which return uint8 after a channel-wise gamut clamp.
"""

import numpy as np

from .core_types import Lab, Oklab, Oklch, U8Image

# Linear RGB <-> XYZ (D65)
_RGB_TO_XYZ = np.array(
    [
        [0.4124564, 0.3575761, 0.1804375],
        [0.2126729, 0.7151522, 0.0721750],
        [0.0193339, 0.1191920, 0.9503041],
    ],
    dtype=np.float64,
)
_XYZ_TO_RGB = np.linalg.inv(_RGB_TO_XYZ)

# Reference white (D65)
_WHITE_D65 = np.array([0.95047, 1.00000, 1.08883], dtype=np.float64)
_LAB_E = 216.0 / 24389.0
_LAB_K = 24389.0 / 27.0

# Oklab (Ottosson 2020)
_RGB_TO_LMS = np.array(
    [
        [0.4122214708, 0.5363325363, 0.0514459929],
        [0.2119034982, 0.6806995451, 0.1073969566],
        [0.0883024619, 0.2817188376, 0.6299787005],
    ],
    dtype=np.float64,
)
_LMS_TO_OKLAB = np.array(
    [
        [0.2104542553, 0.7936177850, -0.0040720468],
        [1.9779984951, -2.4285922050, 0.4505937099],
        [0.0259040371, 0.7827717662, -0.8086757660],
    ],
    dtype=np.float64,
)
_OKLAB_TO_LMS = np.array(
    [
        [1.0, 0.3963377774, 0.2158037573],
        [1.0, -0.1055613458, -0.0638541728],
        [1.0, -0.0894841775, -1.2914855480],
    ],
    dtype=np.float64,
)
_LMS_TO_RGB = np.array(
    [
        [4.0767416621, -3.3077115913, 0.2309699292],
        [-1.2684380046, 2.6097574011, -0.3413193965],
        [-0.0041960863, -0.7034186147, 1.7076147010],
    ],
    dtype=np.float64,
)

# Relative luminance weights (Rec. 709 / WCAG)
_LUMA = np.array([0.2126, 0.7152, 0.0722], dtype=np.float64)


# sRGB <-> linear


def _as_unit_rgb(rgb: np.ndarray) -> np.ndarray:
    """Integer [0..255] or float [0..1] to float64 [0..1]."""
    arr = np.asarray(rgb)
    if np.issubdtype(arr.dtype, np.integer):
        return arr.astype(np.float64) / 255.0
    return arr.astype(np.float64, copy=False)


def rgb_to_linear(srgb: np.ndarray) -> np.ndarray:
    """
    sRGB (non-linear 0..1) to linear RGB (0..1). Vectorised.
    Accepts any shape; uint8 input is scaled from 0..255 first.
    """
    u = _as_unit_rgb(srgb)
    return np.where(u <= 0.04045, u / 12.92, ((u + 0.055) / 1.055) ** 2.4)


def linear_to_rgb(linear: np.ndarray) -> U8Image:
    """
    Linear RGB to 8-bit sRGB. Out-of-gamut values are clamped channel-wise
    to [0, 1] before companding.
    """
    lin = np.clip(np.asarray(linear, dtype=np.float64), 0.0, 1.0)
    srgb = np.where(
        lin <= 0.0031308, lin * 12.92, 1.055 * np.power(lin, 1.0 / 2.4) - 0.055
    )
    return np.clip(np.rint(srgb * 255.0), 0, 255).astype(np.uint8)


# sRGB <-> CIE Lab (D65)


def rgb_to_lab(rgb: np.ndarray) -> Lab:
    """
    sRGB to CIE Lab (D65).
    Accepts uint8 [0..255] or float [0..1]. Preserves shape (...,3).
    """
    lin = rgb_to_linear(rgb)
    xyz = lin @ _RGB_TO_XYZ.T
    t = xyz / _WHITE_D65

    f = np.where(t > _LAB_E, np.cbrt(t), (_LAB_K * t + 16.0) / 116.0)
    fx, fy, fz = f[..., 0], f[..., 1], f[..., 2]

    out = np.empty(lin.shape, dtype=np.float64)
    out[..., 0] = 116.0 * fy - 16.0
    out[..., 1] = 500.0 * (fx - fy)
    out[..., 2] = 200.0 * (fy - fz)
    return out


def lab_to_rgb(lab: Lab) -> U8Image:
    """CIE Lab (D65) to 8-bit sRGB with channel-wise gamut clamp."""
    lab_f = np.asarray(lab, dtype=np.float64)
    L, a, b = lab_f[..., 0], lab_f[..., 1], lab_f[..., 2]

    fy = (L + 16.0) / 116.0
    fx = fy + a / 500.0
    fz = fy - b / 200.0

    def finv(t: np.ndarray) -> np.ndarray:
        t3 = t * t * t
        return np.where(t3 > _LAB_E, t3, (116.0 * t - 16.0) / _LAB_K)

    xyz = np.stack([finv(fx), finv(fy), finv(fz)], axis=-1) * _WHITE_D65
    lin = xyz @ _XYZ_TO_RGB.T
    return linear_to_rgb(lin)


# sRGB <-> Oklab


def rgb_to_oklab(rgb: np.ndarray) -> Oklab:
    """sRGB (uint8 or float 0..1) to Oklab. Preserves shape (...,3)."""
    lin = rgb_to_linear(rgb)
    lms = lin @ _RGB_TO_LMS.T
    return np.cbrt(lms) @ _LMS_TO_OKLAB.T


def oklab_to_rgb(oklab: Oklab) -> U8Image:
    """Oklab to 8-bit sRGB with channel-wise gamut clamp."""
    lms_ = np.asarray(oklab, dtype=np.float64) @ _OKLAB_TO_LMS.T
    lin = (lms_ * lms_ * lms_) @ _LMS_TO_RGB.T
    return linear_to_rgb(lin)


# Oklab <-> Oklch


def oklab_to_oklch(oklab: Oklab) -> Oklch:
    """
    Oklab[...,3] to Oklch[...,3].
    C=sqrt(a^2+b^2), h=atan2(b,a) in degrees [0,360). Shape is preserved.
    """
    lab_f = np.asarray(oklab, dtype=np.float64)
    L = lab_f[..., 0]
    a = lab_f[..., 1]
    b = lab_f[..., 2]
    C = np.hypot(a, b)
    h = np.degrees(np.arctan2(b, a)) % 360.0
    # Treat numerical noise on greys as exactly achromatic
    h = np.where((C < 1e-7) | (h >= 360.0), 0.0, h)
    return np.stack([L, C, h], axis=-1)


def oklch_to_oklab(oklch: Oklch) -> Oklab:
    """Oklch[...,3] (hue in degrees) to Oklab[...,3]."""
    lch_f = np.asarray(oklch, dtype=np.float64)
    L = lch_f[..., 0]
    C = lch_f[..., 1]
    h = np.radians(lch_f[..., 2])
    return np.stack([L, C * np.cos(h), C * np.sin(h)], axis=-1)


# Luminance


def relative_luminance(rgb: np.ndarray) -> np.ndarray:
    """WCAG relative luminance of sRGB rows (uint8 or float 0..1)."""
    return rgb_to_linear(rgb) @ _LUMA


__all__ = [
    "rgb_to_linear",
    "linear_to_rgb",
    "rgb_to_lab",
    "lab_to_rgb",
    "rgb_to_oklab",
    "oklab_to_rgb",
    "oklab_to_oklch",
    "oklch_to_oklab",
    "relative_luminance",
]
