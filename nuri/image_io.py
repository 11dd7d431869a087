# nuri/image_io.py
from __future__ import annotations

import io
from pathlib import Path
from typing import Tuple, Union

import numpy as np
from PIL import Image, ImageCms, ImageOps, UnidentifiedImageError

from .colour_convert import rgb_to_lab
from .constants import MAX_DIM
from .core_types import Lab, U8Image, assert_u8_image_rgb

"""
Image loading (sRGB), downsampling, and the load-time error taxonomy.
"""

PathLike = Union[str, Path]


class ImageLoadError(Exception):
    """Base class for failures at the image loading boundary."""

    def __init__(self, path: PathLike, message: str) -> None:
        super().__init__(message)
        self.path = Path(path)


class ImageNotFound(ImageLoadError):
    """The path does not resolve to a file."""

    def __init__(self, path: PathLike) -> None:
        super().__init__(path, f"file not found: {path}")


class UnsupportedOrCorruptFormat(ImageLoadError):
    """The file exists but cannot be decoded as an image."""

    def __init__(self, path: PathLike, reason: str = "") -> None:
        message = (
            f"unsupported or corrupt image: {path}. "
            "Supported formats: PNG, JPEG, WebP, BMP, TIFF, GIF"
        )
        if reason:
            message = f"{message} ({reason})"
        super().__init__(path, message)
        self.reason = reason


# modes LittleCMS cannot take directly -> the mode they are widened to first
_CMS_INPUT_MODES = {"P": "RGB", "PA": "RGB", "1": "L", "LA": "L"}


def _to_srgb(im: Image.Image) -> Image.Image:
    """
    Upright RGB image. An embedded ICC profile is applied to the image in its
    own mode (CMYK, L, LAB, RGB, ...) and mapped to sRGB; an unusable profile
    falls back to a plain mode conversion.
    """
    upright = ImageOps.exif_transpose(im)
    profile = im.info.get("icc_profile")
    if not profile:
        return upright.convert("RGB")

    source = upright
    if source.mode in _CMS_INPUT_MODES:
        source = source.convert(_CMS_INPUT_MODES[source.mode])
    try:
        converted = ImageCms.profileToProfile(
            source,
            ImageCms.ImageCmsProfile(io.BytesIO(profile)),
            ImageCms.createProfile("sRGB"),
            renderingIntent=ImageCms.Intent.PERCEPTUAL,
            outputMode="RGB",
        )
    except (ImageCms.PyCMSError, OSError, ValueError):
        return upright.convert("RGB")
    if converted is None:
        return upright.convert("RGB")
    return converted


def fit_within(width: int, height: int, max_dim: int = MAX_DIM) -> Tuple[int, int]:
    """
    Target size so that neither side exceeds max_dim, aspect ratio preserved.
    Sizes already within bounds are returned unchanged.
    """
    if width <= max_dim and height <= max_dim:
        return width, height
    scale = max_dim / float(max(width, height))
    return max(1, int(round(width * scale))), max(1, int(round(height * scale)))


def load_image_rgb(path: PathLike, max_dim: int = MAX_DIM) -> U8Image:
    """
    Decode an image into a uint8 (H,W,3) sRGB array, downsampled with Lanczos
    when either side exceeds max_dim. Alpha is discarded.

    Raises:
      ImageNotFound: path is not an existing file
      UnsupportedOrCorruptFormat: any decode failure
    """
    src = Path(path)
    if not src.is_file():
        raise ImageNotFound(src)

    try:
        with Image.open(src) as im0:
            im0.load()
            im = _to_srgb(im0)
    except (
        Image.DecompressionBombError,
        UnidentifiedImageError,
        OSError,
        ValueError,
        SyntaxError,
    ) as exc:
        raise UnsupportedOrCorruptFormat(src, str(exc)) from exc

    dst_w, dst_h = fit_within(im.width, im.height, max_dim)
    if (dst_w, dst_h) != (im.width, im.height):
        im = im.resize((dst_w, dst_h), resample=Image.Resampling.LANCZOS)

    return np.array(im, dtype=np.uint8)


def image_to_lab_pixels(rgb: U8Image) -> Lab:
    """Flatten a uint8 (H,W,3) image into (N,3) Lab rows."""
    return rgb_to_lab(assert_u8_image_rgb(rgb).reshape(-1, 3))


def load_and_prepare(path: PathLike, max_dim: int = MAX_DIM) -> Lab:
    """Load an image and return every (possibly downsampled) pixel in Lab."""
    return image_to_lab_pixels(load_image_rgb(path, max_dim))


__all__ = [
    "ImageLoadError",
    "ImageNotFound",
    "UnsupportedOrCorruptFormat",
    "fit_within",
    "load_image_rgb",
    "image_to_lab_pixels",
    "load_and_prepare",
]
