"""Shared pytest fixtures."""

from __future__ import annotations

from pathlib import Path
from typing import Callable, List, Sequence, Tuple

import numpy as np
import pytest
from PIL import Image

from nuri.extract import ExtractedColor

from helpers import NEAR_BLACK, NEAR_WHITE, oklch_candidate


@pytest.fixture
def write_image(tmp_path: Path) -> Callable[..., Path]:
    """Write a uint8 (H,W,3) or (H,W,4) array to tmp_path and return its path."""

    def _write(array: np.ndarray, name: str = "wallpaper.png") -> Path:
        path = tmp_path / name
        Image.fromarray(np.asarray(array, dtype=np.uint8)).save(path)
        return path

    return _write


@pytest.fixture
def solid_image(write_image) -> Callable[..., Path]:
    def _solid(
        rgb: Tuple[int, int, int], size: Tuple[int, int] = (4, 4), name: str = "solid.png"
    ) -> Path:
        w, h = size
        arr = np.empty((h, w, 3), dtype=np.uint8)
        arr[:, :] = rgb
        return write_image(arr, name)

    return _solid


@pytest.fixture
def striped_image(write_image) -> Callable[..., Path]:
    """Horizontal bands of colour, band height proportional to its count."""

    def _striped(
        bands: Sequence[Tuple[Tuple[int, int, int], int]],
        width: int = 10,
        name: str = "bands.png",
    ) -> Path:
        rows: List[np.ndarray] = []
        for rgb, height in bands:
            band = np.empty((height, width, 3), dtype=np.uint8)
            band[:, :] = rgb
            rows.append(band)
        return write_image(np.concatenate(rows, axis=0), name)

    return _striped


@pytest.fixture
def six_hue_candidates() -> List[ExtractedColor]:
    """One candidate near each accent target hue plus neutral extremes."""
    return [
        ExtractedColor(NEAR_BLACK, 0.30),
        ExtractedColor(NEAR_WHITE, 0.10),
        oklch_candidate(0.60, 0.20, 25.0, 0.10),
        oklch_candidate(0.60, 0.20, 145.0, 0.10),
        oklch_candidate(0.70, 0.20, 90.0, 0.10),
        oklch_candidate(0.55, 0.20, 260.0, 0.10),
        oklch_candidate(0.60, 0.20, 325.0, 0.10),
        oklch_candidate(0.65, 0.20, 195.0, 0.10),
    ]


@pytest.fixture(autouse=True)
def isolated_config_home(tmp_path: Path, monkeypatch) -> Path:
    """Keep every install under tmp_path."""
    config = tmp_path / "config"
    monkeypatch.setenv("XDG_CONFIG_HOME", str(config))
    return config
