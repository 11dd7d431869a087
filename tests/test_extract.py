from __future__ import annotations

import numpy as np
import pytest

from nuri.color import Color
from nuri.colour_convert import rgb_to_lab
from nuri.extract import (
    ExtractedColor,
    chunk_rows_for,
    extract_colors,
    init_centroids,
    kmeans_lab,
    nearest_centroid_indices,
)
from nuri.image_io import load_and_prepare

RED = (200, 40, 40)
BLUE = (40, 60, 200)
NEAR_BLACK = (16, 16, 16)
NEAR_WHITE = (240, 240, 240)


def _lab_rows(counts):
    rows = []
    for rgb, n in counts:
        rows.extend([rgb] * n)
    return rgb_to_lab(np.array(rows, dtype=np.uint8))


def _close(a: Color, b, tol: int = 1) -> bool:
    return all(abs(x - y) <= tol for x, y in zip(a.rgb, b))


def test_empty_input_gives_no_colors():
    assert extract_colors(np.empty((0, 3)), 16) == []


def test_k_below_one_gives_no_colors():
    pixels = _lab_rows([(RED, 5)])
    assert extract_colors(pixels, 0) == []
    assert extract_colors(pixels, -3) == []


def test_bad_shape_is_rejected():
    with pytest.raises(ValueError):
        extract_colors(np.zeros((4, 2)), 2)


def test_four_colour_image_recovers_its_colours():
    pixels = _lab_rows(
        [(NEAR_BLACK, 40), (NEAR_WHITE, 40), (RED, 15), (BLUE, 5)]
    )
    colors = extract_colors(pixels, 4)

    assert len(colors) == 4
    weights = [ec.weight for ec in colors]
    assert weights == pytest.approx([0.40, 0.40, 0.15, 0.05])
    found = [ec.color for ec in colors]
    for rgb in (NEAR_BLACK, NEAR_WHITE, RED, BLUE):
        assert any(_close(c, rgb) for c in found), rgb
    assert _close(found[2], RED)
    assert _close(found[3], BLUE)


def test_weights_sum_to_one_and_are_sorted():
    rng = np.random.default_rng(11)
    rgb = rng.integers(0, 256, size=(500, 3), dtype=np.uint8)
    colors = extract_colors(rgb_to_lab(rgb), 8)

    assert 1 <= len(colors) <= 8
    assert sum(ec.weight for ec in colors) == pytest.approx(1.0)
    weights = [ec.weight for ec in colors]
    assert weights == sorted(weights, reverse=True)
    assert all(ec.weight > 0.0 for ec in colors)


def test_fewer_distinct_colours_than_k():
    pixels = _lab_rows([(RED, 30)])
    colors = extract_colors(pixels, 8)
    assert len(colors) == 1
    assert colors[0].weight == pytest.approx(1.0)
    assert _close(colors[0].color, RED)


def test_extraction_is_deterministic():
    rng = np.random.default_rng(5)
    pixels = rgb_to_lab(rng.integers(0, 256, size=(2000, 3), dtype=np.uint8))
    first = extract_colors(pixels, 6)
    second = extract_colors(pixels.copy(), 6)
    assert first == second


def test_two_noisy_blobs_find_their_centres():
    rng = np.random.default_rng(1)
    a = np.array([30.0, 40.0, 20.0])
    b = np.array([80.0, -20.0, -30.0])
    pixels = np.concatenate(
        [a + rng.normal(0, 1.5, size=(300, 3)), b + rng.normal(0, 1.5, size=(100, 3))]
    )
    centroids, counts = kmeans_lab(pixels, 2)
    order = np.argsort(-counts)
    assert counts[order].tolist() == [300, 100]
    assert np.allclose(centroids[order[0]], a, atol=1.0)
    assert np.allclose(centroids[order[1]], b, atol=1.0)


def test_non_finite_rows_are_ignored():
    pixels = _lab_rows([(RED, 10), (BLUE, 10)])
    pixels = np.concatenate([pixels, np.array([[np.nan, 0.0, 0.0]])])
    colors = extract_colors(pixels, 2)
    assert len(colors) == 2
    assert sum(ec.weight for ec in colors) == pytest.approx(1.0)


def test_init_centroids_stops_when_pixels_run_out():
    pixels = _lab_rows([(RED, 4), (BLUE, 4)])
    seeds = init_centroids(pixels, 5)
    assert seeds.shape == (2, 3)


def test_nearest_centroid_blocks_match_brute_force():
    rng = np.random.default_rng(2)
    pixels = rng.normal(50, 20, size=(257, 3))
    centroids = rng.normal(50, 20, size=(5, 3))
    brute = np.argmin(
        ((pixels[:, None, :] - centroids[None, :, :]) ** 2).sum(axis=2), axis=1
    )
    whole = nearest_centroid_indices(pixels, centroids)
    chunked = nearest_centroid_indices(pixels, centroids, chunk_elems=16 * 5)
    assert np.array_equal(whole, brute)
    assert np.array_equal(chunked, brute)


def test_distance_blocks_shrink_as_k_grows():
    budget = 1_000_000
    rows = [chunk_rows_for(k, budget) for k in (1, 16, 256, 4096)]
    assert rows == sorted(rows, reverse=True)
    assert rows[0] == budget
    for k, r in zip((1, 16, 256, 4096), rows):
        assert r * k <= budget
    assert chunk_rows_for(10 * budget, budget) == 1
    assert chunk_rows_for(0, budget) == budget


def test_many_clusters_on_a_full_size_image():
    rng = np.random.default_rng(9)
    pixels = rgb_to_lab(rng.integers(0, 256, size=(65_536, 3), dtype=np.uint8))
    colors = extract_colors(pixels, 512, max_iter=2)
    assert 1 <= len(colors) <= 512
    assert sum(ec.weight for ec in colors) == pytest.approx(1.0)


def test_extract_from_image_file(striped_image):
    path = striped_image([(NEAR_BLACK, 8), (RED, 2)])
    colors = extract_colors(load_and_prepare(path), 4)
    assert len(colors) == 2
    assert isinstance(colors[0], ExtractedColor)
    assert colors[0].weight == pytest.approx(0.8)
    assert _close(colors[0].color, NEAR_BLACK)
    assert _close(colors[1].color, RED)
