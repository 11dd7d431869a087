# nuri/extract.py
from __future__ import annotations

"""
Dominant-colour extraction by k-means in CIE Lab.

Exports:
  ExtractedColor
  chunk_rows_for(n_centroids, budget)
  nearest_centroid_indices(pixels_lab, centroids_lab, chunk_elems)
  init_centroids(pixels_lab, k)
  extract_colors(pixels_lab, k, *, max_iter, tol) -> list[ExtractedColor]

Notes:
  Fully deterministic: centroids are seeded from the data (pixel nearest the
  mean, then maximin), never from a random generator.
"""

from dataclasses import dataclass
from typing import List, Tuple

import numpy as np

from .color import Color
from .constants import KMEANS_CHUNK_ELEMS, KMEANS_MAX_ITER, KMEANS_TOL
from .core_types import Lab, assert_lab_rows


@dataclass(frozen=True)
class ExtractedColor:
    """Cluster representative with its share of the sampled pixels (0..1)."""

    color: Color
    weight: float


def chunk_rows_for(n_centroids: int, budget: int = KMEANS_CHUNK_ELEMS) -> int:
    """Rows per distance block so that rows * n_centroids stays within budget."""
    return max(1, int(budget) // max(1, int(n_centroids)))


def nearest_centroid_indices(
    pixels_lab: Lab, centroids_lab: Lab, chunk_elems: int = KMEANS_CHUNK_ELEMS
) -> np.ndarray:
    """
    For each Lab row, index of the nearest centroid by Euclidean distance.

    Uses |c|^2 - 2 x.c (the |x|^2 term is constant per row) so each block
    only holds a (rows, k) buffer.
    """
    n = pixels_lab.shape[0]
    out = np.empty(n, dtype=np.int64)
    c_sq = np.einsum("ij,ij->i", centroids_lab, centroids_lab)
    step = chunk_rows_for(centroids_lab.shape[0], chunk_elems)
    for start in range(0, n, step):
        block = pixels_lab[start : start + step]
        scores = block @ centroids_lab.T
        scores *= -2.0
        scores += c_sq
        out[start : start + step] = np.argmin(scores, axis=1)
    return out


def init_centroids(pixels_lab: Lab, k: int) -> Lab:
    """
    Deterministic seeding: the pixel nearest the mean, then repeatedly the
    pixel farthest from every chosen centroid. Stops early once all pixels
    coincide with a chosen centroid, so the result may hold fewer than k rows.
    """
    mean = pixels_lab.mean(axis=0)
    d2_mean = np.sum((pixels_lab - mean) ** 2, axis=1)
    chosen = [int(np.argmin(d2_mean))]
    min_d2 = np.sum((pixels_lab - pixels_lab[chosen[0]]) ** 2, axis=1)

    while len(chosen) < k:
        idx = int(np.argmax(min_d2))
        if min_d2[idx] <= 0.0:
            break
        chosen.append(idx)
        d2 = np.sum((pixels_lab - pixels_lab[idx]) ** 2, axis=1)
        min_d2 = np.minimum(min_d2, d2)

    return pixels_lab[chosen].copy()


def _centroid_means(
    pixels_lab: Lab, labels: np.ndarray, centroids_lab: Lab
) -> Tuple[Lab, np.ndarray]:
    """Mean of each cluster; empty clusters keep their previous position."""
    n_clusters = centroids_lab.shape[0]
    counts = np.bincount(labels, minlength=n_clusters)
    sums = np.stack(
        [
            np.bincount(labels, weights=pixels_lab[:, d], minlength=n_clusters)
            for d in range(3)
        ],
        axis=1,
    )
    updated = centroids_lab.copy()
    filled = counts > 0
    updated[filled] = sums[filled] / counts[filled, None]
    return updated, counts


def kmeans_lab(
    pixels_lab: Lab,
    k: int,
    max_iter: int = KMEANS_MAX_ITER,
    tol: float = KMEANS_TOL,
) -> Tuple[Lab, np.ndarray]:
    """
    Lloyd iterations from deterministic seeds.

    Returns:
      centroids: float64 [C,3], C <= k
      counts:    int64 [C] pixels assigned to each centroid (may contain 0)
    """
    centroids = init_centroids(pixels_lab, k)
    for _ in range(max(1, int(max_iter))):
        labels = nearest_centroid_indices(pixels_lab, centroids)
        updated, _counts = _centroid_means(pixels_lab, labels, centroids)
        shift = float(np.max(np.linalg.norm(updated - centroids, axis=1)))
        centroids = updated
        if shift < tol:
            break

    labels = nearest_centroid_indices(pixels_lab, centroids)
    counts = np.bincount(labels, minlength=centroids.shape[0])
    return centroids, counts


def extract_colors(
    pixels_lab: Lab,
    k: int,
    *,
    max_iter: int = KMEANS_MAX_ITER,
    tol: float = KMEANS_TOL,
) -> List[ExtractedColor]:
    """
    Cluster Lab pixels into at most k weighted representative colours.

    Empty clusters are dropped. Weights are pixel shares and sum to 1.
    An empty pixel set, or k < 1, yields an empty list.
    Results are ordered by weight, heaviest first.
    """
    pixels = assert_lab_rows(pixels_lab)
    pixels = pixels[np.all(np.isfinite(pixels), axis=1)]
    if pixels.shape[0] == 0 or k < 1:
        return []

    centroids, counts = kmeans_lab(pixels, int(k), max_iter=max_iter, tol=tol)
    total = float(counts.sum())

    order = np.argsort(-counts, kind="stable")
    out: List[ExtractedColor] = []
    for i in order.tolist():
        if counts[i] == 0:
            continue
        L, a, b = centroids[i]
        out.append(
            ExtractedColor(
                color=Color.from_lab(float(L), float(a), float(b)),
                weight=float(counts[i]) / total,
            )
        )
    return out


__all__ = [
    "ExtractedColor",
    "chunk_rows_for",
    "nearest_centroid_indices",
    "init_centroids",
    "kmeans_lab",
    "extract_colors",
]
