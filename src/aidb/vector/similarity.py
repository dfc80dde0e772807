"""Cosine similarity for embedding vectors."""

import math

import numpy as np


def vector_norm(vector: np.ndarray) -> float:
    return float(np.linalg.norm(vector))


def cosine_similarity(
    vector_a: np.ndarray,
    vector_b: np.ndarray,
    norm_a: float | None = None,
    norm_b: float | None = None,
) -> float:
    """Compute dot(a, b) / (|a| * |b|).

    Precomputed norms may be passed to skip recomputing them. A zero-magnitude
    vector, or any result that isn't finite, scores 0.0.
    """
    norm_a = vector_norm(vector_a) if norm_a is None else norm_a
    norm_b = vector_norm(vector_b) if norm_b is None else norm_b

    if norm_a == 0 or norm_b == 0:
        return 0.0

    similarity = float(np.dot(vector_a, vector_b) / (norm_a * norm_b))
    if not math.isfinite(similarity):
        return 0.0
    return similarity
