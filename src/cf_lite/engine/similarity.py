"""Similarity metrics over sparse score vectors.

Both metrics take plain ``{dimension: score}`` mappings. A missing key means
"no interaction", which is not the same as a zero score: cosine treats it as
zero in the dot product, Pearson ignores it entirely.
"""

import math
from typing import Mapping


def cosine_similarity(a: Mapping[str, float], b: Mapping[str, float]) -> float:
    """Compute cosine similarity between two sparse vectors.

    The dot product only sees dimensions populated in both vectors, while
    each norm is taken over its full vector.

    Args:
        a: Sparse vector
        b: Sparse vector

    Returns:
        Similarity in [-1, 1], or 0.0 if either vector has zero magnitude
    """
    smaller, larger = (a, b) if len(a) <= len(b) else (b, a)

    dot_product = 0.0
    for key, value in smaller.items():
        other = larger.get(key)
        if other is not None:
            dot_product += value * other

    norm_a = math.sqrt(sum(value * value for value in a.values()))
    norm_b = math.sqrt(sum(value * value for value in b.values()))

    denominator = norm_a * norm_b
    if denominator == 0:
        return 0.0

    # Rounding can push identical vectors a hair past 1
    return max(-1.0, min(1.0, dot_product / denominator))


def pearson_correlation(a: Mapping[str, float], b: Mapping[str, float]) -> float:
    """Compute the Pearson correlation over co-populated dimensions.

    Means and residuals are computed on the intersection only.

    Args:
        a: Sparse vector
        b: Sparse vector

    Returns:
        Correlation in [-1, 1], or 0.0 with fewer than two shared dimensions
        or zero variance on either side
    """
    pairs = [(value, b[key]) for key, value in a.items() if key in b]
    if len(pairs) < 2:
        return 0.0

    mean_a = sum(va for va, _ in pairs) / len(pairs)
    mean_b = sum(vb for _, vb in pairs) / len(pairs)

    numerator = 0.0
    variance_a = 0.0
    variance_b = 0.0
    for va, vb in pairs:
        diff_a = va - mean_a
        diff_b = vb - mean_b
        numerator += diff_a * diff_b
        variance_a += diff_a * diff_a
        variance_b += diff_b * diff_b

    denominator = math.sqrt(variance_a) * math.sqrt(variance_b)
    if denominator == 0:
        return 0.0

    return max(-1.0, min(1.0, numerator / denominator))
