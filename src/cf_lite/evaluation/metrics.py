"""Ranking metrics for recommendation lists."""

from typing import Sequence

import numpy as np


def hr_at_k(true_items: Sequence[str], recommended_items: Sequence[str], k: int = 10) -> float:
    """Calculate Hit Rate at K.

    Args:
        true_items: Held-out item IDs
        recommended_items: Ranked recommended item IDs
        k: Number of recommendations to consider

    Returns:
        1.0 if any held-out item appears in the top k, 0.0 otherwise
    """
    hits = set(true_items) & set(recommended_items[:k])
    return 1.0 if hits else 0.0


def ndcg_at_k(true_items: Sequence[str], recommended_items: Sequence[str], k: int = 10) -> float:
    """Calculate Normalized Discounted Cumulative Gain at K.

    Args:
        true_items: Held-out item IDs
        recommended_items: Ranked recommended item IDs
        k: Number of recommendations to consider

    Returns:
        NDCG at K with binary relevance
    """
    recommended_items = recommended_items[:k]
    relevant = set(true_items)

    relevance = np.array([1.0 if item in relevant else 0.0 for item in recommended_items])
    if relevance.sum() == 0:
        return 0.0

    # [log2(2), log2(3), ..., log2(k+1)]
    discounts = np.log2(np.arange(2, len(relevance) + 2))
    dcg = np.sum(relevance / discounts)

    n_ideal = min(len(relevant), k)
    ideal_discounts = np.log2(np.arange(2, n_ideal + 2))
    idcg = np.sum(1.0 / ideal_discounts)

    return float(dcg / idcg)
