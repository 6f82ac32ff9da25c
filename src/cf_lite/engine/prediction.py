"""Score prediction from precomputed neighbors.

User-based (mean-centered weighted average)::

    pred(u, i) = mean(u) + sum(sim(u, v) * (r(v, i) - mean(v))) / sum(|sim(u, v)|)

Item-based (weighted average over similar items)::

    pred(u, i) = sum(sim(i, j) * r(u, j)) / sum(|sim(i, j)|)

Only neighbors that carry a rating for the pair contribute. Predictions are
clamped to [0, 1].
"""

from typing import Mapping, Sequence

from cf_lite.engine.types import Neighbor


def mean_score(vector: Mapping[str, float]) -> float:
    """Mean over populated dimensions, 0.0 for an empty vector."""
    if not vector:
        return 0.0
    return sum(vector.values()) / len(vector)


def _clamp(value: float) -> float:
    return max(0.0, min(1.0, value))


def predict_user_based(
    user_id: str,
    item_id: str,
    matrix: Mapping[str, Mapping[str, float]],
    neighbors: Sequence[Neighbor],
) -> float:
    """Predict a user's score for an item from similar users.

    Args:
        user_id: User to predict for
        item_id: Item to predict
        matrix: User-item matrix
        neighbors: Nearest neighbors of the user

    Returns:
        Predicted score in [0, 1]; the user's own mean when no neighbor rated
        the item, 0.0 when the user is unknown
    """
    user_vector = matrix.get(user_id)
    if user_vector is None:
        return 0.0

    user_mean = mean_score(user_vector)

    weighted_sum = 0.0
    total_weight = 0.0
    for neighbor in neighbors:
        neighbor_vector = matrix.get(neighbor.id)
        if neighbor_vector is None:
            continue

        neighbor_rating = neighbor_vector.get(item_id)
        if neighbor_rating is None:
            continue

        weighted_sum += neighbor.similarity * (neighbor_rating - mean_score(neighbor_vector))
        total_weight += abs(neighbor.similarity)

    if total_weight == 0:
        return _clamp(user_mean)

    return _clamp(user_mean + weighted_sum / total_weight)


def predict_item_based(
    user_id: str,
    item_id: str,
    matrix: Mapping[str, Mapping[str, float]],
    neighbors: Sequence[Neighbor],
) -> float:
    """Predict a user's score for an item from similar items.

    Args:
        user_id: User to predict for
        item_id: Item to predict (the row the neighbors were found for)
        matrix: Item-user matrix
        neighbors: Nearest neighbors of the item

    Returns:
        Predicted score in [0, 1]; 0.0 when the user rated none of the
        neighbor items
    """
    weighted_sum = 0.0
    total_weight = 0.0
    for neighbor in neighbors:
        neighbor_vector = matrix.get(neighbor.id)
        if neighbor_vector is None:
            continue

        user_rating = neighbor_vector.get(user_id)
        if user_rating is None:
            continue

        weighted_sum += neighbor.similarity * user_rating
        total_weight += abs(neighbor.similarity)

    if total_weight == 0:
        return 0.0

    return _clamp(weighted_sum / total_weight)
