"""Leave-last-out offline evaluation."""

from typing import Dict, Iterable, List, Tuple

import numpy as np

from cf_lite.engine.recommender import get_recommendations_cf
from cf_lite.engine.types import ConfigLike, Interaction, InteractionLike, coerce_interactions, merge_config
from cf_lite.evaluation.metrics import hr_at_k, ndcg_at_k
from cf_lite.utils.logging import get_logger

logger = get_logger(__name__)


def leave_last_out_split(
    interactions: Iterable[InteractionLike],
    min_interactions: int = 2,
) -> Tuple[List[Interaction], Dict[str, List[str]]]:
    """Hold out each user's most recent item.

    The item of a user's latest interaction (later input position wins on
    equal timestamps) is removed from training together with every earlier
    interaction on the same item. Users with fewer than *min_interactions*
    distinct items stay entirely in the training set.

    Args:
        interactions: All interactions
        min_interactions: Minimum distinct items a user needs to be tested

    Returns:
        Tuple of (train interactions, user_id -> held-out item IDs)
    """
    records = coerce_interactions(interactions)

    latest: Dict[str, Tuple[int, int]] = {}
    items_per_user: Dict[str, set] = {}
    for position, interaction in enumerate(records):
        items_per_user.setdefault(interaction.user_id, set()).add(interaction.item_id)
        key = (interaction.timestamp, position)
        if interaction.user_id not in latest or key >= latest[interaction.user_id]:
            latest[interaction.user_id] = key

    test: Dict[str, List[str]] = {}
    for user_id, (_, position) in latest.items():
        if len(items_per_user[user_id]) >= min_interactions:
            test[user_id] = [records[position].item_id]

    held_out = {(user_id, items[0]) for user_id, items in test.items()}
    train = [
        interaction
        for interaction in records
        if (interaction.user_id, interaction.item_id) not in held_out
    ]
    return train, test


def evaluate_split(
    train: List[Interaction],
    test: Dict[str, List[str]],
    config: ConfigLike = None,
    k: int = 10,
) -> Dict[str, float]:
    """Score recommendations from *train* against held-out items.

    Users who receive no recommendations count as misses.

    Args:
        train: Training interactions
        test: user_id -> held-out item IDs
        config: Full or partial configuration
        k: Recommendation list length

    Returns:
        Dictionary with ``hr@k``, ``ndcg@k`` and the number of users
    """
    cfg = merge_config(config)

    hr_scores = []
    ndcg_scores = []
    for user_id, true_items in test.items():
        recommendations = get_recommendations_cf(user_id, train, cfg, k)
        recommended_items = [rec.item_id for rec in recommendations]
        hr_scores.append(hr_at_k(true_items, recommended_items, k))
        ndcg_scores.append(ndcg_at_k(true_items, recommended_items, k))

    results = {
        f"hr@{k}": float(np.mean(hr_scores)) if hr_scores else 0.0,
        f"ndcg@{k}": float(np.mean(ndcg_scores)) if ndcg_scores else 0.0,
        "users": len(test),
    }
    logger.info(f"Evaluated {cfg.method.value} on {len(test)} users: {results}")
    return results


def evaluate_config(
    interactions: Iterable[InteractionLike],
    config: ConfigLike = None,
    k: int = 10,
    min_interactions: int = 2,
) -> Dict[str, float]:
    """Run a leave-last-out evaluation of one configuration.

    Args:
        interactions: All interactions
        config: Full or partial configuration
        k: Recommendation list length
        min_interactions: Minimum distinct items a user needs to be tested

    Returns:
        Dictionary with ``hr@k``, ``ndcg@k`` and the number of users
    """
    train, test = leave_last_out_split(interactions, min_interactions=min_interactions)
    return evaluate_split(train, test, config, k)
