"""Collaborative filtering entry point and strategy pipelines."""

from abc import ABC, abstractmethod
from typing import Dict, Iterable, List, Optional, Type

from cf_lite.engine.decay import apply_time_decay
from cf_lite.engine.matrix import build_item_user_matrix, build_user_item_matrix
from cf_lite.engine.neighbors import find_nearest_neighbors
from cf_lite.engine.prediction import predict_item_based, predict_user_based
from cf_lite.engine.types import (
    CFConfig,
    CFMethod,
    ConfigLike,
    Interaction,
    InteractionLike,
    Recommendation,
    coerce_interactions,
    merge_config,
)
from cf_lite.exceptions import InvalidConfigError, UnknownStrategyError
from cf_lite.utils.logging import get_logger

logger = get_logger(__name__)


def _rank(predictions: List[Recommendation], max_results: int) -> List[Recommendation]:
    # Stable sort: equal scores keep candidate order
    ranked = sorted(predictions, key=lambda rec: rec.predicted_score, reverse=True)
    return ranked[:max_results]


class BaseCFStrategy(ABC):
    """Abstract base class for neighborhood recommendation strategies."""

    method: CFMethod

    @abstractmethod
    def recommend(
        self,
        user_id: str,
        interactions: List[Interaction],
        config: CFConfig,
        max_results: int = 10,
    ) -> List[Recommendation]:
        """Generate recommendations for a user.

        Args:
            user_id: User to recommend for
            interactions: Already decayed interactions
            config: Validated configuration
            max_results: Maximum number of recommendations

        Returns:
            Recommendations sorted by predicted score descending
        """


class UserBasedCF(BaseCFStrategy):
    """Recommends what similar users liked."""

    method = CFMethod.USER_BASED

    def recommend(
        self,
        user_id: str,
        interactions: List[Interaction],
        config: CFConfig,
        max_results: int = 10,
    ) -> List[Recommendation]:
        user_item_matrix = build_user_item_matrix(interactions)

        user_vector = user_item_matrix.get(user_id)
        if not user_vector:
            logger.debug(f"User {user_id} has no interactions")
            return []

        neighbors = find_nearest_neighbors(user_id, user_item_matrix, config.k, config.min_overlap)
        if not neighbors:
            logger.debug(f"No neighbors for user {user_id}")
            return []

        # dict keeps first-seen order, which fixes the order of equal scores
        candidates: Dict[str, None] = {}
        for neighbor in neighbors:
            for item_id in user_item_matrix.get(neighbor.id, {}):
                if item_id not in user_vector:
                    candidates[item_id] = None

        logger.debug(f"Scoring {len(candidates)} candidates from {len(neighbors)} neighbors for user {user_id}")

        predictions = []
        for item_id in candidates:
            score = predict_user_based(user_id, item_id, user_item_matrix, neighbors)
            if score > 0:
                predictions.append(Recommendation(item_id=item_id, predicted_score=score))

        return _rank(predictions, max_results)


class ItemBasedCF(BaseCFStrategy):
    """Recommends items similar to what the user liked."""

    method = CFMethod.ITEM_BASED

    def recommend(
        self,
        user_id: str,
        interactions: List[Interaction],
        config: CFConfig,
        max_results: int = 10,
    ) -> List[Recommendation]:
        user_item_matrix = build_user_item_matrix(interactions)
        item_user_matrix = build_item_user_matrix(interactions)

        user_vector = user_item_matrix.get(user_id)
        if not user_vector:
            logger.debug(f"User {user_id} has no interactions")
            return []

        candidates = [item_id for item_id in item_user_matrix if item_id not in user_vector]
        logger.debug(f"Scoring {len(candidates)} candidate items for user {user_id}")

        predictions = []
        for item_id in candidates:
            neighbors = find_nearest_neighbors(item_id, item_user_matrix, config.k, config.min_overlap)
            if not neighbors:
                continue

            score = predict_item_based(user_id, item_id, item_user_matrix, neighbors)
            if score > 0:
                predictions.append(Recommendation(item_id=item_id, predicted_score=score))

        return _rank(predictions, max_results)


class StrategyRegistry:
    """Registry of recommendation strategies keyed by method name."""

    _registry: Dict[str, Type[BaseCFStrategy]] = {}

    @classmethod
    def register(cls, method: str, strategy_class: Type[BaseCFStrategy]) -> None:
        """Register a strategy class.

        Args:
            method: Method name
            strategy_class: Strategy class
        """
        cls._registry[method.lower()] = strategy_class

    @classmethod
    def get_strategy_class(cls, method: str) -> Type[BaseCFStrategy]:
        """Get strategy class by method name.

        Raises:
            UnknownStrategyError: If the method is not registered
        """
        strategy_class = cls._registry.get(method.lower())
        if not strategy_class:
            raise UnknownStrategyError(method)
        return strategy_class

    @classmethod
    def create_strategy(cls, method: str) -> BaseCFStrategy:
        """Create strategy instance by method name."""
        return cls.get_strategy_class(method)()

    @classmethod
    def methods(cls) -> List[str]:
        """List registered method names."""
        return sorted(cls._registry)


StrategyRegistry.register(UserBasedCF.method.value, UserBasedCF)
StrategyRegistry.register(ItemBasedCF.method.value, ItemBasedCF)


def get_recommendations_cf(
    user_id: str,
    interactions: Iterable[InteractionLike],
    config: ConfigLike = None,
    max_results: int = 10,
) -> List[Recommendation]:
    """Generate top-N recommendations for a user with collaborative filtering.

    1. Merge *config* over the defaults
    2. Apply time decay to every interaction
    3. Run the user-based or item-based pipeline
    4. Return the best unseen items

    An unknown user, a user without neighbors or an empty interaction list
    all yield an empty list; callers pick their own fallback ranking.

    Args:
        user_id: User to generate recommendations for
        interactions: All interactions in the system (objects or mappings)
        config: Full or partial configuration, merged with defaults
        max_results: Maximum number of recommendations to return

    Returns:
        Recommendations sorted by predicted score descending

    Raises:
        InvalidConfigError: If the configuration or max_results is invalid
        InvalidInteractionError: If an interaction record is malformed
    """
    cfg = merge_config(config)
    if isinstance(max_results, bool) or not isinstance(max_results, int) or max_results < 0:
        raise InvalidConfigError(f"max_results must be a non-negative integer, got {max_results!r}")

    records = coerce_interactions(interactions)
    decayed = apply_time_decay(records, cfg.decay_factor)

    strategy = StrategyRegistry.create_strategy(cfg.method.value)
    recommendations = strategy.recommend(user_id, decayed, cfg, max_results)

    logger.debug(
        f"Generated {len(recommendations)} {cfg.method.value} recommendations for user {user_id}",
        extra={"user_id": user_id, "method": cfg.method.value, "k": cfg.k},
    )
    return recommendations


class CFRecommender:
    """Collaborative filtering recommender bound to a configuration."""

    def __init__(self, config: ConfigLike = None, max_results: int = 10) -> None:
        """Initialize recommender.

        Args:
            config: Full or partial configuration, merged with defaults
            max_results: Default number of recommendations per call
        """
        self.config = merge_config(config)
        self.max_results = max_results

    def recommend(
        self,
        user_id: str,
        interactions: Iterable[InteractionLike],
        max_results: Optional[int] = None,
    ) -> List[Recommendation]:
        """Recommend items for a user with the bound configuration."""
        n = self.max_results if max_results is None else max_results
        return get_recommendations_cf(user_id, interactions, self.config, n)
