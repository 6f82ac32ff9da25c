"""Memory-based collaborative filtering engine."""

from cf_lite.engine.decay import MS_PER_DAY, apply_time_decay
from cf_lite.engine.matrix import build_item_user_matrix, build_user_item_matrix
from cf_lite.engine.neighbors import count_overlap, find_nearest_neighbors
from cf_lite.engine.prediction import mean_score, predict_item_based, predict_user_based
from cf_lite.engine.recommender import (
    BaseCFStrategy,
    CFRecommender,
    ItemBasedCF,
    StrategyRegistry,
    UserBasedCF,
    get_recommendations_cf,
)
from cf_lite.engine.similarity import cosine_similarity, pearson_correlation
from cf_lite.engine.types import (
    CFConfig,
    CFMethod,
    Interaction,
    Neighbor,
    Recommendation,
    SparseMatrix,
    SparseVector,
    coerce_interactions,
    merge_config,
)

__all__ = [
    "MS_PER_DAY",
    "apply_time_decay",
    "build_item_user_matrix",
    "build_user_item_matrix",
    "count_overlap",
    "find_nearest_neighbors",
    "mean_score",
    "predict_item_based",
    "predict_user_based",
    "BaseCFStrategy",
    "CFRecommender",
    "ItemBasedCF",
    "StrategyRegistry",
    "UserBasedCF",
    "get_recommendations_cf",
    "cosine_similarity",
    "pearson_correlation",
    "CFConfig",
    "CFMethod",
    "Interaction",
    "Neighbor",
    "Recommendation",
    "SparseMatrix",
    "SparseVector",
    "coerce_interactions",
    "merge_config",
]
