"""CF-Lite: memory-based collaborative filtering recommendations."""

from cf_lite.engine import (
    CFConfig,
    CFMethod,
    CFRecommender,
    Interaction,
    Neighbor,
    Recommendation,
    apply_time_decay,
    build_item_user_matrix,
    build_user_item_matrix,
    cosine_similarity,
    find_nearest_neighbors,
    get_recommendations_cf,
    pearson_correlation,
    predict_item_based,
    predict_user_based,
)
from cf_lite.exceptions import CFError, InvalidConfigError, InvalidInteractionError, UnknownStrategyError

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "CFConfig",
    "CFMethod",
    "CFRecommender",
    "Interaction",
    "Neighbor",
    "Recommendation",
    "apply_time_decay",
    "build_item_user_matrix",
    "build_user_item_matrix",
    "cosine_similarity",
    "find_nearest_neighbors",
    "get_recommendations_cf",
    "pearson_correlation",
    "predict_item_based",
    "predict_user_based",
    "CFError",
    "InvalidConfigError",
    "InvalidInteractionError",
    "UnknownStrategyError",
]
