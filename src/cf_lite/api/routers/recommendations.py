"""Router for recommendation endpoints."""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from cf_lite.api.dependencies import get_api_state, get_loaded_interactions
from cf_lite.api.models import RecommendationResponse, RecommendRequest
from cf_lite.api.state import APIState
from cf_lite.engine import CFMethod, Interaction, get_recommendations_cf, merge_config
from cf_lite.utils.logging import get_logger

logger = get_logger("api.routers.recommendations")

router = APIRouter()


def _recommend(
    state: APIState,
    user_id: str,
    interactions: List[Interaction],
    overrides: Optional[dict],
    max_results: int,
) -> RecommendationResponse:
    config = merge_config(overrides)

    logger.debug(
        f"Generating recommendations for user {user_id}",
        extra={"user_id": user_id, "method": config.method.value, "max_results": max_results},
    )
    recommendations = get_recommendations_cf(user_id, interactions, config, max_results)
    state.increase_recommendation_count(len(recommendations))

    return RecommendationResponse(
        user_id=user_id,
        method=config.method.value,
        recommendations=recommendations,
    )


@router.post("/recommend", response_model=RecommendationResponse)
def recommend_from_body(
    body: RecommendRequest,
    state: APIState = Depends(get_api_state),
) -> RecommendationResponse:
    """Recommend from interactions supplied in the request body.

    Args:
        body: User, interactions, optional partial config and result size
        state: API state for metrics

    Returns:
        Ranked recommendations; empty when the user has no usable signal

    Raises:
        InvalidConfigError: If the config overrides are invalid
    """
    return _recommend(state, body.user_id, body.interactions, body.config, body.max_results)


@router.get("/recommend", response_model=RecommendationResponse)
def recommend(
    user_id: str = Query(..., min_length=1, description="User ID to get recommendations for"),
    method: Optional[CFMethod] = Query(None, description="Neighborhood strategy"),
    k: Optional[int] = Query(None, description="Number of nearest neighbors"),
    min_overlap: Optional[int] = Query(None, description="Minimum co-rated dimensions"),
    decay_factor: Optional[float] = Query(None, description="Daily decay rate (1 disables decay)"),
    max_results: int = Query(10, ge=0, le=1000, description="Number of recommendations to return"),
    interactions: List[Interaction] = Depends(get_loaded_interactions),
    state: APIState = Depends(get_api_state),
) -> RecommendationResponse:
    """Recommend from the interactions loaded at startup.

    Raises:
        InteractionsNotLoadedError: If the server was started without interactions
        InvalidConfigError: If a config parameter is invalid
    """
    overrides = {"method": method, "k": k, "min_overlap": min_overlap, "decay_factor": decay_factor}
    return _recommend(state, user_id, interactions, overrides, max_results)
