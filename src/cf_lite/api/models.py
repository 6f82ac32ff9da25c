"""Pydantic models for the CF-Lite API."""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from cf_lite.engine.types import Interaction, Recommendation


class RecommendRequest(BaseModel):
    """Request body carrying the interactions to recommend from."""

    user_id: str = Field(..., min_length=1, description="User to recommend for")
    interactions: List[Interaction] = Field(default_factory=list, description="All interactions in the domain")
    config: Optional[Dict[str, Any]] = Field(None, description="Partial CFConfig merged over defaults")
    max_results: int = Field(10, ge=0, le=1000, description="Maximum number of recommendations")


class RecommendationResponse(BaseModel):
    """API response for recommendations."""

    user_id: str
    method: str
    recommendations: List[Recommendation]


class MetricsResponse(BaseModel):
    """API response for metrics endpoint."""

    uptime_seconds: float
    request_count: int
    recommendation_count: int
    error_count: int
    recommendations_per_second: float
    interactions_loaded: int
    users: int
    items: int
