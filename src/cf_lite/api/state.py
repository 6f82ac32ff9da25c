"""State management for CF-Lite API."""

import time
from typing import Any, Dict, List, Optional

from cf_lite.engine.types import Interaction


class APIState:
    """Container for API shared state."""

    def __init__(self) -> None:
        """Initialize API state."""
        # Interactions loaded at startup for GET /recommend
        self.interactions: Optional[List[Interaction]] = None
        self.user_count: int = 0
        self.item_count: int = 0

        # Performance metrics
        self.request_count: int = 0
        self.recommendation_count: int = 0
        self.error_count: int = 0
        self.start_time: float = time.time()

    def set_interactions(self, interactions: List[Interaction]) -> None:
        """Store the interactions served by GET /recommend.

        Args:
            interactions: Validated interactions
        """
        self.interactions = interactions
        self.user_count = len({interaction.user_id for interaction in interactions})
        self.item_count = len({interaction.item_id for interaction in interactions})

    def increase_request_count(self) -> None:
        """Increment request counter."""
        self.request_count += 1

    def increase_recommendation_count(self, count: int = 1) -> None:
        """Increment recommendation counter.

        Args:
            count: Number of recommendations to add
        """
        self.recommendation_count += count

    def increase_error_count(self) -> None:
        """Increment error counter."""
        self.error_count += 1

    def get_metrics(self) -> Dict[str, Any]:
        """Get current metrics.

        Returns:
            Dictionary of metrics
        """
        uptime = time.time() - self.start_time

        return {
            "uptime_seconds": round(uptime, 2),
            "request_count": self.request_count,
            "recommendation_count": self.recommendation_count,
            "error_count": self.error_count,
            "recommendations_per_second": round(self.recommendation_count / max(uptime, 1), 2),
            "interactions_loaded": len(self.interactions) if self.interactions else 0,
            "users": self.user_count,
            "items": self.item_count,
        }
