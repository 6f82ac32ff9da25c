"""Dependencies for FastAPI application."""

from typing import Any, Dict, List, cast

from fastapi import Depends, Request

from cf_lite.api.errors import InteractionsNotLoadedError
from cf_lite.api.state import APIState
from cf_lite.engine.types import Interaction


def get_api_state(request: Request) -> APIState:
    """Get the state of the application serving *request*.

    Args:
        request: FastAPI request

    Returns:
        API state
    """
    return cast(APIState, request.app.state.api)


def get_loaded_interactions(state: APIState = Depends(get_api_state)) -> List[Interaction]:
    """Get the interactions loaded at startup.

    Args:
        state: API state

    Returns:
        Loaded interactions

    Raises:
        InteractionsNotLoadedError: If the app was started without interactions
    """
    if state.interactions is None:
        raise InteractionsNotLoadedError()
    return state.interactions


def get_stats(state: APIState = Depends(get_api_state)) -> Dict[str, Any]:
    """Get API statistics.

    Args:
        state: API state

    Returns:
        API statistics
    """
    return state.get_metrics()
