"""Value objects shared by the collaborative filtering engine."""

from enum import Enum
from typing import Any, Dict, Iterable, List, Mapping, NamedTuple, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from cf_lite.exceptions import InvalidConfigError, InvalidInteractionError

# dimension key -> score (item_id for a user row, user_id for an item row)
SparseVector = Dict[str, float]
# entity id -> row
SparseMatrix = Dict[str, SparseVector]


class CFMethod(str, Enum):
    """Available neighborhood strategies."""

    USER_BASED = "user-based"
    ITEM_BASED = "item-based"


class Interaction(BaseModel):
    """A scored, timestamped user-item engagement fact."""

    model_config = ConfigDict(frozen=True)

    user_id: str = Field(..., min_length=1, description="User identifier")
    item_id: str = Field(..., min_length=1, description="Item identifier")
    score: float = Field(..., ge=0.0, le=1.0, allow_inf_nan=False, description="Normalized strength")
    timestamp: int = Field(..., description="Milliseconds since the Unix epoch")


class CFConfig(BaseModel):
    """Per-call configuration of the recommender."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    method: CFMethod = Field(CFMethod.USER_BASED, description="Neighborhood strategy")
    k: int = Field(20, gt=0, description="Number of nearest neighbors to consider")
    min_overlap: int = Field(2, ge=0, description="Minimum co-populated dimensions")
    decay_factor: float = Field(0.95, ge=0.0, le=1.0, description="Daily decay rate, 1 disables decay")


class Neighbor(NamedTuple):
    """A similar row found by neighbor discovery."""

    id: str
    similarity: float


class Recommendation(BaseModel):
    """A ranked recommendation."""

    model_config = ConfigDict(frozen=True)

    item_id: str
    predicted_score: float


ConfigLike = Union[CFConfig, Mapping[str, Any], None]
InteractionLike = Union[Interaction, Mapping[str, Any]]


def merge_config(config: ConfigLike = None) -> CFConfig:
    """Merge a partial configuration over the defaults.

    Args:
        config: A full config, a mapping of overrides, or None

    Returns:
        Validated configuration

    Raises:
        InvalidConfigError: If any value is invalid
    """
    if config is None:
        return CFConfig()
    if isinstance(config, CFConfig):
        return config
    if not isinstance(config, Mapping):
        raise InvalidConfigError(f"Expected CFConfig or mapping, got {type(config).__name__}")

    # None means "use the default" for partial configs coming from the CLI/API
    overrides = {key: value for key, value in config.items() if value is not None}
    try:
        return CFConfig.model_validate(overrides)
    except ValidationError as err:
        raise InvalidConfigError(_format_errors(err)) from err


def coerce_interactions(records: Iterable[InteractionLike]) -> List[Interaction]:
    """Validate raw records into Interaction values.

    Args:
        records: Interaction objects or mappings with the same fields

    Returns:
        List of interactions in input order

    Raises:
        InvalidInteractionError: If a record is malformed
    """
    interactions: List[Interaction] = []
    for index, record in enumerate(records):
        if isinstance(record, Interaction):
            interactions.append(record)
            continue
        if not isinstance(record, Mapping):
            raise InvalidInteractionError(
                f"expected Interaction or mapping, got {type(record).__name__}", index=index
            )
        try:
            interactions.append(Interaction.model_validate(record))
        except ValidationError as err:
            raise InvalidInteractionError(_format_errors(err), index=index) from err
    return interactions


def _format_errors(err: ValidationError, limit: Optional[int] = 3) -> str:
    messages = []
    for error in err.errors()[:limit]:
        location = ".".join(str(part) for part in error["loc"]) or "value"
        messages.append(f"{location}: {error['msg']}")
    return "; ".join(messages)
