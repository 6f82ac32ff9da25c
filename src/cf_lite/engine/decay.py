"""Exponential time decay of interaction scores."""

from typing import List, Sequence

from cf_lite.engine.types import Interaction
from cf_lite.exceptions import InvalidConfigError

MS_PER_DAY = 86_400_000


def apply_time_decay(interactions: Sequence[Interaction], decay_factor: float) -> List[Interaction]:
    """Discount older interactions relative to the newest one in the batch.

    Each score is multiplied by ``decay_factor ** days_since`` where
    ``days_since`` is measured from the latest timestamp in *interactions*,
    not from the wall clock, so the result only depends on the input.

    Args:
        interactions: Interaction records
        decay_factor: Decay rate per day; values >= 1 disable decay

    Returns:
        New interaction objects with decayed scores

    Raises:
        InvalidConfigError: If decay_factor is negative
    """
    if decay_factor < 0:
        raise InvalidConfigError(f"decay_factor must be non-negative, got {decay_factor}")

    if not interactions:
        return []

    if decay_factor >= 1:
        return [interaction.model_copy() for interaction in interactions]

    max_timestamp = max(interaction.timestamp for interaction in interactions)

    decayed = []
    for interaction in interactions:
        days_since = (max_timestamp - interaction.timestamp) / MS_PER_DAY
        decay = decay_factor**days_since
        decayed.append(interaction.model_copy(update={"score": interaction.score * decay}))
    return decayed
