"""Nearest-neighbor search over sparse matrix rows.

The same search serves both strategies: over the user-item matrix it finds
similar users, over the item-user matrix it finds similar items.
"""

from typing import List, Mapping

from cf_lite.engine.similarity import cosine_similarity
from cf_lite.engine.types import Neighbor
from cf_lite.exceptions import InvalidConfigError
from cf_lite.utils.logging import get_logger

logger = get_logger(__name__)


def count_overlap(a: Mapping[str, float], b: Mapping[str, float]) -> int:
    """Count dimensions populated in both sparse vectors."""
    smaller, larger = (a, b) if len(a) <= len(b) else (b, a)
    return sum(1 for key in smaller if key in larger)


def find_nearest_neighbors(
    target: str,
    matrix: Mapping[str, Mapping[str, float]],
    k: int,
    min_overlap: int,
) -> List[Neighbor]:
    """Find the top-k rows most similar to *target*.

    Rows sharing fewer than *min_overlap* populated dimensions with the
    target are skipped before any similarity is computed, and only rows
    with strictly positive cosine similarity are kept. Ties keep matrix
    iteration order.

    Args:
        target: Row id to find neighbors for
        matrix: Sparse matrix (row id -> (dimension -> score))
        k: Maximum number of neighbors to return
        min_overlap: Minimum number of co-populated dimensions

    Returns:
        Neighbors sorted by descending similarity; empty if the target is
        absent or has an empty row

    Raises:
        InvalidConfigError: If k is not positive or min_overlap is negative
    """
    if k < 1:
        raise InvalidConfigError(f"k must be a positive integer, got {k}")
    if min_overlap < 0:
        raise InvalidConfigError(f"min_overlap must be non-negative, got {min_overlap}")

    target_vector = matrix.get(target)
    if not target_vector:
        return []

    candidates: List[Neighbor] = []
    for entity_id, entity_vector in matrix.items():
        if entity_id == target:
            continue

        if count_overlap(target_vector, entity_vector) < min_overlap:
            continue

        similarity = cosine_similarity(target_vector, entity_vector)
        if similarity > 0:
            candidates.append(Neighbor(entity_id, similarity))

    # Stable sort keeps equal similarities in iteration order
    candidates.sort(key=lambda neighbor: neighbor.similarity, reverse=True)
    neighbors = candidates[:k]

    logger.debug(f"Found {len(neighbors)} of {len(candidates)} qualifying neighbors for {target}")
    return neighbors
