"""Sparse matrix construction from interaction records."""

from typing import Callable, Sequence

from cf_lite.engine.types import Interaction, SparseMatrix
from cf_lite.utils.logging import get_logger

logger = get_logger(__name__)


def _build_matrix(
    interactions: Sequence[Interaction],
    row_key: Callable[[Interaction], str],
    column_key: Callable[[Interaction], str],
) -> SparseMatrix:
    # sorted() is stable, so equal timestamps keep input order and the
    # later record in the input wins
    ordered = sorted(interactions, key=lambda interaction: interaction.timestamp)

    matrix: SparseMatrix = {}
    for interaction in ordered:
        row = matrix.setdefault(row_key(interaction), {})
        row[column_key(interaction)] = interaction.score

    return matrix


def build_user_item_matrix(interactions: Sequence[Interaction]) -> SparseMatrix:
    """Build a sparse user -> (item -> score) matrix.

    Repeated (user, item) pairs keep the score of the latest interaction.

    Args:
        interactions: Interaction records, in any order

    Returns:
        User-item matrix
    """
    matrix = _build_matrix(interactions, lambda i: i.user_id, lambda i: i.item_id)
    logger.debug(f"Built user-item matrix with {len(matrix)} users from {len(interactions)} interactions")
    return matrix


def build_item_user_matrix(interactions: Sequence[Interaction]) -> SparseMatrix:
    """Build a sparse item -> (user -> score) matrix.

    Repeated (user, item) pairs keep the score of the latest interaction.

    Args:
        interactions: Interaction records, in any order

    Returns:
        Item-user matrix
    """
    matrix = _build_matrix(interactions, lambda i: i.item_id, lambda i: i.user_id)
    logger.debug(f"Built item-user matrix with {len(matrix)} items from {len(interactions)} interactions")
    return matrix
