"""Tests for time decay."""

import pytest

from cf_lite.engine import apply_time_decay, build_user_item_matrix
from cf_lite.exceptions import InvalidConfigError


def test_empty_input():
    assert apply_time_decay([], 0.5) == []
    assert apply_time_decay([], 1.0) == []


def test_no_decay_returns_equal_copies(make_interaction):
    interactions = [
        make_interaction("u1", "i1", 0.8, day=0),
        make_interaction("u2", "i2", 0.3, day=10),
    ]

    decayed = apply_time_decay(interactions, 1.0)

    assert decayed == interactions
    assert all(new is not old for new, old in zip(decayed, interactions))


def test_factor_above_one_is_no_op(make_interaction):
    interactions = [make_interaction("u1", "i1", 0.8, day=0), make_interaction("u1", "i2", 0.5, day=4)]
    assert [i.score for i in apply_time_decay(interactions, 1.5)] == [0.8, 0.5]


def test_reference_is_newest_interaction(make_interaction):
    interactions = [
        make_interaction("u1", "i1", 1.0, day=0),
        make_interaction("u1", "i2", 1.0, day=2),
    ]

    decayed = apply_time_decay(interactions, 0.5)

    assert decayed[0].score == pytest.approx(0.25)
    assert decayed[1].score == 1.0


def test_decay_is_monotonic(make_interaction):
    interactions = [
        make_interaction("u1", "i1", 0.7, day=0),
        make_interaction("u2", "i2", 0.7, day=0.5),
        make_interaction("u3", "i3", 0.7, day=3),
    ]

    for factor in (0.1, 0.5, 0.95, 0.999):
        scores = [i.score for i in apply_time_decay(interactions, factor)]
        assert scores[0] <= scores[1] <= scores[2]


def test_input_is_untouched(make_interaction):
    interactions = [make_interaction("u1", "i1", 1.0, day=0), make_interaction("u1", "i2", 1.0, day=1)]

    apply_time_decay(interactions, 0.5)

    assert [i.score for i in interactions] == [1.0, 1.0]


def test_negative_factor_rejected(make_interaction):
    with pytest.raises(InvalidConfigError):
        apply_time_decay([make_interaction("u1", "i1", 1.0)], -0.5)


def test_decay_then_recency_keeps_newest_score(make_interaction):
    """Decay rescales, the matrix still keeps only the newest pair."""
    interactions = [
        make_interaction("u1", "i1", 1.0, day=0),
        make_interaction("u1", "i1", 1.0, day=1),
    ]

    decayed = apply_time_decay(interactions, 0.5)

    assert decayed[0].score == 0.5
    assert decayed[1].score == 1.0
    assert build_user_item_matrix(decayed) == {"u1": {"i1": 1.0}}
