"""Tests for prediction formulas."""

import numpy as np
import pytest

from cf_lite.engine import Neighbor, mean_score, predict_item_based, predict_user_based


def test_mean_score():
    assert mean_score({}) == 0.0
    assert mean_score({"a": 0.2, "b": 0.4}) == pytest.approx(0.3)


class TestUserBased:
    def test_unknown_user(self):
        matrix = {"v": {"i1": 1.0}}
        assert predict_user_based("u", "i1", matrix, [Neighbor("v", 1.0)]) == 0.0

    def test_falls_back_to_user_mean(self):
        matrix = {"u": {"i1": 0.2, "i2": 0.6}, "v": {"i1": 0.5}}
        prediction = predict_user_based("u", "i9", matrix, [Neighbor("v", 0.8)])
        assert prediction == pytest.approx(0.4)

    def test_mean_centered_formula(self):
        matrix = {
            "u": {"i1": 0.4, "i2": 0.6},
            "v": {"i1": 0.2, "i3": 0.8},
            "w": {"i1": 0.6, "i3": 0.4},
        }
        neighbors = [Neighbor("v", 0.9), Neighbor("w", 0.3)]

        prediction = predict_user_based("u", "i3", matrix, neighbors)

        # 0.5 + (0.9 * (0.8 - 0.5) + 0.3 * (0.4 - 0.5)) / 1.2
        assert prediction == pytest.approx(0.5 + (0.27 - 0.03) / 1.2)

    def test_skips_neighbors_missing_from_matrix(self):
        matrix = {"u": {"i1": 0.5}, "v": {"i1": 0.5, "i2": 0.9}}
        neighbors = [Neighbor("ghost", 1.0), Neighbor("v", 1.0)]
        assert predict_user_based("u", "i2", matrix, neighbors) == pytest.approx(0.5 + (0.9 - 0.7))

    def test_clamped_high(self):
        matrix = {"u": {"i1": 0.9}, "v": {"i2": 1.0, "i3": 0.0, "i4": 0.0, "i5": 0.0}}
        assert predict_user_based("u", "i2", matrix, [Neighbor("v", 1.0)]) == 1.0

    def test_clamped_low(self):
        matrix = {"u": {"i1": 0.1}, "v": {"i2": 0.0, "i3": 1.0, "i4": 1.0, "i5": 1.0}}
        assert predict_user_based("u", "i2", matrix, [Neighbor("v", 1.0)]) == 0.0


class TestItemBased:
    def test_weighted_average(self):
        # item-user matrix
        matrix = {"j1": {"u": 0.8, "x": 0.1}, "j2": {"u": 0.2}, "target": {"x": 0.5}}
        neighbors = [Neighbor("j1", 0.75), Neighbor("j2", 0.25)]

        prediction = predict_item_based("u", "target", matrix, neighbors)

        assert prediction == pytest.approx((0.75 * 0.8 + 0.25 * 0.2) / 1.0)

    def test_zero_weight_returns_zero(self):
        matrix = {"j1": {"x": 0.8}, "target": {"x": 0.5}}
        assert predict_item_based("u", "target", matrix, [Neighbor("j1", 0.9)]) == 0.0
        assert predict_item_based("u", "target", matrix, []) == 0.0


def test_predictions_always_in_unit_interval():
    rng = np.random.RandomState(3)
    users = [f"u{i}" for i in range(8)]
    items = [f"i{i}" for i in range(10)]
    for _ in range(50):
        matrix = {
            user: {item: float(rng.rand()) for item in items if rng.rand() < 0.5}
            for user in users
        }
        neighbors = [Neighbor(user, float(rng.uniform(0.01, 1.0))) for user in users[1:]]
        for item in items:
            assert 0.0 <= predict_user_based("u0", item, matrix, neighbors) <= 1.0
            assert 0.0 <= predict_item_based("u0", item, matrix, neighbors) <= 1.0
