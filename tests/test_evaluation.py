"""Tests for offline evaluation and tuning."""

import numpy as np
import pytest

from cf_lite.engine import CFConfig, CFMethod
from cf_lite.evaluation import (
    ConfigOptimizer,
    evaluate_config,
    evaluate_split,
    hr_at_k,
    leave_last_out_split,
    ndcg_at_k,
)


class TestMetrics:
    def test_hit_rate(self):
        assert hr_at_k(["a"], ["b", "a"], k=1) == 0.0
        assert hr_at_k(["a"], ["b", "a"], k=2) == 1.0
        assert hr_at_k(["a"], [], k=10) == 0.0

    def test_ndcg_single_item(self):
        assert ndcg_at_k(["a"], ["a", "b"], k=2) == pytest.approx(1.0)
        assert ndcg_at_k(["a"], ["b", "a"], k=2) == pytest.approx(1 / np.log2(3))
        assert ndcg_at_k(["a"], ["b", "c"], k=2) == 0.0

    def test_ndcg_multiple_items(self):
        expected = (1 + 1 / np.log2(4)) / (1 + 1 / np.log2(3))
        assert ndcg_at_k(["a", "b"], ["a", "x", "b"], k=3) == pytest.approx(expected)


class TestLeaveLastOut:
    def test_holds_out_latest_item(self, make_interaction):
        interactions = [
            make_interaction("u1", "i1", 1.0, day=0),
            make_interaction("u1", "i3", 0.5, day=2),
            make_interaction("u1", "i2", 1.0, day=1),
            make_interaction("u2", "i1", 1.0, day=0),
            make_interaction("u3", "i2", 0.4, day=0),
            make_interaction("u3", "i2", 0.9, day=3),
        ]

        train, test = leave_last_out_split(interactions)

        assert test == {"u1": ["i3"]}
        assert len(train) == 5
        assert ("u1", "i3") not in {(i.user_id, i.item_id) for i in train}

    def test_equal_timestamps_use_input_order(self, make_interaction):
        interactions = [make_interaction("u1", "i1", 1.0), make_interaction("u1", "i2", 1.0)]

        _, test = leave_last_out_split(interactions)

        assert test == {"u1": ["i2"]}

    def test_removes_every_event_on_held_out_pair(self, make_interaction):
        interactions = [
            make_interaction("u1", "i2", 0.3, day=0),
            make_interaction("u1", "i1", 1.0, day=1),
            make_interaction("u1", "i2", 0.8, day=2),
        ]

        train, test = leave_last_out_split(interactions)

        assert test == {"u1": ["i2"]}
        assert [(i.item_id, i.score) for i in train] == [("i1", 1.0)]

    def test_min_interactions(self, make_interaction):
        interactions = [
            make_interaction("u1", "i1", 1.0, day=0),
            make_interaction("u1", "i2", 1.0, day=1),
        ]

        train, test = leave_last_out_split(interactions, min_interactions=3)

        assert test == {}
        assert len(train) == 2


class TestEvaluate:
    @pytest.fixture
    def hit_and_misses(self, make_interaction):
        return [
            make_interaction("u1", "i1", 1.0, day=0),
            make_interaction("u1", "i2", 1.0, day=1),
            make_interaction("u1", "i3", 1.0, day=5),
            make_interaction("u2", "i1", 1.0),
            make_interaction("u2", "i2", 1.0),
            make_interaction("u2", "i3", 1.0),
            make_interaction("u2", "i4", 1.0),
            make_interaction("u3", "i1", 1.0),
            make_interaction("u3", "i2", 1.0),
            make_interaction("u3", "i3", 1.0),
            make_interaction("u3", "i5", 1.0),
        ]

    def test_known_outcome(self, hit_and_misses):
        # u1 gets its held-out i3 at rank one; u2 and u3 get nothing
        results = evaluate_config(hit_and_misses, {"decay_factor": 1.0}, k=10)

        assert results["users"] == 3
        assert results["hr@10"] == pytest.approx(1 / 3)
        assert results["ndcg@10"] == pytest.approx(1 / 3)

    def test_cutoff_names_keys(self, random_interactions):
        results = evaluate_config(random_interactions, {"min_overlap": 1}, k=5)

        assert set(results) == {"hr@5", "ndcg@5", "users"}
        assert 0.0 <= results["hr@5"] <= 1.0
        assert 0.0 <= results["ndcg@5"] <= results["hr@5"]

    def test_empty_test_set(self):
        assert evaluate_split([], {}, None, k=10) == {"hr@10": 0.0, "ndcg@10": 0.0, "users": 0}


class TestConfigOptimizer:
    def test_unknown_metric(self):
        with pytest.raises(ValueError, match="Unknown metric"):
            ConfigOptimizer(metric="mrr@10")

    def test_metric_parsing(self):
        optimizer = ConfigOptimizer(metric="HR@20")
        assert optimizer.metric_key == "hr@20"
        assert ConfigOptimizer(metric="ndcg").metric_key == "ndcg@10"

    def test_best_config_requires_optimize(self):
        with pytest.raises(ValueError, match="Run optimize"):
            ConfigOptimizer().best_config()

    @pytest.mark.slow
    def test_optimize(self, random_interactions):
        optimizer = ConfigOptimizer(metric="hr@10", n_trials=3, seed=0)

        best_params = optimizer.optimize(random_interactions)

        assert set(best_params) == {"method", "k", "min_overlap", "decay_factor"}
        assert 0.0 <= optimizer.best_value <= 1.0
        assert len(optimizer.study.trials) == 3

        config = optimizer.best_config()
        assert isinstance(config, CFConfig)
        assert 5 <= config.k <= 50

    @pytest.mark.slow
    def test_fixed_params(self, random_interactions):
        optimizer = ConfigOptimizer(n_trials=2, seed=1)

        optimizer.optimize(
            random_interactions,
            param_space={"k": {"type": "int", "low": 5, "high": 10}},
            fixed_params={"method": "item-based", "decay_factor": 1.0},
        )

        config = optimizer.best_config()
        assert config.method == CFMethod.ITEM_BASED
        assert config.decay_factor == 1.0
        assert 5 <= config.k <= 10
