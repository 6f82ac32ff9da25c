"""Offline evaluation and tuning for CF-Lite."""

from cf_lite.evaluation.holdout import evaluate_config, evaluate_split, leave_last_out_split
from cf_lite.evaluation.metrics import hr_at_k, ndcg_at_k
from cf_lite.evaluation.optimizer import DEFAULT_PARAM_SPACE, ConfigOptimizer

__all__ = [
    "evaluate_config",
    "evaluate_split",
    "leave_last_out_split",
    "hr_at_k",
    "ndcg_at_k",
    "DEFAULT_PARAM_SPACE",
    "ConfigOptimizer",
]
