"""Optuna-based tuning of collaborative filtering configurations."""

from typing import Any, Dict, Iterable, Optional

import optuna

from cf_lite.engine.types import CFConfig, CFMethod, InteractionLike, merge_config
from cf_lite.evaluation.holdout import evaluate_split, leave_last_out_split
from cf_lite.utils.logging import get_logger

logger = get_logger(__name__)

DEFAULT_PARAM_SPACE: Dict[str, Dict[str, Any]] = {
    "method": {"type": "categorical", "choices": [method.value for method in CFMethod]},
    "k": {"type": "int", "low": 5, "high": 50},
    "min_overlap": {"type": "int", "low": 0, "high": 5},
    "decay_factor": {"type": "float", "low": 0.5, "high": 1.0},
}


class ConfigOptimizer:
    """Search CFConfig values that maximize a leave-last-out metric."""

    def __init__(
        self,
        metric: str = "ndcg@10",
        n_trials: int = 20,
        timeout: Optional[int] = None,
        study_name: Optional[str] = None,
        storage: Optional[str] = None,
        seed: Optional[int] = None,
    ) -> None:
        """Initialize optimizer.

        Args:
            metric: Evaluation metric ('hr@k' or 'ndcg@k')
            n_trials: Number of optimization trials
            timeout: Optimization timeout in seconds
            study_name: Optuna study name
            storage: Optuna storage URL
            seed: Random seed for reproducibility
        """
        metric_parts = metric.lower().split("@")
        self.metric_name = metric_parts[0]
        self.k = int(metric_parts[1]) if len(metric_parts) > 1 else 10
        if self.metric_name not in ("hr", "ndcg"):
            raise ValueError(f"Unknown metric: {self.metric_name}")
        self.metric_key = f"{self.metric_name}@{self.k}"

        self.n_trials = n_trials
        self.timeout = timeout
        self.study_name = study_name or "cf_config_optimization"
        self.storage = storage
        self.seed = seed

        self.study: Optional[optuna.Study] = None
        self.best_params: Optional[Dict[str, Any]] = None
        self.best_value: Optional[float] = None

    def optimize(
        self,
        interactions: Iterable[InteractionLike],
        param_space: Optional[Dict[str, Dict[str, Any]]] = None,
        fixed_params: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, Any]:
        """Run the search.

        Args:
            interactions: All interactions; split once with leave-last-out
            param_space: Parameter space definition (defaults to every field)
            fixed_params: Parameters held constant across trials

        Returns:
            Best parameters
        """
        space = param_space or DEFAULT_PARAM_SPACE
        train, test = leave_last_out_split(interactions)
        logger.info(f"Optimizing {self.metric_key} over {len(test)} test users, {self.n_trials} trials")

        self.study = optuna.create_study(
            study_name=self.study_name,
            direction="maximize",
            storage=self.storage,
            load_if_exists=True,
            sampler=optuna.samplers.TPESampler(seed=self.seed),
        )

        def objective(trial: optuna.Trial) -> float:
            params: Dict[str, Any] = {}
            for param_name, param_spec in space.items():
                param_type = param_spec["type"]

                if param_type == "int":
                    params[param_name] = trial.suggest_int(
                        param_name,
                        param_spec["low"],
                        param_spec["high"],
                        step=param_spec.get("step", 1),
                    )
                elif param_type == "float":
                    params[param_name] = trial.suggest_float(
                        param_name,
                        float(param_spec["low"]),
                        float(param_spec["high"]),
                    )
                elif param_type == "categorical":
                    params[param_name] = trial.suggest_categorical(param_name, param_spec["choices"])
                else:
                    raise ValueError(f"Unknown parameter type: {param_type}")

            if fixed_params:
                params.update(fixed_params)

            results = evaluate_split(train, test, merge_config(params), k=self.k)
            return results[self.metric_key]

        self.study.optimize(objective, n_trials=self.n_trials, timeout=self.timeout)

        self.best_params = dict(self.study.best_params)
        if fixed_params:
            self.best_params.update(fixed_params)
        self.best_value = float(self.study.best_value)

        logger.info(f"Best {self.metric_key}: {self.best_value:.4f} with {self.best_params}")
        return self.best_params

    def best_config(self) -> CFConfig:
        """Build a CFConfig from the best parameters.

        Raises:
            ValueError: If optimize() has not been run
        """
        if self.best_params is None:
            raise ValueError("No best parameters available. Run optimize() first.")
        return merge_config(self.best_params)
