"""Configuration and shared fixtures for pytest."""

import sys
from pathlib import Path

import numpy as np
import pytest

# Add the src directory to the Python path automatically for all tests
project_root = Path(__file__).parent.parent
src_dir = project_root / "src"
sys.path.insert(0, str(src_dir))

from cf_lite.engine import MS_PER_DAY, Interaction  # noqa: E402

T0 = 1_700_000_000_000


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "slow: mark test as slow running"
    )


@pytest.fixture
def make_interaction():
    """Factory for interactions with a timestamp given in days after T0."""

    def _make(user_id, item_id, score, day=0.0):
        return Interaction(
            user_id=user_id,
            item_id=item_id,
            score=score,
            timestamp=T0 + int(day * MS_PER_DAY),
        )

    return _make


@pytest.fixture
def scenario_a(make_interaction):
    """A and B agree on three items, C shares nothing with A.

    B additionally rated I4 and I7, C rated I5 and I6.
    """
    return [
        make_interaction("A", "I1", 0.8),
        make_interaction("A", "I2", 0.6),
        make_interaction("A", "I3", 0.4),
        make_interaction("B", "I1", 0.8),
        make_interaction("B", "I2", 0.6),
        make_interaction("B", "I3", 0.4),
        make_interaction("B", "I4", 0.9),
        make_interaction("B", "I7", 0.5),
        make_interaction("C", "I5", 1.0),
        make_interaction("C", "I6", 0.9),
    ]


@pytest.fixture
def random_interactions():
    """Random interactions with controlled randomness."""
    rng = np.random.RandomState(42)
    n_events = 300
    users = rng.randint(0, 15, size=n_events)
    items = rng.randint(0, 25, size=n_events)
    scores = rng.random_sample(n_events)
    days = rng.randint(0, 30, size=n_events)
    return [
        Interaction(
            user_id=f"U_{user:02d}",
            item_id=f"I_{item:02d}",
            score=float(score),
            timestamp=T0 + int(day) * MS_PER_DAY,
        )
        for user, item, score, day in zip(users, items, scores, days)
    ]
