import numpy as np
import pytest

from montyhall.core.doors import GameBoard


@pytest.fixture
def rng():
    return np.random.default_rng(12345)


@pytest.fixture
def car_first():
    return GameBoard(["car", "goat", "goat"])


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep MONTYHALL_* settings from the calling shell out of the tests."""
    for name in ("N_GAMES", "SEED", "N_JOBS", "LOG_LEVEL"):
        monkeypatch.delenv(f"MONTYHALL_{name}", raising=False)
