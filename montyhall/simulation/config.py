"""Configuration handling for Monty Hall simulations."""

import os
from dataclasses import dataclass, asdict
from typing import Any, Dict, Optional


ENV_PREFIX = "MONTYHALL_"


def _int_from_env(name: str) -> Optional[int]:
    raw = os.getenv(ENV_PREFIX + name)
    if raw is None or raw == "":
        return None
    try:
        return int(raw)
    except ValueError:
        return None


@dataclass
class SimulationConfig:
    """Settings for a batch of Monty Hall games.

    Args:
        n_games: Number of games to play per run
        seed: Seed for the random generator, ``None`` for fresh entropy
        num_workers: Worker processes; ``-1`` uses every CPU
        log_level: Logging level name used by the command line
    """

    n_games: int = 100
    seed: Optional[int] = None
    num_workers: int = 1
    log_level: str = "WARNING"

    def __post_init__(self):
        if isinstance(self.n_games, bool) or not isinstance(self.n_games, int):
            raise TypeError(f"n_games must be an integer, got {self.n_games!r}")
        if self.n_games <= 0:
            raise ValueError(f"n_games must be positive, got {self.n_games}")

        max_cpus = os.cpu_count() or 1
        if self.num_workers == -1:
            self.num_workers = max_cpus
        elif self.num_workers < 1:
            raise ValueError(f"num_workers must be >= 1 or -1, got {self.num_workers}")
        self.num_workers = min(self.num_workers, max_cpus)

        self.log_level = self.log_level.upper()

    @classmethod
    def from_env(cls, **overrides) -> "SimulationConfig":
        """Build a configuration from ``MONTYHALL_*`` environment variables.

        Unparseable integers are ignored; explicit ``overrides`` win over the
        environment.
        """
        values: Dict[str, Any] = {}

        n_games = _int_from_env("N_GAMES")
        if n_games is not None:
            values["n_games"] = n_games
        seed = _int_from_env("SEED")
        if seed is not None:
            values["seed"] = seed
        n_jobs = _int_from_env("N_JOBS")
        if n_jobs is not None:
            values["num_workers"] = n_jobs
        log_level = os.getenv(ENV_PREFIX + "LOG_LEVEL")
        if log_level:
            values["log_level"] = log_level

        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
