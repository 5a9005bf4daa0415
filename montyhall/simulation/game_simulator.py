"""Game simulation engine for the Monty Hall problem."""
import logging
import os
import numpy as np
from typing import List, Optional, Sequence, Dict, Union
from dataclasses import dataclass
from concurrent.futures import ProcessPoolExecutor
from rich.console import Console
from ..core.game import Trial, TrialResult, determine_winner
from .strategies import Strategy
from .strategy_registry import strategy_registry
from .summary import SummaryTable


logger = logging.getLogger(__name__)

stdout_console = Console()


@dataclass
class SimulationResult:
    """Results from a batch of games."""
    num_simulations: int
    results: List[TrialResult]
    summary: SummaryTable
    
    @property
    def win_rates(self) -> Dict[str, float]:
        """Strategy name -> share of games won."""
        return {name: self.summary.win_rate(name) for name in self.summary.strategies}
    
    def __str__(self) -> str:
        lines = [f"Simulation Results ({self.num_simulations} games):"]
        lines.append("\nWin Rates:")
        for name, rate in sorted(self.win_rates.items(), key=lambda x: x[1], reverse=True):
            lines.append(f"  {name}: {rate:.1%}")
        return "\n".join(lines)


def _resolve_strategies(strategies: Optional[Sequence[Union[Strategy, str]]]) -> List[Strategy]:
    if strategies is None:
        return strategy_registry.default_strategies()
    return [s if isinstance(s, Strategy) else strategy_registry.get_strategy(s) for s in strategies]


def _validate_num_games(n) -> int:
    if isinstance(n, bool) or not isinstance(n, (int, np.integer)):
        raise TypeError(f"Number of games must be an integer, got {n!r}")
    if n <= 0:
        raise ValueError(f"Number of games must be positive, got {n}")
    return int(n)


def play_game(
    rng: Optional[np.random.Generator] = None,
    strategies: Optional[Sequence[Union[Strategy, str]]] = None
) -> List[TrialResult]:
    """Play one game and score every strategy against the same board.

    Returns one ``TrialResult`` per strategy; with the default registry that is
    a stay row followed by a switch row.
    """
    trial = Trial(rng)
    state = trial.state
    results = []
    for strategy in _resolve_strategies(strategies):
        final_pick = strategy.final_pick(state.opened_door, state.initial_pick)
        results.append(TrialResult(strategy.name, determine_winner(final_pick, state.board)))
    return results


class GameSimulator:
    """Plays many Monty Hall games, optionally across several processes."""
    
    def __init__(self, num_workers: Optional[int] = None,
                 strategies: Optional[Sequence[Union[Strategy, str]]] = None):
        if num_workers is None:
            num_workers = 1
        elif num_workers == -1:
            num_workers = os.cpu_count() or 1
        elif num_workers < 1:
            raise ValueError(f"num_workers must be >= 1 or -1, got {num_workers}")
        self.num_workers = num_workers
        self.strategies = _resolve_strategies(strategies)
    
    def simulate_games(
        self,
        num_simulations: int = 100,
        seed: Optional[int] = None,
        rng: Optional[np.random.Generator] = None
    ) -> SimulationResult:
        """Play ``num_simulations`` games and tabulate the outcomes.
        
        Args:
            num_simulations: Number of games, must be a positive integer
            seed: Seed for reproducible runs; ignored when ``rng`` is given
            rng: Generator to draw from (single worker only)
        """
        num_simulations = _validate_num_games(num_simulations)
        logger.debug("Simulating %d games with %d worker(s)", num_simulations, self.num_workers)
        
        if self.num_workers == 1 or num_simulations < self.num_workers:
            if rng is None:
                rng = np.random.default_rng(seed)
            all_results = self._run_simulations(num_simulations, self.strategies, rng)
        else:
            if rng is not None:
                raise ValueError("An explicit rng cannot be shared across worker processes")
            all_results = self._run_parallel(num_simulations, seed)
        
        summary = SummaryTable.from_results(all_results)
        logger.info(
            "Finished %d games: %s", num_simulations,
            ", ".join(f"{name}={summary.win_rate(name):.3f}" for name in summary.strategies)
        )
        return SimulationResult(
            num_simulations=num_simulations,
            results=all_results,
            summary=summary,
        )
    
    def _run_parallel(self, num_simulations: int, seed: Optional[int]) -> List[TrialResult]:
        # One independent stream per worker keeps runs reproducible for a given seed
        child_seeds = np.random.SeedSequence(seed).spawn(self.num_workers)
        simulations_per_worker = num_simulations // self.num_workers
        remaining = num_simulations % self.num_workers
        
        futures = []
        with ProcessPoolExecutor(max_workers=self.num_workers) as executor:
            for i, child in enumerate(child_seeds):
                n_sims = simulations_per_worker + (1 if i < remaining else 0)
                future = executor.submit(
                    self._run_simulations,
                    n_sims,
                    self.strategies,
                    np.random.default_rng(child)
                )
                futures.append(future)
            
            # Keep worker order so trial order is deterministic
            all_results = []
            for future in futures:
                all_results.extend(future.result())
        
        return all_results
    
    @staticmethod
    def _run_simulations(
        num_simulations: int,
        strategies: Sequence[Strategy],
        rng: np.random.Generator
    ) -> List[TrialResult]:
        """Run simulations in a single process."""
        results = []
        for _ in range(num_simulations):
            results.extend(play_game(rng, strategies))
        return results


def play_n_games(
    n: int = 100,
    rng: Optional[np.random.Generator] = None,
    console: Optional[Console] = None
) -> List[TrialResult]:
    """Play ``n`` games, print the stay/switch outcome table and return every row.
    
    The returned list has ``2 * n`` entries, a stay and a switch result per
    game. ``n`` must be a positive integer: zero or negative values raise
    ``ValueError`` and non-integers raise ``TypeError``.
    """
    result = GameSimulator().simulate_games(n, rng=rng)
    (console or stdout_console).print(result.summary.to_rich_table())
    return result.results
