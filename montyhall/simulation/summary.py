"""Contingency table of strategy against outcome."""
from collections import Counter
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Tuple

from rich.table import Table

from ..core.game import Outcome, TrialResult


@dataclass
class SummaryTable:
    """Row-normalized counts of outcomes per strategy.

    Each row gives the conditional probability of an outcome given the
    strategy, so every row sums to one.
    """
    counts: Dict[Tuple[str, Outcome], int]
    strategies: List[str] = field(default_factory=list)
    outcomes: List[Outcome] = field(default_factory=lambda: [Outcome.LOSE, Outcome.WIN])

    @classmethod
    def from_results(cls, results: Iterable[TrialResult]) -> "SummaryTable":
        counts: Counter = Counter()
        strategies: List[str] = []
        for result in results:
            if result.strategy not in strategies:
                strategies.append(result.strategy)
            counts[(result.strategy, result.outcome)] += 1
        return cls(counts=dict(counts), strategies=strategies)

    def row_total(self, strategy: str) -> int:
        return sum(self.counts.get((strategy, outcome), 0) for outcome in self.outcomes)

    def proportion(self, strategy: str, outcome: Outcome) -> float:
        """Share of ``strategy``'s trials that ended in ``outcome``."""
        total = self.row_total(strategy)
        if total == 0:
            raise KeyError(f"No results recorded for strategy {strategy!r}")
        return self.counts.get((strategy, outcome), 0) / total

    def win_rate(self, strategy: str) -> float:
        return self.proportion(strategy, Outcome.WIN)

    def rows(self, decimals: int = 2) -> List[Tuple[str, List[float]]]:
        """Rounded proportions, one row per strategy in first-seen order."""
        return [
            (strategy, [round(self.proportion(strategy, o), decimals) for o in self.outcomes])
            for strategy in self.strategies
        ]

    def __str__(self) -> str:
        width = max([len("strategy")] + [len(s) for s in self.strategies])
        header = "strategy".ljust(width) + "".join(f" {o.value:>5}" for o in self.outcomes)
        lines = [" " * width + " outcome", header]
        for strategy, values in self.rows():
            lines.append(strategy.ljust(width) + "".join(f" {v:5.2f}" for v in values))
        return "\n".join(lines)

    def to_rich_table(self, decimals: int = 2, title: str = "Outcome by strategy") -> Table:
        table = Table(title=title)
        table.add_column("Strategy", style="cyan")
        for outcome in self.outcomes:
            table.add_column(outcome.value, justify="right",
                             style="green" if outcome == Outcome.WIN else "red")
        for strategy, values in self.rows(decimals):
            table.add_row(strategy, *[f"{v:.{decimals}f}" for v in values])
        return table
