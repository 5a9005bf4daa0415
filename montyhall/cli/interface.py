import logging
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from ..simulation import GameSimulator, SimulationConfig, SimulationResult


console = Console()


def setup_logging(level: str = "WARNING") -> None:
    """Route log records through rich at the given level."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )


class SimulationCLI:
    """Command-line front end: run a batch of games and show the outcome table."""
    
    def __init__(self, config: SimulationConfig):
        self.config = config
        self.simulator = GameSimulator(num_workers=config.num_workers)
    
    def display_summary(self, sim_result: SimulationResult):
        """Display simulation results."""
        console.print(sim_result.summary.to_rich_table(
            title=f"Monty Hall: {sim_result.num_simulations} games"
        ))
        
        rates = sim_result.win_rates
        best = max(rates, key=rates.get)
        descriptions = {s.name: s.get_description() for s in self.simulator.strategies}
        lines = [
            f"[cyan]{descriptions.get(name, name)}[/cyan]\n  wins {rate:.1%} of games"
            for name, rate in rates.items()
        ]
        lines.append(f"\n[bold]Best strategy:[/bold] [green]{best}[/green]")
        console.print(Panel("\n".join(lines), title="Win Rates", border_style="blue"))
    
    def run(self) -> SimulationResult:
        if self.config.n_games >= 10000:
            with console.status(f"[bold green]Simulating {self.config.n_games:,} games..."):
                sim_result = self.simulator.simulate_games(self.config.n_games, seed=self.config.seed)
        else:
            sim_result = self.simulator.simulate_games(self.config.n_games, seed=self.config.seed)
        self.display_summary(sim_result)
        return sim_result
