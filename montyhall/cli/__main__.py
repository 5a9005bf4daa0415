import click
from .interface import SimulationCLI, setup_logging
from ..simulation import SimulationConfig


@click.command()
@click.option('--games', '-n', type=int, default=None,
              help='Number of games to simulate (default: 100 or MONTYHALL_N_GAMES)')
def main(games):
    """Monty Hall simulator comparing the stay and switch strategies."""
    try:
        config = SimulationConfig.from_env(n_games=games)
    except (TypeError, ValueError) as e:
        raise click.UsageError(str(e))
    
    setup_logging(config.log_level)
    SimulationCLI(config).run()


if __name__ == "__main__":
    main()
