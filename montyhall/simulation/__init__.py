"""Simulation module for the Monty Hall problem."""
from ..core.doors import create_game, select_door
from ..core.host import open_goat_door
from ..core.game import change_door, determine_winner
from .config import SimulationConfig
from .game_simulator import GameSimulator, SimulationResult, play_game, play_n_games
from .strategies import Strategy
from .strategy_registry import resolve_final_pick, strategy_registry
from .summary import SummaryTable

__all__ = [
    "create_game",
    "select_door",
    "open_goat_door",
    "change_door",
    "determine_winner",
    "play_game",
    "play_n_games",
    "resolve_final_pick",
    "GameSimulator",
    "SimulationConfig",
    "SimulationResult",
    "Strategy",
    "SummaryTable",
    "strategy_registry",
]
