"""
Contestant strategies for the Monty Hall game.
"""
from .base import Strategy, StrategyConfig
from .stay import StayStrategy
from .switch import SwitchStrategy

__all__ = [
    "Strategy",
    "StrategyConfig",
    "StayStrategy",
    "SwitchStrategy",
]
