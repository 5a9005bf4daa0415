"""
Switch strategy implementation.
"""
from ...core.game import StrategyName
from .base import Strategy, StrategyConfig


class SwitchStrategy(Strategy):
    """Always move to the other unopened door."""
    
    def should_stay(self) -> bool:
        return False
    
    @classmethod
    def get_default_config(cls) -> StrategyConfig:
        return StrategyConfig(
            name=StrategyName.SWITCH.value,
            description="Switch to the remaining unopened door"
        )
