"""
Stay strategy implementation.
"""
from ...core.game import StrategyName
from .base import Strategy, StrategyConfig


class StayStrategy(Strategy):
    """Always keep the initial pick."""
    
    def should_stay(self) -> bool:
        return True
    
    @classmethod
    def get_default_config(cls) -> StrategyConfig:
        return StrategyConfig(
            name=StrategyName.STAY.value,
            description="Keep the initially picked door"
        )
