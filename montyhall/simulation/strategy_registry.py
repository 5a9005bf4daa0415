"""
Registry for managing and accessing different strategies.
"""
from typing import Dict, Type, List, Union
from ..core.game import StrategyName, change_door
from .strategies import Strategy, StayStrategy, SwitchStrategy


class StrategyRegistry:
    """Registry for managing available strategies."""
    
    def __init__(self):
        self._strategies: Dict[str, Type[Strategy]] = {}
        self._register_default_strategies()
    
    def _register_default_strategies(self):
        """Register all built-in strategies."""
        self.register(StayStrategy)
        self.register(SwitchStrategy)
    
    def register(self, strategy_class: Type[Strategy]):
        """Register a new strategy class."""
        config = strategy_class.get_default_config()
        self._strategies[config.name.lower()] = strategy_class
    
    def get_strategy(self, name: Union[str, StrategyName]) -> Strategy:
        """Get a strategy instance by name."""
        if isinstance(name, StrategyName):
            name = name.value
        strategy_class = self._strategies.get(name.lower())
        if not strategy_class:
            raise ValueError(f"Unknown strategy: {name}")
        
        return strategy_class()
    
    def list_strategies(self) -> List[str]:
        """List all available strategy names, in registration order."""
        return list(self._strategies.keys())
    
    def default_strategies(self) -> List[Strategy]:
        """One instance of every registered strategy."""
        return [self.get_strategy(name) for name in self.list_strategies()]
    


def resolve_final_pick(
    strategy: Union[Strategy, StrategyName, str, bool],
    opened_door: int,
    pick: int
) -> int:
    """Final door for a strategy given as an object, a tag or a plain ``stay`` flag."""
    if isinstance(strategy, bool):
        return change_door(strategy, opened_door, pick)
    if not isinstance(strategy, Strategy):
        strategy = strategy_registry.get_strategy(strategy)
    return strategy.final_pick(opened_door, pick)


# Global registry instance
strategy_registry = StrategyRegistry()
