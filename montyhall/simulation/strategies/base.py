"""
Base classes for strategy implementations.
"""
from abc import ABC, abstractmethod
from typing import Optional
from dataclasses import dataclass
from ...core.game import change_door


@dataclass
class StrategyConfig:
    """Configuration for a strategy."""
    name: str
    description: str


class Strategy(ABC):
    """Abstract base class for contestant strategies."""
    
    def __init__(self, config: Optional[StrategyConfig] = None):
        self.config = config or self.get_default_config()
    
    @abstractmethod
    def should_stay(self) -> bool:
        """Decide whether to keep the initial pick after the host's reveal."""
        pass
    
    def final_pick(self, opened_door: int, pick: int) -> int:
        """Resolve the final door once the host has opened ``opened_door``."""
        return change_door(self.should_stay(), opened_door, pick)
    
    @classmethod
    @abstractmethod
    def get_default_config(cls) -> StrategyConfig:
        """Get default configuration for this strategy."""
        pass
    
    @property
    def name(self) -> str:
        return self.config.name
    
    def get_description(self) -> str:
        """Get human-readable description of the strategy."""
        return f"{self.config.name}: {self.config.description}"
