"""
Factory for creating short identifier strategies.
Uses caching to avoid creating multiple instances.
"""

from enum import Enum
from shorturl_app.services.short_code_strategies import (
    ShortCodeStrategy,
    Base62ShortCodeStrategy,
    DirectShortCodeStrategy,
)
from shorturl_app.config import settings


class ShortCodeStrategyType(Enum):
    """Available short identifier strategies"""
    BASE62 = "base62"
    DIRECT = "direct"


class ShortCodeFactory:
    """Factory for creating short identifier strategies with caching"""

    _instances = {}  # Cache for strategy instances

    @classmethod
    def create_strategy(
        cls,
        strategy_type: ShortCodeStrategyType = None
    ) -> ShortCodeStrategy:
        """
        Create or return cached short identifier strategy.

        Args:
            strategy_type: Type of strategy to create.
                          If None, uses value from settings.

        Raises:
            ValueError: If strategy_type is unknown
        """
        if strategy_type is None:
            strategy_type = ShortCodeStrategyType(settings.short_code_strategy)

        if strategy_type in cls._instances:
            return cls._instances[strategy_type]

        if strategy_type == ShortCodeStrategyType.BASE62:
            instance = Base62ShortCodeStrategy()
        elif strategy_type == ShortCodeStrategyType.DIRECT:
            instance = DirectShortCodeStrategy(max_length=settings.short_url_length)
        else:
            raise ValueError(f"Unknown strategy type: {strategy_type}")

        cls._instances[strategy_type] = instance
        return instance
