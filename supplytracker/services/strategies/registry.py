"""
Strategy Registry

Ordered list of category strategies. The first strategy whose can_handle
accepts a category wins; exactly one catch-all strategy sits at the end.

Registries are plain objects passed to the calculation entry points, so
tests can build isolated ones.
"""

import logging
from typing import Iterable, List, Optional

from supplytracker.config import Settings, get_settings
from supplytracker.exceptions import StrategyNotFoundError, StrategyRegistryError
from supplytracker.services.strategies.base import CategoryCalculationStrategy
from supplytracker.services.strategies.default import DefaultCategoryStrategy
from supplytracker.services.strategies.food import FoodCategoryStrategy
from supplytracker.services.strategies.item_type_count import ItemTypeCountStrategy
from supplytracker.services.strategies.water import WaterCategoryStrategy

logger = logging.getLogger(__name__)


class StrategyRegistry:
    """
    Predicate-based strategy dispatch.

    Raises StrategyRegistryError unless exactly one fallback strategy is
    registered and it is last.
    """

    def __init__(self, strategies: Iterable[CategoryCalculationStrategy]):
        self._strategies: List[CategoryCalculationStrategy] = list(strategies)
        self._validate()

    def _validate(self):
        fallbacks = [s for s in self._strategies if s.is_fallback]
        if len(fallbacks) != 1:
            raise StrategyRegistryError(
                f"Expected exactly one fallback strategy, found {len(fallbacks)}",
                details={"fallbacks": [s.strategy_id for s in fallbacks]},
            )
        if not self._strategies[-1].is_fallback:
            raise StrategyRegistryError(
                "Fallback strategy must be registered last",
                details={"order": self.strategy_ids},
            )

    def register(self, strategy: CategoryCalculationStrategy) -> None:
        """Insert a strategy just before the fallback so it is not shadowed."""
        if strategy.is_fallback:
            raise StrategyRegistryError(
                "Registry already has a fallback strategy",
                details={"strategy_id": strategy.strategy_id},
            )
        self._strategies.insert(len(self._strategies) - 1, strategy)
        logger.info(f"Registered category strategy '{strategy.strategy_id}'")

    def get_strategy(self, category_id: str) -> CategoryCalculationStrategy:
        for strategy in self._strategies:
            if strategy.can_handle(category_id):
                return strategy
        # Unreachable while a fallback is registered
        raise StrategyNotFoundError(category_id)

    @property
    def strategy_ids(self) -> List[str]:
        return [s.strategy_id for s in self._strategies]

    def __len__(self) -> int:
        return len(self._strategies)


def create_default_registry(settings: Optional[Settings] = None) -> StrategyRegistry:
    """Food, water, item-type-count, then the default catch-all."""
    settings = settings or get_settings()
    return StrategyRegistry([
        FoodCategoryStrategy(settings.food_category_ids),
        WaterCategoryStrategy(),
        ItemTypeCountStrategy(settings.item_type_count_category_ids),
        DefaultCategoryStrategy(),
    ])
