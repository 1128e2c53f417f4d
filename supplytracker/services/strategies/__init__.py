"""Category calculation strategies and their registry."""

from supplytracker.services.strategies.base import (
    ActualQuantity,
    CalculationContext,
    CategoryCalculationStrategy,
    ItemCalculationResult,
)
from supplytracker.services.strategies.default import DefaultCategoryStrategy
from supplytracker.services.strategies.food import FoodCategoryStrategy
from supplytracker.services.strategies.item_type_count import ItemTypeCountStrategy
from supplytracker.services.strategies.registry import StrategyRegistry, create_default_registry
from supplytracker.services.strategies.water import WaterCategoryStrategy

__all__ = [
    "CategoryCalculationStrategy",
    "CalculationContext",
    "ActualQuantity",
    "ItemCalculationResult",
    "DefaultCategoryStrategy",
    "FoodCategoryStrategy",
    "WaterCategoryStrategy",
    "ItemTypeCountStrategy",
    "StrategyRegistry",
    "create_default_registry",
]
