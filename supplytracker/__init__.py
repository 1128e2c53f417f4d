"""
Supply Tracker Core Package

Requirement and shortage calculations for household emergency supplies.
Stateless: callers pass inventory snapshots, household config and the
recommended item catalog; nothing is stored.
"""

__version__ = "1.0.0"

from supplytracker.config import Settings, get_settings
from supplytracker.models.household import CalculationOptions, HouseholdConfig
from supplytracker.models.inventory import (
    InventoryItem,
    RecommendedItemDefinition,
    RecommendedItemsCatalog,
)
from supplytracker.models.shortages import CategoryStatusSummary, ShortageCalculationResult

__all__ = [
    "Settings",
    "get_settings",
    "HouseholdConfig",
    "CalculationOptions",
    "InventoryItem",
    "RecommendedItemDefinition",
    "RecommendedItemsCatalog",
    "ShortageCalculationResult",
    "CategoryStatusSummary",
]
