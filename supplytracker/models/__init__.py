"""Data models for the supply calculation engine."""

from supplytracker.models.alerts import Alert
from supplytracker.models.common import (
    BOTTLED_WATER_ID,
    COMMUNICATION_CATEGORY_ID,
    CUSTOM_ITEM_TYPE,
    FOOD_CATEGORY_ID,
    WATER_CATEGORY_ID,
    AlertCode,
    AlertType,
    ItemStatus,
    Unit,
)
from supplytracker.models.household import CalculationOptions, HouseholdConfig
from supplytracker.models.inventory import (
    InventoryItem,
    RecommendedItemDefinition,
    RecommendedItemsCatalog,
)
from supplytracker.models.shortages import (
    CategoryShortage,
    CategoryStatusSummary,
    ShortageCalculationResult,
    WaterRequirementItem,
    WaterRequirementResult,
)

__all__ = [
    # Common
    "ItemStatus",
    "Unit",
    "AlertType",
    "AlertCode",
    "CUSTOM_ITEM_TYPE",
    "FOOD_CATEGORY_ID",
    "WATER_CATEGORY_ID",
    "COMMUNICATION_CATEGORY_ID",
    "BOTTLED_WATER_ID",
    # Household
    "HouseholdConfig",
    "CalculationOptions",
    # Inventory
    "InventoryItem",
    "RecommendedItemDefinition",
    "RecommendedItemsCatalog",
    # Shortages
    "CategoryShortage",
    "ShortageCalculationResult",
    "CategoryStatusSummary",
    "WaterRequirementItem",
    "WaterRequirementResult",
    # Alerts
    "Alert",
]
