"""Common types used across the supply calculation engine."""

from enum import Enum

# ============================================================================
# Well-known identifiers
# ============================================================================

# Item type for items created without a recommended-item template
CUSTOM_ITEM_TYPE = "custom"

FOOD_CATEGORY_ID = "food"
WATER_CATEGORY_ID = "water-beverages"
COMMUNICATION_CATEGORY_ID = "communication-info"

BOTTLED_WATER_ID = "bottled-water"


# ============================================================================
# Enums
# ============================================================================

class ItemStatus(str, Enum):
    """Display status for items, categories and the dashboard."""
    OK = "ok"
    WARNING = "warning"
    CRITICAL = "critical"


class Unit(str, Enum):
    """Units a supply can be counted in."""
    PIECES = "pieces"
    LITERS = "liters"
    KILOGRAMS = "kilograms"
    GRAMS = "grams"
    CANS = "cans"
    BOTTLES = "bottles"
    PACKAGES = "packages"
    JARS = "jars"
    CANISTERS = "canisters"
    BOXES = "boxes"
    DAYS = "days"
    ROLLS = "rolls"
    TUBES = "tubes"
    METERS = "meters"
    PAIRS = "pairs"
    EUROS = "euros"
    SETS = "sets"


class AlertType(str, Enum):
    """Alert severity."""
    CRITICAL = "critical"
    WARNING = "warning"


class AlertCode(str, Enum):
    """Machine-readable alert reasons (wording is up to the presentation layer)."""
    EXPIRED = "EXPIRED"
    EXPIRING_SOON = "EXPIRING_SOON"
    OUT_OF_STOCK = "OUT_OF_STOCK"
    CRITICALLY_LOW = "CRITICALLY_LOW"
    RUNNING_LOW = "RUNNING_LOW"
    WATER_PREPARATION_SHORTAGE = "WATER_PREPARATION_SHORTAGE"
