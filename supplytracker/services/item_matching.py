"""
Item Matching

Resolves which inventory items satisfy a recommended item definition.

Two modes:
- STRICT: item_type equals the definition id. Used for category totals and
  same-type shortfall sums.
- LENIENT: STRICT, or a non-custom item whose normalized name equals the
  definition id. Used for per-item lookups of manually named items.
"""

import re
from enum import Enum
from typing import List, Sequence

from supplytracker.models.common import CUSTOM_ITEM_TYPE
from supplytracker.models.inventory import InventoryItem, RecommendedItemDefinition


class MatchMode(str, Enum):
    """How an inventory item is matched to a definition."""
    STRICT = "strict"
    LENIENT = "lenient"


def normalize_item_name(name: str) -> str:
    """Case-fold and turn whitespace runs into hyphens ("Bottled Water" -> "bottled-water")."""
    return re.sub(r'\s+', '-', name.casefold())


def item_matches_definition_id(item: InventoryItem, definition_id: str) -> bool:
    """Strict type match. Custom items never match."""
    if item.item_type == CUSTOM_ITEM_TYPE:
        return False
    return item.item_type == definition_id


def _matches_lenient(item: InventoryItem, definition_id: str) -> bool:
    if item_matches_definition_id(item, definition_id):
        return True
    if item.item_type == CUSTOM_ITEM_TYPE:
        return False
    return normalize_item_name(item.name) == definition_id.casefold()


def find_matching_items_by_type(
    items: Sequence[InventoryItem],
    definition_id: str,
) -> List[InventoryItem]:
    return [item for item in items if item_matches_definition_id(item, definition_id)]


def find_matching_items(
    items: Sequence[InventoryItem],
    definition: RecommendedItemDefinition,
    mode: MatchMode = MatchMode.LENIENT,
) -> List[InventoryItem]:
    """
    Find inventory items that match a recommended item definition.

    Args:
        items: Inventory items to search
        definition: The definition to match against
        mode: STRICT (type only) or LENIENT (type or normalized name)

    Returns:
        Matching items, in input order
    """
    if mode == MatchMode.STRICT:
        return find_matching_items_by_type(items, definition.id)
    return [item for item in items if _matches_lenient(item, definition.id)]


def sum_matching_quantity(
    items: Sequence[InventoryItem],
    definition: RecommendedItemDefinition,
    mode: MatchMode = MatchMode.LENIENT,
) -> float:
    return sum(item.quantity for item in find_matching_items(items, definition, mode))


def has_marked_as_enough(
    items: Sequence[InventoryItem],
    definition: RecommendedItemDefinition,
    mode: MatchMode = MatchMode.LENIENT,
) -> bool:
    """True if any matching item is marked as enough."""
    return any(item.marked_as_enough for item in find_matching_items(items, definition, mode))
