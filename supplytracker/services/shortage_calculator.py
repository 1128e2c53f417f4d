"""
Shortage Calculator

Missing quantities for individual inventory items, and for all items
sharing a type.

Expiration and marked-as-enough take precedence: an item (or type) with
either never reports a quantity-based missing amount.
"""

from datetime import date
from typing import Optional, Sequence

from supplytracker.config import Settings
from supplytracker.models.inventory import InventoryItem
from supplytracker.services.item_matching import find_matching_items_by_type
from supplytracker.services.status import has_expiration_issue


def calculate_missing_quantity(
    item: InventoryItem,
    recommended_quantity: float,
    today: Optional[date] = None,
    settings: Optional[Settings] = None,
) -> float:
    """
    Quantity still missing for a single item.

    Non-zero only when the item is short, not expired or expiring soon, not
    marked as enough and has a positive recommendation.
    """
    if recommended_quantity <= 0:
        return 0
    if item.marked_as_enough:
        return 0
    if item.quantity >= recommended_quantity:
        return 0
    if has_expiration_issue(item, today, settings):
        return 0

    return max(0, recommended_quantity - item.quantity)


def calculate_total_missing_quantity(
    item: InventoryItem,
    all_items: Sequence[InventoryItem],
    recommended_quantity: float,
    today: Optional[date] = None,
    settings: Optional[Settings] = None,
) -> float:
    """
    Quantity missing across every item of the same type.

    Every item of a type gets the same value. Custom items have no type
    siblings and fall back to the single-item calculation.

    Example:
        Two "rope" items holding 2 and 1 with 10 recommended both report 7.
    """
    matching = find_matching_items_by_type(all_items, item.item_type)
    if not matching:
        return calculate_missing_quantity(item, recommended_quantity, today, settings)

    if recommended_quantity <= 0:
        return 0

    if any(i.marked_as_enough for i in matching):
        return 0

    if any(has_expiration_issue(i, today, settings) for i in matching):
        return 0

    total_actual = sum(i.quantity for i in matching)
    return max(0, recommended_quantity - total_actual)
