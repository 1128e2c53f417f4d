"""
Item-Type-Count Strategy

Each recommended item type counts once: a battery radio and a hand-crank
radio are separate preparedness items, so completeness is "fulfilled types
out of total types" whatever the units are.
"""

from typing import Iterable, Optional, Sequence

from supplytracker.models.common import COMMUNICATION_CATEGORY_ID
from supplytracker.models.inventory import InventoryItem, RecommendedItemDefinition
from supplytracker.models.shortages import ShortageCalculationResult
from supplytracker.services.strategies.base import (
    ActualQuantity,
    CalculationContext,
    CategoryCalculationStrategy,
    ItemCalculationResult,
)
from supplytracker.services.strategies.common import (
    calculate_base_recommended_quantity,
    collect_shortages,
    default_has_enough_inventory,
    sum_quantities,
)


def is_fulfilled(result: ItemCalculationResult) -> bool:
    return result.has_marked_as_enough or result.actual_qty >= result.recommended_qty


class ItemTypeCountStrategy(CategoryCalculationStrategy):
    """Counts fulfilled item types (communication-info by default)."""

    strategy_id = "item-type-count"

    def __init__(self, category_ids: Optional[Iterable[str]] = None):
        self.category_ids = frozenset(category_ids or [COMMUNICATION_CATEGORY_ID])

    def can_handle(self, category_id: str) -> bool:
        return category_id in self.category_ids

    def calculate_recommended_quantity(
        self,
        definition: RecommendedItemDefinition,
        context: CalculationContext,
    ) -> int:
        return calculate_base_recommended_quantity(definition, context)

    def calculate_actual_quantity(
        self,
        matching_items: Sequence[InventoryItem],
        definition: RecommendedItemDefinition,
        context: CalculationContext,
    ) -> ActualQuantity:
        return ActualQuantity(quantity=sum_quantities(matching_items))

    def aggregate_totals(
        self,
        item_results: Sequence[ItemCalculationResult],
        context: CalculationContext,
    ) -> ShortageCalculationResult:
        return ShortageCalculationResult(
            shortages=collect_shortages(item_results),
            total_actual=sum(1 for r in item_results if is_fulfilled(r)),
            total_needed=len(item_results),
            primary_unit=None,
        )

    def has_enough_inventory(self, result: ShortageCalculationResult) -> bool:
        return default_has_enough_inventory(result)
