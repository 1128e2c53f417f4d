"""
Default Category Strategy

Catch-all for categories without special logic. Sums quantities, falling
back to weighted fulfillment when the category's units differ.
"""

from typing import Sequence

from supplytracker.models.inventory import InventoryItem, RecommendedItemDefinition
from supplytracker.models.shortages import ShortageCalculationResult
from supplytracker.services.strategies.base import (
    ActualQuantity,
    CalculationContext,
    CategoryCalculationStrategy,
    ItemCalculationResult,
)
from supplytracker.services.strategies.common import (
    aggregate_mixed_units_totals,
    aggregate_standard_totals,
    calculate_base_recommended_quantity,
    default_has_enough_inventory,
    has_mixed_units,
    sum_quantities,
)


class DefaultCategoryStrategy(CategoryCalculationStrategy):
    """Quantity-based strategy with automatic mixed-unit detection."""

    strategy_id = "default"
    is_fallback = True

    def can_handle(self, category_id: str) -> bool:
        return True

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
        if has_mixed_units(item_results):
            return aggregate_mixed_units_totals(item_results)
        return aggregate_standard_totals(item_results)

    def has_enough_inventory(self, result: ShortageCalculationResult) -> bool:
        return default_has_enough_inventory(result)
