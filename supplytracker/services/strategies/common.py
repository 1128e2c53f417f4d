"""
Shared helpers for category strategies.

Standard (single-unit) aggregation, weighted-fulfillment aggregation for
mixed units, and the default completeness check.
"""

from typing import Dict, List, Optional, Sequence

from supplytracker.models.common import Unit
from supplytracker.models.inventory import InventoryItem, RecommendedItemDefinition
from supplytracker.models.shortages import CategoryShortage, ShortageCalculationResult
from supplytracker.services.household import calculate_recommended_quantity
from supplytracker.services.strategies.base import CalculationContext, ItemCalculationResult


def calculate_base_recommended_quantity(
    definition: RecommendedItemDefinition,
    context: CalculationContext,
) -> int:
    """Standard scaling pipeline with the context's household."""
    return calculate_recommended_quantity(
        definition,
        context.household,
        people_multiplier=context.people_multiplier,
        settings=context.settings,
    )


def sum_quantities(items: Sequence[InventoryItem]) -> float:
    return sum(item.quantity for item in items)


def build_shortage(result: ItemCalculationResult) -> Optional[CategoryShortage]:
    """Shortage entry for a definition, or None if nothing is missing."""
    missing = max(0, result.recommended_qty - result.actual_qty)
    if missing <= 0 or result.has_marked_as_enough:
        return None

    return CategoryShortage(
        item_id=result.definition.id,
        item_name=result.definition.display_name,
        actual=result.actual_qty,
        needed=result.recommended_qty,
        unit=result.unit,
        missing=missing,
    )


def collect_shortages(item_results: Sequence[ItemCalculationResult]) -> List[CategoryShortage]:
    """Shortages sorted by missing amount, largest first."""
    shortages = [s for s in (build_shortage(r) for r in item_results) if s is not None]
    # sorted() is stable, so equal amounts keep catalog order
    return sorted(shortages, key=lambda s: s.missing, reverse=True)


def find_primary_unit(item_results: Sequence[ItemCalculationResult]) -> Optional[Unit]:
    """Unit with the largest cumulative recommended quantity (ties: first seen)."""
    unit_totals: Dict[Unit, float] = {}
    for result in item_results:
        unit_totals[result.unit] = unit_totals.get(result.unit, 0) + result.recommended_qty

    primary_unit = None
    max_total = 0.0
    for unit, total in unit_totals.items():
        if total > max_total:
            max_total = total
            primary_unit = unit
    return primary_unit


def has_mixed_units(item_results: Sequence[ItemCalculationResult]) -> bool:
    return len({r.unit for r in item_results}) > 1


def aggregate_standard_totals(
    item_results: Sequence[ItemCalculationResult],
) -> ShortageCalculationResult:
    """
    Quantity-based aggregation.

    Marked-as-enough affects the shortage list only, not the totals.
    """
    return ShortageCalculationResult(
        shortages=collect_shortages(item_results),
        total_actual=sum(r.actual_qty for r in item_results),
        total_needed=sum(r.recommended_qty for r in item_results),
        primary_unit=find_primary_unit(item_results),
    )


def fulfillment_ratio(result: ItemCalculationResult) -> float:
    """How complete one definition is, from 0 to 1."""
    if result.has_marked_as_enough or result.recommended_qty == 0:
        return 1.0
    return min(result.actual_qty / result.recommended_qty, 1.0)


def aggregate_mixed_units_totals(
    item_results: Sequence[ItemCalculationResult],
) -> ShortageCalculationResult:
    """
    Weighted-fulfillment aggregation for categories whose units differ.

    Summing liters and pieces means nothing, so each definition contributes
    its fulfillment ratio and the total is the number of definitions.
    """
    return ShortageCalculationResult(
        shortages=collect_shortages(item_results),
        total_actual=sum(fulfillment_ratio(r) for r in item_results),
        total_needed=len(item_results),
        primary_unit=None,
    )


def default_has_enough_inventory(result: ShortageCalculationResult) -> bool:
    """A category with no requirements is never complete."""
    if result.total_needed == 0:
        return False
    return result.total_actual >= result.total_needed
