"""
Category Status

Entry points that run a category through its strategy:

    1. build the calculation context (category items, enabled definitions,
       resolved options, people multiplier)
    2. evaluate every definition with a nonzero recommended quantity
    3. aggregate with the strategy and derive the category status

Pure functions - no side effects, no state.
"""

import logging
from datetime import date
from typing import List, Optional, Sequence

from supplytracker.config import Settings, get_settings
from supplytracker.models.common import WATER_CATEGORY_ID, ItemStatus
from supplytracker.models.household import CalculationOptions, HouseholdConfig
from supplytracker.models.inventory import InventoryItem, RecommendedItemDefinition
from supplytracker.models.shortages import CategoryStatusSummary, ShortageCalculationResult
from supplytracker.services.household import (
    calculate_people_multiplier,
    get_recommended_quantity_for_item,
    resolve_calculation_options,
)
from supplytracker.services.item_matching import MatchMode, find_matching_items
from supplytracker.services.status import calculate_item_status
from supplytracker.services.strategies.base import CalculationContext, ItemCalculationResult
from supplytracker.services.strategies.registry import StrategyRegistry, create_default_registry

logger = logging.getLogger(__name__)

# Completion when a category has nothing to measure against
FULL_PREPAREDNESS = 100.0
EMPTY_PREPAREDNESS = 0.0


def get_enabled_definitions(
    category_id: str,
    recommended_items: Sequence[RecommendedItemDefinition],
    disabled_recommended_items: Sequence[str] = (),
) -> List[RecommendedItemDefinition]:
    disabled = set(disabled_recommended_items)
    return [
        d for d in recommended_items
        if d.category == category_id and d.id not in disabled
    ]


def build_calculation_context(
    category_id: str,
    items: Sequence[InventoryItem],
    household: HouseholdConfig,
    recommended_items: Sequence[RecommendedItemDefinition],
    disabled_recommended_items: Sequence[str] = (),
    options: Optional[CalculationOptions] = None,
    settings: Optional[Settings] = None,
) -> CalculationContext:
    settings = settings or get_settings()
    options = resolve_calculation_options(options, settings)

    return CalculationContext(
        category_id=category_id,
        items=items,
        category_items=[item for item in items if item.category_id == category_id],
        recommended_for_category=get_enabled_definitions(
            category_id, recommended_items, disabled_recommended_items
        ),
        household=household,
        disabled_recommended_items=list(disabled_recommended_items),
        options=options,
        people_multiplier=calculate_people_multiplier(
            household, options.children_multiplier, settings
        ),
        recommended_items=recommended_items,
        settings=settings,
    )


def calculate_category_shortages(
    category_id: str,
    items: Sequence[InventoryItem],
    household: HouseholdConfig,
    recommended_items: Sequence[RecommendedItemDefinition],
    disabled_recommended_items: Sequence[str] = (),
    options: Optional[CalculationOptions] = None,
    registry: Optional[StrategyRegistry] = None,
    settings: Optional[Settings] = None,
) -> ShortageCalculationResult:
    """
    Calculate shortages and totals for a category.

    Args:
        category_id: Category to evaluate
        items: All inventory items (other categories feed cross-category
            needs such as preparation water)
        household: Household configuration
        recommended_items: Recommended item catalog
        disabled_recommended_items: Definition ids the user turned off
        options: Per-call overrides of settings defaults
        registry: Strategy registry (default registry when omitted)
        settings: Engine settings

    Returns:
        ShortageCalculationResult; empty when the category has no enabled
        definitions or the household is disabled
    """
    settings = settings or get_settings()
    registry = registry or create_default_registry(settings)

    context = build_calculation_context(
        category_id,
        items,
        household,
        recommended_items,
        disabled_recommended_items,
        options,
        settings,
    )

    if not context.recommended_for_category or not household.enabled:
        return ShortageCalculationResult()

    strategy = registry.get_strategy(category_id)
    logger.debug(f"Calculating {category_id} with {strategy!r}")

    item_results: List[ItemCalculationResult] = []
    for definition in context.recommended_for_category:
        recommended_qty = strategy.calculate_recommended_quantity(definition, context)

        # e.g. pet food in a household without pets
        if recommended_qty == 0:
            continue

        matching = find_matching_items(context.category_items, definition, MatchMode.STRICT)
        actual = strategy.calculate_actual_quantity(matching, definition, context)

        item_results.append(ItemCalculationResult(
            definition=definition,
            recommended_qty=recommended_qty,
            actual_qty=actual.quantity,
            matching_items=matching,
            has_marked_as_enough=any(item.marked_as_enough for item in matching),
            actual_calories=actual.calories,
        ))

    result = strategy.aggregate_totals(item_results, context)
    logger.debug(
        f"{category_id}: {result.total_actual}/{result.total_needed}, "
        f"{len(result.shortages)} shortages"
    )
    return result


def has_enough_inventory(
    category_id: str,
    result: ShortageCalculationResult,
    registry: Optional[StrategyRegistry] = None,
    settings: Optional[Settings] = None,
) -> bool:
    registry = registry or create_default_registry(settings)
    return registry.get_strategy(category_id).has_enough_inventory(result)


def calculate_completion_percentage(
    result: ShortageCalculationResult,
    has_recommendations: bool,
    item_count: int,
) -> float:
    """
    Uncapped completion percentage.

    Calorie-based when the result carries calorie totals, otherwise
    total_actual / total_needed.
    """
    if not has_recommendations:
        return FULL_PREPAREDNESS if item_count > 0 else EMPTY_PREPAREDNESS

    if result.total_needed_calories is not None:
        actual, needed = result.total_actual_calories or 0, result.total_needed_calories
    else:
        actual, needed = result.total_actual, result.total_needed

    if needed <= 0:
        return FULL_PREPAREDNESS
    return round(actual / needed * 100)


def count_item_statuses(
    category_items: Sequence[InventoryItem],
    household: HouseholdConfig,
    recommended_items: Sequence[RecommendedItemDefinition],
    children_multiplier: Optional[float] = None,
    today: Optional[date] = None,
    settings: Optional[Settings] = None,
) -> dict:
    """Critical / warning / ok counts for the items in a category."""
    counts = {ItemStatus.CRITICAL: 0, ItemStatus.WARNING: 0, ItemStatus.OK: 0}

    for item in category_items:
        recommended = get_recommended_quantity_for_item(
            item, household, recommended_items, children_multiplier, settings
        )
        if recommended > 0:
            status = calculate_item_status(item, recommended, today, settings)
        else:
            status = ItemStatus.CRITICAL if item.quantity == 0 else ItemStatus.OK
        counts[status] += 1

    return counts


def calculate_category_status(
    category_id: str,
    items: Sequence[InventoryItem],
    household: HouseholdConfig,
    recommended_items: Sequence[RecommendedItemDefinition],
    disabled_recommended_items: Sequence[str] = (),
    options: Optional[CalculationOptions] = None,
    registry: Optional[StrategyRegistry] = None,
    settings: Optional[Settings] = None,
    today: Optional[date] = None,
) -> CategoryStatusSummary:
    """
    Status summary for one category.

    Status rules, in order:
        - category has enough inventory -> ok
        - any critical item, or completion below the critical threshold -> critical
        - any warning item, or completion below the warning threshold -> warning
        - ok
    """
    settings = settings or get_settings()
    registry = registry or create_default_registry(settings)
    resolved = resolve_calculation_options(options, settings)

    category_items = [item for item in items if item.category_id == category_id]
    counts = count_item_statuses(
        category_items,
        household,
        recommended_items,
        resolved.children_multiplier,
        today,
        settings,
    )

    result = calculate_category_shortages(
        category_id,
        items,
        household,
        recommended_items,
        disabled_recommended_items,
        resolved,
        registry,
        settings,
    )

    has_recommendations = bool(
        get_enabled_definitions(category_id, recommended_items, disabled_recommended_items)
    )

    # With an empty catalog, only food and water still have requirements
    is_food_or_water = (
        category_id in settings.food_category_ids or category_id == WATER_CATEGORY_ID
    )
    if not recommended_items and not is_food_or_water:
        has_enough = True
    else:
        has_enough = has_enough_inventory(category_id, result, registry)

    percentage = calculate_completion_percentage(
        result, has_recommendations, len(category_items)
    )

    if has_enough:
        status = ItemStatus.OK
    elif counts[ItemStatus.CRITICAL] > 0 or percentage < settings.critical_percentage_threshold:
        status = ItemStatus.CRITICAL
    elif counts[ItemStatus.WARNING] > 0 or percentage < settings.warning_percentage_threshold:
        status = ItemStatus.WARNING
    else:
        status = ItemStatus.OK

    return CategoryStatusSummary(
        category_id=category_id,
        item_count=len(category_items),
        status=status,
        completion_percentage=FULL_PREPAREDNESS if has_enough else min(percentage, 100),
        critical_count=counts[ItemStatus.CRITICAL],
        warning_count=counts[ItemStatus.WARNING],
        ok_count=counts[ItemStatus.OK],
        shortages=result.shortages,
        total_actual=result.total_actual,
        total_needed=result.total_needed,
        primary_unit=result.primary_unit,
        total_actual_calories=result.total_actual_calories,
        total_needed_calories=result.total_needed_calories,
        missing_calories=result.missing_calories,
        drinking_water_needed=result.drinking_water_needed,
        preparation_water_needed=result.preparation_water_needed,
        has_recommendations=has_recommendations,
    )


def calculate_all_category_statuses(
    category_ids: Sequence[str],
    items: Sequence[InventoryItem],
    household: HouseholdConfig,
    recommended_items: Sequence[RecommendedItemDefinition],
    disabled_recommended_items: Sequence[str] = (),
    options: Optional[CalculationOptions] = None,
    registry: Optional[StrategyRegistry] = None,
    settings: Optional[Settings] = None,
    today: Optional[date] = None,
) -> List[CategoryStatusSummary]:
    """Status summaries for each category, in the order given."""
    settings = settings or get_settings()
    registry = registry or create_default_registry(settings)

    return [
        calculate_category_status(
            category_id,
            items,
            household,
            recommended_items,
            disabled_recommended_items,
            options,
            registry,
            settings,
            today,
        )
        for category_id in category_ids
    ]
