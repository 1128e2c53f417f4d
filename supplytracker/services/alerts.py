"""
Dashboard Alerts

Generates alerts for:
- expired and expiring items
- categories that are not sufficiently stocked
- food that needs more preparation water than is stored

Alerts carry an AlertCode and parameters only. Wording is up to the caller.
"""

import logging
from collections import Counter
from datetime import date
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from supplytracker.config import Settings, get_settings
from supplytracker.models.alerts import Alert
from supplytracker.models.common import WATER_CATEGORY_ID, AlertCode, AlertType
from supplytracker.models.household import CalculationOptions, HouseholdConfig
from supplytracker.models.inventory import InventoryItem, RecommendedItemDefinition
from supplytracker.services.category_status import calculate_category_shortages
from supplytracker.services.household import (
    ceil_quantity,
    get_recommended_quantity_for_item,
    resolve_calculation_options,
)
from supplytracker.services.status import days_until_expiration
from supplytracker.services.strategies.registry import StrategyRegistry, create_default_registry
from supplytracker.services.water import calculate_water_requirements

logger = logging.getLogger(__name__)

ALERT_PRIORITY = {
    AlertType.CRITICAL: 0,
    AlertType.WARNING: 1,
}


# ============================================================================
# Expiration
# ============================================================================

def generate_expiration_alerts(
    items: Sequence[InventoryItem],
    today: Optional[date] = None,
    settings: Optional[Settings] = None,
) -> List[Alert]:
    settings = settings or get_settings()
    alerts = []

    for item in items:
        days = days_until_expiration(item.expiration_date, item.never_expires, today)
        if days is None:
            continue

        if days < 0:
            alerts.append(Alert(
                id=f"expired-{item.id}",
                type=AlertType.CRITICAL,
                code=AlertCode.EXPIRED,
                item_name=item.name,
            ))
        elif days <= settings.expiring_soon_alert_days:
            alerts.append(Alert(
                id=f"expiring-soon-{item.id}",
                type=AlertType.WARNING,
                code=AlertCode.EXPIRING_SOON,
                item_name=item.name,
                params={"days": days},
            ))

    return alerts


# ============================================================================
# Category stock
# ============================================================================

def _category_stock_level(
    category_id: str,
    items: Sequence[InventoryItem],
    category_items: Sequence[InventoryItem],
    household: HouseholdConfig,
    recommended_items: Sequence[RecommendedItemDefinition],
    disabled_recommended_items: Sequence[str],
    options: CalculationOptions,
    registry: StrategyRegistry,
    settings: Settings,
) -> Tuple[float, bool]:
    """(percent of recommended, has enough) for a category."""
    if category_id in settings.food_category_ids:
        result = calculate_category_shortages(
            category_id, items, household, recommended_items,
            disabled_recommended_items, options, registry, settings,
        )
        actual = result.total_actual_calories or 0
        needed = result.total_needed_calories or 0
    elif category_id == WATER_CATEGORY_ID:
        result = calculate_category_shortages(
            category_id, items, household, recommended_items,
            disabled_recommended_items, options, registry, settings,
        )
        actual, needed = result.total_actual, result.total_needed
    else:
        actual = sum(item.quantity for item in category_items)
        needed = sum(
            get_recommended_quantity_for_item(
                item, household, recommended_items, options.children_multiplier, settings
            )
            for item in category_items
        )

    percent = actual / needed * 100 if needed > 0 else 100.0
    return percent, actual >= needed


def generate_category_stock_alerts(
    items: Sequence[InventoryItem],
    household: HouseholdConfig,
    recommended_items: Sequence[RecommendedItemDefinition],
    category_ids: Optional[Iterable[str]] = None,
    disabled_recommended_items: Sequence[str] = (),
    options: Optional[CalculationOptions] = None,
    registry: Optional[StrategyRegistry] = None,
    settings: Optional[Settings] = None,
) -> List[Alert]:
    """
    One alert per category that holds items but is not sufficiently stocked.

    Out of stock (every item at zero) is critical for non-food categories;
    otherwise the percent of recommended decides between critically low
    (critical) and running low (warning). Food is measured in calories.
    """
    settings = settings or get_settings()
    registry = registry or create_default_registry(settings)
    options = resolve_calculation_options(options, settings)

    if category_ids is None:
        category_ids = dict.fromkeys(item.category_id for item in items)

    alerts = []
    for category_id in category_ids:
        category_items = [item for item in items if item.category_id == category_id]
        if not category_items:
            continue

        percent, has_enough = _category_stock_level(
            category_id, items, category_items, household, recommended_items,
            disabled_recommended_items, options, registry, settings,
        )
        if has_enough:
            continue

        is_food = category_id in settings.food_category_ids
        out_of_stock = not is_food and all(item.quantity == 0 for item in category_items)

        if out_of_stock:
            alerts.append(Alert(
                id=f"category-out-of-stock-{category_id}",
                type=AlertType.CRITICAL,
                code=AlertCode.OUT_OF_STOCK,
                item_name=category_id,
            ))
        elif percent < settings.critically_low_stock_percentage:
            alerts.append(Alert(
                id=f"category-critically-low-{category_id}",
                type=AlertType.CRITICAL,
                code=AlertCode.CRITICALLY_LOW,
                item_name=category_id,
                params={"percent": round(percent)},
            ))
        elif percent < settings.low_stock_percentage:
            alerts.append(Alert(
                id=f"category-low-stock-{category_id}",
                type=AlertType.WARNING,
                code=AlertCode.RUNNING_LOW,
                item_name=category_id,
                params={"percent": round(percent)},
            ))

    return alerts


# ============================================================================
# Water
# ============================================================================

def generate_water_shortage_alerts(
    items: Sequence[InventoryItem],
    recommended_items: Sequence[RecommendedItemDefinition] = (),
) -> List[Alert]:
    requirements = calculate_water_requirements(items, recommended_items)

    if requirements.has_enough_water or requirements.water_shortfall <= 0:
        return []

    # Round up to one decimal
    shortfall = ceil_quantity(requirements.water_shortfall * 10) / 10
    return [Alert(
        id="water-shortage-preparation",
        type=AlertType.WARNING,
        code=AlertCode.WATER_PREPARATION_SHORTAGE,
        params={"liters": shortfall},
    )]


# ============================================================================
# Dashboard
# ============================================================================

def generate_dashboard_alerts(
    items: Sequence[InventoryItem],
    household: HouseholdConfig,
    recommended_items: Sequence[RecommendedItemDefinition],
    category_ids: Optional[Iterable[str]] = None,
    dismissed_alert_ids: Iterable[str] = (),
    disabled_recommended_items: Sequence[str] = (),
    options: Optional[CalculationOptions] = None,
    registry: Optional[StrategyRegistry] = None,
    settings: Optional[Settings] = None,
    today: Optional[date] = None,
) -> List[Alert]:
    """
    All dashboard alerts, critical first.

    Args:
        items: All inventory items
        household: Household configuration
        recommended_items: Recommended item catalog
        category_ids: Categories to check for stock alerts (defaults to the
            categories that hold items)
        dismissed_alert_ids: Alert ids the user dismissed
        disabled_recommended_items: Definition ids the user turned off
        options: Per-call overrides of settings defaults
        registry: Strategy registry
        settings: Engine settings
        today: Reference date for expiration checks

    Returns:
        Alerts sorted by priority, dismissed ones removed
    """
    settings = settings or get_settings()

    alerts = (
        generate_expiration_alerts(items, today, settings)
        + generate_category_stock_alerts(
            items,
            household,
            recommended_items,
            category_ids,
            disabled_recommended_items,
            options,
            registry,
            settings,
        )
        + generate_water_shortage_alerts(items, recommended_items)
    )

    dismissed = set(dismissed_alert_ids)
    visible = [a for a in alerts if a.id not in dismissed]
    if len(visible) != len(alerts):
        logger.debug(f"Hid {len(alerts) - len(visible)} dismissed alerts")

    return sorted(visible, key=lambda a: ALERT_PRIORITY[a.type])


def count_alerts(alerts: Sequence[Alert]) -> Dict[str, int]:
    """Alert counts per type plus a total."""
    counts = Counter(a.type.value for a in alerts)
    return {
        AlertType.CRITICAL.value: counts[AlertType.CRITICAL.value],
        AlertType.WARNING.value: counts[AlertType.WARNING.value],
        "total": len(alerts),
    }
