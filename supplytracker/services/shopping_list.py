"""
Shopping List

Items held below their recommended quantity, as a pandas DataFrame
grouped by category.
"""

import logging
from typing import Optional, Sequence

import pandas as pd

from supplytracker.config import Settings, get_settings
from supplytracker.models.household import CalculationOptions, HouseholdConfig
from supplytracker.models.inventory import InventoryItem, RecommendedItemDefinition
from supplytracker.services.household import (
    get_recommended_quantity_for_item,
    resolve_calculation_options,
)

logger = logging.getLogger(__name__)

SHOPPING_LIST_COLUMNS = [
    "category_id",
    "item_id",
    "item_name",
    "unit",
    "current",
    "recommended",
    "needed",
]


def build_shopping_list(
    items: Sequence[InventoryItem],
    household: HouseholdConfig,
    recommended_items: Sequence[RecommendedItemDefinition],
    options: Optional[CalculationOptions] = None,
    settings: Optional[Settings] = None,
) -> pd.DataFrame:
    """
    Build the restock list.

    Args:
        items: All inventory items
        household: Household configuration
        recommended_items: Recommended item catalog
        options: Per-call overrides (children multiplier)
        settings: Engine settings

    Returns:
        DataFrame with SHOPPING_LIST_COLUMNS, sorted by category then name.
        Items marked as enough are skipped.
    """
    settings = settings or get_settings()
    options = resolve_calculation_options(options, settings)

    rows = []
    for item in items:
        if item.marked_as_enough:
            continue

        recommended = get_recommended_quantity_for_item(
            item,
            household,
            recommended_items,
            options.children_multiplier,
            settings,
        )
        if item.quantity >= recommended:
            continue

        rows.append({
            "category_id": item.category_id,
            "item_id": item.id,
            "item_name": item.name,
            "unit": item.unit.value,
            "current": item.quantity,
            "recommended": recommended,
            "needed": recommended - item.quantity,
        })

    logger.debug(f"Shopping list has {len(rows)} items")

    df = pd.DataFrame(rows, columns=SHOPPING_LIST_COLUMNS)
    if df.empty:
        return df
    return df.sort_values(["category_id", "item_name"], kind="stable").reset_index(drop=True)


def summarize_shopping_list(df: pd.DataFrame) -> pd.DataFrame:
    """Row count and total needed per category."""
    if df.empty:
        return pd.DataFrame(columns=["category_id", "items", "total_needed"])

    return (
        df.groupby("category_id", sort=True)
        .agg(items=("item_id", "count"), total_needed=("needed", "sum"))
        .reset_index()
    )


def format_shopping_list(df: pd.DataFrame) -> str:
    """Plain-text list, one block per category."""
    if df.empty:
        return ""

    lines = []
    for category_id, group in df.groupby("category_id", sort=True):
        lines.append(category_id)
        lines.append("-" * 40)
        for row in group.itertuples(index=False):
            lines.append(f"[ ] {row.item_name}: {row.needed:g} {row.unit}")
            lines.append(f"    current: {row.current:g}, recommended: {row.recommended:g}")
        lines.append("")

    return "\n".join(lines)
