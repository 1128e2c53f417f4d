"""
Preparedness Score

Dashboard-level score: the share of categories whose status is ok.
"""

from typing import Optional, Sequence

from supplytracker.config import Settings
from supplytracker.models.common import ItemStatus
from supplytracker.models.shortages import CategoryStatusSummary
from supplytracker.services.status import get_status_from_score


def calculate_preparedness_score(statuses: Sequence[CategoryStatusSummary]) -> int:
    """
    Overall preparedness from 0 to 100.

    Args:
        statuses: Category summaries from calculate_all_category_statuses

    Returns:
        round(ok categories / total categories * 100), 0 for no categories
    """
    if not statuses:
        return 0

    ok = sum(1 for s in statuses if s.status == ItemStatus.OK)
    return round(ok / len(statuses) * 100)


def get_overall_status(score: float, settings: Optional[Settings] = None) -> ItemStatus:
    return get_status_from_score(score, settings)
