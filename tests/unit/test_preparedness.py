"""Tests for the preparedness score."""

import pytest

from supplytracker.models.common import ItemStatus
from supplytracker.models.shortages import CategoryStatusSummary
from supplytracker.services.preparedness import calculate_preparedness_score, get_overall_status


def create_summary(category_id: str, status: ItemStatus) -> CategoryStatusSummary:
    return CategoryStatusSummary(category_id=category_id, status=status)


class TestPreparednessScore:
    """Tests for preparedness scoring."""

    def test_no_categories(self):
        assert calculate_preparedness_score([]) == 0

    def test_share_of_ok_categories(self):
        statuses = [
            create_summary("food", ItemStatus.OK),
            create_summary("water-beverages", ItemStatus.WARNING),
            create_summary("tools-supplies", ItemStatus.OK),
        ]
        assert calculate_preparedness_score(statuses) == 67

    def test_all_ok(self):
        statuses = [create_summary("food", ItemStatus.OK), create_summary("pets", ItemStatus.OK)]
        assert calculate_preparedness_score(statuses) == 100

    @pytest.mark.parametrize("score,expected", [
        (100, ItemStatus.OK),
        (67, ItemStatus.WARNING),
        (33, ItemStatus.CRITICAL),
    ])
    def test_overall_status(self, settings, score, expected):
        assert get_overall_status(score, settings) == expected
