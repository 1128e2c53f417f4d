"""
Supply Tracker Calculation Services

Pure functions over the data models. No I/O, no module-level state.
"""

from supplytracker.services.alerts import generate_dashboard_alerts
from supplytracker.services.category_status import (
    calculate_all_category_statuses,
    calculate_category_shortages,
    calculate_category_status,
)
from supplytracker.services.household import (
    calculate_people_multiplier,
    calculate_recommended_quantity,
)
from supplytracker.services.preparedness import calculate_preparedness_score
from supplytracker.services.shopping_list import build_shopping_list
from supplytracker.services.shortage_calculator import (
    calculate_missing_quantity,
    calculate_total_missing_quantity,
)
from supplytracker.services.status import calculate_item_status
from supplytracker.services.water import calculate_water_requirements

__all__ = [
    "calculate_people_multiplier",
    "calculate_recommended_quantity",
    "calculate_item_status",
    "calculate_missing_quantity",
    "calculate_total_missing_quantity",
    "calculate_category_shortages",
    "calculate_category_status",
    "calculate_all_category_statuses",
    "calculate_water_requirements",
    "calculate_preparedness_score",
    "generate_dashboard_alerts",
    "build_shopping_list",
]
