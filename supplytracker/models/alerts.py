"""Dashboard alert models."""

from typing import Any, Dict, Optional

from pydantic import BaseModel, Field

from supplytracker.models.common import AlertCode, AlertType


class Alert(BaseModel):
    """
    A dashboard alert.

    Carries a code plus parameters; the presentation layer turns it into text.
    """

    id: str = Field(..., description="Stable id, used to dismiss the alert")
    type: AlertType
    code: AlertCode
    item_name: Optional[str] = None
    params: Dict[str, Any] = Field(default_factory=dict)
