"""API request and response models."""

from pydantic import BaseModel, Field
from typing import List


class AutomationAction(BaseModel):
    """Selectable automated action"""
    id: str = Field(..., description="Action ID")
    label: str = Field(..., description="Display label")
    description: str = Field("", description="What the action does")
    params: List[str] = Field(default_factory=list, description="Ordered parameter names")


class AutomationListResponse(BaseModel):
    automations: List[AutomationAction] = Field(..., description="Available automated actions")
