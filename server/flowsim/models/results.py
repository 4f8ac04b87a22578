"""Validation and simulation result models."""

from pydantic import BaseModel, Field
from typing import List, Optional
from .enums import ErrorCategory, NodeType, StepStatus


class ValidationIssue(BaseModel):
    node_id: Optional[str] = Field(None, description="Offending node ID")
    message: str = Field(..., description="Error message")
    type: ErrorCategory = Field(..., description="Error category")


class ValidationWarning(BaseModel):
    node_id: Optional[str] = Field(None, description="Related node ID")
    message: str = Field(..., description="Warning message")


class ValidationResult(BaseModel):
    is_valid: bool = Field(..., description="True when there are no errors")
    errors: List[ValidationIssue] = Field(default_factory=list, description="Errors")
    warnings: List[ValidationWarning] = Field(default_factory=list, description="Advisory warnings")


class SimulationStep(BaseModel):
    node_id: str = Field(..., description="Node ID")
    node_type: NodeType = Field(..., description="Node type")
    node_title: str = Field(..., description="Node title")
    status: StepStatus = Field(StepStatus.COMPLETED, description="Step status")
    timestamp: str = Field(..., description="Simulated completion time (ISO 8601)")
    details: str = Field("", description="UI description")
    duration: int = Field(0, description="Step duration in milliseconds")


class SimulationResponse(BaseModel):
    success: bool = Field(..., description="Overall success")
    steps: List[SimulationStep] = Field(default_factory=list, description="Steps in execution order")
    errors: List[str] = Field(default_factory=list, description="Error messages")
    duration: int = Field(0, description="Total simulated duration in milliseconds")

    @property
    def execution_order(self) -> List[str]:
        return [step.node_id for step in self.steps]
