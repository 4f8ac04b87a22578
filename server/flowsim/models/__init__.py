"""Workflow data models and type definitions."""

from .enums import NodeType, ApproverRole, ErrorCategory, StepStatus
from .workflow import (
    KeyValuePair,
    StartNodeData,
    TaskNodeData,
    ApprovalNodeData,
    AutomatedNodeData,
    EndNodeData,
    NodeData,
    WorkflowNode,
    WorkflowEdge,
    WorkflowDefinition,
    default_node_data
)
from .results import (
    ValidationIssue,
    ValidationWarning,
    ValidationResult,
    SimulationStep,
    SimulationResponse
)
from .api_models import AutomationAction, AutomationListResponse

__all__ = [
    # Enums
    'NodeType',
    'ApproverRole',
    'ErrorCategory',
    'StepStatus',
    # Workflow
    'KeyValuePair',
    'StartNodeData',
    'TaskNodeData',
    'ApprovalNodeData',
    'AutomatedNodeData',
    'EndNodeData',
    'NodeData',
    'WorkflowNode',
    'WorkflowEdge',
    'WorkflowDefinition',
    'default_node_data',
    # Results
    'ValidationIssue',
    'ValidationWarning',
    'ValidationResult',
    'SimulationStep',
    'SimulationResponse',
    # API Models
    'AutomationAction',
    'AutomationListResponse'
]
