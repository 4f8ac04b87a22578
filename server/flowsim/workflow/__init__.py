"""Workflow validation and simulation logic."""

from .validator import WorkflowValidator, validate
from .simulator import WorkflowSimulator, simulate

__all__ = [
    'WorkflowValidator',
    'WorkflowSimulator',
    'validate',
    'simulate'
]
