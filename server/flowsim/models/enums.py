"""Enum types for workflow models."""

from enum import Enum


class NodeType(str, Enum):
    ENTRY = "start"
    TASK = "task"
    APPROVAL = "approval"
    AUTOMATED = "automated"
    EXIT = "end"

    @property
    def label(self) -> str:
        """Human-readable kind name used in messages"""
        return _NODE_TYPE_LABELS[self]


_NODE_TYPE_LABELS = {
    NodeType.ENTRY: "Entry",
    NodeType.TASK: "Task",
    NodeType.APPROVAL: "Approval",
    NodeType.AUTOMATED: "Automated",
    NodeType.EXIT: "Exit",
}


class ApproverRole(str, Enum):
    MANAGER = "Manager"
    HRBP = "HRBP"
    DIRECTOR = "Director"
    VP = "VP"
    EXECUTIVE = "Executive"

    @classmethod
    def get_default(cls) -> "ApproverRole":
        """Return default approver role"""
        return cls.MANAGER


class ErrorCategory(str, Enum):
    STRUCTURAL = "structural"
    CONNECTION = "connection"
    DATA = "data"


class StepStatus(str, Enum):
    COMPLETED = "completed"
    FAILED = "failed"
    PENDING = "pending"
