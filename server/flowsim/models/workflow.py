"""Workflow node and edge models.

Node payloads form a tagged union: the ``type`` field of the payload is the
discriminant and must match the owning node's ``type``.
"""

from pydantic import BaseModel, Field, model_validator
from typing import Annotated, Dict, List, Literal, Optional, Union
from .enums import NodeType, ApproverRole


class KeyValuePair(BaseModel):
    key: str = Field("", description="Entry key")
    value: str = Field("", description="Entry value")


class StartNodeData(BaseModel):
    type: Literal["start"] = "start"
    title: str = Field("Start", description="Node title")
    metadata: List[KeyValuePair] = Field(default_factory=list, description="Ordered workflow metadata")


class TaskNodeData(BaseModel):
    type: Literal["task"] = "task"
    title: str = Field("", description="Node title")
    description: str = Field("", description="Task description")
    assignee: str = Field("", description="Person responsible for the task")
    due_date: Optional[str] = Field(None, description="Due date (ISO date)")
    custom_fields: List[KeyValuePair] = Field(default_factory=list, description="Custom task fields")


class ApprovalNodeData(BaseModel):
    type: Literal["approval"] = "approval"
    title: str = Field("", description="Node title")
    approver_role: ApproverRole = Field(default_factory=ApproverRole.get_default, description="Role that must approve")
    auto_approve_threshold: Optional[int] = Field(
        None, ge=0, description="Auto-approve after this many days (None = disabled)"
    )


class AutomatedNodeData(BaseModel):
    type: Literal["automated"] = "automated"
    title: str = Field("", description="Node title")
    action_id: str = Field("", description="Selected automation action ID")
    action_label: str = Field("", description="Resolved automation action label")
    parameters: Dict[str, str] = Field(default_factory=dict, description="Action parameter values")


class EndNodeData(BaseModel):
    type: Literal["end"] = "end"
    title: str = Field("End", description="Node title")
    end_message: str = Field("", description="Message shown on completion")
    show_summary: bool = Field(default=False)


NodeData = Annotated[
    Union[StartNodeData, TaskNodeData, ApprovalNodeData, AutomatedNodeData, EndNodeData],
    Field(discriminator="type")
]

_DEFAULT_DATA = {
    NodeType.ENTRY: StartNodeData,
    NodeType.TASK: TaskNodeData,
    NodeType.APPROVAL: ApprovalNodeData,
    NodeType.AUTOMATED: AutomatedNodeData,
    NodeType.EXIT: EndNodeData,
}


def default_node_data(node_type: NodeType) -> NodeData:
    """Create the default payload for a freshly placed node of the given kind"""
    return _DEFAULT_DATA[NodeType(node_type)]()


class WorkflowNode(BaseModel):
    id: str = Field(..., description="Node ID")
    type: NodeType = Field(..., description="Node type")
    position: Dict[str, float] = Field(default={"x": 0, "y": 0})
    data: Optional[NodeData] = Field(None, description="Kind-specific payload")

    @model_validator(mode="before")
    @classmethod
    def _tag_payload(cls, values):
        # Payloads sent without a discriminant inherit the node's kind
        if isinstance(values, dict) and isinstance(values.get("data"), dict):
            data = values["data"]
            if "type" not in data and "type" in values:
                node_type = values["type"]
                if isinstance(node_type, NodeType):
                    node_type = node_type.value
                values = {**values, "data": {**data, "type": node_type}}
        return values

    @model_validator(mode="after")
    def _check_payload_kind(self) -> "WorkflowNode":
        if self.data is None:
            self.data = default_node_data(self.type)
        elif NodeType(self.data.type) != self.type:
            raise ValueError(
                f"Node '{self.id}' is declared as '{self.type.value}' "
                f"but carries '{NodeType(self.data.type).value}' data"
            )
        return self

    @property
    def title(self) -> str:
        return self.data.title


class WorkflowEdge(BaseModel):
    id: str = Field(..., description="Edge ID")
    source: str = Field(..., description="Source node ID")
    target: str = Field(..., description="Target node ID")


class WorkflowDefinition(BaseModel):
    nodes: List[WorkflowNode] = Field(default_factory=list, description="Node list")
    edges: List[WorkflowEdge] = Field(default_factory=list, description="Edge list")
