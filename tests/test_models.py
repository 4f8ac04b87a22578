"""
Workflow model tests
"""
import pytest
from pydantic import ValidationError

from flowsim.models import (
    WorkflowNode, WorkflowDefinition, NodeType, ApproverRole,
    StartNodeData, TaskNodeData, ApprovalNodeData, AutomatedNodeData, EndNodeData,
    default_node_data
)


class TestNodePayloads:
    """Tagged node payloads"""

    def test_payload_parsed_by_discriminant(self, sample_workflow):
        graph = WorkflowDefinition.model_validate(sample_workflow)

        assert isinstance(graph.nodes[0].data, StartNodeData)
        assert isinstance(graph.nodes[1].data, TaskNodeData)
        assert isinstance(graph.nodes[2].data, EndNodeData)
        assert graph.nodes[0].data.metadata[0].key == "owner"
        assert graph.nodes[1].data.assignee == "Jo"

    def test_payload_without_type_inherits_node_kind(self):
        node = WorkflowNode.model_validate({
            "id": "auto1",
            "type": "automated",
            "data": {"title": "Notify", "action_id": "send_email", "parameters": {"to": "hr@example.com"}}
        })

        assert isinstance(node.data, AutomatedNodeData)
        assert node.data.parameters == {"to": "hr@example.com"}

    def test_mismatched_payload_is_rejected(self):
        with pytest.raises(ValidationError):
            WorkflowNode.model_validate({
                "id": "t1",
                "type": "task",
                "data": {"type": "end", "title": "Done", "end_message": "Finished"}
            })

    def test_unknown_node_type_is_rejected(self):
        with pytest.raises(ValidationError):
            WorkflowNode.model_validate({"id": "x", "type": "decision", "data": {"title": "X"}})

    def test_missing_payload_uses_defaults(self):
        node = WorkflowNode(id="s", type=NodeType.ENTRY)

        assert isinstance(node.data, StartNodeData)
        assert node.title == "Start"

    def test_approval_threshold_must_be_non_negative(self):
        with pytest.raises(ValidationError):
            ApprovalNodeData(title="Approve", auto_approve_threshold=-1)

        assert ApprovalNodeData(title="Approve", auto_approve_threshold=0).auto_approve_threshold == 0

    def test_approver_role_is_closed_set(self):
        with pytest.raises(ValidationError):
            ApprovalNodeData(title="Approve", approver_role="Intern")

        assert ApprovalNodeData(title="Approve", approver_role="HRBP").approver_role == ApproverRole.HRBP


class TestDefaultNodeData:
    """Default payloads for freshly placed nodes"""

    def test_defaults_per_kind(self):
        assert default_node_data(NodeType.ENTRY).title == "Start"
        assert default_node_data(NodeType.EXIT).title == "End"
        assert default_node_data(NodeType.EXIT).show_summary is False
        assert default_node_data(NodeType.TASK).assignee == ""
        assert default_node_data(NodeType.AUTOMATED).parameters == {}

        approval = default_node_data(NodeType.APPROVAL)
        assert approval.approver_role == ApproverRole.MANAGER
        assert approval.auto_approve_threshold is None

    def test_accepts_wire_value(self):
        assert isinstance(default_node_data("task"), TaskNodeData)

    def test_default_roles(self):
        assert ApproverRole.get_default() == ApproverRole.MANAGER
        assert ApprovalNodeData().approver_role == ApproverRole.get_default()

    def test_node_type_labels(self):
        assert [node_type.label for node_type in NodeType] == ["Entry", "Task", "Approval", "Automated", "Exit"]
