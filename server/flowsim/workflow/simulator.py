"""
Workflow execution simulator - BFS execution order and synthetic step trace
"""

import logging
import random
from datetime import datetime, timedelta, timezone
from typing import Callable, List, Optional, Sequence

from ..models import (
    WorkflowDefinition, WorkflowNode, WorkflowEdge, StepStatus,
    StartNodeData, TaskNodeData, ApprovalNodeData, AutomatedNodeData, EndNodeData,
    SimulationStep, SimulationResponse
)
from ..config import SIMULATION_CONFIG
from .graph import build_adjacency, build_node_lookup, breadth_first_order, find_entry_node
from .validator import WorkflowValidator

logger = logging.getLogger(__name__)


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def format_timestamp(moment: datetime) -> str:
    """ISO 8601 with millisecond precision and a trailing 'Z' for UTC"""
    text = moment.isoformat(timespec="milliseconds")
    return text.replace("+00:00", "Z")


class WorkflowSimulator:
    """
    Preview simulator for validated workflows

    Algorithm:
    1. Re-validate the workflow; any error aborts with an empty trace
    2. Walk the directed graph breadth-first from the Entry node
    3. Emit one completed step per visited node with a synthetic duration
    """

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        clock: Optional[Callable[[], datetime]] = None,
        validator: Optional[WorkflowValidator] = None
    ):
        self.rng = rng or random.Random()
        self.clock = clock or _utc_now
        self.validator = validator or WorkflowValidator()

    def get_execution_order(self, workflow: WorkflowDefinition) -> List[str]:
        """Node IDs in BFS order from the Entry node (empty when there is none)"""
        entry_node = find_entry_node(workflow)
        if entry_node is None:
            return []

        node_ids = [node.id for node in workflow.nodes]
        adjacency = build_adjacency(node_ids, workflow.edges)
        return breadth_first_order(adjacency, entry_node.id)

    def simulate(self, workflow: WorkflowDefinition) -> SimulationResponse:
        """Simulate workflow execution; never raises on invalid graphs"""
        validation = self.validator.validate_workflow(workflow)
        if not validation.is_valid:
            logger.info(f"Simulation rejected: {len(validation.errors)} validation errors")
            return SimulationResponse(
                success=False,
                steps=[],
                errors=[error.message for error in validation.errors],
                duration=0
            )

        steps = self._generate_steps(workflow)
        total_duration = sum(step.duration for step in steps)

        logger.info(f"Simulated {len(steps)} steps, total duration {total_duration}ms")
        return SimulationResponse(
            success=True,
            steps=steps,
            errors=[],
            duration=total_duration
        )

    def _generate_steps(self, workflow: WorkflowDefinition) -> List[SimulationStep]:
        execution_order = self.get_execution_order(workflow)
        node_lookup = build_node_lookup(workflow.nodes)
        current_time = self.clock()
        steps: List[SimulationStep] = []

        for index, node_id in enumerate(execution_order):
            node = node_lookup.get(node_id)
            if node is None:
                continue

            step_duration = self._step_duration()
            current_time = current_time + timedelta(milliseconds=step_duration)

            steps.append(SimulationStep(
                node_id=node_id,
                node_type=node.type,
                node_title=node.data.title or f"Node {index + 1}",
                status=StepStatus.COMPLETED,
                timestamp=format_timestamp(current_time),
                details=self._describe(node),
                duration=step_duration
            ))
            logger.debug(f"Step {index + 1}: {node.type.value} node {node_id} ({step_duration}ms)")

        return steps

    def _step_duration(self) -> int:
        """Uniform integer milliseconds in [min, max)"""
        return self.rng.randrange(
            SIMULATION_CONFIG["step_duration_min_ms"],
            SIMULATION_CONFIG["step_duration_max_ms"]
        )

    def _describe(self, node: WorkflowNode) -> str:
        """Kind-specific step description"""
        data = node.data

        if isinstance(data, StartNodeData):
            return "Workflow started successfully"
        if isinstance(data, TaskNodeData):
            return f"Task assigned to {data.assignee.strip() or 'unassigned'}"
        if isinstance(data, ApprovalNodeData):
            role = data.approver_role.value if data.approver_role else ""
            return f"Pending approval from {role or 'approver'}"
        if isinstance(data, AutomatedNodeData):
            return f"Executing automated action: {data.action_label or data.action_id}"
        if isinstance(data, EndNodeData):
            return data.end_message.strip() or "Workflow completed"
        return ""


def simulate(
    nodes: Sequence[WorkflowNode],
    edges: Sequence[WorkflowEdge],
    simulator: Optional[WorkflowSimulator] = None
) -> SimulationResponse:
    """Simulate a workflow given as separate node and edge lists"""
    workflow = WorkflowDefinition(nodes=list(nodes), edges=list(edges))
    return (simulator or WorkflowSimulator()).simulate(workflow)
