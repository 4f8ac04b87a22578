"""
Workflow validation logic: structure, connectivity, cycles and node data
"""

import logging
from typing import List, Optional, Sequence, Set, Tuple

from ..models import (
    WorkflowDefinition, WorkflowNode, WorkflowEdge, NodeType, ErrorCategory,
    TaskNodeData, AutomatedNodeData, EndNodeData,
    ValidationIssue, ValidationWarning, ValidationResult
)
from ..config import VALIDATION_CONFIG
from .graph import build_adjacency, breadth_first_order, has_cycle, find_nodes_by_type, resolved_edges

logger = logging.getLogger(__name__)


class WorkflowValidator:
    """
    Workflow validator

    Every rule is evaluated and every finding is reported; only an empty
    workflow stops validation early. Never raises on malformed graphs.
    """

    def _display_name(self, node: WorkflowNode) -> str:
        """Title when present, node ID otherwise"""
        title = (node.data.title or "").strip()
        return title or node.id

    def validate_workflow(self, workflow: WorkflowDefinition) -> ValidationResult:
        """
        Validate entire workflow

        Returns:
            ValidationResult: validity flag, ordered errors and warnings
        """
        errors: List[ValidationIssue] = []
        warnings: List[ValidationWarning] = []

        if not workflow.nodes:
            errors.append(ValidationIssue(
                message="Workflow is empty. Add at least an Entry and Exit node.",
                type=ErrorCategory.STRUCTURAL
            ))
            return ValidationResult(is_valid=False, errors=errors, warnings=warnings)

        entry_nodes = find_nodes_by_type(workflow, NodeType.ENTRY)
        exit_nodes = find_nodes_by_type(workflow, NodeType.EXIT)

        self._validate_required_nodes(entry_nodes, exit_nodes, errors)

        if len(entry_nodes) == 1:
            self._validate_connectivity(workflow, entry_nodes[0], errors)

        self._detect_cycles(workflow, warnings)

        for node in workflow.nodes:
            self._validate_node_data(node, errors)

        edges = resolved_edges((node.id for node in workflow.nodes), workflow.edges)
        self._validate_entry_exit_edges(edges, entry_nodes, exit_nodes, errors)

        self._validate_node_ids(workflow, errors)
        self._validate_edges(edges, errors)

        result = ValidationResult(
            is_valid=len(errors) == 0,
            errors=errors,
            warnings=warnings
        )
        logger.info(
            f"Validated workflow with {len(workflow.nodes)} nodes / {len(workflow.edges)} edges: "
            f"valid={result.is_valid}, errors={len(errors)}, warnings={len(warnings)}"
        )
        return result

    def _validate_required_nodes(
        self,
        entry_nodes: List[WorkflowNode],
        exit_nodes: List[WorkflowNode],
        errors: List[ValidationIssue]
    ):
        """Exactly one Entry node and at least one Exit node"""
        if not entry_nodes:
            errors.append(ValidationIssue(
                message="Workflow must have an Entry node",
                type=ErrorCategory.STRUCTURAL
            ))
        elif len(entry_nodes) > 1:
            errors.append(ValidationIssue(
                message="Workflow can only have one Entry node",
                type=ErrorCategory.STRUCTURAL
            ))

        if not exit_nodes:
            errors.append(ValidationIssue(
                message="Workflow must have at least one Exit node",
                type=ErrorCategory.STRUCTURAL
            ))

    def _validate_connectivity(
        self,
        workflow: WorkflowDefinition,
        entry_node: WorkflowNode,
        errors: List[ValidationIssue]
    ):
        """Every node must be reachable from the Entry node, ignoring edge direction"""
        node_ids = [node.id for node in workflow.nodes]
        adjacency = build_adjacency(node_ids, workflow.edges, undirected=True)
        connected = set(breadth_first_order(adjacency, entry_node.id))

        for node in workflow.nodes:
            if node.id not in connected:
                errors.append(ValidationIssue(
                    node_id=node.id,
                    message=f'Node "{self._display_name(node)}" is not connected to the workflow',
                    type=ErrorCategory.CONNECTION
                ))

    def _detect_cycles(self, workflow: WorkflowDefinition, warnings: List[ValidationWarning]):
        node_ids = [node.id for node in workflow.nodes]
        adjacency = build_adjacency(node_ids, workflow.edges)

        if has_cycle(node_ids, adjacency):
            logger.debug("Cycle detected in workflow graph")
            warnings.append(ValidationWarning(
                message="Workflow contains a cycle. This may cause infinite loops during execution."
            ))

    def _validate_node_data(self, node: WorkflowNode, errors: List[ValidationIssue]):
        """Validate the node's payload according to its kind"""
        data = node.data
        title = (data.title or "").strip()

        if not title:
            errors.append(ValidationIssue(
                node_id=node.id,
                message=f'Node "{node.id}" is missing a title',
                type=ErrorCategory.DATA
            ))

        if isinstance(data, TaskNodeData):
            min_length = VALIDATION_CONFIG["min_assignee_length"]
            if len((data.assignee or "").strip()) < min_length:
                errors.append(ValidationIssue(
                    node_id=node.id,
                    message=f'{node.type.label} "{title}" requires an assignee (min {min_length} characters)',
                    type=ErrorCategory.DATA
                ))

        elif isinstance(data, EndNodeData):
            min_length = VALIDATION_CONFIG["min_end_message_length"]
            if len((data.end_message or "").strip()) < min_length:
                errors.append(ValidationIssue(
                    node_id=node.id,
                    message=f'{node.type.label} node "{title}" requires an end message (min {min_length} characters)',
                    type=ErrorCategory.DATA
                ))

        elif isinstance(data, AutomatedNodeData):
            if not data.action_id:
                errors.append(ValidationIssue(
                    node_id=node.id,
                    message=f'{node.type.label} node "{title}" requires an action to be selected',
                    type=ErrorCategory.DATA
                ))

    def _validate_entry_exit_edges(
        self,
        edges: List[WorkflowEdge],
        entry_nodes: List[WorkflowNode],
        exit_nodes: List[WorkflowNode],
        errors: List[ValidationIssue]
    ):
        """Entry nodes accept no incoming edges, Exit nodes emit no outgoing edges"""
        targets = {edge.target for edge in edges}
        sources = {edge.source for edge in edges}

        for entry_node in entry_nodes:
            if entry_node.id in targets:
                errors.append(ValidationIssue(
                    node_id=entry_node.id,
                    message=f"{entry_node.type.label} node cannot have incoming connections",
                    type=ErrorCategory.CONNECTION
                ))

        for exit_node in exit_nodes:
            if exit_node.id in sources:
                errors.append(ValidationIssue(
                    node_id=exit_node.id,
                    message=f"{exit_node.type.label} node cannot have outgoing connections",
                    type=ErrorCategory.CONNECTION
                ))

    def _validate_node_ids(self, workflow: WorkflowDefinition, errors: List[ValidationIssue]):
        seen: Set[str] = set()
        reported: Set[str] = set()

        for node in workflow.nodes:
            if node.id in seen and node.id not in reported:
                reported.add(node.id)
                errors.append(ValidationIssue(
                    node_id=node.id,
                    message=f"Duplicate node ID '{node.id}' found.",
                    type=ErrorCategory.STRUCTURAL
                ))
            seen.add(node.id)

    def _validate_edges(self, edges: List[WorkflowEdge], errors: List[ValidationIssue]):
        """Reject self-connections and repeated source/target pairs between known nodes"""
        seen_pairs: Set[Tuple[str, str]] = set()

        for edge in edges:
            if edge.source == edge.target:
                errors.append(ValidationIssue(
                    node_id=edge.source,
                    message=f"Edge {edge.id}: Self-connection is not allowed.",
                    type=ErrorCategory.CONNECTION
                ))
                continue

            pair = (edge.source, edge.target)
            if pair in seen_pairs:
                errors.append(ValidationIssue(
                    node_id=edge.source,
                    message=f"Edge {edge.id}: Duplicate connection from '{edge.source}' to '{edge.target}'.",
                    type=ErrorCategory.CONNECTION
                ))
            seen_pairs.add(pair)


def validate(
    nodes: Sequence[WorkflowNode],
    edges: Sequence[WorkflowEdge],
    validator: Optional[WorkflowValidator] = None
) -> ValidationResult:
    """Validate a workflow given as separate node and edge lists"""
    workflow = WorkflowDefinition(nodes=list(nodes), edges=list(edges))
    return (validator or WorkflowValidator()).validate_workflow(workflow)
