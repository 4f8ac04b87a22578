"""
Graph primitives shared by the validator and the simulator.

Edges whose endpoints are not known node IDs are skipped, so dangling
references behave as if they were absent.
"""

from collections import deque
from typing import Dict, Iterable, List, Optional, Set

from ..models import WorkflowDefinition, WorkflowNode, WorkflowEdge, NodeType


def build_node_lookup(nodes: Iterable[WorkflowNode]) -> Dict[str, WorkflowNode]:
    """Map node ID to node (first occurrence wins on duplicate IDs)"""
    lookup: Dict[str, WorkflowNode] = {}
    for node in nodes:
        lookup.setdefault(node.id, node)
    return lookup


def resolved_edges(node_ids: Iterable[str], edges: Iterable[WorkflowEdge]) -> List[WorkflowEdge]:
    """Edges whose source and target are both known node IDs, in original order"""
    known = set(node_ids)
    return [edge for edge in edges if edge.source in known and edge.target in known]


def build_adjacency(
    node_ids: Iterable[str],
    edges: Iterable[WorkflowEdge],
    undirected: bool = False
) -> Dict[str, List[str]]:
    """
    Build an adjacency list preserving edge insertion order.

    Args:
        node_ids: Known node IDs; every one gets an entry
        edges: Edge list
        undirected: Also add the reverse direction of every edge

    Returns:
        Dict: node ID -> successor IDs in edge order
    """
    adjacency: Dict[str, List[str]] = {node_id: [] for node_id in node_ids}

    for edge in resolved_edges(adjacency, edges):
        adjacency[edge.source].append(edge.target)
        if undirected:
            adjacency[edge.target].append(edge.source)

    return adjacency


def breadth_first_order(adjacency: Dict[str, List[str]], start: Optional[str]) -> List[str]:
    """
    Visit nodes reachable from ``start`` in BFS (hop distance) order.

    A node may be enqueued more than once through reconvergent paths; it is
    only emitted on its first dequeue.
    """
    if start is None or start not in adjacency:
        return []

    visited: Set[str] = set()
    order: List[str] = []
    queue = deque([start])

    while queue:
        current = queue.popleft()
        if current in visited:
            continue

        visited.add(current)
        order.append(current)

        for neighbor in adjacency.get(current, []):
            if neighbor not in visited:
                queue.append(neighbor)

    return order


def has_cycle(node_ids: Iterable[str], adjacency: Dict[str, List[str]]) -> bool:
    """Detect a directed cycle with an iterative DFS rooted at every unvisited node"""
    visited: Set[str] = set()
    on_path: Set[str] = set()

    for root in node_ids:
        if root in visited:
            continue

        visited.add(root)
        on_path.add(root)
        # (node, index of the next successor to explore)
        stack = [(root, 0)]

        while stack:
            node_id, index = stack[-1]
            successors = adjacency.get(node_id, [])

            if index >= len(successors):
                on_path.discard(node_id)
                stack.pop()
                continue

            stack[-1] = (node_id, index + 1)
            neighbor = successors[index]

            if neighbor in on_path:
                return True
            if neighbor not in visited:
                visited.add(neighbor)
                on_path.add(neighbor)
                stack.append((neighbor, 0))

    return False


def find_nodes_by_type(workflow: WorkflowDefinition, node_type: NodeType) -> List[WorkflowNode]:
    return [node for node in workflow.nodes if node.type == node_type]


def find_entry_node(workflow: WorkflowDefinition) -> Optional[WorkflowNode]:
    """Return the first Entry node, if any"""
    entry_nodes = find_nodes_by_type(workflow, NodeType.ENTRY)
    return entry_nodes[0] if entry_nodes else None
