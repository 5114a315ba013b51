from __future__ import annotations

from collections import deque
from typing import Callable, Iterable, List, Set

from core.utils import unique
from depgraph.model import GraphModel, GraphNode


class UnknownNodeError(KeyError):
    def __init__(self, node_id: str):
        self.node_id = node_id
        super().__init__(node_id)

    def __str__(self) -> str:
        return f"Node '{self.node_id}' is not in the graph"


def _expand(
    start_ids: List[str],
    neighbors: Callable[[str], List[GraphNode]],
    max_depth: int,
) -> Set[str]:
    visited: Set[str] = set(start_ids)
    queue = deque((node_id, 0) for node_id in start_ids)
    while queue:
        current_id, depth = queue.popleft()
        if depth >= max_depth:
            continue
        for neighbor in neighbors(current_id):
            if neighbor.id not in visited:
                visited.add(neighbor.id)
                queue.append((neighbor.id, depth + 1))
    return visited


def compute_neighborhood(
    graph: GraphModel,
    node_ids: Iterable[str],
    inbound_depth: int = 1,
    outbound_depth: int = 1,
) -> GraphModel:
    """Sub-graph of everything within the given depths of ``node_ids``.

    Inbound and outbound expansion are independent: a node reached by
    following dependencies is not then expanded along its dependents.
    The result holds every edge of ``graph`` whose endpoints were both reached.
    """
    start_ids = unique(node_ids)
    for node_id in start_ids:
        if node_id not in graph:
            raise UnknownNodeError(node_id)

    keep = _expand(start_ids, graph.inbound, inbound_depth)
    keep |= _expand(start_ids, graph.outbound, outbound_depth)

    subgraph = GraphModel()
    for node in graph.nodes:
        if node.id in keep:
            subgraph.add_node_if_new(node)
    for edge in graph.edges:
        if edge.begin.id in keep and edge.end.id in keep:
            subgraph.add_edge_if_new(edge.begin, edge.end, edge.meta)
    return subgraph
