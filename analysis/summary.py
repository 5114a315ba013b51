from __future__ import annotations

from typing import List, NamedTuple, Tuple

from core.config import NodeKind
from depgraph.model import GraphModel, GraphNode


class GraphSummary(NamedTuple):
    kind: NodeKind | None
    total_nodes: int
    total_edges: int
    isolated_nodes: int
    most_depended_on: List[Tuple[GraphNode, int]]
    most_dependencies: List[Tuple[GraphNode, int]]


def _top(counts: List[Tuple[GraphNode, int]], top: int) -> List[Tuple[GraphNode, int]]:
    ranked = sorted(
        (item for item in counts if item[1] > 0), key=lambda item: (-item[1], item[0].id)
    )
    return ranked[:max(top, 0)]


def summarize_graph(graph: GraphModel, top: int = 5) -> GraphSummary:
    inbound = [(node, len(graph.inbound(node.id))) for node in graph.nodes]
    outbound = [(node, len(graph.outbound(node.id))) for node in graph.nodes]
    isolated = sum(
        1 for (_, ins), (_, outs) in zip(inbound, outbound) if ins == 0 and outs == 0
    )
    return GraphSummary(
        kind=graph.kind,
        total_nodes=len(graph),
        total_edges=len(graph.edges),
        isolated_nodes=isolated,
        most_depended_on=_top(inbound, top),
        most_dependencies=_top(outbound, top),
    )
