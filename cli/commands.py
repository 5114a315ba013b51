from __future__ import annotations

from pathlib import Path
from typing import List

from analysis.neighborhood import compute_neighborhood
from analysis.summary import summarize_graph
from core.config import LoaderConfig, NodeKind
from core.graph_loader import load_graph
from depgraph.exporter import export_graph


def summary_command(graph_path: Path, kind: NodeKind, config: LoaderConfig, top: int = 5) -> int:
    graph = load_graph(graph_path, kind, config)
    summary = summarize_graph(graph, top=top)
    print(f"Graph: {graph_path} ({kind.value})")
    print(f"Nodes: {summary.total_nodes} | Edges: {summary.total_edges}")
    print(f"Isolated nodes: {summary.isolated_nodes}")
    if summary.most_depended_on:
        print("Most depended on:")
        for node, count in summary.most_depended_on:
            print(f"- {node.short_name} ({count} inbound)")
    if summary.most_dependencies:
        print("Most dependencies:")
        for node, count in summary.most_dependencies:
            print(f"- {node.short_name} ({count} outbound)")
    return 0


def neighbors_command(
    graph_path: Path,
    kind: NodeKind,
    config: LoaderConfig,
    node_ids: List[str],
    inbound_depth: int = 1,
    outbound_depth: int = 1,
    output_path: Path | None = None,
) -> int:
    graph = load_graph(graph_path, kind, config)
    subgraph = compute_neighborhood(
        graph, node_ids, inbound_depth=inbound_depth, outbound_depth=outbound_depth
    )
    if output_path:
        export_graph(subgraph, output_path.resolve())
        print(f"Sub-graph written to {output_path} ({len(subgraph)} nodes)")
        return 0
    for node in subgraph.nodes:
        print(f"[{node.kind.value}] {node.id}")
    for edge in subgraph.edges:
        print(f"{edge.begin.short_name} -> {edge.end.short_name}")
    return 0
