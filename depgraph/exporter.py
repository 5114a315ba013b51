from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict

from depgraph.model import ClassNode, GraphModel, GraphNode


def _node_meta(node: GraphNode) -> Dict[str, Any]:
    if isinstance(node, ClassNode):
        return {"package": node.package, "build_targets": sorted(node.build_targets)}
    return {"classes": sorted(node.classes)}


def graph_to_json(graph: GraphModel) -> Dict[str, Any]:
    edges = []
    for edge in graph.edges:
        item: Dict[str, Any] = {"begin": edge.begin.id, "end": edge.end.id}
        if edge.meta:
            item["meta"] = dict(edge.meta)
        edges.append(item)
    return {
        "nodes": [{"name": node.id, "meta": _node_meta(node)} for node in graph.nodes],
        "edges": edges,
    }


def export_graph(graph: GraphModel, output_path: Path) -> None:
    output_path.write_text(json.dumps(graph_to_json(graph), indent=2), encoding="utf-8")
