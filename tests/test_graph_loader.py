import json
from pathlib import Path

import pytest

from core.config import NodeKind
from core.graph_loader import load_graph, load_graph_document
from depgraph.errors import GraphFileError, MalformedGraphError, MalformedRecordError
from depgraph.exporter import export_graph

CLASS_GRAPH = {
    "nodes": [
        {"name": "a.A", "meta": {"package": "a", "build_targets": ["//a:a_java"]}},
        {"name": "a.B", "meta": {"package": "a", "build_targets": ["//a:a_java"]}},
    ],
    "edges": [{"begin": "a.A", "end": "a.B"}],
}

PACKAGE_GRAPH = {
    "nodes": [{"name": "a", "meta": {"classes": ["a.A", "a.B"]}}],
    "edges": [],
}


def write_json(path: Path, payload) -> Path:
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path


def test_load_bare_graph(tmp_path: Path) -> None:
    path = write_json(tmp_path / "class.json", CLASS_GRAPH)

    graph = load_graph(path, NodeKind.CLASS)

    assert [node.id for node in graph.nodes] == ["a.A", "a.B"]
    assert len(graph.edges) == 1


def test_load_combined_document(tmp_path: Path) -> None:
    path = write_json(
        tmp_path / "all.json",
        {
            "class_graph": CLASS_GRAPH,
            "package_graph": PACKAGE_GRAPH,
            "build_metadata": {"commit_hash": "abc123", "commit_cr_position": 42},
        },
    )

    document = load_graph_document(path)

    assert len(document.class_graph) == 2
    assert document.package_graph.get_node_by_id("a").classes == frozenset({"a.A", "a.B"})
    assert document.target_graph is None
    assert document.build_metadata.commit_hash == "abc123"
    assert document.build_metadata.commit_cr_position == 42
    assert document.build_metadata.commit_time is None


def test_load_graph_picks_kind_from_combined_document(tmp_path: Path) -> None:
    path = write_json(tmp_path / "all.json", {"class_graph": CLASS_GRAPH, "package_graph": PACKAGE_GRAPH})

    graph = load_graph(path, NodeKind.PACKAGE)

    assert [node.id for node in graph.nodes] == ["a"]
    with pytest.raises(MalformedGraphError):
        load_graph(path, NodeKind.TARGET)


def test_invalid_json_file(tmp_path: Path) -> None:
    path = tmp_path / "broken.json"
    path.write_text("{not json", encoding="utf-8")

    with pytest.raises(GraphFileError) as excinfo:
        load_graph(path, NodeKind.CLASS)

    assert excinfo.value.path == path


def test_missing_file(tmp_path: Path) -> None:
    with pytest.raises(GraphFileError):
        load_graph(tmp_path / "nope.json", NodeKind.CLASS)


def test_document_without_graphs(tmp_path: Path) -> None:
    path = write_json(tmp_path / "empty.json", {"build_metadata": {}})

    with pytest.raises(MalformedGraphError):
        load_graph_document(path)


def test_exported_graph_loads_again(tmp_path: Path) -> None:
    graph = load_graph(write_json(tmp_path / "class.json", CLASS_GRAPH), NodeKind.CLASS)
    output = tmp_path / "out.json"

    export_graph(graph, output)
    reloaded = load_graph(output, NodeKind.CLASS)

    assert reloaded.nodes == graph.nodes
    assert reloaded.edges == graph.edges


def test_build_metadata_types_are_checked(tmp_path: Path) -> None:
    path = write_json(
        tmp_path / "all.json",
        {"class_graph": CLASS_GRAPH, "build_metadata": {"commit_cr_position": "42"}},
    )

    with pytest.raises(MalformedRecordError) as excinfo:
        load_graph_document(path)

    assert excinfo.value.field == "commit_cr_position"
    assert excinfo.value.section == "build_metadata"
