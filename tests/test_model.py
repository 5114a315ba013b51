import pytest

from depgraph.model import ClassNode, Edge, GraphModel, PackageNode


def make_class(name: str) -> ClassNode:
    return ClassNode(id=name, display_name=name, short_name=name, package="p")


def test_add_node_if_new_keeps_first() -> None:
    graph = GraphModel()
    first = make_class("p.A")
    second = ClassNode(id="p.A", display_name="other", short_name="other", package="q")

    assert graph.add_node_if_new(first)
    assert not graph.add_node_if_new(second)
    assert graph.get_node_by_id("p.A") is first
    assert "p.A" in graph
    assert len(graph) == 1


def test_edges_compare_by_endpoint_ids() -> None:
    a, b = make_class("p.A"), make_class("p.B")

    assert Edge(a, b) == Edge(a, b, meta={"weight": 3})
    assert Edge(a, b) != Edge(b, a)
    assert len({Edge(a, b), Edge(a, b)}) == 1
    assert Edge(a, b).id == "p.A > p.B"


def test_add_edge_tracks_adjacency() -> None:
    graph = GraphModel()
    a, b, c = make_class("p.A"), make_class("p.B"), make_class("p.C")
    for node in (a, b, c):
        graph.add_node_if_new(node)

    assert graph.add_edge_if_new(a, b)
    assert graph.add_edge_if_new(a, c)
    assert not graph.add_edge_if_new(a, b)

    assert [node.id for node in graph.outbound("p.A")] == ["p.B", "p.C"]
    assert [node.id for node in graph.inbound("p.B")] == ["p.A"]
    assert graph.inbound("p.A") == []


def test_add_edge_requires_known_nodes() -> None:
    graph = GraphModel()
    a = make_class("p.A")
    graph.add_node_if_new(a)

    with pytest.raises(KeyError):
        graph.add_edge_if_new(a, make_class("p.Missing"))
    assert graph.edges == []


def test_kind_of_empty_and_populated_graph() -> None:
    graph = GraphModel()
    assert graph.kind is None

    graph.add_node_if_new(PackageNode(id="p", display_name="p", short_name="p"))
    assert graph.kind.value == "package"
