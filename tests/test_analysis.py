import pytest

from analysis.neighborhood import UnknownNodeError, compute_neighborhood
from analysis.summary import summarize_graph
from core.config import NodeKind
from depgraph.json_parser import parse_package_graph_model_from_json


def chain_graph():
    # a -> b -> c -> d, e -> b, f isolated
    names = ["a", "b", "c", "d", "e", "f"]
    return parse_package_graph_model_from_json(
        {
            "nodes": [{"name": name, "meta": {"classes": []}} for name in names],
            "edges": [
                {"begin": "a", "end": "b"},
                {"begin": "b", "end": "c"},
                {"begin": "c", "end": "d"},
                {"begin": "e", "end": "b"},
            ],
        }
    )


def test_summary_counts() -> None:
    summary = summarize_graph(chain_graph(), top=2)

    assert summary.kind is NodeKind.PACKAGE
    assert summary.total_nodes == 6
    assert summary.total_edges == 4
    assert summary.isolated_nodes == 1
    assert [(node.id, count) for node, count in summary.most_depended_on] == [("b", 2), ("c", 1)]
    assert [(node.id, count) for node, count in summary.most_dependencies] == [("a", 1), ("b", 1)]


def test_neighborhood_depth_one() -> None:
    subgraph = compute_neighborhood(chain_graph(), ["b"])

    assert sorted(node.id for node in subgraph.nodes) == ["a", "b", "c", "e"]
    assert sorted(edge.id for edge in subgraph.edges) == ["a > b", "b > c", "e > b"]


def test_neighborhood_outbound_only() -> None:
    subgraph = compute_neighborhood(chain_graph(), ["a"], inbound_depth=0, outbound_depth=2)

    assert [node.id for node in subgraph.nodes] == ["a", "b", "c"]
    assert len(subgraph.edges) == 2


def test_neighborhood_unknown_node() -> None:
    with pytest.raises(UnknownNodeError):
        compute_neighborhood(chain_graph(), ["zzz"])


def test_summary_with_negative_top_lists_nothing() -> None:
    summary = summarize_graph(chain_graph(), top=-1)

    assert summary.most_depended_on == []
    assert summary.most_dependencies == []
