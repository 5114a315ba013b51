"""Turn graph JSON written by the dependency-graph generator into GraphModels.

The generic entry point takes the node factory as an argument so it stays
unaware of which node kind it assembles; the three ``parse_*`` wrappers bind
the class, package and target factories.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Mapping

from core.config import DEFAULT_LOADER_CONFIG, DuplicatePolicy, LoaderConfig, ShortNameConfig
from depgraph.display_names import shorten_class_name, shorten_package_name, shorten_target_name
from depgraph.errors import (
    ConflictingNodeError,
    DanglingEdgeError,
    MalformedGraphError,
    MalformedRecordError,
)
from depgraph.model import ClassNode, GraphModel, GraphNode, PackageNode, TargetNode
from depgraph.records import ClassNodeRecord, CollectionNodeRecord, EdgeRecord, validate_record

logger = logging.getLogger(__name__)

JsonGraph = Mapping[str, Any]
MakeNodeFunction = Callable[[Mapping[str, Any]], GraphNode]


def parse_graph_model_from_json(
    json_graph: JsonGraph,
    make_node: MakeNodeFunction,
    config: LoaderConfig | None = None,
) -> GraphModel:
    config = config or DEFAULT_LOADER_CONFIG
    node_records, edge_records = _split_graph(json_graph)
    graph = GraphModel()

    for index, node_data in enumerate(node_records):
        if not isinstance(node_data, Mapping):
            raise MalformedGraphError(f"nodes[{index}] is not an object")
        try:
            node = make_node(node_data)
        except MalformedRecordError as exc:
            raise exc.at("nodes", index) from exc
        except KeyError as exc:
            field = str(exc.args[0]) if exc.args else "<unknown>"
            raise MalformedRecordError(field, "nodes", index) from exc
        except (TypeError, AttributeError, ValueError) as exc:
            raise MalformedRecordError("<record>", "nodes", index, reason=str(exc)) from exc
        if graph.add_node_if_new(node):
            continue
        existing = graph.get_node_by_id(node.id)
        if existing == node:
            continue
        if config.duplicate_policy is DuplicatePolicy.REJECT:
            raise ConflictingNodeError(node.id, index)
        logger.warning(
            "Ignoring nodes[%d]: '%s' already loaded with different metadata", index, node.id
        )

    for index, edge_data in enumerate(edge_records):
        if not isinstance(edge_data, Mapping):
            raise MalformedGraphError(f"edges[{index}] is not an object")
        record = validate_record(EdgeRecord, edge_data, "edges", index)
        begin_node = graph.get_node_by_id(record.begin)
        if begin_node is None:
            raise DanglingEdgeError(record.begin, "begin", index)
        end_node = graph.get_node_by_id(record.end)
        if end_node is None:
            raise DanglingEdgeError(record.end, "end", index)
        graph.add_edge_if_new(begin_node, end_node, record.meta)

    logger.debug(
        "Parsed graph: %d/%d nodes, %d/%d edges",
        len(graph),
        len(node_records),
        len(graph.edges),
        len(edge_records),
    )
    return graph


def parse_class_graph_model_from_json(
    json_graph: JsonGraph, config: LoaderConfig | None = None
) -> GraphModel:
    config = config or DEFAULT_LOADER_CONFIG
    return parse_graph_model_from_json(
        json_graph, make_class_node_factory(config.short_names), config
    )


def parse_package_graph_model_from_json(
    json_graph: JsonGraph, config: LoaderConfig | None = None
) -> GraphModel:
    config = config or DEFAULT_LOADER_CONFIG
    return parse_graph_model_from_json(
        json_graph, make_package_node_factory(config.short_names), config
    )


def parse_target_graph_model_from_json(
    json_graph: JsonGraph, config: LoaderConfig | None = None
) -> GraphModel:
    config = config or DEFAULT_LOADER_CONFIG
    return parse_graph_model_from_json(
        json_graph, make_target_node_factory(config.short_names), config
    )


def make_class_node_factory(short_names: ShortNameConfig) -> MakeNodeFunction:
    def make_class_node(node_data: Mapping[str, Any]) -> ClassNode:
        record = validate_record(ClassNodeRecord, node_data)
        return ClassNode(
            id=record.name,
            display_name=record.name,
            short_name=shorten_class_name(record.name, short_names),
            package=record.meta.package,
            build_targets=frozenset(record.meta.build_targets),
        )

    return make_class_node


def make_package_node_factory(short_names: ShortNameConfig) -> MakeNodeFunction:
    def make_package_node(node_data: Mapping[str, Any]) -> PackageNode:
        record = validate_record(CollectionNodeRecord, node_data)
        return PackageNode(
            id=record.name,
            display_name=record.name,
            short_name=shorten_package_name(record.name, short_names),
            classes=frozenset(record.meta.classes),
        )

    return make_package_node


def make_target_node_factory(short_names: ShortNameConfig) -> MakeNodeFunction:
    def make_target_node(node_data: Mapping[str, Any]) -> TargetNode:
        record = validate_record(CollectionNodeRecord, node_data)
        return TargetNode(
            id=record.name,
            display_name=record.name,
            short_name=shorten_target_name(record.name, short_names),
            classes=frozenset(record.meta.classes),
        )

    return make_target_node


def _split_graph(json_graph: JsonGraph) -> tuple[list, list]:
    if not isinstance(json_graph, Mapping):
        raise MalformedGraphError("Graph JSON must be an object with 'nodes' and 'edges'")
    records: Dict[str, list] = {}
    for key in ("nodes", "edges"):
        value = json_graph.get(key)
        if not isinstance(value, list):
            raise MalformedGraphError(f"Graph JSON must have a '{key}' list")
        records[key] = value
    return records["nodes"], records["edges"]
