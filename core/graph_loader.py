from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, Dict, Mapping

from core.config import (
    BUILD_METADATA_KEY,
    DEFAULT_LOADER_CONFIG,
    GRAPH_DOCUMENT_KEYS,
    LoaderConfig,
    NodeKind,
)
from depgraph.errors import GraphFileError, MalformedGraphError
from depgraph.json_parser import (
    parse_class_graph_model_from_json,
    parse_package_graph_model_from_json,
    parse_target_graph_model_from_json,
)
from depgraph.model import GraphModel
from depgraph.records import BuildMetadata, validate_record

logger = logging.getLogger(__name__)

PARSERS: Dict[NodeKind, Callable[[Mapping[str, Any], LoaderConfig], GraphModel]] = {
    NodeKind.CLASS: parse_class_graph_model_from_json,
    NodeKind.PACKAGE: parse_package_graph_model_from_json,
    NodeKind.TARGET: parse_target_graph_model_from_json,
}


@dataclass
class GraphDocument:
    graphs: Dict[NodeKind, GraphModel] = field(default_factory=dict)
    build_metadata: BuildMetadata = field(default_factory=BuildMetadata)

    @property
    def class_graph(self) -> GraphModel | None:
        return self.graphs.get(NodeKind.CLASS)

    @property
    def package_graph(self) -> GraphModel | None:
        return self.graphs.get(NodeKind.PACKAGE)

    @property
    def target_graph(self) -> GraphModel | None:
        return self.graphs.get(NodeKind.TARGET)


def read_json(path: Path) -> Any:
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise GraphFileError(path, exc.strerror or str(exc)) from exc
    except ValueError as exc:
        raise GraphFileError(path, f"invalid JSON ({exc})") from exc


def is_combined_document(data: Any) -> bool:
    return isinstance(data, Mapping) and any(key in data for key in GRAPH_DOCUMENT_KEYS.values())


def parse_graph_document(data: Any, config: LoaderConfig | None = None) -> GraphDocument:
    config = config or DEFAULT_LOADER_CONFIG
    if not is_combined_document(data):
        raise MalformedGraphError(
            "Expected a document with any of: " + ", ".join(GRAPH_DOCUMENT_KEYS.values())
        )
    document = GraphDocument(build_metadata=_parse_build_metadata(data.get(BUILD_METADATA_KEY)))
    for kind, key in GRAPH_DOCUMENT_KEYS.items():
        if key in data:
            document.graphs[kind] = PARSERS[kind](data[key], config)
            logger.debug("Loaded %s: %d nodes", key, len(document.graphs[kind]))
    return document


def load_graph_document(path: Path, config: LoaderConfig | None = None) -> GraphDocument:
    return parse_graph_document(read_json(path), config)


def load_graph(path: Path, kind: NodeKind, config: LoaderConfig | None = None) -> GraphModel:
    """Load one graph from either a bare ``{nodes, edges}`` file or a combined document."""
    data = read_json(path)
    if is_combined_document(data):
        key = GRAPH_DOCUMENT_KEYS[kind]
        if key not in data:
            raise MalformedGraphError(f"{path} has no '{key}'")
        data = data[key]
    graph = PARSERS[kind](data, config or DEFAULT_LOADER_CONFIG)
    logger.info(
        "Loaded %s graph from %s: %d nodes, %d edges",
        kind.value,
        path,
        len(graph),
        len(graph.edges),
    )
    return graph


def _parse_build_metadata(raw: Any) -> BuildMetadata:
    if raw is None:
        return BuildMetadata()
    return validate_record(BuildMetadata, raw, BUILD_METADATA_KEY)
