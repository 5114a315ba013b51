"""In-memory model of a dependency graph loaded from the generator's JSON.

Nodes come in three kinds:
* ClassNode: a Java class, identified by its fully-qualified name.
* PackageNode: a Java package, identified by the package name.
* TargetNode: a GN build target, identified by its label.

Edges are directed dependencies (``begin`` depends on ``end``). The GraphModel
owns both nodes and edges and keeps the adjacency lists itself; nodes never
reference their edges.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, ClassVar, Dict, FrozenSet, Iterator, List, Mapping, Tuple, Union

from core.config import NodeKind


@dataclass(frozen=True)
class ClassNode:
    id: str
    display_name: str
    short_name: str
    package: str
    build_targets: FrozenSet[str] = frozenset()

    kind: ClassVar[NodeKind] = NodeKind.CLASS


@dataclass(frozen=True)
class PackageNode:
    id: str
    display_name: str
    short_name: str
    classes: FrozenSet[str] = frozenset()

    kind: ClassVar[NodeKind] = NodeKind.PACKAGE


@dataclass(frozen=True)
class TargetNode:
    id: str
    display_name: str
    short_name: str
    classes: FrozenSet[str] = frozenset()

    kind: ClassVar[NodeKind] = NodeKind.TARGET


GraphNode = Union[ClassNode, PackageNode, TargetNode]


@dataclass(frozen=True, eq=False)
class Edge:
    """A directed dependency between two nodes.

    Two edges are equal when they join the same ordered pair of node ids;
    ``meta`` is carried along but never compared.
    """

    begin: GraphNode
    end: GraphNode
    meta: Mapping[str, Any] = field(default_factory=dict)

    @property
    def key(self) -> Tuple[str, str]:
        return (self.begin.id, self.end.id)

    @property
    def id(self) -> str:
        return f"{self.begin.id} > {self.end.id}"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Edge):
            return NotImplemented
        return self.key == other.key

    def __hash__(self) -> int:
        return hash(self.key)


class GraphModel:
    def __init__(self) -> None:
        self._nodes: Dict[str, GraphNode] = {}
        self._edges: Dict[Tuple[str, str], Edge] = {}
        self._outbound: Dict[str, List[str]] = {}
        self._inbound: Dict[str, List[str]] = {}

    @property
    def nodes(self) -> List[GraphNode]:
        return list(self._nodes.values())

    @property
    def edges(self) -> List[Edge]:
        return list(self._edges.values())

    def __len__(self) -> int:
        return len(self._nodes)

    def __contains__(self, node_id: object) -> bool:
        return node_id in self._nodes

    def __iter__(self) -> Iterator[GraphNode]:
        return iter(self._nodes.values())

    def get_node_by_id(self, node_id: str) -> GraphNode | None:
        return self._nodes.get(node_id)

    def get_edge(self, begin_id: str, end_id: str) -> Edge | None:
        return self._edges.get((begin_id, end_id))

    def add_node_if_new(self, node: GraphNode) -> bool:
        """Add ``node`` unless a node with the same id exists. Returns True if added."""
        if node.id in self._nodes:
            return False
        self._nodes[node.id] = node
        self._outbound[node.id] = []
        self._inbound[node.id] = []
        return True

    def add_edge_if_new(
        self, begin: GraphNode, end: GraphNode, meta: Mapping[str, Any] | None = None
    ) -> bool:
        """Add an edge between two nodes already in the model. Returns True if added."""
        for node in (begin, end):
            if node.id not in self._nodes:
                raise KeyError(f"Node '{node.id}' is not part of this graph")
        edge = Edge(begin=begin, end=end, meta=dict(meta or {}))
        if edge.key in self._edges:
            return False
        self._edges[edge.key] = edge
        self._outbound[begin.id].append(end.id)
        self._inbound[end.id].append(begin.id)
        return True

    def outbound(self, node_id: str) -> List[GraphNode]:
        """Nodes that ``node_id`` depends on."""
        return [self._nodes[other] for other in self._outbound.get(node_id, [])]

    def inbound(self, node_id: str) -> List[GraphNode]:
        """Nodes that depend on ``node_id``."""
        return [self._nodes[other] for other in self._inbound.get(node_id, [])]

    @property
    def kind(self) -> NodeKind | None:
        for node in self._nodes.values():
            return node.kind
        return None
