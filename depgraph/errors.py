"""
Exceptions raised while turning graph JSON into a GraphModel.

Every error is terminal for the load call that raised it: no partially
populated graph is ever returned to the caller.
"""

from __future__ import annotations

from pathlib import Path


class GraphLoadError(Exception):
    """Base class for all graph loading failures.

    Attributes:
        message: Explanation of the error
    """

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class MalformedGraphError(GraphLoadError):
    """The document is not an object with ``nodes`` and ``edges`` lists."""


class MalformedRecordError(GraphLoadError):
    """A node or edge record is missing a required field or has the wrong type.

    Attributes:
        field: Name of the offending field, dotted for nested fields (``meta.package``)
        section: ``"nodes"`` or ``"edges"`` (if known)
        index: Position of the record inside its section (if known)
    """

    def __init__(
        self,
        field: str,
        section: str | None = None,
        index: int | None = None,
        reason: str = "missing or invalid",
    ):
        self.field = field
        self.section = section
        self.index = index
        self.reason = reason

        message = f"Field '{field}' is {reason}"
        if section is not None and index is not None:
            message = f"{message} [{section}[{index}]]"
        elif section is not None:
            message = f"{message} [{section}]"
        super().__init__(message)

    def at(self, section: str, index: int) -> "MalformedRecordError":
        """Return a copy of this error located at ``section[index]``."""
        return MalformedRecordError(self.field, section=section, index=index, reason=self.reason)


class DanglingEdgeError(GraphLoadError):
    """An edge references a node id that is not present in ``nodes``.

    Attributes:
        identifier: The unresolved node id
        endpoint: ``"begin"`` or ``"end"``
        index: Position of the edge record
    """

    def __init__(self, identifier: str, endpoint: str, index: int):
        self.identifier = identifier
        self.endpoint = endpoint
        self.index = index
        super().__init__(
            f"Edge {endpoint} '{identifier}' does not match any node [edges[{index}]]"
        )


class ConflictingNodeError(GraphLoadError):
    """A node id reappears with metadata different from the first record.

    Attributes:
        identifier: The reused node id
        index: Position of the conflicting record
    """

    def __init__(self, identifier: str, index: int):
        self.identifier = identifier
        self.index = index
        super().__init__(
            f"Node '{identifier}' was already loaded with different metadata [nodes[{index}]]"
        )


class GraphFileError(GraphLoadError):
    """A graph file could not be read or is not valid JSON.

    Attributes:
        path: The file that failed to load
    """

    def __init__(self, path: Path, reason: str):
        self.path = path
        super().__init__(f"Cannot load graph file {path}: {reason}")
