"""Shapes of the records written by the dependency-graph generator."""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Type, TypeVar

from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr, ValidationError

from depgraph.errors import MalformedRecordError

RecordT = TypeVar("RecordT", bound=BaseModel)


class ClassMeta(BaseModel):
    # Classes in the default package have an empty package name.
    package: StrictStr
    build_targets: List[StrictStr]


class ClassNodeRecord(BaseModel):
    name: StrictStr = Field(min_length=1)
    meta: ClassMeta


class CollectionMeta(BaseModel):
    classes: List[StrictStr]


class CollectionNodeRecord(BaseModel):
    """A package or build-target node: a name plus its member classes."""

    name: StrictStr = Field(min_length=1)
    meta: CollectionMeta


class EdgeRecord(BaseModel):
    begin: StrictStr = Field(min_length=1)
    end: StrictStr = Field(min_length=1)
    meta: Dict[str, Any] = Field(default_factory=dict)


class BuildMetadata(BaseModel):
    model_config = ConfigDict(frozen=True)

    commit_hash: Optional[StrictStr] = None
    commit_cr_position: Optional[StrictInt] = None
    commit_time: Optional[StrictInt] = None


def validate_record(
    model: Type[RecordT],
    data: Any,
    section: str | None = None,
    index: int | None = None,
) -> RecordT:
    try:
        return model.model_validate(data)
    except ValidationError as exc:
        error = exc.errors()[0]
        field = ".".join(str(part) for part in error["loc"]) or "<record>"
        raise MalformedRecordError(
            field, section, index, reason=f"invalid ({error['msg']})"
        ) from exc
