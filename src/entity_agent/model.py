from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Tuple

DEFAULT_SCHEMA = "dbo"
UNKNOWN_TABLE = "Unknown"


@dataclass(frozen=True)
class Column:
    original_name: str
    field_name: str
    type_name: str
    target_type: str
    annotation: str = ""
    is_id: bool = False


@dataclass(frozen=True)
class TableModel:
    schema: str
    original_name: str
    type_name: str
    columns: Tuple[Column, ...] = ()
    duplicate_columns: Tuple[str, ...] = ()

    @property
    def id_columns(self) -> Tuple[Column, ...]:
        return tuple(c for c in self.columns if c.is_id)

    @property
    def has_composite_key(self) -> bool:
        return len(self.id_columns) > 1


class ArtifactKind(str, Enum):
    ENTITY = "entity"
    DTO = "dto"


@dataclass(frozen=True)
class RenderedArtifact:
    kind: ArtifactKind
    file_name: str
    body: str
