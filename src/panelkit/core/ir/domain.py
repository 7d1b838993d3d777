"""
Domain model types for panelkit IR.

This module contains entity definitions and the typed relations between
entities.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import Field

from .fields import FieldSpec, SchemaModel


class RelationKind(str, Enum):
    """Kinds of edges between entities."""

    HAS_MANY = "hasMany"
    HAS_ONE = "hasOne"
    BELONGS_TO = "belongsTo"


class RelationSpec(SchemaModel):
    """
    Typed edge from one entity to another.

    Attributes:
        relation: Cardinality of the edge
        target: Target entity id
        via: Optional join key on the owning side
    """

    relation: RelationKind
    target: str
    via: str | None = None
    label: str | None = None
    description: str | None = None


class EntitySpec(SchemaModel):
    """
    A business data type with named, typed fields.

    ``sample_data`` is an open list of records: nothing checks that their
    keys match the declared fields.
    """

    id: str
    name: str
    label: str
    description: str | None = None
    fields: list[FieldSpec] = Field(default_factory=list)
    relations: list[RelationSpec] = Field(default_factory=list)
    sample_data: list[dict[str, Any]] | None = None

    def get_field(self, name: str) -> FieldSpec | None:
        """Get field by name."""
        for field in self.fields:
            if field.name == name:
                return field
        return None

    def primary_field(self) -> FieldSpec | None:
        """Get the first field flagged as primary or identifier."""
        for field in self.fields:
            if field.is_key:
                return field
        return None

    @property
    def metric_fields(self) -> list[FieldSpec]:
        """Fields flagged as metrics, in declaration order."""
        return [field for field in self.fields if field.is_metric]
