"""
Field type definitions for panelkit IR.

This module contains the primitive field types, enum options and the
field specification shared by entities and operation parameters.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class SchemaModel(BaseModel):
    """
    Base for every IR model.

    Interpretation providers emit camelCase JSON (``isPrimary``,
    ``enumValues``); Python code reads snake_case attributes. Both
    spellings are accepted on input.
    """

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        alias_generator=to_camel,
    )


class FieldTypeKind(str, Enum):
    """Primitive field types understood by the renderer."""

    STRING = "string"
    TEXT = "text"
    NUMBER = "number"
    INTEGER = "integer"
    BOOLEAN = "boolean"
    DATE = "date"
    DATETIME = "datetime"
    ENUM = "enum"
    STATUS = "status"
    CURRENCY = "currency"
    PERCENTAGE = "percentage"
    RATING = "rating"


NUMERIC_FIELD_TYPES = frozenset(
    {
        FieldTypeKind.NUMBER,
        FieldTypeKind.INTEGER,
        FieldTypeKind.CURRENCY,
        FieldTypeKind.PERCENTAGE,
    }
)

ENUM_FIELD_TYPES = frozenset({FieldTypeKind.ENUM, FieldTypeKind.STATUS})


class EnumOption(SchemaModel):
    """A selectable value of an enum or status field."""

    label: str
    value: str


class FieldSpec(SchemaModel):
    """
    Specification for a single field of an entity.

    Attributes:
        name: Field identifier, unique within the entity
        label: Human-readable label
        type: Primitive field type
        enum_values: Options for enum/status fields
        component_hint: Free-form UI control hint (e.g. ``textarea``)
        hidden: Exclude the field from derived table columns
        default_value: Default used when the field backs a form input
    """

    name: str
    label: str
    type: FieldTypeKind
    description: str | None = None
    required: bool | None = None
    is_primary: bool = False
    is_identifier: bool = False
    is_searchable: bool = False
    is_metric: bool = False
    format: str | None = None
    unit: str | None = None
    enum_values: list[EnumOption] | None = None
    component_hint: str | None = None
    hidden: bool = False
    default_value: Any = None

    @property
    def is_numeric(self) -> bool:
        """Check if the field holds a number-family value."""
        return self.type in NUMERIC_FIELD_TYPES

    @property
    def is_key(self) -> bool:
        """Check if the field identifies a record."""
        return self.is_primary or self.is_identifier
