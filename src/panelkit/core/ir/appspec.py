"""
Application schema types for panelkit IR.

This module contains the top-level AppSchema and the runtime payload an
interpretation provider hands to the renderer.
"""

from __future__ import annotations

from typing import Any

from pydantic import Field

from .domain import EntitySpec
from .fields import SchemaModel
from .operations import OperationSpec
from .patterns import InteractionPattern


class AppSchema(SchemaModel):
    """
    Complete application schema.

    References between entities, operations and patterns are not
    validated: lookups return None and consumers omit whatever depends on a
    missing reference.
    """

    id: str
    name: str
    description: str | None = None
    entities: list[EntitySpec] = Field(default_factory=list)
    operations: list[OperationSpec] = Field(default_factory=list)
    patterns: list[InteractionPattern] = Field(default_factory=list)

    def get_entity(self, entity_id: str) -> EntitySpec | None:
        """Get entity by id."""
        for entity in self.entities:
            if entity.id == entity_id:
                return entity
        return None

    def get_operation(self, operation_id: str) -> OperationSpec | None:
        """Get operation by id."""
        for operation in self.operations:
            if operation.id == operation_id:
                return operation
        return None

    def get_pattern(self, pattern_id: str) -> InteractionPattern | None:
        """Get pattern by id."""
        for pattern in self.patterns:
            if pattern.id == pattern_id:
                return pattern
        return None


class Dataset(SchemaModel):
    """Records supplied for one entity, replacing its sample data."""

    entity: str
    records: list[dict[str, Any]] = Field(default_factory=list)


class RuntimePayload(SchemaModel):
    """Schema plus optional datasets, as produced by an interpreter."""

    app_schema: AppSchema = Field(alias="schema")
    datasets: list[Dataset] | None = None
