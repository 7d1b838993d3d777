"""
Column derivation - projects entity fields onto table columns.
"""

from __future__ import annotations

from panelkit.core.ir import ENUM_FIELD_TYPES, EntitySpec, FieldSpec
from panelkit_ui.runtime.block_context import ColumnContext

HIDDEN_MARKER = "@hidden"


def is_hidden_field(field: FieldSpec) -> bool:
    """
    Check if a field is excluded from tables.

    The ``hidden`` attribute is authoritative; older schemas mark hidden
    fields with a component hint containing ``hidden`` or an ``@hidden``
    token in the description, which is still honored.
    """
    if field.hidden:
        return True
    if field.component_hint and "hidden" in field.component_hint:
        return True
    return bool(field.description and HIDDEN_MARKER in field.description)


def derive_columns(entity: EntitySpec) -> list[ColumnContext]:
    """Build table columns for every visible field, in declaration order."""
    return [
        ColumnContext(
            field=field.name,
            label=field.label,
            type=field.type,
            format=field.format,
            enum_values=field.enum_values,
            component_hint=field.component_hint,
        )
        for field in entity.fields
        if not is_hidden_field(field)
    ]


def derive_filters(entity: EntitySpec) -> list[str]:
    """
    Field names offered as quick filters.

    Searchable fields filter by text; enum and status fields filter by
    option.
    """
    return [
        field.name
        for field in entity.fields
        if not is_hidden_field(field)
        and (field.is_searchable or field.type in ENUM_FIELD_TYPES)
    ]
