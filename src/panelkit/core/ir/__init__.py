"""
panelkit Intermediate Representation (IR) types.

The application schema produced by an interpretation provider: entities,
operations and interaction patterns. Types are organized into submodules
and re-exported here.
"""

from .appspec import AppSchema, Dataset, RuntimePayload
from .domain import EntitySpec, RelationKind, RelationSpec
from .fields import (
    ENUM_FIELD_TYPES,
    NUMERIC_FIELD_TYPES,
    EnumOption,
    FieldSpec,
    FieldTypeKind,
    SchemaModel,
)
from .operations import (
    FieldRef,
    FormVariant,
    HttpMethod,
    OperationIntent,
    OperationKind,
    OperationParameter,
    OperationResponse,
    OperationSpec,
    OperationUI,
    ResponseKind,
)
from .patterns import (
    DataBinding,
    InteractionPattern,
    LayoutEmphasis,
    LayoutHints,
    PatternFeatures,
    PatternType,
)

__all__ = [
    # App schema
    "AppSchema",
    "Dataset",
    "RuntimePayload",
    # Domain
    "EntitySpec",
    "RelationKind",
    "RelationSpec",
    # Fields
    "ENUM_FIELD_TYPES",
    "NUMERIC_FIELD_TYPES",
    "EnumOption",
    "FieldSpec",
    "FieldTypeKind",
    "SchemaModel",
    # Operations
    "FieldRef",
    "FormVariant",
    "HttpMethod",
    "OperationIntent",
    "OperationKind",
    "OperationParameter",
    "OperationResponse",
    "OperationSpec",
    "OperationUI",
    "ResponseKind",
    # Patterns
    "DataBinding",
    "InteractionPattern",
    "LayoutEmphasis",
    "LayoutHints",
    "PatternFeatures",
    "PatternType",
]
