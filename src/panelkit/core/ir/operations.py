"""
Operation types for panelkit IR.

Operations are parameterized business actions bound to an HTTP method,
an endpoint and a target entity.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from .fields import EnumOption, FieldTypeKind, SchemaModel


class OperationKind(str, Enum):
    """What an operation does to its target entity."""

    CREATE = "create"
    UPDATE = "update"
    DELETE = "delete"
    ACTION = "action"


class HttpMethod(str, Enum):
    """HTTP methods an operation may declare."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"


class FormVariant(str, Enum):
    """How an operation form is presented."""

    DIALOG = "dialog"
    SHEET = "sheet"
    INLINE = "inline"
    DRAWER = "drawer"


class OperationIntent(str, Enum):
    """Visual intent of an operation trigger."""

    PRIMARY = "primary"
    SECONDARY = "secondary"
    DESTRUCTIVE = "destructive"


class ResponseKind(str, Enum):
    """Shape of an operation response."""

    COLLECTION = "collection"
    ENTITY = "entity"
    CUSTOM = "custom"


class FieldRef(SchemaModel):
    """Pointer to an existing entity field."""

    entity: str
    field: str


class OperationParameter(SchemaModel):
    """
    Input parameter of an operation.

    Mirrors a field's shape. Any metadata left unset is inherited from the
    field named by ``ref`` (or from the same-named field of the target
    entity when ``ref`` is absent).
    """

    name: str
    label: str | None = None
    type: FieldTypeKind | None = None
    description: str | None = None
    required: bool | None = None
    ref: FieldRef | None = None
    enum_values: list[EnumOption] | None = None
    default_value: Any = None


class OperationResponse(SchemaModel):
    """Descriptor of what an operation returns."""

    type: ResponseKind
    entity: str | None = None
    description: str | None = None


class OperationUI(SchemaModel):
    """Presentation hints for an operation."""

    variant: FormVariant | None = None
    intent: OperationIntent | None = None
    trigger_label: str | None = None
    success_message: str | None = None


class OperationSpec(SchemaModel):
    """
    Specification for a business operation.

    Attributes:
        target_entity: Entity id the operation acts on (not enforced)
        kind: create, update, delete or action
        parameters: Explicit inputs; when empty the form builder synthesizes
            one from the target entity's primary field
    """

    id: str
    name: str
    label: str
    target_entity: str
    description: str | None = None
    kind: OperationKind
    method: HttpMethod
    endpoint: str
    parameters: list[OperationParameter] | None = None
    response: OperationResponse | None = None
    ui: OperationUI | None = None

    @property
    def trigger_label(self) -> str:
        """Label for buttons that open this operation."""
        if self.ui and self.ui.trigger_label:
            return self.ui.trigger_label
        return self.label

    @property
    def variant(self) -> FormVariant | None:
        """Declared presentation variant, if any."""
        return self.ui.variant if self.ui else None
