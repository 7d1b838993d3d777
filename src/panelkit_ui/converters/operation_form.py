"""
Operation form compiler - converts an operation into a validated form model.

The form model lists the input fields of an operation with their UI
control, default values, and a dynamically generated Pydantic model that
validates and coerces submitted values.
"""

from __future__ import annotations

import logging
import math
import re
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Annotated, Any

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StrictBool,
    StringConstraints,
    ValidationError,
    create_model,
)
from pydantic.fields import FieldInfo

from panelkit.core.errors import OperationExecutionError, OperationValidationError
from panelkit.core.ir import (
    ENUM_FIELD_TYPES,
    NUMERIC_FIELD_TYPES,
    AppSchema,
    EntitySpec,
    EnumOption,
    FieldSpec,
    FieldTypeKind,
    OperationParameter,
    OperationSpec,
)

logger = logging.getLogger(__name__)

DEFAULT_MARKER_RE = re.compile(r"@default:\s*([-+]?\d+(?:\.\d+)?(?:[eE][-+]?\d+)?)")


class FormControl(str, Enum):
    """Input control used for a form field."""

    TEXT = "text"
    TEXTAREA = "textarea"
    SELECT = "select"
    SWITCH = "switch"
    NUMBER = "number"
    DATE = "date"
    DATETIME = "datetime"


class FormFieldContext(BaseModel):
    """Field definition for operation form rendering."""

    model_config = ConfigDict(frozen=True)

    name: str
    label: str
    description: str | None = None
    placeholder: str | None = None
    component: FormControl = FormControl.TEXT
    options: list[EnumOption] = Field(default_factory=list)
    required: bool = False
    type: FieldTypeKind = FieldTypeKind.STRING


# ── Input types ───────────────────────────────────────────────────────

NumberInput = Annotated[float, Field(allow_inf_nan=False)]
SwitchInput = StrictBool
DateInput = Annotated[str, StringConstraints(min_length=1)]
SelectInput = Annotated[str, StringConstraints(min_length=1)]
TextInput = Annotated[str, StringConstraints(strip_whitespace=True)]

_VALIDATION_CONFIG = ConfigDict(
    extra="ignore",
    coerce_numbers_to_str=True,
)

REQUIRED_MESSAGE = "This field is required"

_CONTROL_MESSAGES: dict[FormControl, str] = {
    FormControl.NUMBER: "Enter a number",
    FormControl.SWITCH: "Choose true or false",
    FormControl.DATE: "Choose a date",
    FormControl.DATETIME: "Choose a date and time",
    FormControl.SELECT: "Choose an option",
}


def _input_type(field_type: FieldTypeKind, enum_backed: bool) -> Any:
    """Map a field type to the annotation used for validation."""
    if field_type in NUMERIC_FIELD_TYPES:
        return NumberInput
    if field_type == FieldTypeKind.BOOLEAN:
        return SwitchInput
    if field_type in (FieldTypeKind.DATE, FieldTypeKind.DATETIME):
        return DateInput
    if enum_backed:
        return SelectInput
    return TextInput


# =============================================================================
# Form Model
# =============================================================================

OperationExecutor = Callable[[OperationSpec, dict[str, Any]], None]


def _is_blank(value: Any) -> bool:
    return isinstance(value, str) and not value.strip()


def normalize_values(
    fields: list[FormFieldContext],
    values: Mapping[str, Any],
) -> dict[str, Any]:
    """
    Prepare submitted values for validation and execution.

    Blank strings become absent (the key is dropped), values of number
    fields are coerced to float when they parse (too large becomes infinity,
    which the validator rejects), and keys that are not form
    fields are discarded.
    """
    result: dict[str, Any] = {}
    for field in fields:
        if field.name not in values:
            continue
        value = values[field.name]
        if value is None or _is_blank(value):
            continue
        if field.component == FormControl.NUMBER and not isinstance(value, bool):
            try:
                value = float(value)
            except OverflowError:
                value = math.inf
            except (TypeError, ValueError):
                pass  # left for the validator to reject
        result[field.name] = value
    return result


@dataclass(frozen=True)
class OperationFormModel:
    """
    Input form of one operation.

    Attributes:
        operation: The operation the form executes
        fields: Field UI metadata, in parameter order
        default_values: Initial values for fields that have one
        schema: Generated Pydantic model validating a submission
    """

    operation: OperationSpec
    fields: list[FormFieldContext]
    default_values: dict[str, Any]
    schema: type[BaseModel]

    @property
    def requires_input(self) -> bool:
        """False when the operation runs without any input."""
        return bool(self.fields)

    @property
    def validators(self) -> dict[str, FieldInfo]:
        """Validator definition per field name."""
        return {info.alias or key: info for key, info in self.schema.model_fields.items()}

    def get_field(self, name: str) -> FormFieldContext | None:
        """Get form field by name."""
        for field in self.fields:
            if field.name == name:
                return field
        return None

    def validate(self, values: Mapping[str, Any]) -> dict[str, Any]:
        """
        Validate and normalize a submission.

        Args:
            values: Raw form values keyed by field name

        Returns:
            Normalized values; optional fields left blank are absent

        Raises:
            OperationValidationError: If any field fails its validator
        """
        prepared = normalize_values(self.fields, values)
        try:
            instance = self.schema.model_validate(prepared)
        except ValidationError as e:
            raise OperationValidationError(self._field_errors(e)) from e
        return instance.model_dump(by_alias=True, exclude_unset=True)

    def _field_errors(self, error: ValidationError) -> dict[str, str]:
        errors: dict[str, str] = {}
        for detail in error.errors():
            name = str(detail["loc"][0]) if detail["loc"] else "__root__"
            if name in errors:
                continue
            field = self.get_field(name)
            if detail["type"] == "missing":
                errors[name] = REQUIRED_MESSAGE
            elif field is not None and field.component in _CONTROL_MESSAGES:
                errors[name] = _CONTROL_MESSAGES[field.component]
            else:
                errors[name] = detail["msg"]
        return errors


# =============================================================================
# Parameter Resolution
# =============================================================================


def ensure_parameters(
    operation: OperationSpec,
    entity: EntitySpec | None,
) -> list[OperationParameter]:
    """
    Input parameters of an operation.

    Declared parameters are used as-is. Otherwise a single required
    parameter is synthesized from the target entity's primary (or
    identifier) field; with no such field the operation takes no input.
    """
    if operation.parameters:
        return list(operation.parameters)
    if entity is None:
        return []
    primary = entity.primary_field()
    if primary is None:
        return []
    return [
        OperationParameter(
            name=primary.name,
            label=primary.label,
            type=primary.type,
            required=True,
            description=primary.description,
        )
    ]


def resolve_parameter_field(
    parameter: OperationParameter,
    schema: AppSchema,
    entity: EntitySpec | None,
) -> FieldSpec | None:
    """
    Find the entity field a parameter inherits metadata from.

    A ``ref`` points at any entity of the schema; without one the
    same-named field of the target entity is used.
    """
    if parameter.ref is not None:
        ref_entity = schema.get_entity(parameter.ref.entity)
        if ref_entity is None:
            logger.debug(
                f"Parameter '{parameter.name}' references unknown entity '{parameter.ref.entity}'"
            )
            return None
        return ref_entity.get_field(parameter.ref.field)
    if entity is None:
        return None
    return entity.get_field(parameter.name)


def infer_control(
    field_type: FieldTypeKind,
    options: list[EnumOption],
    field: FieldSpec | None,
) -> FormControl:
    """Pick the input control for a field (first matching rule wins)."""
    if options or field_type in ENUM_FIELD_TYPES:
        return FormControl.SELECT
    if (field and field.component_hint == "textarea") or field_type == FieldTypeKind.TEXT:
        return FormControl.TEXTAREA
    if field_type == FieldTypeKind.BOOLEAN:
        return FormControl.SWITCH
    if field_type == FieldTypeKind.DATE:
        return FormControl.DATE
    if field_type == FieldTypeKind.DATETIME:
        return FormControl.DATETIME
    if field_type in NUMERIC_FIELD_TYPES:
        return FormControl.NUMBER
    return FormControl.TEXT


def parse_default_marker(description: str | None) -> int | float | None:
    """
    Read a numeric default from an ``@default:<number>`` description marker.

    Examples:
        >>> parse_default_marker("Units per pack @default: 12")
        12
        >>> parse_default_marker("no marker") is None
        True
    """
    if not description:
        return None
    match = DEFAULT_MARKER_RE.search(description)
    if not match:
        return None
    literal = match.group(1)
    number = float(literal)
    if number.is_integer() and not any(ch in literal for ch in ".eE"):
        return int(number)
    return number


def infer_default_value(
    parameter: OperationParameter,
    field_type: FieldTypeKind,
    field: FieldSpec | None,
) -> Any:
    """
    Default value of a form field.

    Order: the parameter's default, the field's ``default_value``, False
    for booleans, then the description marker of numeric fields.
    """
    if parameter.default_value is not None:
        return parameter.default_value
    if field is not None and field.default_value is not None:
        return field.default_value
    if field_type == FieldTypeKind.BOOLEAN:
        return False
    if field is not None and field.is_numeric:
        return parse_default_marker(field.description)
    return None


# =============================================================================
# Public API
# =============================================================================


def build_operation_form_model(operation: OperationSpec, schema: AppSchema) -> OperationFormModel:
    """
    Build the input form of an operation.

    Parameter metadata wins over the metadata of the field it references;
    the field fills whatever the parameter leaves unset.

    Args:
        operation: Operation to build the form for
        schema: Schema owning the operation

    Returns:
        OperationFormModel; ``requires_input`` is False when the operation
        has no input fields
    """
    entity = schema.get_entity(operation.target_entity)

    fields: list[FormFieldContext] = []
    default_values: dict[str, Any] = {}
    definitions: dict[str, Any] = {}

    for index, parameter in enumerate(ensure_parameters(operation, entity)):
        field = resolve_parameter_field(parameter, schema, entity)

        field_type = parameter.type or (field.type if field else FieldTypeKind.STRING)
        if parameter.required is not None:
            required = parameter.required
        else:
            required = bool(field and field.required)
        options = parameter.enum_values or (field.enum_values if field else None) or []
        component = infer_control(field_type, options, field)

        fields.append(
            FormFieldContext(
                name=parameter.name,
                label=parameter.label or (field.label if field else None) or parameter.name,
                description=parameter.description or (field.description if field else None),
                placeholder=field.description if field else None,
                component=component,
                options=options,
                required=required,
                type=field_type,
            )
        )

        default = infer_default_value(parameter, field_type, field)
        if default is not None:
            default_values[parameter.name] = default

        annotation = _input_type(field_type, bool(options) or field_type in ENUM_FIELD_TYPES)
        # Positional names keep parameter names that are not identifiers valid.
        if required:
            definitions[f"field_{index}"] = (annotation, Field(..., alias=parameter.name))
        else:
            definitions[f"field_{index}"] = (
                annotation | None,
                Field(default=None, alias=parameter.name),
            )

    form_schema = create_model(
        f"{operation.id}_form",
        __config__=_VALIDATION_CONFIG,
        __doc__=operation.description or f"Input of operation {operation.id}",
        **definitions,
    )

    return OperationFormModel(
        operation=operation,
        fields=fields,
        default_values=default_values,
        schema=form_schema,
    )


def log_executor(operation: OperationSpec, values: dict[str, Any]) -> None:
    """Default executor: records the call instead of performing it."""
    logger.info(
        f"Executing {operation.method.value} {operation.endpoint} ({operation.id})",
        extra={"context": values},
    )


def execute_operation(
    form: OperationFormModel,
    values: Mapping[str, Any],
    executor: OperationExecutor = log_executor,
) -> dict[str, Any]:
    """
    Validate a submission and hand it to the execution callback.

    The caller's ``values`` are never modified, so a failed submission can
    be retried as-is.

    Args:
        form: Form model of the operation
        values: Raw submitted values
        executor: Callback performing the operation

    Returns:
        The normalized values passed to the executor

    Raises:
        OperationValidationError: If validation fails (executor not called)
        OperationExecutionError: If the executor raises
    """
    normalized = form.validate(values)
    try:
        executor(form.operation, dict(normalized))
    except Exception as e:
        logger.warning(f"Operation '{form.operation.id}' failed: {e}")
        raise OperationExecutionError(form.operation.id, str(e)) from e
    return normalized
