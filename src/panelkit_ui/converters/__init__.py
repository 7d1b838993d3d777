"""
Schema to UI converters

Compiles a panelkit application schema into UI blocks and operation forms.
"""

from panelkit_ui.converters.block_compiler import (
    PATTERN_BUILDERS,
    build_ui,
    build_ui_from_payload,
    compile_pattern,
    resolve_operations,
)
from panelkit_ui.converters.columns import derive_columns, derive_filters, is_hidden_field
from panelkit_ui.converters.operation_form import (
    FormControl,
    FormFieldContext,
    OperationFormModel,
    build_operation_form_model,
    execute_operation,
    log_executor,
    normalize_values,
)

__all__ = [
    # Blocks
    "PATTERN_BUILDERS",
    "build_ui",
    "build_ui_from_payload",
    "compile_pattern",
    "resolve_operations",
    # Columns
    "derive_columns",
    "derive_filters",
    "is_hidden_field",
    # Forms
    "FormControl",
    "FormFieldContext",
    "OperationFormModel",
    "build_operation_form_model",
    "execute_operation",
    "log_executor",
    "normalize_values",
]
