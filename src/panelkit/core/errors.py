"""
Error types for panelkit payload loading, interpretation and operation
execution.

Reference-resolution problems inside a schema are not errors: the block
compiler and form builder omit whatever depends on a missing reference.
"""

from __future__ import annotations


class PanelkitError(Exception):
    """Base exception for all panelkit errors."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class PayloadError(PanelkitError):
    """
    Raised when a runtime payload cannot be loaded.

    Examples:
    - File not found
    - Invalid JSON
    - JSON that does not match the schema shape
    """

    pass


class ConfigError(PanelkitError):
    """Raised when a configuration file cannot be read."""

    pass


class InterpretationError(PanelkitError):
    """
    Raised when an interpretation provider fails to produce a schema.

    Examples:
    - Provider API call failed
    - Empty response
    - Response is not valid JSON or does not match the payload shape
    """

    pass


class OperationValidationError(PanelkitError):
    """
    Raised when operation form input fails one or more field validators.

    Attributes:
        field_errors: Message per failing field name
    """

    def __init__(self, field_errors: dict[str, str]):
        self.field_errors = dict(field_errors)
        names = ", ".join(sorted(self.field_errors))
        super().__init__(f"Invalid input for: {names}")


class OperationExecutionError(PanelkitError):
    """
    Raised when the execution callback of an operation fails.

    The original exception is chained as ``__cause__``.
    """

    def __init__(self, operation_id: str, message: str):
        self.operation_id = operation_id
        super().__init__(f"Operation '{operation_id}' failed: {message}")
