"""
panelkit - business description to administrative UI.

Interprets a business conversation into an application schema and
compiles the schema into renderable UI blocks.
"""

from __future__ import annotations

# Re-export commonly used types for convenience
from .core import ir
from .core.errors import (
    InterpretationError,
    OperationExecutionError,
    OperationValidationError,
    PanelkitError,
    PayloadError,
)

__version__ = "0.1.0"

__all__ = [
    "InterpretationError",
    "OperationExecutionError",
    "OperationValidationError",
    "PanelkitError",
    "PayloadError",
    "__version__",
    "ir",
]
