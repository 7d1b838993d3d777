"""
panelkit UI - schema to UI block compiler.

This package provides:
- Runtime: UI block models, dataset resolution and metric summaries
- Converters: compile interaction patterns into blocks and operations into
  validated input forms
"""

from panelkit_ui.converters import build_operation_form_model, build_ui, compile_pattern
from panelkit_ui.runtime import UIBlock, dump_blocks

__all__ = [
    "UIBlock",
    "build_operation_form_model",
    "build_ui",
    "compile_pattern",
    "dump_blocks",
]
