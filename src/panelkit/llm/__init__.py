"""
LLM integration for panelkit.

This package turns a business conversation into a runtime payload, either
through an LLM provider (Anthropic, OpenAI) or the keyword mock.
"""

from .catalog import COMPONENT_CATALOG, CatalogComponent, build_catalog_summary, find_catalog_component
from .interpreter import (
    ConversationMessage,
    Interpreter,
    LLMInterpreter,
    MockInterpreter,
    extract_json_text,
    interpret_conversation,
)
from .samples import SAMPLE_PAYLOADS

__all__ = [
    "COMPONENT_CATALOG",
    "CatalogComponent",
    "ConversationMessage",
    "Interpreter",
    "LLMInterpreter",
    "MockInterpreter",
    "SAMPLE_PAYLOADS",
    "build_catalog_summary",
    "extract_json_text",
    "find_catalog_component",
    "interpret_conversation",
]
