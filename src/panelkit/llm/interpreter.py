"""
Interpretation providers: turn a conversation into a runtime payload.

Two providers exist. ``LLMInterpreter`` asks an Anthropic or OpenAI model
for a schema; ``MockInterpreter`` picks a built-in sample by keyword.
``interpret_conversation`` tries the LLM when credentials are configured
and falls back to the mock on any failure.
"""

from __future__ import annotations

import json
import logging
import re
from collections.abc import Sequence
from typing import Any, Literal, Protocol

from pydantic import BaseModel, ConfigDict, ValidationError

from panelkit.core.config import (
    InterpreterConfig,
    LLMProvider,
    load_interpreter_config,
)
from panelkit.core.errors import ConfigError, InterpretationError
from panelkit.core.ir import RuntimePayload
from panelkit.llm.catalog import build_catalog_summary
from panelkit.llm.samples import HR_PERFORMANCE, INVENTORY_CONSOLE, SALES_CONSOLE

logger = logging.getLogger(__name__)

DEFAULT_DESCRIPTION = (
    "Business workspace generated from the conversation; the interface renders from its data."
)

_FENCE_RE = re.compile(r"```[a-zA-Z]*\s*(.*?)\s*```", re.DOTALL)


class ConversationMessage(BaseModel):
    """One turn of the intake conversation."""

    model_config = ConfigDict(frozen=True)

    role: Literal["user", "assistant", "system"]
    content: str


class Interpreter(Protocol):
    """Anything that turns a conversation into a runtime payload."""

    def interpret(self, messages: Sequence[ConversationMessage]) -> RuntimePayload: ...


# =============================================================================
# Mock
# =============================================================================

MOCK_SCENARIOS: tuple[tuple[tuple[str, ...], RuntimePayload], ...] = (
    (("sales", "order", "crm", "customer", "deal", "pipeline"), SALES_CONSOLE),
    (("inventory", "warehouse", "stock", "material", "supply chain"), INVENTORY_CONSOLE),
    (("hr", "performance", "employee", "okr", "appraisal"), HR_PERFORMANCE),
)


class MockInterpreter:
    """
    Keyword-matched interpreter backed by the built-in samples.

    The first scenario with a keyword anywhere in the conversation wins;
    with no match the sales console is returned.
    """

    def interpret(self, messages: Sequence[ConversationMessage]) -> RuntimePayload:
        text = " \n ".join(message.content.lower() for message in messages)
        payload = SALES_CONSOLE
        for keywords, scenario in MOCK_SCENARIOS:
            if any(keyword in text for keyword in keywords):
                payload = scenario
                break

        if payload.app_schema.description:
            return payload
        schema = payload.app_schema.model_copy(update={"description": DEFAULT_DESCRIPTION})
        return payload.model_copy(update={"app_schema": schema})


# =============================================================================
# LLM
# =============================================================================


def build_system_prompt() -> str:
    """System prompt listing the component catalog and the payload JSON schema."""
    payload_schema = json.dumps(RuntimePayload.model_json_schema(by_alias=True), indent=2)
    return f"""You are an enterprise back-office experience designer.

From the user's business description, produce the data model (entities),
the business operations and the interaction patterns of an admin workspace.
Prefer patterns that can be built from these prebuilt components:

{build_catalog_summary()}

Pattern types: collection-hub, detail-dashboard, workflow-console, analytics-summary.
Use camelCase keys and include realistic sampleData for every entity.

Return ONLY a JSON object matching this JSON Schema:

{payload_schema}"""


def extract_json_text(text: str | None) -> str | None:
    """
    Pull the JSON document out of a model response.

    When the reply wraps the document in a Markdown code fence, only the
    fenced body is kept, ignoring any prose around it. Returns None for an
    empty response.
    """
    if not text or not text.strip():
        return None
    stripped = text.strip()
    match = _FENCE_RE.search(stripped)
    if match:
        stripped = match.group(1).strip()
    return stripped or None


class LLMInterpreter:
    """
    Interpreter backed by an LLM provider.

    Supports Anthropic Claude and OpenAI (or OpenAI-compatible) models.
    """

    def __init__(self, config: InterpreterConfig):
        """
        Initialize the interpreter.

        Args:
            config: Provider settings; must carry an API key

        Raises:
            InterpretationError: If no API key is configured
            ImportError: If the provider SDK is not installed
        """
        if not config.has_credentials:
            raise InterpretationError(f"API key not found for {config.provider.value}")
        self.config = config
        self.model = config.resolved_model
        self._init_client()

    def _init_client(self) -> None:
        """Initialize provider-specific client."""
        config = self.config
        headers = config.request_headers() or None
        if config.provider == LLMProvider.ANTHROPIC:
            try:
                from anthropic import Anthropic
            except ImportError:
                raise ImportError(
                    "Anthropic SDK not installed. Install with: pip install anthropic"
                )
            self.client: Any = Anthropic(
                api_key=config.api_key,
                base_url=config.base_url,
                default_headers=headers,
            )
        else:
            try:
                from openai import OpenAI
            except ImportError:
                raise ImportError("OpenAI SDK not installed. Install with: pip install openai")
            self.client = OpenAI(
                api_key=config.api_key,
                base_url=config.base_url,
                organization=config.organization,
                project=config.project,
                default_headers=headers,
            )

    def interpret(self, messages: Sequence[ConversationMessage]) -> RuntimePayload:
        """
        Ask the model for a runtime payload.

        Raises:
            InterpretationError: If the call fails or the response does not
                validate as a RuntimePayload
        """
        system_prompt = build_system_prompt()
        logger.info(f"Interpreting conversation via {self.config.provider.value} ({self.model})")

        try:
            if self.config.provider == LLMProvider.ANTHROPIC:
                response_text = self._call_anthropic(system_prompt, messages)
            else:
                response_text = self._call_openai(system_prompt, messages)
        except Exception as e:
            raise InterpretationError(f"{self.config.provider.value} API call failed: {e}") from e

        json_text = extract_json_text(response_text)
        if json_text is None:
            raise InterpretationError("Model returned an empty response")

        try:
            return RuntimePayload.model_validate_json(json_text)
        except ValidationError as e:
            logger.debug(f"Raw output: {json_text[:500]}...")
            raise InterpretationError(f"Model returned an invalid payload: {e}") from e

    def _call_anthropic(self, system_prompt: str, messages: Sequence[ConversationMessage]) -> str:
        """Call Anthropic Claude API."""
        logger.debug(f"Calling Anthropic API with model {self.model}")
        # System turns join the system prompt; the API only takes user/assistant
        extra_system = [m.content for m in messages if m.role == "system"]
        response = self.client.messages.create(
            model=self.model,
            max_tokens=self.config.max_tokens,
            temperature=self.config.temperature,
            system="\n\n".join([system_prompt, *extra_system]),
            messages=[
                {"role": m.role, "content": m.content} for m in messages if m.role != "system"
            ],
        )
        return response.content[0].text  # type: ignore[no-any-return]

    def _call_openai(self, system_prompt: str, messages: Sequence[ConversationMessage]) -> str:
        """Call OpenAI chat completions API."""
        logger.debug(f"Calling OpenAI API with model {self.model}")
        response = self.client.chat.completions.create(
            model=self.model,
            max_tokens=self.config.max_tokens,
            temperature=self.config.temperature,
            response_format={"type": "json_object"},
            messages=[
                {"role": "system", "content": system_prompt},
                *({"role": m.role, "content": m.content} for m in messages),
            ],
        )
        return response.choices[0].message.content  # type: ignore[no-any-return]


# =============================================================================
# Orchestration
# =============================================================================


def interpret_conversation(
    messages: Sequence[ConversationMessage],
    config: InterpreterConfig | None = None,
) -> RuntimePayload:
    """
    Interpret a conversation, never failing.

    Uses the LLM when an API key is configured. Any configuration,
    SDK or provider failure is logged and the mock interpreter answers
    instead.

    Args:
        messages: Conversation so far
        config: Interpreter settings (loaded from file/env when omitted)

    Returns:
        RuntimePayload from the LLM or the mock
    """
    if config is None:
        try:
            config = load_interpreter_config()
        except ConfigError as e:
            logger.warning(f"Ignoring interpreter configuration: {e.message}")
            config = InterpreterConfig()

    if config.has_credentials:
        try:
            return LLMInterpreter(config).interpret(messages)
        except (InterpretationError, ImportError) as e:
            logger.warning(f"LLM interpreter failed, falling back to mock: {e}")

    return MockInterpreter().interpret(messages)
