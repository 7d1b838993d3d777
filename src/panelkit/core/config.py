"""
Interpreter configuration for panelkit.

Configuration is loaded from the ``[interpreter]`` table of
``panelkit.toml`` (when present) and then overridden by environment
variables. The environment names follow the OpenAI-compatible conventions
so that existing deployments can reuse their variables:

    OPENAI_API_KEY / AI_API_KEY / ANTHROPIC_API_KEY
    OPENAI_MODEL / AI_MODEL
    OPENAI_BASE_URL / AI_API_BASE_URL
    OPENAI_ORG / OPENAI_ORGANIZATION
    OPENAI_PROJECT
    OPENAI_API_KEY_HEADER / AI_API_KEY_HEADER
    OPENAI_ADDITIONAL_HEADERS / AI_API_ADDITIONAL_HEADERS  (JSON object)
    PANELKIT_LLM_PROVIDER  (openai or anthropic)
"""

from __future__ import annotations

import json
import logging
import os
import tomllib
from collections.abc import Mapping
from enum import Enum
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, ValidationError

from panelkit.core.errors import ConfigError

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "panelkit.toml"


class LLMProvider(str, Enum):
    """Supported LLM providers."""

    OPENAI = "openai"
    ANTHROPIC = "anthropic"


DEFAULT_MODELS: dict[LLMProvider, str] = {
    LLMProvider.OPENAI: "gpt-4o-mini",
    LLMProvider.ANTHROPIC: "claude-3-5-sonnet-20241022",
}


class InterpreterConfig(BaseModel):
    """Settings for the LLM-backed interpreter."""

    provider: LLMProvider = LLMProvider.OPENAI
    api_key: str | None = None
    model: str | None = None
    base_url: str | None = None
    organization: str | None = None
    project: str | None = None
    api_key_header: str = "Authorization"
    extra_headers: dict[str, str] = Field(default_factory=dict)
    temperature: float = 0.0
    max_tokens: int = Field(default=8000, ge=1)

    @property
    def resolved_model(self) -> str:
        """Configured model or the provider default."""
        return self.model or DEFAULT_MODELS[self.provider]

    @property
    def has_credentials(self) -> bool:
        """Check if an API key is configured."""
        return bool(self.api_key)

    def request_headers(self) -> dict[str, str]:
        """Extra headers to send with every provider request."""
        headers = dict(self.extra_headers)
        if self.api_key and self.api_key_header.lower() != "authorization":
            headers[self.api_key_header] = self.api_key
        return headers


def parse_additional_headers(value: str | None) -> dict[str, str] | None:
    """
    Parse a JSON object of extra HTTP headers.

    Non-string values are JSON-encoded. Returns None (and logs a warning)
    when the value is not a JSON object.
    """
    if not value:
        return None
    try:
        parsed = json.loads(value)
    except json.JSONDecodeError as e:
        logger.warning(f"Failed to parse additional headers: {e}")
        return None
    if not isinstance(parsed, dict):
        logger.warning("Additional headers must be a JSON object, ignoring")
        return None

    headers: dict[str, str] = {}
    for key, val in parsed.items():
        if isinstance(val, str):
            headers[key] = val
        elif val is not None:
            headers[key] = json.dumps(val)
    return headers


def _first_env(environ: Mapping[str, str], *names: str) -> str | None:
    for name in names:
        value = environ.get(name)
        if value:
            return value.strip()
    return None


def _load_toml_section(path: Path) -> dict[str, Any]:
    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        raise ConfigError(f"Cannot read {path}: {e}") from e
    section = data.get("interpreter", {})
    if not isinstance(section, dict):
        raise ConfigError(f"[interpreter] in {path} must be a table")
    return section


def load_interpreter_config(
    path: Path | None = None,
    environ: Mapping[str, str] | None = None,
) -> InterpreterConfig:
    """
    Load interpreter settings.

    Args:
        path: Explicit config file. Defaults to ``panelkit.toml`` in the
            current directory when it exists.
        environ: Environment mapping (defaults to ``os.environ``)

    Returns:
        InterpreterConfig with environment values taking precedence

    Raises:
        ConfigError: If the config file exists but cannot be parsed
    """
    environ = os.environ if environ is None else environ

    values: dict[str, Any] = {}
    config_path = path or Path.cwd() / CONFIG_FILENAME
    if path is not None or config_path.exists():
        values.update(_load_toml_section(config_path))

    provider = _first_env(environ, "PANELKIT_LLM_PROVIDER")
    if provider:
        values["provider"] = provider.lower()

    is_anthropic = str(values.get("provider", "")).lower() == LLMProvider.ANTHROPIC.value
    key_names = (
        ("ANTHROPIC_API_KEY", "AI_API_KEY")
        if is_anthropic
        else ("OPENAI_API_KEY", "AI_API_KEY")
    )
    env_overrides = {
        "api_key": _first_env(environ, *key_names),
        "model": _first_env(environ, "OPENAI_MODEL", "AI_MODEL"),
        "base_url": _first_env(environ, "OPENAI_BASE_URL", "AI_API_BASE_URL"),
        "organization": _first_env(environ, "OPENAI_ORG", "OPENAI_ORGANIZATION"),
        "project": _first_env(environ, "OPENAI_PROJECT"),
        "api_key_header": _first_env(environ, "OPENAI_API_KEY_HEADER", "AI_API_KEY_HEADER"),
    }
    values.update({key: val for key, val in env_overrides.items() if val})

    headers = parse_additional_headers(
        environ.get("OPENAI_ADDITIONAL_HEADERS")
    ) or parse_additional_headers(environ.get("AI_API_ADDITIONAL_HEADERS"))
    if headers:
        values["extra_headers"] = headers

    if values.get("base_url"):
        values["base_url"] = str(values["base_url"]).rstrip("/")

    try:
        return InterpreterConfig(**values)
    except ValidationError as e:
        raise ConfigError(f"Invalid interpreter configuration: {e}") from e
