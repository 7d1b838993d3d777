"""
panelkit CLI.

Commands:
  render   Compile a runtime payload into UI blocks
  form     Show (and optionally submit) the input form of an operation
  plan     Interpret a business description into a runtime payload
  catalog  List the prebuilt component catalog
"""

from __future__ import annotations

import json
import logging
import platform
from pathlib import Path
from typing import Any

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.table import Table
from rich.tree import Tree

from panelkit import __version__
from panelkit.core.errors import OperationExecutionError, OperationValidationError, PayloadError
from panelkit.core.ir import RuntimePayload
from panelkit.core.logging import setup_logging
from panelkit_ui.converters import build_operation_form_model, build_ui, compile_pattern, execute_operation
from panelkit_ui.runtime import (
    HeaderBlock,
    StatGridBlock,
    TableBlock,
    TabsBlock,
    TimelineBlock,
    UIBlock,
    dump_blocks,
    resolve_datasets,
)

logger = logging.getLogger(__name__)

console = Console()

app = typer.Typer(
    help="""panelkit – business description to admin UI

  • plan: interpret a description into a runtime payload
  • render: compile a payload into UI blocks
  • form: inspect or submit an operation form
""",
    no_args_is_help=True,
)


def get_version() -> str:
    """Get panelkit version from package metadata or fallback to __version__."""
    try:
        from importlib.metadata import version

        return version("panelkit")
    except Exception:
        return __version__


def version_callback(value: bool) -> None:
    """Display version and environment information."""
    if not value:
        return

    llm_providers = []
    try:
        import anthropic  # noqa: F401 - availability check

        llm_providers.append("anthropic")
    except ImportError:
        pass
    try:
        import openai  # noqa: F401 - availability check

        llm_providers.append("openai")
    except ImportError:
        pass

    typer.echo(f"panelkit version {get_version()}")
    typer.echo(f"  Python:        {platform.python_implementation()} {platform.python_version()}")
    typer.echo(
        f"  LLM Support:   {'✓ Available (' + ', '.join(llm_providers) + ')' if llm_providers else '✗ Not available (install with: pip install panelkit[llm])'}"
    )
    raise typer.Exit()


@app.callback()
def main_callback(
    version: bool | None = typer.Option(
        None,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and environment information",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
    log_json: bool = typer.Option(False, "--log-json", help="Emit logs as JSON Lines"),
) -> None:
    """panelkit CLI main callback for global options."""
    setup_logging(level="DEBUG" if verbose else None, json_format=log_json)


# =============================================================================
# Helpers
# =============================================================================


def load_payload(path: Path) -> RuntimePayload:
    """
    Load a runtime payload JSON file.

    Raises:
        PayloadError: If the file cannot be read or does not match the
            payload shape
    """
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise PayloadError(f"Cannot read {path}: {e}") from e
    try:
        return RuntimePayload.model_validate_json(text)
    except ValidationError as e:
        raise PayloadError(f"Invalid payload in {path}: {e}") from e


def _load_or_exit(path: Path) -> RuntimePayload:
    try:
        return load_payload(path)
    except PayloadError as e:
        typer.echo(f"Error: {e.message}", err=True)
        raise typer.Exit(code=1)


def _describe_block(block: UIBlock) -> str:
    if isinstance(block, HeaderBlock):
        return f"header: {block.title} ({len(block.actions)} action(s))"
    if isinstance(block, StatGridBlock):
        metrics = ", ".join(f"{m.label}={m.value}" for m in block.metrics)
        return f"stat-grid: {metrics}"
    if isinstance(block, TableBlock):
        return f"table: {block.entity} ({len(block.columns)} column(s), {len(block.data)} row(s))"
    if isinstance(block, TimelineBlock):
        return f"timeline: {block.title} ({len(block.items)} item(s))"
    if isinstance(block, TabsBlock):
        return f"tabs: {', '.join(tab.id for tab in block.tabs)}"
    return block.kind


def _add_blocks(tree: Tree, blocks: list[UIBlock]) -> None:
    for block in blocks:
        node = tree.add(_describe_block(block))
        if isinstance(block, TabsBlock):
            for tab in block.tabs:
                _add_blocks(node.add(f"[bold]{tab.label}[/bold]"), tab.blocks)


# =============================================================================
# Commands
# =============================================================================


@app.command()
def render(
    payload_path: Path = typer.Argument(..., help="Runtime payload JSON file"),  # noqa: B008
    pattern: str | None = typer.Option(None, "--pattern", "-p", help="Compile one pattern only"),
    output_format: str = typer.Option("json", "--format", "-f", help="Output format: json or tree"),
) -> None:
    """Compile a runtime payload into UI blocks."""
    if output_format not in ("json", "tree"):
        typer.echo(f"Error: unknown format '{output_format}' (use json or tree)", err=True)
        raise typer.Exit(code=1)

    payload = _load_or_exit(payload_path)
    schema = payload.app_schema

    if pattern:
        selected = schema.get_pattern(pattern)
        if selected is None:
            typer.echo(f"Error: pattern '{pattern}' not found in {schema.id}", err=True)
            raise typer.Exit(code=1)
        blocks = compile_pattern(selected, schema, resolve_datasets(schema, payload.datasets))
    else:
        blocks = build_ui(schema, payload.datasets)

    if output_format == "json":
        typer.echo(dump_blocks(blocks))
        return

    tree = Tree(f"[bold]{schema.name}[/bold]")
    _add_blocks(tree, blocks)
    console.print(tree)


@app.command()
def form(
    payload_path: Path = typer.Argument(..., help="Runtime payload JSON file"),  # noqa: B008
    operation_id: str = typer.Argument(..., help="Operation id"),
    values: str | None = typer.Option(
        None, "--values", help="Submit these values (JSON object) after validation"
    ),
) -> None:
    """Show the input form of an operation, optionally submitting values."""
    payload = _load_or_exit(payload_path)
    operation = payload.app_schema.get_operation(operation_id)
    if operation is None:
        typer.echo(f"Error: operation '{operation_id}' not found", err=True)
        raise typer.Exit(code=1)

    model = build_operation_form_model(operation, payload.app_schema)

    if values is None:
        if not model.requires_input:
            typer.echo(f"{operation.label} requires no input.")
            return
        table = Table(title=operation.label)
        table.add_column("Field", style="cyan", no_wrap=True)
        table.add_column("Label")
        table.add_column("Control")
        table.add_column("Required")
        table.add_column("Default")
        for field in model.fields:
            default = model.default_values.get(field.name)
            table.add_row(
                field.name,
                field.label,
                field.component.value,
                "yes" if field.required else "",
                "" if default is None else json.dumps(default),
            )
        console.print(table)
        return

    try:
        submitted: Any = json.loads(values)
    except json.JSONDecodeError as e:
        typer.echo(f"Error: --values is not valid JSON: {e}", err=True)
        raise typer.Exit(code=1)
    if not isinstance(submitted, dict):
        typer.echo("Error: --values must be a JSON object", err=True)
        raise typer.Exit(code=1)

    try:
        normalized = execute_operation(model, submitted)
    except OperationValidationError as e:
        typer.echo(f"Error: {e.message}", err=True)
        for name, message in e.field_errors.items():
            typer.echo(f"  {name}: {message}", err=True)
        raise typer.Exit(code=1)
    except OperationExecutionError as e:
        typer.echo(f"Error: {e.message}", err=True)
        raise typer.Exit(code=1)

    typer.echo(json.dumps(normalized, indent=2, ensure_ascii=False))


@app.command()
def plan(
    message: list[str] = typer.Argument(..., help="Business description (one or more user turns)"),  # noqa: B008
    mock: bool = typer.Option(False, "--mock", help="Use the keyword mock, never the LLM"),
    output: Path | None = typer.Option(None, "--output", "-o", help="Write payload to file"),  # noqa: B008
) -> None:
    """Interpret a business description into a runtime payload."""
    from panelkit.llm import ConversationMessage, MockInterpreter, interpret_conversation

    messages = [ConversationMessage(role="user", content=text) for text in message]
    if mock:
        payload = MockInterpreter().interpret(messages)
    else:
        payload = interpret_conversation(messages)
    logger.info(f"Interpreted {len(messages)} message(s) as '{payload.app_schema.id}'")

    text = payload.model_dump_json(by_alias=True, exclude_none=True, indent=2)
    if output is None:
        typer.echo(text)
        return
    output.write_text(text + "\n", encoding="utf-8")
    typer.echo(f"Wrote {payload.app_schema.name} to {output}")


@app.command()
def catalog() -> None:
    """List the prebuilt component catalog."""
    from panelkit.llm import COMPONENT_CATALOG

    table = Table(title="Component catalog")
    table.add_column("ID", style="cyan", no_wrap=True)
    table.add_column("Name")
    table.add_column("Best for")
    for component in COMPONENT_CATALOG:
        table.add_row(component.id, component.name, ", ".join(component.best_for))
    console.print(table)


def main() -> None:
    """Console script entry point."""
    app()


if __name__ == "__main__":
    main()
