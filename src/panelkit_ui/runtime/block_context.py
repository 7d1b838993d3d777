"""
UI block models for compiled render plans.

Pydantic models describing the renderable units produced by the block
compiler. Blocks carry display-ready primitives only (strings, numbers,
already-formatted metric text); the presentation layer owns layout and
styling.
"""

from __future__ import annotations

from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

from panelkit.core.ir import EnumOption, FieldTypeKind, FormVariant

ActionVariant = Literal["default", "outline", "destructive"]
MetricIntent = Literal["positive", "negative", "neutral"]


class BlockModel(BaseModel):
    """Base for block models: immutable once built."""

    model_config = ConfigDict(frozen=True)


class ColumnContext(BlockModel):
    """Column definition for table rendering."""

    field: str
    label: str
    type: FieldTypeKind
    format: str | None = None
    enum_values: list[EnumOption] | None = None
    component_hint: str | None = None


class ActionContext(BlockModel):
    """Button that opens an operation."""

    id: str
    label: str
    operation_id: str
    variant: ActionVariant = "default"
    icon: str | None = None


class MetricContext(BlockModel):
    """A single stat card."""

    id: str
    label: str
    value: str
    change: str | None = None
    intent: MetricIntent = "neutral"


class TimelineItemContext(BlockModel):
    """An event shown on a timeline."""

    model_config = ConfigDict(frozen=True, coerce_numbers_to_str=True)

    id: str
    label: str
    description: str | None = None
    timestamp: str | None = None
    actor: str | None = None
    status: str | None = None


class HeaderBlock(BlockModel):
    """Page or section header with optional action buttons."""

    kind: Literal["header"] = "header"
    title: str
    description: str | None = None
    actions: list[ActionContext] = Field(default_factory=list)


class StatGridBlock(BlockModel):
    """Grid of metric cards."""

    kind: Literal["stat-grid"] = "stat-grid"
    metrics: list[MetricContext]


class TableBlock(BlockModel):
    """Table of entity records."""

    kind: Literal["table"] = "table"
    entity: str
    title: str | None = None
    columns: list[ColumnContext]
    data: list[dict[str, Any]] = Field(default_factory=list)
    actions: list[ActionContext] = Field(default_factory=list)
    filters: list[str] = Field(default_factory=list)
    bulk_actions: bool = False


class DetailBlock(BlockModel):
    """Single-record detail panel."""

    kind: Literal["detail"] = "detail"
    entity: str
    title: str | None = None
    record: dict[str, Any] = Field(default_factory=dict)
    fields: list[str] = Field(default_factory=list)


class FormBlock(BlockModel):
    """Entry point of an operation form."""

    kind: Literal["form"] = "form"
    operation_id: str
    variant: FormVariant
    trigger_label: str | None = None
    description: str | None = None


class TabContext(BlockModel):
    """One tab of a tabs block."""

    id: str
    label: str
    blocks: list[UIBlock] = Field(default_factory=list)


class TabsBlock(BlockModel):
    """Tabbed group of nested blocks."""

    kind: Literal["tabs"] = "tabs"
    tabs: list[TabContext]


class TimelineBlock(BlockModel):
    """Chronological list of events."""

    kind: Literal["timeline"] = "timeline"
    title: str | None = None
    items: list[TimelineItemContext] = Field(default_factory=list)


UIBlock = Annotated[
    HeaderBlock
    | StatGridBlock
    | TableBlock
    | DetailBlock
    | FormBlock
    | TabsBlock
    | TimelineBlock,
    Field(discriminator="kind"),
]

TabContext.model_rebuild()
TabsBlock.model_rebuild()

UIBlockList: TypeAdapter[list[UIBlock]] = TypeAdapter(list[UIBlock])


def dump_blocks(blocks: list[UIBlock], indent: int | None = 2) -> str:
    """Serialize a block list to JSON."""
    return UIBlockList.dump_json(blocks, indent=indent, exclude_none=True).decode()


def load_blocks(data: str | bytes) -> list[UIBlock]:
    """Parse a block list previously produced by ``dump_blocks``."""
    return UIBlockList.validate_json(data)
