"""
Block compiler - converts interaction patterns into UI block lists.

Each pattern type has a builder that receives the pattern, its target
entity, the operations the pattern may surface and the entity's records,
and returns an ordered list of blocks. Missing references never raise:
a pattern whose entity is unknown contributes no blocks, and unknown
operation ids are skipped.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass
from typing import Any

from pydantic import ValidationError

from panelkit.core.ir import (
    AppSchema,
    Dataset,
    EntitySpec,
    FormVariant,
    InteractionPattern,
    OperationKind,
    OperationSpec,
    PatternType,
    RuntimePayload,
)
from panelkit_ui.converters.columns import derive_columns, derive_filters
from panelkit_ui.runtime.block_context import (
    ActionContext,
    ActionVariant,
    DetailBlock,
    FormBlock,
    HeaderBlock,
    MetricContext,
    StatGridBlock,
    TabContext,
    TableBlock,
    TabsBlock,
    TimelineBlock,
    TimelineItemContext,
    UIBlock,
)
from panelkit_ui.runtime.datasets import Records, resolve_datasets
from panelkit_ui.runtime.metrics import derive_change_text, summarise_field, trend_intent

logger = logging.getLogger(__name__)

QUICK_STATS_LIMIT = 4


@dataclass(frozen=True)
class PatternContext:
    """Everything a pattern builder needs, with references already resolved."""

    pattern: InteractionPattern
    entity: EntitySpec
    operations: list[OperationSpec]
    records: Records


PatternBuilder = Callable[[PatternContext], list[UIBlock]]


# =============================================================================
# Shared pieces
# =============================================================================


def resolve_operations(pattern: InteractionPattern, schema: AppSchema) -> list[OperationSpec]:
    """Resolve the pattern's operation ids in order, skipping unknown ids."""
    operations: list[OperationSpec] = []
    for operation_id in pattern.operations or []:
        operation = schema.get_operation(operation_id)
        if operation is None:
            logger.debug(f"Pattern '{pattern.id}' references unknown operation '{operation_id}'")
            continue
        operations.append(operation)
    return operations


def _build_action(operation: OperationSpec, fallback_variant: ActionVariant) -> ActionContext:
    variant: ActionVariant = (
        "destructive" if operation.kind == OperationKind.DELETE else fallback_variant
    )
    return ActionContext(
        id=operation.id,
        label=operation.trigger_label,
        operation_id=operation.id,
        variant=variant,
    )


def _header_actions(operations: list[OperationSpec]) -> list[ActionContext]:
    return [_build_action(op, "default") for op in operations]


def _row_actions(operations: list[OperationSpec]) -> list[ActionContext]:
    return [_build_action(op, "outline") for op in operations if op.kind != OperationKind.CREATE]


def _build_table(ctx: PatternContext, **extra: Any) -> TableBlock:
    return TableBlock(
        entity=ctx.entity.id,
        columns=derive_columns(ctx.entity),
        data=[dict(record) for record in ctx.records],
        **extra,
    )


def _build_form(
    operation: OperationSpec,
    default_variant: FormVariant,
    trigger_label: str | None = None,
) -> FormBlock:
    declared_label = operation.ui.trigger_label if operation.ui else None
    return FormBlock(
        operation_id=operation.id,
        variant=operation.variant or default_variant,
        trigger_label=declared_label or trigger_label or operation.label,
        description=operation.description,
    )


def _derive_timeline(record: Mapping[str, Any]) -> list[TimelineItemContext]:
    """
    Read the ``timeline`` list embedded in a record.

    An entry without ``id`` takes its position, and one without ``label``
    falls back to its description and then its id. Entries that are not
    objects are skipped.
    """
    raw = record.get("timeline")
    if not isinstance(raw, list):
        return []
    items: list[TimelineItemContext] = []
    for index, entry in enumerate(raw):
        if not isinstance(entry, Mapping):
            logger.debug(f"Skipping malformed timeline entry: {entry!r}")
            continue
        known = {
            key: entry[key]
            for key in TimelineItemContext.model_fields
            if entry.get(key) is not None
        }
        known.setdefault("id", index)
        known.setdefault("label", known.get("description", known["id"]))
        try:
            items.append(TimelineItemContext.model_validate(known))
        except ValidationError:
            logger.debug(f"Skipping malformed timeline entry: {entry!r}")
    return items


# =============================================================================
# Pattern builders
# =============================================================================


def _build_collection_hub(ctx: PatternContext) -> list[UIBlock]:
    pattern, entity = ctx.pattern, ctx.entity
    blocks: list[UIBlock] = [
        HeaderBlock(
            title=entity.label,
            description=pattern.description or entity.description,
            actions=_header_actions(ctx.operations),
        )
    ]

    if pattern.has_feature("quick_stats"):
        metrics = [
            MetricContext(
                id=field.name,
                label=field.label,
                value=summarise_field(ctx.records, field),
            )
            for field in entity.metric_fields[:QUICK_STATS_LIMIT]
        ]
        if metrics:
            blocks.append(StatGridBlock(metrics=metrics))

    blocks.append(
        _build_table(
            ctx,
            actions=_row_actions(ctx.operations),
            filters=derive_filters(entity) if pattern.has_feature("quick_filters") else [],
            bulk_actions=pattern.has_feature("bulk_actions"),
        )
    )

    inline_create = next(
        (
            op
            for op in ctx.operations
            if op.kind == OperationKind.CREATE and op.variant == FormVariant.INLINE
        ),
        None,
    )
    if inline_create is not None:
        blocks.append(
            _build_form(inline_create, FormVariant.INLINE, trigger_label=f"New {entity.label}")
        )

    return blocks


def _build_detail_dashboard(ctx: PatternContext) -> list[UIBlock]:
    pattern, entity = ctx.pattern, ctx.entity
    record = dict(ctx.records[0]) if ctx.records else {}
    return [
        HeaderBlock(
            title=pattern.name or entity.label,
            description=pattern.description or entity.description,
        ),
        TabsBlock(
            tabs=[
                TabContext(
                    id="overview",
                    label="Overview",
                    blocks=[
                        DetailBlock(
                            entity=entity.id,
                            record=record,
                            fields=[field.name for field in entity.fields],
                        )
                    ],
                ),
                TabContext(
                    id="activity",
                    label="Activity",
                    blocks=[
                        TimelineBlock(
                            title=f"{entity.label} events",
                            items=_derive_timeline(record),
                        )
                    ],
                ),
            ]
        ),
    ]


def _build_workflow_console(ctx: PatternContext) -> list[UIBlock]:
    pattern, entity = ctx.pattern, ctx.entity
    tabs = [
        TabContext(id="pipeline", label="Pipeline", blocks=[_build_table(ctx)]),
        TabContext(
            id="actions",
            label="Actions",
            blocks=[
                _build_form(op, FormVariant.DRAWER)
                for op in ctx.operations
                if op.kind != OperationKind.CREATE
            ],
        ),
    ]
    return [
        HeaderBlock(
            title=pattern.name or f"{entity.label} workflow",
            description=pattern.description,
            actions=_header_actions(ctx.operations),
        ),
        TabsBlock(tabs=[tab for tab in tabs if tab.blocks]),
    ]


def _build_analytics_summary(ctx: PatternContext) -> list[UIBlock]:
    pattern, entity = ctx.pattern, ctx.entity
    blocks: list[UIBlock] = [
        HeaderBlock(
            title=pattern.name or f"{entity.label} analytics",
            description=pattern.description,
        )
    ]
    metrics: list[MetricContext] = []
    for field in entity.metric_fields:
        change = derive_change_text(ctx.records, field.name)
        metrics.append(
            MetricContext(
                id=field.name,
                label=field.label,
                value=summarise_field(ctx.records, field),
                change=change,
                intent=trend_intent(change),
            )
        )
    if metrics:
        blocks.append(StatGridBlock(metrics=metrics))
    blocks.append(_build_table(ctx, title=f"{entity.label} data"))
    return blocks


PATTERN_BUILDERS: dict[PatternType, PatternBuilder] = {
    PatternType.COLLECTION_HUB: _build_collection_hub,
    PatternType.DETAIL_DASHBOARD: _build_detail_dashboard,
    PatternType.WORKFLOW_CONSOLE: _build_workflow_console,
    PatternType.ANALYTICS_SUMMARY: _build_analytics_summary,
}


# =============================================================================
# Public API
# =============================================================================


def compile_pattern(
    pattern: InteractionPattern,
    schema: AppSchema,
    datasets: Mapping[str, Records],
) -> list[UIBlock]:
    """
    Compile one interaction pattern into UI blocks.

    Args:
        pattern: Pattern to compile
        schema: Schema owning the pattern
        datasets: Resolved records per entity id (see ``resolve_datasets``)

    Returns:
        Ordered block list; empty when the pattern's entity is unknown or
        its type is not recognized
    """
    entity = schema.get_entity(pattern.entity)
    if entity is None:
        logger.debug(f"Pattern '{pattern.id}' references unknown entity '{pattern.entity}'")
        return []

    pattern_type = pattern.pattern_type
    builder = PATTERN_BUILDERS.get(pattern_type) if pattern_type else None
    if builder is None:
        logger.debug(f"Pattern '{pattern.id}' has unsupported type '{pattern.type}'")
        return []

    ctx = PatternContext(
        pattern=pattern,
        entity=entity,
        operations=resolve_operations(pattern, schema),
        records=list(datasets.get(entity.id, [])),
    )
    return builder(ctx)


def build_ui(schema: AppSchema, datasets: Iterable[Dataset] | None = None) -> list[UIBlock]:
    """
    Compile every pattern of a schema into one block list.

    Blocks appear in schema pattern order, without deduplication.

    Args:
        schema: Application schema
        datasets: Optional override datasets

    Returns:
        The full render plan
    """
    resolved = resolve_datasets(schema, datasets)
    blocks: list[UIBlock] = []
    for pattern in schema.patterns:
        blocks.extend(compile_pattern(pattern, schema, resolved))
    logger.debug(
        f"Compiled {len(schema.patterns)} pattern(s) of '{schema.id}' into {len(blocks)} block(s)"
    )
    return blocks


def build_ui_from_payload(payload: RuntimePayload) -> list[UIBlock]:
    """Compile an interpreter payload."""
    return build_ui(payload.app_schema, payload.datasets)
