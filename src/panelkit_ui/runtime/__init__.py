"""
panelkit UI runtime: block models, dataset resolution and metric summaries.
"""

from panelkit_ui.runtime.block_context import (
    ActionContext,
    ColumnContext,
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
    UIBlockList,
    dump_blocks,
    load_blocks,
)
from panelkit_ui.runtime.datasets import resolve_datasets, resolve_payload_datasets
from panelkit_ui.runtime.metrics import (
    derive_change_text,
    summarise_field,
    summarise_metric,
    trend_intent,
)

__all__ = [
    # Blocks
    "ActionContext",
    "ColumnContext",
    "DetailBlock",
    "FormBlock",
    "HeaderBlock",
    "MetricContext",
    "StatGridBlock",
    "TabContext",
    "TableBlock",
    "TabsBlock",
    "TimelineBlock",
    "TimelineItemContext",
    "UIBlock",
    "UIBlockList",
    "dump_blocks",
    "load_blocks",
    # Datasets
    "resolve_datasets",
    "resolve_payload_datasets",
    # Metrics
    "derive_change_text",
    "summarise_field",
    "summarise_metric",
    "trend_intent",
]
