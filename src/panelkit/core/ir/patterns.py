"""
Interaction pattern types for panelkit IR.

A pattern is a named recipe that selects and arranges UI blocks for one
entity.
"""

from __future__ import annotations

from enum import Enum

from .fields import SchemaModel


class PatternType(str, Enum):
    """Pattern recipes the block compiler knows how to build."""

    COLLECTION_HUB = "collection-hub"
    DETAIL_DASHBOARD = "detail-dashboard"
    WORKFLOW_CONSOLE = "workflow-console"
    ANALYTICS_SUMMARY = "analytics-summary"


class LayoutEmphasis(str, Enum):
    """What a pattern layout should foreground."""

    DATA = "data"
    ACTIONS = "actions"
    INSIGHTS = "insights"


class DataBinding(SchemaModel):
    """Where a pattern reads its records from."""

    source: str
    relationships: list[str] | None = None


class PatternFeatures(SchemaModel):
    """Optional feature flags of a pattern."""

    quick_filters: bool = False
    quick_stats: bool = False
    bulk_actions: bool = False
    timeline: bool = False
    highlights: bool = False


class LayoutHints(SchemaModel):
    """Layout hints passed through to the presentation layer."""

    columns: int | None = None
    emphasis: LayoutEmphasis | None = None


class InteractionPattern(SchemaModel):
    """
    Specification for an interaction pattern.

    ``type`` is kept as a plain string so that schemas produced by newer
    providers still parse; the compiler renders unknown types as nothing.
    """

    id: str
    name: str
    description: str | None = None
    type: str
    entity: str
    operations: list[str] | None = None
    data_binding: DataBinding | None = None
    features: PatternFeatures | None = None
    layout_hints: LayoutHints | None = None

    @property
    def pattern_type(self) -> PatternType | None:
        """The known pattern type, or None for unrecognized tags."""
        try:
            return PatternType(self.type)
        except ValueError:
            return None

    def has_feature(self, name: str) -> bool:
        """Check if a feature flag is enabled."""
        return bool(self.features and getattr(self.features, name, False))
