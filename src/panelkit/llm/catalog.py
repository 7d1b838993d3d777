"""
Catalog of prebuilt UI components.

The catalog is shown to the LLM so that generated schemas favour
patterns the renderer can assemble from these components.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class CatalogComponent(BaseModel):
    """A prebuilt component available to generated interfaces."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    description: str
    best_for: list[str] = Field(default_factory=list)
    inputs: list[str] = Field(default_factory=list)
    outputs: list[str] = Field(default_factory=list)
    interaction_hints: list[str] = Field(default_factory=list)
    layout_hints: list[str] = Field(default_factory=list)
    code_example: str | None = None


COMPONENT_CATALOG: tuple[CatalogComponent, ...] = (
    CatalogComponent(
        id="stat-card",
        name="Stat card",
        description=(
            "Shows a key business metric, trend percentage or aggregate, "
            "usually at the top of a dashboard."
        ),
        best_for=["key metrics", "live overview"],
        inputs=["title", "value", "change", "icon"],
        interaction_hints=["can link to a detail view", "combines into a stat grid"],
        layout_hints=["sits in a grid", "three to four per row"],
        code_example='<MetricCard title="Order total" value="¥930,000" change="↑12%" />',
    ),
    CatalogComponent(
        id="data-table",
        name="Data table",
        description="Sortable, filterable, paginated table for structured list data.",
        best_for=["list data", "bulk operations", "comparing many fields"],
        inputs=["columns", "rows", "filters", "rowActions"],
        interaction_hints=["supports toolbar buttons", "supports inline row actions"],
        layout_hints=["spans the content area", "pairs with stat cards"],
        code_example='<EntityTable entity="orders" data={orders} onSelect={...} />',
    ),
    CatalogComponent(
        id="entity-form",
        name="Entity form",
        description=(
            "Form generated from the data model, with validation and submit feedback."
        ),
        best_for=["creating or editing entities", "approval steps"],
        inputs=["fields", "initialValues", "submit"],
        interaction_hints=["fits in a dialog or side sheet", "can form a multi-step flow"],
        layout_hints=["two-column field layout", "supports group headings"],
        code_example="<EntityForm schema={entitySchema} onSubmit={saveOrder} />",
    ),
    CatalogComponent(
        id="detail-panel",
        name="Detail panel",
        description="Shows one record as cards and labelled field groups.",
        best_for=["viewing an entity", "showing context"],
        inputs=["entity", "record", "highlightFields"],
        interaction_hints=["pairs with a timeline", "can hold action buttons"],
        layout_hints=["sidebar or drawer", "two-column layout"],
        code_example="<DetailPanel entity={customer} record={selectedCustomer} />",
    ),
    CatalogComponent(
        id="tab-layout",
        name="Tab layout",
        description="Groups related views such as details, workflow and reports.",
        best_for=["multi-dimensional data", "complex business panels"],
        inputs=["tabs", "panes"],
        interaction_hints=["holds tables, forms and charts"],
        layout_hints=["horizontal or vertical tabs"],
        code_example=(
            "<TabbedView tabs={[{ id: 'overview', label: 'Overview', content: <Overview /> }]} />"
        ),
    ),
    CatalogComponent(
        id="action-bar",
        name="Action bar",
        description="Horizontal toolbar holding common actions, filters and search.",
        best_for=["top of list pages", "bulk operations"],
        inputs=["actions", "filters", "search"],
        interaction_hints=["supports permission checks", "supports dropdown menus"],
        layout_hints=["above a table", "actions ordered by importance"],
        code_example="<ActionBar search filters actions={primaryActions} />",
    ),
    CatalogComponent(
        id="timeline",
        name="Timeline",
        description="Business events and approval records in chronological order.",
        best_for=["event tracking", "approval history"],
        inputs=["items", "timestamp", "actor"],
        interaction_hints=["events open their details"],
        layout_hints=["common in detail sidebars"],
        code_example="<Timeline items={orderEvents} />",
    ),
    CatalogComponent(
        id="kanban-board",
        name="Kanban board",
        description="Columns of cards showing status flow, e.g. sales leads or tasks.",
        best_for=["status flow", "board management"],
        inputs=["columns", "cards", "onDrag"],
        interaction_hints=["drag to update status", "per-column counts"],
        layout_hints=["columns side by side"],
        code_example="<KanbanBoard columns={pipelineColumns} onMove={handlePipelineMove} />",
    ),
)


def find_catalog_component(component_id: str) -> CatalogComponent | None:
    """Get catalog component by id."""
    for component in COMPONENT_CATALOG:
        if component.id == component_id:
            return component
    return None


def build_catalog_summary() -> str:
    """One line per component, for use in prompts."""
    return "\n".join(
        f"{component.name}: {component.description} Best for: {', '.join(component.best_for)}"
        for component in COMPONENT_CATALOG
    )
