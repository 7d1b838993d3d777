"""Shared pytest fixtures for panelkit tests."""

import logging
from pathlib import Path

import pytest

from panelkit.core import ir
from panelkit.core.logging import LOGGER_NAMES


@pytest.fixture(autouse=True)
def reset_panelkit_loggers():
    """Undo handlers installed by ``setup_logging`` so caplog keeps working."""
    yield
    for name in LOGGER_NAMES:
        logger = logging.getLogger(name)
        logger.handlers.clear()
        logger.setLevel(logging.NOTSET)
        logger.propagate = True


@pytest.fixture
def orders_entity() -> ir.EntitySpec:
    """Return the two-field orders entity."""
    return ir.EntitySpec(
        id="orders",
        name="Order",
        label="Orders",
        fields=[
            ir.FieldSpec(name="id", label="ID", type=ir.FieldTypeKind.STRING, is_identifier=True),
            ir.FieldSpec(
                name="amount",
                label="Amount",
                type=ir.FieldTypeKind.CURRENCY,
                is_metric=True,
            ),
        ],
    )


@pytest.fixture
def orders_records() -> list[dict]:
    """Return two order records."""
    return [{"id": "1", "amount": 100}, {"id": "2", "amount": 200}]


@pytest.fixture
def orders_schema(orders_entity: ir.EntitySpec) -> ir.AppSchema:
    """Return a schema with one collection hub over orders."""
    return ir.AppSchema(
        id="shop",
        name="Shop",
        entities=[orders_entity],
        patterns=[
            ir.InteractionPattern(
                id="orders-hub",
                name="Orders",
                type="collection-hub",
                entity="orders",
                features=ir.PatternFeatures(quick_stats=True),
            )
        ],
    )


@pytest.fixture
def task_schema() -> ir.AppSchema:
    """Return a schema with a task entity, four operations and every pattern type."""
    return ir.AppSchema.model_validate(
        {
            "id": "tasks",
            "name": "Task board",
            "description": "Track team tasks.",
            "entities": [
                {
                    "id": "task",
                    "name": "Task",
                    "label": "Tasks",
                    "description": "Work items",
                    "fields": [
                        {"name": "code", "label": "Code", "type": "string", "isPrimary": True},
                        {
                            "name": "title",
                            "label": "Title",
                            "type": "string",
                            "isSearchable": True,
                            "required": True,
                        },
                        {
                            "name": "status",
                            "label": "Status",
                            "type": "status",
                            "enumValues": [
                                {"label": "Open", "value": "open"},
                                {"label": "Done", "value": "done"},
                            ],
                        },
                        {
                            "name": "estimate",
                            "label": "Estimate",
                            "type": "number",
                            "isMetric": True,
                            "description": "Hours @default: 4",
                        },
                        {"name": "done", "label": "Done", "type": "boolean"},
                        {"name": "secret", "label": "Secret", "type": "string", "hidden": True},
                    ],
                    "sampleData": [
                        {
                            "code": "T-2",
                            "title": "Ship it",
                            "status": "open",
                            "estimate": 6,
                            "timeline": [
                                {"id": "e1", "label": "Created", "timestamp": "2024-01-01"},
                            ],
                        },
                        {"code": "T-1", "title": "Plan it", "status": "done", "estimate": 4},
                    ],
                }
            ],
            "operations": [
                {
                    "id": "create-task",
                    "name": "createTask",
                    "label": "Create task",
                    "targetEntity": "task",
                    "kind": "create",
                    "method": "POST",
                    "endpoint": "/api/tasks",
                    "parameters": [{"name": "title"}, {"name": "estimate"}],
                    "ui": {"variant": "inline"},
                },
                {
                    "id": "close-task",
                    "name": "closeTask",
                    "label": "Close task",
                    "targetEntity": "task",
                    "kind": "update",
                    "method": "PATCH",
                    "endpoint": "/api/tasks/{code}",
                },
                {
                    "id": "delete-task",
                    "name": "deleteTask",
                    "label": "Delete task",
                    "targetEntity": "task",
                    "kind": "delete",
                    "method": "DELETE",
                    "endpoint": "/api/tasks/{code}",
                    "ui": {"triggerLabel": "Remove"},
                },
                {
                    "id": "ping",
                    "name": "ping",
                    "label": "Ping",
                    "targetEntity": "nowhere",
                    "kind": "action",
                    "method": "POST",
                    "endpoint": "/api/ping",
                },
            ],
            "patterns": [
                {
                    "id": "hub",
                    "name": "Task hub",
                    "type": "collection-hub",
                    "entity": "task",
                    "operations": ["create-task", "close-task", "delete-task", "missing-op"],
                    "features": {"quickStats": True, "quickFilters": True, "bulkActions": True},
                },
                {
                    "id": "detail",
                    "name": "Task detail",
                    "type": "detail-dashboard",
                    "entity": "task",
                },
                {
                    "id": "console",
                    "name": "Task console",
                    "type": "workflow-console",
                    "entity": "task",
                    "operations": ["create-task", "close-task"],
                },
                {
                    "id": "analytics",
                    "name": "Task analytics",
                    "type": "analytics-summary",
                    "entity": "task",
                },
            ],
        }
    )


@pytest.fixture
def payload_file(tmp_path: Path, task_schema: ir.AppSchema) -> Path:
    """Write the task schema as a runtime payload JSON file."""
    path = tmp_path / "payload.json"
    payload = ir.RuntimePayload(app_schema=task_schema)
    path.write_text(payload.model_dump_json(by_alias=True, exclude_none=True))
    return path
