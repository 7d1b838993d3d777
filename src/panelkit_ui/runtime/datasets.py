"""
Dataset resolution.

Builds the record lists backing each entity from embedded sample data and
externally supplied datasets.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from panelkit.core.ir import AppSchema, Dataset, RuntimePayload

Records = list[dict[str, Any]]


def resolve_datasets(
    schema: AppSchema,
    datasets: Iterable[Dataset] | None = None,
) -> dict[str, Records]:
    """
    Map every entity id to its record list.

    Embedded ``sample_data`` is the default (empty list when absent). A
    dataset whose entity id matches replaces that entry wholesale; records
    are never merged. Datasets naming unknown entities are added as-is.

    The returned lists and records are copies, so callers may not affect
    the schema or the supplied datasets through them.

    Args:
        schema: Application schema
        datasets: Optional override datasets, applied in order

    Returns:
        Mapping from entity id to records
    """
    resolved: dict[str, Records] = {}
    for entity in schema.entities:
        resolved[entity.id] = [dict(record) for record in entity.sample_data or []]
    for dataset in datasets or []:
        resolved[dataset.entity] = [dict(record) for record in dataset.records]
    return resolved


def resolve_payload_datasets(payload: RuntimePayload) -> dict[str, Records]:
    """Resolve the datasets of an interpreter payload."""
    return resolve_datasets(payload.app_schema, payload.datasets)
