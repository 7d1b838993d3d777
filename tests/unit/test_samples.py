"""Tests for the built-in samples and component catalog."""

import pytest

from panelkit.llm.catalog import COMPONENT_CATALOG, build_catalog_summary, find_catalog_component
from panelkit.llm.samples import SAMPLE_PAYLOADS
from panelkit_ui.converters import build_operation_form_model, build_ui_from_payload


class TestCatalog:
    """Component catalog lookups."""

    def test_ids_are_unique(self):
        ids = [c.id for c in COMPONENT_CATALOG]
        assert len(ids) == len(set(ids)) == 8

    def test_find(self):
        assert find_catalog_component("timeline").name == "Timeline"
        assert find_catalog_component("chart") is None

    def test_summary_has_one_line_per_component(self):
        assert len(build_catalog_summary().splitlines()) == len(COMPONENT_CATALOG)


@pytest.mark.parametrize("name", sorted(SAMPLE_PAYLOADS))
class TestSamples:
    """Every sample renders and every operation builds a form."""

    def test_renders(self, name):
        payload = SAMPLE_PAYLOADS[name]
        blocks = build_ui_from_payload(payload)
        assert blocks
        assert blocks[0].kind == "header"

    def test_operation_forms(self, name):
        schema = SAMPLE_PAYLOADS[name].app_schema
        for operation in schema.operations:
            model = build_operation_form_model(operation, schema)
            assert model.requires_input
