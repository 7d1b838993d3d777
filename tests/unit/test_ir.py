"""Tests for the schema IR models."""

import pytest
from pydantic import ValidationError

from panelkit.core import ir


class TestFieldSpec:
    """Field parsing and helpers."""

    def test_camel_case_keys_are_accepted(self):
        field = ir.FieldSpec.model_validate(
            {
                "name": "amount",
                "label": "Amount",
                "type": "currency",
                "isMetric": True,
                "enumValues": [{"label": "A", "value": "a"}],
                "componentHint": "money",
                "defaultValue": 10,
            }
        )
        assert field.is_metric
        assert field.enum_values == [ir.EnumOption(label="A", value="a")]
        assert field.component_hint == "money"
        assert field.default_value == 10

    def test_snake_case_names_are_accepted(self):
        field = ir.FieldSpec(name="id", label="ID", type=ir.FieldTypeKind.STRING, is_primary=True)
        assert field.is_key

    def test_unknown_type_is_rejected(self):
        with pytest.raises(ValidationError):
            ir.FieldSpec.model_validate({"name": "x", "label": "X", "type": "uuid"})

    def test_numeric_family(self):
        for kind in ("number", "integer", "currency", "percentage"):
            assert ir.FieldSpec(name="f", label="F", type=kind).is_numeric
        assert not ir.FieldSpec(name="f", label="F", type="rating").is_numeric

    def test_models_are_frozen(self):
        field = ir.FieldSpec(name="f", label="F", type="string")
        with pytest.raises(ValidationError):
            field.label = "G"


class TestEntitySpec:
    """Entity lookups."""

    def test_primary_field_prefers_first_key(self, orders_entity):
        assert orders_entity.primary_field().name == "id"

    def test_primary_field_missing(self):
        entity = ir.EntitySpec(
            id="notes", name="Note", label="Notes", fields=[{"name": "body", "label": "Body", "type": "text"}]
        )
        assert entity.primary_field() is None

    def test_get_field(self, orders_entity):
        assert orders_entity.get_field("amount").type == ir.FieldTypeKind.CURRENCY
        assert orders_entity.get_field("nope") is None

    def test_metric_fields(self, orders_entity):
        assert [f.name for f in orders_entity.metric_fields] == ["amount"]

    def test_relations(self):
        entity = ir.EntitySpec.model_validate(
            {
                "id": "customers",
                "name": "Customer",
                "label": "Customers",
                "relations": [{"relation": "hasMany", "target": "orders"}],
            }
        )
        assert entity.relations[0].relation == ir.RelationKind.HAS_MANY


class TestOperationSpec:
    """Operation helpers."""

    def test_trigger_label_prefers_ui(self):
        op = ir.OperationSpec.model_validate(
            {
                "id": "del",
                "name": "del",
                "label": "Delete",
                "targetEntity": "orders",
                "kind": "delete",
                "method": "DELETE",
                "endpoint": "/x",
                "ui": {"triggerLabel": "Remove", "variant": "drawer"},
            }
        )
        assert op.trigger_label == "Remove"
        assert op.variant == ir.FormVariant.DRAWER

    def test_trigger_label_defaults_to_label(self):
        op = ir.OperationSpec(
            id="a", name="a", label="Run", target_entity="x", kind="action", method="POST", endpoint="/a"
        )
        assert op.trigger_label == "Run"
        assert op.variant is None

    def test_parameter_ref(self):
        param = ir.OperationParameter.model_validate(
            {"name": "who", "ref": {"entity": "users", "field": "email"}}
        )
        assert param.ref == ir.FieldRef(entity="users", field="email")
        assert param.label is None


class TestInteractionPattern:
    """Pattern type handling."""

    def test_known_type(self):
        pattern = ir.InteractionPattern(id="p", name="P", type="collection-hub", entity="e")
        assert pattern.pattern_type == ir.PatternType.COLLECTION_HUB

    def test_unknown_type_still_parses(self):
        pattern = ir.InteractionPattern(id="p", name="P", type="kanban", entity="e")
        assert pattern.pattern_type is None

    def test_has_feature(self):
        pattern = ir.InteractionPattern.model_validate(
            {"id": "p", "name": "P", "type": "collection-hub", "entity": "e", "features": {"quickStats": True}}
        )
        assert pattern.has_feature("quick_stats")
        assert not pattern.has_feature("quick_filters")
        assert not ir.InteractionPattern(id="q", name="Q", type="x", entity="e").has_feature("quick_stats")


class TestRuntimePayload:
    """Provider payload parsing."""

    def test_schema_alias(self, task_schema):
        payload = ir.RuntimePayload.model_validate(
            {"schema": task_schema.model_dump(by_alias=True), "datasets": [{"entity": "task", "records": []}]}
        )
        assert payload.app_schema == task_schema
        assert payload.datasets[0].entity == "task"

    def test_lookups(self, task_schema):
        assert task_schema.get_entity("task").label == "Tasks"
        assert task_schema.get_entity("nope") is None
        assert task_schema.get_operation("close-task").kind == ir.OperationKind.UPDATE
        assert task_schema.get_operation("nope") is None
        assert task_schema.get_pattern("detail").type == "detail-dashboard"

    def test_dump_uses_camel_case(self, task_schema):
        dumped = ir.RuntimePayload(app_schema=task_schema).model_dump(by_alias=True)
        entity = dumped["schema"]["entities"][0]
        assert "sampleData" in entity
        assert "isPrimary" in entity["fields"][0]
