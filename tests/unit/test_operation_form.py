"""Tests for the operation form model builder."""

from unittest.mock import MagicMock

import pytest

from panelkit.core import ir
from panelkit.core.errors import OperationExecutionError, OperationValidationError
from panelkit_ui.converters.operation_form import (
    FormControl,
    build_operation_form_model,
    execute_operation,
    normalize_values,
    parse_default_marker,
)


def _operation(*parameters: dict, target: str = "task", **extra) -> ir.OperationSpec:
    data = {
        "id": "op",
        "name": "op",
        "label": "Do it",
        "targetEntity": target,
        "kind": "action",
        "method": "POST",
        "endpoint": "/api/op",
        **extra,
    }
    if parameters:
        data["parameters"] = list(parameters)
    return ir.OperationSpec.model_validate(data)


class TestParameterSource:
    """Declared parameters and synthesized fallback."""

    def test_declared_parameters_in_order(self, task_schema):
        model = build_operation_form_model(task_schema.get_operation("create-task"), task_schema)
        assert [f.name for f in model.fields] == ["title", "estimate"]
        assert model.requires_input

    def test_synthesized_from_primary_field(self, task_schema):
        model = build_operation_form_model(task_schema.get_operation("close-task"), task_schema)
        assert len(model.fields) == 1
        field = model.fields[0]
        assert (field.name, field.label, field.required) == ("code", "Code", True)

    def test_no_primary_field_requires_no_input(self):
        schema = ir.AppSchema.model_validate(
            {
                "id": "s",
                "name": "S",
                "entities": [
                    {"id": "notes", "name": "Note", "label": "Notes", "fields": [{"name": "body", "label": "Body", "type": "text"}]}
                ],
            }
        )
        model = build_operation_form_model(_operation(target="notes"), schema)
        assert model.fields == []
        assert not model.requires_input
        assert model.validate({"anything": 1}) == {}

    def test_unknown_target_entity_requires_no_input(self, task_schema):
        model = build_operation_form_model(task_schema.get_operation("ping"), task_schema)
        assert not model.requires_input


class TestFieldResolution:
    """Parameter metadata over field metadata."""

    def test_inherits_from_same_named_field(self, task_schema):
        model = build_operation_form_model(_operation({"name": "status"}), task_schema)
        field = model.fields[0]
        assert field.label == "Status"
        assert field.type == ir.FieldTypeKind.STATUS
        assert [o.value for o in field.options] == ["open", "done"]
        assert field.component == FormControl.SELECT

    def test_ref_to_field(self, task_schema):
        op = _operation({"name": "state", "ref": {"entity": "task", "field": "status"}}, target="nowhere")
        field = build_operation_form_model(op, task_schema).fields[0]
        assert field.name == "state"
        assert field.label == "Status"
        assert field.component == FormControl.SELECT

    def test_parameter_wins(self, task_schema):
        op = _operation({"name": "title", "label": "Headline", "type": "text", "required": False})
        field = build_operation_form_model(op, task_schema).fields[0]
        assert field.label == "Headline"
        assert field.component == FormControl.TEXTAREA
        assert field.required is False

    def test_required_inherited_from_field(self, task_schema):
        field = build_operation_form_model(_operation({"name": "title"}), task_schema).fields[0]
        assert field.required is True

    def test_unresolved_parameter_defaults(self, task_schema):
        field = build_operation_form_model(_operation({"name": "note"}), task_schema).fields[0]
        assert (field.label, field.type, field.component, field.required) == (
            "note",
            ir.FieldTypeKind.STRING,
            FormControl.TEXT,
            False,
        )

    def test_unknown_ref_entity(self, task_schema):
        op = _operation({"name": "x", "ref": {"entity": "ghost", "field": "y"}})
        field = build_operation_form_model(op, task_schema).fields[0]
        assert field.label == "x"


class TestControls:
    """Control inference."""

    @pytest.mark.parametrize(
        "param,control",
        [
            ({"name": "a", "type": "enum"}, FormControl.SELECT),
            ({"name": "a", "type": "string", "enumValues": [{"label": "X", "value": "x"}]}, FormControl.SELECT),
            ({"name": "a", "type": "text"}, FormControl.TEXTAREA),
            ({"name": "a", "type": "boolean"}, FormControl.SWITCH),
            ({"name": "a", "type": "date"}, FormControl.DATE),
            ({"name": "a", "type": "datetime"}, FormControl.DATETIME),
            ({"name": "a", "type": "percentage"}, FormControl.NUMBER),
            ({"name": "a", "type": "rating"}, FormControl.TEXT),
        ],
    )
    def test_by_type(self, task_schema, param, control):
        assert build_operation_form_model(_operation(param), task_schema).fields[0].component == control

    def test_textarea_hint(self):
        schema = ir.AppSchema.model_validate(
            {
                "id": "s",
                "name": "S",
                "entities": [
                    {
                        "id": "e",
                        "name": "E",
                        "label": "E",
                        "fields": [{"name": "notes", "label": "Notes", "type": "string", "componentHint": "textarea"}],
                    }
                ],
            }
        )
        field = build_operation_form_model(_operation({"name": "notes"}, target="e"), schema).fields[0]
        assert field.component == FormControl.TEXTAREA


class TestDefaults:
    """Default value inference."""

    def test_marker_default_for_numeric_field(self, task_schema):
        model = build_operation_form_model(task_schema.get_operation("create-task"), task_schema)
        assert model.default_values == {"estimate": 4}

    def test_parameter_default_wins(self, task_schema):
        model = build_operation_form_model(_operation({"name": "estimate", "defaultValue": 8}), task_schema)
        assert model.default_values == {"estimate": 8}

    def test_field_default_value(self):
        schema = ir.AppSchema.model_validate(
            {
                "id": "s",
                "name": "S",
                "entities": [
                    {
                        "id": "e",
                        "name": "E",
                        "label": "E",
                        "fields": [{"name": "qty", "label": "Qty", "type": "integer", "defaultValue": 3}],
                    }
                ],
            }
        )
        model = build_operation_form_model(_operation({"name": "qty"}, target="e"), schema)
        assert model.default_values == {"qty": 3}

    def test_boolean_defaults_false(self, task_schema):
        model = build_operation_form_model(_operation({"name": "done"}), task_schema)
        assert model.default_values == {"done": False}

    def test_text_has_no_default(self, task_schema):
        model = build_operation_form_model(_operation({"name": "title"}), task_schema)
        assert model.default_values == {}

    @pytest.mark.parametrize(
        "description,expected",
        [
            ("Hours @default: 4", 4),
            ("@default:-2.5", -2.5),
            ("@default: 1e3", 1000.0),
            ("@default: soon", None),
            (None, None),
        ],
    )
    def test_parse_marker(self, description, expected):
        assert parse_default_marker(description) == expected


class TestValidation:
    """Submission validation and normalization."""

    def test_valid_submission(self, task_schema):
        model = build_operation_form_model(task_schema.get_operation("create-task"), task_schema)
        assert model.validate({"title": "  Write docs ", "estimate": "3.5"}) == {
            "title": "Write docs",
            "estimate": 3.5,
        }

    def test_numbers_coerced_to_float(self, task_schema):
        model = build_operation_form_model(task_schema.get_operation("create-task"), task_schema)
        result = model.validate({"title": "x", "estimate": 3})
        assert isinstance(result["estimate"], float)

    def test_required_numeric_rejects_blank(self, task_schema):
        op = _operation({"name": "estimate", "required": True})
        model = build_operation_form_model(op, task_schema)
        with pytest.raises(OperationValidationError) as exc_info:
            model.validate({"estimate": ""})
        assert exc_info.value.field_errors == {"estimate": "This field is required"}

    def test_optional_numeric_accepts_blank(self, task_schema):
        op = _operation({"name": "estimate", "required": False})
        model = build_operation_form_model(op, task_schema)
        assert model.validate({"estimate": ""}) == {}

    def test_non_numeric_rejected(self, task_schema):
        model = build_operation_form_model(task_schema.get_operation("create-task"), task_schema)
        with pytest.raises(OperationValidationError) as exc_info:
            model.validate({"title": "x", "estimate": "lots"})
        assert exc_info.value.field_errors == {"estimate": "Enter a number"}
        assert "estimate" in exc_info.value.message

    def test_number_beyond_float_range_rejected(self, task_schema):
        model = build_operation_form_model(_operation({"name": "estimate", "required": True}), task_schema)
        with pytest.raises(OperationValidationError) as exc_info:
            model.validate({"estimate": 10**400})
        assert exc_info.value.field_errors == {"estimate": "Enter a number"}

    def test_boolean_must_be_bool(self, task_schema):
        model = build_operation_form_model(_operation({"name": "done", "required": True}), task_schema)
        assert model.validate({"done": True}) == {"done": True}
        with pytest.raises(OperationValidationError) as exc_info:
            model.validate({"done": "maybe"})
        assert exc_info.value.field_errors == {"done": "Choose true or false"}

    def test_select_required(self, task_schema):
        model = build_operation_form_model(_operation({"name": "status", "required": True}), task_schema)
        with pytest.raises(OperationValidationError):
            model.validate({})
        assert model.validate({"status": "open"}) == {"status": "open"}

    def test_text_accepts_numbers(self, task_schema):
        model = build_operation_form_model(_operation({"name": "title"}), task_schema)
        assert model.validate({"title": 42}) == {"title": "42"}

    def test_parameter_names_need_not_be_identifiers(self, task_schema):
        model = build_operation_form_model(_operation({"name": "due-date", "type": "date"}), task_schema)
        assert model.validate({"due-date": "2024-01-01"}) == {"due-date": "2024-01-01"}
        assert "due-date" in model.validators

    def test_normalize_values(self, task_schema):
        model = build_operation_form_model(task_schema.get_operation("create-task"), task_schema)
        assert normalize_values(model.fields, {"title": "  ", "estimate": "2", "extra": 1}) == {
            "estimate": 2.0
        }


class TestExecuteOperation:
    """Validation then execution callback."""

    def test_executor_receives_normalized_values(self, task_schema):
        model = build_operation_form_model(task_schema.get_operation("create-task"), task_schema)
        executor = MagicMock()
        values = {"title": "Ship", "estimate": "2"}

        result = execute_operation(model, values, executor)

        executor.assert_called_once_with(model.operation, {"title": "Ship", "estimate": 2.0})
        assert result == {"title": "Ship", "estimate": 2.0}
        assert values == {"title": "Ship", "estimate": "2"}

    def test_validation_failure_skips_executor(self, task_schema):
        model = build_operation_form_model(task_schema.get_operation("create-task"), task_schema)
        executor = MagicMock()
        with pytest.raises(OperationValidationError):
            execute_operation(model, {"estimate": "2"}, executor)
        executor.assert_not_called()

    def test_executor_failure_is_wrapped(self, task_schema):
        model = build_operation_form_model(task_schema.get_operation("create-task"), task_schema)
        executor = MagicMock(side_effect=RuntimeError("backend down"))
        values = {"title": "Ship"}

        with pytest.raises(OperationExecutionError) as exc_info:
            execute_operation(model, values, executor)

        assert exc_info.value.operation_id == "create-task"
        assert "backend down" in exc_info.value.message
        assert isinstance(exc_info.value.__cause__, RuntimeError)
        assert values == {"title": "Ship"}

    def test_default_executor_logs(self, task_schema, caplog):
        model = build_operation_form_model(task_schema.get_operation("close-task"), task_schema)
        with caplog.at_level("INFO", logger="panelkit_ui"):
            execute_operation(model, {"code": "T-1"})
        assert "PATCH /api/tasks/{code} (close-task)" in caplog.text
