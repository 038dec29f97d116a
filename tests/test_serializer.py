"""
Tests for exporting and importing form configuration documents.
"""

import json

import pytest

from formengine.core.exceptions import FormConfigError, ParseError, ValidationError
from formengine.schemas.form import FormConfig
from formengine.services.serializer import FormSerializer, deserialize, serialize


def minimal_document(**overrides):
    document = {
        "id": "form-1",
        "title": "Form",
        "isMultiStep": False,
        "steps": [{"id": "s1", "title": "Only step", "questions": []}],
    }
    document.update(overrides)
    return document


class TestRoundTrip:
    def test_sample_form_round_trips(self, sample_form):
        assert deserialize(serialize(sample_form)) == sample_form

    def test_rule_values_and_validation_round_trip(self):
        document = minimal_document(description="Has validation")
        document["steps"][0]["questions"] = [
            {
                "id": "age",
                "type": "number",
                "title": "Age",
                "required": True,
                "validation": {"min": 18, "max": 99.5, "message": "Adults only"},
            },
            {
                "id": "why",
                "type": "short-text",
                "title": "Why?",
                "required": False,
                "conditionalLogic": [
                    {"questionId": "age", "condition": "not-equals", "value": ["1", "2"]},
                    {"questionId": "age", "condition": "contains", "value": "3"},
                ],
            },
        ]
        form = FormConfig.model_validate(document)

        restored = deserialize(serialize(form))

        assert restored == form
        assert restored.steps[0].questions[0].validation.min == 18
        assert restored.steps[0].questions[1].conditional_logic[0].value == ["1", "2"]

    def test_output_uses_camel_case_keys(self, sample_form):
        document = json.loads(serialize(sample_form))

        assert document["isMultiStep"] is True
        assert set(document["settings"]) == {"allowBack", "showProgress", "submitButtonText", "successMessage"}
        rule = document["steps"][0]["questions"][2]["conditionalLogic"][0]
        assert rule == {"questionId": "question-2", "condition": "equals", "value": "yes"}

    def test_unset_optional_fields_are_omitted(self, sample_form):
        document = json.loads(serialize(sample_form))
        date_question = document["steps"][1]["questions"][0]
        assert "description" not in date_question
        assert "options" not in date_question

    def test_unknown_fields_are_preserved(self):
        document = minimal_document(theme="dark")
        document["steps"][0]["questions"] = [{
            "id": "q1",
            "type": "short-text",
            "title": "Name",
            "required": False,
            "analyticsTag": "name-field",
        }]

        exported = json.loads(serialize(deserialize(json.dumps(document))))

        assert exported["theme"] == "dark"
        assert exported["steps"][0]["questions"][0]["analyticsTag"] == "name-field"

    def test_unknown_condition_loads(self):
        document = minimal_document()
        document["steps"][0]["questions"] = [
            {"id": "a", "type": "number", "title": "A", "required": False},
            {
                "id": "b",
                "type": "short-text",
                "title": "B",
                "required": False,
                "conditionalLogic": [{"questionId": "a", "condition": "greater-than", "value": "3"}],
            },
        ]
        form = deserialize(json.dumps(document))
        assert form.steps[0].questions[1].conditional_logic[0].condition == "greater-than"

    def test_indent_follows_serializer(self, sample_form):
        wide = FormSerializer(indent=4).serialize(sample_form)
        assert wide.startswith('{\n    "id"')
        assert serialize(sample_form).startswith('{\n  "id"')


class TestErrors:
    def test_invalid_json_is_a_parse_error(self):
        with pytest.raises(ParseError):
            deserialize("{not json")

    def test_parse_error_is_a_form_config_error(self):
        with pytest.raises(FormConfigError):
            deserialize("")

    @pytest.mark.parametrize("document", [
        "[]",
        json.dumps({"id": "f", "title": "t"}),
        json.dumps({"id": "f", "title": "t", "steps": {"id": "s1"}}),
        json.dumps({"id": "f", "title": "t", "steps": "s1"}),
        json.dumps({"id": "f", "title": "t", "steps": []}),
        json.dumps({"id": "f", "title": "t", "steps": ["s1"]}),
    ])
    def test_structural_problems_are_validation_errors(self, document):
        with pytest.raises(ValidationError):
            deserialize(document)

    def test_bad_question_type_reports_details(self):
        document = minimal_document()
        document["steps"][0]["questions"] = [{"id": "q", "type": "slider", "title": "Q"}]

        with pytest.raises(ValidationError) as excinfo:
            deserialize(json.dumps(document))

        assert excinfo.value.errors
        assert excinfo.value.errors[0]["loc"][:3] == ["steps", 0, "questions"]


class TestRepairs:
    def test_missing_form_id_and_title(self):
        document = minimal_document()
        del document["id"]
        del document["title"]

        form = deserialize(json.dumps(document))

        assert form.id.startswith("imported-form-")
        assert form.title == "Imported Form"

    def test_missing_step_fields(self):
        document = minimal_document(steps=[{}, {"title": "Named"}])

        form = deserialize(json.dumps(document))

        assert form.steps[0].title == "Step 1"
        assert form.steps[1].title == "Named"
        assert form.steps[0].questions == []
        assert form.steps[0].id != form.steps[1].id
        assert form.steps[0].id.startswith("step-")

    def test_multi_step_flag_is_inferred(self):
        document = minimal_document(steps=[{"id": "a", "title": "A"}, {"id": "b", "title": "B"}])
        del document["isMultiStep"]
        assert deserialize(json.dumps(document)).is_multi_step is True

        document = minimal_document()
        del document["isMultiStep"]
        assert deserialize(json.dumps(document)).is_multi_step is False

    def test_missing_settings_use_defaults(self):
        form = deserialize(json.dumps(minimal_document()))
        assert form.settings.allow_back is True
        assert form.settings.submit_button_text == "Submit Form"

    def test_input_document_is_not_modified(self):
        document = minimal_document(steps=[{}])
        FormSerializer().from_dict(document)
        assert document["steps"] == [{}]

    def test_accepts_bytes(self):
        form = deserialize(json.dumps(minimal_document()).encode("utf-8"))
        assert form.id == "form-1"


class TestStrictImport:
    def test_strict_serializer_rejects_dangling_reference(self):
        document = minimal_document()
        document["steps"][0]["questions"] = [{
            "id": "b",
            "type": "short-text",
            "title": "B",
            "conditionalLogic": [{"questionId": "missing", "condition": "equals", "value": "x"}],
        }]
        text = json.dumps(document)

        assert deserialize(text).steps[0].questions[0].id == "b"
        with pytest.raises(ValidationError) as excinfo:
            FormSerializer(strict=True).deserialize(text)
        assert excinfo.value.errors[0]["code"] == "dangling-reference"
