"""
Pytest fixtures shared by the formengine tests.
Provides small form builders and the sample forms used across modules.
"""

import pytest

from formengine.schemas.form import FormConfig, Question
from formengine.services.form_seed_data import build_sample_form


def _question(question_id, question_type="short-text", title=None, required=False, rules=None, options=None):
    data = {
        "id": question_id,
        "type": question_type,
        "title": title or f"Question {question_id}",
        "required": required,
    }
    if options is not None:
        data["options"] = [
            {"id": f"{question_id}-{value}", "label": value.title(), "value": value}
            for value in options
        ]
    if rules is not None:
        data["conditionalLogic"] = rules
    return data


def _form(steps, is_multi_step=True, allow_back=True, form_id="test-form"):
    return FormConfig.model_validate({
        "id": form_id,
        "title": "Test Form",
        "isMultiStep": is_multi_step,
        "steps": [
            {"id": f"step-{index + 1}", "title": f"Step {index + 1}", "questions": questions}
            for index, questions in enumerate(steps)
        ],
        "settings": {
            "allowBack": allow_back,
            "showProgress": True,
            "submitButtonText": "Submit",
            "successMessage": "Thanks",
        },
    })


@pytest.fixture
def make_question():
    """Build a Question from a few keyword arguments."""
    def factory(question_id="q", question_type="short-text", **kwargs):
        return Question.model_validate(_question(question_id, question_type, **kwargs))
    return factory


@pytest.fixture
def make_form():
    """Build a FormConfig from lists of question dicts, one list per step."""
    def factory(*steps, **kwargs):
        return _form(list(steps), **kwargs)
    return factory


@pytest.fixture
def sample_form():
    return build_sample_form()


@pytest.fixture
def email_form():
    """Two steps: `email` in step 2 is shown only when `has-email` equals yes."""
    return _form([
        [_question("has-email", "single-choice", required=True, options=["yes", "no"])],
        [
            _question(
                "email",
                "email",
                required=False,
                rules=[{"questionId": "has-email", "condition": "equals", "value": "yes"}],
            ),
            _question("comments", "long-text"),
        ],
    ])


@pytest.fixture
def chain_form():
    """A -> B -> C: B depends on A, C depends on B."""
    return _form([[
        _question("a", "single-choice", options=["yes", "no"]),
        _question("b", rules=[{"questionId": "a", "condition": "equals", "value": "yes"}]),
        _question("c", rules=[{"questionId": "b", "condition": "contains", "value": "more"}]),
        _question("d"),
    ]])
