"""
Tests for the administrator view of a submission.
"""

from datetime import date, datetime, timezone

from formengine.services.submission_service import build_submission_summary


def test_summary_lists_answers_with_question_details(sample_form):
    submitted_at = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)
    responses = {
        "question-1": "Jane Doe",
        "question-3": ["left-arm", "right-leg"],
        "question-4": date(1990, 2, 3),
    }

    summary = build_submission_summary(sample_form, responses, submitted_at=submitted_at)

    assert summary.form_id == "sample-form"
    assert summary.form_title == "Sample Medical Form"
    assert summary.submission_timestamp == submitted_at
    assert [answer.question_id for answer in summary.responses] == ["question-1", "question-3", "question-4"]

    name, areas, birthday = summary.responses
    assert name.question.step_title == "Basic Information"
    assert name.question.required is True
    assert name.display_value == "Jane Doe"
    assert areas.value == ["left-arm", "right-leg"]
    assert areas.display_value == "left-arm, right-leg"
    assert birthday.value == "1990-02-03"
    assert birthday.question.step_title == "Additional Information"


def test_unknown_question_has_no_details(sample_form):
    summary = build_submission_summary(sample_form, {"stray": 3})
    assert summary.responses[0].question is None
    assert summary.responses[0].value == 3
    assert summary.raw_responses == {"stray": 3}


def test_summary_dumps_with_camel_case_keys(sample_form):
    summary = build_submission_summary(sample_form, {"question-1": "Jane"})
    data = summary.model_dump(mode="json", by_alias=True)
    assert set(data) == {"formId", "formTitle", "submissionTimestamp", "responses", "rawResponses"}
    assert data["responses"][0]["question"]["stepTitle"] == "Basic Information"
    assert summary.submission_timestamp.tzinfo is not None
