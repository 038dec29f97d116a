from typing import Any, Mapping, Optional
from datetime import datetime, timezone
import logging

from formengine.schemas.form import FormConfig
from formengine.schemas.response import ChoicesAnswer, answer_value, to_answer
from formengine.schemas.submission import SubmissionSummary, SubmittedAnswer, SubmittedQuestion

logger = logging.getLogger(__name__)


def _submitted_question(form: FormConfig, question_id: str) -> Optional[SubmittedQuestion]:
    for step, question in form.iter_questions():
        if question.id == question_id:
            return SubmittedQuestion(
                id=question.id,
                type=question.type,
                title=question.title,
                required=question.required,
                step_title=step.title,
            )
    return None


def build_submission_summary(
    form: FormConfig,
    responses: Mapping[str, Any],
    submitted_at: Optional[datetime] = None
) -> SubmissionSummary:
    """Administrator view of a submission: every answer with its question details"""
    answers = []
    for question_id, raw in responses.items():
        answer = to_answer(raw)
        value = answer_value(answer)
        display_value = ", ".join(answer.values) if isinstance(answer, ChoicesAnswer) else value
        answers.append(SubmittedAnswer(
            question_id=question_id,
            question=_submitted_question(form, question_id),
            value=value,
            display_value=display_value,
        ))

    summary = SubmissionSummary(
        form_id=form.id,
        form_title=form.title,
        submission_timestamp=submitted_at or datetime.now(timezone.utc),
        responses=answers,
        raw_responses={question_id: answer.value for question_id, answer in zip(responses, answers)},
    )
    logger.info(f"Built submission summary for form '{form.id}' with {len(answers)} answers")
    return summary
