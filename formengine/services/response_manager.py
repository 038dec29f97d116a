from typing import Any, Mapping, Set
import logging

from formengine.schemas.form import FormConfig
from formengine.schemas.response import FormResponse
from formengine.services.conditional_logic import is_visible

logger = logging.getLogger(__name__)


def visible_question_ids(form: FormConfig, responses: Mapping[str, Any]) -> Set[str]:
    """Ids of every visible question across all steps, not just the current one"""
    return {
        question.id
        for _, question in form.iter_questions()
        if is_visible(question, responses)
    }


def reconcile(responses: Mapping[str, Any], form: FormConfig) -> FormResponse:
    """
    Drop answers that belong to hidden questions.

    Visibility is recomputed until nothing else is dropped, so hiding a question
    also hides (and clears) any question whose rules depended on its answer.
    Answers removed here are discarded, not remembered.
    """
    cleaned = dict(responses)

    while True:
        visible = visible_question_ids(form, cleaned)
        pruned = {question_id: value for question_id, value in cleaned.items() if question_id in visible}
        if len(pruned) == len(cleaned):
            break
        logger.debug(f"Dropped answers for hidden questions: {sorted(set(cleaned) - set(pruned))}")
        cleaned = pruned

    return cleaned


def apply_answer(
    responses: Mapping[str, Any],
    form: FormConfig,
    question_id: str,
    value: Any
) -> FormResponse:
    """Merge one answer into the responses and reconcile the result"""
    proposed = dict(responses)
    proposed[question_id] = value
    return reconcile(proposed, form)
