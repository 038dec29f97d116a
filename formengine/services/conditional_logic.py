"""
Conditional logic evaluation.

A question is visible when every one of its rules holds against the answers
collected so far. Rules never see an unanswered prerequisite as a match, not even
for the negated operators, and operators this module does not know are treated as
satisfied so forms authored by newer tooling still render.
"""

from typing import Any, Iterable, List, Mapping, Union
import logging

from formengine.schemas.form import ConditionalLogic, ConditionOperator, Question
from formengine.schemas.response import Answer, ChoicesAnswer, answer_text, to_answer

logger = logging.getLogger(__name__)

RuleValue = Union[str, List[str]]


def _equals(answer: Answer, expected: RuleValue) -> bool:
    if isinstance(expected, list):
        # Several expected values: any one of them matches
        if isinstance(answer, ChoicesAnswer):
            return any(value in expected for value in answer.values)
        return answer_text(answer) in expected
    return answer_text(answer) == expected


def _contains(answer: Answer, expected: RuleValue) -> bool:
    if isinstance(answer, ChoicesAnswer):
        if isinstance(expected, list):
            return any(value in answer.values for value in expected)
        return expected in answer.values

    needle = ",".join(expected) if isinstance(expected, list) else expected
    return needle.lower() in answer_text(answer).lower()


def evaluate_rule(rule: ConditionalLogic, responses: Mapping[str, Any]) -> bool:
    """Evaluate a single rule against the response set"""
    answer = to_answer(responses.get(rule.question_id))
    if answer is None:
        return False

    operator = rule.operator
    if operator is ConditionOperator.EQUALS:
        return _equals(answer, rule.value)
    if operator is ConditionOperator.NOT_EQUALS:
        return not _equals(answer, rule.value)
    if operator is ConditionOperator.CONTAINS:
        return _contains(answer, rule.value)
    if operator is ConditionOperator.NOT_CONTAINS:
        return not _contains(answer, rule.value)

    logger.debug(f"Unknown condition '{rule.condition}' on '{rule.question_id}', treating rule as satisfied")
    return True


def is_visible(question: Question, responses: Mapping[str, Any]) -> bool:
    """Return True if the question should be shown for the given responses"""
    if not question.conditional_logic:
        return True

    for rule in question.conditional_logic:
        if not evaluate_rule(rule, responses):
            return False
    return True


def visible_questions(questions: Iterable[Question], responses: Mapping[str, Any]) -> List[Question]:
    return [question for question in questions if is_visible(question, responses)]
