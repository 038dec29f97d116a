"""
Strict authoring checks.

The evaluator is permissive at runtime: unknown operators pass and rules that point
at missing questions never match. This module is the opt-in pass that reports those
and other modelling mistakes to the author instead.
"""

from pydantic import BaseModel, ConfigDict
from typing import Dict, List, Optional
import logging

from formengine.core.exceptions import ValidationError
from formengine.schemas.form import FormConfig

logger = logging.getLogger(__name__)


class FormIssue(BaseModel):
    model_config = ConfigDict(frozen=True)

    code: str
    message: str
    step_id: Optional[str] = None
    question_id: Optional[str] = None


def validate_form(form: FormConfig) -> List[FormIssue]:
    """Return every authoring problem found in the form"""
    issues: List[FormIssue] = []

    seen_steps = set()
    for step in form.steps:
        if step.id in seen_steps:
            issues.append(FormIssue(
                code="duplicate-step-id",
                message=f"Step id '{step.id}' is used more than once",
                step_id=step.id,
            ))
        seen_steps.add(step.id)

    # Flattened position of each question, first occurrence wins
    positions: Dict[str, int] = {}
    for position, (step, question) in enumerate(form.iter_questions()):
        if question.id in positions:
            issues.append(FormIssue(
                code="duplicate-question-id",
                message=f"Question id '{question.id}' is used more than once",
                step_id=step.id,
                question_id=question.id,
            ))
            continue
        positions[question.id] = position

    for position, (step, question) in enumerate(form.iter_questions()):
        if question.is_choice and not question.options:
            issues.append(FormIssue(
                code="missing-options",
                message=f"Choice question '{question.id}' has no options",
                step_id=step.id,
                question_id=question.id,
            ))
        if not question.is_choice and question.options:
            issues.append(FormIssue(
                code="unexpected-options",
                message=f"Question '{question.id}' of type '{question.type.value}' cannot have options",
                step_id=step.id,
                question_id=question.id,
            ))

        option_ids = set()
        for option in question.options or []:
            if option.id in option_ids:
                issues.append(FormIssue(
                    code="duplicate-option-id",
                    message=f"Option id '{option.id}' is repeated in question '{question.id}'",
                    step_id=step.id,
                    question_id=question.id,
                ))
            option_ids.add(option.id)

        for rule in question.conditional_logic or []:
            if rule.operator is None:
                issues.append(FormIssue(
                    code="unknown-operator",
                    message=f"Question '{question.id}' uses unknown condition '{rule.condition}'",
                    step_id=step.id,
                    question_id=question.id,
                ))

            target = positions.get(rule.question_id)
            if target is None:
                issues.append(FormIssue(
                    code="dangling-reference",
                    message=f"Question '{question.id}' depends on missing question '{rule.question_id}'",
                    step_id=step.id,
                    question_id=question.id,
                ))
            elif target >= position:
                issues.append(FormIssue(
                    code="forward-reference",
                    message=f"Question '{question.id}' depends on '{rule.question_id}', which does not come before it",
                    step_id=step.id,
                    question_id=question.id,
                ))

            if isinstance(rule.value, list) and not rule.value:
                issues.append(FormIssue(
                    code="empty-rule-value",
                    message=f"Question '{question.id}' has a rule with an empty value list",
                    step_id=step.id,
                    question_id=question.id,
                ))

    return issues


def assert_valid(form: FormConfig) -> None:
    """Raise ValidationError if the strict checks find anything"""
    issues = validate_form(form)
    if issues:
        logger.warning(f"Form '{form.id}' failed strict validation with {len(issues)} issue(s)")
        raise ValidationError(
            f"Form '{form.id}' has {len(issues)} authoring issue(s)",
            errors=[issue.model_dump() for issue in issues],
        )
