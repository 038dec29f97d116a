"""
Authoring operations on a form.

Every function returns a new FormConfig and leaves its input untouched, so a
builder can keep earlier values around for undo. Ids that do not exist leave the
form unchanged.
"""

from typing import Any, Dict, List, Literal, Optional
import logging
import uuid

from formengine.schemas.form import (
    ConditionalLogic,
    ConditionOperator,
    FormConfig,
    Option,
    Question,
    QuestionType,
    Step,
)

logger = logging.getLogger(__name__)


def generate_id(prefix: str) -> str:
    return f"{prefix}-{uuid.uuid4().hex[:12]}"


def create_default_question(question_type: QuestionType, question_id: Optional[str] = None) -> Question:
    """New question as dropped from the sidebar"""
    question_type = QuestionType(question_type)
    question_id = question_id or generate_id("question")

    options = None
    if question_type in (QuestionType.SINGLE_CHOICE, QuestionType.MULTIPLE_CHOICE):
        options = [
            Option(id=f"{question_id}-option-1", label="Option 1", value="option1"),
            Option(id=f"{question_id}-option-2", label="Option 2", value="option2"),
        ]

    return Question(
        id=question_id,
        type=question_type,
        title=f"New {question_type.value.replace('-', ' ', 1)} question",
        description="",
        required=False,
        options=options,
    )


def _wire_keys(model_type, updates: Dict[str, Any]) -> Dict[str, Any]:
    """Rename attribute-name keys to their camelCase aliases"""
    fields = model_type.model_fields
    return {
        (fields[key].alias or key) if key in fields else key: value
        for key, value in updates.items()
    }


def _revalidate(model, updates: Dict[str, Any]):
    """Apply field updates and validate the result"""
    # Merge in alias space so no stale attribute-name key survives as an extra
    model_type = type(model)
    return model_type.model_validate({**model.model_dump(by_alias=True), **_wire_keys(model_type, updates)})


def _replace_step(form: FormConfig, step_id: str, new_step: Step) -> FormConfig:
    steps = [new_step if step.id == step_id else step for step in form.steps]
    return form.model_copy(update={"steps": steps})


def _with_questions(form: FormConfig, step_id: str, questions: List[Question]) -> FormConfig:
    step = form.find_step(step_id)
    if step is None:
        return form
    return _replace_step(form, step_id, step.model_copy(update={"questions": questions}))


def update_form(form: FormConfig, updates: Dict[str, Any]) -> FormConfig:
    return _revalidate(form, updates)


def update_settings(form: FormConfig, updates: Dict[str, Any]) -> FormConfig:
    return form.model_copy(update={"settings": _revalidate(form.settings, updates)})


# Questions

def add_question(form: FormConfig, step_id: str, question: Question) -> FormConfig:
    step = form.find_step(step_id)
    if step is None:
        logger.warning(f"Cannot add question to unknown step '{step_id}'")
        return form
    return _with_questions(form, step_id, [*step.questions, question])


def update_question(form: FormConfig, step_id: str, question_id: str, updates: Dict[str, Any]) -> FormConfig:
    step = form.find_step(step_id)
    if step is None or step.find_question(question_id) is None:
        return form
    questions = [
        _revalidate(question, updates) if question.id == question_id else question
        for question in step.questions
    ]
    return _with_questions(form, step_id, questions)


def delete_question(form: FormConfig, step_id: str, question_id: str) -> FormConfig:
    step = form.find_step(step_id)
    if step is None:
        return form
    return _with_questions(form, step_id, [q for q in step.questions if q.id != question_id])


def duplicate_question(form: FormConfig, step_id: str, question_id: str) -> FormConfig:
    step = form.find_step(step_id)
    question = step.find_question(question_id) if step else None
    if question is None:
        return form

    copy = question.model_copy(update={
        "id": generate_id("question"),
        "title": f"{question.title} (Copy)",
    })
    return add_question(form, step_id, copy)


def move_question(
    form: FormConfig,
    step_id: str,
    question_id: str,
    direction: Literal["up", "down"]
) -> FormConfig:
    """Swap a question with its neighbour; nothing happens at the edges"""
    step = form.find_step(step_id)
    if step is None:
        return form

    ids = [q.id for q in step.questions]
    if question_id not in ids:
        return form

    index = ids.index(question_id)
    new_index = index - 1 if direction == "up" else index + 1
    if new_index < 0 or new_index >= len(ids):
        return form

    questions = list(step.questions)
    questions[index], questions[new_index] = questions[new_index], questions[index]
    return _with_questions(form, step_id, questions)


def move_question_to(form: FormConfig, step_id: str, dragged_id: str, target_id: str) -> FormConfig:
    """Drop a dragged question at the position of the target question"""
    step = form.find_step(step_id)
    if step is None:
        return form

    ids = [q.id for q in step.questions]
    if dragged_id not in ids or target_id not in ids:
        return form

    questions = list(step.questions)
    dragged = questions.pop(ids.index(dragged_id))
    questions.insert(ids.index(target_id), dragged)
    return _with_questions(form, step_id, questions)


def available_questions(form: FormConfig, question_id: str) -> List[Question]:
    """Questions a rule on ``question_id`` may depend on: those placed before it"""
    earlier = []
    for _, question in form.iter_questions():
        if question.id == question_id:
            break
        earlier.append(question)
    return earlier


# Steps

def add_step(form: FormConfig, title: Optional[str] = None, step_id: Optional[str] = None) -> FormConfig:
    step = Step(
        id=step_id or generate_id("step"),
        title=title or f"Step {len(form.steps) + 1}",
        description="",
        questions=[],
    )
    return form.model_copy(update={"steps": [*form.steps, step]})


def update_step(form: FormConfig, step_id: str, updates: Dict[str, Any]) -> FormConfig:
    step = form.find_step(step_id)
    if step is None:
        return form
    return _replace_step(form, step_id, _revalidate(step, updates))


def delete_step(form: FormConfig, step_id: str) -> FormConfig:
    """Remove a step; the last remaining step is never removed"""
    if len(form.steps) <= 1:
        logger.warning(f"Refusing to delete the only step of form '{form.id}'")
        return form
    if form.find_step(step_id) is None:
        return form
    return form.model_copy(update={"steps": [step for step in form.steps if step.id != step_id]})


def reorder_steps(form: FormConfig, dragged_step_id: str, target_step_id: str) -> FormConfig:
    dragged_index = form.step_index(dragged_step_id)
    target_index = form.step_index(target_step_id)
    if dragged_index == -1 or target_index == -1:
        return form

    steps = list(form.steps)
    dragged = steps.pop(dragged_index)
    steps.insert(target_index, dragged)
    return form.model_copy(update={"steps": steps})


# Rules

def parse_rule_value(text: str, condition: str) -> Any:
    """
    Turn the rule value typed by an author into a rule value.

    For equals / not-equals a comma separated list means "any of these".
    """
    text = text.strip()
    if condition in (ConditionOperator.EQUALS.value, ConditionOperator.NOT_EQUALS.value) and "," in text:
        values = [part.strip() for part in text.split(",") if part.strip()]
        if len(values) > 1:
            return values
    return text


def _with_rules(form: FormConfig, step_id: str, question_id: str, rules: List[ConditionalLogic]) -> FormConfig:
    step = form.find_step(step_id)
    question = step.find_question(question_id) if step else None
    if question is None:
        return form
    questions = [
        q.model_copy(update={"conditional_logic": rules}) if q.id == question_id else q
        for q in step.questions
    ]
    return _with_questions(form, step_id, questions)


def _rules_of(form: FormConfig, step_id: str, question_id: str) -> Optional[List[ConditionalLogic]]:
    step = form.find_step(step_id)
    question = step.find_question(question_id) if step else None
    if question is None:
        return None
    return list(question.conditional_logic or [])


def add_rule(
    form: FormConfig,
    step_id: str,
    question_id: str,
    rule: Optional[ConditionalLogic] = None
) -> FormConfig:
    rules = _rules_of(form, step_id, question_id)
    if rules is None:
        return form
    rule = rule or ConditionalLogic(question_id="", condition=ConditionOperator.EQUALS.value, value="")
    return _with_rules(form, step_id, question_id, [*rules, rule])


def update_rule(
    form: FormConfig,
    step_id: str,
    question_id: str,
    index: int,
    updates: Dict[str, Any]
) -> FormConfig:
    rules = _rules_of(form, step_id, question_id)
    if rules is None or not 0 <= index < len(rules):
        return form
    rules[index] = _revalidate(rules[index], updates)
    return _with_rules(form, step_id, question_id, rules)


def remove_rule(form: FormConfig, step_id: str, question_id: str, index: int) -> FormConfig:
    rules = _rules_of(form, step_id, question_id)
    if rules is None or not 0 <= index < len(rules):
        return form
    del rules[index]
    return _with_rules(form, step_id, question_id, rules)
