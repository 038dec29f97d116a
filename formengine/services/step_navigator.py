"""
Step navigation for a rendering session.

The flow is a small state machine: one state per reachable step plus a terminal
``submitted`` state. Transitions are plain functions over an immutable
``NavigationState`` so the same flow can run headless; ``StepNavigator`` wraps them
for a session that owns a single response set and a submission callback.
"""

from pydantic import BaseModel, ConfigDict, Field
from typing import Any, Callable, Dict, List, Optional
import enum
import logging

from formengine.schemas.form import FormConfig, Question, Step
from formengine.schemas.response import is_blank
from formengine.schemas.submission import Submission
from formengine.services.conditional_logic import visible_questions
from formengine.services.response_manager import apply_answer, reconcile

logger = logging.getLogger(__name__)


class NavigationStatus(str, enum.Enum):
    IN_PROGRESS = "in_progress"
    SUBMITTED = "submitted"


class NavigationState(BaseModel):
    model_config = ConfigDict(frozen=True)

    step_index: int = 0
    status: NavigationStatus = NavigationStatus.IN_PROGRESS
    responses: Dict[str, Any] = Field(default_factory=dict)

    @property
    def is_submitted(self) -> bool:
        return self.status == NavigationStatus.SUBMITTED


class NavigationResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    state: NavigationState
    accepted: bool
    missing_question_ids: List[str] = Field(default_factory=list)
    reason: Optional[str] = None

    @property
    def submitted(self) -> bool:
        return self.accepted and self.state.is_submitted


def step_count(form: FormConfig) -> int:
    """Number of steps navigation can reach"""
    return len(form.reachable_steps)


def current_step(form: FormConfig, state: NavigationState) -> Step:
    return form.reachable_steps[state.step_index]


def is_last_step(form: FormConfig, state: NavigationState) -> bool:
    return state.step_index >= step_count(form) - 1


def visible_step_questions(form: FormConfig, state: NavigationState) -> List[Question]:
    return visible_questions(current_step(form, state).questions, state.responses)


def missing_required_questions(form: FormConfig, state: NavigationState) -> List[str]:
    """Required questions in the current step that are visible and still blank"""
    return [
        question.id
        for question in visible_step_questions(form, state)
        if question.required and is_blank(state.responses.get(question.id))
    ]


def is_step_complete(form: FormConfig, state: NavigationState) -> bool:
    return not missing_required_questions(form, state)


def can_go_back(form: FormConfig, state: NavigationState) -> bool:
    return (
        not state.is_submitted
        and form.settings.allow_back
        and state.step_index > 0
    )


def progress(form: FormConfig, state: NavigationState) -> float:
    """Fraction of the flow reached, counting the current step as reached"""
    if state.is_submitted:
        return 1.0
    return (state.step_index + 1) / step_count(form)


def step_label(form: FormConfig, state: NavigationState) -> str:
    return f"Step {state.step_index + 1} of {step_count(form)}"


def answer_question(form: FormConfig, state: NavigationState, question_id: str, value: Any) -> NavigationState:
    """Record an answer and drop answers of questions it hides"""
    if state.is_submitted:
        return state
    return state.model_copy(update={"responses": apply_answer(state.responses, form, question_id, value)})


def next_step(form: FormConfig, state: NavigationState) -> NavigationResult:
    """Advance one step, or submit when the current step is the last one"""
    if state.is_submitted:
        return NavigationResult(state=state, accepted=False, reason="Form already submitted")

    missing = missing_required_questions(form, state)
    if missing:
        return NavigationResult(
            state=state,
            accepted=False,
            missing_question_ids=missing,
            reason="Please fill in all required fields before proceeding.",
        )

    if is_last_step(form, state):
        submitted = state.model_copy(update={
            "status": NavigationStatus.SUBMITTED,
            "responses": reconcile(state.responses, form),
        })
        return NavigationResult(state=submitted, accepted=True)

    return NavigationResult(
        state=state.model_copy(update={"step_index": state.step_index + 1}),
        accepted=True,
    )


def previous_step(form: FormConfig, state: NavigationState) -> NavigationResult:
    if not can_go_back(form, state):
        if state.is_submitted:
            reason = "Form already submitted"
        elif not form.settings.allow_back:
            reason = "Going back is disabled for this form"
        else:
            reason = "Already on the first step"
        return NavigationResult(state=state, accepted=False, reason=reason)

    return NavigationResult(
        state=state.model_copy(update={"step_index": state.step_index - 1}),
        accepted=True,
    )


def restart() -> NavigationState:
    return NavigationState()


class StepNavigator:
    """A rendering session: one form, one response set, one submission callback"""

    def __init__(self, form: FormConfig, on_submit: Optional[Callable[[Submission], Any]] = None):
        self.form = form
        self.on_submit = on_submit
        self.state = restart()

    @property
    def responses(self) -> Dict[str, Any]:
        return dict(self.state.responses)

    @property
    def current_step(self) -> Step:
        return current_step(self.form, self.state)

    @property
    def visible_questions(self) -> List[Question]:
        return visible_step_questions(self.form, self.state)

    @property
    def is_first_step(self) -> bool:
        return self.state.step_index == 0

    @property
    def is_last_step(self) -> bool:
        return is_last_step(self.form, self.state)

    @property
    def is_submitted(self) -> bool:
        return self.state.is_submitted

    @property
    def can_go_back(self) -> bool:
        return can_go_back(self.form, self.state)

    @property
    def progress(self) -> float:
        return progress(self.form, self.state)

    @property
    def step_label(self) -> str:
        return step_label(self.form, self.state)

    def is_step_complete(self) -> bool:
        return is_step_complete(self.form, self.state)

    def answer(self, question_id: str, value: Any) -> Dict[str, Any]:
        if self.state.is_submitted:
            logger.warning(f"Ignoring answer for '{question_id}': form '{self.form.id}' already submitted")
        self.state = answer_question(self.form, self.state, question_id, value)
        return self.responses

    def next(self) -> NavigationResult:
        result = next_step(self.form, self.state)
        if not result.accepted:
            logger.warning(f"Cannot advance form '{self.form.id}' from step {self.state.step_index + 1}: {result.reason}")
            return result

        self.state = result.state
        if result.submitted:
            logger.info(f"Form '{self.form.id}' submitted with {len(self.state.responses)} answers")
            self._submit()
        else:
            logger.info(f"Form '{self.form.id}' moved to step {self.state.step_index + 1}")
        return result

    def previous(self) -> NavigationResult:
        result = previous_step(self.form, self.state)
        if result.accepted:
            self.state = result.state
            logger.info(f"Form '{self.form.id}' moved back to step {self.state.step_index + 1}")
        return result

    def restart(self) -> None:
        """Clear all answers and return to the first step"""
        self.state = restart()

    def _submit(self) -> None:
        if self.on_submit is None:
            return

        submission = Submission(
            form_id=self.form.id,
            form_title=self.form.title,
            responses=dict(self.state.responses),
        )
        try:
            self.on_submit(submission)
        except Exception as e:
            # The collaborator's failure does not undo the submission
            logger.error(f"Submission handler failed for form '{self.form.id}': {e}")
