"""Form definitions, conditional visibility and multi-step navigation."""

from formengine.schemas.form import FormConfig, Question, Step
from formengine.services.conditional_logic import is_visible
from formengine.services.response_manager import reconcile, apply_answer
from formengine.services.serializer import serialize, deserialize
from formengine.services.step_navigator import StepNavigator

__version__ = "1.0.0"

__all__ = [
    "FormConfig",
    "Question",
    "Step",
    "is_visible",
    "reconcile",
    "apply_answer",
    "serialize",
    "deserialize",
    "StepNavigator",
]
