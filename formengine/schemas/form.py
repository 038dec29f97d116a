from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel
from typing import Optional, List, Union, Iterator, Tuple
import enum

from formengine.config import settings as app_settings
from formengine.core.coercion import scalar_text


class QuestionType(str, enum.Enum):
    SHORT_TEXT = "short-text"
    LONG_TEXT = "long-text"
    SINGLE_CHOICE = "single-choice"
    MULTIPLE_CHOICE = "multiple-choice"
    DATE = "date"
    FILE_UPLOAD = "file-upload"
    NUMBER = "number"
    EMAIL = "email"
    PHONE = "phone"


CHOICE_TYPES = (QuestionType.SINGLE_CHOICE, QuestionType.MULTIPLE_CHOICE)


class ConditionOperator(str, enum.Enum):
    EQUALS = "equals"
    NOT_EQUALS = "not-equals"
    CONTAINS = "contains"
    NOT_CONTAINS = "not-contains"


class FormModel(BaseModel):
    """Base for every interchange model: camelCase on the wire, unknown keys kept"""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="allow",
        frozen=True,
    )


class Option(FormModel):
    id: str
    label: str
    value: str


class ConditionalLogic(FormModel):
    question_id: str
    # Plain string so operators written by newer tooling still load
    condition: str = ConditionOperator.EQUALS.value
    value: Union[str, List[str]] = ""

    @field_validator("condition", mode="before")
    @classmethod
    def _condition_text(cls, value):
        if isinstance(value, ConditionOperator):
            return value.value
        return value

    @field_validator("value", mode="before")
    @classmethod
    def _value_text(cls, value):
        if value is None:
            return ""
        if isinstance(value, (list, tuple)):
            return [scalar_text(item) if isinstance(item, (bool, int, float)) else item for item in value]
        if isinstance(value, (bool, int, float)):
            return scalar_text(value)
        return value

    @property
    def operator(self) -> Optional[ConditionOperator]:
        try:
            return ConditionOperator(self.condition)
        except ValueError:
            return None


class QuestionValidation(FormModel):
    min: Optional[Union[int, float]] = None
    max: Optional[Union[int, float]] = None
    pattern: Optional[str] = None
    message: Optional[str] = None


class Question(FormModel):
    id: str
    type: QuestionType
    title: str
    description: Optional[str] = None
    required: bool = False
    options: Optional[List[Option]] = None
    placeholder: Optional[str] = None
    validation: Optional[QuestionValidation] = None
    conditional_logic: Optional[List[ConditionalLogic]] = None

    @property
    def is_choice(self) -> bool:
        return self.type in CHOICE_TYPES

    @property
    def has_rules(self) -> bool:
        return bool(self.conditional_logic)


class Step(FormModel):
    id: str
    title: str
    description: Optional[str] = None
    questions: List[Question] = Field(default_factory=list)

    def find_question(self, question_id: str) -> Optional[Question]:
        for question in self.questions:
            if question.id == question_id:
                return question
        return None


class FormSettings(FormModel):
    allow_back: bool = Field(default_factory=lambda: app_settings.DEFAULT_ALLOW_BACK)
    show_progress: bool = Field(default_factory=lambda: app_settings.DEFAULT_SHOW_PROGRESS)
    submit_button_text: str = Field(default_factory=lambda: app_settings.DEFAULT_SUBMIT_BUTTON_TEXT)
    success_message: str = Field(default_factory=lambda: app_settings.DEFAULT_SUCCESS_MESSAGE)


class FormConfig(FormModel):
    id: str
    title: str
    description: Optional[str] = None
    is_multi_step: bool = False
    steps: List[Step] = Field(min_length=1)
    settings: FormSettings = Field(default_factory=FormSettings)

    @property
    def reachable_steps(self) -> List[Step]:
        """Steps the navigator can visit; single-step forms only expose the first"""
        if self.is_multi_step:
            return list(self.steps)
        return self.steps[:1]

    def iter_questions(self) -> Iterator[Tuple[Step, Question]]:
        """Yield every (step, question) pair in flattened form order"""
        for step in self.steps:
            for question in step.questions:
                yield step, question

    def find_question(self, question_id: str) -> Optional[Question]:
        for _, question in self.iter_questions():
            if question.id == question_id:
                return question
        return None

    def find_step(self, step_id: str) -> Optional[Step]:
        for step in self.steps:
            if step.id == step_id:
                return step
        return None

    def step_index(self, step_id: str) -> int:
        for index, step in enumerate(self.steps):
            if step.id == step_id:
                return index
        return -1
