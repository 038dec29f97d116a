from formengine.schemas.form import (
    QuestionType,
    ConditionOperator,
    Option,
    ConditionalLogic,
    QuestionValidation,
    Question,
    Step,
    FormSettings,
    FormConfig,
)
from formengine.schemas.response import (
    Answer,
    TextAnswer,
    NumberAnswer,
    BooleanAnswer,
    DateAnswer,
    FileAnswer,
    ChoicesAnswer,
    FormResponse,
    to_answer,
    answer_text,
    is_blank,
)
from formengine.schemas.submission import Submission, SubmissionSummary, SubmittedAnswer, SubmittedQuestion

__all__ = [
    "QuestionType",
    "ConditionOperator",
    "Option",
    "ConditionalLogic",
    "QuestionValidation",
    "Question",
    "Step",
    "FormSettings",
    "FormConfig",
    "Answer",
    "TextAnswer",
    "NumberAnswer",
    "BooleanAnswer",
    "DateAnswer",
    "FileAnswer",
    "ChoicesAnswer",
    "FormResponse",
    "to_answer",
    "answer_text",
    "is_blank",
    "Submission",
    "SubmissionSummary",
    "SubmittedAnswer",
    "SubmittedQuestion",
]
