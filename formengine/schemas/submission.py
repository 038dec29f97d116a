from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from typing import Optional, List, Dict, Any
from datetime import datetime

from formengine.schemas.form import QuestionType


class SubmissionModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


class Submission(SubmissionModel):
    """Payload handed to the submission collaborator"""
    form_id: str
    form_title: str
    responses: Dict[str, Any] = Field(default_factory=dict)


class SubmittedQuestion(SubmissionModel):
    id: str
    type: QuestionType
    title: str
    required: bool
    step_title: str


class SubmittedAnswer(SubmissionModel):
    question_id: str
    question: Optional[SubmittedQuestion] = None
    value: Any = None
    display_value: Any = None


class SubmissionSummary(SubmissionModel):
    form_id: str
    form_title: str
    submission_timestamp: datetime
    responses: List[SubmittedAnswer] = Field(default_factory=list)
    raw_responses: Dict[str, Any] = Field(default_factory=dict)
