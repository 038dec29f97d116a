"""
Answer values stored in a form response.

A response maps question ids to answers. Callers may store plain Python values
(str, numbers, bools, dates, lists, file objects, anything with a text form)
or the tagged models below; everything that inspects answers goes through
``to_answer`` first so the coercions stay explicit.
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from typing import Optional, List, Union, Dict, Any, Literal, Mapping, Annotated
from datetime import date, datetime
import numbers
import os

from formengine.core.coercion import number_text, scalar_text


class AnswerModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


class TextAnswer(AnswerModel):
    kind: Literal["text"] = "text"
    value: str


class NumberAnswer(AnswerModel):
    kind: Literal["number"] = "number"
    value: Union[int, float]


class BooleanAnswer(AnswerModel):
    kind: Literal["boolean"] = "boolean"
    value: bool


class DateAnswer(AnswerModel):
    kind: Literal["date"] = "date"
    value: Union[datetime, date]


class FileAnswer(AnswerModel):
    kind: Literal["file"] = "file"
    name: str
    size: Optional[int] = None
    content_type: Optional[str] = None


class ChoicesAnswer(AnswerModel):
    kind: Literal["choices"] = "choices"
    values: List[str] = Field(default_factory=list)


Answer = Annotated[
    Union[TextAnswer, NumberAnswer, BooleanAnswer, DateAnswer, FileAnswer, ChoicesAnswer],
    Field(discriminator="kind"),
]

ANSWER_TYPES = (TextAnswer, NumberAnswer, BooleanAnswer, DateAnswer, FileAnswer, ChoicesAnswer)

# questionId -> raw value or tagged answer; None means unanswered
FormResponse = Dict[str, Any]


def _file_answer(raw: Any) -> Optional[FileAnswer]:
    if isinstance(raw, os.PathLike):
        return FileAnswer(name=os.path.basename(os.fspath(raw)))

    name = getattr(raw, "filename", None) or getattr(raw, "name", None)
    if name is None or not hasattr(raw, "read"):
        return None

    size = getattr(raw, "size", None)
    content_type = getattr(raw, "content_type", None)
    return FileAnswer(
        name=os.path.basename(str(name)),
        size=size if isinstance(size, int) else None,
        content_type=content_type if isinstance(content_type, str) else None,
    )


def to_answer(raw: Any) -> Optional[Answer]:
    """Convert a stored response value into its tagged answer"""
    if raw is None:
        return None
    if isinstance(raw, ANSWER_TYPES):
        return raw
    if isinstance(raw, bool):
        return BooleanAnswer(value=raw)
    if isinstance(raw, (int, float)):
        return NumberAnswer(value=raw)
    if isinstance(raw, numbers.Real):
        return NumberAnswer(value=float(raw))
    if isinstance(raw, str):
        return TextAnswer(value=raw)
    if isinstance(raw, (datetime, date)):
        return DateAnswer(value=raw)
    if isinstance(raw, (list, tuple)):
        return ChoicesAnswer(values=[scalar_text(item) for item in raw])

    file_answer = _file_answer(raw)
    if file_answer is not None:
        return file_answer

    return TextAnswer(value=str(raw))


def answer_text(answer: Answer) -> str:
    """Canonical text form used for equality and substring checks"""
    if isinstance(answer, TextAnswer):
        return answer.value
    if isinstance(answer, NumberAnswer):
        return number_text(answer.value)
    if isinstance(answer, BooleanAnswer):
        return "true" if answer.value else "false"
    if isinstance(answer, DateAnswer):
        return answer.value.isoformat()
    if isinstance(answer, FileAnswer):
        return answer.name
    if isinstance(answer, ChoicesAnswer):
        return ",".join(answer.values)
    raise TypeError(f"Unsupported answer: {type(answer).__name__}")


def answer_value(answer: Optional[Answer]) -> Any:
    """JSON friendly value of an answer"""
    if answer is None:
        return None
    if isinstance(answer, ChoicesAnswer):
        return list(answer.values)
    if isinstance(answer, (NumberAnswer, BooleanAnswer)):
        return answer.value
    return answer_text(answer)


def is_blank(raw: Any) -> bool:
    """True when a value does not satisfy a required question"""
    answer = to_answer(raw)
    if answer is None:
        return True
    if isinstance(answer, TextAnswer):
        return answer.value == ""
    if isinstance(answer, ChoicesAnswer):
        return len(answer.values) == 0
    return False
