from typing import Any, Dict, List, Optional, Union
import copy
import json
import logging
import time

from pydantic import ValidationError as PydanticValidationError

from formengine.config import settings
from formengine.core.exceptions import ParseError, ValidationError
from formengine.schemas.form import FormConfig
from formengine.services.form_validator import assert_valid

logger = logging.getLogger(__name__)


class FormSerializer:
    """Encode forms to the JSON configuration document and read them back"""

    def __init__(self, indent: Optional[int] = None, strict: Optional[bool] = None):
        self.indent = settings.EXPORT_INDENT if indent is None else indent
        self.strict = settings.STRICT_IMPORT if strict is None else strict

    def to_dict(self, form: FormConfig) -> Dict[str, Any]:
        return form.model_dump(mode="json", by_alias=True, exclude_none=True)

    def serialize(self, form: FormConfig) -> str:
        """Export a form as a JSON document"""
        document = json.dumps(self.to_dict(form), indent=self.indent, ensure_ascii=False)
        logger.info(f"Exported form '{form.id}' with {len(form.steps)} steps")
        return document

    def deserialize(self, text: Union[str, bytes]) -> FormConfig:
        """Import a form from a JSON document, repairing recoverable omissions"""
        try:
            data = json.loads(text)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise ParseError(f"Configuration is not valid JSON: {e}")

        return self.from_dict(data)

    def from_dict(self, data: Any) -> FormConfig:
        if not isinstance(data, dict):
            raise ValidationError("Invalid form configuration: expected an object at the top level")

        data = self._repair(copy.deepcopy(data))

        try:
            form = FormConfig.model_validate(data)
        except PydanticValidationError as e:
            errors = e.errors(include_url=False)
            raise ValidationError(
                f"Invalid form configuration: {len(errors)} validation error(s)",
                errors=[{"loc": list(error["loc"]), "msg": error["msg"], "type": error["type"]} for error in errors],
            )

        if self.strict:
            assert_valid(form)

        logger.info(f"Imported form '{form.id}' with {len(form.steps)} steps")
        return form

    def _repair(self, data: Dict[str, Any]) -> Dict[str, Any]:
        steps = data.get("steps")
        if not isinstance(steps, list):
            raise ValidationError("Invalid form configuration: missing or invalid steps")

        stamp = int(time.time() * 1000)
        repaired: List[str] = []

        for index, step in enumerate(steps):
            if not isinstance(step, dict):
                raise ValidationError(f"Invalid form configuration: step {index + 1} is not an object")
            if not step.get("id"):
                step["id"] = f"step-{stamp}-{index}"
                repaired.append(f"steps[{index}].id")
            if not step.get("title"):
                step["title"] = f"Step {index + 1}"
                repaired.append(f"steps[{index}].title")
            if step.get("questions") is None:
                step["questions"] = []
                repaired.append(f"steps[{index}].questions")

        if not data.get("id"):
            data["id"] = f"{settings.IMPORTED_FORM_ID_PREFIX}-{stamp}"
            repaired.append("id")
        if not data.get("title"):
            data["title"] = settings.IMPORTED_FORM_TITLE
            repaired.append("title")
        if data.get("isMultiStep") is None and data.get("is_multi_step") is None:
            data["isMultiStep"] = len(steps) > 1
            repaired.append("isMultiStep")

        if repaired:
            logger.warning(f"Repaired missing fields on import: {', '.join(repaired)}")
        return data


form_serializer = FormSerializer()


def serialize(form: FormConfig) -> str:
    return form_serializer.serialize(form)


def deserialize(text: Union[str, bytes]) -> FormConfig:
    return form_serializer.deserialize(text)
