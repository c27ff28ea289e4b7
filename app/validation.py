"""
Schema validator for the résumé form.

Runs a pydantic schema over raw form values and reduces pydantic's error
list to one readable message per field.
"""

from __future__ import annotations
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, Mapping, Optional, Type

from pydantic import BaseModel, ValidationError

from schema_resume import FIELDS, INVALID_DATE_MESSAGE, ResumeRecord

logger = logging.getLogger(__name__)

_REQUIRED_ERRORS = {"missing", "string_too_short", "string_type"}


@dataclass
class ValidationResult:
    record: Optional[BaseModel] = None
    errors: Dict[str, str] = field(default_factory=dict)

    @property
    def valid(self) -> bool:
        return not self.errors


def _message_for(field_name: str, error: Mapping[str, Any]) -> str:
    kind = error.get("type", "")
    spec = FIELDS.get(field_name)
    if spec and spec.required_message and kind in _REQUIRED_ERRORS:
        return spec.required_message
    if kind.startswith("date"):
        return INVALID_DATE_MESSAGE
    return error.get("msg", "Invalid value.")


def collect_errors(exc: ValidationError) -> Dict[str, str]:
    """First error message per field, in pydantic's reporting order."""
    errors: Dict[str, str] = {}
    for err in exc.errors():
        loc = err.get("loc") or ("__root__",)
        name = str(loc[0])
        errors.setdefault(name, _message_for(name, err))
    return errors


def validate(
    values: Mapping[str, Any],
    schema: Type[BaseModel] = ResumeRecord,
    fields: Optional[Iterable[str]] = None,
) -> ValidationResult:
    """
    Validate ``values`` against ``schema``.

    ``fields`` limits which errors are reported (a step, or one field being
    edited). The parsed record is only returned when the whole schema passes.
    """
    try:
        record = schema.model_validate(dict(values))
    except ValidationError as exc:
        errors = collect_errors(exc)
        if fields is not None:
            wanted = set(fields)
            errors = {name: msg for name, msg in errors.items() if name in wanted}
        logger.debug("%s failed on %s", schema.__name__, sorted(errors))
        return ValidationResult(record=None, errors=errors)
    return ValidationResult(record=record)
