"""
Résumé form schemas.

Two independent shapes (personal and educational details) and the combined
record the form validates on submit.
"""

from __future__ import annotations
import re
from datetime import date, datetime
from typing import Any, NamedTuple

from pydantic import BaseModel, Field, field_validator
from pydantic_core import PydanticCustomError

_ISO_DATE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


class PersonalInfo(BaseModel):
    name: str = Field(..., min_length=1)
    phone: str = Field(..., min_length=1)
    address: str = Field(..., min_length=1)
    age: str = Field(..., min_length=1)


class EducationalInfo(BaseModel):
    degree: str = Field(..., min_length=1)
    institute: str = Field(..., min_length=1)
    start_date: date | None = Field(None, serialization_alias="startDate")
    end_date: date | None = Field(None, serialization_alias="endDate")

    @field_validator("start_date", "end_date", mode="before")
    @classmethod
    def parse_form_date(cls, value: Any) -> Any:
        # an emptied date input arrives as ""
        if value is None or (isinstance(value, str) and not value.strip()):
            return None
        # only real dates and YYYY-MM-DD strings, no timestamps or datetimes
        if isinstance(value, datetime):
            raise PydanticCustomError("date_type", "Invalid date.")
        if isinstance(value, date):
            return value
        if isinstance(value, str) and _ISO_DATE.match(value.strip()):
            try:
                return date.fromisoformat(value.strip())
            except ValueError:
                pass
        raise PydanticCustomError("date_parsing", "Invalid date.")


# pydantic collects fields base-first, so listing EducationalInfo first
# keeps the personal fields at the front of the combined record
class ResumeRecord(EducationalInfo, PersonalInfo):
    """Personal and educational details, validated together on submit."""


class FieldSpec(NamedTuple):
    name: str
    label: str
    kind: str = "text"
    placeholder: str = ""
    required_message: str | None = None


# ───────────────────────────────────────── field metadata ──
FIELDS: dict[str, FieldSpec] = {
    spec.name: spec
    for spec in (
        FieldSpec("name", "Name", placeholder="e.g. John Doe",
                  required_message="Name is required."),
        FieldSpec("phone", "Phone", placeholder="e.g. 0123456789",
                  required_message="Contact is required."),
        FieldSpec("address", "Address", placeholder="e.g. Melbourne, Australia",
                  required_message="Address is required."),
        FieldSpec("age", "Age", placeholder="e.g. 8",
                  required_message="Age is required."),
        FieldSpec("degree", "Degree", placeholder="e.g. Bachelor in Accounting",
                  required_message="Degree is required."),
        FieldSpec("institute", "Institute", placeholder="e.g. Oxford University",
                  required_message="Institute is required."),
        FieldSpec("start_date", "Start Date", kind="date"),
        FieldSpec("end_date", "End Date", kind="date"),
    )
}

INVALID_DATE_MESSAGE = "Invalid date."

# canonical empty form (no placeholders)
DEFAULT_VALUES: dict[str, Any] = {
    name: (None if spec.kind == "date" else "") for name, spec in FIELDS.items()
}


def field_label(name: str) -> str:
    spec = FIELDS.get(name)
    return spec.label if spec else name.replace("_", " ").title()
