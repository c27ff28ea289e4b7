"""
Form state controller.

Owns the current field values and their error state for one form instance.
Widgets read a field through ``bind`` and write it back through the
binding's ``on_change``; nothing else mutates the values.
"""

from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterable, Mapping, Optional, Type

from pydantic import BaseModel

from config import get_validation_mode
from schema_resume import DEFAULT_VALUES, ResumeRecord
import validation

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Binding:
    name: str
    value: Any
    on_change: Callable[[Any], None]


class FormState:
    def __init__(
        self,
        schema: Type[BaseModel] = ResumeRecord,
        defaults: Optional[Mapping[str, Any]] = None,
        mode: str = "on_submit",
    ):
        self.schema = schema
        self.mode = get_validation_mode(mode)
        self.defaults: Dict[str, Any] = dict(DEFAULT_VALUES if defaults is None else defaults)
        self.values: Dict[str, Any] = dict(self.defaults)
        self.errors: Dict[str, str] = {}
        self.submit_count = 0
        self.is_submit_successful = False

    # ───────────────────────────────────────── state ──
    @property
    def is_submitted(self) -> bool:
        return self.submit_count > 0

    @property
    def is_valid(self) -> bool:
        return not self.errors

    @property
    def is_dirty(self) -> bool:
        return self.values != self.defaults

    def _check_field(self, name: str) -> None:
        if name not in self.values:
            raise KeyError(f"Unknown form field: {name!r}")

    # ───────────────────────────────────────── binding ──
    def bind(self, name: str) -> Binding:
        """Current value of ``name`` plus a change handler for it."""
        self._check_field(name)
        return Binding(name, self.values[name], lambda value: self.set_value(name, value))

    def set_value(self, name: str, value: Any) -> None:
        self._check_field(name)
        self.values[name] = value
        # react-hook-form style: before the first submit only "on_change"
        # checks as you type, afterwards every edit is re-checked
        if self.mode == "on_change" or self.is_submitted:
            self.validate(fields=[name])

    # ───────────────────────────────────────── validation ──
    def validate(self, fields: Optional[Iterable[str]] = None) -> bool:
        """
        Check the current values.

        Without ``fields`` the whole error map is replaced; with ``fields``
        only those entries are refreshed and only they decide the outcome.
        """
        if fields is None:
            result = validation.validate(self.values, self.schema)
            self.errors = result.errors
            return result.valid

        names = list(fields)
        for name in names:
            self._check_field(name)
        result = validation.validate(self.values, self.schema, fields=names)
        for name in names:
            if name in result.errors:
                self.errors[name] = result.errors[name]
            else:
                self.errors.pop(name, None)
        return result.valid

    def submit(
        self,
        on_valid: Callable[[BaseModel], Any],
        on_invalid: Optional[Callable[[Dict[str, str]], Any]] = None,
    ) -> bool:
        """Validate everything and hand the record to ``on_valid`` if it passes."""
        self.submit_count += 1
        result = validation.validate(self.values, self.schema)
        self.errors = result.errors
        self.is_submit_successful = result.valid
        if not result.valid:
            logger.info("Submit blocked by %d invalid field(s): %s",
                        len(result.errors), ", ".join(result.errors))
            if on_invalid is not None:
                on_invalid(dict(result.errors))
            return False
        on_valid(result.record)
        return True

    def reset(self) -> None:
        self.values = dict(self.defaults)
        self.errors = {}
        self.submit_count = 0
        self.is_submit_successful = False
