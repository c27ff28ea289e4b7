"""
Step navigation for the multi-step résumé form.

The navigator only tracks which step is showing. Field values live in the
FormState, so moving between steps never drops what was typed.
"""

from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, Mapping, Optional, Sequence, Tuple, Type, Union

from pydantic import BaseModel

from form_state import FormState
from schema_resume import EducationalInfo, PersonalInfo

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Step:
    name: str
    title: str
    schema: Type[BaseModel]

    @property
    def fields(self) -> Tuple[str, ...]:
        return tuple(self.schema.model_fields)


STEPS: Tuple[Step, ...] = (
    Step("personal", "Personal Detail", PersonalInfo),
    Step("educational", "Educational Detail", EducationalInfo),
)


class StepNavigator:
    def __init__(self, steps: Sequence[Step] = STEPS, strict: bool = False):
        if not steps:
            raise ValueError("A wizard needs at least one step.")
        self.steps: Tuple[Step, ...] = tuple(steps)
        self.strict = strict
        self.index = 0

    @property
    def current(self) -> Step:
        return self.steps[self.index]

    @property
    def is_first(self) -> bool:
        return self.index == 0

    @property
    def is_last(self) -> bool:
        return self.index == len(self.steps) - 1

    @property
    def can_back(self) -> bool:
        return not self.is_first

    @property
    def can_next(self) -> bool:
        return not self.is_last

    @property
    def can_submit(self) -> bool:
        return self.is_last

    @property
    def visible_fields(self) -> Tuple[str, ...]:
        return self.current.fields

    @property
    def progress(self) -> float:
        return (self.index + 1) / len(self.steps)

    def step_for(self, field_name: str) -> Step:
        for step in self.steps:
            if field_name in step.fields:
                return step
        raise KeyError(f"No step owns field {field_name!r}")

    # ───────────────────────────────────────── transitions ──
    def next(self, form: Optional[FormState] = None) -> bool:
        """
        Move one step forward. Returns False when nothing moved.

        Outside strict mode the current step is not checked; its errors only
        show up on the final submit.
        """
        if not self.can_next:
            return False
        if self.strict and form is not None and not form.validate(fields=self.visible_fields):
            logger.debug("Step %r has errors, staying put", self.current.name)
            return False
        self.index += 1
        logger.debug("Advanced to step %r", self.current.name)
        return True

    def back(self) -> bool:
        if not self.can_back:
            return False
        self.index -= 1
        logger.debug("Went back to step %r", self.current.name)
        return True

    def go_to(self, target: Union[int, str]) -> None:
        if isinstance(target, str):
            names = [step.name for step in self.steps]
            if target not in names:
                raise KeyError(f"Unknown step {target!r}")
            self.index = names.index(target)
        else:
            if not 0 <= target < len(self.steps):
                raise IndexError(f"Step index {target} out of range")
            self.index = target

    def focus_first_error(self, errors: Mapping[str, Any]) -> bool:
        """Show the first step that holds one of ``errors``."""
        for i, step in enumerate(self.steps):
            if any(name in errors for name in step.fields):
                moved = i != self.index
                self.index = i
                return moved
        return False

    def submit(
        self,
        form: FormState,
        on_valid: Callable[[BaseModel], Any],
        on_invalid: Optional[Callable[[Dict[str, str]], Any]] = None,
    ) -> bool:
        if not self.can_submit:
            raise RuntimeError("Submit is only available on the last step.")
        ok = form.submit(on_valid, on_invalid)
        if not ok:
            self.focus_first_error(form.errors)
        return ok

    def reset(self) -> None:
        self.index = 0
