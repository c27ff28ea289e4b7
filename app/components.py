"""
Streamlit building blocks shared by the wizard and the single-page form.

Widget state is primed from the FormState whenever a widget mounts and
pushed back through the field binding on change. Streamlit drops the state
of widgets that are not rendered, so the FormState is the only copy of
values for steps that are currently hidden.
"""

from __future__ import annotations
from datetime import date
from typing import Iterable, Optional

import streamlit as st

from config import APP_DESCRIPTION, APP_TITLE, STRICT_STEPS, VALIDATION_MODE
from form_state import FormState
from schema_resume import FIELDS, field_label
from submission import SubmissionReceipt, handle_submission
from wizard import StepNavigator

_MIN_DATE = date(1900, 1, 1)
_MAX_DATE = date(2100, 12, 31)


def field_key(name: str) -> str:
    return f"field_{name}"


def init_session_state() -> None:
    if "form" not in st.session_state:
        st.session_state.form = FormState(mode=VALIDATION_MODE)
    if "navigator" not in st.session_state:
        st.session_state.navigator = StepNavigator(strict=STRICT_STEPS)
    if "submission" not in st.session_state:
        st.session_state.submission = None
    # toast is shown once, on the rerun right after a successful submit
    if "toast_pending" not in st.session_state:
        st.session_state.toast_pending = False


# --- Callbacks ---
def sync_field(name: str) -> None:
    binding = st.session_state.form.bind(name)
    value = st.session_state[field_key(name)]
    # a shown receipt must match the form; editing after submit retracts it
    if value != binding.value and st.session_state.submission is not None:
        clear_submission()
    binding.on_change(value)


def record_submission(record) -> None:
    st.session_state.submission = handle_submission(record)
    st.session_state.toast_pending = True


def clear_submission(_errors=None) -> None:
    st.session_state.submission = None
    st.session_state.toast_pending = False


def start_over() -> None:
    st.session_state.form.reset()
    st.session_state.navigator.reset()
    for name in FIELDS:
        st.session_state.pop(field_key(name), None)
    clear_submission()


# --- Rendering ---
def render_header() -> None:
    st.title(APP_TITLE)
    st.caption(APP_DESCRIPTION)


def render_field(form: FormState, name: str) -> None:
    spec = FIELDS[name]
    key = field_key(name)
    if key not in st.session_state:
        st.session_state[key] = form.bind(name).value

    if spec.kind == "date":
        st.date_input(
            spec.label,
            key=key,
            min_value=_MIN_DATE,
            max_value=_MAX_DATE,
            format="YYYY-MM-DD",
            on_change=sync_field,
            args=(name,),
        )
    else:
        st.text_input(
            spec.label,
            key=key,
            placeholder=spec.placeholder,
            on_change=sync_field,
            args=(name,),
        )

    if message := form.errors.get(name):
        st.error(message)


def render_fields(form: FormState, names: Iterable[str]) -> None:
    for name in names:
        render_field(form, name)


def render_error_summary(form: FormState) -> None:
    if form.is_submitted and form.errors:
        labels = ", ".join(field_label(name) for name in form.errors)
        st.warning(f"Please fix the highlighted fields: {labels}")


def render_submission(receipt: Optional[SubmissionReceipt]) -> None:
    if receipt is None:
        return
    if st.session_state.toast_pending:
        st.toast(receipt.message, icon="✅")
        st.session_state.toast_pending = False
    st.success(f"✅ {receipt.message}")
    st.code(receipt.text, language="json")
    st.button("🔄 Start over", key="start_over", on_click=start_over)
