import streamlit as st

from config import APP_TITLE, configure_logging

# MUST be the first Streamlit command
st.set_page_config(layout="centered", page_title=APP_TITLE)

from components import (
    clear_submission,
    init_session_state,
    record_submission,
    render_error_summary,
    render_fields,
    render_header,
    render_submission,
)

configure_logging()
init_session_state()

form = st.session_state.form
navigator = st.session_state.navigator


# --- Navigation callbacks ---
def on_back():
    navigator.back()


def on_next():
    navigator.next(form)


def on_submit():
    navigator.submit(form, on_valid=record_submission, on_invalid=clear_submission)


# --- Page ---
render_header()

step = navigator.current
st.caption(f"Step {navigator.index + 1} of {len(navigator.steps)}: {step.title}")
st.progress(navigator.progress)

st.subheader(step.title)
# hidden steps are not rendered; their values stay in the form state
render_fields(form, navigator.visible_fields)

render_error_summary(form)

col_back, col_next = st.columns(2)
with col_back:
    if navigator.can_back:
        st.button("Back", key="back", on_click=on_back)
with col_next:
    if navigator.can_next:
        st.button("Next", key="next", type="primary", on_click=on_next)
    if navigator.can_submit:
        st.button("Submit", key="submit", type="primary", on_click=on_submit)

st.divider()
render_submission(st.session_state.submission)
