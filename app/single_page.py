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


def on_submit():
    form.submit(on_valid=record_submission, on_invalid=clear_submission)


render_header()

# every step on one page, in wizard order
for step in navigator.steps:
    st.subheader(step.title)
    render_fields(form, step.fields)

render_error_summary(form)

st.button("Submit", key="submit", type="primary", on_click=on_submit)

st.divider()
render_submission(st.session_state.submission)
