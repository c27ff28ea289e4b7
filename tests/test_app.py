"""Drive both Streamlit entry scripts headlessly."""

import json
from datetime import date
from pathlib import Path

import pytest
from streamlit.testing.v1 import AppTest

APP_DIR = Path(__file__).resolve().parents[1] / "app"
WIZARD = str(APP_DIR / "gui.py")
SINGLE_PAGE = str(APP_DIR / "single_page.py")

PERSONAL = {
    "name": "Jane Doe",
    "phone": "0123456789",
    "address": "Melbourne, Australia",
    "age": "8",
}
EDUCATIONAL = {
    "degree": "Bachelor in Accounting",
    "institute": "Oxford University",
}


def start(script):
    at = AppTest.from_file(script, default_timeout=30)
    at.run()
    assert not at.exception
    return at


def fill(at, values):
    for name, value in values.items():
        at.text_input(key=f"field_{name}").input(value)
    at.run()
    assert not at.exception


def click(at, key):
    at.button(key=key).click().run()
    assert not at.exception


def labels(elements):
    return [element.label for element in elements]


def button_keys(at):
    return [button.key for button in at.button]


# ───────────────────────────────────────── wizard ──
def test_wizard_opens_on_personal_step():
    at = start(WIZARD)
    assert at.title[0].value == "Resume Builder"
    assert labels(at.text_input) == ["Name", "Phone", "Address", "Age"]
    assert at.text_input(key="field_name").placeholder == "e.g. John Doe"
    assert len(at.date_input) == 0
    assert button_keys(at) == ["next"]
    assert len(at.error) == 0


def test_wizard_next_and_back_preserve_values():
    at = start(WIZARD)
    fill(at, PERSONAL)

    click(at, "next")
    assert labels(at.text_input) == ["Degree", "Institute"]
    assert labels(at.date_input) == ["Start Date", "End Date"]
    assert button_keys(at) == ["back", "submit"]
    # moving on does not check the personal step
    assert len(at.error) == 0

    fill(at, {"degree": "BSc"})
    click(at, "back")
    assert labels(at.text_input) == ["Name", "Phone", "Address", "Age"]
    assert [w.value for w in at.text_input] == list(PERSONAL.values())

    click(at, "next")
    assert at.text_input(key="field_degree").value == "BSc"


def test_wizard_submit_shows_values():
    at = start(WIZARD)
    fill(at, PERSONAL)
    click(at, "next")
    fill(at, EDUCATIONAL)
    at.date_input(key="field_start_date").set_value(date(2019, 2, 1))
    click(at, "submit")

    expected = {**PERSONAL, **EDUCATIONAL, "startDate": "2019-02-01", "endDate": None}
    assert at.session_state["submission"].payload == expected
    assert json.loads(at.code[0].value) == expected
    assert "You submitted the following values:" in at.success[0].value


def test_wizard_failed_submit_returns_to_invalid_step():
    at = start(WIZARD)
    fill(at, {"phone": "555", "address": "X", "age": "8"})
    click(at, "next")
    click(at, "submit")

    assert at.session_state["navigator"].current.name == "personal"
    assert [e.value for e in at.error] == ["Name is required."]
    assert at.warning[0].value == "Please fix the highlighted fields: Name, Degree, Institute"
    assert len(at.code) == 0

    # after a submit attempt edits are re-checked right away
    fill(at, {"name": "Jane"})
    assert len(at.error) == 0


def test_wizard_edit_after_submit_retracts_receipt():
    at = start(WIZARD)
    fill(at, PERSONAL)
    click(at, "next")
    fill(at, EDUCATIONAL)
    click(at, "submit")
    assert len(at.code) == 1

    click(at, "back")
    fill(at, {"name": ""})
    assert at.session_state["submission"] is None
    assert len(at.code) == 0
    assert len(at.success) == 0
    assert [e.value for e in at.error] == ["Name is required."]


def test_wizard_start_over_clears_everything():
    at = start(WIZARD)
    fill(at, PERSONAL)
    click(at, "next")
    fill(at, EDUCATIONAL)
    click(at, "submit")
    assert len(at.code) == 1

    click(at, "start_over")
    assert at.session_state["submission"] is None
    assert labels(at.text_input) == ["Name", "Phone", "Address", "Age"]
    assert all(w.value == "" for w in at.text_input)
    assert len(at.code) == 0


# ───────────────────────────────────────── single page ──
def test_single_page_shows_every_field():
    at = start(SINGLE_PAGE)
    assert labels(at.text_input) == ["Name", "Phone", "Address", "Age", "Degree", "Institute"]
    assert labels(at.date_input) == ["Start Date", "End Date"]
    assert button_keys(at) == ["submit"]


def test_single_page_empty_submit_lists_every_required_field():
    at = start(SINGLE_PAGE)
    click(at, "submit")
    assert [e.value for e in at.error] == [
        "Name is required.",
        "Contact is required.",
        "Address is required.",
        "Age is required.",
        "Degree is required.",
        "Institute is required.",
    ]
    assert len(at.code) == 0


@pytest.mark.parametrize("missing", list(PERSONAL) + list(EDUCATIONAL))
def test_single_page_blocks_each_missing_field(missing):
    at = start(SINGLE_PAGE)
    values = {**PERSONAL, **EDUCATIONAL}
    del values[missing]
    fill(at, values)
    click(at, "submit")
    assert len(at.error) == 1
    assert at.session_state["submission"] is None


def test_single_page_submit_without_dates():
    at = start(SINGLE_PAGE)
    fill(at, {**PERSONAL, **EDUCATIONAL})
    click(at, "submit")
    assert len(at.error) == 0
    assert json.loads(at.code[0].value) == {
        **PERSONAL, **EDUCATIONAL, "startDate": None, "endDate": None,
    }
