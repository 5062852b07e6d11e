"""UI tests driving the Streamlit script with AppTest."""

import json

import pytest
from streamlit.testing.v1 import AppTest

APP_SCRIPT = "../bfhl_dash.py"


@pytest.fixture
def app(monkeypatch) -> AppTest:
    for var in ("BFHL_USER_NAME", "BFHL_USER_DOB", "BFHL_EMAIL", "BFHL_ROLL_NUMBER"):
        monkeypatch.delenv(var, raising=False)
    at = AppTest.from_file(APP_SCRIPT, default_timeout=30)
    at.run()
    return at


def submit(at: AppTest, raw: str) -> AppTest:
    at.text_area(key="json_input").input(raw).run()
    at.button[0].click().run()
    return at


class TestInitialPage:
    def test_renders_without_errors(self, app) -> None:
        assert not app.exception
        assert [t.value for t in app.title] == ["</> BFHL API Tester"]

    def test_prefilled_with_sample(self, app) -> None:
        raw = app.text_area(key="json_input").value

        assert json.loads(raw) == {"data": ["M", "1", "334", "4", "B"]}

    def test_no_response_before_submit(self, app) -> None:
        assert app.session_state["response"] is None
        assert len(app.multiselect) == 0
        assert len(app.code) == 0

    def test_submit_enabled_for_valid_input(self, app) -> None:
        assert app.button[0].disabled is False

    def test_submit_disabled_for_malformed_json(self, app) -> None:
        app.text_area(key="json_input").input("{not json").run()

        assert app.button[0].disabled is True

    def test_submit_disabled_without_data_array(self, app) -> None:
        app.text_area(key="json_input").input('{"items": ["A"]}').run()

        assert app.button[0].disabled is True


class TestSubmission:
    def test_success(self, app) -> None:
        submit(app, '{"data": ["M", "1", "334", "4", "B"]}')

        assert not app.exception
        result = app.session_state["response"]
        assert result.numbers == ["1", "334", "4"]
        assert result.alphabets == ["M", "B"]
        assert result.highest_alphabet == ["M"]
        assert app.toast[0].value == "Data processed successfully!"

    def test_unfiltered_view_shows_mandatory_fields(self, app) -> None:
        submit(app, '{"data": ["a", "A", "z", "Z"]}')

        assert json.loads(app.code[0].value) == {
            "is_success": True,
            "user_id": "john_doe_17091999",
        }

    def test_filter_selection(self, app) -> None:
        submit(app, '{"data": ["a", "A", "z", "Z"]}')

        app.multiselect(key="selected_fields").select("alphabets").select("highest_alphabet").run()

        assert json.loads(app.code[0].value) == {
            "is_success": True,
            "user_id": "john_doe_17091999",
            "alphabets": ["a", "A", "z", "Z"],
            "highest_alphabet": ["z"],
        }

    def test_empty_data(self, app) -> None:
        submit(app, '{"data": []}')

        result = app.session_state["response"]
        assert result.numbers == []
        assert result.alphabets == []
        assert result.highest_alphabet == []


def submission_app():
    import streamlit as st

    from dashboard.data_management import submit_request
    from models.response_models import UserInfo

    user = UserInfo(name="john_doe", dob="17091999", email="john@xyz.com", roll_number="ABCD123")
    if st.button("Valid"):
        submit_request('{"data": ["A", "1"]}', user)
    if st.button("Malformed"):
        submit_request("{not json", user)


class TestFailedSubmission:
    def test_error_clears_previous_result(self, caplog) -> None:
        at = AppTest.from_function(submission_app, default_timeout=30)
        at.run()

        at.button[0].click().run()
        assert at.session_state["response"].numbers == ["1"]
        assert at.session_state["tokens"] == ["A", "1"]

        at.button[1].click().run()

        assert not at.exception
        assert at.session_state["response"] is None
        assert at.session_state["tokens"] == []
        assert at.toast[0].value == "Invalid JSON format. Please check your input."
        assert "Invalid JSON format" in caplog.text
