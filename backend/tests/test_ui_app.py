# test_ui_app.py
from pathlib import Path

import requests
from streamlit.testing.v1 import AppTest

APP_PATH = Path(__file__).parents[1] / "pdfsearch" / "ui" / "app.py"


def _search_button(at):
    return next(b for b in at.button if b.label == "Search")


def test_app_renders_with_search_enabled():
    at = AppTest.from_file(str(APP_PATH), default_timeout=30).run()
    assert not at.exception
    assert "loading" not in at.session_state
    assert not _search_button(at).disabled
    assert at.session_state["collection"].startswith("session-")


def test_failed_search_shows_error_and_creates_no_tab(monkeypatch):
    def refuse(*args, **kwargs):
        raise requests.ConnectionError("connection refused")

    monkeypatch.setattr(requests, "post", refuse)
    at = AppTest.from_file(str(APP_PATH), default_timeout=30).run()
    at.text_input(key="question").input("What is the total?")
    _search_button(at).click()
    at.run()

    assert not at.exception
    assert at.error and "Search failed" in at.error[0].value
    assert at.session_state["tabs"].tabs == []
    assert not _search_button(at).disabled


def test_successful_search_opens_a_tab(monkeypatch):
    class Reply:
        ok = True
        status_code = 200

        def json(self):
            return {"answer": "- forty two", "sources": [{"source": "doc.pdf"}]}

    monkeypatch.setattr(requests, "post", lambda *args, **kwargs: Reply())
    at = AppTest.from_file(str(APP_PATH), default_timeout=30).run()
    at.text_input(key="question").input("What is the total?")
    _search_button(at).click()
    at.run()

    assert not at.exception
    tabs = at.session_state["tabs"].tabs
    assert [t.query for t in tabs] == ["What is the total?"]
    assert tabs[0].answer == "- forty two"
