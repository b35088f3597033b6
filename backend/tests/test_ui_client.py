# test_ui_client.py
import pytest
import requests

from pdfsearch.ui import client as client_module
from pdfsearch.ui.client import SearchClient, SearchClientError


class FakeResponse:
    def __init__(self, status_code, payload):
        self.status_code = status_code
        self._payload = payload

    @property
    def ok(self):
        return 200 <= self.status_code < 300

    def json(self):
        if self._payload is None:
            raise ValueError("no json")
        return self._payload


@pytest.fixture
def post(monkeypatch):
    calls = []
    state = {"response": FakeResponse(200, {})}

    def fake_post(url, timeout=None, **kwargs):
        calls.append({"url": url, "timeout": timeout, **kwargs})
        if isinstance(state["response"], Exception):
            raise state["response"]
        return state["response"]

    monkeypatch.setattr(client_module.requests, "post", fake_post)
    return calls, state


def test_query_posts_question_and_collection(post):
    calls, state = post
    state["response"] = FakeResponse(200, {"answer": "a", "sources": []})
    data = SearchClient("http://api:3002/", timeout=5).query("What?", "session-1")
    assert data == {"answer": "a", "sources": []}
    assert calls[0]["url"] == "http://api:3002/query"
    assert calls[0]["json"] == {"question": "What?", "collection": "session-1"}
    assert calls[0]["timeout"] == 5


def test_upload_sends_multipart_field(post):
    calls, state = post
    state["response"] = FakeResponse(200, {"message": "ok", "collection": "c1x", "chunks": 2})
    SearchClient("http://api", timeout=5).upload("cv.pdf", b"%PDF", "c1x")
    assert calls[0]["url"] == "http://api/upload"
    assert calls[0]["files"] == {"pdfFile": ("cv.pdf", b"%PDF", "application/pdf")}
    assert calls[0]["data"] == {"collection": "c1x"}


def test_error_payload_becomes_exception(post):
    _, state = post
    state["response"] = FakeResponse(400, {"error": "Question is required!"})
    with pytest.raises(SearchClientError, match="Question is required!"):
        SearchClient("http://api", timeout=5).query("")


def test_non_json_error(post):
    _, state = post
    state["response"] = FakeResponse(502, None)
    with pytest.raises(SearchClientError, match="API error 502"):
        SearchClient("http://api", timeout=5).query("q")


def test_transport_error(post):
    _, state = post
    state["response"] = requests.ConnectionError("refused")
    with pytest.raises(SearchClientError, match="refused"):
        SearchClient("http://api", timeout=5).query("q")
