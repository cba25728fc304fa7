import pytest

from conftest import FakeRelay
from planwizard.run_utils.llm import RelayError

URL = "/api/completion"
FAILURE = {"success": False, "error": "Failed to generate AI response", "fallback": True}


def test_completion_success(make_client):
    relay = FakeRelay(reply="Here is your answer")
    r = make_client(relay).post(URL, json={"prompt": "Hi"})
    assert r.status_code == 200
    assert r.json() == {"success": True, "content": "Here is your answer"}
    assert relay.prompts == ["Hi"]


def test_completion_provider_error_hides_body(make_client):
    relay = FakeRelay(error=RelayError("Completion provider error: 401", status=401, body="secret detail"))
    r = make_client(relay).post(URL, json={"prompt": "Hi"})
    assert r.status_code == 500
    assert r.json() == FAILURE
    assert "secret detail" not in r.text


def test_completion_unexpected_error_uses_failure_body(make_client):
    relay = FakeRelay(error=RuntimeError("boom"))
    r = make_client(relay).post(URL, json={"prompt": "Hi"})
    assert r.status_code == 500
    assert r.json() == FAILURE
    assert "boom" not in r.text


def test_completion_without_credential(make_client):
    r = make_client(None).post(URL, json={"prompt": "Hi"})
    assert r.status_code == 500
    assert r.json() == FAILURE


@pytest.mark.parametrize("body", [{}, {"prompt": 12}, ["Hi"]])
def test_completion_malformed_body(make_client, body):
    relay = FakeRelay(reply="unused")
    r = make_client(relay).post(URL, json=body)
    assert r.status_code == 500
    assert r.json() == FAILURE
    assert relay.prompts == []
