import pytest

import app as app_module
from agents.assistant import QUICK_SUGGESTIONS, SYSTEM_PROMPT
from fakes import FakeProvider


def test_intro_lists_quick_suggestions(client):
    r = client.get("/assistant")
    assert r.status_code == 200
    data = r.json()
    assert data["suggestions"] == [
        "Project Ideas for my Year",
        "How to Solve Coding Errors",
        "Best Practices for Documentation",
    ]
    assert data["greeting"].startswith("Hi! I'm your AI Problem Solver.")


def test_ask_returns_trimmed_reply(client, provider):
    provider.text = "\n1. Start small\n2. Ask a peer\n  "
    r = client.post("/assistant", json={"message": QUICK_SUGGESTIONS[0]})
    assert r.status_code == 200
    assert r.json() == {"reply": "1. Start small\n2. Ask a peer"}
    assert provider.calls == [{
        "system": SYSTEM_PROMPT,
        "prompt": "Project Ideas for my Year",
        "temperature": 0.7,
        "max_tokens": 2000,
    }]


@pytest.mark.parametrize("body", [{}, {"message": ""}, {"message": "  \n"}, {"message": 7}])
def test_blank_message_is_rejected_without_upstream_call(client, provider, body):
    r = client.post("/assistant", json=body)
    assert r.status_code == 400
    assert r.json() == {"error": "Message is required"}
    assert provider.calls == []


def test_upstream_failure_maps_to_500_with_details(client, monkeypatch):
    monkeypatch.setenv("ENVIRONMENT", "development")
    failing = FakeProvider(error=RuntimeError("rate limited"))
    app_module.app.dependency_overrides[app_module.get_completion_provider] = lambda: failing

    r = client.post("/assistant", json={"message": "How to Solve Coding Errors"})
    assert r.status_code == 500
    assert r.json() == {"error": "Failed to get a reply from the assistant", "details": "rate limited"}


def test_upstream_failure_hides_details_in_production(client, monkeypatch, failing_provider):
    monkeypatch.setenv("ENVIRONMENT", "production")
    app_module.app.dependency_overrides[app_module.get_completion_provider] = lambda: failing_provider

    r = client.post("/assistant", json={"message": "hi"})
    assert r.status_code == 500
    assert r.json() == {"error": "Failed to get a reply from the assistant"}
