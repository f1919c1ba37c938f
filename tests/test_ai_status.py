import pytest

import app.ai_status as ai_status


class _Completions:
    def __init__(self, error=None):
        self.calls = 0
        self.error = error

    def create(self, **kwargs):
        self.calls += 1
        if self.error:
            raise self.error
        return object()


class _FakeClient:
    def __init__(self, completions):
        self.chat = type("Chat", (), {"completions": completions})()


@pytest.fixture(autouse=True)
def fresh_cache(monkeypatch):
    monkeypatch.setattr(ai_status, "_status_cache", None)
    monkeypatch.setattr(ai_status, "_cache_timestamp", 0)


def test_available_key_is_probed_once(monkeypatch):
    completions = _Completions()
    monkeypatch.setenv("TOGETHER_API_KEY", "tgp_live_0123456789")
    monkeypatch.setattr(ai_status, "_client", lambda: _FakeClient(completions))
    first = ai_status.get_ai_status()
    second = ai_status.get_ai_status()
    assert first["available"] is True
    assert first["api_key_set"] is True
    assert second is first
    assert completions.calls == 1


def test_unavailable_status_is_cached(monkeypatch):
    completions = _Completions(RuntimeError("401 Unauthorized"))
    monkeypatch.setenv("TOGETHER_API_KEY", "tgp_live_0123456789")
    monkeypatch.setattr(ai_status, "_client", lambda: _FakeClient(completions))
    status = ai_status.get_ai_status()
    assert status["available"] is False
    assert status["reason"] == "TOGETHER_API_KEY is invalid or expired"
    ai_status.get_ai_status()
    assert completions.calls == 1


def test_placeholder_key_is_not_probed(monkeypatch):
    monkeypatch.setenv("TOGETHER_API_KEY", "your_api_key_here")
    monkeypatch.setattr(ai_status, "_client", lambda: pytest.fail("provider must not be called"))
    status = ai_status.get_ai_status()
    assert status["available"] is False
    assert "placeholder" in status["reason"]
