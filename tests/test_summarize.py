from types import SimpleNamespace

import pytest

from app.shared.config import settings
from app.tools.summarize import service as summarize
from app.tools.summarize.service import (
    SummaryConfigError,
    SummaryError,
    SummaryInputError,
    summarize_content,
)


class FakeModels:
    def __init__(self, text=None, exc=None):
        self.text, self.exc, self.calls = text, exc, []

    def generate_content(self, model, contents):
        self.calls.append((model, contents))
        if self.exc:
            raise self.exc
        return SimpleNamespace(text=self.text)


@pytest.fixture
def fake_gemini(monkeypatch):
    def _install(text=None, exc=None):
        models = FakeModels(text, exc)
        monkeypatch.setattr(summarize, "_client", lambda: SimpleNamespace(models=models))
        return models
    return _install


def test_summary_uses_prompt(fake_gemini):
    models = fake_gemini("  Short summary.  ")
    assert summarize_content("long memo body") == "Short summary."
    model, prompt = models.calls[0]
    assert model == settings.GEMINI_MODEL
    assert prompt.endswith("long memo body")


def test_empty_content_rejected(fake_gemini):
    fake_gemini("unused")
    with pytest.raises(SummaryInputError):
        summarize_content("")


def test_missing_key(monkeypatch):
    monkeypatch.setattr(settings, "GEMINI_API_KEY", None)
    with pytest.raises(SummaryConfigError):
        summarize_content("text")


def test_provider_failure(fake_gemini):
    fake_gemini(exc=RuntimeError("quota"))
    with pytest.raises(SummaryError) as info:
        summarize_content("text")
    assert isinstance(info.value.__cause__, RuntimeError)


def test_empty_response_is_failure(fake_gemini):
    fake_gemini(text=None)
    with pytest.raises(SummaryError):
        summarize_content("text")


def test_api_summarize(client, fake_gemini):
    fake_gemini("Two sentences.")
    r = client.post("/tools/summarize", json={"content": "memo"})
    assert r.status_code == 200
    assert r.json() == {"ok": True, "data": {"summary": "Two sentences."}}


def test_api_summarize_errors(client, fake_gemini, monkeypatch):
    r = client.post("/tools/summarize", json={})
    assert r.status_code == 400

    fake_gemini(exc=RuntimeError("down"))
    r = client.post("/tools/summarize", json={"content": "memo"})
    assert r.status_code == 500
    assert r.json()["detail"]["error"]["code"] == "summary_failed"


def test_api_summarize_not_configured(client, monkeypatch):
    monkeypatch.setattr(settings, "GEMINI_API_KEY", None)
    r = client.post("/tools/summarize", json={"content": "memo"})
    assert r.status_code == 500
    assert r.json()["detail"]["error"]["code"] == "not_configured"


def test_api_summarize_memo(client, fake_gemini):
    fake_gemini("Trip summary.")
    memo = client.post("/memos", json={"title": "Trip", "content": "Jeju", "category": "personal", "tags": []}).json()
    r = client.post("/tools/summarize/memo", json={"memo_id": memo["id"]})
    assert r.json()["data"] == {"memo_id": memo["id"], "summary": "Trip summary."}

    r = client.post("/tools/summarize/memo", json={"memo_id": "nope"})
    assert r.status_code == 404
