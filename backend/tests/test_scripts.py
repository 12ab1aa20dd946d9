import json

import pytest
import requests

from athlete_plans.core.config import Settings
from athlete_plans.repositories.json_store import JsonDatasetStore
from athlete_plans.scripts import export_data
from athlete_plans.scripts.seed_sample_data import DEMO_ATHLETE_NAME, ensure_demo_athlete


class FakeResponse:
    def __init__(self, payload=None, status_code: int = 200, text: str = ""):
        self._payload = payload
        self.status_code = status_code
        self.text = text

    def json(self):
        if self._payload is None:
            raise ValueError("no json")
        return self._payload


def _unexpected_post(*args, **kwargs):
    pytest.fail("export must not call Telegram")


@pytest.fixture()
def export_settings(tmp_path) -> Settings:
    data_file = tmp_path / "data.json"
    data_file.write_text(json.dumps({"athletes": [], "nextId": 1}), encoding="utf-8")
    return Settings(
        data_file=data_file,
        telegram_bot_token="123:abc",
        telegram_chat_id="42",
        export_timeout=5,
    )


def test_export_posts_document_to_telegram(export_settings, monkeypatch):
    calls = []

    def fake_post(url, data=None, files=None, timeout=None):
        calls.append({"url": url, "data": data, "files": files, "timeout": timeout})
        return FakeResponse({"ok": True})

    monkeypatch.setattr(export_data.requests, "post", fake_post)

    assert export_data.send_data_file(export_settings) is True
    assert len(calls) == 1
    assert calls[0]["url"] == "https://api.telegram.org/bot123:abc/sendDocument"
    assert calls[0]["data"] == {"chat_id": "42"}
    assert calls[0]["files"]["document"][0] == "data.json"
    assert calls[0]["timeout"] == 5


def test_export_requires_telegram_settings(export_settings, monkeypatch):
    monkeypatch.setattr(export_data.requests, "post", _unexpected_post)
    settings = export_settings.model_copy(update={"telegram_chat_id": None})

    assert export_data.send_data_file(settings) is False


def test_export_requires_data_file(export_settings, monkeypatch):
    monkeypatch.setattr(export_data.requests, "post", _unexpected_post)
    export_settings.data_file.unlink()

    assert export_data.send_data_file(export_settings) is False


@pytest.mark.parametrize(
    "response",
    [
        FakeResponse({"ok": False, "description": "Bad Request: chat not found"}, status_code=400),
        FakeResponse(None, status_code=502, text="<html>bad gateway</html>"),
    ],
)
def test_export_reports_telegram_failures(export_settings, monkeypatch, response):
    monkeypatch.setattr(export_data.requests, "post", lambda *args, **kwargs: response)

    assert export_data.send_data_file(export_settings) is False


def test_export_handles_network_errors(export_settings, monkeypatch):
    def boom(*args, **kwargs):
        raise requests.ConnectionError("unreachable")

    monkeypatch.setattr(export_data.requests, "post", boom)

    assert export_data.send_data_file(export_settings) is False


def test_seed_is_idempotent(tmp_path):
    store = JsonDatasetStore(tmp_path / "data.json")

    first = ensure_demo_athlete(store)
    second = ensure_demo_athlete(store)

    assert first.id == second.id == 1
    dataset = store.load()
    assert [athlete.name for athlete in dataset.athletes] == [DEMO_ATHLETE_NAME]
    assert dataset.next_id == 2
