"""Tests for :mod:`lead_prospector.collaborators.gemini` without network access."""

from __future__ import annotations

from types import SimpleNamespace

import pytest

from lead_prospector.collaborators import gemini
from lead_prospector.collaborators.gemini import DEFAULT_MODEL, GeminiMapsSearch
from lead_prospector.config import ConfigurationError


class FakeModels:
    def __init__(self, text) -> None:
        self.text = text
        self.calls: list[dict] = []

    def generate_content(self, **kwargs):
        self.calls.append(kwargs)
        return SimpleNamespace(text=self.text)


def _client(text="[]"):
    return SimpleNamespace(models=FakeModels(text))


def test_search_enables_google_maps_tool() -> None:
    client = _client('[{"nombre": "Bar"}]')
    collaborator = GeminiMapsSearch(client=client)

    text = collaborator.search("prompt")

    assert text == '[{"nombre": "Bar"}]'
    call = client.models.calls[0]
    assert call["model"] == DEFAULT_MODEL
    assert call["contents"] == "prompt"
    assert call["config"].tools[0].google_maps is not None


def test_search_without_maps_sends_no_config() -> None:
    client = _client()

    GeminiMapsSearch(client=client, model="gemini-test").search("prompt", use_maps=False)

    call = client.models.calls[0]
    assert call["model"] == "gemini-test"
    assert call["config"] is None


def test_empty_response_text_becomes_empty_string() -> None:
    assert GeminiMapsSearch(client=_client(None)).search("prompt") == ""


def test_missing_api_key_raises(monkeypatch) -> None:
    for variable in gemini.API_KEY_ENV_VARS:
        monkeypatch.delenv(variable, raising=False)

    with pytest.raises(ConfigurationError):
        GeminiMapsSearch()


def test_api_key_read_from_environment(monkeypatch) -> None:
    captured = {}

    def fake_client(**kwargs):
        captured.update(kwargs)
        return _client()

    for variable in gemini.API_KEY_ENV_VARS:
        monkeypatch.delenv(variable, raising=False)
    monkeypatch.setenv("API_KEY", "secret")
    monkeypatch.setattr(gemini.genai, "Client", fake_client)

    GeminiMapsSearch()

    assert captured == {"api_key": "secret"}
