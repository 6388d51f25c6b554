"""Unit tests for :mod:`lead_prospector.extraction`."""

from __future__ import annotations

import json

import pytest

from lead_prospector.extraction import MalformedResponse, extract_json_array


def test_extracts_array_surrounded_by_prose() -> None:
    assert extract_json_array('blah [{"a":1}] blah') == [{"a": 1}]


def test_extracts_array_from_markdown_fence() -> None:
    text = 'Resultados:\n```json\n[{"nombre": "Bar Pepe"}, {"nombre": "Café Luz"}]\n```\n'

    assert [item["nombre"] for item in extract_json_array(text)] == ["Bar Pepe", "Café Luz"]


def test_missing_brackets_raise_malformed_response() -> None:
    with pytest.raises(MalformedResponse):
        extract_json_array("no brackets here")


def test_only_opening_bracket_raises() -> None:
    with pytest.raises(MalformedResponse):
        extract_json_array("[ not closed")


def test_invalid_json_chains_decode_error() -> None:
    with pytest.raises(MalformedResponse) as excinfo:
        extract_json_array("[{'nombre': 'single quotes'}]")

    assert isinstance(excinfo.value.__cause__, json.JSONDecodeError)


def test_empty_response_raises() -> None:
    with pytest.raises(MalformedResponse):
        extract_json_array("")


def test_empty_array_is_valid() -> None:
    assert extract_json_array("Sin resultados: []") == []


@pytest.mark.parametrize(
    "text",
    [
        '[{"estrellas": ' + "1" * 5000 + "}]",
        "[" * 100000 + "]" * 100000,
    ],
    ids=["oversized-integer", "deep-nesting"],
)
def test_unparseable_payloads_raise_malformed_response(text: str) -> None:
    with pytest.raises(MalformedResponse):
        extract_json_array(text)
