"""Tests for request body parsing."""

from __future__ import annotations

import json

import pytest

from chat_proxy.utils.body import parse_body

PAYLOAD = {"messages": [{"role": "user", "content": "Hi"}]}


def test_parse_body_accepts_decoded_mapping() -> None:
    assert parse_body(PAYLOAD) == PAYLOAD


def test_parse_body_decodes_bytes_and_text() -> None:
    assert parse_body(json.dumps(PAYLOAD).encode()) == PAYLOAD
    assert parse_body(json.dumps(PAYLOAD)) == PAYLOAD


def test_parse_body_unwraps_double_encoded_json() -> None:
    assert parse_body(json.dumps(json.dumps(PAYLOAD))) == PAYLOAD


@pytest.mark.parametrize("raw", [None, b"", "", "{not json", b"\xff\xfe", "[1, 2]", "null", '"plain"'])
def test_parse_body_falls_back_to_empty_object(raw) -> None:
    assert parse_body(raw) == {}
