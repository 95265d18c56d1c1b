"""Tests for the /health endpoint."""

from __future__ import annotations

from datetime import datetime

import pytest


@pytest.mark.parametrize(
    ("overrides", "has_key"),
    [
        ({"chat_vendor": "gemini"}, True),
        ({"chat_vendor": "gemini", "gemini_api_key": ""}, False),
        ({"chat_vendor": "openai"}, True),
        ({"chat_vendor": "openai", "openai_api_key": "", "gemini_api_key": "gm-test"}, False),
    ],
)
def test_health_reports_key_presence(client_factory, overrides, has_key) -> None:
    client = client_factory(**overrides)

    response = client.get("/health")

    assert response.status_code == 200
    body = response.json()
    assert body["ok"] is True
    assert body["hasKey"] is has_key


def test_health_time_is_utc_iso8601(client_factory) -> None:
    response = client_factory().get("/health")

    stamp = response.json()["time"]
    assert stamp.endswith("Z")
    assert len(stamp) == len("2024-01-01T00:00:00.000Z")
    datetime.strptime(stamp, "%Y-%m-%dT%H:%M:%S.%fZ")
    assert response.headers["access-control-allow-origin"] == "*"
