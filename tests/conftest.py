"""Shared fixtures for the chat proxy tests."""

from __future__ import annotations

import json
from typing import Callable, List

import httpx
import pytest
from fastapi.testclient import TestClient

from chat_proxy.api.endpoints.chat import get_chat_controller
from chat_proxy.config.settings import Settings, get_settings
from chat_proxy.controllers.chat_controller import ChatController
from main import create_app


def make_settings(**overrides) -> Settings:
    values = {
        "chat_vendor": "gemini",
        "openai_api_key": "sk-test",
        "gemini_api_key": "gm-test",
        "default_system_prompt": None,
        "api_prefix": "",
        "openai_base_url": "https://api.openai.com/v1",
        "openai_model": "gpt-4o-mini",
        "gemini_base_url": "https://generativelanguage.googleapis.com/v1beta",
        "gemini_model": "gemini-1.5-flash",
        "default_temperature": 0.7,
        "upstream_timeout": None,
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


class StubUpstream:
    """Records outbound requests and answers with a canned response."""

    def __init__(self, status_code: int = 200, json_body=None, text: str | None = None) -> None:
        self.status_code = status_code
        self.json_body = json_body
        self.text = text
        self.connect_error: str | None = None
        self.requests: List[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.connect_error is not None:
            raise httpx.ConnectError(self.connect_error, request=request)
        if self.text is not None:
            return httpx.Response(self.status_code, text=self.text)
        return httpx.Response(self.status_code, json=self.json_body)

    @property
    def last_payload(self) -> dict:
        return json.loads(self.requests[-1].content)

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self)


@pytest.fixture
def stub_upstream() -> StubUpstream:
    return StubUpstream(json_body={})


@pytest.fixture
def client_factory(stub_upstream: StubUpstream) -> Callable[..., TestClient]:
    """Build a TestClient wired to the given settings and the stub upstream."""

    def _build(**overrides) -> TestClient:
        settings = make_settings(**overrides)
        app = create_app(settings)
        app.dependency_overrides[get_settings] = lambda: settings
        app.dependency_overrides[get_chat_controller] = lambda: ChatController(
            settings, transport=stub_upstream.transport()
        )
        return TestClient(app)

    return _build
