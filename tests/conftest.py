"""Pytest configuration and fixtures."""

import json

import httpx
import pytest

from walletgate_demo.adapters.walletgate_client import WalletGateClient
from walletgate_demo.config import DemoSettings

WALLETGATE_BASE = "http://walletgate.test"


def session_payload(**overrides):
    """A WalletGate session as returned inside ``{"data": ...}``."""
    data = {
        "id": "3f2a9c1e-77b0-4c1d-9e52-0a6f7d1b2c3d",
        "status": "pending",
        "verificationUrl": "https://wallet.walletgate.app/v/3f2a9c1e",
        "createdAt": "2026-10-19T10:00:00Z",
        "expiresAt": "2026-10-19T10:15:00Z",
    }
    data.update(overrides)
    return data


class RecordingHandler:
    """MockTransport handler that replays queued responses and records requests."""

    def __init__(self, *responses):
        self.responses = list(responses)
        self.requests = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        response = self.responses.pop(0) if len(self.responses) > 1 else self.responses[0]
        if isinstance(response, Exception):
            raise response
        return response

    def json_body(self, index=-1):
        return json.loads(self.requests[index].content)


@pytest.fixture
def settings():
    """Provide settings fixture."""
    return DemoSettings(app_env="development")


@pytest.fixture
def make_walletgate():
    """Builds a WalletGateClient on top of an httpx MockTransport."""

    def _make(handler):
        http = httpx.AsyncClient(
            base_url=WALLETGATE_BASE,
            transport=httpx.MockTransport(handler),
        )
        return WalletGateClient(WALLETGATE_BASE, http_client=http)

    return _make
