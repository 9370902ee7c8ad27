"""Shared fixtures: a fixed WHMCS config and a recording fake of the WHMCS API."""
from importlib import metadata
from urllib.parse import parse_qsl

import httpx
import pytest

from core.config import WHMCSConfig
from core.gateway import WHMCSGateway


class FakeWHMCS:
    """httpx handler that records every request and answers with a canned reply."""

    def __init__(self, status=200, json_body=None, text=None, exc=None):
        self.status = status
        self.json_body = {"result": "success"} if json_body is None else json_body
        self.text = text
        self.exc = exc
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.exc is not None:
            raise self.exc(f"{self.exc.__name__} (simulated)", request=request)
        if self.text is not None:
            return httpx.Response(self.status, text=self.text)
        return httpx.Response(self.status, json=self.json_body)

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]

    @property
    def last_form(self) -> dict[str, str]:
        return dict(parse_qsl(self.last_request.content.decode(), keep_blank_values=True))

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self)


@pytest.fixture
def config():
    return WHMCSConfig(
        url="https://billing.example.com",
        identifier="api-id",
        secret="api-secret",
        accesskey="api-access",
    )


@pytest.fixture
def fake_whmcs():
    return FakeWHMCS()


@pytest.fixture
def gateway(config, fake_whmcs):
    return WHMCSGateway(config, transport=fake_whmcs.transport())


def _installed(*distributions: str) -> bool:
    try:
        for name in distributions:
            metadata.version(name)
    except metadata.PackageNotFoundError:
        return False
    return True


CONSOLE_EXTRA_INSTALLED = _installed("google-adk", "google-genai", "litellm")

# Tests of agent/billing_agent.py and main.py need the optional console stack.
requires_console = pytest.mark.skipif(
    not CONSOLE_EXTRA_INSTALLED,
    reason="needs the 'console' extra: pip install -e .[console]",
)
