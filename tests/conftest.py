"""Pytest shared fixtures for the API client tests."""
import json
import pathlib
import sys
from types import SimpleNamespace

# Add project root to Python path
ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import pytest
import requests


class StubResponse:
    """Minimal stand-in for requests.Response."""

    def __init__(self, payload=None, status_code: int = 200, url: str = ""):
        self._payload = payload if payload is not None else {}
        self.status_code = status_code
        self.url = url
        self.text = json.dumps(self._payload)

    def json(self):
        return self._payload

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(response=self)


# ─────────────────────────────────────────────────────────────────────────────
# Network Guard Rails
# ─────────────────────────────────────────────────────────────────────────────
@pytest.fixture(autouse=True)
def _block_network(monkeypatch, request):
    """
    Prevent unit tests from hitting a live tenant.

    Integration tests are explicitly marked with @pytest.mark.integration and
    are allowed to perform real HTTP calls by skipping this fixture.
    """
    if request.node.get_closest_marker("integration"):
        return

    def _fail(method):
        def _call(url, *args, **kwargs):
            raise RuntimeError(f"Unexpected HTTP {method} in unit test: {url}")
        return _call

    for verb in ("get", "post", "put", "delete"):
        monkeypatch.setattr(requests, verb, _fail(verb.upper()))


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    """Start every test without platform configuration in the environment."""
    for var in ("FQDN", "IGA_API_URL", "OPENIDM_URL", "ACCESS_TOKEN", "IGA_REQUEST_TIMEOUT", "IGA_VERIFY_TLS"):
        monkeypatch.delenv(var, raising=False)


# ─────────────────────────────────────────────────────────────────────────────
# Recording HTTP stub
# ─────────────────────────────────────────────────────────────────────────────
@pytest.fixture()
def http(monkeypatch):
    """Record every requests call and answer with a configurable response.

    Usage:
        http.status_code = 404
        ...
        call = http.calls[-1]
        assert call.method == "GET"
    """
    state = SimpleNamespace(calls=[], status_code=200, payload={"result": []})

    def _record(method):
        def _call(url, **kwargs):
            state.calls.append(SimpleNamespace(method=method, url=url, **kwargs))
            return StubResponse(state.payload, status_code=state.status_code, url=url)
        return _call

    for verb in ("get", "post", "put", "delete"):
        monkeypatch.setattr(requests, verb, _record(verb.upper()))
    return state
