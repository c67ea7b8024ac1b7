"""Pytest configuration for check plugin tests.

The ``fake_prometheus`` fixture swaps ``httpx.Client`` for an in-memory
stand-in so no test ever reaches the network.
"""

import json
import sys
from pathlib import Path

import httpx
import pytest

sys.path.append(str(Path(__file__).resolve().parents[1]))

from checks import logging_setup


def vector_body(*values, status="success"):
    """Build an instant-query vector response with one series per value."""
    return json.dumps(
        {
            "status": status,
            "data": {
                "resultType": "vector",
                "result": [
                    {"metric": {"instance": f"node-{i}"}, "value": [1700000000.0, value]}
                    for i, value in enumerate(values)
                ],
            },
        }
    )


class FakePrometheus:
    def __init__(self):
        self.body = vector_body("0")
        self.status_code = 200
        self.error = None
        self.requests = []
        self.client_kwargs = []

    def respond(self, body, status_code=200):
        self.body = body
        self.status_code = status_code

    def fail(self, error):
        self.error = error

    def client(self, **kwargs):
        self.client_kwargs.append(kwargs)
        return _FakeClient(self)


class _FakeClient:
    def __init__(self, server):
        self._server = server

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        return False

    def get(self, url, params=None):
        request = httpx.Request("GET", url, params=params)
        self._server.requests.append(request)
        if self._server.error is not None:
            raise self._server.error
        return httpx.Response(self._server.status_code, text=self._server.body, request=request)


@pytest.fixture
def fake_prometheus(monkeypatch):
    server = FakePrometheus()
    monkeypatch.setattr(httpx, "Client", server.client)
    return server


@pytest.fixture(autouse=True)
def _isolated_logging(monkeypatch):
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    monkeypatch.delenv("PROMETHEUS_TIMEOUT", raising=False)
    monkeypatch.delenv("CHECK_PROMETHEUS_UA", raising=False)
    logging_setup.reset_logging()
    yield
    logging_setup.reset_logging()
