"""Shared test fixtures."""

import json

import httpx
import pytest

from grpt.transcoding.adapter import TranscodingAdapter


class RecordingHttpClient:
    """HttpClient double: records each request() call and returns a pending coroutine."""

    def __init__(self):
        self.calls = []

    def request(self, method, url, *, params=None, json=None, headers=None):
        self.calls.append({"method": method, "url": url, "params": params, "json": json, "headers": headers})

        async def respond():
            return httpx.Response(200, json={"ok": True})

        return respond()


class RecordingReporter:
    def __init__(self):
        self.errors = []

    def report(self, error):
        self.errors.append(error)


def echo_handler(request: httpx.Request) -> httpx.Response:
    """MockTransport handler: echoes what the server received."""
    body = json.loads(request.content) if request.content else None
    return httpx.Response(
        200,
        json={
            "method": request.method,
            "url": str(request.url),
            "path": request.url.path,
            "query": dict(request.url.params),
            "body": body,
            "headers": {k: v for k, v in request.headers.items() if k.startswith("x-")},
        },
    )


@pytest.fixture
def http_client():
    return RecordingHttpClient()


@pytest.fixture
def reporter():
    return RecordingReporter()


@pytest.fixture
def adapter(http_client, reporter):
    return TranscodingAdapter(http_client, reporter=reporter)


@pytest.fixture
def echo_transport():
    return httpx.MockTransport(echo_handler)
