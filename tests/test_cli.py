"""Tests for the grpt CLI."""

import json
from unittest.mock import patch

import httpx
from typer.testing import CliRunner

from grpt.cli.main import app

runner = CliRunner()


def test_resolve_path_params():
    result = runner.invoke(
        app,
        ["resolve", "--rule", "get:/users/{user_id}", "--input", '{"userId": "42"}', "--base-url", "http://h/"],
    )
    assert result.exit_code == 0, result.output
    data = json.loads(result.stdout)
    assert data["method"] == "GET"
    assert data["url"] == "http://h/users/42"
    assert data["params"] is None
    assert data["body"] is None


def test_resolve_body_and_headers():
    result = runner.invoke(
        app,
        [
            "resolve", "-r", "post:/users", "--body-all", "-i", '{"name": "a"}',
            "-b", "http://h", "-H", "authorization: Bearer t",
        ],
    )
    assert result.exit_code == 0, result.output
    data = json.loads(result.stdout)
    assert data["body"] == {"name": "a"}
    assert data["headers"] == {"authorization": "Bearer t"}


def test_resolve_base_url_from_env(monkeypatch):
    monkeypatch.setenv("GRPT_BASE_URL", "http://env.local")
    result = runner.invoke(app, ["resolve", "-r", "get:/ping"])
    assert result.exit_code == 0, result.output
    assert json.loads(result.stdout)["url"] == "http://env.local/ping"


def test_resolve_unsupported_verb():
    result = runner.invoke(app, ["resolve", "-r", "patch:/x", "-b", "http://h"])
    assert result.exit_code == 1


def test_resolve_missing_parameter():
    result = runner.invoke(app, ["resolve", "-r", "get:/users/{id}", "-b", "http://h"])
    assert result.exit_code == 1


def test_bad_input_json():
    result = runner.invoke(app, ["resolve", "-r", "get:/x", "-i", "[1]", "-b", "http://h"])
    assert result.exit_code == 2


def test_call_prints_status_and_body():
    def handler(request):
        return httpx.Response(200, json={"id": request.url.path.rsplit("/", 1)[1]})

    real_client = httpx.AsyncClient

    def mock_client(**kwargs):
        return real_client(transport=httpx.MockTransport(handler), **kwargs)

    with patch("grpt.cli.main.httpx.AsyncClient", side_effect=mock_client):
        result = runner.invoke(app, ["call", "-r", "get:/users/{user_id}", "-i", '{"user_id": 7}', "-b", "http://h"])
    assert result.exit_code == 0, result.output
    assert result.stdout.splitlines()[0] == "200 OK"
    assert json.loads(result.stdout.splitlines()[1]) == {"id": "7"}


def test_call_error_status_exits_2():
    real_client = httpx.AsyncClient

    def mock_client(**kwargs):
        return real_client(transport=httpx.MockTransport(lambda r: httpx.Response(404, text="nope")), **kwargs)

    with patch("grpt.cli.main.httpx.AsyncClient", side_effect=mock_client):
        result = runner.invoke(app, ["call", "-r", "get:/x", "-b", "http://h"])
    assert result.exit_code == 2
    assert "404 Not Found" in result.stdout
