"""
CLI for trying transcoding rules: resolve (dry run) and call.
Rules are given as VERB:TEMPLATE, e.g. --rule get:/users/{user_id}.
"""
from __future__ import annotations

import asyncio
import json
import logging
from typing import Any, Optional

import httpx
import typer

from grpt.core.config import Settings
from grpt.transcoding.adapter import TranscodingAdapter
from grpt.transcoding.errors import TranscodingError
from grpt.transcoding.types import HTTP_RULE_OPTION, UNARY, MethodInfo, RpcOptions

app = typer.Typer(help="grpt CLI: run google.api.http-annotated RPC methods as plain HTTP.")


class EchoReporter:
    """Transcoding errors to stderr."""

    def report(self, error: TranscodingError) -> None:
        typer.secho(error.message, fg=typer.colors.RED, err=True)


def _parse_rule(rule: str, body_all: bool) -> dict[str, Any]:
    verb, sep, template = rule.partition(":")
    if not sep or not verb:
        raise typer.BadParameter(f"expected VERB:TEMPLATE, got {rule!r}", param_hint="--rule")
    annotation: dict[str, Any] = {verb.strip(): template.strip()}
    if body_all:
        annotation["body"] = "*"
    return annotation


def _parse_headers(headers: list[str]) -> dict[str, str]:
    out: dict[str, str] = {}
    for h in headers:
        name, sep, value = h.partition(":")
        if not sep or not name.strip():
            raise typer.BadParameter(f"expected NAME:VALUE, got {h!r}", param_hint="--header")
        out[name.strip()] = value.strip()
    return out


def _parse_input(raw: str) -> dict[str, Any]:
    try:
        data = json.loads(raw) if raw else {}
    except json.JSONDecodeError as e:
        raise typer.BadParameter(f"invalid JSON: {e}", param_hint="--input") from e
    if not isinstance(data, dict):
        raise typer.BadParameter("input must be a JSON object", param_hint="--input")
    return data


def _build(
    rule: str, body_all: bool, input: str, header: list[str], base_url: Optional[str], settings: Settings
) -> tuple[MethodInfo, RpcOptions, dict[str, Any]]:
    method = MethodInfo(name="cli", options={HTTP_RULE_OPTION: _parse_rule(rule, body_all)})
    options = RpcOptions(base_url=base_url or settings.base_url, meta=_parse_headers(header))
    return method, options, _parse_input(input)


def _configure_logging(level: Optional[str], settings: Settings) -> None:
    logging.basicConfig(level=(level or settings.log_level).upper(), format="%(levelname)s %(name)s: %(message)s")


@app.command()
def resolve(
    rule: str = typer.Option(..., "--rule", "-r", help="google.api.http rule as VERB:TEMPLATE"),
    body_all: bool = typer.Option(False, "--body-all", help='Annotation has body: "*"'),
    input: str = typer.Option("", "--input", "-i", help="Input message as a JSON object"),
    header: list[str] = typer.Option([], "--header", "-H", help="Metadata header NAME:VALUE (repeatable)"),
    base_url: Optional[str] = typer.Option(None, "--base-url", "-b", help="Base URL (default: GRPT_BASE_URL)"),
    log_level: Optional[str] = typer.Option(None, "--log-level", help="Logging level (default: GRPT_LOG_LEVEL)"),
) -> None:
    """Print the HTTP request an RPC call would become, without sending it."""
    settings = Settings.from_env()
    _configure_logging(log_level, settings)
    method, options, data = _build(rule, body_all, input, header, base_url, settings)
    adapter = TranscodingAdapter(reporter=EchoReporter())
    try:
        request = adapter.resolve(method, options, data)
    except TranscodingError:
        raise typer.Exit(1)
    typer.echo(json.dumps(request.to_dict(), indent=2, ensure_ascii=False))


@app.command()
def call(
    rule: str = typer.Option(..., "--rule", "-r", help="google.api.http rule as VERB:TEMPLATE"),
    body_all: bool = typer.Option(False, "--body-all", help='Annotation has body: "*"'),
    input: str = typer.Option("", "--input", "-i", help="Input message as a JSON object"),
    header: list[str] = typer.Option([], "--header", "-H", help="Metadata header NAME:VALUE (repeatable)"),
    base_url: Optional[str] = typer.Option(None, "--base-url", "-b", help="Base URL (default: GRPT_BASE_URL)"),
    timeout: Optional[float] = typer.Option(None, "--timeout", help="Seconds (default: GRPT_TIMEOUT)"),
    log_level: Optional[str] = typer.Option(None, "--log-level", help="Logging level (default: GRPT_LOG_LEVEL)"),
) -> None:
    """Send an RPC call as HTTP and print status and body."""
    settings = Settings.from_env()
    _configure_logging(log_level, settings)
    method, options, data = _build(rule, body_all, input, header, base_url, settings)

    async def run() -> httpx.Response:
        async with httpx.AsyncClient(timeout=timeout or settings.timeout) as client:
            adapter = TranscodingAdapter(client, reporter=EchoReporter())
            return await adapter.execute(UNARY, None, method, options, data)

    try:
        response = asyncio.run(run())
    except TranscodingError:
        raise typer.Exit(1)
    except httpx.HTTPError as e:
        typer.secho(f"HTTP error: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(2)
    typer.echo(f"{response.status_code} {response.reason_phrase}")
    typer.echo(response.text)
    if response.is_error:
        raise typer.Exit(2)


def main() -> None:
    """Entry point for the grpt console command."""
    app()


if __name__ == "__main__":
    main()
