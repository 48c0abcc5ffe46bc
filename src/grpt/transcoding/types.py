"""Call descriptor pieces and the resolved HTTP request."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping

HTTP_RULE_OPTION = "google.api.http"

# Recognized verbs, in the form google.api.http spells them.
HTTP_VERBS = ("get", "post", "put", "delete")

UNARY = "unary"
SERVER_STREAMING = "serverStreaming"
CLIENT_STREAMING = "clientStreaming"
DUPLEX = "duplex"


@dataclass(frozen=True)
class MethodInfo:
    """RPC method metadata as the stub generator emits it; options carry google.api.http."""

    name: str
    service_name: str = ""
    options: Mapping[str, Any] = field(default_factory=dict)
    kind: str = UNARY

    @property
    def full_name(self) -> str:
        return f"{self.service_name}/{self.name}" if self.service_name else self.name

    @property
    def http_rule(self) -> HttpRule:
        return HttpRule(self.options.get(HTTP_RULE_OPTION) or {})


@dataclass(frozen=True)
class RpcOptions:
    """Per-call options: base URL and metadata sent as headers."""

    base_url: str = ""
    meta: Mapping[str, str] | None = None

    @classmethod
    def coerce(cls, options: RpcOptions | Mapping[str, Any] | None) -> RpcOptions:
        """Accept RpcOptions or a plain mapping with baseUrl/base_url and meta."""
        if options is None:
            return cls()
        if isinstance(options, RpcOptions):
            return options
        base_url = options.get("baseUrl") or options.get("base_url") or ""
        return cls(base_url=base_url, meta=options.get("meta"))


class HttpRule:
    """Read-only view over a google.api.http annotation."""

    def __init__(self, annotation: Mapping[str, Any]) -> None:
        self._annotation = annotation

    def keys(self) -> list[str]:
        return list(self._annotation.keys())

    def verb(self) -> str | None:
        """First annotation key (in annotation order) naming a recognized verb, lower case."""
        for key in self._annotation:
            if key.lower() in HTTP_VERBS:
                return key.lower()
        return None

    def template(self, verb: str) -> str:
        for key, value in self._annotation.items():
            if key.lower() == verb:
                return str(value)
        raise KeyError(verb)

    @property
    def body_is_whole_input(self) -> bool:
        return self._annotation.get("body") == "*"

    def __repr__(self) -> str:
        return f"HttpRule({dict(self._annotation)!r})"


@dataclass(frozen=True)
class ResolvedRequest:
    """One HTTP request derived from one RPC call. params and body never both set."""

    method: str
    url: str
    params: dict[str, Any] | None = None
    body: Any = None
    headers: dict[str, str] = field(default_factory=dict)

    def as_httpx_kwargs(self) -> dict[str, Any]:
        return {
            "params": self.params,
            "json": self.body,
            "headers": self.headers,
        }

    def to_dict(self) -> dict[str, Any]:
        return {
            "method": self.method,
            "url": self.url,
            "params": self.params,
            "body": self.body,
            "headers": self.headers,
        }
