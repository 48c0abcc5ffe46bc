"""Config from environment: GRPT_* settings and per-service base URLs."""
from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Any

ENV_PREFIX = "GRPT_"
SERVICE_URL_SUFFIX = "_BASE_URL"
DEFAULT_TIMEOUT = 10.0


class Config:
    """Raw GRPT_* environment readers; Settings.from_env() types their output."""

    @classmethod
    def load_from_env(cls, prefix: str = ENV_PREFIX, **defaults: Any) -> dict[str, Any]:
        """
        GRPT_* variables as lower-case keys over the given defaults:
        GRPT_TIMEOUT=5 -> {"timeout": "5"}. Values stay strings.
        """
        found = {key[len(prefix):].lower(): value for key, value in os.environ.items() if key.startswith(prefix)}
        return {**defaults, **found}

    @staticmethod
    def services_from_env(suffix: str = SERVICE_URL_SUFFIX, prefix: str = ENV_PREFIX) -> dict[str, str]:
        """
        Build service name -> base URL map from env for discovery.
        GRPT_USERS_BASE_URL=http://... -> {"users": "http://..."}.
        GRPT_BASE_URL itself is the global default, not a service.
        """
        out: dict[str, str] = {}
        for key, value in os.environ.items():
            if not value or not key.startswith(prefix) or not key.endswith(suffix):
                continue
            name = key[len(prefix): -len(suffix)].lower()
            if name:
                out[name] = value.strip()
        return out


@dataclass
class Settings:
    base_url: str = ""
    timeout: float = DEFAULT_TIMEOUT
    log_level: str = "WARNING"
    services: dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_env(cls) -> Settings:
        raw = Config.load_from_env(
            base_url="",
            timeout=str(DEFAULT_TIMEOUT),
            log_level="WARNING",
        )
        try:
            timeout = float(raw["timeout"])
        except ValueError as e:
            raise ValueError(f"{ENV_PREFIX}TIMEOUT must be a number, got {raw['timeout']!r}") from e
        return cls(
            base_url=raw["base_url"].strip(),
            timeout=timeout,
            log_level=raw["log_level"].upper(),
            services=Config.services_from_env(),
        )


def create_http_client(settings: Settings | None = None) -> Any:
    """httpx.AsyncClient with the configured timeout."""
    import httpx

    settings = settings or Settings.from_env()
    return httpx.AsyncClient(timeout=settings.timeout)
