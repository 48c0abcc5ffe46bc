from grpt.core.config import Config, Settings, create_http_client

__all__ = [
    "Config",
    "Settings",
    "create_http_client",
]
