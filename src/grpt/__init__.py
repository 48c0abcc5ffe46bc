"""
grpt: run generated RPC stub calls as plain HTTP requests, driven by
the google.api.http annotation on each method.
"""
from grpt.core import Config, Settings, create_http_client
from grpt.discovery import ServiceDiscovery, StaticDiscovery, static_discovery
from grpt.rpc import RpcClient, ServiceInfo, TranscodingRpcTransport
from grpt.transcoding import (
    MethodInfo,
    InvalidPayload,
    MissingPathParameter,
    NoHttpMethodAnnotation,
    ResolvedRequest,
    RpcOptions,
    ServiceUnavailable,
    TranscodingAdapter,
    aclose_default_adapter,
    TranscodingError,
    UnsupportedHttpMethodAnnotation,
    compose_url,
    execute,
    resolve_path,
    set_default_adapter,
    to_camel_case,
)

__all__ = [
    "Config",
    "MethodInfo",
    "InvalidPayload",
    "MissingPathParameter",
    "NoHttpMethodAnnotation",
    "ResolvedRequest",
    "RpcClient",
    "RpcOptions",
    "ServiceDiscovery",
    "ServiceInfo",
    "ServiceUnavailable",
    "Settings",
    "StaticDiscovery",
    "TranscodingAdapter",
    "TranscodingError",
    "TranscodingRpcTransport",
    "aclose_default_adapter",
    "UnsupportedHttpMethodAnnotation",
    "compose_url",
    "create_http_client",
    "execute",
    "resolve_path",
    "set_default_adapter",
    "static_discovery",
    "to_camel_case",
]
