from grpt.transcoding.adapter import (
    LoggingReporter,
    aclose_default_adapter,
    TranscodingAdapter,
    execute,
    get_default_adapter,
    set_default_adapter,
)
from grpt.transcoding.errors import (
    InvalidPayload,
    MissingPathParameter,
    NoHttpMethodAnnotation,
    ServiceUnavailable,
    TranscodingError,
    UnsupportedHttpMethodAnnotation,
)
from grpt.transcoding.fields import fields_of, to_payload
from grpt.transcoding.path_params import resolve_path, to_camel_case
from grpt.transcoding.protocol import ErrorReporter, FieldSource, HttpClient
from grpt.transcoding.types import HttpRule, MethodInfo, ResolvedRequest, RpcOptions
from grpt.transcoding.urls import compose_url

__all__ = [
    "ErrorReporter",
    "FieldSource",
    "HttpClient",
    "HttpRule",
    "LoggingReporter",
    "aclose_default_adapter",
    "MethodInfo",
    "InvalidPayload",
    "MissingPathParameter",
    "NoHttpMethodAnnotation",
    "ResolvedRequest",
    "RpcOptions",
    "ServiceUnavailable",
    "TranscodingAdapter",
    "TranscodingError",
    "UnsupportedHttpMethodAnnotation",
    "compose_url",
    "execute",
    "fields_of",
    "get_default_adapter",
    "resolve_path",
    "set_default_adapter",
    "to_camel_case",
    "to_payload",
]
