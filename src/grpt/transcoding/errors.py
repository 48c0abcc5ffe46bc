"""Transcoding errors: raised before any network I/O, never retried."""
from __future__ import annotations


class TranscodingError(Exception):
    """An RPC call could not be turned into an HTTP request."""

    code = "TRANSCODING_ERROR"

    def __init__(self, message: str, code: str | None = None) -> None:
        if code is not None:
            self.code = code
        self.message = message
        super().__init__(f"[{self.code}] {message}")


class NoHttpMethodAnnotation(TranscodingError):
    """The method's http annotation is empty."""

    code = "NO_HTTP_METHOD"

    def __init__(self, method_name: str = "") -> None:
        self.method_name = method_name
        message = "Request error - No HTTP method defined"
        if method_name:
            message += f" for {method_name}"
        super().__init__(message)


class UnsupportedHttpMethodAnnotation(TranscodingError):
    """The http annotation has keys, but none of GET/POST/PUT/DELETE."""

    code = "UNSUPPORTED_HTTP_METHOD"

    def __init__(self, keys: list[str], method_name: str = "") -> None:
        self.keys = list(keys)
        self.method_name = method_name
        message = "Request error - Non GET/POST/PUT/DELETE HTTP method defined"
        if method_name:
            message += f" for {method_name}"
        message += f" (keys: {', '.join(self.keys)})"
        super().__init__(message)


class MissingPathParameter(TranscodingError):
    """A {name} placeholder has no value in the input, under either spelling."""

    code = "MISSING_PATH_PARAMETER"

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"MISSING PARAMETER: {name}")


class ServiceUnavailable(TranscodingError):
    """No base URL for the service: none in call options, none from discovery."""

    code = "SERVICE_UNAVAILABLE"

    def __init__(self, service_name: str) -> None:
        self.service_name = service_name
        super().__init__(f"Service {service_name!r} not found")


class InvalidPayload(TranscodingError):
    """The input has no readable fields to send as body or query params."""

    code = "INVALID_PAYLOAD"

    def __init__(self, type_name: str) -> None:
        self.type_name = type_name
        super().__init__(f"Cannot use {type_name} as a request payload")
