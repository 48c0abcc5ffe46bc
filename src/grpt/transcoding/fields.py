"""Field access over input messages: mappings, dataclasses, plain and __slots__ objects."""
from __future__ import annotations

import dataclasses
from typing import Any, Mapping

from grpt.transcoding.errors import InvalidPayload
from grpt.transcoding.protocol import FieldSource


class MappingFields:
    """FieldSource over a dict-like message (JSON-shaped stub inputs)."""

    def __init__(self, data: Mapping[str, Any]) -> None:
        self._data = data

    def lookup(self, name: str) -> Any | None:
        return self._data.get(name)

    def as_dict(self) -> dict[str, Any]:
        return dict(self._data)


def _slot_names(cls: type) -> list[str]:
    names: list[str] = []
    for klass in cls.__mro__:
        slots = klass.__dict__.get("__slots__", ())
        if isinstance(slots, str):
            slots = (slots,)
        names.extend(s for s in slots if s not in names)
    return names


class AttributeFields:
    """FieldSource over an object with attributes (dataclasses, generated message classes)."""

    def __init__(self, obj: Any) -> None:
        self._obj = obj

    def lookup(self, name: str) -> Any | None:
        if name.startswith("_"):
            return None
        return getattr(self._obj, name, None)

    def as_dict(self) -> dict[str, Any]:
        obj = self._obj
        if dataclasses.is_dataclass(obj):
            return dataclasses.asdict(obj)
        slots = _slot_names(type(obj))
        if not slots and not hasattr(obj, "__dict__"):
            raise InvalidPayload(type(obj).__name__)
        out: dict[str, Any] = dict(vars(obj)) if hasattr(obj, "__dict__") else {}
        for name in slots:
            if name not in out and hasattr(obj, name):
                out[name] = getattr(obj, name)
        return {k: v for k, v in out.items() if not k.startswith("_")}


def _is_field_source(value: Any) -> bool:
    # Protocol isinstance only checks names; a message field called "lookup" must not count.
    return (
        isinstance(value, FieldSource)
        and callable(getattr(value, "lookup", None))
        and callable(getattr(value, "as_dict", None))
    )


def fields_of(value: Any) -> FieldSource:
    """Wrap an input value in a FieldSource. None reads as an empty message."""
    if value is None:
        return MappingFields({})
    if isinstance(value, Mapping):
        return MappingFields(value)
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return AttributeFields(value)
    if _is_field_source(value):
        return value
    return AttributeFields(value)


def to_payload(value: Any) -> dict[str, Any]:
    """Plain dict of the input's fields, for use as JSON body or query params."""
    return fields_of(value).as_dict()


def query_params(value: Any) -> dict[str, Any]:
    """Payload as query params: fields set to None are left out."""
    return {k: v for k, v in to_payload(value).items() if v is not None}
