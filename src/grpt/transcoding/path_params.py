"""
Path template substitution: "/users/{user_id}" + {"userId": 42} -> "/users/42".
Names are tried as written, then in camelCase; never the other way round.
"""
from __future__ import annotations

import re
from typing import Any
from urllib.parse import quote

from grpt.transcoding.errors import MissingPathParameter
from grpt.transcoding.fields import fields_of

PLACEHOLDER = re.compile(r"\{(\w+)\}")

# Characters encodeURIComponent leaves as is.
_UNRESERVED = "-_.!~*'()"

_SNAKE_PART = re.compile(r"_([a-z])")


def to_camel_case(name: str) -> str:
    """example_param_name -> exampleParamName. Names without "_" come back unchanged."""
    return _SNAKE_PART.sub(lambda m: m.group(1).upper(), name)


def has_placeholders(template: str) -> bool:
    return "{" in template and "}" in template


def placeholder_names(template: str) -> list[str]:
    """Placeholder names left to right, repeats included."""
    return PLACEHOLDER.findall(template)


def _to_text(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def resolve_path(template: str, input: Any) -> str:
    """Return template with every {name} replaced by the URL-encoded input value."""
    fields = fields_of(input)

    def substitute(match: re.Match[str]) -> str:
        name = match.group(1)
        value = fields.lookup(name)
        if value is None:
            value = fields.lookup(to_camel_case(name))
        if value is None:
            raise MissingPathParameter(name)
        return quote(_to_text(value), safe=_UNRESERVED)

    return PLACEHOLDER.sub(substitute, template)
