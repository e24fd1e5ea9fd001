"""
HTTP Networking Utilities

Helpers shared by the signer and the dispatcher. Parameter values are
stringified identically for signing and for transmission so the signed
base string always matches what goes over the wire.
"""

import copy
from typing import Any, Dict, Iterable, Mapping, Tuple
from urllib.parse import quote

import msgspec


def percent_encode(value: Any) -> str:
    """RFC 3986 percent-encoding: everything except ``A-Za-z0-9-._~`` is escaped."""
    return quote(stringify_value(value), safe='')


def stringify_value(value: Any) -> str:
    """
    Render a parameter value the way it is signed and transmitted.

    Booleans become ``true``/``false``, ``None`` an empty string, integral
    floats drop the fractional part and mappings/sequences are compact JSON.
    """
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return 'true' if value else 'false'
    if value is None:
        return ''
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (dict, list, tuple)):
        return msgspec.json.encode(value).decode('utf-8')
    return str(value)


def encode_pairs(params: Mapping[str, Any]) -> Iterable[Tuple[str, str]]:
    """Yield ``(encoded_key, encoded_value)`` for every parameter."""
    for key, value in params.items():
        yield percent_encode(key), percent_encode(value)


def build_query_string(*encoded_parts: Mapping[str, str]) -> str:
    """Join already-encoded mappings into a query string, preserving order."""
    return '&'.join(
        f"{key}={value}" for part in encoded_parts for key, value in part.items()
    )


def deep_merge(base: Mapping[str, Any], override: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Recursively merge ``override`` onto ``base`` and return a new dict.

    Nested mappings merge key by key, the later value winning on conflict.
    Lists and scalar leaves are replaced wholesale. Neither input is mutated.
    """
    result: Dict[str, Any] = copy.deepcopy(dict(base))
    for key, value in override.items():
        current = result.get(key)
        if isinstance(value, Mapping) and isinstance(current, Mapping):
            result[key] = deep_merge(current, value)
        else:
            result[key] = copy.deepcopy(value)
    return result
