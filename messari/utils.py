"""
Helpers shared by the client: parameter filtering and URL construction.
"""

from __future__ import annotations

from typing import Any, Iterable, Mapping
from urllib.parse import quote

# Characters left unescaped by JavaScript's encodeURIComponent
_URI_COMPONENT_SAFE = "-_.!~*'()"


def pick(source: Mapping[str, Any] | None, keys: Iterable[str]) -> dict[str, Any]:
    """Return a new dict holding only ``keys`` that are set in ``source``.

    Keys missing from ``source`` or mapped to ``None`` are left out. The
    source mapping is never modified.

    Example:
        >>> pick({"a": 1, "b": None, "c": 3}, ["a", "b", "d"])
        {'a': 1}
    """
    if not source:
        return {}
    return {key: source[key] for key in keys if source.get(key) is not None}


def _stringify(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def encode_component(value: Any) -> str:
    """Percent-encode a single key or value like ``encodeURIComponent``."""
    return quote(_stringify(value), safe=_URI_COMPONENT_SAFE)


def encode_query(query_params: Mapping[str, Any] | None) -> str:
    """Build a query string from a parameter mapping.

    Sequence values are sent as repeated keys (``key=a&key=b``) in order.
    ``None`` values are skipped.
    """
    if not query_params:
        return ""

    pairs: list[str] = []
    for key, value in query_params.items():
        if value is None:
            continue
        encoded_key = encode_component(key)
        if isinstance(value, (list, tuple)):
            pairs.extend(
                f"{encoded_key}={encode_component(item)}"
                for item in value
                if item is not None
            )
        else:
            pairs.append(f"{encoded_key}={encode_component(value)}")
    return "&".join(pairs)


def build_url(
    base_url: str,
    path: str,
    query_params: Mapping[str, Any] | None = None,
) -> str:
    """Join base URL, path and the encoded query string."""
    query_string = encode_query(query_params)
    url = f"{base_url}{path}"
    return f"{url}?{query_string}" if query_string else url
