"""URL and query-string helpers."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any
from urllib.parse import quote_plus, urlencode

__all__ = ["concate_url", "has_any_query_param"]


def _quote_form(
    text: str, safe: str = "", encoding: str | None = None, errors: str | None = None
) -> str:
    # form encoding leaves only alphanumerics and "-_." as-is
    return quote_plus(text, safe, encoding, errors).replace("~", "%7E")


def concate_url(url: str, params: Mapping[str, Any] | None = None) -> str:
    """Append form-encoded query parameters to `url`.

    Trailing ``&`` and ``?`` are stripped first; parameters are joined with
    ``&`` when the URL already has a query string and ``?`` otherwise. Keys
    and values are UTF-8 percent-encoded with spaces as ``+`` and ``~`` as
    ``%7E``; None values become empty strings.

    Example:
        >>> concate_url("https://example.com?x=1", {"q": "a b"})
        'https://example.com?x=1&q=a+b'
    """
    if not params:
        return url

    url = url.rstrip("&?")
    url += "&" if "?" in url else "?"
    return url + urlencode(
        {str(key): "" if value is None else str(value) for key, value in params.items()},
        quote_via=_quote_form,
    )


def has_any_query_param(expected_keys: Iterable[str], query: Mapping[str, Any]) -> bool:
    """True if any of `expected_keys` is present in `query` (values are not inspected)."""
    return any(key in query for key in expected_keys)
