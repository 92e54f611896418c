"""Request and response helpers: referer check, redirects and headers."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import NoReturn
from urllib.parse import urlsplit

from helperkit.errors import RedirectIssued
from helperkit.interfaces.http import RequestContext, ResponseSink

__all__ = ["check_referer", "redirect_url", "set_header"]

logger = logging.getLogger(__name__)

HeaderValue = str | Sequence[object]


def _referer_host(referer: str) -> str:
    """Return ``host[:port]`` from a referer URL, without credentials."""
    authority = urlsplit(referer).netloc.rpartition("@")[2]
    if ":" in authority and not authority.endswith("]"):
        name, _, port = authority.rpartition(":")
        authority = f"{name}:{port}" if port else name
    return authority


def check_referer(request: RequestContext) -> bool:
    """True if the referer's host (with port, if any) equals the Host header.

    Useful as a light same-origin check for form posts. The comparison is
    exact, so ``Example.com`` and ``example.com`` differ.
    """
    if not request.referer or not request.host:
        return False
    host = _referer_host(request.referer)
    return bool(host) and host == request.host


def redirect_url(response: ResponseSink, url: str, code: int = 303) -> NoReturn:
    """Send a redirect and stop request processing.

    Sends ``Location: <url>`` with `code`, closes `response` and raises
    `RedirectIssued`, which the request boundary is expected to catch.

    Common codes: 301/308 permanent, 302/307 temporary, 303 (default) after a
    POST.

    Raises:
        RedirectIssued: Always.
    """
    response.send_header(f"Location: {url}", True, code)
    response.close()
    logger.debug("Redirect %s -> %s", code, url)
    raise RedirectIssued(url, code)


def set_header(
    response: ResponseSink,
    headers: str | Mapping[str, HeaderValue],
    replace: bool = False,
    code: int = 0,
) -> None:
    """Send one header line or a mapping of headers.

    Args:
        response: Destination response.
        headers: A raw ``"Name: value"`` line, or a mapping of header name to
            either a value or a ``(value, replace, code)`` sequence. Missing or
            None entries in the sequence fall back to `replace` and `code`.
        replace: Default replace flag.
        code: Default status code (0 leaves the status alone).
    """
    if isinstance(headers, str):
        response.send_header(headers, replace, code)
        return

    for name, value in headers.items():
        if isinstance(value, Sequence) and not isinstance(value, str):
            extra = list(value) + [None, None]
            header_value, header_replace, header_code = extra[0], extra[1], extra[2]
            response.send_header(
                f"{name}: {header_value}",
                replace if header_replace is None else bool(header_replace),
                code if header_code is None else int(header_code),
            )
            continue
        response.send_header(f"{name}: {value}", replace, code)
