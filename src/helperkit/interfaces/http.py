"""Interfaces for the HTTP request/response context.

Helpers never read process-wide request state. The incoming request is
described by a `RequestContext` value and the outgoing response by a
`ResponseSink` that accepts raw header lines, so both can be faked in tests.
"""

from __future__ import annotations

import abc
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

# pylint: disable=too-few-public-methods


@dataclass(frozen=True, slots=True)
class RequestContext:
    """The request headers the helpers care about.

    Attributes:
        referer: Value of the ``Referer`` header, if sent.
        host: Value of the ``Host`` header, if sent.
    """

    referer: str | None = None
    host: str | None = None

    @classmethod
    def from_wsgi_environ(cls, environ: Mapping[str, Any]) -> RequestContext:
        """Build a context from a WSGI environ (``HTTP_REFERER``/``HTTP_HOST``)."""
        return cls(referer=environ.get("HTTP_REFERER"), host=environ.get("HTTP_HOST"))


class ResponseSink(abc.ABC):
    """Destination for outgoing response headers."""

    @abc.abstractmethod
    def send_header(self, line: str, replace: bool = True, code: int = 0) -> None:
        """Send a raw header line.

        Args:
            line: ``"Name: value"``, or an ``"HTTP/1.1 404 Not Found"`` status line.
            replace: Replace earlier headers with the same name when True,
                otherwise add another one.
            code: Force the response status code when non-zero.

        Raises:
            ResponseClosedError: If the response was already closed.
        """

    @abc.abstractmethod
    def close(self) -> None:
        """Seal the response; no further headers may be sent."""

    @property
    @abc.abstractmethod
    def closed(self) -> bool:
        """Return True once the response has been closed."""
