"""In-memory response sink.

Records the status code and header list instead of writing to a socket.
Useful for tests and as the buffer a framework integration copies from when
it builds its own response object.

Header semantics
----------------
- ``replace=True`` drops earlier headers with the same name (case-insensitive).
- A non-zero ``code`` sets the status code.
- ``HTTP/<version> <code> ...`` lines set the status code instead of adding
  a header.
- A ``Location`` header sent without an explicit code switches the status
  to ``302`` unless it is already ``201`` or a ``3xx`` code.
"""

from __future__ import annotations

import re

from helperkit.errors import ResponseClosedError
from helperkit.interfaces.http import ResponseSink

__all__ = ["InMemoryResponse"]

STATUS_LINE_PATTERN = re.compile(r"HTTP/\S+\s+(\d{3})\b.*", re.IGNORECASE)


class InMemoryResponse(ResponseSink):
    """Response sink that keeps the status and headers in memory."""

    def __init__(self, status: int = 200) -> None:
        self.status = status
        self.headers: list[tuple[str, str]] = []
        self._closed = False

    def send_header(self, line: str, replace: bool = True, code: int = 0) -> None:
        if self._closed:
            raise ResponseClosedError(line)

        if match := STATUS_LINE_PATTERN.fullmatch(line.strip()):
            self.status = code or int(match.group(1))
            return

        name, _, value = line.partition(":")
        name, value = name.strip(), value.strip()
        if replace:
            self.headers = [h for h in self.headers if h[0].lower() != name.lower()]
        self.headers.append((name, value))

        if code:
            self.status = code
        elif name.lower() == "location" and not (
            self.status == 201 or 300 <= self.status < 400  # pylint: disable=magic-value-comparison
        ):
            self.status = 302

    def close(self) -> None:
        self._closed = True

    @property
    def closed(self) -> bool:
        return self._closed

    # --- Convenience Methods ---

    def get_all(self, name: str) -> list[str]:
        """Return every value sent for header `name` (case-insensitive)."""
        return [v for n, v in self.headers if n.lower() == name.lower()]

    def get(self, name: str) -> str | None:
        """Return the last value sent for header `name`, or None."""
        values = self.get_all(name)
        return values[-1] if values else None
