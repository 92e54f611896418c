"""Contract tests for ResponseSink adapters.

Each adapter must honour:
- `replace` drops earlier headers with the same name (case-insensitive).
- A non-zero `code` sets the status.
- Status lines set the status without adding a header.
- A bare `Location` header promotes the status to 302 unless it is 201/3xx.
- Sending after `close()` raises `ResponseClosedError`.

Observations go through the adapters' inspection helpers (`status`, `get_all`).
"""

import pytest

from helperkit.errors import ResponseClosedError

# pylint: disable=magic-value-comparison


def test_starts_open_with_status_200(sink):
    """A fresh sink is open, empty and reports 200."""
    assert not sink.closed
    assert sink.status == 200
    assert sink.get_all("X-Anything") == []


def test_replace_is_case_insensitive(sink):
    """Replacing matches header names without regard to case."""
    sink.send_header("X-Token: a", False)
    sink.send_header("x-token: b", False)
    sink.send_header("X-TOKEN: c", True)
    assert sink.get_all("x-token") == ["c"]


def test_append_keeps_earlier_values(sink):
    """Without replace, repeated headers accumulate in order."""
    sink.send_header("Set-Cookie: a=1", False)
    sink.send_header("Set-Cookie: b=2", False)
    assert sink.get_all("Set-Cookie") == ["a=1", "b=2"]


def test_code_sets_status(sink):
    """A non-zero code becomes the response status."""
    sink.send_header("X-Reason: teapot", True, 418)
    assert sink.status == 418


def test_status_line(sink):
    """Status lines change the status and add no header."""
    sink.send_header("HTTP/1.1 404 Not Found")
    assert sink.status == 404
    assert sink.get_all("HTTP/1.1 404 Not Found") == []


@pytest.mark.parametrize("status, expected", [(200, 302), (201, 201), (301, 301)])
def test_location_promotes_to_302(sink, status, expected):
    """Location without an explicit code redirects unless already 201/3xx."""
    sink.send_header(f"HTTP/1.1 {status} X")
    sink.send_header("Location: /elsewhere")
    assert sink.status == expected


def test_closed_sink_rejects_headers(sink):
    """Closing seals the sink."""
    sink.close()
    assert sink.closed
    with pytest.raises(ResponseClosedError, match="already closed"):
        sink.send_header("X-Late: 1")
