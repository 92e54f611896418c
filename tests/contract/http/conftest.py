"""Pytest fixtures for ResponseSink contract tests.

Provided fixtures
-----------------
- **sink**: Parametrized factory returning a **fresh** `ResponseSink` per
  test. Currently supports `"memory"` (`InMemoryResponse`). To exercise other
  adapters, add their keys to `params` and branch in the fixture body.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from helperkit.adapters.http.memory import InMemoryResponse

if TYPE_CHECKING:
    from helperkit.interfaces.http import ResponseSink


@pytest.fixture(params=["memory"])
def sink(request: pytest.FixtureRequest) -> ResponseSink:
    """Return a fresh response sink for the requested adapter."""

    match request.param:
        case "memory":
            return InMemoryResponse()
        case _:
            raise ValueError(f"unknown sink type: {request.param}")
