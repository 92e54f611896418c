"""Error definitions shared by the helper modules."""

# ============================================================================
#                           General errors
# ============================================================================


class HelperKitError(Exception):
    """Base class for helperkit errors."""


class InvalidArgumentError(HelperKitError, ValueError):
    """Raised when a caller passes an argument that violates a helper's contract."""


# ============================================================================
#                           HTTP response errors
# ============================================================================


class ResponseClosedError(HelperKitError):
    """Raised when a header is sent to a response that was already closed."""

    def __init__(self, line: str) -> None:
        super().__init__(f"Cannot send header {line!r}: response already closed.")
        self.line = line


class RedirectIssued(HelperKitError):
    """Raised by `redirect_url` to stop request handling after a redirect.

    Frameworks catch it at the request boundary and return the response
    that already holds the `Location` header.
    """

    def __init__(self, url: str, code: int) -> None:
        super().__init__(f"Redirected to '{url}' with status {code}.")
        self.url = url
        self.code = code
