"""Exception hierarchy for the Funda listings client."""

from typing import Optional


class FundaError(Exception):
    """Base exception for client errors."""
    pass


class MalformedResult(FundaError):
    """Raised when a search entry lacks the photo or info structure."""
    pass


class InvalidURL(FundaError, ValueError):
    """Raised when a URL-shaped string is not an absolute URI."""

    def __init__(self, url: str, reason: str = "not an absolute URI"):
        self.url = url
        super().__init__(f"invalid URL {url!r}: {reason}")


class DecodeError(FundaError):
    """Raised when a payload or element does not match the expected shape."""
    pass


class DetailTreeTooDeep(DecodeError):
    """Raised when a detail tree nests deeper than the traversal allows."""
    pass


class TransportError(FundaError):
    """Raised when an API request fails or returns a non-200 status."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        self.status_code = status_code
        super().__init__(message)
