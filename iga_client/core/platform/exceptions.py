"""Platform-specific exceptions for error handling."""
from __future__ import annotations


class PlatformError(Exception):
    """Base exception for all platform API operations."""
    pass


class PlatformAPIError(PlatformError):
    """Non-success response from the governance or admin API.

    Attributes:
        status_code: HTTP status code
        method: HTTP verb of the failed request
        url: Full request URL, query string included
        body: Raw response text (backend error document, usually JSON)
    """

    def __init__(self, status_code: int, method: str, url: str, body: str = ""):
        self.status_code = status_code
        self.method = method
        self.url = url
        self.body = body
        super().__init__(f"{method} {url} failed with HTTP {status_code}: {body}")

    @classmethod
    def from_response(cls, resp, method: str) -> "PlatformAPIError":
        return cls(resp.status_code, method, resp.url, resp.text)

    @property
    def not_found(self) -> bool:
        return self.status_code == 404


class MissingAccessTokenError(PlatformError):
    """No bearer token was supplied and none could be resolved."""
    pass


class ConfigurationError(PlatformError):
    """Base URL cannot be derived from configuration."""
    pass
