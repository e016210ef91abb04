"""Low-level HTTP client for the governance and admin APIs.

Handles bearer token injection, timeouts and status handling.
"""
from __future__ import annotations
import logging
from typing import Any, Callable, Dict, Optional

import requests

from .descriptors import RequestDescriptor
from .exceptions import PlatformAPIError, MissingAccessTokenError

REQUEST_TIMEOUT = 10

logger = logging.getLogger(__name__)

TokenProvider = Callable[[], Optional[str]]


class PlatformClient:
    """HTTP client bound to one API base URL.

    The bearer token is resolved on every request: an explicit `access_token`
    argument wins, otherwise the client's token provider is asked. Nothing is
    cached between calls.

    Usage:
        client = PlatformClient("https://tenant.example.com/iga", token="abc")
        response = client.get("/governance/requestFormAssignments",
                              params={"_queryFilter": 'formId eq "f1"'})
    """

    def __init__(
        self,
        base_url: str,
        token: Optional[str] = None,
        token_provider: Optional[TokenProvider] = None,
        timeout: float = REQUEST_TIMEOUT,
        verify: bool = True,
    ):
        """Initialize platform client.

        Args:
            base_url: API base URL, e.g. https://tenant.example.com/openidm
            token: Fixed bearer token
            token_provider: Callable returning the current token, used when
                no fixed token is set
            timeout: Per-request timeout in seconds
            verify: Verify TLS certificates
        """
        self.base_url = base_url.rstrip("/")
        self._token = token
        self._token_provider = token_provider
        self.timeout = timeout
        self.verify = verify

    def _resolve_token(self, access_token: Optional[str] = None) -> str:
        """Return the bearer token for one request.

        Raises:
            MissingAccessTokenError: If no token is available
        """
        token = access_token or self._token
        if not token and self._token_provider is not None:
            token = self._token_provider()
        if not token:
            raise MissingAccessTokenError(
                "No access token available - pass access_token or configure ACCESS_TOKEN"
            )
        return token

    def _headers(self, access_token: Optional[str], extra: Optional[Dict[str, str]]) -> Dict[str, str]:
        headers = dict(extra or {})
        headers["authorization"] = f"Bearer {self._resolve_token(access_token)}"
        return headers

    def get(
        self,
        path: str,
        params: Optional[Dict] = None,
        access_token: Optional[str] = None,
        fail_on_status_code: bool = True,
        **kwargs,
    ) -> requests.Response:
        """Execute GET request.

        Args:
            path: API endpoint path (e.g., "/governance/requestFormAssignments")
            params: Query parameters
            access_token: Bearer token overriding the client default
            fail_on_status_code: Raise on status >= 400
            **kwargs: Additional arguments for requests.get

        Returns:
            Response object

        Raises:
            PlatformAPIError: On HTTP error
        """
        url = f"{self.base_url}{path}"
        headers = self._headers(access_token, kwargs.pop("headers", None))
        logger.debug("GET %s params=%s", url, params)

        resp = requests.get(
            url, params=params, headers=headers, timeout=self.timeout, verify=self.verify, **kwargs
        )
        self._handle_error(resp, "GET", fail_on_status_code)
        return resp

    def post(
        self,
        path: str,
        json: Optional[Any] = None,
        params: Optional[Dict] = None,
        access_token: Optional[str] = None,
        fail_on_status_code: bool = True,
        **kwargs,
    ) -> requests.Response:
        """Execute POST request with a JSON payload.

        Raises:
            PlatformAPIError: On HTTP error
        """
        url = f"{self.base_url}{path}"
        headers = self._headers(access_token, kwargs.pop("headers", None))
        logger.debug("POST %s params=%s", url, params)

        resp = requests.post(
            url, json=json, params=params, headers=headers, timeout=self.timeout, verify=self.verify, **kwargs
        )
        self._handle_error(resp, "POST", fail_on_status_code)
        return resp

    def put(
        self,
        path: str,
        json: Optional[Any] = None,
        access_token: Optional[str] = None,
        fail_on_status_code: bool = True,
        **kwargs,
    ) -> requests.Response:
        """Execute PUT request with a JSON payload.

        Raises:
            PlatformAPIError: On HTTP error
        """
        url = f"{self.base_url}{path}"
        headers = self._headers(access_token, kwargs.pop("headers", None))
        logger.debug("PUT %s", url)

        resp = requests.put(
            url, json=json, headers=headers, timeout=self.timeout, verify=self.verify, **kwargs
        )
        self._handle_error(resp, "PUT", fail_on_status_code)
        return resp

    def delete(
        self,
        path: str,
        access_token: Optional[str] = None,
        fail_on_status_code: bool = True,
        **kwargs,
    ) -> requests.Response:
        """Execute DELETE request.

        Raises:
            PlatformAPIError: On HTTP error
        """
        url = f"{self.base_url}{path}"
        headers = self._headers(access_token, kwargs.pop("headers", None))
        logger.debug("DELETE %s", url)

        resp = requests.delete(
            url, headers=headers, timeout=self.timeout, verify=self.verify, **kwargs
        )
        self._handle_error(resp, "DELETE", fail_on_status_code)
        return resp

    def send(
        self,
        descriptor: RequestDescriptor,
        access_token: Optional[str] = None,
        fail_on_status_code: bool = True,
    ) -> requests.Response:
        """Issue the request described by `descriptor`.

        Args:
            descriptor: Request to send
            access_token: Bearer token overriding the client default
            fail_on_status_code: Raise on status >= 400

        Returns:
            Response object, unmodified
        """
        method = descriptor.method.upper()
        params = descriptor.params or None
        headers = dict(descriptor.headers)

        if method == "GET":
            return self.get(descriptor.path, params=params, access_token=access_token,
                            fail_on_status_code=fail_on_status_code, headers=headers)
        if method == "POST":
            return self.post(descriptor.path, json=descriptor.body, params=params, access_token=access_token,
                             fail_on_status_code=fail_on_status_code, headers=headers)
        if method == "PUT":
            return self.put(descriptor.path, json=descriptor.body, access_token=access_token,
                            fail_on_status_code=fail_on_status_code, headers=headers)
        if method == "DELETE":
            return self.delete(descriptor.path, access_token=access_token,
                               fail_on_status_code=fail_on_status_code, headers=headers)
        raise ValueError(f"Unsupported HTTP method: {descriptor.method}")

    def _handle_error(self, resp: requests.Response, method: str, fail_on_status_code: bool = True) -> None:
        """Centralized error handling for HTTP responses.

        Args:
            resp: Response object to check
            method: HTTP verb, reported in the raised error
            fail_on_status_code: When False, non-success statuses are returned
                to the caller instead of raised

        Raises:
            PlatformAPIError: If response status indicates error
        """
        if resp.status_code < 400:
            return
        if not fail_on_status_code:
            logger.warning("Tolerating HTTP %s from %s %s", resp.status_code, method, resp.url)
            return
        raise PlatformAPIError.from_response(resp, method)


# ─────────────────────────────────────────────────────────────────────────────
# Client factories
# ─────────────────────────────────────────────────────────────────────────────
def create_client_with_token(
    base_url: str,
    token: str,
    timeout: float = REQUEST_TIMEOUT,
    verify: bool = True,
) -> PlatformClient:
    """Create a client bound to a pre-obtained token."""
    return PlatformClient(base_url, token=token, timeout=timeout, verify=verify)


def create_governance_client(settings=None) -> PlatformClient:
    """Create a client for the governance API from settings.

    The token is looked up through `settings.resolve_access_token` on every
    request, so a token rotated after this call is still picked up.

    Args:
        settings: PlatformConfig (defaults to read_settings())
    """
    if settings is None:
        from iga_client.config.settings import read_settings
        settings = read_settings()
    return PlatformClient(
        settings.iga_api_url,
        token_provider=settings.resolve_access_token,
        timeout=settings.request_timeout,
        verify=settings.verify_tls,
    )


def create_admin_client(settings=None) -> PlatformClient:
    """Create a client for the platform admin API (openidm) from settings.

    Args:
        settings: PlatformConfig (defaults to read_settings())
    """
    if settings is None:
        from iga_client.config.settings import read_settings
        settings = read_settings()
    return PlatformClient(
        settings.openidm_url,
        token_provider=settings.resolve_access_token,
        timeout=settings.request_timeout,
        verify=settings.verify_tls,
    )
