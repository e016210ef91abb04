"""UI locale override operations (platform admin API)."""
from __future__ import annotations
from typing import Any, Optional

import requests

from . import descriptors
from .client import PlatformClient, create_admin_client


class LocaleOverrideService:
    """Service for managing translation overrides stored as `config/uilocale/{locale}`."""

    def __init__(self, client: PlatformClient):
        """Initialize locale override service.

        Args:
            client: Client bound to the admin API base URL (…/openidm)
        """
        self.client = client

    def add_overrides(self, locale: str, body: Any, access_token: Optional[str] = None) -> requests.Response:
        """Create or replace the translation overrides of a locale.

        Args:
            locale: Locale code (e.g. "en", "fr")
            body: Override document, sent unmodified as JSON
            access_token: Bearer token overriding the client default

        Returns:
            Response of the PUT call
        """
        return self.client.send(descriptors.add_overrides(locale, body), access_token)

    def delete_overrides(
        self,
        locale: str,
        fail_on_status_code: bool = True,
        access_token: Optional[str] = None,
    ) -> requests.Response:
        """Delete the translation overrides of a locale.

        Args:
            locale: Locale code
            fail_on_status_code: When False, a non-success status (typically
                404 for a locale without overrides) is returned instead of raised
            access_token: Bearer token overriding the client default

        Returns:
            Response of the DELETE call
        """
        return self.client.send(
            descriptors.delete_overrides(locale),
            access_token,
            fail_on_status_code=fail_on_status_code,
        )


# ─────────────────────────────────────────────────────────────────────────────
# Standalone functions
# ─────────────────────────────────────────────────────────────────────────────
def add_overrides(locale: str, body: Any, access_token: Optional[str] = None) -> requests.Response:
    """Create or replace the translation overrides of a locale."""
    service = LocaleOverrideService(create_admin_client())
    return service.add_overrides(locale, body, access_token)


def delete_overrides(
    locale: str,
    fail_on_status_code: bool = True,
    access_token: Optional[str] = None,
) -> requests.Response:
    """Delete the translation overrides of a locale."""
    service = LocaleOverrideService(create_admin_client())
    return service.delete_overrides(locale, fail_on_status_code, access_token)
