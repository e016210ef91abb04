"""Settings loader with environment variable and Docker secrets integration."""
from __future__ import annotations
import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from iga_client.core.platform.exceptions import ConfigurationError

DEFAULT_REQUEST_TIMEOUT = 10.0


def _read_secret_file(secret_name: str) -> str | None:
    """Return the stripped contents of /run/secrets/{secret_name}, if present."""
    secret_file = Path("/run/secrets") / secret_name
    if secret_file.exists() and secret_file.is_file():
        secret_value = secret_file.read_text().strip()
        if secret_value:
            return secret_value
    return None


def _load_secret_from_file(secret_name: str, env_var: str | None = None) -> str | None:
    """
    Load secret from /run/secrets (Docker secrets pattern).

    Priority:
    1. /run/secrets/{secret_name} (Docker secrets mount)
    2. Environment variable (fallback)

    Args:
        secret_name: Name of the secret file in /run/secrets
        env_var: Optional environment variable name to check as fallback

    Returns:
        Secret value or None if not found
    """
    try:
        secret_value = _read_secret_file(secret_name)
    except OSError as e:
        print(f"[settings] ✗ Failed to read /run/secrets/{secret_name}: {e}")
        secret_value = None
    if secret_value:
        return secret_value

    if env_var:
        secret_value = os.getenv(env_var)
        if secret_value:
            return secret_value

    return None


def _parse_access_token(raw: str | None) -> str | None:
    """Accept either a bare token or a token response JSON object.

    Token endpoints answer with ``{"access_token": "...", ...}``; that document
    is often exported as-is into ACCESS_TOKEN.
    """
    if not raw:
        return None
    raw = raw.strip()
    if raw.startswith("{"):
        try:
            payload = json.loads(raw)
        except ValueError:
            return raw
        if isinstance(payload, dict):
            token = payload.get("access_token")
            return token if isinstance(token, str) and token else None
    return raw


def _env_flag(var_name: str, default: bool) -> bool:
    value = os.environ.get(var_name)
    if value is None or not value.strip():
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


@dataclass
class PlatformConfig:
    """Connection settings for the governance and admin APIs."""
    fqdn: str = ""
    iga_api_url: str = ""
    openidm_url: str = ""

    # Fixed token; when empty the token is resolved on every call
    access_token: str = ""

    request_timeout: float = DEFAULT_REQUEST_TIMEOUT
    verify_tls: bool = True

    def resolve_access_token(self) -> Optional[str]:
        """Get the bearer token at call time.

        Priority:
        1. Configured value in access_token
        2. Docker secrets: /run/secrets/access_token
        3. Environment variable: ACCESS_TOKEN

        ACCESS_TOKEN may hold a bare token or a token response JSON object.

        Returns:
            Token string or None if not available
        """
        if self.access_token:
            return self.access_token
        return _parse_access_token(_load_secret_from_file("access_token", "ACCESS_TOKEN"))


def _base_url(var_name: str, fqdn: str, suffix: str) -> str:
    explicit = os.environ.get(var_name, "").strip()
    if explicit:
        return explicit.rstrip("/")
    if fqdn:
        return f"https://{fqdn}{suffix}"
    raise ConfigurationError(f"{var_name} is not set and FQDN is missing; cannot derive base URL.")


def read_settings() -> PlatformConfig:
    """Build PlatformConfig from the environment without reporting anything.

    Used by the per-call client factories. The access token is not read
    here; see PlatformConfig.resolve_access_token.

    Raises:
        ConfigurationError: If a base URL cannot be derived
        ValueError: If IGA_REQUEST_TIMEOUT is not a number
    """
    fqdn = os.environ.get("FQDN", "").strip()

    iga_api_url = _base_url("IGA_API_URL", fqdn, "/iga")
    openidm_url = _base_url("OPENIDM_URL", fqdn, "/openidm")

    timeout_str = os.environ.get("IGA_REQUEST_TIMEOUT", "").strip()
    try:
        request_timeout = float(timeout_str) if timeout_str else DEFAULT_REQUEST_TIMEOUT
    except ValueError:
        raise ValueError(f"IGA_REQUEST_TIMEOUT must be a number of seconds, got {timeout_str!r}") from None

    return PlatformConfig(
        fqdn=fqdn,
        iga_api_url=iga_api_url,
        openidm_url=openidm_url,
        request_timeout=request_timeout,
        verify_tls=_env_flag("IGA_VERIFY_TLS", True),
    )


def load_settings() -> PlatformConfig:
    """Load platform settings and report where requests will go.

    Intended to be called once at startup; client factories use
    read_settings() instead.

    Raises:
        ConfigurationError: If a base URL cannot be derived
        ValueError: If IGA_REQUEST_TIMEOUT is not a number
    """
    config = read_settings()

    if not config.verify_tls:
        print("[settings] WARNING: TLS certificate verification disabled (IGA_VERIFY_TLS=false)")
    print(f"[settings] iga_api_url={config.iga_api_url}; openidm_url={config.openidm_url}")

    return config
