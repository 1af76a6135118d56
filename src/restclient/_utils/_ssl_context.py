import os
import ssl
from typing import Any, Optional

import certifi


def _env_path(name: str) -> Optional[str]:
    value = os.environ.get(name)
    if not value:
        return None
    return os.path.expanduser(os.path.expandvars(value))


def create_ssl_context() -> ssl.SSLContext:
    """TLS context trusting ``SSL_CERT_FILE``/``REQUESTS_CA_BUNDLE`` or certifi's bundle."""
    cafile = _env_path("SSL_CERT_FILE") or _env_path("REQUESTS_CA_BUNDLE")

    return ssl.create_default_context(
        cafile=cafile or certifi.where(),
        capath=_env_path("SSL_CERT_DIR"),
    )


def get_httpx_client_kwargs(timeout: float) -> dict[str, Any]:
    """Keyword arguments shared by the sync and async httpx clients.

    Redirects are not followed by the transport: a ``Location`` header is
    handled by the client itself.
    """
    return {
        "verify": create_ssl_context(),
        "timeout": timeout,
        "follow_redirects": False,
    }
