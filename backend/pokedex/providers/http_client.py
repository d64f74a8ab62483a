"""Pooled httpx client construction.

Both upstream providers share the same defaults: a bounded timeout, a small
keep-alive pool and the service User-Agent. Centralizing them keeps the
providers consistent and lets tests inject clients built on a mock transport.
"""

import httpx

from ..core.config import Settings, settings as default_settings
from ..core.constants import HttpHeaders, HttpPool


def build_async_client(
    base_url: str,
    settings: Settings | None = None,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Create an `httpx.AsyncClient` for one upstream API.

    Args:
        base_url: Upstream base URL; request paths are appended to it
        settings: Settings providing the timeout and User-Agent (defaults to global settings)
        transport: Optional transport override (e.g., httpx.MockTransport in tests)

    Returns:
        Configured AsyncClient. The caller owns it and must close it.
    """
    settings = settings or default_settings
    return httpx.AsyncClient(
        base_url=base_url,
        timeout=httpx.Timeout(settings.HTTP_TIMEOUT_SECS),
        limits=httpx.Limits(
            max_keepalive_connections=HttpPool.MAX_KEEPALIVE_CONNECTIONS,
            keepalive_expiry=HttpPool.KEEPALIVE_EXPIRY,
        ),
        headers={
            HttpHeaders.USER_AGENT: settings.user_agent,
            HttpHeaders.ACCEPT: "application/json",
        },
        transport=transport,
    )
