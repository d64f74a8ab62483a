"""Base Upstream Provider.

This module defines the shared plumbing of the upstream API providers:
sending one request through a pooled httpx client, mapping transport
failures to the service error taxonomy, and recording metrics for every call.

Providers make exactly one attempt per call. There are no retries.
"""

import time
from abc import ABC, abstractmethod
from typing import Any

import httpx

from ..core.constants import ErrorMessages, UpstreamOutcome
from ..core.exceptions import ExternalApiError, PokedexError
from ..core.logging import get_logger
from ..core.metrics import upstream_request_duration_seconds, upstream_requests_total

logger = get_logger(__name__)


class UpstreamProvider(ABC):
    """Abstract base class for upstream API providers.

    Subclasses decide how transport errors are worded and how responses are
    interpreted; this class owns the request lifecycle.
    """

    def __init__(self, provider_name: str, client: httpx.AsyncClient):
        """Initialize the provider.

        Args:
            provider_name: Label used in logs and metrics (e.g., "pokeapi")
            client: Pooled httpx client whose base_url points at the upstream
        """
        self.provider_name = provider_name
        self.client = client

    @abstractmethod
    def _transport_error(self, error: httpx.HTTPError) -> PokedexError:
        """Translate an httpx transport error into a service error."""

    @abstractmethod
    async def health_check(self) -> None:
        """Verify the upstream is reachable."""

    async def _request(
        self,
        method: str,
        path: str,
        json: Any | None = None
    ) -> httpx.Response:
        """Send one request to the upstream.

        Args:
            method: HTTP method
            path: Path relative to the client's base_url
            json: Optional JSON body

        Returns:
            The upstream response, whatever its status code

        Raises:
            UpstreamTimeoutError: If the call exceeded the client timeout
            ExternalApiError: If the upstream could not be reached
        """
        logger.debug(
            "Calling upstream API",
            extra={
                'upstream': self.provider_name,
                'method': method,
                'url': f"{self.client.base_url}{path.lstrip('/')}"
            }
        )

        start_time = time.perf_counter()
        try:
            return await self.client.request(method, path, json=json)
        except httpx.HTTPError as e:
            self._record_outcome(self._outcome_for(e))
            raise self._transport_error(e) from e
        finally:
            upstream_request_duration_seconds.labels(
                upstream=self.provider_name
            ).observe(time.perf_counter() - start_time)

    async def _probe(self, method: str, path: str, json: Any | None = None) -> None:
        """Check reachability: any HTTP answer counts, transport failure does not.

        Raises:
            ExternalApiError: If the upstream could not be reached
        """
        try:
            await self.client.request(method, path, json=json)
        except httpx.HTTPError as e:
            logger.warning(
                "Upstream health check failed",
                extra={'upstream': self.provider_name, 'error': str(e)}
            )
            raise ExternalApiError(
                ErrorMessages.HEALTH_CHECK_FAILED.format(error=e)
            ) from e

    def _record_outcome(self, outcome: str) -> None:
        upstream_requests_total.labels(
            upstream=self.provider_name,
            outcome=outcome
        ).inc()

    @staticmethod
    def _outcome_for(error: httpx.HTTPError) -> str:
        if isinstance(error, httpx.TimeoutException):
            return UpstreamOutcome.TIMEOUT
        if isinstance(error, httpx.ConnectError):
            return UpstreamOutcome.CONNECTION_ERROR
        return UpstreamOutcome.TRANSPORT_ERROR

    async def aclose(self) -> None:
        """Close the underlying connection pool."""
        await self.client.aclose()

