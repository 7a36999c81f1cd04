"""Creates HTTP clients with an explicit connection-reuse policy."""
import logging
from typing import Optional

import httpx

from sign_latency.const import CONNECTION_HEADER
from .constants import BenchmarkConstants


# Configure logging
logger = logging.getLogger(__name__)


class ClientSessionManager:
    """Manages HTTP clients for the benchmark and the timing probe.

    Both phases use the same transport type; they differ only in whether
    connections are kept alive and pooled between requests.
    """

    @staticmethod
    def create_transport(reuse_connections: bool = True) -> httpx.AsyncHTTPTransport:
        """Create an async transport without retries."""
        if reuse_connections:
            limits = httpx.Limits()
        else:
            limits = httpx.Limits(max_connections=1, max_keepalive_connections=0)
        return httpx.AsyncHTTPTransport(limits=limits, retries=BenchmarkConstants.DEFAULT_MAX_RETRIES)

    @staticmethod
    def create_client(base_url: str, reuse_connections: bool = True,
                      transport: Optional[httpx.AsyncBaseTransport] = None) -> httpx.AsyncClient:
        """
        Create an async client bound to base_url.

        Args:
            base_url: API base URL.
            reuse_connections: Keep connections alive between requests.
            transport: Transport to use instead of a fresh AsyncHTTPTransport.

        Returns:
            Configured httpx.AsyncClient.
        """
        if transport is None:
            transport = ClientSessionManager.create_transport(reuse_connections)
        headers = {} if reuse_connections else {CONNECTION_HEADER: "close"}
        logger.debug(f"Creating client for {base_url} (reuse_connections={reuse_connections})")
        return httpx.AsyncClient(
            base_url=base_url,
            transport=transport,
            headers=headers,
            timeout=BenchmarkConstants.DEFAULT_TIMEOUT,
        )
