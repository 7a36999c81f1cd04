"""Phase-level timing of a single request over a fresh connection.

httpcore reports connection lifecycle events through the request's
"trace" extension. TCP connect and TLS handshake completion are recorded
from those events. httpcore resolves the host inside connect_tcp and
emits no separate resolution event, so the DNS mark stays unset and name
resolution is counted as part of the TCP mark.
"""
import logging
import time
from typing import Any, Dict, Optional

import httpx

from sign_latency.const import SIGN_RAW_PAYLOAD_PATH, CONTENT_TYPE_HEADER, CONTENT_TYPE_JSON
from sign_latency.shared.stamper import RequestStamper
from .client_session_manager import ClientSessionManager
from .constants import BenchmarkConstants
from .exceptions import RequestError
from .models import HttpPhaseTiming
from .request_builder import SigningRequestBuilder


# Configure logging
logger = logging.getLogger(__name__)


class TimingCollector:
    """Records lifecycle marks relative to a single start instant.

    Each mark is set at most once; later calls for the same mark are ignored.
    """

    def __init__(self, clock=time.perf_counter):
        self._clock = clock
        self._start = clock()
        self.timing = HttpPhaseTiming()

    def _elapsed_ms(self) -> float:
        return (self._clock() - self._start) * 1000

    def _mark(self, field: str) -> None:
        if getattr(self.timing, field) is None:
            setattr(self.timing, field, self._elapsed_ms())

    def mark_dns(self) -> None:
        self._mark("dns")

    def mark_connected(self) -> None:
        self._mark("tcp")

    def mark_secure(self) -> None:
        self._mark("tls")

    def mark_first_byte(self, status: int) -> None:
        self._mark("ttfb")
        if self.timing.status is None:
            self.timing.status = status

    def mark_complete(self) -> None:
        self._mark("total")

    async def trace(self, event_name: str, info: Dict[str, Any]) -> None:
        """httpcore trace callback."""
        if event_name == BenchmarkConstants.TRACE_TCP_CONNECTED:
            self.mark_connected()
        elif event_name == BenchmarkConstants.TRACE_TLS_READY:
            self.mark_secure()


class TimingProbe:
    """Issues one signing request on a non-reused connection and times each phase."""

    def __init__(self, base_url: str, builder: SigningRequestBuilder, stamper: RequestStamper,
                 transport: Optional[httpx.AsyncBaseTransport] = None):
        self.base_url = base_url
        self.builder = builder
        self.stamper = stamper
        self.transport = transport

    async def run(self) -> HttpPhaseTiming:
        """
        Time one request from start to the last response byte.

        Returns:
            HttpPhaseTiming with every mark that fired.

        Raises:
            RequestError: If the connection fails before the response completes.
        """
        body = self.builder.build().to_json()
        stamp = self.stamper.stamp(body)
        headers = {
            CONTENT_TYPE_HEADER: CONTENT_TYPE_JSON,
            stamp.header_name: stamp.header_value,
        }

        client = ClientSessionManager.create_client(
            self.base_url, reuse_connections=False, transport=self.transport
        )
        async with client:
            collector = TimingCollector()
            try:
                async with client.stream(
                    "POST",
                    SIGN_RAW_PAYLOAD_PATH,
                    content=body,
                    headers=headers,
                    extensions={"trace": collector.trace},
                ) as response:
                    collector.mark_first_byte(response.status_code)
                    await response.aread()
                    collector.mark_complete()
            except httpx.HTTPError as e:
                logger.error(f"Timing probe request failed: {e}")
                raise RequestError(f"Timing probe request to {self.base_url} failed: {e}") from e

        logger.debug(f"Timing probe result: {collector.timing}")
        return collector.timing
