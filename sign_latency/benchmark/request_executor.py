"""Handles individual signing call execution and timing."""
import logging
import time
from datetime import datetime, timezone
from typing import Callable, List, Optional

from .request_builder import SigningRequestBuilder


# Configure logging
logger = logging.getLogger(__name__)


def _timestamp() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


class RequestExecutor:
    """Times signing calls issued one after another."""

    def __init__(self, client, builder: SigningRequestBuilder):
        """
        Args:
            client: Object with an async sign_raw_payload(request) method.
            builder: Builds a fresh request body for every call.
        """
        self.client = client
        self.builder = builder

    async def timed_call(self) -> tuple:
        """
        Perform one signing call and measure its wall-clock duration.

        Returns:
            Tuple of (latency in milliseconds, ISO timestamp of the call start).

        Raises:
            RequestError: If the call fails.
        """
        started_at = _timestamp()
        request = self.builder.build()
        start_time = time.perf_counter()
        await self.client.sign_raw_payload(request)
        elapsed_ms = (time.perf_counter() - start_time) * 1000
        logger.debug(f"Signing call took {elapsed_ms:.1f}ms")
        return elapsed_ms, started_at

    async def warmup(self) -> tuple:
        """Issue the discarded warmup call."""
        return await self.timed_call()

    async def measure_latencies(self, iterations: int,
                                on_sample: Optional[Callable[[int, float, str], None]] = None) -> List[float]:
        """
        Run the measured calls sequentially.

        Args:
            iterations: Number of measured calls.
            on_sample: Called as on_sample(index, latency_ms, started_at) after each call.

        Returns:
            Latencies in execution order, in milliseconds.
        """
        latencies = []
        for i in range(1, iterations + 1):
            elapsed_ms, started_at = await self.timed_call()
            latencies.append(elapsed_ms)
            if on_sample is not None:
                on_sample(i, elapsed_ms, started_at)
        return latencies
