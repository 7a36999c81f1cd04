"""Benchmark runner to orchestrate the execution of a latency run."""
import logging
from typing import Optional

import httpx

from sign_latency.shared.config import Config
from sign_latency.shared.signing_client import SigningClient
from sign_latency.shared.stamper import ApiKeyStamper, RequestStamper
from .client_session_manager import ClientSessionManager
from .latency_analyzer import LatencyAnalyzer
from .models import LatencySummary, HttpPhaseTiming
from .report import ConsoleReporter
from .request_builder import SigningRequestBuilder
from .request_executor import RequestExecutor
from .timing_probe import TimingProbe


logger = logging.getLogger(__name__)


class BenchmarkRunner:
    """Runs the repeated-call benchmark followed by the fresh-connection probe."""

    def __init__(self, config: Config, stamper: Optional[RequestStamper] = None,
                 transport: Optional[httpx.AsyncBaseTransport] = None,
                 probe_transport: Optional[httpx.AsyncBaseTransport] = None):
        self.config = config
        self.stamper = stamper or ApiKeyStamper(config.api_public_key, config.api_private_key)
        self.transport = transport
        self.probe_transport = probe_transport
        self.builder = SigningRequestBuilder(config.organization_id, config.sign_with, config.payload)
        self.reporter = ConsoleReporter()
        self.latency_analyzer = LatencyAnalyzer()

    async def run(self) -> None:
        """Run the complete latency measurement."""
        self.reporter.print_header(self.config)
        await self.run_benchmark()
        await self.run_probe()

    async def run_benchmark(self) -> LatencySummary:
        """Warm up, then time config.iterations signing calls on a pooled connection."""
        http_client = ClientSessionManager.create_client(
            self.config.base_url, reuse_connections=True, transport=self.transport
        )
        async with SigningClient(http_client, self.stamper) as client:
            executor = RequestExecutor(client, self.builder)

            logger.info("Running warmup call...")
            elapsed_ms, started_at = await executor.warmup()
            self.reporter.print_warmup(elapsed_ms, started_at)

            self.reporter.print_benchmark_start(self.config.iterations)
            latencies = await executor.measure_latencies(
                self.config.iterations, on_sample=self.reporter.print_sample
            )

        summary = self.latency_analyzer.compute_summary(latencies)
        self.reporter.print_summary(summary)
        return summary

    async def run_probe(self) -> HttpPhaseTiming:
        """Time a single request over a fresh connection."""
        self.reporter.print_probe_start()
        probe = TimingProbe(self.config.base_url, self.builder, self.stamper, transport=self.probe_transport)
        timing = await probe.run()
        self.reporter.print_timing(timing)
        return timing
