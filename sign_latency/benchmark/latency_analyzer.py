"""Analyzes and computes latency statistics."""
import logging
import math
from typing import List, Optional

import numpy as np

from sign_latency.const import MISSING_VALUE

from .models import LatencySummary, HttpPhaseTiming, LatencyBreakdown
from .exceptions import BenchmarkExecutionError


# Configure logging
logger = logging.getLogger(__name__)


class LatencyAnalyzer:
    """Analyzes and computes latency statistics."""

    @staticmethod
    def percentile(sorted_samples: List[float], p: float) -> float:
        """
        Nearest-rank percentile of an ascending sequence.

        Args:
            sorted_samples: Latencies sorted ascending.
            p: Percentile in (0, 100].

        Returns:
            The element at index ceil(p/100 * len) - 1, clamped to 0.
        """
        idx = math.ceil((p / 100) * len(sorted_samples)) - 1
        return sorted_samples[max(0, idx)]

    @staticmethod
    def compute_summary(latencies: List[float]) -> LatencySummary:
        """
        Compute min, max, mean, p50 and p95.

        Sorts latencies in place.

        Args:
            latencies: List of latency measurements in milliseconds.

        Returns:
            LatencySummary dataclass.

        Raises:
            BenchmarkExecutionError: If there are no measurements.
        """
        if not latencies:
            raise BenchmarkExecutionError("No latency samples to summarize")

        latencies.sort()
        return LatencySummary(
            count=len(latencies),
            min=latencies[0],
            max=latencies[-1],
            mean=float(np.mean(latencies)),
            p50=LatencyAnalyzer.percentile(latencies, 50),
            p95=LatencyAnalyzer.percentile(latencies, 95),
        )

    @staticmethod
    def derive_breakdown(timing: HttpPhaseTiming) -> LatencyBreakdown:
        """Turn cumulative lifecycle marks into per-phase durations. Absent marks count as 0."""
        dns_time = timing.dns or 0.0
        tcp = timing.tcp or 0.0
        tls = timing.tls or 0.0
        ttfb = timing.ttfb or 0.0

        tcp_handshake = tcp - dns_time
        return LatencyBreakdown(
            dns_time=dns_time,
            tcp_handshake=tcp_handshake,
            tls_handshake=tls - tcp,
            network_overhead=tls,
            server_processing=ttfb - tls,
            # One TCP handshake is roughly one round trip
            rtt=tcp_handshake,
            ttfb=ttfb,
        )


def pct_of(part: float, total: float) -> str:
    """Share of total as a rounded percentage string, or a placeholder when total is 0."""
    if total == 0:
        return MISSING_VALUE
    return f"{math.floor(part / total * 100 + 0.5)}%"


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero."""
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def fmt_ms(ms: Optional[float]) -> str:
    """Format milliseconds without decimals, or a placeholder when unknown."""
    return f"{round_half_up(ms)}ms" if ms is not None else MISSING_VALUE
