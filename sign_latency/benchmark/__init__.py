"""Benchmark package initialization."""
from .models import (
    SignRawPayloadRequest, SignRawPayloadParameters, LatencySummary, HttpPhaseTiming, LatencyBreakdown
)
from .constants import BenchmarkConstants
from .exceptions import BenchmarkExecutionError, RequestError, InvalidResponseFormatError
from .request_builder import SigningRequestBuilder, hash_function_for, curve_label_for
from .client_session_manager import ClientSessionManager
from .request_executor import RequestExecutor
from .latency_analyzer import LatencyAnalyzer, pct_of, fmt_ms
from .timing_probe import TimingCollector, TimingProbe
from .report import ConsoleReporter

__all__ = [
    'SignRawPayloadRequest',
    'SignRawPayloadParameters',
    'LatencySummary',
    'HttpPhaseTiming',
    'LatencyBreakdown',
    'BenchmarkConstants',
    'BenchmarkExecutionError',
    'RequestError',
    'InvalidResponseFormatError',
    'SigningRequestBuilder',
    'hash_function_for',
    'curve_label_for',
    'ClientSessionManager',
    'RequestExecutor',
    'LatencyAnalyzer',
    'pct_of',
    'fmt_ms',
    'TimingCollector',
    'TimingProbe',
    'ConsoleReporter',
]
