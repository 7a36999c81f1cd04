"""Constants for the benchmarking system."""


class BenchmarkConstants:
    """Centralized constants for benchmark configuration."""
    # No client-side timeout: a hung request blocks the run
    DEFAULT_TIMEOUT = None
    # Each measured call is exactly one network round trip
    DEFAULT_MAX_RETRIES = 0
    TRACE_TCP_CONNECTED = "connection.connect_tcp.complete"
    TRACE_TLS_READY = "connection.start_tls.complete"
