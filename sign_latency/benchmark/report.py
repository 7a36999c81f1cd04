"""Console report for a latency run."""
from sign_latency.const import RULE_WIDTH
from sign_latency.shared.config import Config
from .latency_analyzer import LatencyAnalyzer, pct_of, fmt_ms
from .models import LatencySummary, HttpPhaseTiming
from .request_builder import curve_label_for


class ConsoleReporter:
    """Prints the run as it progresses."""

    @staticmethod
    def _rule() -> None:
        print(f"\n{'─' * RULE_WIDTH}")

    def print_header(self, config: Config) -> None:
        print("Signature Latency Test")
        print("=" * RULE_WIDTH)
        print(f"  Target:     {config.base_url}")
        print(f"  Org:        {config.organization_id}")
        print(f"  Sign with:  {config.sign_with}")
        print(f"  Curve:      {curve_label_for(config.sign_with)}")
        print(f"  Iterations: {config.iterations}")
        print()

    def print_warmup(self, elapsed_ms: float, started_at: str) -> None:
        print(f"Warmup... {started_at}  {fmt_ms(elapsed_ms)}\n")

    def print_benchmark_start(self, iterations: int) -> None:
        print(f"Benchmark ({iterations} runs):\n")

    def print_sample(self, index: int, elapsed_ms: float, started_at: str) -> None:
        print(f"  #{index:2d}  {fmt_ms(elapsed_ms)}  {started_at}", flush=True)

    def print_summary(self, summary: LatencySummary) -> None:
        self._rule()
        print("Results:\n")
        print(f"  Min:  {fmt_ms(summary.min)}")
        print(f"  Max:  {fmt_ms(summary.max)}")
        print(f"  Avg:  {fmt_ms(summary.mean)}")
        print(f"  P50:  {fmt_ms(summary.p50)}")
        print(f"  P95:  {fmt_ms(summary.p95)}")

    def print_probe_start(self) -> None:
        self._rule()
        print("HTTP timing breakdown (fresh connection):\n")

    def print_timing(self, timing: HttpPhaseTiming) -> None:
        b = LatencyAnalyzer.derive_breakdown(timing)
        print(f"  DNS lookup:     {fmt_ms(timing.dns)}")
        print(f"  TCP connect:    {fmt_ms(timing.tcp)}  (handshake: {fmt_ms(b.tcp_handshake)})")
        print(f"  TLS handshake:  {fmt_ms(timing.tls)}  (handshake: {fmt_ms(b.tls_handshake)})")
        print(f"  TTFB:           {fmt_ms(timing.ttfb)}")
        print(f"  Total:          {fmt_ms(timing.total)}")
        print(f"  HTTP status:    {timing.status if timing.status is not None else 'unknown'}")

        self._rule()
        print("Latency breakdown:\n")
        print(f"  Network RTT:        ~{fmt_ms(b.rtt)}  (derived from TCP handshake)")
        print(f"  Network overhead:   {fmt_ms(b.network_overhead)}  "
              f"(DNS + TCP + TLS, {pct_of(b.network_overhead, b.ttfb)} of TTFB)")
        print(f"  API response time:  {fmt_ms(b.server_processing)}  "
              f"(TTFB - network, {pct_of(b.server_processing, b.ttfb)} of TTFB)")
        print()
