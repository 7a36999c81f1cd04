"""Unit tests for the fresh-connection timing probe."""

import json

import httpx
import pytest

from sign_latency.benchmark.exceptions import RequestError
from sign_latency.benchmark.request_builder import SigningRequestBuilder
from sign_latency.benchmark.timing_probe import TimingCollector, TimingProbe
from ..conftest import TracingTransport
from ..test_const import TEST_BASE_URL, TEST_ORGANIZATION_ID, TEST_SIGN_WITH_ADDRESS, TEST_STAMP_VALUE


class FakeClock:
    """Clock that advances by a fixed step on every read."""

    def __init__(self, step: float = 0.01):
        self.now = 0.0
        self.step = step

    def __call__(self) -> float:
        value = self.now
        self.now += self.step
        return value


@pytest.fixture
def builder():
    return SigningRequestBuilder(TEST_ORGANIZATION_ID, TEST_SIGN_WITH_ADDRESS, "hello")


class TestTimingCollector:
    """Test TimingCollector marks."""

    def test_marks_are_relative_to_start(self):
        collector = TimingCollector(clock=FakeClock(step=0.01))
        collector.mark_connected()
        collector.mark_secure()
        collector.mark_first_byte(200)
        collector.mark_complete()

        timing = collector.timing
        assert timing.tcp == pytest.approx(10.0)
        assert timing.tls == pytest.approx(20.0)
        assert timing.ttfb == pytest.approx(30.0)
        assert timing.total == pytest.approx(40.0)
        assert timing.status == 200

    def test_marks_fire_once(self):
        collector = TimingCollector(clock=FakeClock())
        collector.mark_connected()
        first = collector.timing.tcp
        collector.mark_connected()
        assert collector.timing.tcp == first

    def test_unfired_marks_stay_absent(self):
        collector = TimingCollector(clock=FakeClock())
        collector.mark_first_byte(200)
        assert collector.timing.dns is None
        assert collector.timing.tcp is None
        assert collector.timing.tls is None

    def test_mark_dns(self):
        collector = TimingCollector(clock=FakeClock())
        collector.mark_dns()
        assert collector.timing.dns == pytest.approx(10.0)

    @pytest.mark.asyncio
    async def test_trace_events(self):
        collector = TimingCollector(clock=FakeClock())
        await collector.trace("connection.connect_tcp.started", {})
        await collector.trace("connection.connect_tcp.complete", {})
        await collector.trace("connection.start_tls.complete", {})
        await collector.trace("http11.receive_response_headers.complete", {})

        assert collector.timing.tcp == pytest.approx(10.0)
        assert collector.timing.tls == pytest.approx(20.0)
        assert collector.timing.ttfb is None


class TestTimingProbe:
    """Test TimingProbe.run."""

    @pytest.mark.asyncio
    async def test_run_records_all_phases(self, transport, fake_stamper, builder):
        probe = TimingProbe(TEST_BASE_URL, builder, fake_stamper, transport=transport)
        timing = await probe.run()

        assert timing.status == 200
        assert timing.dns is None
        assert 0 <= timing.tcp <= timing.tls <= timing.ttfb <= timing.total

    @pytest.mark.asyncio
    async def test_request_is_stamped_and_not_reused(self, transport, fake_stamper, builder):
        probe = TimingProbe(TEST_BASE_URL, builder, fake_stamper, transport=transport)
        await probe.run()

        sent = transport.requests[0]
        assert str(sent.url) == f"{TEST_BASE_URL}/public/v1/submit/sign_raw_payload"
        assert sent.headers["X-Stamp"] == TEST_STAMP_VALUE
        assert sent.headers["Connection"] == "close"
        assert json.loads(fake_stamper.bodies[0])["parameters"]["signWith"] == TEST_SIGN_WITH_ADDRESS

    @pytest.mark.asyncio
    async def test_error_status_is_recorded(self, fake_stamper, builder):
        transport = TracingTransport(status_code=400, json_body={"message": "bad request"})
        probe = TimingProbe(TEST_BASE_URL, builder, fake_stamper, transport=transport)
        timing = await probe.run()

        assert timing.status == 400
        assert timing.total is not None

    @pytest.mark.asyncio
    async def test_missing_events_leave_marks_absent(self, fake_stamper, builder):
        transport = TracingTransport(fire_events=False)
        probe = TimingProbe(TEST_BASE_URL, builder, fake_stamper, transport=transport)
        timing = await probe.run()

        assert timing.tcp is None
        assert timing.tls is None
        assert timing.ttfb is not None

    @pytest.mark.asyncio
    async def test_connection_error_raises(self, fake_stamper, builder):
        transport = TracingTransport(fail_on=1)
        probe = TimingProbe(TEST_BASE_URL, builder, fake_stamper, transport=transport)

        with pytest.raises(RequestError) as exc_info:
            await probe.run()
        assert isinstance(exc_info.value.__cause__, httpx.ConnectError)
