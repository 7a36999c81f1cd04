"""Data models for the benchmarking system."""
from dataclasses import dataclass
from typing import Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


class SignRawPayloadParameters(_CamelModel):
    """Parameters block of a sign-raw-payload activity."""
    sign_with: str
    payload: str
    encoding: str
    hash_function: str


class SignRawPayloadRequest(_CamelModel):
    """Request body for a sign-raw-payload activity."""
    type: str
    timestamp_ms: str
    organization_id: str
    parameters: SignRawPayloadParameters

    def to_json(self) -> str:
        """Serialize with the API's camelCase field names."""
        return self.model_dump_json(by_alias=True)


@dataclass
class LatencySummary:
    """Summary statistics over the measured calls, in milliseconds."""
    count: int
    min: float
    max: float
    mean: float
    p50: float
    p95: float


@dataclass
class HttpPhaseTiming:
    """Lifecycle marks of one request, in ms since the request started.

    A mark is None when its event never fired for this connection.
    """
    dns: Optional[float] = None
    tcp: Optional[float] = None
    tls: Optional[float] = None
    ttfb: Optional[float] = None
    total: Optional[float] = None
    status: Optional[int] = None


@dataclass
class LatencyBreakdown:
    """Phase durations derived from an HttpPhaseTiming."""
    dns_time: float
    tcp_handshake: float
    tls_handshake: float
    network_overhead: float
    server_processing: float
    rtt: float
    ttfb: float
