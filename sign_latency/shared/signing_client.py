from typing import Any, Dict, Optional

import httpx

from sign_latency.const import SIGN_RAW_PAYLOAD_PATH, CONTENT_TYPE_HEADER, CONTENT_TYPE_JSON
from sign_latency.benchmark.exceptions import RequestError, InvalidResponseFormatError
from sign_latency.benchmark.models import SignRawPayloadRequest
from .logging import LoggingManager
from .stamper import RequestStamper

logger = LoggingManager.get_logger(__name__)


class SigningClient:
    """Async client for the raw payload signing endpoint.

    Wraps one long-lived httpx.AsyncClient so consecutive calls share
    pooled connections.
    """

    def __init__(self, http_client: httpx.AsyncClient, stamper: RequestStamper):
        self._client = http_client
        self._stamper = stamper

    async def sign_raw_payload(self, request: SignRawPayloadRequest) -> Dict[str, Any]:
        """Submit a sign-raw-payload activity and return the parsed response."""
        body = request.to_json()
        stamp = self._stamper.stamp(body)
        headers = {
            CONTENT_TYPE_HEADER: CONTENT_TYPE_JSON,
            stamp.header_name: stamp.header_value,
        }

        try:
            response = await self._client.post(SIGN_RAW_PAYLOAD_PATH, content=body, headers=headers)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.error(f"Signing request rejected: {e.response.status_code} {e.response.text}")
            raise RequestError(
                f"Signing request failed with status {e.response.status_code}: {e.response.text}"
            ) from e
        except httpx.HTTPError as e:
            logger.error(f"Signing request failed: {e}")
            raise RequestError(f"Request to {SIGN_RAW_PAYLOAD_PATH} failed: {e}") from e

        try:
            return response.json()
        except ValueError as e:
            raise InvalidResponseFormatError("Signing response is not valid JSON") from e

    async def aclose(self) -> None:
        """Close the underlying HTTP client."""
        await self._client.aclose()

    async def __aenter__(self) -> "SigningClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> Optional[bool]:
        await self.aclose()
        return None
