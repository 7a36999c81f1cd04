"""Builds sign-raw-payload request bodies."""
import time

from sign_latency.const import (
    ACTIVITY_TYPE_SIGN_RAW_PAYLOAD_V2, PAYLOAD_ENCODING_TEXT_UTF8,
    HASH_FUNCTION_SHA256, HASH_FUNCTION_NOT_APPLICABLE, ADDRESS_PREFIX,
    CURVE_LABEL_ECDSA, CURVE_LABEL_ED25519,
)
from .models import SignRawPayloadRequest, SignRawPayloadParameters


def hash_function_for(sign_with: str) -> str:
    """
    Pick the hash function tag for a signing key identifier.

    Address-style identifiers (0x...) belong to secp256k1 keys, where the
    API hashes the payload with SHA-256 before signing. Anything else is
    treated as an Ed25519 key, which signs the raw message.
    """
    if sign_with[:len(ADDRESS_PREFIX)].lower() == ADDRESS_PREFIX:
        return HASH_FUNCTION_SHA256
    return HASH_FUNCTION_NOT_APPLICABLE


def curve_label_for(sign_with: str) -> str:
    """Human-readable curve name for a signing key identifier."""
    if hash_function_for(sign_with) == HASH_FUNCTION_SHA256:
        return CURVE_LABEL_ECDSA
    return CURVE_LABEL_ED25519


class SigningRequestBuilder:
    """Builds request bodies for the fixed demo payload."""

    def __init__(self, organization_id: str, sign_with: str, payload: str):
        self.organization_id = organization_id
        self.sign_with = sign_with
        self.payload = payload
        self.hash_function = hash_function_for(sign_with)

    def build(self) -> SignRawPayloadRequest:
        """Build a request stamped with the current time in milliseconds."""
        return SignRawPayloadRequest(
            type=ACTIVITY_TYPE_SIGN_RAW_PAYLOAD_V2,
            timestamp_ms=str(time.time_ns() // 1_000_000),
            organization_id=self.organization_id,
            parameters=SignRawPayloadParameters(
                sign_with=self.sign_with,
                payload=self.payload,
                encoding=PAYLOAD_ENCODING_TEXT_UTF8,
                hash_function=self.hash_function,
            ),
        )
