"""API key request stamping.

The signing API authenticates each request with a stamp header: an ECDSA
P-256 signature over the exact request body, wrapped together with the
caller's public key in a base64url-encoded JSON document.
"""

import base64
import json
from dataclasses import dataclass
from typing import Protocol

from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.asymmetric import ec

from sign_latency.const import STAMP_HEADER_NAME, STAMP_SIGNATURE_SCHEME


@dataclass(frozen=True)
class Stamp:
    """Authentication header for one request body."""
    header_name: str
    header_value: str


class RequestStamper(Protocol):
    """Anything that can produce an authentication stamp for a serialized body."""

    def stamp(self, body: str) -> Stamp:
        ...


class ApiKeyStamper:
    """Stamps request bodies with an API key pair."""

    def __init__(self, api_public_key: str, api_private_key: str):
        self.api_public_key = api_public_key
        self._private_key = ec.derive_private_key(int(api_private_key, 16), ec.SECP256R1())

    def stamp(self, body: str) -> Stamp:
        signature = self._private_key.sign(body.encode("utf-8"), ec.ECDSA(hashes.SHA256()))
        document = {
            "publicKey": self.api_public_key,
            "scheme": STAMP_SIGNATURE_SCHEME,
            "signature": signature.hex(),
        }
        encoded = base64.urlsafe_b64encode(
            json.dumps(document, separators=(",", ":")).encode("utf-8")
        ).decode("ascii").rstrip("=")
        return Stamp(header_name=STAMP_HEADER_NAME, header_value=encoded)
