"""Test keys, tokens, and a fake key set endpoint."""

import base64
from dataclasses import dataclass, field
from typing import Any

import httpx
import jwt
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import rsa

from claimcheck.crypto.types import PublicKeyRecord

REGION = "ap-northeast-2"
POOL_ID = "ap-northeast-2_8WMH5DCrb"
ISSUER = f"https://cognito-idp.{REGION}.amazonaws.com/{POOL_ID}"
JWKS_URL = f"{ISSUER}/.well-known/jwks.json"
CLIENT_ID = "2cn11kovfhbmmb4gm7h8mk9f3n"


def _int_to_base64url(value: int) -> str:
    """Encode an integer as base64url without padding."""
    byte_length = (value.bit_length() + 7) // 8
    raw = value.to_bytes(byte_length, byteorder="big")
    return base64.urlsafe_b64encode(raw).rstrip(b"=").decode()


@dataclass
class SigningKey:
    """A test keypair standing in for one provider signing key."""

    kid: str
    private_key: rsa.RSAPrivateKey

    @property
    def private_pem(self) -> bytes:
        return self.private_key.private_bytes(
            encoding=serialization.Encoding.PEM,
            format=serialization.PrivateFormat.PKCS8,
            encryption_algorithm=serialization.NoEncryption(),
        )

    @property
    def record(self) -> PublicKeyRecord:
        numbers = self.private_key.public_key().public_numbers()
        return PublicKeyRecord(
            alg="RS256",
            e=_int_to_base64url(numbers.e),
            kid=self.kid,
            kty="RSA",
            n=_int_to_base64url(numbers.n),
            use="sig",
        )

    def sign(self, claims: dict[str, Any], algorithm: str = "RS256") -> str:
        return jwt.encode(
            claims,
            self.private_pem,
            algorithm=algorithm,
            headers={"kid": self.kid},
        )



def generate_signing_key(kid: str) -> SigningKey:
    return SigningKey(
        kid=kid,
        private_key=rsa.generate_private_key(public_exponent=65537, key_size=2048),
    )


@dataclass
class FakeJWKSEndpoint:
    """Serves a key set through ``httpx.MockTransport`` and counts calls."""

    keys: list[SigningKey]
    status_code: int = 200
    body: bytes | None = None
    requests: list[httpx.Request] = field(default_factory=list)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.body is not None:
            return httpx.Response(self.status_code, content=self.body)
        document = {
            "keys": [k.record.model_dump(exclude_none=True) for k in self.keys]
        }
        return httpx.Response(self.status_code, json=document)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

    @property
    def calls(self) -> int:
        return len(self.requests)

