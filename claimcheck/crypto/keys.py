"""JWK to PEM conversion for RSA verification keys."""

import base64
import binascii

from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric.rsa import RSAPublicNumbers

from claimcheck.core.errors import MalformedResponseError
from claimcheck.crypto.types import PublicKeyMaterial, PublicKeyRecord

SUPPORTED_KEY_TYPE = "RSA"


def _base64url_to_int(value: str) -> int:
    """Decode an unpadded base64url string into a big-endian integer."""
    padded = value + "=" * (-len(value) % 4)
    raw = base64.urlsafe_b64decode(padded.encode("ascii"))
    return int.from_bytes(raw, byteorder="big")


def jwk_to_pem(record: PublicKeyRecord) -> str:
    """Convert an RSA JWK into a SubjectPublicKeyInfo PEM string."""
    if record.kty != SUPPORTED_KEY_TYPE:
        raise MalformedResponseError(
            f"unsupported key type {record.kty!r}",
            details={"kid": record.kid},
        )
    try:
        numbers = RSAPublicNumbers(
            e=_base64url_to_int(record.e),
            n=_base64url_to_int(record.n),
        )
        public_key = numbers.public_key()
    except (binascii.Error, UnicodeEncodeError, ValueError) as exc:
        raise MalformedResponseError(
            f"key {record.kid!r} has invalid RSA parameters",
            details={"kid": record.kid},
        ) from exc
    return public_key.public_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PublicFormat.SubjectPublicKeyInfo,
    ).decode()


def to_key_material(record: PublicKeyRecord) -> PublicKeyMaterial:
    """Pair a published key with its PEM form."""
    return PublicKeyMaterial(record=record, pem=jwk_to_pem(record))
