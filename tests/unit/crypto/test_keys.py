"""Tests for JWK to PEM conversion."""

import pytest
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric.rsa import RSAPublicKey

from claimcheck.core.errors import MalformedResponseError
from claimcheck.crypto.keys import jwk_to_pem, to_key_material
from helpers import SigningKey


class TestJwkToPem:
    """Tests for RSA JWK conversion."""

    def test_produces_matching_public_key(self, signing_key: SigningKey) -> None:
        pem = jwk_to_pem(signing_key.record)
        assert pem.startswith("-----BEGIN PUBLIC KEY-----")
        loaded = serialization.load_pem_public_key(pem.encode())
        assert isinstance(loaded, RSAPublicKey)
        expected = signing_key.private_key.public_key().public_numbers()
        assert loaded.public_numbers() == expected

    def test_rejects_non_rsa(self, signing_key: SigningKey) -> None:
        record = signing_key.record.model_copy(update={"kty": "EC"})
        with pytest.raises(MalformedResponseError) as exc_info:
            jwk_to_pem(record)
        assert exc_info.value.details == {"kid": signing_key.kid}

    def test_rejects_empty_modulus(self, signing_key: SigningKey) -> None:
        record = signing_key.record.model_copy(update={"n": ""})
        with pytest.raises(MalformedResponseError):
            jwk_to_pem(record)


def test_key_material_keeps_record(signing_key: SigningKey) -> None:
    material = to_key_material(signing_key.record)
    assert material.record == signing_key.record
    assert material.pem == jwk_to_pem(signing_key.record)
