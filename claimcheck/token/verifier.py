"""Signature and claim verification using RS256-family keys."""

import math
import time
from collections.abc import Callable, Mapping

import jwt
from jwt.types import Options
from pydantic import ValidationError

from claimcheck.core.errors import (
    ExpiredOrNotYetValidError,
    IssuerMismatchError,
    MalformedTokenError,
    SignatureInvalidError,
    TokenUseError,
    UnknownKeyError,
)
from claimcheck.crypto.types import Claim, PublicKeyMaterial, TokenHeader

SUPPORTED_ALGORITHMS = frozenset({"RS256", "RS384", "RS512"})

# Temporal (exp, nbf, auth_time) and issuer claims are checked after decoding,
# with inclusive bounds.
SIGNATURE_ONLY: Options = {
    "verify_signature": True,
    "verify_exp": False,
    "verify_nbf": False,
    "verify_iat": False,
    "verify_aud": False,
    "verify_iss": False,
}


class ClaimVerifier:
    """Verifies a token against a key set and checks its claims."""

    def __init__(
        self,
        required_token_use: str | None = None,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self._required_token_use = required_token_use
        self._clock = clock

    def verify(
        self,
        token: str,
        header: TokenHeader,
        keys: Mapping[str, PublicKeyMaterial],
        expected_issuer: str,
    ) -> Claim:
        """Run every check in order and return the verified claim.

        Raises:
            UnknownKeyError: ``header.kid`` is not in ``keys``.
            SignatureInvalidError: the signature does not verify.
            MalformedTokenError: the payload is not a claim object.
            ExpiredOrNotYetValidError: now is outside [max(auth_time, nbf), exp].
            IssuerMismatchError: ``iss`` differs from ``expected_issuer``.
            TokenUseError: a required token_use is configured and differs.
        """
        material = keys.get(header.kid)
        if material is None:
            raise UnknownKeyError(details={"kid": header.kid})

        raw = self._verify_signature(token, header, material)
        claim = self._decode_claim(raw)
        self._check_lifetime(claim)
        if claim.iss != expected_issuer:
            raise IssuerMismatchError(
                details={"issuer": claim.iss, "expected": expected_issuer}
            )
        if (
            self._required_token_use is not None
            and claim.token_use != self._required_token_use
        ):
            raise TokenUseError(
                f"claim use is not {self._required_token_use}",
                details={"token_use": claim.token_use},
            )
        return claim

    def _verify_signature(
        self, token: str, header: TokenHeader, material: PublicKeyMaterial
    ) -> dict:
        if header.alg not in SUPPORTED_ALGORITHMS:
            raise SignatureInvalidError(
                f"unsupported algorithm {header.alg!r}",
                details={"alg": header.alg},
            )
        if material.record.alg and material.record.alg != header.alg:
            raise SignatureInvalidError(
                "token algorithm does not match key algorithm",
                details={"alg": header.alg, "key_alg": material.record.alg},
            )
        try:
            return jwt.decode(
                token,
                material.pem,
                algorithms=[header.alg],
                options=SIGNATURE_ONLY,
            )
        except jwt.PyJWTError as exc:
            raise SignatureInvalidError(str(exc) or None) from exc

    @staticmethod
    def _decode_claim(raw: dict) -> Claim:
        try:
            return Claim.model_validate(raw)
        except ValidationError as exc:
            raise MalformedTokenError("token payload is not a valid claim") from exc

    def _check_lifetime(self, claim: Claim) -> None:
        now = math.floor(self._clock())
        if claim.exp is None:
            raise ExpiredOrNotYetValidError("claim carries no expiry")
        lower_bounds = [t for t in (claim.auth_time, claim.nbf) if t is not None]
        if now > claim.exp or any(now < bound for bound in lower_bounds):
            raise ExpiredOrNotYetValidError(
                details={
                    "now": now,
                    "exp": claim.exp,
                    "auth_time": claim.auth_time,
                    "nbf": claim.nbf,
                }
            )
