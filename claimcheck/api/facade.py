"""Single entry point that turns every verification outcome into data."""

import httpx

from claimcheck.api.schemas import VerificationRequest, VerificationResult
from claimcheck.core.errors import ClaimVerificationError, ErrorDetail
from claimcheck.core.logging import get_logger
from claimcheck.core.settings import ClaimCheckSettings
from claimcheck.jwks.cache import KeyCache
from claimcheck.jwks.client import KeyDirectoryClient
from claimcheck.token.parser import parse_header
from claimcheck.token.verifier import ClaimVerifier

INTERNAL_ERROR_CODE = "INTERNAL_ERROR"


class ClaimVerificationService:
    """Verifies identity tokens for one expected issuer.

    ``verify_claim`` never raises: callers branch on ``is_valid`` and read
    ``error`` for the failure detail.
    """

    def __init__(
        self,
        issuer: str,
        cache: KeyCache,
        verifier: ClaimVerifier | None = None,
    ) -> None:
        self._issuer = issuer
        self._cache = cache
        self._verifier = verifier or ClaimVerifier()
        self._logger = get_logger("claimcheck.api.facade")

    @property
    def issuer(self) -> str:
        return self._issuer

    async def verify_claim(self, request: VerificationRequest) -> VerificationResult:
        """Parse, look up the key, verify, and normalize the outcome."""
        try:
            header = parse_header(request.token)
            keys = await self._cache.get_or_load(self._issuer)
            claim = self._verifier.verify(request.token, header, keys, self._issuer)
        except ClaimVerificationError as exc:
            self._logger.warning(
                "Claim verification failed", code=exc.code, error=exc.message
            )
            return VerificationResult.failure(exc.to_detail())
        except Exception as exc:
            self._logger.exception("Unexpected error during claim verification")
            return VerificationResult.failure(
                ErrorDetail(code=INTERNAL_ERROR_CODE, message=str(exc))
            )

        self._logger.info("Claim confirmed", username=claim.user_name)
        return VerificationResult(
            user_name=claim.user_name,
            client_id=claim.client_id,
            is_valid=True,
        )


def build_service(
    settings: ClaimCheckSettings,
    transport: httpx.AsyncBaseTransport | None = None,
) -> ClaimVerificationService:
    """Wire a client, a fresh cache, and a verifier from settings."""
    client = KeyDirectoryClient(
        timeout=settings.fetch_timeout,
        jwks_path=settings.jwks_path,
        transport=transport,
    )
    return ClaimVerificationService(
        issuer=settings.issuer,
        cache=KeyCache(client),
        verifier=ClaimVerifier(required_token_use=settings.required_token_use),
    )
