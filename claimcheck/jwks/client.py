"""HTTP client for the identity provider's published key set."""

import httpx
from pydantic import ValidationError

from claimcheck.core.errors import MalformedResponseError, NetworkError
from claimcheck.core.logging import get_logger
from claimcheck.core.settings import (
    FETCH_TIMEOUT_DEFAULT,
    JWKS_PATH_DEFAULT,
    jwks_url_for,
)
from claimcheck.crypto.types import JWKSDocument, PublicKeyRecord


class KeyDirectoryClient:
    """Fetches the raw key records published under an issuer.

    The client performs exactly one GET per call and keeps no state between
    calls; caching is the job of ``KeyCache``.
    """

    def __init__(
        self,
        timeout: float = FETCH_TIMEOUT_DEFAULT,
        jwks_path: str = JWKS_PATH_DEFAULT,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._timeout = timeout
        self._jwks_path = jwks_path
        self._transport = transport
        self._logger = get_logger("claimcheck.jwks.client")

    async def fetch_keys(self, issuer: str) -> list[PublicKeyRecord]:
        """GET ``<issuer>/.well-known/jwks.json`` and parse its keys.

        Raises:
            NetworkError: the endpoint is unreachable, timed out, or did not
                answer with a 2xx status.
            MalformedResponseError: the body is not a JSON key set.
        """
        url = jwks_url_for(issuer, self._jwks_path)
        try:
            async with httpx.AsyncClient(
                timeout=self._timeout, transport=self._transport
            ) as client:
                response = await client.get(url)
                response.raise_for_status()
        except httpx.HTTPError as exc:
            self._logger.warning("Key set fetch failed", url=url, error=str(exc))
            raise NetworkError(
                f"failed to fetch key set: {exc}", details={"url": url}
            ) from exc

        try:
            document = JWKSDocument.model_validate_json(response.content)
        except ValidationError as exc:
            self._logger.warning("Key set response rejected", url=url)
            raise MalformedResponseError(
                "key set response does not match {keys: [...]}",
                details={"url": url, "errors": exc.error_count()},
            ) from exc

        self._logger.info("Key set fetched", url=url, keys_count=len(document.keys))
        return document.keys
