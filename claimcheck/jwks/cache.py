"""Process-wide cache of converted verification keys."""

from collections.abc import Iterable, Mapping
from types import MappingProxyType

from claimcheck.core.logging import get_logger
from claimcheck.crypto.keys import to_key_material
from claimcheck.crypto.types import PublicKeyMaterial, PublicKeyRecord
from claimcheck.jwks.client import KeyDirectoryClient

KeyMap = Mapping[str, PublicKeyMaterial]


def build_key_map(records: Iterable[PublicKeyRecord]) -> KeyMap:
    """Convert every record and index the results by kid."""
    keys = {record.kid: to_key_material(record) for record in records}
    return MappingProxyType(keys)


class KeyCache:
    """Maps issuer -> kid -> key material, loaded once per issuer.

    A loaded key set is never refreshed or invalidated, so keys rotated on
    the provider side are not seen until the process restarts. Concurrent
    misses may each fetch; the first complete key set stored wins and is
    never merged with another.
    """

    def __init__(self, client: KeyDirectoryClient) -> None:
        self._client = client
        self._key_sets: dict[str, KeyMap] = {}
        self._logger = get_logger("claimcheck.jwks.cache")

    def is_loaded(self, issuer: str) -> bool:
        """Whether a key set for ``issuer`` is already stored."""
        return issuer in self._key_sets

    def preload(self, issuer: str, records: Iterable[PublicKeyRecord]) -> KeyMap:
        """Seed the key set for ``issuer`` unless one is already stored."""
        return self._store(issuer, build_key_map(records))

    async def get_or_load(self, issuer: str) -> KeyMap:
        """Return the cached key set, fetching it on first use."""
        cached = self._key_sets.get(issuer)
        if cached is not None:
            return cached

        records = await self._client.fetch_keys(issuer)
        return self._store(issuer, build_key_map(records))

    def _store(self, issuer: str, keys: KeyMap) -> KeyMap:
        existing = self._key_sets.setdefault(issuer, keys)
        if existing is keys:
            self._logger.info(
                "Key cache populated", issuer=issuer, kids=sorted(keys)
            )
        return existing
