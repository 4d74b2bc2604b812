"""Type definitions for published keys, token headers, and claims."""

from pydantic import BaseModel, ConfigDict, Field


class PublicKeyRecord(BaseModel):
    """Single JWK entry as published by the identity provider."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    alg: str | None = None
    e: str
    kid: str
    kty: str
    n: str
    use: str | None = None


class JWKSDocument(BaseModel):
    """JSON Web Key Set response body."""

    keys: list[PublicKeyRecord]


class PublicKeyMaterial(BaseModel):
    """A published key together with its PEM verification form."""

    model_config = ConfigDict(frozen=True)

    record: PublicKeyRecord
    pem: str


class TokenHeader(BaseModel):
    """Decoded first segment of a compact token."""

    kid: str
    alg: str


class Claim(BaseModel):
    """Verified token payload."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    token_use: str = ""
    auth_time: float | None = None
    iss: str = ""
    exp: float | None = None
    nbf: float | None = None
    username: str = ""
    client_id: str = ""
    name: str = ""
    sub: str = ""
    cognito_username: str = Field(default="", alias="cognito:username")

    @property
    def user_name(self) -> str:
        """Username, falling back to the id-token username claim."""
        return self.username or self.cognito_username
