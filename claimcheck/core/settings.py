"""Application settings loaded from environment variables."""

from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

FETCH_TIMEOUT_DEFAULT = 10.0
IDP_HOST_TEMPLATE_DEFAULT = "cognito-idp.{region}.amazonaws.com"
JWKS_PATH_DEFAULT = "/.well-known/jwks.json"


class ClaimCheckSettings(BaseSettings):
    """Identity provider and verification settings."""

    model_config = SettingsConfigDict(env_prefix="CLAIMCHECK_")

    region: str = ""
    user_pool_id: str = ""
    issuer_url: str = ""
    idp_host_template: str = IDP_HOST_TEMPLATE_DEFAULT
    jwks_path: str = JWKS_PATH_DEFAULT
    fetch_timeout: float = FETCH_TIMEOUT_DEFAULT
    required_token_use: str | None = None
    log_level: str = "info"
    log_json: bool = True

    @model_validator(mode="after")
    def _require_issuer_source(self) -> "ClaimCheckSettings":
        if not self.issuer_url and not (self.region and self.user_pool_id):
            raise ValueError(
                "either issuer_url or both region and user_pool_id must be set"
            )
        return self

    @property
    def issuer(self) -> str:
        """Expected token issuer: https://<idp-host>/<pool-id>."""
        if self.issuer_url:
            return self.issuer_url.rstrip("/")
        host = self.idp_host_template.format(region=self.region)
        return f"https://{host}/{self.user_pool_id}"

    @property
    def jwks_url(self) -> str:
        """Key set discovery URL for the configured issuer."""
        return jwks_url_for(self.issuer, self.jwks_path)


def jwks_url_for(issuer: str, jwks_path: str = JWKS_PATH_DEFAULT) -> str:
    """Compose the key set URL published under an issuer."""
    return f"{issuer.rstrip('/')}{jwks_path}"
