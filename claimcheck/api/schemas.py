"""Request and result schemas with camelCase wire names."""

from pydantic import BaseModel, ConfigDict

from claimcheck.core.errors import ErrorDetail


def _to_camel(name: str) -> str:
    """Convert snake_case to camelCase for JSON serialization."""
    parts = name.split("_")
    return parts[0] + "".join(p.capitalize() for p in parts[1:])


class VerificationRequest(BaseModel):
    """Opaque compact token to verify."""

    token: str


class VerificationResult(BaseModel):
    """Outcome of a verification; identity fields are blank when invalid."""

    model_config = ConfigDict(
        alias_generator=_to_camel,
        populate_by_name=True,
    )

    user_name: str = ""
    client_id: str = ""
    is_valid: bool = False
    error: ErrorDetail | None = None

    @classmethod
    def failure(cls, error: ErrorDetail) -> "VerificationResult":
        return cls(user_name="", client_id="", is_valid=False, error=error)
