"""Error kinds raised inside the verification pipeline."""

from typing import Any

from pydantic import BaseModel, Field


class ErrorDetail(BaseModel):
    """Failure detail surfaced in a verification result."""

    code: str
    message: str
    details: dict[str, Any] = Field(default_factory=dict)


class ClaimVerificationError(Exception):
    """Base class for every pipeline failure."""

    code = "CLAIM_VERIFICATION_ERROR"
    default_message = "claim verification failed"

    def __init__(
        self, message: str | None = None, details: dict[str, Any] | None = None
    ) -> None:
        self.message = message or self.default_message
        self.details = details or {}
        super().__init__(self.message)

    def to_detail(self) -> ErrorDetail:
        """Convert to the data form carried by a result."""
        return ErrorDetail(code=self.code, message=self.message, details=self.details)


class MalformedTokenError(ClaimVerificationError):
    code = "MALFORMED_TOKEN"
    default_message = "requested token is invalid"


class NetworkError(ClaimVerificationError):
    code = "NETWORK_ERROR"
    default_message = "key set endpoint is unreachable"


class MalformedResponseError(ClaimVerificationError):
    code = "MALFORMED_RESPONSE"
    default_message = "key set response has an unexpected shape"


class UnknownKeyError(ClaimVerificationError):
    code = "UNKNOWN_KEY"
    default_message = "claim made for unknown kid"


class SignatureInvalidError(ClaimVerificationError):
    code = "SIGNATURE_INVALID"
    default_message = "token signature is invalid"


class ExpiredOrNotYetValidError(ClaimVerificationError):
    code = "EXPIRED_OR_NOT_YET_VALID"
    default_message = "claim is expired or invalid"


class IssuerMismatchError(ClaimVerificationError):
    code = "ISSUER_MISMATCH"
    default_message = "claim issuer is invalid"


class TokenUseError(ClaimVerificationError):
    code = "TOKEN_USE_MISMATCH"
    default_message = "claim token_use is not accepted"
