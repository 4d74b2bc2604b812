"""HTTP surface for claim verification."""

from typing import Annotated

from fastapi import APIRouter, Depends, Request

from claimcheck.api.facade import ClaimVerificationService
from claimcheck.api.schemas import VerificationRequest, VerificationResult

router = APIRouter()


def _get_service(request: Request) -> ClaimVerificationService:
    return request.app.state.verification_service


@router.post("/claims/verify")
async def verify_claim(
    payload: VerificationRequest,
    service: Annotated[ClaimVerificationService, Depends(_get_service)],
) -> VerificationResult:
    """POST /claims/verify -- always 200; branch on ``isValid``."""
    return await service.verify_claim(payload)


@router.get("/healthz")
async def healthz() -> dict[str, str]:
    """Liveness probe."""
    return {"status": "ok"}
