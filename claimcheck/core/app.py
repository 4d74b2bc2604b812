"""FastAPI application factory for the claim verification service."""

from fastapi import FastAPI

from claimcheck.api.facade import ClaimVerificationService, build_service
from claimcheck.api.routes_verify import router as verify_router
from claimcheck.core.logging import configure_logging
from claimcheck.core.settings import ClaimCheckSettings


def create_app(
    settings: ClaimCheckSettings | None = None,
    service: ClaimVerificationService | None = None,
) -> FastAPI:
    """Build the application around one shared verification service.

    The service (and its key cache) is constructed once here and shared by
    every request for the lifetime of the process.
    """
    settings = settings or ClaimCheckSettings()
    configure_logging(settings.log_level, settings.log_json)

    app = FastAPI(
        title="claimcheck",
        version="0.1.0",
    )
    app.state.verification_service = service or build_service(settings)
    app.include_router(verify_router)

    return app
