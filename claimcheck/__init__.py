"""claimcheck: verification of identity-provider issued JWTs."""
