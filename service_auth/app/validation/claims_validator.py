"""
Claims validation service for Auth service.
"""

from typing import Dict, Any, Optional
from pydantic import BaseModel

from shared.logging import get_logger
from ..claims.literal import LiteralClaimsMatcher
from ..claims.models import ClaimSet, ExpectedClaims, Options, VerificationOutcome
from ..claims.registry import VerificationRegistry
from ..claims.verifier import ClaimsVerifier


class ClaimsValidationResponse(BaseModel):
    """Response model for claims validation."""
    valid: bool
    claims: Optional[Dict[str, Any]] = None
    error: Optional[str] = None
    claim: Optional[str] = None
    detail: Optional[str] = None


class ClaimsValidator:
    """Claims validation service.

    Runs the registered per-claim verifiers first and, only if they all
    pass, the literal expectations supplied by the caller.
    """

    def __init__(
        self,
        registry: Optional[VerificationRegistry] = None,
        matcher: Optional[LiteralClaimsMatcher] = None,
    ):
        self.verifier = ClaimsVerifier(registry)
        self.matcher = matcher or LiteralClaimsMatcher()
        self.logger = get_logger("auth.validator")

    def check(
        self,
        context: Any,
        claims: ClaimSet,
        expected: Optional[ExpectedClaims] = None,
        options: Optional[Options] = None,
    ) -> VerificationOutcome:
        """Run both checks and return the raw outcome."""
        outcome = self.verifier.verify_claims(context, claims, options)
        if not outcome.valid:
            return outcome
        return self.matcher.match_literal_claims(outcome.claims, expected, options)

    def validate(
        self,
        context: Any,
        claims: ClaimSet,
        expected: Optional[ExpectedClaims] = None,
        options: Optional[Options] = None,
    ) -> ClaimsValidationResponse:
        """Validate a decoded claim set."""
        outcome = self.check(context, claims, expected, options)

        if outcome.valid:
            return ClaimsValidationResponse(valid=True, claims=dict(outcome.claims))

        self.logger.warning(
            "Claims validation failed",
            claim=outcome.reason,
            kind=outcome.kind.value,
            detail=outcome.detail
        )
        return ClaimsValidationResponse(
            valid=False,
            error=outcome.kind.value,
            claim=outcome.reason,
            detail=outcome.detail
        )

    def extract_claims(
        self,
        context: Any,
        claims: ClaimSet,
        expected: Optional[ExpectedClaims] = None,
        options: Optional[Options] = None,
    ) -> ClaimSet:
        """Return validated claims or raise the matching AuthenticationError."""
        return self.check(context, claims, expected, options).raise_for_failure()
