"""
Claim set verification across every claim in a token.
"""

from typing import Any, Optional

from shared.logging import get_logger
from .models import ClaimSet, FailureKind, Options, VerificationOutcome
from .registry import VerificationRegistry


class ClaimsVerifier:
    """Runs the registry over a claim set and reports the first rejected claim."""

    def __init__(self, registry: Optional[VerificationRegistry] = None):
        self.registry = registry or VerificationRegistry()
        self.logger = get_logger("auth.claims.verifier")

    def verify_claims(
        self,
        context: Any,
        claims: ClaimSet,
        options: Optional[Options] = None,
    ) -> VerificationOutcome:
        """Verify each claim in order, stopping at the first failure.

        Each successful verifier may hand back normalized claims; the next
        verifier sees that working set. Claims after a failure are never
        evaluated.
        """
        options = options or {}
        outcome = VerificationOutcome.ok(claims)

        for claim_key in list(claims.keys()):
            try:
                outcome = self.registry.verify_claim(context, claim_key, outcome.claims, options)
            except Exception as e:
                self.logger.error(
                    "Claim verifier error",
                    claim=claim_key,
                    error=str(e),
                    exc_info=True
                )
                outcome = VerificationOutcome.rejected(
                    claim_key, FailureKind.CLAIM_REJECTED, detail="verifier_error"
                )

            if not outcome.valid:
                self.logger.debug(
                    "Claim rejected",
                    claim=outcome.reason,
                    detail=outcome.detail
                )
                return outcome

        return outcome
