"""
Per-claim verification registry.
"""

from typing import Any, Dict, Optional

from shared.logging import get_logger
from .models import ClaimSet, ClaimVerifier, Options, VerificationOutcome


def accept_claim(context: Any, claim_key: str, claims: ClaimSet, options: Options) -> VerificationOutcome:
    """Default verifier: claims with no registered check are accepted unchanged."""
    return VerificationOutcome.ok(claims)


class VerificationRegistry:
    """Maps claim keys to verifiers, falling back to a default for every other key."""

    def __init__(self, fallback: Optional[ClaimVerifier] = None):
        self.logger = get_logger("auth.claims.registry")
        self.fallback: ClaimVerifier = fallback or accept_claim
        self._verifiers: Dict[str, ClaimVerifier] = {}

    def register(self, claim_key: str, verifier: ClaimVerifier) -> None:
        """Register (or replace) the verifier for a claim key."""
        replaced = claim_key in self._verifiers
        self._verifiers[claim_key] = verifier
        self.logger.info("Claim verifier registered", claim=claim_key, replaced=replaced)

    def unregister(self, claim_key: str) -> bool:
        """Remove the verifier for a claim key."""
        if claim_key in self._verifiers:
            del self._verifiers[claim_key]
            self.logger.info("Claim verifier removed", claim=claim_key)
            return True
        return False

    def get(self, claim_key: str) -> ClaimVerifier:
        return self._verifiers.get(claim_key, self.fallback)

    def registered_claims(self) -> Dict[str, ClaimVerifier]:
        return dict(self._verifiers)

    def verify_claim(
        self,
        context: Any,
        claim_key: str,
        claims: ClaimSet,
        options: Optional[Options] = None,
    ) -> VerificationOutcome:
        """Verify a single claim with its registered verifier or the fallback."""
        verifier = self.get(claim_key)
        outcome = verifier(context, claim_key, claims, options or {})
        if not isinstance(outcome, VerificationOutcome):
            raise TypeError(
                f"Verifier for claim '{claim_key}' returned {type(outcome).__name__}, "
                "expected VerificationOutcome"
            )
        return outcome
