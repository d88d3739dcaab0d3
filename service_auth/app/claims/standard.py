"""
Standard verifiers for registered JWT claims (exp, nbf, iss).

None of these are installed by default; register them explicitly or build a
registry with :func:`standard_registry`.
"""

from typing import Any, Optional

from .drift import DriftChecker
from .models import ClaimSet, ClaimVerifier, Options, VerificationOutcome, claim_values_equal
from .registry import VerificationRegistry


def _timestamp(value: Any) -> Optional[int]:
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    return None


def expiry_verifier(drift: DriftChecker) -> ClaimVerifier:
    """Reject an `exp` in the past unless it is within the allowed drift."""

    def verify_exp(context: Any, claim_key: str, claims: ClaimSet, options: Options) -> VerificationOutcome:
        exp = _timestamp(claims.get(claim_key))
        if exp is None or exp >= drift.clock.now() or drift.is_within_drift(context, exp):
            return VerificationOutcome.ok(claims)
        return VerificationOutcome.rejected(claim_key, detail="token_expired")

    return verify_exp


def not_before_verifier(drift: DriftChecker) -> ClaimVerifier:
    """Reject an `nbf` in the future unless it is within the allowed drift."""

    def verify_nbf(context: Any, claim_key: str, claims: ClaimSet, options: Options) -> VerificationOutcome:
        nbf = _timestamp(claims.get(claim_key))
        if nbf is None or nbf <= drift.clock.now() or drift.is_within_drift(context, nbf):
            return VerificationOutcome.ok(claims)
        return VerificationOutcome.rejected(claim_key, detail="token_not_yet_valid")

    return verify_nbf


def issuer_verifier(issuer: str) -> ClaimVerifier:
    """Require the claim to equal ``issuer`` exactly."""

    def verify_iss(context: Any, claim_key: str, claims: ClaimSet, options: Options) -> VerificationOutcome:
        if claim_values_equal(claims.get(claim_key), issuer):
            return VerificationOutcome.ok(claims)
        return VerificationOutcome.rejected(claim_key, detail="invalid_issuer")

    return verify_iss


def standard_registry(drift: DriftChecker, issuer: Optional[str] = None) -> VerificationRegistry:
    """Build a registry checking exp and nbf, plus iss when an issuer is given."""
    registry = VerificationRegistry()
    registry.register("exp", expiry_verifier(drift))
    registry.register("nbf", not_before_verifier(drift))
    if issuer is not None:
        registry.register("iss", issuer_verifier(issuer))
    return registry
