"""
Claims verification package.

Decides whether a decoded claim set is acceptable. Token decoding, signature
checks and key management happen elsewhere; this package only looks at claim
values.

Modules of interest:
- registry: Per-claim verifiers with an accept-all fallback.
- verifier: Fail-fast aggregation of the registry across a claim set.
- drift: Clock drift tolerance for timestamp claims.
- literal: Matching claims against caller-expected values.
- standard: Ready-made verifiers for exp, nbf and iss.
"""

from typing import Any, Optional

from .drift import Clock, ConfigAccessor, DriftChecker, SystemClock
from .literal import LiteralClaimsMatcher
from .models import (
    ClaimSet, ClaimVerifier, ExpectedClaims, FailureKind, Options, VerificationOutcome
)
from .registry import VerificationRegistry, accept_claim
from .standard import expiry_verifier, issuer_verifier, not_before_verifier, standard_registry
from .verifier import ClaimsVerifier


def verify_claims(
    context: Any,
    claims: ClaimSet,
    options: Optional[Options] = None,
    registry: Optional[VerificationRegistry] = None,
) -> VerificationOutcome:
    """Verify every claim with ``registry`` (accept-all when omitted)."""
    return ClaimsVerifier(registry).verify_claims(context, claims, options)


def is_within_drift(context: Any, timestamp: Any, config: Optional[ConfigAccessor] = None,
                    clock: Optional[Clock] = None) -> bool:
    return DriftChecker(config, clock).is_within_drift(context, timestamp)


def match_literal_claims(
    claims: ClaimSet,
    expected: Optional[ExpectedClaims],
    options: Optional[Options] = None,
) -> VerificationOutcome:
    return LiteralClaimsMatcher().match_literal_claims(claims, expected, options)


__all__ = [
    "ClaimSet",
    "ClaimVerifier",
    "ClaimsVerifier",
    "Clock",
    "ConfigAccessor",
    "DriftChecker",
    "ExpectedClaims",
    "FailureKind",
    "LiteralClaimsMatcher",
    "Options",
    "SystemClock",
    "VerificationOutcome",
    "VerificationRegistry",
    "accept_claim",
    "expiry_verifier",
    "is_within_drift",
    "issuer_verifier",
    "match_literal_claims",
    "not_before_verifier",
    "standard_registry",
    "verify_claims",
]
