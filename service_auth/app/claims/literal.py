"""
Literal claim matching against caller-expected values.
"""

from typing import Any, Optional

from shared.logging import get_logger
from .models import (
    ClaimSet, ExpectedClaims, FailureKind, Options, VerificationOutcome,
    claim_values_equal, claim_values_identical, is_claim_list
)


class LiteralClaimsMatcher:
    """Checks claims against expected scalars or lists.

    Matching rules, by shape of the actual claim value:

    - list actual, list expected: every expected element must be in actual
    - list actual, scalar expected: the expected value must be in actual
    - anything else: strict equality

    A scalar actual against a list expectation therefore only matches an
    identical list, which in practice never happens.

    Membership is stricter than equality: an int is never found among
    floats, although `1` equals `1.0` as a scalar.
    """

    def __init__(self):
        self.logger = get_logger("auth.claims.literal")

    def match_literal_claims(
        self,
        claims: ClaimSet,
        expected: Optional[ExpectedClaims],
        options: Optional[Options] = None,
    ) -> VerificationOutcome:
        """Return the unchanged claims, or the first mismatched key in ``expected`` order."""
        if not expected:
            return VerificationOutcome.ok(claims)

        for claim_key, expected_value in expected.items():
            if not self._matches(claims.get(claim_key), expected_value):
                self.logger.debug("Literal claim mismatch", claim=claim_key)
                return VerificationOutcome.rejected(claim_key, FailureKind.LITERAL_MISMATCH)

        return VerificationOutcome.ok(claims)

    def _matches(self, actual: Any, expected: Any) -> bool:
        if is_claim_list(actual) and is_claim_list(expected):
            return all(self._contains(actual, value) for value in expected)

        if is_claim_list(actual):
            return self._contains(actual, expected)

        return claim_values_equal(actual, expected)

    def _contains(self, values: Any, candidate: Any) -> bool:
        return any(claim_values_identical(value, candidate) for value in values)
