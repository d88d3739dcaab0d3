"""
Claim data models for the claims verification engine.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Mapping, Optional, Sequence, Union

from shared.errors import ClaimRejectedError, LiteralMismatchError

ClaimValue = Union[str, int, float, bool, Sequence[str]]
ClaimSet = Mapping[str, Any]
Options = Mapping[str, Any]
ExpectedClaims = Mapping[str, Any]


class FailureKind(str, Enum):
    """Which check produced an invalid outcome."""
    CLAIM_REJECTED = "claim_rejected"
    LITERAL_MISMATCH = "literal_mismatch"


@dataclass(frozen=True)
class VerificationOutcome:
    """Result of verifying a claim set.

    A valid outcome carries the (possibly normalized) claims. An invalid one
    carries the failing claim key as ``reason``.
    """
    valid: bool
    claims: Optional[ClaimSet] = None
    reason: Optional[str] = None
    kind: Optional[FailureKind] = None
    detail: Optional[str] = None

    def __post_init__(self):
        if self.valid:
            if self.claims is None:
                raise TypeError("A valid VerificationOutcome must carry claims")
            return
        if self.reason is None:
            raise TypeError("An invalid VerificationOutcome must name the failing claim")
        if self.kind is None:
            object.__setattr__(self, "kind", FailureKind.CLAIM_REJECTED)

    @classmethod
    def ok(cls, claims: ClaimSet) -> "VerificationOutcome":
        return cls(valid=True, claims=claims)

    @classmethod
    def rejected(
        cls,
        claim_key: str,
        kind: FailureKind = FailureKind.CLAIM_REJECTED,
        detail: Optional[str] = None,
    ) -> "VerificationOutcome":
        return cls(valid=False, reason=claim_key, kind=kind, detail=detail)

    def raise_for_failure(self) -> ClaimSet:
        """Return the claims, or raise the error matching this failure."""
        if self.valid:
            return self.claims
        if self.kind == FailureKind.LITERAL_MISMATCH:
            raise LiteralMismatchError(self.reason)
        raise ClaimRejectedError(self.reason, detail=self.detail)


# (context, claim_key, claims, options) -> VerificationOutcome
ClaimVerifier = Callable[[Any, str, ClaimSet, Options], VerificationOutcome]


def is_claim_list(value: Any) -> bool:
    """Lists and tuples are claim sequences; strings are scalars."""
    return isinstance(value, (list, tuple))


def claim_values_equal(left: Any, right: Any) -> bool:
    """Strict claim equality: booleans never equal numbers."""
    if isinstance(left, bool) != isinstance(right, bool):
        return False
    return left == right


def claim_values_identical(left: Any, right: Any) -> bool:
    """List membership equality: additionally, ints never match floats."""
    if isinstance(left, float) != isinstance(right, float):
        return False
    return claim_values_equal(left, right)
