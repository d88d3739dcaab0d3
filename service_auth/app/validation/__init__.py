"""
Claims validation package.

Combines the claims engine into the single check the Auth Service runs on
every decoded token:

- Registered per-claim verifiers (expiry, not-before, issuer, custom).
- Literal expectations from the caller (audience, tenant restrictions).

Signature verification and token decoding happen before this point; only
claim values are inspected here.
"""

from .claims_validator import ClaimsValidationResponse, ClaimsValidator

__all__ = ["ClaimsValidationResponse", "ClaimsValidator"]
