"""
Shared error handling for 254Carbon Access Layer.
"""

from typing import Dict, Any, Optional
from pydantic import BaseModel


class ErrorResponse(BaseModel):
    """Standard error response format."""

    code: str
    message: str
    details: Dict[str, Any] = {}


class AccessLayerException(Exception):
    """Base exception for Access Layer services."""

    def __init__(self, code: str, message: str, details: Optional[Dict[str, Any]] = None):
        self.code = code
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def to_response(self) -> ErrorResponse:
        """Convert to error response."""
        return ErrorResponse(
            code=self.code,
            message=self.message,
            details=self.details
        )


class AuthenticationError(AccessLayerException):
    """Authentication-related errors."""

    def __init__(
        self,
        message: str = "Authentication failed",
        details: Optional[Dict[str, Any]] = None,
        code: str = "AUTHENTICATION_ERROR",
    ):
        super().__init__(code, message, details)


class ClaimRejectedError(AuthenticationError):
    """A claim failed its registered verifier."""

    def __init__(self, claim: str, detail: Optional[str] = None):
        self.claim = claim
        self.detail = detail
        details: Dict[str, Any] = {"claim": claim}
        if detail:
            details["detail"] = detail
        super().__init__(f"Claim '{claim}' rejected", details, code="CLAIM_REJECTED")


class LiteralMismatchError(AuthenticationError):
    """A claim did not match the value the caller expected."""

    def __init__(self, claim: str):
        self.claim = claim
        super().__init__(
            f"Claim '{claim}' does not match expected value",
            {"claim": claim},
            code="LITERAL_MISMATCH",
        )


class ClaimExpiredError(AuthenticationError):
    """A timestamp claim fell outside the allowed clock drift."""

    def __init__(self, claim: str = "exp"):
        self.claim = claim
        super().__init__(f"Claim '{claim}' has expired", {"claim": claim}, code="CLAIM_EXPIRED")


class ConfigurationError(AccessLayerException):
    """Invalid service configuration."""

    def __init__(self, message: str = "Invalid configuration", details: Optional[Dict[str, Any]] = None):
        super().__init__("CONFIGURATION_ERROR", message, details)
