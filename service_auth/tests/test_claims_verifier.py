"""
Unit tests for ClaimsVerifier.
"""

import pytest
from unittest.mock import MagicMock

from service_auth.app.claims import verify_claims
from service_auth.app.claims.models import VerificationOutcome
from service_auth.app.claims.registry import VerificationRegistry
from service_auth.app.claims.verifier import ClaimsVerifier
from shared.test_helpers import TestDataFactory


def accepting():
    return MagicMock(side_effect=lambda context, key, claims, options: VerificationOutcome.ok(claims))


def rejecting():
    return MagicMock(side_effect=lambda context, key, claims, options: VerificationOutcome.rejected(key))


class TestClaimsVerifier:
    """Test cases for ClaimsVerifier."""

    @pytest.fixture
    def registry(self):
        """Create an empty registry."""
        return VerificationRegistry()

    @pytest.fixture
    def verifier(self, registry):
        """Create ClaimsVerifier over the registry."""
        return ClaimsVerifier(registry)

    def test_accepts_all_by_default(self, verifier):
        """With no registered verifiers every claim set is valid and unchanged."""
        claims = TestDataFactory.create_test_claims()

        outcome = verifier.verify_claims(None, claims, {})

        assert outcome.valid is True
        assert outcome.claims is claims

    def test_empty_claims(self, verifier):
        """An empty claim set is trivially valid."""
        outcome = verifier.verify_claims(None, {}, None)

        assert outcome.valid is True
        assert outcome.claims == {}

    def test_first_failure_wins_and_later_claims_not_evaluated(self, registry, verifier):
        """Evaluation stops at the first rejected claim."""
        verify_a, verify_b, verify_c = accepting(), rejecting(), rejecting()
        registry.register("a", verify_a)
        registry.register("b", verify_b)
        registry.register("c", verify_c)

        outcome = verifier.verify_claims(None, {"a": 1, "b": 2, "c": 3}, {})

        assert outcome.valid is False
        assert outcome.reason == "b"
        verify_a.assert_called_once()
        verify_b.assert_called_once()
        verify_c.assert_not_called()

    def test_claims_evaluated_in_claim_set_order(self, registry, verifier):
        """Iteration follows the claim set's own order."""
        seen = []

        def recording(context, claim_key, claims, options):
            seen.append(claim_key)
            return VerificationOutcome.ok(claims)

        for key in ("z", "a", "m"):
            registry.register(key, recording)

        verifier.verify_claims(None, {"z": 1, "a": 2, "m": 3}, {})

        assert seen == ["z", "a", "m"]

    def test_normalized_claims_flow_to_next_verifier(self, registry, verifier):
        """A verifier's returned claims are what the next verifier sees."""
        def normalize_exp(context, claim_key, claims, options):
            return VerificationOutcome.ok({**claims, "exp": int(claims["exp"])})

        def check_exp_type(context, claim_key, claims, options):
            if isinstance(claims["exp"], int):
                return VerificationOutcome.ok(claims)
            return VerificationOutcome.rejected(claim_key)

        registry.register("exp", normalize_exp)
        registry.register("sub", check_exp_type)
        original = {"exp": "1700000000", "sub": "user1"}

        outcome = verifier.verify_claims(None, original, {})

        assert outcome.valid is True
        assert outcome.claims == {"exp": 1700000000, "sub": "user1"}
        assert original["exp"] == "1700000000"

    def test_context_and_options_forwarded(self, registry, verifier):
        """Every verifier receives the same context and options."""
        verify_sub = accepting()
        registry.register("sub", verify_sub)
        context = object()
        options = {"token_type": "access"}

        verifier.verify_claims(context, {"sub": "user1"}, options)

        verify_sub.assert_called_once_with(context, "sub", {"sub": "user1"}, options)

    def test_verifier_exception_rejects_claim(self, registry, verifier):
        """A crashing verifier rejects its claim and stops evaluation."""
        verify_c = accepting()
        registry.register("b", MagicMock(side_effect=RuntimeError("boom")))
        registry.register("c", verify_c)

        outcome = verifier.verify_claims(None, {"a": 1, "b": 2, "c": 3}, {})

        assert outcome.valid is False
        assert outcome.reason == "b"
        assert outcome.detail == "verifier_error"
        verify_c.assert_not_called()

    def test_module_level_verify_claims(self):
        """The convenience function uses an accept-all registry when none is given."""
        claims = {"sub": "user1"}

        assert verify_claims(None, claims) == VerificationOutcome.ok(claims)
