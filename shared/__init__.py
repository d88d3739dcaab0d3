"""
Shared utilities for the 254Carbon Access Layer.

This package aggregates common building blocks consumed by all services:

- config: Service configuration via pydantic-settings
- logging: Structured logging with correlation context
- errors: Canonical error types and responses
- test_helpers: Deterministic clocks and claim factories for tests

Any cross-service logic should live here to avoid import cycles across
service packages. Do not import from service-* packages into shared/.
"""
