"""
Auth Service package for the 254Carbon Access Layer.

This package holds the claims verification engine that decides whether a
decoded token's claims are acceptable:

- app.claims: Per-claim verifiers, drift tolerance, literal matching.
- app.validation: The validator combining those checks for callers.

Design notes:
- Keep the package import side-effects minimal; nothing here performs IO.
  Time and configuration are injected (Clock, ConfigAccessor).
- Use the shared/ utilities for logging, configuration and errors.
- Treat this package as stateless; token decoding and signature checks
  belong to the calling pipeline.
"""
