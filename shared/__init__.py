"""
Shared utilities for the marketplace permissions engine.

This package aggregates the ambient building blocks used by the engine:

- config: Engine configuration via pydantic-settings
- logging: Structured JSON logging
- metrics: Prometheus decision counters
- errors: Canonical error types and responses

Do not import from the permissions package into shared/.
"""
