"""
Error taxonomy for the aggregation engine.

Every error is raised synchronously at the calculator boundary and
propagates to the caller unchanged.
"""

from __future__ import annotations


class WealthDashError(Exception):
    """Base class for all engine errors."""


class ValidationError(WealthDashError, ValueError):
    """A malformed entity reached a calculator (negative amount, share count, price...)."""


class ConfigurationError(WealthDashError, LookupError):
    """Unsupported configuration value, e.g. an unknown currency code."""
