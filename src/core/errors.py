"""Data cube exception hierarchy.

This module defines traceable domain errors with clear boundaries.
Errors raised by caller-supplied functions are never wrapped in these.
"""

from __future__ import annotations


class DataCubeError(Exception):
    """Base exception for all data cube failures."""


class CubeConfigError(DataCubeError):
    """Raised for invalid runtime configuration."""


class DomainCounterError(DataCubeError, LookupError):
    """Raised when domain counters drift out of sync with the cube index."""


class CubeArityError(DataCubeError, ValueError):
    """Raised when a position does not match the arity of a fixed cube."""


class OptionEmptyError(DataCubeError, LookupError):
    """Raised when reading the value of an empty option."""
