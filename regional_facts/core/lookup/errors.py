"""Error types raised while resolving regional facts."""

from __future__ import annotations


class RegionLookupError(Exception):
    """Base class for regional fact lookup failures."""


class MissingFactError(RegionLookupError, LookupError):
    """Raised when no value is known for a fact and no default was supplied."""

    def __init__(self, fact_name: str, message: str) -> None:
        super().__init__(message)
        self.fact_name = fact_name


class TypeMismatchError(RegionLookupError, TypeError):
    """Raised when the scope child holding a table identity is not a lookup table."""

    def __init__(self, identity: str, found: object) -> None:
        super().__init__(
            f"Construct '{identity}' already exists in this scope but is a "
            f"{type(found).__name__}, not a lookup table"
        )
        self.identity = identity
        self.found = found


class FactConflictError(RegionLookupError, ValueError):
    """Raised when a fact registration would silently change an existing value."""


class ConfigurationError(RegionLookupError, ValueError):
    """Raised for malformed lookup configuration (partitions, environments)."""
