"""Regional fact lookup: collapse per-region values or materialize lookup tables."""

from .errors import (
    ConfigurationError,
    FactConflictError,
    MissingFactError,
    RegionLookupError,
    TypeMismatchError,
)
from .facts import FactName, FactRegistry, Region
from .identity import fact_table_coordinates, row_key, split_fact_name, table_identity
from .lookup import TARGET_PARTITIONS, deploy_time_lookup, regional_fact
from .scope import FindInTable, MappingTable, OutputScope
from .tokens import PSEUDO_TOKENS, DeferredTokens

__all__ = [
    "ConfigurationError",
    "DeferredTokens",
    "FactConflictError",
    "FactName",
    "FactRegistry",
    "FindInTable",
    "MappingTable",
    "MissingFactError",
    "OutputScope",
    "PSEUDO_TOKENS",
    "Region",
    "RegionLookupError",
    "TARGET_PARTITIONS",
    "TypeMismatchError",
    "deploy_time_lookup",
    "fact_table_coordinates",
    "regional_fact",
    "row_key",
    "split_fact_name",
    "table_identity",
]
