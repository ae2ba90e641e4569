"""Resolve regional facts into template expressions at synthesis time."""

from __future__ import annotations

from typing import List, Mapping, Optional, Sequence

from regional_facts.core.logging_utils import get_logger
from regional_facts.core.lookup.collapse import try_collapse
from regional_facts.core.lookup.errors import ConfigurationError, MissingFactError
from regional_facts.core.lookup.materializer import materialize
from regional_facts.core.lookup.scope import Expression, LookupScope
from regional_facts.core.lookup.tokenizer import Substitution, region_substitutions

TARGET_PARTITIONS = "@aws-cdk/core:target-partitions"

logger = get_logger(__name__)


def substitution_provider(scope: LookupScope):
    """Return a callable yielding the ordered substitutions for one region."""

    def _for_region(region: str) -> Sequence[Substitution]:
        return region_substitutions(region, scope.facts.domain_suffix(region), scope.tokens)

    return _for_region


def deploy_time_lookup(
    scope: LookupScope,
    fact_name: str,
    lookup_map: Mapping[str, str],
    default_value: Optional[str] = None,
) -> Expression:
    """Return an expression for ``fact_name`` that is valid in every region of ``lookup_map``.

    Args:
        scope: Scope that owns any lookup table this call needs.
        fact_name: ``"<class>:<param>"`` or a bare fact name.
        lookup_map: Region to literal value.
        default_value: Returned verbatim when ``lookup_map`` is empty.

    Returns:
        The literal default, a single tokenized string when all values share a
        pattern, or a deferred table lookup indexed by the deploy-time region.

    Raises:
        MissingFactError: ``lookup_map`` is empty and no default was given.
        TypeMismatchError: the table identity is taken by a different construct.
    """
    if not lookup_map:
        if default_value is None:
            raise MissingFactError(
                fact_name,
                f"region-info: don't have any information for {fact_name}. Use '{scope.facts.register_hint}' "
                f"to provide values, or add partitions to the '{TARGET_PARTITIONS}' context value.",
            )
        return default_value

    collapsed = try_collapse(lookup_map, substitution_provider(scope))
    if collapsed is not None:
        logger.debug("Collapsed regional fact", extra={"fact": fact_name, "regions": len(lookup_map)})
        return collapsed

    return materialize(scope, fact_name, lookup_map)


def _target_partitions(scope: LookupScope) -> Optional[List[str]]:
    partitions = scope.target_partitions
    if partitions is None:
        return None
    if isinstance(partitions, str) or not isinstance(partitions, (list, tuple)):
        raise ConfigurationError(f"Context value '{TARGET_PARTITIONS}' should be a list of strings, got: {partitions!r}")
    if not all(isinstance(item, str) for item in partitions):
        raise ConfigurationError(f"Context value '{TARGET_PARTITIONS}' should be a list of strings, got: {partitions!r}")
    return list(partitions)


def regional_fact(scope: LookupScope, fact_name: str, default_value: Optional[str] = None) -> Expression:
    """Return ``fact_name`` for the scope's region.

    A concrete region is answered straight from the fact registry. Otherwise the
    value is looked up across every region of the target partitions.
    """
    region = scope.region
    if region is not None:
        value = scope.facts.find(region, fact_name)
        if value is None:
            value = default_value
        if value is None:
            raise MissingFactError(
                fact_name,
                f"region-info: don't know {fact_name} for region {region}. "
                f"Use '{scope.facts.register_hint}' to provide this value.",
            )
        return value

    lookup_map = scope.facts.region_map(fact_name, _target_partitions(scope))
    return deploy_time_lookup(scope, fact_name, lookup_map, default_value)
