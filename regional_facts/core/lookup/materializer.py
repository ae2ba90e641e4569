"""Persist non-collapsible lookup maps as per-scope tables."""

from __future__ import annotations

from typing import Mapping

from regional_facts.core.logging_utils import get_logger
from regional_facts.core.lookup.errors import TypeMismatchError
from regional_facts.core.lookup.identity import fact_table_coordinates
from regional_facts.core.lookup.scope import Expression, LookupScope, LookupTable

logger = get_logger(__name__)


def find_or_create_table(scope: LookupScope, identity: str) -> LookupTable:
    """Return the scope's table called ``identity``, creating it on first use."""
    child = scope.find_child(identity)
    if child is None:
        logger.debug("Creating lookup table", extra={"table": identity})
        return scope.create_table(identity)

    table = scope.as_table(child)
    if table is None:
        raise TypeMismatchError(identity, child)
    logger.debug("Reusing lookup table", extra={"table": identity})
    return table


def materialize(scope: LookupScope, fact_name: str, lookup_map: Mapping[str, str]) -> Expression:
    """Write ``lookup_map`` into the fact's table and return a deploy-time lookup.

    Cells already present are overwritten; the last write wins.
    """
    identity, key = fact_table_coordinates(fact_name, scope.row_key_filler)
    table = find_or_create_table(scope, identity)
    for region, value in lookup_map.items():
        table.set_cell(region, key, value)
    logger.debug(
        "Populated lookup table",
        extra={"fact": fact_name, "table": identity, "row_key": key, "cells": len(lookup_map)},
    )
    return table.find_in_table(scope.tokens.region, key)
