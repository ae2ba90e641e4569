"""Typed configuration contracts for environment-specific settings."""

from __future__ import annotations

from typing import Dict, List, NotRequired, TypedDict


class LookupConfig(TypedDict, total=False):
    """Strongly-typed environment configuration contract.

    ``region`` left unset synthesizes an environment-agnostic stack, in which
    case facts are resolved across every region of ``target_partitions``.
    """

    region: NotRequired[str | None]
    account_id: NotRequired[str | None]

    target_partitions: NotRequired[List[str]]

    # {region: {fact name: value}}
    extra_facts: NotRequired[Dict[str, Dict[str, str]]]
    endpoint_facts: NotRequired[List[str]]

    tags: NotRequired[Dict[str, str]]
