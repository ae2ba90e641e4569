"""Deferred-value tokens used as substitution targets and lookup discriminators."""

from __future__ import annotations

import re
from dataclasses import dataclass


@dataclass(frozen=True)
class DeferredTokens:
    """Well-known placeholders for values only known at deploy time.

    ``region`` doubles as the discriminator of materialized lookup tables.
    """

    region: str
    url_suffix: str


REGION_MARKER = "${AWS::Region}"
URL_SUFFIX_MARKER = "${AWS::URLSuffix}"

PSEUDO_TOKENS = DeferredTokens(region=REGION_MARKER, url_suffix=URL_SUFFIX_MARKER)

# ${AWS::Region} -> AWS::Region
PSEUDO_PARAMETER_PATTERN = re.compile(r"\$\{(AWS::[A-Za-z]+)\}")


def contains_marker(value: str) -> bool:
    """Return True when ``value`` embeds at least one pseudo-parameter marker."""
    return PSEUDO_PARAMETER_PATTERN.search(value) is not None
