"""Detect lookup maps that reduce to a single tokenized expression."""

from __future__ import annotations

from typing import Callable, Dict, Mapping, Optional, Sequence

from regional_facts.core.lookup.tokenizer import Substitution, tokenize

SubstitutionProvider = Callable[[str], Sequence[Substitution]]


def tokenized_map(lookup_map: Mapping[str, str], substitutions_for: SubstitutionProvider) -> Dict[str, str]:
    """Return the tokenized form of every value, keyed like ``lookup_map``."""
    return {key: tokenize(value, substitutions_for(key)) for key, value in lookup_map.items()}


def try_collapse(lookup_map: Mapping[str, str], substitutions_for: SubstitutionProvider) -> Optional[str]:
    """Return the shared tokenized value, or None when the values differ."""
    tokenized = list(tokenized_map(lookup_map, substitutions_for).values())
    if not tokenized:
        return None
    first = tokenized[0]
    if all(value == first for value in tokenized):
        return first
    return None
