"""Rewrite per-region literals into their deferred-token form.

Values such as ``sqs.us-east-1.amazonaws.com`` and ``sqs.cn-north-1.amazonaws.com.cn``
only differ by the region code and the domain suffix. Replacing both with their
deploy-time tokens exposes the shared pattern.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from regional_facts.core.lookup.tokens import DeferredTokens

DOMAIN_SUFFIX = "domain_suffix"
REGION = "region"


@dataclass(frozen=True)
class Substitution:
    """Concrete literal for one key and the token that replaces it."""

    name: str
    concrete: Optional[str]
    token: str


def region_substitutions(
    region: str,
    domain_suffix: Optional[str],
    tokens: DeferredTokens,
) -> Tuple[Substitution, ...]:
    """Return the substitutions for ``region`` in application order.

    The domain suffix goes first so a region code can never match inside a
    suffix that is about to be tokenized.
    """
    return (
        Substitution(DOMAIN_SUFFIX, domain_suffix, tokens.url_suffix),
        Substitution(REGION, region, tokens.region),
    )


def tokenize(value: str, substitutions: Sequence[Substitution]) -> str:
    """Replace every literal occurrence of each substitution with its token.

    Substitutions without a concrete value are skipped. Inserted tokens are
    never scanned again by later substitutions.
    """
    # (text, is_token) pieces
    pieces: List[Tuple[str, bool]] = [(value, False)]
    for substitution in substitutions:
        concrete = substitution.concrete
        if not concrete:
            continue
        rewritten: List[Tuple[str, bool]] = []
        for text, is_token in pieces:
            if is_token or concrete not in text:
                rewritten.append((text, is_token))
                continue
            for index, part in enumerate(text.split(concrete)):
                if index:
                    rewritten.append((substitution.token, True))
                if part:
                    rewritten.append((part, False))
        pieces = rewritten
    return "".join(text for text, _ in pieces)
