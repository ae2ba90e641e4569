"""Deterministic naming for lookup tables and their rows."""

from __future__ import annotations

import re
from typing import Tuple

DEFAULT_FACT_PARAM = "value"
DEFAULT_ROW_KEY_FILLER = "_"

_NON_ALPHANUMERIC = re.compile(r"[^A-Za-z0-9]")


def split_fact_name(fact_name: str) -> Tuple[str, str]:
    """Split ``"<class>:<param>"`` on the first colon; bare names use param ``value``."""
    fact_class, sep, fact_param = fact_name.partition(":")
    if not sep:
        return fact_name, DEFAULT_FACT_PARAM
    return fact_class, fact_param


def ucfirst(text: str) -> str:
    return text[:1].upper() + text[1:]


def table_identity(fact_class: str) -> str:
    """Return the table construct id shared by every fact of ``fact_class``."""
    return f"{ucfirst(fact_class)}Map"


def row_key(fact_param: str, filler: str = DEFAULT_ROW_KEY_FILLER) -> str:
    """Replace every character outside ``[A-Za-z0-9]`` with ``filler``."""
    return _NON_ALPHANUMERIC.sub(filler, fact_param)


def fact_table_coordinates(fact_name: str, filler: str = DEFAULT_ROW_KEY_FILLER) -> Tuple[str, str]:
    """Return ``(table identity, row key)`` for a fact name."""
    fact_class, fact_param = split_fact_name(fact_name)
    return table_identity(fact_class), row_key(fact_param, filler)
