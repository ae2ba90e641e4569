"""Helpers normalizing values read from environment configuration."""

from __future__ import annotations

from typing import Dict, Iterable, Sequence

from regional_facts.config.types import LookupConfig
from regional_facts.core.lookup.errors import ConfigurationError


def dedupe(values: Iterable[str]) -> list[str]:
    """Return items without duplicates while preserving order."""
    seen: set[str] = set()
    result: list[str] = []
    for value in values:
        text = str(value or "").strip()
        if not text or text in seen:
            continue
        seen.add(text)
        result.append(text)
    return result


def config_string_list(config: LookupConfig, key: str, default: Sequence[str] = ()) -> list[str]:
    """Return normalized list[str] from config or provide default."""
    raw_values = config.get(key)
    if isinstance(raw_values, str):
        raise ConfigurationError(f"Configuration key '{key}' must be a list of strings, got a string")
    items = list(default if raw_values is None else raw_values)  # type: ignore[arg-type]
    return dedupe(items)


def config_extra_facts(config: LookupConfig) -> Dict[str, Dict[str, str]]:
    """Return ``{region: {fact: value}}`` with blank entries dropped."""
    facts: Dict[str, Dict[str, str]] = {}
    for region, values in dict(config.get("extra_facts", {}) or {}).items():
        region_name = str(region or "").strip()
        if not region_name:
            continue
        for name, value in dict(values or {}).items():
            fact_name = str(name or "").strip()
            if not fact_name or value is None:
                continue
            facts.setdefault(region_name, {})[fact_name] = str(value)
    return facts
