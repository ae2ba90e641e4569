import sys
from pathlib import Path
from typing import Callable, Optional, Sequence

import pytest

# Ensure project root is on sys.path for flexible imports
_repo_root = Path(__file__).resolve().parents[1]
_repo_root_str = str(_repo_root)
if _repo_root_str not in sys.path:
    sys.path.insert(0, _repo_root_str)

from regional_facts.core.lookup import FactRegistry, OutputScope, Region  # noqa: E402


@pytest.fixture
def example_registry() -> FactRegistry:
    """Two synthetic regions ``a`` and ``b`` sharing the ``example`` domain suffix."""
    return FactRegistry(
        regions=[
            Region(name="a", partition="test", domain_suffix="example"),
            Region(name="b", partition="test", domain_suffix="example"),
        ]
    )


@pytest.fixture
def make_scope(example_registry: FactRegistry) -> Callable[..., OutputScope]:
    """Build an in-memory output scope backed by ``example_registry`` by default."""

    def _make(
        *,
        facts: Optional[FactRegistry] = None,
        region: Optional[str] = None,
        target_partitions: Optional[Sequence[str]] = None,
    ) -> OutputScope:
        return OutputScope(
            "TestScope",
            facts=facts if facts is not None else example_registry,
            region=region,
            target_partitions=target_partitions,
        )

    return _make
