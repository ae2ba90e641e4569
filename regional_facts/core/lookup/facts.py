"""Per-region fact registry and the built-in region catalog."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Protocol, Sequence

from regional_facts.core.lookup.errors import FactConflictError


class FactName:
    """Well-known fact names."""

    DOMAIN_SUFFIX = "domainSuffix"
    PARTITION = "partition"


@dataclass(frozen=True)
class Region:
    name: str
    partition: str
    domain_suffix: str


_PARTITION_SUFFIXES = {
    "aws": "amazonaws.com",
    "aws-cn": "amazonaws.com.cn",
    "aws-us-gov": "amazonaws.com",
    "aws-iso": "c2s.ic.gov",
    "aws-iso-b": "sc2s.sgov.gov",
}

_PARTITION_REGIONS = {
    "aws": [
        "af-south-1",
        "ap-east-1",
        "ap-northeast-1",
        "ap-northeast-2",
        "ap-northeast-3",
        "ap-south-1",
        "ap-south-2",
        "ap-southeast-1",
        "ap-southeast-2",
        "ap-southeast-3",
        "ca-central-1",
        "eu-central-1",
        "eu-central-2",
        "eu-north-1",
        "eu-south-1",
        "eu-south-2",
        "eu-west-1",
        "eu-west-2",
        "eu-west-3",
        "me-central-1",
        "me-south-1",
        "sa-east-1",
        "us-east-1",
        "us-east-2",
        "us-west-1",
        "us-west-2",
    ],
    "aws-cn": ["cn-north-1", "cn-northwest-1"],
    "aws-us-gov": ["us-gov-east-1", "us-gov-west-1"],
    "aws-iso": ["us-iso-east-1", "us-iso-west-1"],
    "aws-iso-b": ["us-isob-east-1"],
}

BUILTIN_REGIONS: tuple[Region, ...] = tuple(
    Region(name=name, partition=partition, domain_suffix=_PARTITION_SUFFIXES[partition])
    for partition, names in _PARTITION_REGIONS.items()
    for name in names
)


class FactSource(Protocol):
    """Read interface the lookup engine needs from a fact registry."""

    # How users add a missing value, quoted in MissingFactError messages
    register_hint: str

    def find(self, region: str, name: str) -> Optional[str]: ...

    def domain_suffix(self, region: str) -> Optional[str]: ...

    def region_map(self, name: str, partitions: Optional[Sequence[str]] = None) -> Dict[str, str]: ...


class FactRegistry:
    """Mutable registry of ``(region, fact name) -> value``.

    Regions from the catalog are seeded with their partition and domain suffix.
    """

    register_hint = "FactRegistry.register"

    def __init__(self, regions: Iterable[Region] = BUILTIN_REGIONS, *, seed: bool = True) -> None:
        self._regions: Dict[str, Region] = {}
        self._facts: Dict[str, Dict[str, str]] = {}
        for region in regions:
            self.add_region(region, seed=seed)

    def add_region(self, region: Region, *, seed: bool = True) -> None:
        self._regions[region.name] = region
        self._facts.setdefault(region.name, {})
        if not seed:
            return
        # values registered earlier win over the catalog
        if self.find(region.name, FactName.PARTITION) is None:
            self.register(region.name, FactName.PARTITION, region.partition)
        if self.find(region.name, FactName.DOMAIN_SUFFIX) is None:
            self.register(region.name, FactName.DOMAIN_SUFFIX, region.domain_suffix)

    def regions(self, partitions: Optional[Sequence[str]] = None) -> List[str]:
        """Return known region names, optionally limited to ``partitions``."""
        names = set(self._facts)
        if partitions is not None:
            allowed = set(partitions)
            names = {name for name in names if (self._partition_of(name) or "") in allowed}
        return sorted(names)

    def register(self, region: str, name: str, value: str, allow_replacing: bool = False) -> None:
        facts = self._facts.setdefault(region, {})
        existing = facts.get(name)
        if existing is not None and existing != value and not allow_replacing:
            raise FactConflictError(
                f"Region {region} already has a fact {name}, with value {existing}"
            )
        facts[name] = value

    def unregister(self, region: str, name: str, value: Optional[str] = None) -> None:
        facts = self._facts.get(region, {})
        existing = facts.get(name)
        if existing is None:
            return
        if value is not None and existing != value:
            raise FactConflictError(
                f"Attempted to remove {name} from {region} with value {value}, but the fact's value is {existing}"
            )
        del facts[name]

    def find(self, region: str, name: str) -> Optional[str]:
        return self._facts.get(region, {}).get(name)

    def domain_suffix(self, region: str) -> Optional[str]:
        registered = self.find(region, FactName.DOMAIN_SUFFIX)
        if registered:
            return registered
        known = self._regions.get(region)
        return known.domain_suffix if known else None

    def region_map(self, name: str, partitions: Optional[Sequence[str]] = None) -> Dict[str, str]:
        """Return ``{region: value}`` for every region that has ``name`` registered."""
        result: Dict[str, str] = {}
        for region in self.regions(partitions):
            value = self.find(region, name)
            if value is not None:
                result[region] = value
        return result

    def _partition_of(self, region: str) -> Optional[str]:
        known = self._regions.get(region)
        if known is not None:
            return known.partition
        return self.find(region, FactName.PARTITION)
