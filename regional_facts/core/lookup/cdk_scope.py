"""Lookup scope backed by an AWS CDK stack.

Tables become ``CfnMapping`` children of the stack and the deferred tokens are the
``AWS::Region`` / ``AWS::URLSuffix`` pseudo parameters.
"""

from __future__ import annotations

from typing import Dict, Optional, Sequence

from aws_cdk import Aws, CfnMapping, Stack, Token
from aws_cdk import region_info

from regional_facts.core.lookup.facts import FactSource
from regional_facts.core.lookup.lookup import TARGET_PARTITIONS
from regional_facts.core.lookup.tokens import DeferredTokens


class CdkFactRegistry:
    """Fact source reading the ``aws_cdk.region_info`` database."""

    register_hint = "aws_cdk.region_info.Fact.register"

    def find(self, region: str, name: str) -> Optional[str]:
        return region_info.Fact.find(region, name)

    def domain_suffix(self, region: str) -> Optional[str]:
        return region_info.RegionInfo.get(region).domain_suffix

    def region_map(self, name: str, partitions: Optional[Sequence[str]] = None) -> Dict[str, str]:
        if partitions is None:
            return dict(region_info.RegionInfo.region_map(name))
        return dict(region_info.RegionInfo.limited_region_map(name, list(partitions)))


class CdkLookupTable:
    """Adapts ``CfnMapping`` to the lookup table contract."""

    def __init__(self, mapping: CfnMapping) -> None:
        self.mapping = mapping

    def set_cell(self, key: str, row_key: str, literal: str) -> None:
        self.mapping.set_value(key, row_key, literal)

    def find_in_table(self, index_expression: str, row_key: str) -> str:
        return self.mapping.find_in_map(index_expression, row_key)


class CdkLookupScope:
    """Resolve regional facts against an ``aws_cdk.Stack``."""

    # CfnMapping only accepts alphanumeric second-level keys
    row_key_filler = "x"

    def __init__(
        self,
        stack: Stack,
        facts: Optional[FactSource] = None,
        target_partitions: Optional[Sequence[str]] = None,
    ) -> None:
        self.stack = stack
        self._target_partitions = target_partitions
        self.facts: FactSource = facts if facts is not None else CdkFactRegistry()
        self.tokens = DeferredTokens(region=Aws.REGION, url_suffix=Aws.URL_SUFFIX)

    @property
    def region(self) -> Optional[str]:
        region = self.stack.region
        return None if Token.is_unresolved(region) else region

    @property
    def target_partitions(self) -> Optional[Sequence[str]]:
        if self._target_partitions is not None:
            return self._target_partitions
        return self.stack.node.try_get_context(TARGET_PARTITIONS)

    def find_child(self, identity: str) -> Optional[object]:
        return self.stack.node.try_find_child(identity)

    def create_table(self, identity: str) -> CdkLookupTable:
        return CdkLookupTable(CfnMapping(self.stack, identity))

    def as_table(self, child: object) -> Optional[CdkLookupTable]:
        if isinstance(child, CfnMapping):
            return CdkLookupTable(child)
        return None
