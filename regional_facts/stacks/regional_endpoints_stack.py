"""Stack exporting regional facts as CloudFormation outputs."""

import re
from typing import Dict

from aws_cdk import CfnOutput, Stack
from constructs import Construct

from regional_facts.config import utils as config_utils
from regional_facts.config.types import LookupConfig
from regional_facts.core.logging_utils import get_logger
from regional_facts.core.lookup import FactRegistry, regional_fact
from regional_facts.core.lookup.cdk_scope import CdkLookupScope

logger = get_logger(__name__)


class RegionalEndpointsStack(Stack):
    """Resolve the configured facts for wherever this stack is deployed."""

    def __init__(
        self,
        scope: Construct,
        construct_id: str,
        environment: str,
        config: LookupConfig,
        **kwargs,
    ) -> None:
        super().__init__(scope, construct_id, **kwargs)

        self.env_name = environment
        self.config: LookupConfig = config

        # Unset partitions fall back to the @aws-cdk/core:target-partitions context
        partitions = config_utils.config_string_list(self.config, "target_partitions")

        self.fact_registry = self._create_fact_registry()
        self.lookup_scope = CdkLookupScope(self, facts=self.fact_registry, target_partitions=partitions or None)

        self.fact_values: Dict[str, str] = {}
        for fact_name in config_utils.config_string_list(self.config, "endpoint_facts"):
            self.fact_values[fact_name] = regional_fact(self.lookup_scope, fact_name)

        logger.info(
            "Resolved regional facts",
            extra={"environment": self.env_name, "stack": construct_id, "facts": sorted(self.fact_values)},
        )

        self._create_outputs()

    def _create_fact_registry(self) -> FactRegistry:
        """Seed the built-in catalog and register configured overrides."""
        registry = FactRegistry()
        for region, facts in config_utils.config_extra_facts(self.config).items():
            for name, value in facts.items():
                registry.register(region, name, value, allow_replacing=True)
        return registry

    @staticmethod
    def output_id(fact_name: str) -> str:
        """Build a CloudFormation-safe output id: ``Endpoint:market-data`` -> ``EndpointMarketData``."""
        parts = [part for part in re.split(r"[^A-Za-z0-9]+", fact_name) if part]
        return "".join(part[:1].upper() + part[1:] for part in parts)

    def _create_outputs(self) -> None:
        """Create CloudFormation outputs."""
        for fact_name, value in self.fact_values.items():
            CfnOutput(
                self,
                self.output_id(fact_name),
                value=value,
                description=f"Regional fact {fact_name} ({self.env_name})",
            )
