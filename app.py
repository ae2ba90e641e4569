#!/usr/bin/env python3
"""
Regional Facts CDK App
Synthesizes per-environment stacks whose outputs are resolved from regional facts.
"""

import aws_cdk as cdk

from regional_facts.config.environments import get_environment_config
from regional_facts.stacks.regional_endpoints_stack import RegionalEndpointsStack

app = cdk.App()

# Get environment configuration
environment = app.node.try_get_context("environment") or "dev"
config = get_environment_config(environment)

# Leaving region unset keeps the stack environment-agnostic
cdk_env = cdk.Environment(account=config.get("account_id"), region=config.get("region"))

stack_prefix = f"RegionalFacts-{environment}"

endpoints_stack = RegionalEndpointsStack(
    app,
    f"{stack_prefix}-Endpoints",
    environment=environment,
    config=config,
    env=cdk_env,
)

# ========================================
# TAGGING STRATEGY
# ========================================

for key, value in (config.get("tags") or {}).items():
    cdk.Tags.of(app).add(key, value)
cdk.Tags.of(app).add("ManagedBy", "CDK")

app.synth()
