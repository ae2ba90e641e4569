"""Development environment configuration."""

import os

dev_config = {
    "account_id": os.environ.get("CDK_DEFAULT_ACCOUNT"),
    # Environment-agnostic: facts become deploy-time lookups
    "region": None,
    "target_partitions": ["aws"],
    "extra_facts": {
        "us-east-1": {"Endpoint:market-data": "https://market.us-east-1.dev.example.com"},
        "ap-northeast-2": {"Endpoint:market-data": "https://market.ap-northeast-2.dev.example.com"},
    },
    "endpoint_facts": ["partition", "domainSuffix", "Endpoint:market-data"],
    "tags": {
        "Environment": "dev",
        "Project": "RegionalFacts",
    },
}
