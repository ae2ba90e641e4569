"""Staging environment configuration."""

import os

staging_config = {
    "account_id": os.environ.get("CDK_DEFAULT_ACCOUNT"),
    "region": None,
    # China regions get their own rows in the PartitionMap table
    "target_partitions": ["aws", "aws-cn"],
    "extra_facts": {
        "us-east-1": {"Endpoint:market-data": "https://market-staging.example.com/us"},
        "cn-north-1": {"Endpoint:market-data": "https://market-staging.example.cn/cn"},
    },
    "endpoint_facts": ["partition", "domainSuffix", "Endpoint:market-data"],
    "tags": {
        "Environment": "staging",
        "Project": "RegionalFacts",
    },
}
