"""Production environment configuration."""

import os

prod_config = {
    "account_id": os.environ.get("CDK_DEFAULT_ACCOUNT"),
    "region": "ap-northeast-2",
    "target_partitions": ["aws"],
    "extra_facts": {
        "ap-northeast-2": {"Endpoint:market-data": "https://market.ap-northeast-2.example.com"},
    },
    "endpoint_facts": ["partition", "domainSuffix", "Endpoint:market-data"],
    "tags": {
        "Environment": "prod",
        "Project": "RegionalFacts",
        "Owner": "PlatformTeam",
    },
}
