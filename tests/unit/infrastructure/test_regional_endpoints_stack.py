"""Synthesize RegionalEndpointsStack for each environment and inspect its outputs."""

from __future__ import annotations

from aws_cdk import App, Environment
from aws_cdk.assertions import Template

from regional_facts.config.environments.dev import dev_config
from regional_facts.config.environments.prod import prod_config
from regional_facts.config.environments.staging import staging_config
from regional_facts.stacks.regional_endpoints_stack import RegionalEndpointsStack


def _outputs(template: Template) -> dict:
    return {name: output["Value"] for name, output in template.find_outputs("*").items()}


def test_output_id_is_cloudformation_safe() -> None:
    assert RegionalEndpointsStack.output_id("Endpoint:market-data") == "EndpointMarketData"
    assert RegionalEndpointsStack.output_id("partition") == "Partition"
    assert RegionalEndpointsStack.output_id("domainSuffix") == "DomainSuffix"


def test_dev_stack_collapses_every_fact() -> None:
    """
    Given: aws 파티션만 대상으로 하는 dev 설정 (리전 미지정)
    When: 스택 합성
    Then: 모든 팩트가 단일 표현식으로 축약되어 Mappings 섹션이 없음
    """
    app = App()
    stack = RegionalEndpointsStack(app, "Endpoints", environment="dev", config=dev_config)
    template = Template.from_stack(stack)

    outputs = _outputs(template)
    assert outputs["Partition"] == "aws"
    assert outputs["DomainSuffix"] == {"Ref": "AWS::URLSuffix"}
    assert outputs["EndpointMarketData"] == {
        "Fn::Join": ["", ["https://market.", {"Ref": "AWS::Region"}, ".dev.example.com"]]
    }
    assert "Mappings" not in template.to_json()


def test_staging_stack_materializes_tables_for_china_partition() -> None:
    app = App()
    stack = RegionalEndpointsStack(app, "Endpoints", environment="staging", config=staging_config)
    template = Template.from_stack(stack)
    mappings = template.to_json()["Mappings"]

    assert mappings["PartitionMap"]["cn-north-1"] == {"value": "aws-cn"}
    assert mappings["PartitionMap"]["us-east-1"] == {"value": "aws"}
    assert mappings["EndpointMap"] == {
        "us-east-1": {"marketxdata": "https://market-staging.example.com/us"},
        "cn-north-1": {"marketxdata": "https://market-staging.example.cn/cn"},
    }

    outputs = _outputs(template)
    assert outputs["Partition"] == {"Fn::FindInMap": ["PartitionMap", {"Ref": "AWS::Region"}, "value"]}
    assert outputs["EndpointMarketData"] == {
        "Fn::FindInMap": ["EndpointMap", {"Ref": "AWS::Region"}, "marketxdata"]
    }
    assert outputs["DomainSuffix"] == {"Ref": "AWS::URLSuffix"}


def test_prod_stack_pinned_to_region_uses_literals() -> None:
    app = App()
    stack = RegionalEndpointsStack(
        app,
        "Endpoints",
        environment="prod",
        config=prod_config,
        env=Environment(region=prod_config["region"]),
    )
    template = Template.from_stack(stack)

    assert _outputs(template) == {
        "Partition": "aws",
        "DomainSuffix": "amazonaws.com",
        "EndpointMarketData": "https://market.ap-northeast-2.example.com",
    }
    assert "Mappings" not in template.to_json()


def test_extra_facts_are_registered_on_stack_registry() -> None:
    app = App()
    stack = RegionalEndpointsStack(app, "Endpoints", environment="dev", config=dev_config)

    assert stack.fact_registry.find("us-east-1", "Endpoint:market-data") == (
        "https://market.us-east-1.dev.example.com"
    )
    assert set(stack.fact_values) == {"partition", "domainSuffix", "Endpoint:market-data"}
