import pytest

from regional_facts.core.lookup import (
    ConfigurationError,
    FactName,
    FactRegistry,
    FindInTable,
    MissingFactError,
    OutputScope,
    regional_fact,
)
from regional_facts.core.lookup.facts import BUILTIN_REGIONS


def test_concrete_region_reads_registry_directly() -> None:
    scope = OutputScope(facts=FactRegistry(), region="us-east-1")

    assert regional_fact(scope, FactName.PARTITION) == "aws"
    assert scope.tables() == []


def test_concrete_region_falls_back_to_default() -> None:
    scope = OutputScope(facts=FactRegistry(), region="us-east-1")
    assert regional_fact(scope, "Endpoint:url", "https://fallback") == "https://fallback"


def test_concrete_region_without_value_raises() -> None:
    scope = OutputScope(facts=FactRegistry(), region="us-east-1")

    with pytest.raises(MissingFactError, match="for region us-east-1"):
        regional_fact(scope, "Endpoint:url")


def test_agnostic_scope_materializes_partition_table() -> None:
    """
    Given: 리전이 정해지지 않은 스코프와 aws, aws-cn 대상 파티션
    When: partition 팩트 조회
    Then: 두 파티션의 모든 리전 행을 가진 PartitionMap 테이블 생성
    """
    scope = OutputScope(facts=FactRegistry(), target_partitions=["aws", "aws-cn"])

    result = regional_fact(scope, FactName.PARTITION)

    assert result == FindInTable("PartitionMap", "${AWS::Region}", "value")
    table = scope.find_child("PartitionMap")
    assert table.get_cell("cn-north-1", "value") == "aws-cn"
    assert table.get_cell("us-east-1", "value") == "aws"
    assert table.get_cell("us-gov-west-1", "value") is None


def test_agnostic_scope_collapses_domain_suffix() -> None:
    scope = OutputScope(facts=FactRegistry(), target_partitions=["aws", "aws-cn"])

    result = regional_fact(scope, FactName.DOMAIN_SUFFIX)

    assert result == "${AWS::URLSuffix}"
    assert scope.resolve(result) == {"Ref": "AWS::URLSuffix"}
    assert scope.tables() == []


def test_unset_partitions_cover_every_known_region() -> None:
    scope = OutputScope(facts=FactRegistry())

    regional_fact(scope, FactName.PARTITION)

    assert len(scope.find_child("PartitionMap").keys) == len(BUILTIN_REGIONS)


def test_unknown_partition_uses_default_or_fails() -> None:
    scope = OutputScope(facts=FactRegistry(), target_partitions=["aws-unknown"])

    assert regional_fact(scope, FactName.PARTITION, "aws") == "aws"
    with pytest.raises(MissingFactError, match="target-partitions"):
        regional_fact(scope, FactName.PARTITION)


@pytest.mark.parametrize("partitions", ["aws", {"aws": True}, ["aws", 1]])
def test_malformed_partitions_raise_configuration_error(partitions) -> None:
    scope = OutputScope(facts=FactRegistry(), target_partitions=partitions)

    with pytest.raises(ConfigurationError):
        regional_fact(scope, FactName.PARTITION)
