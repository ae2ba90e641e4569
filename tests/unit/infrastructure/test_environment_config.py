from typing import cast

import pytest

from regional_facts.config import utils as config_utils
from regional_facts.config.environments import get_environment_config
from regional_facts.config.types import LookupConfig
from regional_facts.core.lookup import ConfigurationError


def _cfg(**values) -> LookupConfig:
    return cast(LookupConfig, values)


@pytest.mark.parametrize("name", ["dev", "staging", "prod"])
def test_known_environments_declare_target_partitions(name: str) -> None:
    config = get_environment_config(name)
    assert config_utils.config_string_list(config, "target_partitions")
    assert config_utils.config_string_list(config, "endpoint_facts")


def test_unknown_environment_raises_configuration_error() -> None:
    with pytest.raises(ConfigurationError, match="Unknown environment: qa"):
        get_environment_config("qa")


def test_config_string_list_dedupes_and_strips() -> None:
    config = _cfg(target_partitions=[" aws", "aws", "", None, "aws-cn"])
    assert config_utils.config_string_list(config, "target_partitions") == ["aws", "aws-cn"]
    assert config_utils.config_string_list(_cfg(), "target_partitions", default=("aws",)) == ["aws"]


def test_config_string_list_rejects_bare_string() -> None:
    with pytest.raises(ConfigurationError):
        config_utils.config_string_list(_cfg(target_partitions="aws"), "target_partitions")


def test_config_extra_facts_drops_blank_entries() -> None:
    config = _cfg(
        extra_facts={
            "us-east-1": {"Endpoint:url": "https://us", "": "ignored", "Endpoint:none": None},
            " ": {"Endpoint:url": "https://blank"},
        }
    )
    assert config_utils.config_extra_facts(config) == {"us-east-1": {"Endpoint:url": "https://us"}}
