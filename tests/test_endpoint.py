"""Tests for endpoint resolution."""

import pytest

from cr_openapi_client.core.endpoint import get_endpoint_rules, resolve_endpoint
from cr_openapi_client.exceptions import ConfigurationError


def test_regional_rule():
    assert get_endpoint_rules("cr", "cn-hangzhou", "regional") == (
        "cr.cn-hangzhou.aliyuncs.com"
    )


def test_central_rule():
    assert get_endpoint_rules("CR", None, "central") == "cr.aliyuncs.com"


@pytest.mark.parametrize(
    "network,suffix,expected",
    [
        ("public", None, "cr.cn-beijing.aliyuncs.com"),
        ("", None, "cr.cn-beijing.aliyuncs.com"),
        ("vpc", None, "cr-vpc.cn-beijing.aliyuncs.com"),
        (None, "inner", "cr-inner.cn-beijing.aliyuncs.com"),
        ("share", "inner", "cr-inner-share.cn-beijing.aliyuncs.com"),
    ],
)
def test_network_and_suffix(network, suffix, expected):
    assert get_endpoint_rules("cr", "cn-beijing", "regional", network, suffix) == expected


def test_regional_rule_requires_region():
    with pytest.raises(ConfigurationError, match="RegionId"):
        get_endpoint_rules("cr", "", "regional")


def test_explicit_endpoint_wins():
    endpoint = resolve_endpoint(
        "cr",
        "cn-hangzhou",
        "regional",
        endpoint_map={"cn-hangzhou": "mapped.example.com"},
        endpoint="explicit.example.com",
    )
    assert endpoint == "explicit.example.com"


def test_endpoint_map_before_rule():
    endpoint = resolve_endpoint(
        "cr",
        "cn-hangzhou",
        "regional",
        endpoint_map={"cn-hangzhou": "mapped.example.com"},
    )
    assert endpoint == "mapped.example.com"


def test_endpoint_map_other_region_falls_back_to_rule():
    endpoint = resolve_endpoint(
        "cr",
        "cn-shanghai",
        "regional",
        endpoint_map={"cn-hangzhou": "mapped.example.com"},
    )
    assert endpoint == "cr.cn-shanghai.aliyuncs.com"
