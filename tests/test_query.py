"""Tests for query flattening and value serialization."""

import pytest

from cr_openapi_client.utils.query import (
    array_to_string,
    flatten_query,
    to_query_value,
)


def test_to_query_value():
    """Booleans are lower-case, everything else uses str()."""
    assert to_query_value(True) == "true"
    assert to_query_value(False) == "false"
    assert to_query_value(20) == "20"
    assert to_query_value("cri-abc") == "cri-abc"


def test_flatten_repeat_list():
    """Lists are numbered from 1."""
    result = flatten_query({"ResourceId": ["cri-1", "cri-2"], "All": True})
    assert result == {"ResourceId.1": "cri-1", "ResourceId.2": "cri-2", "All": "true"}


def test_flatten_list_of_maps():
    """Nested maps inside lists use dotted keys."""
    result = flatten_query(
        {"Tag": [{"Key": "env", "Value": "prod"}, {"Key": "team", "Value": "ci"}]}
    )
    assert result == {
        "Tag.1.Key": "env",
        "Tag.1.Value": "prod",
        "Tag.2.Key": "team",
        "Tag.2.Value": "ci",
    }


def test_flatten_skips_none():
    """None values are not sent."""
    assert flatten_query({"InstanceId": "cri-1", "PageNo": None}) == {
        "InstanceId": "cri-1"
    }


def test_flatten_empty():
    assert flatten_query({}) == {}


def test_array_to_string_json():
    """JSON style is compact."""
    assert array_to_string(["a", "b"], "json") == '["a","b"]'
    assert array_to_string({"Key": 1}, "json") == '{"Key":1}'


@pytest.mark.parametrize(
    "style,expected",
    [
        ("simple", "a,b,3"),
        ("spaceDelimited", "a b 3"),
        ("pipeDelimited", "a|b|3"),
    ],
)
def test_array_to_string_delimited(style, expected):
    assert array_to_string(["a", "b", 3], style) == expected


def test_array_to_string_unknown_style():
    with pytest.raises(ValueError):
        array_to_string(["a"], "form")
