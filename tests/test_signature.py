"""Tests for RPC request signing."""

import base64
import hashlib
import hmac
import re

from cr_openapi_client.utils.signature import (
    build_string_to_sign,
    get_nonce,
    get_rpc_signature,
    get_timestamp,
    percent_encode,
)

SAMPLE_PARAMS = {
    "Timestamp": "2016-02-23T12:46:24Z",
    "Format": "XML",
    "AccessKeyId": "testid",
    "Action": "DescribeRegions",
    "SignatureMethod": "HMAC-SHA1",
    "SignatureNonce": "3ee8c1b8-83d3-44af-a94f-4e0ad82fd6cf",
    "Version": "2014-05-26",
    "SignatureVersion": "1.0",
}


def test_percent_encode():
    """RFC 3986 encoding: tilde stays, space and star are escaped."""
    assert percent_encode("a b") == "a%20b"
    assert percent_encode("a*b") == "a%2Ab"
    assert percent_encode("a~b") == "a~b"
    assert percent_encode("a/b") == "a%2Fb"
    assert percent_encode("a+b=") == "a%2Bb%3D"


def test_string_to_sign():
    """Parameters are sorted and encoded twice."""
    expected = (
        "GET&%2F&AccessKeyId%3Dtestid%26Action%3DDescribeRegions%26Format%3DXML"
        "%26SignatureMethod%3DHMAC-SHA1"
        "%26SignatureNonce%3D3ee8c1b8-83d3-44af-a94f-4e0ad82fd6cf"
        "%26SignatureVersion%3D1.0%26Timestamp%3D2016-02-23T12%253A46%253A24Z"
        "%26Version%3D2014-05-26"
    )
    assert build_string_to_sign(SAMPLE_PARAMS, "get") == expected


def test_rpc_signature():
    """Signature is base64 HMAC-SHA1 keyed with the secret and an ampersand."""
    string_to_sign = build_string_to_sign(SAMPLE_PARAMS, "GET")
    expected = base64.b64encode(
        hmac.new(b"testsecret&", string_to_sign.encode(), hashlib.sha1).digest()
    ).decode()

    assert get_rpc_signature(SAMPLE_PARAMS, "GET", "testsecret") == expected
    assert get_rpc_signature(SAMPLE_PARAMS, "POST", "testsecret") != expected


def test_timestamp_format():
    assert re.fullmatch(r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}Z", get_timestamp())


def test_nonce_is_unique():
    assert get_nonce() != get_nonce()
