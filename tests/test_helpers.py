"""Tests for registry login helpers."""

from datetime import datetime, timezone

import pytest

from cr_openapi_client import (
    Client,
    Config,
    CredentialError,
    get_authorization_credentials,
    get_instance_id,
    get_registry_credentials,
    parse_registry_domain,
)
from tests.helpers import RecordingTransport

EXPIRE_MS = 1700000000000
EXPIRE_TIME = datetime(2023, 11, 14, 22, 13, 20, tzinfo=timezone.utc)


@pytest.mark.parametrize(
    "server_url,instance_name,region,is_enterprise",
    [
        ("myinstance-registry.cn-hangzhou.cr.aliyuncs.com", "myinstance", "cn-hangzhou", True),
        ("myinstance-registry-vpc.cn-shanghai.cr.aliyuncs.com", "myinstance", "cn-shanghai", True),
        ("my-team-registry-intl.ap-southeast-1.cr.aliyuncs.com", "my-team", "ap-southeast-1", True),
        ("registry.cn-hangzhou.aliyuncs.com", "", "cn-hangzhou", False),
        ("registry-vpc.cn-beijing.aliyuncs.com", "", "cn-beijing", False),
        ("registry-intl-internal.eu-central-1.aliyuncs.com", "", "eu-central-1", False),
    ],
)
def test_parse_registry_domain(server_url, instance_name, region, is_enterprise):
    registry = parse_registry_domain(server_url)
    assert registry.domain == server_url
    assert registry.instance_name == instance_name
    assert registry.region == region
    assert registry.is_enterprise is is_enterprise
    assert registry.instance_id == ""


def test_parse_registry_url_with_scheme_and_path():
    registry = parse_registry_domain(
        "https://myinstance-registry.cn-hangzhou.cr.aliyuncs.com/v2/"
    )
    assert registry.domain == "myinstance-registry.cn-hangzhou.cr.aliyuncs.com"
    assert registry.instance_name == "myinstance"


@pytest.mark.parametrize(
    "server_url",
    ["docker.io", "ghcr.io/owner/image", "example.aliyuncs.com"],
)
def test_parse_unknown_domain(server_url):
    with pytest.raises(CredentialError):
        parse_registry_domain(server_url)


def test_parse_with_environment_overrides(monkeypatch):
    monkeypatch.setenv("DOCKER_CREDENTIAL_ACR_HELPER_INSTANCE_ID", "cri-xyz")
    monkeypatch.setenv("DOCKER_CREDENTIAL_ACR_HELPER_REGION", "cn-beijing")

    registry = parse_registry_domain("registry.example.com")

    assert registry.domain == "registry.example.com"
    assert registry.instance_id == "cri-xyz"
    assert registry.region == "cn-beijing"
    assert registry.is_enterprise is True


def test_parse_with_instance_id_override_only(monkeypatch):
    """The region still comes from the domain."""
    monkeypatch.setenv("DOCKER_CREDENTIAL_ACR_HELPER_INSTANCE_ID", "cri-xyz")

    registry = parse_registry_domain("myinstance-registry.cn-hangzhou.cr.aliyuncs.com")

    assert registry.instance_id == "cri-xyz"
    assert registry.region == "cn-hangzhou"
    assert registry.is_enterprise is True


def test_parse_personal_domain_with_instance_id_override(monkeypatch):
    """Without a region override the parsed domain decides the edition."""
    monkeypatch.setenv("DOCKER_CREDENTIAL_ACR_HELPER_INSTANCE_ID", "cri-xyz")

    registry = parse_registry_domain("registry.cn-hangzhou.aliyuncs.com")

    assert registry.instance_id == "cri-xyz"
    assert registry.instance_name == ""
    assert registry.region == "cn-hangzhou"
    assert registry.is_enterprise is False


def test_parse_invalid_address():
    with pytest.raises(CredentialError, match="Invalid registry address"):
        parse_registry_domain("https://[bad.aliyuncs.com")


@pytest.mark.asyncio
async def test_get_instance_id(config):
    transport = RecordingTransport(
        body={
            "IsSuccess": True,
            "Instances": [{"InstanceId": "cri-1", "InstanceName": "prod"}],
        }
    )
    client = Client(config, transport=transport)

    assert await get_instance_id(client, "prod") == "cri-1"
    assert transport.last["params"].action == "ListInstance"
    assert transport.last["query"] == {"InstanceName": "prod"}


@pytest.mark.asyncio
async def test_get_instance_id_not_found(config):
    transport = RecordingTransport(body={"IsSuccess": True, "Instances": []})
    client = Client(config, transport=transport)

    with pytest.raises(CredentialError, match="not found"):
        await get_instance_id(client, "missing")


@pytest.mark.asyncio
async def test_get_authorization_credentials(config):
    transport = RecordingTransport(
        body={
            "IsSuccess": True,
            "AuthorizationToken": "token",
            "TempUsername": "cr_temp_user",
            "ExpireTime": EXPIRE_MS,
        }
    )
    client = Client(config, transport=transport)

    creds = await get_authorization_credentials(client, "cri-1")

    assert creds.username == "cr_temp_user"
    assert creds.password == "token"
    assert creds.expire_time == EXPIRE_TIME
    assert transport.last["params"].action == "GetAuthorizationToken"
    assert transport.last["query"] == {"InstanceId": "cri-1"}


@pytest.mark.asyncio
async def test_get_authorization_credentials_failure(config):
    transport = RecordingTransport(body={"IsSuccess": False, "Code": "Forbidden"})
    client = Client(config, transport=transport)

    with pytest.raises(CredentialError):
        await get_authorization_credentials(client, "cri-1")


@pytest.mark.asyncio
async def test_get_registry_credentials_personal_edition():
    with pytest.raises(CredentialError, match="personal edition"):
        await get_registry_credentials("registry.cn-hangzhou.aliyuncs.com")


@pytest.mark.asyncio
async def test_get_registry_credentials(fake_api):
    # One canned body satisfies both ListInstance and GetAuthorizationToken
    fake_api.respond(
        body={
            "IsSuccess": True,
            "RequestId": "req-1",
            "Instances": [{"InstanceId": "cri-1", "InstanceName": "myinstance"}],
            "AuthorizationToken": "token",
            "TempUsername": "cr_temp_user",
            "ExpireTime": EXPIRE_MS,
        }
    )
    config = Config(
        access_key_id="test-key-id",
        access_key_secret="test-key-secret",
        endpoint=fake_api.endpoint,
        protocol="http",
    )

    creds = await get_registry_credentials(
        "myinstance-registry.cn-hangzhou.cr.aliyuncs.com", config
    )

    assert creds.username == "cr_temp_user"
    assert creds.password == "token"
    assert creds.expire_time == EXPIRE_TIME
    # The caller's config is left untouched
    assert config.region_id is None

    actions = [request["query"]["Action"] for request in fake_api.requests]
    assert actions == ["ListInstance", "GetAuthorizationToken"]
    assert fake_api.requests[0]["query"]["InstanceName"] == "myinstance"
    assert fake_api.requests[1]["query"]["InstanceId"] == "cri-1"
