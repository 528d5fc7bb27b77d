"""Tests for the RPC transport against an in-process API server."""

import logging

import pytest
from aiohttp.test_utils import unused_port

from cr_openapi_client import (
    Client,
    Config,
    ConfigurationError,
    ResponseParseError,
    RuntimeOptions,
    ServiceError,
    TransportError,
    models,
)
from cr_openapi_client.core.config import Params
from cr_openapi_client.core.transport import RpcTransport, get_user_agent
from cr_openapi_client.utils.signature import get_rpc_signature
from tests.helpers import CapturingSession


def assert_signed(query, method, secret="test-key-secret"):
    signed = {key: value for key, value in query.items() if key != "Signature"}
    assert query["Signature"] == get_rpc_signature(signed, method, secret)


@pytest.mark.asyncio
async def test_get_request_is_signed(fake_api, server_config):
    fake_api.respond(
        body={
            "Code": "success",
            "IsSuccess": True,
            "RequestId": "req-1",
            "NamespaceName": "team",
            "AutoCreateRepo": True,
        }
    )

    async with Client(server_config) as client:
        response = await client.get_namespace(
            models.GetNamespaceRequest(instance_id="cri-1", namespace_name="team")
        )

    sent = fake_api.last
    assert sent["method"] == "GET"
    assert sent["path"] == "/"
    query = sent["query"]
    assert query["Action"] == "GetNamespace"
    assert query["Format"] == "json"
    assert query["Version"] == "2018-12-01"
    assert query["InstanceId"] == "cri-1"
    assert query["NamespaceName"] == "team"
    assert query["SignatureMethod"] == "HMAC-SHA1"
    assert query["SignatureVersion"] == "1.0"
    assert query["AccessKeyId"] == "test-key-id"
    assert "SecurityToken" not in query
    assert query["Timestamp"].endswith("Z")
    assert query["SignatureNonce"]
    assert_signed(query, "GET")

    headers = sent["headers"]
    assert headers["x-acs-action"] == "GetNamespace"
    assert headers["x-acs-version"] == "2018-12-01"
    assert headers["user-agent"].startswith("AlibabaCloud (")

    assert response.status_code == 200
    assert response.headers["x-acs-request-id"] == "req-1"
    assert response.body.namespace_name == "team"
    assert response.body.auto_create_repo is True


@pytest.mark.asyncio
async def test_post_request(fake_api, server_config):
    async with Client(server_config) as client:
        await client.create_namespace(
            models.CreateNamespaceRequest(
                instance_id="cri-1", namespace_name="team", auto_create_repo=True
            )
        )

    sent = fake_api.last
    assert sent["method"] == "POST"
    assert sent["query"]["AutoCreateRepo"] == "true"
    assert_signed(sent["query"], "POST")


@pytest.mark.asyncio
async def test_special_characters_are_encoded(fake_api, server_config):
    """Values arrive unchanged and the signature still matches."""
    async with Client(server_config) as client:
        await client.update_repository(
            models.UpdateRepositoryRequest(
                instance_id="cri-1", repo_id="crr-1", summary="a b*c~d/e+f=&g"
            )
        )

    query = fake_api.last["query"]
    assert query["Summary"] == "a b*c~d/e+f=&g"
    assert_signed(query, "POST")


@pytest.mark.asyncio
async def test_security_token(fake_api, server_config):
    server_config.security_token = "sts-token"
    async with Client(server_config) as client:
        await client.get_instance(models.GetInstanceRequest(instance_id="cri-1"))

    query = fake_api.last["query"]
    assert query["SecurityToken"] == "sts-token"
    assert_signed(query, "GET")


@pytest.mark.asyncio
async def test_configured_user_agent(fake_api, server_config):
    server_config.user_agent = "my-app/1.0"
    async with Client(server_config) as client:
        await client.get_instance(models.GetInstanceRequest(instance_id="cri-1"))

    assert fake_api.last["headers"]["user-agent"] == get_user_agent("my-app/1.0")
    assert get_user_agent("my-app/1.0").endswith(" my-app/1.0")


@pytest.mark.asyncio
async def test_request_without_shared_session(fake_api, server_config):
    """A session is opened per call outside the context manager."""
    client = Client(server_config)
    response = await client.get_instance(models.GetInstanceRequest(instance_id="cri-1"))

    assert response.body.request_id == "req-1"
    assert client.transport.session is None


@pytest.mark.asyncio
async def test_shared_session_lifecycle(fake_api, server_config):
    client = Client(server_config)
    async with client:
        session = client.transport.session
        assert session is not None and not session.closed
        await client.get_instance(models.GetInstanceRequest(instance_id="cri-1"))
        await client.get_instance(models.GetInstanceRequest(instance_id="cri-2"))
        assert client.transport.session is session

    assert session.closed
    assert client.transport.session is None
    assert len(fake_api.requests) == 2


@pytest.mark.asyncio
async def test_service_error(fake_api, server_config):
    fake_api.respond(
        status=400,
        body={
            "Code": "NAMESPACE_NOT_EXIST",
            "Message": "namespace not exist",
            "RequestId": "req-9",
        },
    )

    async with Client(server_config) as client:
        with pytest.raises(ServiceError) as exc_info:
            await client.get_namespace(
                models.GetNamespaceRequest(instance_id="cri-1", namespace_name="x")
            )

    error = exc_info.value
    assert error.code == "NAMESPACE_NOT_EXIST"
    assert error.status_code == 400
    assert error.request_id == "req-9"
    assert error.message == "code: 400, namespace not exist request id: req-9"
    assert error.data["Message"] == "namespace not exist"
    assert str(error) == "NAMESPACE_NOT_EXIST: code: 400, namespace not exist request id: req-9"


@pytest.mark.asyncio
async def test_service_error_lowercase_keys(fake_api, server_config):
    fake_api.respond(
        status=503,
        body={"code": "ServiceUnavailable", "message": "busy", "requestId": "req-7"},
    )

    async with Client(server_config) as client:
        with pytest.raises(ServiceError) as exc_info:
            await client.list_instance(models.ListInstanceRequest())

    assert exc_info.value.code == "ServiceUnavailable"
    assert exc_info.value.status_code == 503
    assert exc_info.value.message == "code: 503, busy request id: req-7"


@pytest.mark.asyncio
async def test_invalid_json_response(fake_api, server_config):
    fake_api.respond(status=200, text="<html>not json</html>")

    async with Client(server_config) as client:
        with pytest.raises(ResponseParseError):
            await client.list_instance(models.ListInstanceRequest())


@pytest.mark.asyncio
async def test_missing_credentials(fake_api):
    config = Config(endpoint=fake_api.endpoint, protocol="http", region_id="cn-hangzhou")

    async with Client(config) as client:
        with pytest.raises(ConfigurationError):
            await client.list_instance(models.ListInstanceRequest())

    assert fake_api.requests == []


@pytest.mark.asyncio
async def test_anonymous_request_is_not_signed(fake_api, server_config):
    transport = RpcTransport(server_config, fake_api.endpoint)
    server_config.access_key_id = None
    params = Params(
        action="ListInstanceRegion",
        version="2018-12-01",
        method="GET",
        auth_type="Anonymous",
    )

    result = await transport.do_rpc_request(params, {}, RuntimeOptions())

    assert result["statusCode"] == 200
    assert "Signature" not in fake_api.last["query"]
    assert "AccessKeyId" not in fake_api.last["query"]


@pytest.mark.asyncio
async def test_connection_error():
    config = Config(
        access_key_id="test-key-id",
        access_key_secret="test-key-secret",
        endpoint=f"127.0.0.1:{unused_port()}",
        protocol="http",
    )

    async with Client(config) as client:
        with pytest.raises(TransportError) as exc_info:
            await client.list_instance(models.ListInstanceRequest())

    assert exc_info.value.__cause__ is not None


@pytest.mark.asyncio
async def test_read_timeout(fake_api, server_config):
    fake_api.delay = 0.5

    async with Client(server_config) as client:
        with pytest.raises(TransportError):
            await client.list_instance_with_options(
                models.ListInstanceRequest(), RuntimeOptions(read_timeout=50)
            )


@pytest.mark.asyncio
async def test_request_goes_through_http_proxy(fake_api):
    """The endpoint does not resolve, so only the proxy can deliver the call."""
    config = Config(
        access_key_id="test-key-id",
        access_key_secret="test-key-secret",
        endpoint="cr.example.invalid",
        protocol="http",
        http_proxy=f"http://{fake_api.endpoint}",
    )

    async with Client(config) as client:
        response = await client.get_instance(
            models.GetInstanceRequest(instance_id="cri-1")
        )

    assert response.body.request_id == "req-1"
    assert fake_api.last["headers"]["host"] == "cr.example.invalid"
    assert fake_api.last["query"]["Action"] == "GetInstance"
    assert_signed(fake_api.last["query"], "GET")


@pytest.mark.asyncio
async def test_runtime_proxy_overrides_config(fake_api):
    config = Config(
        access_key_id="test-key-id",
        access_key_secret="test-key-secret",
        endpoint="cr.example.invalid",
        protocol="http",
        http_proxy=f"http://127.0.0.1:{unused_port()}",
    )
    runtime = RuntimeOptions(http_proxy=f"http://{fake_api.endpoint}")

    async with Client(config) as client:
        await client.get_instance_with_options(
            models.GetInstanceRequest(instance_id="cri-1"), runtime
        )

    assert fake_api.last["query"]["Action"] == "GetInstance"


@pytest.mark.asyncio
async def test_ignore_ssl_and_https_proxy(config):
    config.https_proxy = "http://proxy.example.com:3128"
    config.http_proxy = "http://unused.example.com:3128"
    transport = RpcTransport(config, "cr.cn-hangzhou.aliyuncs.com")
    transport.session = CapturingSession()
    params = Params(action="GetInstance", version="2018-12-01", method="GET")

    await transport.do_rpc_request(params, {}, RuntimeOptions(ignore_ssl=True))
    sent = transport.session.last
    assert sent["url"].scheme == "https"
    assert sent["options"]["ssl"] is False
    assert sent["options"]["proxy"] == "http://proxy.example.com:3128"

    await transport.do_rpc_request(params, {}, RuntimeOptions())
    assert "ssl" not in transport.session.last["options"]


@pytest.mark.asyncio
async def test_logs_do_not_leak_credentials(fake_api, server_config, caplog):
    caplog.set_level(logging.DEBUG, logger="cr_openapi_client")

    async with Client(server_config) as client:
        await client.get_instance(models.GetInstanceRequest(instance_id="cri-1"))
        fake_api.respond(
            status=403,
            body={"Code": "Forbidden.RAM", "Message": "denied", "RequestId": "req-3"},
        )
        with pytest.raises(ServiceError):
            await client.get_instance(models.GetInstanceRequest(instance_id="cri-1"))

    records = [r for r in caplog.records if r.name.startswith("cr_openapi_client")]
    assert any(r.levelno == logging.DEBUG for r in records)
    assert any(r.levelno == logging.WARNING for r in records)
    for record in records:
        message = record.getMessage()
        assert "Signature" not in message
        assert "AccessKeyId" not in message
        assert "test-key-id" not in message
        assert "test-key-secret" not in message
