"""Tests for the product client and its operations."""

import inspect
import re

import pytest

from cr_openapi_client import (
    API_VERSION,
    Client,
    Config,
    ConfigurationError,
    RuntimeOptions,
    ValidationError,
    models,
)
from tests.helpers import RecordingTransport

ACTIONS = [
    # instance
    "GetInstance", "GetInstanceCount", "GetInstanceUsage", "ListInstance",
    "ListInstanceRegion", "GetInstanceEndpoint", "ListInstanceEndpoint",
    "UpdateInstanceEndpointStatus", "CreateInstanceEndpointAclPolicy",
    "DeleteInstanceEndpointAclPolicy", "GetInstanceVpcEndpoint",
    "CreateInstanceVpcEndpointLinkedVpc", "DeleteInstanceVpcEndpointLinkedVpc",
    "GetAuthorizationToken", "ResetLoginPassword", "ChangeResourceGroup",
    "ListTagResources", "TagResources", "UntagResources",
    # namespace
    "CreateNamespace", "DeleteNamespace", "GetNamespace", "ListNamespace",
    "UpdateNamespace",
    # repository
    "CreateRepository", "DeleteRepository", "GetRepository", "ListRepository",
    "UpdateRepository", "CreateRepoTag", "DeleteRepoTag", "GetRepoTag",
    "ListRepoTag", "GetRepoTagLayers", "GetRepoTagManifest",
    # build
    "CreateRepoBuildRule", "DeleteRepoBuildRule", "UpdateRepoBuildRule",
    "ListRepoBuildRule", "CreateBuildRecordByRule", "CreateBuildRecordByRecord",
    "CancelRepoBuildRecord", "GetRepoBuildRecord", "GetRepoBuildRecordStatus",
    "ListRepoBuildRecord", "ListRepoBuildRecordLog", "CreateRepoSourceCodeRepo",
    "GetRepoSourceCodeRepo", "UpdateRepoSourceCodeRepo", "CreateArtifactBuildRule",
    "GetArtifactBuildRule", "GetArtifactBuildTask", "CancelArtifactBuildTask",
    "ListArtifactBuildTaskLog",
    # sync
    "CreateRepoSyncRule", "DeleteRepoSyncRule", "ListRepoSyncRule",
    "CreateRepoSyncTask", "CreateRepoSyncTaskByRule", "GetRepoSyncTask",
    "ListRepoSyncTask",
    # trigger
    "CreateRepoTrigger", "DeleteRepoTrigger", "UpdateRepoTrigger", "ListRepoTrigger",
    # scan
    "CreateRepoTagScanTask", "GetRepoTagScanStatus", "GetRepoTagScanSummary",
    "ListRepoTagScanResult",
    # chain
    "CreateChain", "DeleteChain", "GetChain", "ListChain", "UpdateChain",
    "ListChainInstance",
    # chart
    "CreateChartNamespace", "DeleteChartNamespace", "GetChartNamespace",
    "ListChartNamespace", "UpdateChartNamespace", "CreateChartRepository",
    "DeleteChartRepository", "GetChartRepository", "ListChartRepository",
    "UpdateChartRepository", "ListChartRelease", "DeleteChartRelease",
    # event
    "ListEventCenterRecord", "DeleteEventCenterRule",
]


def snake_case(action: str) -> str:
    return re.sub(r"(?<!^)(?=[A-Z])", "_", action).lower()


@pytest.fixture
def client(config, transport):
    return Client(config, transport=transport)


def test_client_endpoint(config):
    client = Client(config)
    assert client.endpoint == "cr.cn-hangzhou.aliyuncs.com"
    assert client.api_version == API_VERSION == "2018-12-01"


def test_client_endpoint_overrides():
    assert Client(Config(region_id="cn-shanghai", network="vpc")).endpoint == (
        "cr-vpc.cn-shanghai.aliyuncs.com"
    )
    assert Client(
        Config(region_id="cn-shanghai", endpoint_map={"cn-shanghai": "cr.internal"})
    ).endpoint == "cr.internal"
    assert Client(Config(endpoint="localhost:8080")).endpoint == "localhost:8080"


def test_client_requires_region():
    with pytest.raises(ConfigurationError):
        Client(Config())


def test_client_requires_config():
    with pytest.raises(ConfigurationError):
        Client(None)


def test_every_action_has_both_methods():
    assert len(ACTIONS) == len(set(ACTIONS)) == 89
    for action in ACTIONS:
        name = snake_case(action)
        assert inspect.iscoroutinefunction(getattr(Client, name)), name
        assert inspect.iscoroutinefunction(
            getattr(Client, f"{name}_with_options")
        ), name
        assert hasattr(models, f"{action}Request"), action
        assert hasattr(models, f"{action}Response"), action
        assert hasattr(models, f"{action}ResponseBody"), action


@pytest.mark.asyncio
@pytest.mark.parametrize("action", ACTIONS)
async def test_action_and_method(client, transport, action):
    """Get/List actions are sent as GET, everything else as POST."""
    name = snake_case(action)
    request = getattr(models, f"{action}Request")()
    # Bypass required-field checks to exercise dispatch alone
    request.validate = lambda: None

    response = await getattr(client, name)(request)

    params = transport.last["params"]
    assert params.action == action
    assert params.version == "2018-12-01"
    expected = "GET" if action.startswith(("Get", "List")) else "POST"
    assert params.method == expected
    assert isinstance(response, getattr(models, f"{action}Response"))
    assert response.body.request_id == "req-1"


@pytest.mark.asyncio
async def test_request_query_is_flattened(client, transport):
    await client.list_instance(
        models.ListInstanceRequest(
            page_no=1, page_size=30, tag=[models.Tag(key="env", value="prod")]
        )
    )
    assert transport.last["query"] == {
        "PageNo": "1",
        "PageSize": "30",
        "Tag.1.Key": "env",
        "Tag.1.Value": "prod",
    }


@pytest.mark.asyncio
async def test_validation_happens_before_send(client, transport):
    with pytest.raises(ValidationError, match="InstanceId is required."):
        await client.get_namespace(models.GetNamespaceRequest(namespace_name="team"))
    assert transport.calls == []


@pytest.mark.asyncio
async def test_runtime_options_are_passed(client, transport):
    runtime = RuntimeOptions(read_timeout=1500, ignore_ssl=True)
    await client.get_instance_with_options(
        models.GetInstanceRequest(instance_id="cri-1"), runtime
    )
    assert transport.last["runtime"] is runtime


@pytest.mark.asyncio
async def test_default_runtime_options(client, transport):
    await client.get_instance(models.GetInstanceRequest(instance_id="cri-1"))
    assert transport.last["runtime"] == RuntimeOptions()


@pytest.mark.asyncio
async def test_get_instance_count_without_request(client, transport):
    transport.body = {"Code": "success", "IsSuccess": True, "Count": 3}
    response = await client.get_instance_count()
    assert response.body.count == 3
    assert transport.last["query"] == {}


@pytest.mark.asyncio
async def test_response_decoding(config):
    transport = RecordingTransport(
        body={
            "Code": "success",
            "IsSuccess": True,
            "RequestId": "req-2",
            "Namespaces": [
                {"NamespaceName": "team", "AutoCreateRepo": True},
                {"NamespaceName": "ops", "AutoCreateRepo": False},
            ],
            "TotalCount": "2",
        }
    )
    client = Client(config, transport=transport)

    response = await client.list_namespace(
        models.ListNamespaceRequest(instance_id="cri-1")
    )

    assert response.status_code == 200
    assert response.headers == {"x-acs-request-id": "req-1"}
    assert [ns.namespace_name for ns in response.body.namespaces] == ["team", "ops"]
    assert response.body.namespaces[0].auto_create_repo is True
    assert response.body.total_count == "2"


@pytest.mark.asyncio
async def test_context_manager_with_plain_transport(config, transport):
    """Transports without open/close are accepted."""
    async with Client(config, transport=transport) as client:
        await client.get_instance(models.GetInstanceRequest(instance_id="cri-1"))
    assert len(transport.calls) == 1
