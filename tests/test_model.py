"""Tests for request and response models."""

import json

import pytest

from cr_openapi_client.exceptions import ValidationError
from cr_openapi_client.models import (
    ChainConfig,
    ChainNode,
    ChainNodeRef,
    ChainRouter,
    CreateArtifactBuildRuleRequest,
    CreateChainRequest,
    CreateNamespaceRequest,
    GetRepoSyncTaskResponse,
    GetRepoTagManifestResponseBody,
    ListInstanceRequest,
    ListInstanceResponse,
    Tag,
    TagResourcesRequest,
    UntagResourcesRequest,
)


def test_validate_required_field():
    """Missing required fields are reported by wire name."""
    with pytest.raises(ValidationError, match="InstanceId is required."):
        CreateNamespaceRequest(namespace_name="team").validate()


def test_validate_passes():
    CreateNamespaceRequest(instance_id="cri-1", namespace_name="team").validate()
    ListInstanceRequest().validate()


def test_validate_nested_models():
    """Nested response bodies are checked too."""
    response = ListInstanceResponse(headers={}, status_code=200, body=None)
    with pytest.raises(ValidationError, match="body is required."):
        response.validate()


def test_to_map_uses_wire_names_and_skips_none():
    request = CreateNamespaceRequest(
        instance_id="cri-1", namespace_name="team", auto_create_repo=True
    )
    assert request.to_map() == {
        "InstanceId": "cri-1",
        "NamespaceName": "team",
        "AutoCreateRepo": True,
    }


def test_to_query_flattens_repeat_lists():
    request = TagResourcesRequest(
        region_id="cn-hangzhou",
        resource_type="INSTANCE",
        resource_id=["cri-1", "cri-2"],
        tag=[Tag(key="env", value="prod")],
    )
    assert request.to_query() == {
        "RegionId": "cn-hangzhou",
        "ResourceType": "INSTANCE",
        "ResourceId.1": "cri-1",
        "ResourceId.2": "cri-2",
        "Tag.1.Key": "env",
        "Tag.1.Value": "prod",
    }


def test_to_query_renders_booleans():
    request = UntagResourcesRequest(
        region_id="cn-hangzhou",
        resource_type="INSTANCE",
        resource_id=["cri-1"],
        all=True,
    )
    assert request.to_query()["All"] == "true"


def test_to_query_json_style():
    """Fields with a serialization style become one JSON value."""
    request = CreateArtifactBuildRuleRequest(
        instance_id="cri-1",
        artifact_type="ACCELERATED_IMAGE",
        scope_type="REPOSITORY",
        scope_id="crr-1",
        parameters={"ImageIndexOnly": True},
    )
    query = request.to_query()
    assert query["Parameters"] == '{"ImageIndexOnly":true}'
    assert "Parameters.ImageIndexOnly" not in query


def test_to_query_nested_json_style():
    config = ChainConfig(
        nodes=[ChainNode(node_name="DOCKER_IMAGE_BUILD", enable=True)],
        routers=[
            ChainRouter(
                from_node=ChainNodeRef(node_name="START"),
                to_node=ChainNodeRef(node_name="DOCKER_IMAGE_BUILD"),
            )
        ],
    )
    request = CreateChainRequest(
        instance_id="cri-1",
        name="delivery",
        chain_config=config,
        scope_exclude=["repo-a"],
    )
    query = request.to_query()

    assert json.loads(query["ChainConfig"]) == {
        "Nodes": [{"NodeName": "DOCKER_IMAGE_BUILD", "Enable": True}],
        "Routers": [
            {"From": {"NodeName": "START"}, "To": {"NodeName": "DOCKER_IMAGE_BUILD"}}
        ],
    }
    assert query["ScopeExclude"] == '["repo-a"]'


def test_from_map_nested_lists():
    response = ListInstanceResponse.from_map(
        {
            "headers": {"x-acs-request-id": "req-1"},
            "statusCode": 200,
            "body": {
                "Code": "success",
                "IsSuccess": True,
                "RequestId": "req-1",
                "TotalCount": 1,
                "Instances": [
                    {
                        "InstanceId": "cri-1",
                        "InstanceName": "prod",
                        "InstanceStatus": "RUNNING",
                    }
                ],
                "Unknown": "ignored",
            },
        }
    )

    assert response.status_code == 200
    assert response.body.is_success is True
    assert response.body.total_count == 1
    assert response.body.instances[0].instance_id == "cri-1"
    assert response.body.instances[0].instance_name == "prod"
    assert response.body.page_no is None


def test_from_map_nested_models():
    response = GetRepoSyncTaskResponse.from_map(
        {
            "headers": {},
            "statusCode": 200,
            "body": {
                "SyncTaskId": "rst-1",
                "TaskStatus": "SUCCESS",
                "ImageFrom": {"RepoName": "app", "ImageTag": "v1"},
                "LayerTasks": [{"Digest": "sha256:abc", "Size": 12}],
            },
        }
    )

    assert response.body.image_from.repo_name == "app"
    assert response.body.image_from.image_tag == "v1"
    assert response.body.image_to is None
    assert response.body.layer_tasks[0].size == 12


def test_from_map_manifest():
    body = GetRepoTagManifestResponseBody.from_map(
        {
            "Manifest": {
                "SchemaVersion": 2,
                "Config": {"Digest": "sha256:cfg", "Size": 10},
                "Layers": [{"Digest": "sha256:l1", "Size": 20}],
            }
        }
    )
    assert body.manifest.schema_version == 2
    assert body.manifest.config.digest == "sha256:cfg"
    assert body.manifest.layers[0].size == 20


def test_round_trip_map():
    request = TagResourcesRequest(
        region_id="cn-hangzhou",
        resource_type="INSTANCE",
        resource_id=["cri-1"],
        tag=[Tag(key="env", value="prod")],
    )
    assert TagResourcesRequest.from_map(request.to_map()) == request


def test_set_is_chainable():
    request = ListInstanceRequest().set(page_no=2, page_size=50)
    assert request.page_no == 2
    assert request.page_size == 50


def test_set_unknown_field():
    with pytest.raises(AttributeError):
        ListInstanceRequest().set(page_number=2)


def test_str_is_json():
    request = CreateNamespaceRequest(instance_id="cri-1", namespace_name="team")
    assert json.loads(str(request)) == {"InstanceId": "cri-1", "NamespaceName": "team"}
