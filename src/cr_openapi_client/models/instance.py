"""Instance, endpoint, credential and resource tag models."""

from dataclasses import dataclass

from ..core.model import ApiResponse, Model, ResponseBody, wire


@dataclass
class Tag(Model):
    """Resource tag as sent in requests."""

    key: str | None = wire("Key")
    value: str | None = wire("Value")


@dataclass
class InstanceTag(Model):
    """Resource tag as returned by the service."""

    tag_key: str | None = wire("TagKey")
    tag_value: str | None = wire("TagValue")


@dataclass
class Instance(Model):
    instance_id: str | None = wire("InstanceId")
    instance_name: str | None = wire("InstanceName")
    instance_specification: str | None = wire("InstanceSpecification")
    instance_status: str | None = wire("InstanceStatus")
    create_time: int | None = wire("CreateTime")
    modified_time: int | None = wire("ModifiedTime")
    region_id: str | None = wire("RegionId")
    resource_group_id: str | None = wire("ResourceGroupId")


@dataclass
class AclEntry(Model):
    entry: str | None = wire("Entry")
    comment: str | None = wire("Comment")


@dataclass
class EndpointDomain(Model):
    domain: str | None = wire("Domain")
    type: str | None = wire("Type")


@dataclass
class Endpoint(Model):
    endpoint_type: str | None = wire("EndpointType")
    enable: bool | None = wire("Enable")
    status: str | None = wire("Status")
    acl_enable: bool | None = wire("AclEnable")
    acl_entries: list[AclEntry] | None = wire("AclEntries")
    domains: list[EndpointDomain] | None = wire("Domains")


@dataclass
class LinkedVpc(Model):
    vpc_id: str | None = wire("VpcId")
    vswitch_id: str | None = wire("VswitchId")
    ip: str | None = wire("Ip")
    default_access: bool | None = wire("DefaultAccess")
    status: str | None = wire("Status")


@dataclass
class Region(Model):
    region_id: str | None = wire("RegionId")
    local_name: str | None = wire("LocalName")


@dataclass
class TagResource(Model):
    resource_id: str | None = wire("ResourceId")
    resource_type: str | None = wire("ResourceType")
    tag_key: str | None = wire("TagKey")
    tag_value: str | None = wire("TagValue")


# GetInstance


@dataclass
class GetInstanceRequest(Model):
    instance_id: str | None = wire("InstanceId", required=True)


@dataclass
class GetInstanceResponseBody(ResponseBody):
    instance_id: str | None = wire("InstanceId")
    instance_name: str | None = wire("InstanceName")
    instance_specification: str | None = wire("InstanceSpecification")
    instance_status: str | None = wire("InstanceStatus")
    instance_issue: str | None = wire("InstanceIssue")
    create_time: int | None = wire("CreateTime")
    modified_time: int | None = wire("ModifiedTime")
    region_id: str | None = wire("RegionId")
    resource_group_id: str | None = wire("ResourceGroupId")
    tags: list[InstanceTag] | None = wire("Tags")


@dataclass
class GetInstanceResponse(ApiResponse):
    body: GetInstanceResponseBody | None = wire("body", required=True)


# GetInstanceCount


@dataclass
class GetInstanceCountRequest(Model):
    pass


@dataclass
class GetInstanceCountResponseBody(ResponseBody):
    count: int | None = wire("Count")


@dataclass
class GetInstanceCountResponse(ApiResponse):
    body: GetInstanceCountResponseBody | None = wire("body", required=True)


# GetInstanceUsage


@dataclass
class GetInstanceUsageRequest(Model):
    instance_id: str | None = wire("InstanceId", required=True)


@dataclass
class GetInstanceUsageResponseBody(ResponseBody):
    namespace_quota: str | None = wire("NamespaceQuota")
    namespace_usage: str | None = wire("NamespaceUsage")
    repo_quota: str | None = wire("RepoQuota")
    repo_usage: str | None = wire("RepoUsage")
    chain_quota: str | None = wire("ChainQuota")
    chain_usage: str | None = wire("ChainUsage")


@dataclass
class GetInstanceUsageResponse(ApiResponse):
    body: GetInstanceUsageResponseBody | None = wire("body", required=True)


# ListInstance


@dataclass
class ListInstanceRequest(Model):
    instance_name: str | None = wire("InstanceName")
    instance_status: str | None = wire("InstanceStatus")
    page_no: int | None = wire("PageNo")
    page_size: int | None = wire("PageSize")
    resource_group_id: str | None = wire("ResourceGroupId")
    tag: list[Tag] | None = wire("Tag")


@dataclass
class ListInstanceResponseBody(ResponseBody):
    instances: list[Instance] | None = wire("Instances")
    page_no: int | None = wire("PageNo")
    page_size: int | None = wire("PageSize")
    total_count: int | None = wire("TotalCount")


@dataclass
class ListInstanceResponse(ApiResponse):
    body: ListInstanceResponseBody | None = wire("body", required=True)


# ListInstanceRegion


@dataclass
class ListInstanceRegionRequest(Model):
    lang: str | None = wire("Lang")


@dataclass
class ListInstanceRegionResponseBody(ResponseBody):
    regions: list[Region] | None = wire("Regions")


@dataclass
class ListInstanceRegionResponse(ApiResponse):
    body: ListInstanceRegionResponseBody | None = wire("body", required=True)


# GetInstanceEndpoint


@dataclass
class GetInstanceEndpointRequest(Model):
    instance_id: str | None = wire("InstanceId", required=True)
    endpoint_type: str | None = wire("EndpointType", required=True)
    module_name: str | None = wire("ModuleName")


@dataclass
class GetInstanceEndpointResponseBody(ResponseBody):
    enable: bool | None = wire("Enable")
    status: str | None = wire("Status")
    acl_enable: bool | None = wire("AclEnable")
    acl_entries: list[AclEntry] | None = wire("AclEntries")
    domains: list[EndpointDomain] | None = wire("Domains")


@dataclass
class GetInstanceEndpointResponse(ApiResponse):
    body: GetInstanceEndpointResponseBody | None = wire("body", required=True)


# ListInstanceEndpoint


@dataclass
class ListInstanceEndpointRequest(Model):
    instance_id: str | None = wire("InstanceId", required=True)
    module_name: str | None = wire("ModuleName")
    summary: bool | None = wire("Summary")


@dataclass
class ListInstanceEndpointResponseBody(ResponseBody):
    endpoints: list[Endpoint] | None = wire("Endpoints")


@dataclass
class ListInstanceEndpointResponse(ApiResponse):
    body: ListInstanceEndpointResponseBody | None = wire("body", required=True)


# UpdateInstanceEndpointStatus


@dataclass
class UpdateInstanceEndpointStatusRequest(Model):
    instance_id: str | None = wire("InstanceId", required=True)
    endpoint_type: str | None = wire("EndpointType", required=True)
    enable: bool | None = wire("Enable", required=True)
    module_name: str | None = wire("ModuleName")


@dataclass
class UpdateInstanceEndpointStatusResponseBody(ResponseBody):
    pass


@dataclass
class UpdateInstanceEndpointStatusResponse(ApiResponse):
    body: UpdateInstanceEndpointStatusResponseBody | None = wire("body", required=True)


# CreateInstanceEndpointAclPolicy


@dataclass
class CreateInstanceEndpointAclPolicyRequest(Model):
    instance_id: str | None = wire("InstanceId", required=True)
    entry: str | None = wire("Entry", required=True)
    endpoint_type: str | None = wire("EndpointType")
    comment: str | None = wire("Comment")
    module_name: str | None = wire("ModuleName")


@dataclass
class CreateInstanceEndpointAclPolicyResponseBody(ResponseBody):
    pass


@dataclass
class CreateInstanceEndpointAclPolicyResponse(ApiResponse):
    body: CreateInstanceEndpointAclPolicyResponseBody | None = wire(
        "body", required=True
    )


# DeleteInstanceEndpointAclPolicy


@dataclass
class DeleteInstanceEndpointAclPolicyRequest(Model):
    instance_id: str | None = wire("InstanceId", required=True)
    entry: str | None = wire("Entry", required=True)
    endpoint_type: str | None = wire("EndpointType")
    module_name: str | None = wire("ModuleName")


@dataclass
class DeleteInstanceEndpointAclPolicyResponseBody(ResponseBody):
    pass


@dataclass
class DeleteInstanceEndpointAclPolicyResponse(ApiResponse):
    body: DeleteInstanceEndpointAclPolicyResponseBody | None = wire(
        "body", required=True
    )


# GetInstanceVpcEndpoint


@dataclass
class GetInstanceVpcEndpointRequest(Model):
    instance_id: str | None = wire("InstanceId", required=True)
    module_name: str | None = wire("ModuleName")


@dataclass
class GetInstanceVpcEndpointResponseBody(ResponseBody):
    enable: bool | None = wire("Enable")
    domains: list[str] | None = wire("Domains")
    linked_vpcs: list[LinkedVpc] | None = wire("LinkedVpcs")


@dataclass
class GetInstanceVpcEndpointResponse(ApiResponse):
    body: GetInstanceVpcEndpointResponseBody | None = wire("body", required=True)


# CreateInstanceVpcEndpointLinkedVpc


@dataclass
class CreateInstanceVpcEndpointLinkedVpcRequest(Model):
    instance_id: str | None = wire("InstanceId", required=True)
    vpc_id: str | None = wire("VpcId", required=True)
    vswitch_id: str | None = wire("VswitchId", required=True)
    module_name: str | None = wire("ModuleName")
    enable_create_dns_record_in_pvzt: bool | None = wire("EnableCreateDNSRecordInPvzt")


@dataclass
class CreateInstanceVpcEndpointLinkedVpcResponseBody(ResponseBody):
    pass


@dataclass
class CreateInstanceVpcEndpointLinkedVpcResponse(ApiResponse):
    body: CreateInstanceVpcEndpointLinkedVpcResponseBody | None = wire(
        "body", required=True
    )


# DeleteInstanceVpcEndpointLinkedVpc


@dataclass
class DeleteInstanceVpcEndpointLinkedVpcRequest(Model):
    instance_id: str | None = wire("InstanceId", required=True)
    vpc_id: str | None = wire("VpcId", required=True)
    vswitch_id: str | None = wire("VswitchId", required=True)
    module_name: str | None = wire("ModuleName")
    enable_create_dns_record_in_pvzt: bool | None = wire("EnableCreateDNSRecordInPvzt")


@dataclass
class DeleteInstanceVpcEndpointLinkedVpcResponseBody(ResponseBody):
    pass


@dataclass
class DeleteInstanceVpcEndpointLinkedVpcResponse(ApiResponse):
    body: DeleteInstanceVpcEndpointLinkedVpcResponseBody | None = wire(
        "body", required=True
    )


# GetAuthorizationToken


@dataclass
class GetAuthorizationTokenRequest(Model):
    instance_id: str | None = wire("InstanceId", required=True)


@dataclass
class GetAuthorizationTokenResponseBody(ResponseBody):
    authorization_token: str | None = wire("AuthorizationToken")
    temp_username: str | None = wire("TempUsername")
    # Milliseconds since the epoch
    expire_time: int | None = wire("ExpireTime")


@dataclass
class GetAuthorizationTokenResponse(ApiResponse):
    body: GetAuthorizationTokenResponseBody | None = wire("body", required=True)


# ResetLoginPassword


@dataclass
class ResetLoginPasswordRequest(Model):
    instance_id: str | None = wire("InstanceId", required=True)
    password: str | None = wire("Password", required=True)


@dataclass
class ResetLoginPasswordResponseBody(ResponseBody):
    pass


@dataclass
class ResetLoginPasswordResponse(ApiResponse):
    body: ResetLoginPasswordResponseBody | None = wire("body", required=True)


# ChangeResourceGroup


@dataclass
class ChangeResourceGroupRequest(Model):
    resource_id: str | None = wire("ResourceId", required=True)
    resource_group_id: str | None = wire("ResourceGroupId", required=True)
    resource_region_id: str | None = wire("ResourceRegionId")


@dataclass
class ChangeResourceGroupResponseBody(ResponseBody):
    pass


@dataclass
class ChangeResourceGroupResponse(ApiResponse):
    body: ChangeResourceGroupResponseBody | None = wire("body", required=True)


# ListTagResources


@dataclass
class ListTagResourcesRequest(Model):
    region_id: str | None = wire("RegionId", required=True)
    resource_type: str | None = wire("ResourceType", required=True)
    resource_id: list[str] | None = wire("ResourceId")
    tag: list[Tag] | None = wire("Tag")
    next_token: str | None = wire("NextToken")


@dataclass
class ListTagResourcesResponseBody(ResponseBody):
    next_token: str | None = wire("NextToken")
    tag_resources: list[TagResource] | None = wire("TagResources")


@dataclass
class ListTagResourcesResponse(ApiResponse):
    body: ListTagResourcesResponseBody | None = wire("body", required=True)


# TagResources


@dataclass
class TagResourcesRequest(Model):
    region_id: str | None = wire("RegionId", required=True)
    resource_type: str | None = wire("ResourceType", required=True)
    resource_id: list[str] | None = wire("ResourceId", required=True)
    tag: list[Tag] | None = wire("Tag", required=True)


@dataclass
class TagResourcesResponseBody(ResponseBody):
    pass


@dataclass
class TagResourcesResponse(ApiResponse):
    body: TagResourcesResponseBody | None = wire("body", required=True)


# UntagResources


@dataclass
class UntagResourcesRequest(Model):
    region_id: str | None = wire("RegionId", required=True)
    resource_type: str | None = wire("ResourceType", required=True)
    resource_id: list[str] | None = wire("ResourceId", required=True)
    tag_key: list[str] | None = wire("TagKey")
    all: bool | None = wire("All")


@dataclass
class UntagResourcesResponseBody(ResponseBody):
    pass


@dataclass
class UntagResourcesResponse(ApiResponse):
    body: UntagResourcesResponseBody | None = wire("body", required=True)
