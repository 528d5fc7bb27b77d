"""Delivery chain models."""

from dataclasses import dataclass

from ..core.model import ApiResponse, Model, ResponseBody, wire


@dataclass
class DenyPolicy(Model):
    """Blocks delivery when a scan reports too many issues."""

    action: str | None = wire("Action")
    issue_count: str | None = wire("IssueCount")
    issue_level: str | None = wire("IssueLevel")
    logic: str | None = wire("Logic")


@dataclass
class ChainNodeConfig(Model):
    deny_policy: DenyPolicy | None = wire("DenyPolicy")


@dataclass
class ChainNode(Model):
    node_name: str | None = wire("NodeName")
    enable: bool | None = wire("Enable")
    node_config: ChainNodeConfig | None = wire("NodeConfig")


@dataclass
class ChainNodeRef(Model):
    node_name: str | None = wire("NodeName")


@dataclass
class ChainRouter(Model):
    from_node: ChainNodeRef | None = wire("From")
    to_node: ChainNodeRef | None = wire("To")


@dataclass
class ChainConfig(Model):
    nodes: list[ChainNode] | None = wire("Nodes")
    routers: list[ChainRouter] | None = wire("Routers")


@dataclass
class Chain(Model):
    chain_id: str | None = wire("ChainId")
    name: str | None = wire("Name")
    description: str | None = wire("Description")
    instance_id: str | None = wire("InstanceId")
    scope_type: str | None = wire("ScopeType")
    scope_id: str | None = wire("ScopeId")
    create_time: int | None = wire("CreateTime")
    modified_time: int | None = wire("ModifiedTime")


@dataclass
class ChainInstanceImage(Model):
    repo_namespace_name: str | None = wire("RepoNamespaceName")
    repo_name: str | None = wire("RepoName")
    image_tag: str | None = wire("ImageTag")
    repo_id: str | None = wire("RepoId")


@dataclass
class ChainInstance(Model):
    chain_instance_id: str | None = wire("ChainInstanceId")
    chain_id: str | None = wire("ChainId")
    chain_name: str | None = wire("ChainName")
    status: str | None = wire("Status")
    result: str | None = wire("Result")
    start_time: int | None = wire("StartTime")
    end_time: int | None = wire("EndTime")
    image: ChainInstanceImage | None = wire("Image")


# CreateChain


@dataclass
class CreateChainRequest(Model):
    instance_id: str | None = wire("InstanceId", required=True)
    name: str | None = wire("Name", required=True)
    chain_config: ChainConfig | None = wire("ChainConfig", style="json")
    description: str | None = wire("Description")
    repo_namespace_name: str | None = wire("RepoNamespaceName")
    repo_name: str | None = wire("RepoName")
    scope_exclude: list[str] | None = wire("ScopeExclude", style="json")


@dataclass
class CreateChainResponseBody(ResponseBody):
    chain_id: str | None = wire("ChainId")


@dataclass
class CreateChainResponse(ApiResponse):
    body: CreateChainResponseBody | None = wire("body", required=True)


# DeleteChain


@dataclass
class DeleteChainRequest(Model):
    instance_id: str | None = wire("InstanceId", required=True)
    chain_id: str | None = wire("ChainId", required=True)


@dataclass
class DeleteChainResponseBody(ResponseBody):
    pass


@dataclass
class DeleteChainResponse(ApiResponse):
    body: DeleteChainResponseBody | None = wire("body", required=True)


# GetChain


@dataclass
class GetChainRequest(Model):
    instance_id: str | None = wire("InstanceId", required=True)
    chain_id: str | None = wire("ChainId", required=True)


@dataclass
class GetChainResponseBody(ResponseBody):
    chain_id: str | None = wire("ChainId")
    name: str | None = wire("Name")
    description: str | None = wire("Description")
    instance_id: str | None = wire("InstanceId")
    scope_type: str | None = wire("ScopeType")
    scope_id: str | None = wire("ScopeId")
    scope_exclude: list[str] | None = wire("ScopeExclude")
    chain_config: ChainConfig | None = wire("ChainConfig")
    create_time: int | None = wire("CreateTime")
    modified_time: int | None = wire("ModifiedTime")


@dataclass
class GetChainResponse(ApiResponse):
    body: GetChainResponseBody | None = wire("body", required=True)


# ListChain


@dataclass
class ListChainRequest(Model):
    instance_id: str | None = wire("InstanceId", required=True)
    repo_namespace_name: str | None = wire("RepoNamespaceName")
    repo_name: str | None = wire("RepoName")
    page_no: int | None = wire("PageNo")
    page_size: int | None = wire("PageSize")


@dataclass
class ListChainResponseBody(ResponseBody):
    chains: list[Chain] | None = wire("Chains")
    page_no: int | None = wire("PageNo")
    page_size: int | None = wire("PageSize")
    total_count: int | None = wire("TotalCount")


@dataclass
class ListChainResponse(ApiResponse):
    body: ListChainResponseBody | None = wire("body", required=True)


# UpdateChain


@dataclass
class UpdateChainRequest(Model):
    instance_id: str | None = wire("InstanceId", required=True)
    chain_id: str | None = wire("ChainId", required=True)
    name: str | None = wire("Name")
    description: str | None = wire("Description")
    chain_config: ChainConfig | None = wire("ChainConfig", style="json")
    scope_exclude: list[str] | None = wire("ScopeExclude", style="json")


@dataclass
class UpdateChainResponseBody(ResponseBody):
    pass


@dataclass
class UpdateChainResponse(ApiResponse):
    body: UpdateChainResponseBody | None = wire("body", required=True)


# ListChainInstance


@dataclass
class ListChainInstanceRequest(Model):
    instance_id: str | None = wire("InstanceId", required=True)
    repo_namespace_name: str | None = wire("RepoNamespaceName")
    repo_name: str | None = wire("RepoName")
    page_no: int | None = wire("PageNo")
    page_size: int | None = wire("PageSize")


@dataclass
class ListChainInstanceResponseBody(ResponseBody):
    chain_instances: list[ChainInstance] | None = wire("ChainInstances")
    page_no: int | None = wire("PageNo")
    page_size: int | None = wire("PageSize")
    total_count: int | None = wire("TotalCount")


@dataclass
class ListChainInstanceResponse(ApiResponse):
    body: ListChainInstanceResponseBody | None = wire("body", required=True)
