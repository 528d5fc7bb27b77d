"""Helm chart namespace, repository and release models."""

from dataclasses import dataclass

from ..core.model import ApiResponse, Model, ResponseBody, wire


@dataclass
class ChartNamespace(Model):
    instance_id: str | None = wire("InstanceId")
    namespace_id: str | None = wire("NamespaceId")
    namespace_name: str | None = wire("NamespaceName")
    namespace_status: str | None = wire("NamespaceStatus")
    auto_create_repo: bool | None = wire("AutoCreateRepo")
    default_repo_type: str | None = wire("DefaultRepoType")


@dataclass
class ChartRepository(Model):
    instance_id: str | None = wire("InstanceId")
    repo_id: str | None = wire("RepoId")
    repo_name: str | None = wire("RepoName")
    repo_namespace_name: str | None = wire("RepoNamespaceName")
    repo_status: str | None = wire("RepoStatus")
    repo_type: str | None = wire("RepoType")
    summary: str | None = wire("Summary")
    create_time: int | None = wire("CreateTime")
    modified_time: int | None = wire("ModifiedTime")


@dataclass
class ChartRelease(Model):
    instance_id: str | None = wire("InstanceId")
    repo_id: str | None = wire("RepoId")
    chart: str | None = wire("Chart")
    release: str | None = wire("Release")
    status: str | None = wire("Status")
    size: str | None = wire("Size")
    create_time: int | None = wire("CreateTime")
    modified_time: int | None = wire("ModifiedTime")


# CreateChartNamespace


@dataclass
class CreateChartNamespaceRequest(Model):
    instance_id: str | None = wire("InstanceId", required=True)
    namespace_name: str | None = wire("NamespaceName", required=True)
    auto_create_repo: bool | None = wire("AutoCreateRepo")
    default_repo_type: str | None = wire("DefaultRepoType")


@dataclass
class CreateChartNamespaceResponseBody(ResponseBody):
    pass


@dataclass
class CreateChartNamespaceResponse(ApiResponse):
    body: CreateChartNamespaceResponseBody | None = wire("body", required=True)


# DeleteChartNamespace


@dataclass
class DeleteChartNamespaceRequest(Model):
    instance_id: str | None = wire("InstanceId", required=True)
    namespace_name: str | None = wire("NamespaceName", required=True)


@dataclass
class DeleteChartNamespaceResponseBody(ResponseBody):
    pass


@dataclass
class DeleteChartNamespaceResponse(ApiResponse):
    body: DeleteChartNamespaceResponseBody | None = wire("body", required=True)


# GetChartNamespace


@dataclass
class GetChartNamespaceRequest(Model):
    instance_id: str | None = wire("InstanceId", required=True)
    namespace_name: str | None = wire("NamespaceName", required=True)


@dataclass
class GetChartNamespaceResponseBody(ResponseBody):
    instance_id: str | None = wire("InstanceId")
    namespace_id: str | None = wire("NamespaceId")
    namespace_name: str | None = wire("NamespaceName")
    namespace_status: str | None = wire("NamespaceStatus")
    auto_create_repo: bool | None = wire("AutoCreateRepo")
    default_repo_type: str | None = wire("DefaultRepoType")


@dataclass
class GetChartNamespaceResponse(ApiResponse):
    body: GetChartNamespaceResponseBody | None = wire("body", required=True)


# ListChartNamespace


@dataclass
class ListChartNamespaceRequest(Model):
    instance_id: str | None = wire("InstanceId", required=True)
    namespace_name: str | None = wire("NamespaceName")
    namespace_status: str | None = wire("NamespaceStatus")
    page_no: int | None = wire("PageNo")
    page_size: int | None = wire("PageSize")


@dataclass
class ListChartNamespaceResponseBody(ResponseBody):
    namespaces: list[ChartNamespace] | None = wire("Namespaces")
    page_no: int | None = wire("PageNo")
    page_size: int | None = wire("PageSize")
    total_count: str | None = wire("TotalCount")


@dataclass
class ListChartNamespaceResponse(ApiResponse):
    body: ListChartNamespaceResponseBody | None = wire("body", required=True)


# UpdateChartNamespace


@dataclass
class UpdateChartNamespaceRequest(Model):
    instance_id: str | None = wire("InstanceId", required=True)
    namespace_name: str | None = wire("NamespaceName", required=True)
    auto_create_repo: bool | None = wire("AutoCreateRepo")
    default_repo_type: str | None = wire("DefaultRepoType")


@dataclass
class UpdateChartNamespaceResponseBody(ResponseBody):
    pass


@dataclass
class UpdateChartNamespaceResponse(ApiResponse):
    body: UpdateChartNamespaceResponseBody | None = wire("body", required=True)


# CreateChartRepository


@dataclass
class CreateChartRepositoryRequest(Model):
    instance_id: str | None = wire("InstanceId", required=True)
    repo_namespace_name: str | None = wire("RepoNamespaceName", required=True)
    repo_name: str | None = wire("RepoName", required=True)
    repo_type: str | None = wire("RepoType", required=True)
    summary: str | None = wire("Summary")


@dataclass
class CreateChartRepositoryResponseBody(ResponseBody):
    repo_id: str | None = wire("RepoId")


@dataclass
class CreateChartRepositoryResponse(ApiResponse):
    body: CreateChartRepositoryResponseBody | None = wire("body", required=True)


# DeleteChartRepository


@dataclass
class DeleteChartRepositoryRequest(Model):
    instance_id: str | None = wire("InstanceId", required=True)
    repo_namespace_name: str | None = wire("RepoNamespaceName", required=True)
    repo_name: str | None = wire("RepoName", required=True)


@dataclass
class DeleteChartRepositoryResponseBody(ResponseBody):
    pass


@dataclass
class DeleteChartRepositoryResponse(ApiResponse):
    body: DeleteChartRepositoryResponseBody | None = wire("body", required=True)


# GetChartRepository


@dataclass
class GetChartRepositoryRequest(Model):
    instance_id: str | None = wire("InstanceId", required=True)
    repo_namespace_name: str | None = wire("RepoNamespaceName", required=True)
    repo_name: str | None = wire("RepoName", required=True)


@dataclass
class GetChartRepositoryResponseBody(ResponseBody):
    instance_id: str | None = wire("InstanceId")
    repo_id: str | None = wire("RepoId")
    repo_name: str | None = wire("RepoName")
    repo_namespace_name: str | None = wire("RepoNamespaceName")
    repo_status: str | None = wire("RepoStatus")
    repo_type: str | None = wire("RepoType")
    summary: str | None = wire("Summary")
    create_time: int | None = wire("CreateTime")
    modified_time: int | None = wire("ModifiedTime")


@dataclass
class GetChartRepositoryResponse(ApiResponse):
    body: GetChartRepositoryResponseBody | None = wire("body", required=True)


# ListChartRepository


@dataclass
class ListChartRepositoryRequest(Model):
    instance_id: str | None = wire("InstanceId", required=True)
    repo_namespace_name: str | None = wire("RepoNamespaceName")
    repo_name: str | None = wire("RepoName")
    repo_status: str | None = wire("RepoStatus")
    page_no: int | None = wire("PageNo")
    page_size: int | None = wire("PageSize")


@dataclass
class ListChartRepositoryResponseBody(ResponseBody):
    repositories: list[ChartRepository] | None = wire("Repositories")
    page_no: int | None = wire("PageNo")
    page_size: int | None = wire("PageSize")
    total_count: str | None = wire("TotalCount")


@dataclass
class ListChartRepositoryResponse(ApiResponse):
    body: ListChartRepositoryResponseBody | None = wire("body", required=True)


# UpdateChartRepository


@dataclass
class UpdateChartRepositoryRequest(Model):
    instance_id: str | None = wire("InstanceId", required=True)
    repo_namespace_name: str | None = wire("RepoNamespaceName", required=True)
    repo_name: str | None = wire("RepoName", required=True)
    repo_type: str | None = wire("RepoType")
    summary: str | None = wire("Summary")


@dataclass
class UpdateChartRepositoryResponseBody(ResponseBody):
    pass


@dataclass
class UpdateChartRepositoryResponse(ApiResponse):
    body: UpdateChartRepositoryResponseBody | None = wire("body", required=True)


# ListChartRelease


@dataclass
class ListChartReleaseRequest(Model):
    instance_id: str | None = wire("InstanceId", required=True)
    repo_namespace_name: str | None = wire("RepoNamespaceName", required=True)
    repo_name: str | None = wire("RepoName", required=True)
    chart: str | None = wire("Chart")
    page_no: int | None = wire("PageNo")
    page_size: int | None = wire("PageSize")


@dataclass
class ListChartReleaseResponseBody(ResponseBody):
    chart_releases: list[ChartRelease] | None = wire("ChartReleases")
    page_no: int | None = wire("PageNo")
    page_size: int | None = wire("PageSize")
    total_count: str | None = wire("TotalCount")


@dataclass
class ListChartReleaseResponse(ApiResponse):
    body: ListChartReleaseResponseBody | None = wire("body", required=True)


# DeleteChartRelease


@dataclass
class DeleteChartReleaseRequest(Model):
    instance_id: str | None = wire("InstanceId", required=True)
    repo_namespace_name: str | None = wire("RepoNamespaceName", required=True)
    repo_name: str | None = wire("RepoName", required=True)
    chart: str | None = wire("Chart", required=True)
    release: str | None = wire("Release", required=True)


@dataclass
class DeleteChartReleaseResponseBody(ResponseBody):
    pass


@dataclass
class DeleteChartReleaseResponse(ApiResponse):
    body: DeleteChartReleaseResponseBody | None = wire("body", required=True)
