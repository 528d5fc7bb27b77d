"""Namespace models."""

from dataclasses import dataclass

from ..core.model import ApiResponse, Model, ResponseBody, wire


@dataclass
class Namespace(Model):
    instance_id: str | None = wire("InstanceId")
    namespace_id: str | None = wire("NamespaceId")
    namespace_name: str | None = wire("NamespaceName")
    namespace_status: str | None = wire("NamespaceStatus")
    auto_create_repo: bool | None = wire("AutoCreateRepo")
    default_repo_type: str | None = wire("DefaultRepoType")


# CreateNamespace


@dataclass
class CreateNamespaceRequest(Model):
    instance_id: str | None = wire("InstanceId", required=True)
    namespace_name: str | None = wire("NamespaceName", required=True)
    auto_create_repo: bool | None = wire("AutoCreateRepo")
    default_repo_type: str | None = wire("DefaultRepoType")


@dataclass
class CreateNamespaceResponseBody(ResponseBody):
    pass


@dataclass
class CreateNamespaceResponse(ApiResponse):
    body: CreateNamespaceResponseBody | None = wire("body", required=True)


# DeleteNamespace


@dataclass
class DeleteNamespaceRequest(Model):
    instance_id: str | None = wire("InstanceId", required=True)
    namespace_name: str | None = wire("NamespaceName", required=True)


@dataclass
class DeleteNamespaceResponseBody(ResponseBody):
    pass


@dataclass
class DeleteNamespaceResponse(ApiResponse):
    body: DeleteNamespaceResponseBody | None = wire("body", required=True)


# GetNamespace


@dataclass
class GetNamespaceRequest(Model):
    instance_id: str | None = wire("InstanceId", required=True)
    namespace_id: str | None = wire("NamespaceId")
    namespace_name: str | None = wire("NamespaceName")


@dataclass
class GetNamespaceResponseBody(ResponseBody):
    instance_id: str | None = wire("InstanceId")
    namespace_id: str | None = wire("NamespaceId")
    namespace_name: str | None = wire("NamespaceName")
    namespace_status: str | None = wire("NamespaceStatus")
    auto_create_repo: bool | None = wire("AutoCreateRepo")
    default_repo_type: str | None = wire("DefaultRepoType")


@dataclass
class GetNamespaceResponse(ApiResponse):
    body: GetNamespaceResponseBody | None = wire("body", required=True)


# ListNamespace


@dataclass
class ListNamespaceRequest(Model):
    instance_id: str | None = wire("InstanceId", required=True)
    namespace_name: str | None = wire("NamespaceName")
    namespace_status: str | None = wire("NamespaceStatus")
    page_no: int | None = wire("PageNo")
    page_size: int | None = wire("PageSize")


@dataclass
class ListNamespaceResponseBody(ResponseBody):
    namespaces: list[Namespace] | None = wire("Namespaces")
    page_no: int | None = wire("PageNo")
    page_size: int | None = wire("PageSize")
    total_count: str | None = wire("TotalCount")


@dataclass
class ListNamespaceResponse(ApiResponse):
    body: ListNamespaceResponseBody | None = wire("body", required=True)


# UpdateNamespace


@dataclass
class UpdateNamespaceRequest(Model):
    instance_id: str | None = wire("InstanceId", required=True)
    namespace_name: str | None = wire("NamespaceName", required=True)
    auto_create_repo: bool | None = wire("AutoCreateRepo")
    default_repo_type: str | None = wire("DefaultRepoType")


@dataclass
class UpdateNamespaceResponseBody(ResponseBody):
    pass


@dataclass
class UpdateNamespaceResponse(ApiResponse):
    body: UpdateNamespaceResponseBody | None = wire("body", required=True)
