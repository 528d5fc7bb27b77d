"""Repository, tag, layer and manifest models."""

from dataclasses import dataclass

from ..core.model import ApiResponse, Model, ResponseBody, wire


@dataclass
class Repository(Model):
    instance_id: str | None = wire("InstanceId")
    repo_id: str | None = wire("RepoId")
    repo_name: str | None = wire("RepoName")
    repo_namespace_name: str | None = wire("RepoNamespaceName")
    repo_status: str | None = wire("RepoStatus")
    repo_type: str | None = wire("RepoType")
    repo_build_type: str | None = wire("RepoBuildType")
    summary: str | None = wire("Summary")
    tag_immutability: bool | None = wire("TagImmutability")
    create_time: int | None = wire("CreateTime")
    modified_time: int | None = wire("ModifiedTime")


@dataclass
class Image(Model):
    """One tag of a repository."""

    tag: str | None = wire("Tag")
    digest: str | None = wire("Digest")
    image_id: str | None = wire("ImageId")
    image_size: int | None = wire("ImageSize")
    image_create: int | None = wire("ImageCreate")
    image_update: int | None = wire("ImageUpdate")
    status: str | None = wire("Status")


@dataclass
class Layer(Model):
    layer_index: int | None = wire("LayerIndex")
    layer_digest: str | None = wire("LayerDigest")
    layer_size: int | None = wire("LayerSize")
    layer_instruction: str | None = wire("LayerInstruction")
    blob_digest: str | None = wire("BlobDigest")


@dataclass
class ManifestConfig(Model):
    digest: str | None = wire("Digest")
    media_type: str | None = wire("MediaType")
    size: int | None = wire("Size")


@dataclass
class ManifestLayer(Model):
    digest: str | None = wire("Digest")
    media_type: str | None = wire("MediaType")
    size: int | None = wire("Size")
    urls: list[str] | None = wire("Urls")


@dataclass
class ManifestFsLayer(Model):
    """Schema 1 filesystem layer."""

    blob_sum: str | None = wire("BlobSum")


@dataclass
class ManifestHistory(Model):
    v1_compatibility: str | None = wire("V1Compatibility")


@dataclass
class ManifestSignatureHeader(Model):
    alg: str | None = wire("Alg")
    jwk: dict | None = wire("Jwk")


@dataclass
class ManifestSignature(Model):
    header: ManifestSignatureHeader | None = wire("Header")
    protected: str | None = wire("Protected")
    signature: str | None = wire("Signature")


@dataclass
class ManifestPlatform(Model):
    architecture: str | None = wire("Architecture")
    os: str | None = wire("Os")
    os_version: str | None = wire("OsVersion")
    variant: str | None = wire("Variant")
    features: list[str] | None = wire("Features")
    os_features: list[str] | None = wire("OsFeatures")


@dataclass
class ManifestEntry(Model):
    """Entry of a manifest list or OCI index."""

    digest: str | None = wire("Digest")
    media_type: str | None = wire("MediaType")
    size: int | None = wire("Size")
    platform: ManifestPlatform | None = wire("Platform")


@dataclass
class Manifest(Model):
    schema_version: int | None = wire("SchemaVersion")
    media_type: str | None = wire("MediaType")
    name: str | None = wire("Name")
    tag: str | None = wire("Tag")
    architecture: str | None = wire("Architecture")
    config: ManifestConfig | None = wire("Config")
    layers: list[ManifestLayer] | None = wire("Layers")
    fs_layers: list[ManifestFsLayer] | None = wire("FsLayers")
    history: list[ManifestHistory] | None = wire("History")
    signatures: list[ManifestSignature] | None = wire("Signatures")
    manifests: list[ManifestEntry] | None = wire("Manifests")


# CreateRepository


@dataclass
class CreateRepositoryRequest(Model):
    instance_id: str | None = wire("InstanceId", required=True)
    repo_namespace_name: str | None = wire("RepoNamespaceName", required=True)
    repo_name: str | None = wire("RepoName", required=True)
    repo_type: str | None = wire("RepoType", required=True)
    summary: str | None = wire("Summary", required=True)
    detail: str | None = wire("Detail")
    tag_immutability: bool | None = wire("TagImmutability")


@dataclass
class CreateRepositoryResponseBody(ResponseBody):
    repo_id: str | None = wire("RepoId")


@dataclass
class CreateRepositoryResponse(ApiResponse):
    body: CreateRepositoryResponseBody | None = wire("body", required=True)


# DeleteRepository


@dataclass
class DeleteRepositoryRequest(Model):
    instance_id: str | None = wire("InstanceId", required=True)
    repo_id: str | None = wire("RepoId")
    repo_name: str | None = wire("RepoName")
    repo_namespace_name: str | None = wire("RepoNamespaceName")


@dataclass
class DeleteRepositoryResponseBody(ResponseBody):
    pass


@dataclass
class DeleteRepositoryResponse(ApiResponse):
    body: DeleteRepositoryResponseBody | None = wire("body", required=True)


# GetRepository


@dataclass
class GetRepositoryRequest(Model):
    instance_id: str | None = wire("InstanceId", required=True)
    repo_id: str | None = wire("RepoId")
    repo_name: str | None = wire("RepoName")
    repo_namespace_name: str | None = wire("RepoNamespaceName")


@dataclass
class GetRepositoryResponseBody(ResponseBody):
    instance_id: str | None = wire("InstanceId")
    repo_id: str | None = wire("RepoId")
    repo_name: str | None = wire("RepoName")
    repo_namespace_name: str | None = wire("RepoNamespaceName")
    repo_status: str | None = wire("RepoStatus")
    repo_type: str | None = wire("RepoType")
    repo_build_type: str | None = wire("RepoBuildType")
    summary: str | None = wire("Summary")
    detail: str | None = wire("Detail")
    tag_immutability: bool | None = wire("TagImmutability")
    create_time: int | None = wire("CreateTime")
    modified_time: int | None = wire("ModifiedTime")


@dataclass
class GetRepositoryResponse(ApiResponse):
    body: GetRepositoryResponseBody | None = wire("body", required=True)


# ListRepository


@dataclass
class ListRepositoryRequest(Model):
    instance_id: str | None = wire("InstanceId", required=True)
    repo_name: str | None = wire("RepoName")
    repo_namespace_name: str | None = wire("RepoNamespaceName")
    repo_status: str | None = wire("RepoStatus")
    page_no: int | None = wire("PageNo")
    page_size: int | None = wire("PageSize")


@dataclass
class ListRepositoryResponseBody(ResponseBody):
    repositories: list[Repository] | None = wire("Repositories")
    page_no: int | None = wire("PageNo")
    page_size: int | None = wire("PageSize")
    total_count: str | None = wire("TotalCount")


@dataclass
class ListRepositoryResponse(ApiResponse):
    body: ListRepositoryResponseBody | None = wire("body", required=True)


# UpdateRepository


@dataclass
class UpdateRepositoryRequest(Model):
    instance_id: str | None = wire("InstanceId", required=True)
    repo_id: str | None = wire("RepoId")
    repo_name: str | None = wire("RepoName")
    repo_namespace_name: str | None = wire("RepoNamespaceName")
    repo_type: str | None = wire("RepoType")
    summary: str | None = wire("Summary")
    detail: str | None = wire("Detail")
    tag_immutability: bool | None = wire("TagImmutability")


@dataclass
class UpdateRepositoryResponseBody(ResponseBody):
    pass


@dataclass
class UpdateRepositoryResponse(ApiResponse):
    body: UpdateRepositoryResponseBody | None = wire("body", required=True)


# CreateRepoTag


@dataclass
class CreateRepoTagRequest(Model):
    instance_id: str | None = wire("InstanceId", required=True)
    namespace_name: str | None = wire("NamespaceName", required=True)
    repo_name: str | None = wire("RepoName", required=True)
    from_tag: str | None = wire("FromTag", required=True)
    to_tag: str | None = wire("ToTag", required=True)


@dataclass
class CreateRepoTagResponseBody(ResponseBody):
    pass


@dataclass
class CreateRepoTagResponse(ApiResponse):
    body: CreateRepoTagResponseBody | None = wire("body", required=True)


# DeleteRepoTag


@dataclass
class DeleteRepoTagRequest(Model):
    instance_id: str | None = wire("InstanceId", required=True)
    repo_id: str | None = wire("RepoId", required=True)
    tag: str | None = wire("Tag", required=True)


@dataclass
class DeleteRepoTagResponseBody(ResponseBody):
    pass


@dataclass
class DeleteRepoTagResponse(ApiResponse):
    body: DeleteRepoTagResponseBody | None = wire("body", required=True)


# GetRepoTag


@dataclass
class GetRepoTagRequest(Model):
    instance_id: str | None = wire("InstanceId", required=True)
    repo_id: str | None = wire("RepoId", required=True)
    tag: str | None = wire("Tag", required=True)


@dataclass
class GetRepoTagResponseBody(ResponseBody):
    tag: str | None = wire("Tag")
    digest: str | None = wire("Digest")
    image_id: str | None = wire("ImageId")
    image_size: int | None = wire("ImageSize")
    image_create: int | None = wire("ImageCreate")
    image_update: int | None = wire("ImageUpdate")
    status: str | None = wire("Status")


@dataclass
class GetRepoTagResponse(ApiResponse):
    body: GetRepoTagResponseBody | None = wire("body", required=True)


# ListRepoTag


@dataclass
class ListRepoTagRequest(Model):
    instance_id: str | None = wire("InstanceId", required=True)
    repo_id: str | None = wire("RepoId", required=True)
    page_no: int | None = wire("PageNo")
    page_size: int | None = wire("PageSize")


@dataclass
class ListRepoTagResponseBody(ResponseBody):
    images: list[Image] | None = wire("Images")
    page_no: int | None = wire("PageNo")
    page_size: int | None = wire("PageSize")
    total_count: str | None = wire("TotalCount")


@dataclass
class ListRepoTagResponse(ApiResponse):
    body: ListRepoTagResponseBody | None = wire("body", required=True)


# GetRepoTagLayers


@dataclass
class GetRepoTagLayersRequest(Model):
    instance_id: str | None = wire("InstanceId", required=True)
    repo_id: str | None = wire("RepoId", required=True)
    tag: str | None = wire("Tag", required=True)


@dataclass
class GetRepoTagLayersResponseBody(ResponseBody):
    layers: list[Layer] | None = wire("Layers")


@dataclass
class GetRepoTagLayersResponse(ApiResponse):
    body: GetRepoTagLayersResponseBody | None = wire("body", required=True)


# GetRepoTagManifest


@dataclass
class GetRepoTagManifestRequest(Model):
    instance_id: str | None = wire("InstanceId", required=True)
    repo_id: str | None = wire("RepoId", required=True)
    tag: str | None = wire("Tag", required=True)
    schema_version: int | None = wire("SchemaVersion")


@dataclass
class GetRepoTagManifestResponseBody(ResponseBody):
    manifest: Manifest | None = wire("Manifest")


@dataclass
class GetRepoTagManifestResponse(ApiResponse):
    body: GetRepoTagManifestResponseBody | None = wire("body", required=True)
