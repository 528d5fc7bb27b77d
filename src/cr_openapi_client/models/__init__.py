"""Request, response and nested models for every API operation."""

from .build import (
    Artifact,
    BuildImage,
    BuildLogLine,
    BuildRecord,
    BuildRule,
    CancelArtifactBuildTaskRequest,
    CancelArtifactBuildTaskResponse,
    CancelArtifactBuildTaskResponseBody,
    CancelRepoBuildRecordRequest,
    CancelRepoBuildRecordResponse,
    CancelRepoBuildRecordResponseBody,
    CreateArtifactBuildRuleRequest,
    CreateArtifactBuildRuleResponse,
    CreateArtifactBuildRuleResponseBody,
    CreateBuildRecordByRecordRequest,
    CreateBuildRecordByRecordResponse,
    CreateBuildRecordByRecordResponseBody,
    CreateBuildRecordByRuleRequest,
    CreateBuildRecordByRuleResponse,
    CreateBuildRecordByRuleResponseBody,
    CreateRepoBuildRuleRequest,
    CreateRepoBuildRuleResponse,
    CreateRepoBuildRuleResponseBody,
    CreateRepoSourceCodeRepoRequest,
    CreateRepoSourceCodeRepoResponse,
    CreateRepoSourceCodeRepoResponseBody,
    DeleteRepoBuildRuleRequest,
    DeleteRepoBuildRuleResponse,
    DeleteRepoBuildRuleResponseBody,
    GetArtifactBuildRuleRequest,
    GetArtifactBuildRuleResponse,
    GetArtifactBuildRuleResponseBody,
    GetArtifactBuildTaskRequest,
    GetArtifactBuildTaskResponse,
    GetArtifactBuildTaskResponseBody,
    GetRepoBuildRecordRequest,
    GetRepoBuildRecordResponse,
    GetRepoBuildRecordResponseBody,
    GetRepoBuildRecordStatusRequest,
    GetRepoBuildRecordStatusResponse,
    GetRepoBuildRecordStatusResponseBody,
    GetRepoSourceCodeRepoRequest,
    GetRepoSourceCodeRepoResponse,
    GetRepoSourceCodeRepoResponseBody,
    ListArtifactBuildTaskLogRequest,
    ListArtifactBuildTaskLogResponse,
    ListArtifactBuildTaskLogResponseBody,
    ListRepoBuildRecordLogRequest,
    ListRepoBuildRecordLogResponse,
    ListRepoBuildRecordLogResponseBody,
    ListRepoBuildRecordRequest,
    ListRepoBuildRecordResponse,
    ListRepoBuildRecordResponseBody,
    ListRepoBuildRuleRequest,
    ListRepoBuildRuleResponse,
    ListRepoBuildRuleResponseBody,
    UpdateRepoBuildRuleRequest,
    UpdateRepoBuildRuleResponse,
    UpdateRepoBuildRuleResponseBody,
    UpdateRepoSourceCodeRepoRequest,
    UpdateRepoSourceCodeRepoResponse,
    UpdateRepoSourceCodeRepoResponseBody,
)
from .chain import (
    Chain,
    ChainConfig,
    ChainInstance,
    ChainInstanceImage,
    ChainNode,
    ChainNodeConfig,
    ChainNodeRef,
    ChainRouter,
    CreateChainRequest,
    CreateChainResponse,
    CreateChainResponseBody,
    DeleteChainRequest,
    DeleteChainResponse,
    DeleteChainResponseBody,
    DenyPolicy,
    GetChainRequest,
    GetChainResponse,
    GetChainResponseBody,
    ListChainInstanceRequest,
    ListChainInstanceResponse,
    ListChainInstanceResponseBody,
    ListChainRequest,
    ListChainResponse,
    ListChainResponseBody,
    UpdateChainRequest,
    UpdateChainResponse,
    UpdateChainResponseBody,
)
from .chart import (
    ChartNamespace,
    ChartRelease,
    ChartRepository,
    CreateChartNamespaceRequest,
    CreateChartNamespaceResponse,
    CreateChartNamespaceResponseBody,
    CreateChartRepositoryRequest,
    CreateChartRepositoryResponse,
    CreateChartRepositoryResponseBody,
    DeleteChartNamespaceRequest,
    DeleteChartNamespaceResponse,
    DeleteChartNamespaceResponseBody,
    DeleteChartReleaseRequest,
    DeleteChartReleaseResponse,
    DeleteChartReleaseResponseBody,
    DeleteChartRepositoryRequest,
    DeleteChartRepositoryResponse,
    DeleteChartRepositoryResponseBody,
    GetChartNamespaceRequest,
    GetChartNamespaceResponse,
    GetChartNamespaceResponseBody,
    GetChartRepositoryRequest,
    GetChartRepositoryResponse,
    GetChartRepositoryResponseBody,
    ListChartNamespaceRequest,
    ListChartNamespaceResponse,
    ListChartNamespaceResponseBody,
    ListChartReleaseRequest,
    ListChartReleaseResponse,
    ListChartReleaseResponseBody,
    ListChartRepositoryRequest,
    ListChartRepositoryResponse,
    ListChartRepositoryResponseBody,
    UpdateChartNamespaceRequest,
    UpdateChartNamespaceResponse,
    UpdateChartNamespaceResponseBody,
    UpdateChartRepositoryRequest,
    UpdateChartRepositoryResponse,
    UpdateChartRepositoryResponseBody,
)
from .event import (
    DeleteEventCenterRuleRequest,
    DeleteEventCenterRuleResponse,
    DeleteEventCenterRuleResponseBody,
    EventRecord,
    ListEventCenterRecordRequest,
    ListEventCenterRecordResponse,
    ListEventCenterRecordResponseBody,
)
from .instance import (
    AclEntry,
    ChangeResourceGroupRequest,
    ChangeResourceGroupResponse,
    ChangeResourceGroupResponseBody,
    CreateInstanceEndpointAclPolicyRequest,
    CreateInstanceEndpointAclPolicyResponse,
    CreateInstanceEndpointAclPolicyResponseBody,
    CreateInstanceVpcEndpointLinkedVpcRequest,
    CreateInstanceVpcEndpointLinkedVpcResponse,
    CreateInstanceVpcEndpointLinkedVpcResponseBody,
    DeleteInstanceEndpointAclPolicyRequest,
    DeleteInstanceEndpointAclPolicyResponse,
    DeleteInstanceEndpointAclPolicyResponseBody,
    DeleteInstanceVpcEndpointLinkedVpcRequest,
    DeleteInstanceVpcEndpointLinkedVpcResponse,
    DeleteInstanceVpcEndpointLinkedVpcResponseBody,
    Endpoint,
    EndpointDomain,
    GetAuthorizationTokenRequest,
    GetAuthorizationTokenResponse,
    GetAuthorizationTokenResponseBody,
    GetInstanceCountRequest,
    GetInstanceCountResponse,
    GetInstanceCountResponseBody,
    GetInstanceEndpointRequest,
    GetInstanceEndpointResponse,
    GetInstanceEndpointResponseBody,
    GetInstanceRequest,
    GetInstanceResponse,
    GetInstanceResponseBody,
    GetInstanceUsageRequest,
    GetInstanceUsageResponse,
    GetInstanceUsageResponseBody,
    GetInstanceVpcEndpointRequest,
    GetInstanceVpcEndpointResponse,
    GetInstanceVpcEndpointResponseBody,
    Instance,
    InstanceTag,
    LinkedVpc,
    ListInstanceEndpointRequest,
    ListInstanceEndpointResponse,
    ListInstanceEndpointResponseBody,
    ListInstanceRegionRequest,
    ListInstanceRegionResponse,
    ListInstanceRegionResponseBody,
    ListInstanceRequest,
    ListInstanceResponse,
    ListInstanceResponseBody,
    ListTagResourcesRequest,
    ListTagResourcesResponse,
    ListTagResourcesResponseBody,
    Region,
    ResetLoginPasswordRequest,
    ResetLoginPasswordResponse,
    ResetLoginPasswordResponseBody,
    Tag,
    TagResource,
    TagResourcesRequest,
    TagResourcesResponse,
    TagResourcesResponseBody,
    UntagResourcesRequest,
    UntagResourcesResponse,
    UntagResourcesResponseBody,
    UpdateInstanceEndpointStatusRequest,
    UpdateInstanceEndpointStatusResponse,
    UpdateInstanceEndpointStatusResponseBody,
)
from .namespace import (
    CreateNamespaceRequest,
    CreateNamespaceResponse,
    CreateNamespaceResponseBody,
    DeleteNamespaceRequest,
    DeleteNamespaceResponse,
    DeleteNamespaceResponseBody,
    GetNamespaceRequest,
    GetNamespaceResponse,
    GetNamespaceResponseBody,
    ListNamespaceRequest,
    ListNamespaceResponse,
    ListNamespaceResponseBody,
    Namespace,
    UpdateNamespaceRequest,
    UpdateNamespaceResponse,
    UpdateNamespaceResponseBody,
)
from .repository import (
    CreateRepoTagRequest,
    CreateRepoTagResponse,
    CreateRepoTagResponseBody,
    CreateRepositoryRequest,
    CreateRepositoryResponse,
    CreateRepositoryResponseBody,
    DeleteRepoTagRequest,
    DeleteRepoTagResponse,
    DeleteRepoTagResponseBody,
    DeleteRepositoryRequest,
    DeleteRepositoryResponse,
    DeleteRepositoryResponseBody,
    GetRepoTagLayersRequest,
    GetRepoTagLayersResponse,
    GetRepoTagLayersResponseBody,
    GetRepoTagManifestRequest,
    GetRepoTagManifestResponse,
    GetRepoTagManifestResponseBody,
    GetRepoTagRequest,
    GetRepoTagResponse,
    GetRepoTagResponseBody,
    GetRepositoryRequest,
    GetRepositoryResponse,
    GetRepositoryResponseBody,
    Image,
    Layer,
    ListRepoTagRequest,
    ListRepoTagResponse,
    ListRepoTagResponseBody,
    ListRepositoryRequest,
    ListRepositoryResponse,
    ListRepositoryResponseBody,
    Manifest,
    ManifestConfig,
    ManifestEntry,
    ManifestFsLayer,
    ManifestHistory,
    ManifestLayer,
    ManifestPlatform,
    ManifestSignature,
    ManifestSignatureHeader,
    Repository,
    UpdateRepositoryRequest,
    UpdateRepositoryResponse,
    UpdateRepositoryResponseBody,
)
from .scan import (
    CreateRepoTagScanTaskRequest,
    CreateRepoTagScanTaskResponse,
    CreateRepoTagScanTaskResponseBody,
    GetRepoTagScanStatusRequest,
    GetRepoTagScanStatusResponse,
    GetRepoTagScanStatusResponseBody,
    GetRepoTagScanSummaryRequest,
    GetRepoTagScanSummaryResponse,
    GetRepoTagScanSummaryResponseBody,
    ListRepoTagScanResultRequest,
    ListRepoTagScanResultResponse,
    ListRepoTagScanResultResponseBody,
    Vulnerability,
)
from .sync import (
    CreateRepoSyncRuleRequest,
    CreateRepoSyncRuleResponse,
    CreateRepoSyncRuleResponseBody,
    CreateRepoSyncTaskByRuleRequest,
    CreateRepoSyncTaskByRuleResponse,
    CreateRepoSyncTaskByRuleResponseBody,
    CreateRepoSyncTaskRequest,
    CreateRepoSyncTaskResponse,
    CreateRepoSyncTaskResponseBody,
    DeleteRepoSyncRuleRequest,
    DeleteRepoSyncRuleResponse,
    DeleteRepoSyncRuleResponseBody,
    GetRepoSyncTaskRequest,
    GetRepoSyncTaskResponse,
    GetRepoSyncTaskResponseBody,
    ListRepoSyncRuleRequest,
    ListRepoSyncRuleResponse,
    ListRepoSyncRuleResponseBody,
    ListRepoSyncTaskRequest,
    ListRepoSyncTaskResponse,
    ListRepoSyncTaskResponseBody,
    SyncImage,
    SyncLayerTask,
    SyncRule,
    SyncTask,
)
from .trigger import (
    CreateRepoTriggerRequest,
    CreateRepoTriggerResponse,
    CreateRepoTriggerResponseBody,
    DeleteRepoTriggerRequest,
    DeleteRepoTriggerResponse,
    DeleteRepoTriggerResponseBody,
    ListRepoTriggerRequest,
    ListRepoTriggerResponse,
    ListRepoTriggerResponseBody,
    Trigger,
    UpdateRepoTriggerRequest,
    UpdateRepoTriggerResponse,
    UpdateRepoTriggerResponseBody,
)

__all__ = [
    "AclEntry",
    "Artifact",
    "BuildImage",
    "BuildLogLine",
    "BuildRecord",
    "BuildRule",
    "CancelArtifactBuildTaskRequest",
    "CancelArtifactBuildTaskResponse",
    "CancelArtifactBuildTaskResponseBody",
    "CancelRepoBuildRecordRequest",
    "CancelRepoBuildRecordResponse",
    "CancelRepoBuildRecordResponseBody",
    "Chain",
    "ChainConfig",
    "ChainInstance",
    "ChainInstanceImage",
    "ChainNode",
    "ChainNodeConfig",
    "ChainNodeRef",
    "ChainRouter",
    "ChangeResourceGroupRequest",
    "ChangeResourceGroupResponse",
    "ChangeResourceGroupResponseBody",
    "ChartNamespace",
    "ChartRelease",
    "ChartRepository",
    "CreateArtifactBuildRuleRequest",
    "CreateArtifactBuildRuleResponse",
    "CreateArtifactBuildRuleResponseBody",
    "CreateBuildRecordByRecordRequest",
    "CreateBuildRecordByRecordResponse",
    "CreateBuildRecordByRecordResponseBody",
    "CreateBuildRecordByRuleRequest",
    "CreateBuildRecordByRuleResponse",
    "CreateBuildRecordByRuleResponseBody",
    "CreateChainRequest",
    "CreateChainResponse",
    "CreateChainResponseBody",
    "CreateChartNamespaceRequest",
    "CreateChartNamespaceResponse",
    "CreateChartNamespaceResponseBody",
    "CreateChartRepositoryRequest",
    "CreateChartRepositoryResponse",
    "CreateChartRepositoryResponseBody",
    "CreateInstanceEndpointAclPolicyRequest",
    "CreateInstanceEndpointAclPolicyResponse",
    "CreateInstanceEndpointAclPolicyResponseBody",
    "CreateInstanceVpcEndpointLinkedVpcRequest",
    "CreateInstanceVpcEndpointLinkedVpcResponse",
    "CreateInstanceVpcEndpointLinkedVpcResponseBody",
    "CreateNamespaceRequest",
    "CreateNamespaceResponse",
    "CreateNamespaceResponseBody",
    "CreateRepoBuildRuleRequest",
    "CreateRepoBuildRuleResponse",
    "CreateRepoBuildRuleResponseBody",
    "CreateRepoSourceCodeRepoRequest",
    "CreateRepoSourceCodeRepoResponse",
    "CreateRepoSourceCodeRepoResponseBody",
    "CreateRepoSyncRuleRequest",
    "CreateRepoSyncRuleResponse",
    "CreateRepoSyncRuleResponseBody",
    "CreateRepoSyncTaskByRuleRequest",
    "CreateRepoSyncTaskByRuleResponse",
    "CreateRepoSyncTaskByRuleResponseBody",
    "CreateRepoSyncTaskRequest",
    "CreateRepoSyncTaskResponse",
    "CreateRepoSyncTaskResponseBody",
    "CreateRepoTagRequest",
    "CreateRepoTagResponse",
    "CreateRepoTagResponseBody",
    "CreateRepoTagScanTaskRequest",
    "CreateRepoTagScanTaskResponse",
    "CreateRepoTagScanTaskResponseBody",
    "CreateRepoTriggerRequest",
    "CreateRepoTriggerResponse",
    "CreateRepoTriggerResponseBody",
    "CreateRepositoryRequest",
    "CreateRepositoryResponse",
    "CreateRepositoryResponseBody",
    "DeleteChainRequest",
    "DeleteChainResponse",
    "DeleteChainResponseBody",
    "DeleteChartNamespaceRequest",
    "DeleteChartNamespaceResponse",
    "DeleteChartNamespaceResponseBody",
    "DeleteChartReleaseRequest",
    "DeleteChartReleaseResponse",
    "DeleteChartReleaseResponseBody",
    "DeleteChartRepositoryRequest",
    "DeleteChartRepositoryResponse",
    "DeleteChartRepositoryResponseBody",
    "DeleteEventCenterRuleRequest",
    "DeleteEventCenterRuleResponse",
    "DeleteEventCenterRuleResponseBody",
    "DeleteInstanceEndpointAclPolicyRequest",
    "DeleteInstanceEndpointAclPolicyResponse",
    "DeleteInstanceEndpointAclPolicyResponseBody",
    "DeleteInstanceVpcEndpointLinkedVpcRequest",
    "DeleteInstanceVpcEndpointLinkedVpcResponse",
    "DeleteInstanceVpcEndpointLinkedVpcResponseBody",
    "DeleteNamespaceRequest",
    "DeleteNamespaceResponse",
    "DeleteNamespaceResponseBody",
    "DeleteRepoBuildRuleRequest",
    "DeleteRepoBuildRuleResponse",
    "DeleteRepoBuildRuleResponseBody",
    "DeleteRepoSyncRuleRequest",
    "DeleteRepoSyncRuleResponse",
    "DeleteRepoSyncRuleResponseBody",
    "DeleteRepoTagRequest",
    "DeleteRepoTagResponse",
    "DeleteRepoTagResponseBody",
    "DeleteRepoTriggerRequest",
    "DeleteRepoTriggerResponse",
    "DeleteRepoTriggerResponseBody",
    "DeleteRepositoryRequest",
    "DeleteRepositoryResponse",
    "DeleteRepositoryResponseBody",
    "DenyPolicy",
    "Endpoint",
    "EndpointDomain",
    "EventRecord",
    "GetArtifactBuildRuleRequest",
    "GetArtifactBuildRuleResponse",
    "GetArtifactBuildRuleResponseBody",
    "GetArtifactBuildTaskRequest",
    "GetArtifactBuildTaskResponse",
    "GetArtifactBuildTaskResponseBody",
    "GetAuthorizationTokenRequest",
    "GetAuthorizationTokenResponse",
    "GetAuthorizationTokenResponseBody",
    "GetChainRequest",
    "GetChainResponse",
    "GetChainResponseBody",
    "GetChartNamespaceRequest",
    "GetChartNamespaceResponse",
    "GetChartNamespaceResponseBody",
    "GetChartRepositoryRequest",
    "GetChartRepositoryResponse",
    "GetChartRepositoryResponseBody",
    "GetInstanceCountRequest",
    "GetInstanceCountResponse",
    "GetInstanceCountResponseBody",
    "GetInstanceEndpointRequest",
    "GetInstanceEndpointResponse",
    "GetInstanceEndpointResponseBody",
    "GetInstanceRequest",
    "GetInstanceResponse",
    "GetInstanceResponseBody",
    "GetInstanceUsageRequest",
    "GetInstanceUsageResponse",
    "GetInstanceUsageResponseBody",
    "GetInstanceVpcEndpointRequest",
    "GetInstanceVpcEndpointResponse",
    "GetInstanceVpcEndpointResponseBody",
    "GetNamespaceRequest",
    "GetNamespaceResponse",
    "GetNamespaceResponseBody",
    "GetRepoBuildRecordRequest",
    "GetRepoBuildRecordResponse",
    "GetRepoBuildRecordResponseBody",
    "GetRepoBuildRecordStatusRequest",
    "GetRepoBuildRecordStatusResponse",
    "GetRepoBuildRecordStatusResponseBody",
    "GetRepoSourceCodeRepoRequest",
    "GetRepoSourceCodeRepoResponse",
    "GetRepoSourceCodeRepoResponseBody",
    "GetRepoSyncTaskRequest",
    "GetRepoSyncTaskResponse",
    "GetRepoSyncTaskResponseBody",
    "GetRepoTagLayersRequest",
    "GetRepoTagLayersResponse",
    "GetRepoTagLayersResponseBody",
    "GetRepoTagManifestRequest",
    "GetRepoTagManifestResponse",
    "GetRepoTagManifestResponseBody",
    "GetRepoTagRequest",
    "GetRepoTagResponse",
    "GetRepoTagResponseBody",
    "GetRepoTagScanStatusRequest",
    "GetRepoTagScanStatusResponse",
    "GetRepoTagScanStatusResponseBody",
    "GetRepoTagScanSummaryRequest",
    "GetRepoTagScanSummaryResponse",
    "GetRepoTagScanSummaryResponseBody",
    "GetRepositoryRequest",
    "GetRepositoryResponse",
    "GetRepositoryResponseBody",
    "Image",
    "Instance",
    "InstanceTag",
    "Layer",
    "LinkedVpc",
    "ListArtifactBuildTaskLogRequest",
    "ListArtifactBuildTaskLogResponse",
    "ListArtifactBuildTaskLogResponseBody",
    "ListChainInstanceRequest",
    "ListChainInstanceResponse",
    "ListChainInstanceResponseBody",
    "ListChainRequest",
    "ListChainResponse",
    "ListChainResponseBody",
    "ListChartNamespaceRequest",
    "ListChartNamespaceResponse",
    "ListChartNamespaceResponseBody",
    "ListChartReleaseRequest",
    "ListChartReleaseResponse",
    "ListChartReleaseResponseBody",
    "ListChartRepositoryRequest",
    "ListChartRepositoryResponse",
    "ListChartRepositoryResponseBody",
    "ListEventCenterRecordRequest",
    "ListEventCenterRecordResponse",
    "ListEventCenterRecordResponseBody",
    "ListInstanceEndpointRequest",
    "ListInstanceEndpointResponse",
    "ListInstanceEndpointResponseBody",
    "ListInstanceRegionRequest",
    "ListInstanceRegionResponse",
    "ListInstanceRegionResponseBody",
    "ListInstanceRequest",
    "ListInstanceResponse",
    "ListInstanceResponseBody",
    "ListNamespaceRequest",
    "ListNamespaceResponse",
    "ListNamespaceResponseBody",
    "ListRepoBuildRecordLogRequest",
    "ListRepoBuildRecordLogResponse",
    "ListRepoBuildRecordLogResponseBody",
    "ListRepoBuildRecordRequest",
    "ListRepoBuildRecordResponse",
    "ListRepoBuildRecordResponseBody",
    "ListRepoBuildRuleRequest",
    "ListRepoBuildRuleResponse",
    "ListRepoBuildRuleResponseBody",
    "ListRepoSyncRuleRequest",
    "ListRepoSyncRuleResponse",
    "ListRepoSyncRuleResponseBody",
    "ListRepoSyncTaskRequest",
    "ListRepoSyncTaskResponse",
    "ListRepoSyncTaskResponseBody",
    "ListRepoTagRequest",
    "ListRepoTagResponse",
    "ListRepoTagResponseBody",
    "ListRepoTagScanResultRequest",
    "ListRepoTagScanResultResponse",
    "ListRepoTagScanResultResponseBody",
    "ListRepoTriggerRequest",
    "ListRepoTriggerResponse",
    "ListRepoTriggerResponseBody",
    "ListRepositoryRequest",
    "ListRepositoryResponse",
    "ListRepositoryResponseBody",
    "ListTagResourcesRequest",
    "ListTagResourcesResponse",
    "ListTagResourcesResponseBody",
    "Manifest",
    "ManifestConfig",
    "ManifestEntry",
    "ManifestFsLayer",
    "ManifestHistory",
    "ManifestLayer",
    "ManifestPlatform",
    "ManifestSignature",
    "ManifestSignatureHeader",
    "Namespace",
    "Region",
    "Repository",
    "ResetLoginPasswordRequest",
    "ResetLoginPasswordResponse",
    "ResetLoginPasswordResponseBody",
    "SyncImage",
    "SyncLayerTask",
    "SyncRule",
    "SyncTask",
    "Tag",
    "TagResource",
    "TagResourcesRequest",
    "TagResourcesResponse",
    "TagResourcesResponseBody",
    "Trigger",
    "UntagResourcesRequest",
    "UntagResourcesResponse",
    "UntagResourcesResponseBody",
    "UpdateChainRequest",
    "UpdateChainResponse",
    "UpdateChainResponseBody",
    "UpdateChartNamespaceRequest",
    "UpdateChartNamespaceResponse",
    "UpdateChartNamespaceResponseBody",
    "UpdateChartRepositoryRequest",
    "UpdateChartRepositoryResponse",
    "UpdateChartRepositoryResponseBody",
    "UpdateInstanceEndpointStatusRequest",
    "UpdateInstanceEndpointStatusResponse",
    "UpdateInstanceEndpointStatusResponseBody",
    "UpdateNamespaceRequest",
    "UpdateNamespaceResponse",
    "UpdateNamespaceResponseBody",
    "UpdateRepoBuildRuleRequest",
    "UpdateRepoBuildRuleResponse",
    "UpdateRepoBuildRuleResponseBody",
    "UpdateRepoSourceCodeRepoRequest",
    "UpdateRepoSourceCodeRepoResponse",
    "UpdateRepoSourceCodeRepoResponseBody",
    "UpdateRepoTriggerRequest",
    "UpdateRepoTriggerResponse",
    "UpdateRepoTriggerResponseBody",
    "UpdateRepositoryRequest",
    "UpdateRepositoryResponse",
    "UpdateRepositoryResponseBody",
    "Vulnerability",
]
