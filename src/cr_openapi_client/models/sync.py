"""Cross-instance image synchronization models."""

from dataclasses import dataclass

from ..core.model import ApiResponse, Model, ResponseBody, wire


@dataclass
class SyncImage(Model):
    """Image at one end of a sync task."""

    instance_id: str | None = wire("InstanceId")
    region_id: str | None = wire("RegionId")
    repo_namespace_name: str | None = wire("RepoNamespaceName")
    repo_name: str | None = wire("RepoName")
    image_tag: str | None = wire("ImageTag")


@dataclass
class SyncLayerTask(Model):
    digest: str | None = wire("Digest")
    artifact_digest: str | None = wire("ArtifactDigest")
    size: int | None = wire("Size")
    synced_size: int | None = wire("SyncedSize")
    task_status: str | None = wire("TaskStatus")


@dataclass
class SyncRule(Model):
    sync_rule_id: str | None = wire("SyncRuleId")
    sync_rule_name: str | None = wire("SyncRuleName")
    sync_scope: str | None = wire("SyncScope")
    sync_trigger: str | None = wire("SyncTrigger")
    sync_direction: str | None = wire("SyncDirection")
    local_instance_id: str | None = wire("LocalInstanceId")
    local_region_id: str | None = wire("LocalRegionId")
    local_namespace_name: str | None = wire("LocalNamespaceName")
    local_repo_name: str | None = wire("LocalRepoName")
    target_instance_id: str | None = wire("TargetInstanceId")
    target_region_id: str | None = wire("TargetRegionId")
    target_namespace_name: str | None = wire("TargetNamespaceName")
    target_repo_name: str | None = wire("TargetRepoName")
    tag_filter: str | None = wire("TagFilter")
    repo_name_filter: str | None = wire("RepoNameFilter")
    create_time: int | None = wire("CreateTime")
    modified_time: int | None = wire("ModifiedTime")


@dataclass
class SyncTask(Model):
    sync_task_id: str | None = wire("SyncTaskId")
    sync_rule_id: str | None = wire("SyncRuleId")
    sync_batch_task_id: str | None = wire("SyncBatchTaskId")
    sync_trans_accelerate: bool | None = wire("SyncTransAccelerate")
    task_status: str | None = wire("TaskStatus")
    task_trigger: str | None = wire("TaskTrigger")
    image_from: SyncImage | None = wire("ImageFrom")
    image_to: SyncImage | None = wire("ImageTo")
    create_time: int | None = wire("CreateTime")
    modified_time: int | None = wire("ModifiedTime")


# CreateRepoSyncRule


@dataclass
class CreateRepoSyncRuleRequest(Model):
    instance_id: str | None = wire("InstanceId", required=True)
    namespace_name: str | None = wire("NamespaceName", required=True)
    sync_rule_name: str | None = wire("SyncRuleName", required=True)
    sync_scope: str | None = wire("SyncScope", required=True)
    sync_trigger: str | None = wire("SyncTrigger", required=True)
    tag_filter: str | None = wire("TagFilter", required=True)
    target_instance_id: str | None = wire("TargetInstanceId", required=True)
    target_namespace_name: str | None = wire("TargetNamespaceName", required=True)
    target_region_id: str | None = wire("TargetRegionId", required=True)
    repo_name: str | None = wire("RepoName")
    repo_name_filter: str | None = wire("RepoNameFilter")
    target_repo_name: str | None = wire("TargetRepoName")
    target_user_id: str | None = wire("TargetUserId")


@dataclass
class CreateRepoSyncRuleResponseBody(ResponseBody):
    sync_rule_id: str | None = wire("SyncRuleId")


@dataclass
class CreateRepoSyncRuleResponse(ApiResponse):
    body: CreateRepoSyncRuleResponseBody | None = wire("body", required=True)


# DeleteRepoSyncRule


@dataclass
class DeleteRepoSyncRuleRequest(Model):
    instance_id: str | None = wire("InstanceId", required=True)
    sync_rule_id: str | None = wire("SyncRuleId", required=True)


@dataclass
class DeleteRepoSyncRuleResponseBody(ResponseBody):
    pass


@dataclass
class DeleteRepoSyncRuleResponse(ApiResponse):
    body: DeleteRepoSyncRuleResponseBody | None = wire("body", required=True)


# ListRepoSyncRule


@dataclass
class ListRepoSyncRuleRequest(Model):
    instance_id: str | None = wire("InstanceId", required=True)
    namespace_name: str | None = wire("NamespaceName")
    repo_name: str | None = wire("RepoName")
    target_instance_id: str | None = wire("TargetInstanceId")
    target_region_id: str | None = wire("TargetRegionId")
    page_no: int | None = wire("PageNo")
    page_size: int | None = wire("PageSize")


@dataclass
class ListRepoSyncRuleResponseBody(ResponseBody):
    sync_rules: list[SyncRule] | None = wire("SyncRules")
    page_no: int | None = wire("PageNo")
    page_size: int | None = wire("PageSize")
    total_count: str | None = wire("TotalCount")


@dataclass
class ListRepoSyncRuleResponse(ApiResponse):
    body: ListRepoSyncRuleResponseBody | None = wire("body", required=True)


# CreateRepoSyncTask


@dataclass
class CreateRepoSyncTaskRequest(Model):
    instance_id: str | None = wire("InstanceId", required=True)
    repo_id: str | None = wire("RepoId", required=True)
    tag: str | None = wire("Tag", required=True)
    target_instance_id: str | None = wire("TargetInstanceId", required=True)
    target_namespace: str | None = wire("TargetNamespace", required=True)
    target_repo_name: str | None = wire("TargetRepoName", required=True)
    target_region_id: str | None = wire("TargetRegionId", required=True)
    target_tag: str | None = wire("TargetTag", required=True)
    target_user_id: str | None = wire("TargetUserId")
    override: bool | None = wire("Override")


@dataclass
class CreateRepoSyncTaskResponseBody(ResponseBody):
    sync_task_id: str | None = wire("SyncTaskId")


@dataclass
class CreateRepoSyncTaskResponse(ApiResponse):
    body: CreateRepoSyncTaskResponseBody | None = wire("body", required=True)


# CreateRepoSyncTaskByRule


@dataclass
class CreateRepoSyncTaskByRuleRequest(Model):
    instance_id: str | None = wire("InstanceId", required=True)
    repo_id: str | None = wire("RepoId", required=True)
    tag: str | None = wire("Tag", required=True)
    sync_rule_id: str | None = wire("SyncRuleId", required=True)


@dataclass
class CreateRepoSyncTaskByRuleResponseBody(ResponseBody):
    sync_task_id: str | None = wire("SyncTaskId")


@dataclass
class CreateRepoSyncTaskByRuleResponse(ApiResponse):
    body: CreateRepoSyncTaskByRuleResponseBody | None = wire("body", required=True)


# GetRepoSyncTask


@dataclass
class GetRepoSyncTaskRequest(Model):
    instance_id: str | None = wire("InstanceId", required=True)
    sync_task_id: str | None = wire("SyncTaskId", required=True)


@dataclass
class GetRepoSyncTaskResponseBody(ResponseBody):
    sync_task_id: str | None = wire("SyncTaskId")
    sync_rule_id: str | None = wire("SyncRuleId")
    sync_batch_task_id: str | None = wire("SyncBatchTaskId")
    sync_trans_accelerate: bool | None = wire("SyncTransAccelerate")
    cross_user: bool | None = wire("CrossUser")
    task_status: str | None = wire("TaskStatus")
    task_trigger: str | None = wire("TaskTrigger")
    image_from: SyncImage | None = wire("ImageFrom")
    image_to: SyncImage | None = wire("ImageTo")
    layer_tasks: list[SyncLayerTask] | None = wire("LayerTasks")
    create_time: int | None = wire("CreateTime")
    modified_time: int | None = wire("ModifiedTime")


@dataclass
class GetRepoSyncTaskResponse(ApiResponse):
    body: GetRepoSyncTaskResponseBody | None = wire("body", required=True)


# ListRepoSyncTask


@dataclass
class ListRepoSyncTaskRequest(Model):
    instance_id: str | None = wire("InstanceId", required=True)
    repo_namespace_name: str | None = wire("RepoNamespaceName")
    repo_name: str | None = wire("RepoName")
    tag: str | None = wire("Tag")
    sync_record_id: str | None = wire("SyncRecordId")
    page_no: int | None = wire("PageNo")
    page_size: int | None = wire("PageSize")


@dataclass
class ListRepoSyncTaskResponseBody(ResponseBody):
    sync_tasks: list[SyncTask] | None = wire("SyncTasks")
    page_no: int | None = wire("PageNo")
    page_size: int | None = wire("PageSize")
    total_count: str | None = wire("TotalCount")


@dataclass
class ListRepoSyncTaskResponse(ApiResponse):
    body: ListRepoSyncTaskResponseBody | None = wire("body", required=True)
