"""Image build rule, build record, source code binding and artifact build models."""

from dataclasses import dataclass
from typing import Any

from ..core.model import ApiResponse, Model, ResponseBody, wire


@dataclass
class BuildRule(Model):
    build_rule_id: str | None = wire("BuildRuleId")
    dockerfile_location: str | None = wire("DockerfileLocation")
    dockerfile_name: str | None = wire("DockerfileName")
    image_tag: str | None = wire("ImageTag")
    push_name: str | None = wire("PushName")
    push_type: str | None = wire("PushType")
    platforms: list[str] | None = wire("Platforms")
    build_args: list[str] | None = wire("BuildArgs")


@dataclass
class BuildImage(Model):
    """Image produced by a build record."""

    repo_namespace_name: str | None = wire("RepoNamespaceName")
    repo_name: str | None = wire("RepoName")
    image_tag: str | None = wire("ImageTag")
    image_id: str | None = wire("ImageId")
    digest: str | None = wire("Digest")
    image_size: int | None = wire("ImageSize")


@dataclass
class BuildRecord(Model):
    build_record_id: str | None = wire("BuildRecordId")
    build_rule_id: str | None = wire("BuildRuleId")
    status: str | None = wire("Status")
    create_time: int | None = wire("CreateTime")
    start_time: int | None = wire("StartTime")
    end_time: int | None = wire("EndTime")
    image: BuildImage | None = wire("Image")


@dataclass
class BuildLogLine(Model):
    line_number: int | None = wire("LineNumber")
    message: str | None = wire("Message")


@dataclass
class Artifact(Model):
    artifact_type: str | None = wire("ArtifactType")
    instance_id: str | None = wire("InstanceId")
    repo_id: str | None = wire("RepoId")
    version: str | None = wire("Version")


# CreateRepoBuildRule


@dataclass
class CreateRepoBuildRuleRequest(Model):
    instance_id: str | None = wire("InstanceId", required=True)
    repo_id: str | None = wire("RepoId", required=True)
    push_type: str | None = wire("PushType", required=True)
    push_name: str | None = wire("PushName", required=True)
    image_tag: str | None = wire("ImageTag", required=True)
    dockerfile_location: str | None = wire("DockerfileLocation")
    dockerfile_name: str | None = wire("DockerfileName")
    build_args: list[str] | None = wire("BuildArgs")
    platforms: list[str] | None = wire("Platforms")


@dataclass
class CreateRepoBuildRuleResponseBody(ResponseBody):
    build_rule_id: str | None = wire("BuildRuleId")


@dataclass
class CreateRepoBuildRuleResponse(ApiResponse):
    body: CreateRepoBuildRuleResponseBody | None = wire("body", required=True)


# DeleteRepoBuildRule


@dataclass
class DeleteRepoBuildRuleRequest(Model):
    instance_id: str | None = wire("InstanceId", required=True)
    repo_id: str | None = wire("RepoId", required=True)
    build_rule_id: str | None = wire("BuildRuleId", required=True)


@dataclass
class DeleteRepoBuildRuleResponseBody(ResponseBody):
    pass


@dataclass
class DeleteRepoBuildRuleResponse(ApiResponse):
    body: DeleteRepoBuildRuleResponseBody | None = wire("body", required=True)


# UpdateRepoBuildRule


@dataclass
class UpdateRepoBuildRuleRequest(Model):
    instance_id: str | None = wire("InstanceId", required=True)
    repo_id: str | None = wire("RepoId", required=True)
    build_rule_id: str | None = wire("BuildRuleId", required=True)
    push_type: str | None = wire("PushType")
    push_name: str | None = wire("PushName")
    image_tag: str | None = wire("ImageTag")
    dockerfile_location: str | None = wire("DockerfileLocation")
    dockerfile_name: str | None = wire("DockerfileName")
    build_args: list[str] | None = wire("BuildArgs")
    platforms: list[str] | None = wire("Platforms")


@dataclass
class UpdateRepoBuildRuleResponseBody(ResponseBody):
    build_rule_id: str | None = wire("BuildRuleId")


@dataclass
class UpdateRepoBuildRuleResponse(ApiResponse):
    body: UpdateRepoBuildRuleResponseBody | None = wire("body", required=True)


# ListRepoBuildRule


@dataclass
class ListRepoBuildRuleRequest(Model):
    instance_id: str | None = wire("InstanceId", required=True)
    repo_id: str | None = wire("RepoId", required=True)
    page_no: int | None = wire("PageNo")
    page_size: int | None = wire("PageSize")


@dataclass
class ListRepoBuildRuleResponseBody(ResponseBody):
    build_rules: list[BuildRule] | None = wire("BuildRules")
    page_no: int | None = wire("PageNo")
    page_size: int | None = wire("PageSize")
    total_count: str | None = wire("TotalCount")


@dataclass
class ListRepoBuildRuleResponse(ApiResponse):
    body: ListRepoBuildRuleResponseBody | None = wire("body", required=True)


# CreateBuildRecordByRule


@dataclass
class CreateBuildRecordByRuleRequest(Model):
    instance_id: str | None = wire("InstanceId", required=True)
    repo_id: str | None = wire("RepoId", required=True)
    build_rule_id: str | None = wire("BuildRuleId", required=True)


@dataclass
class CreateBuildRecordByRuleResponseBody(ResponseBody):
    build_record_id: str | None = wire("BuildRecordId")


@dataclass
class CreateBuildRecordByRuleResponse(ApiResponse):
    body: CreateBuildRecordByRuleResponseBody | None = wire("body", required=True)


# CreateBuildRecordByRecord


@dataclass
class CreateBuildRecordByRecordRequest(Model):
    instance_id: str | None = wire("InstanceId", required=True)
    repo_id: str | None = wire("RepoId", required=True)
    build_record_id: str | None = wire("BuildRecordId", required=True)


@dataclass
class CreateBuildRecordByRecordResponseBody(ResponseBody):
    build_record_id: str | None = wire("BuildRecordId")


@dataclass
class CreateBuildRecordByRecordResponse(ApiResponse):
    body: CreateBuildRecordByRecordResponseBody | None = wire("body", required=True)


# CancelRepoBuildRecord


@dataclass
class CancelRepoBuildRecordRequest(Model):
    instance_id: str | None = wire("InstanceId", required=True)
    repo_id: str | None = wire("RepoId", required=True)
    build_record_id: str | None = wire("BuildRecordId", required=True)


@dataclass
class CancelRepoBuildRecordResponseBody(ResponseBody):
    pass


@dataclass
class CancelRepoBuildRecordResponse(ApiResponse):
    body: CancelRepoBuildRecordResponseBody | None = wire("body", required=True)


# GetRepoBuildRecord


@dataclass
class GetRepoBuildRecordRequest(Model):
    instance_id: str | None = wire("InstanceId", required=True)
    build_record_id: str | None = wire("BuildRecordId", required=True)


@dataclass
class GetRepoBuildRecordResponseBody(ResponseBody):
    build_record_id: str | None = wire("BuildRecordId")
    status: str | None = wire("Status")
    start_time: int | None = wire("StartTime")
    end_time: int | None = wire("EndTime")
    image: BuildImage | None = wire("Image")


@dataclass
class GetRepoBuildRecordResponse(ApiResponse):
    body: GetRepoBuildRecordResponseBody | None = wire("body", required=True)


# GetRepoBuildRecordStatus


@dataclass
class GetRepoBuildRecordStatusRequest(Model):
    instance_id: str | None = wire("InstanceId", required=True)
    repo_id: str | None = wire("RepoId", required=True)
    build_record_id: str | None = wire("BuildRecordId", required=True)


@dataclass
class GetRepoBuildRecordStatusResponseBody(ResponseBody):
    build_status: str | None = wire("BuildStatus")


@dataclass
class GetRepoBuildRecordStatusResponse(ApiResponse):
    body: GetRepoBuildRecordStatusResponseBody | None = wire("body", required=True)


# ListRepoBuildRecord


@dataclass
class ListRepoBuildRecordRequest(Model):
    instance_id: str | None = wire("InstanceId", required=True)
    repo_id: str | None = wire("RepoId", required=True)
    page_no: int | None = wire("PageNo")
    page_size: int | None = wire("PageSize")


@dataclass
class ListRepoBuildRecordResponseBody(ResponseBody):
    build_records: list[BuildRecord] | None = wire("BuildRecords")
    page_no: int | None = wire("PageNo")
    page_size: int | None = wire("PageSize")
    total_count: str | None = wire("TotalCount")


@dataclass
class ListRepoBuildRecordResponse(ApiResponse):
    body: ListRepoBuildRecordResponseBody | None = wire("body", required=True)


# ListRepoBuildRecordLog


@dataclass
class ListRepoBuildRecordLogRequest(Model):
    instance_id: str | None = wire("InstanceId", required=True)
    repo_id: str | None = wire("RepoId", required=True)
    build_record_id: str | None = wire("BuildRecordId", required=True)
    offset: int | None = wire("Offset")


@dataclass
class ListRepoBuildRecordLogResponseBody(ResponseBody):
    build_record_logs: list[BuildLogLine] | None = wire("BuildRecordLogs")


@dataclass
class ListRepoBuildRecordLogResponse(ApiResponse):
    body: ListRepoBuildRecordLogResponseBody | None = wire("body", required=True)


# CreateRepoSourceCodeRepo


@dataclass
class CreateRepoSourceCodeRepoRequest(Model):
    instance_id: str | None = wire("InstanceId", required=True)
    repo_id: str | None = wire("RepoId", required=True)
    code_repo_type: str | None = wire("CodeRepoType", required=True)
    code_repo_namespace_name: str | None = wire("CodeRepoNamespaceName", required=True)
    code_repo_name: str | None = wire("CodeRepoName", required=True)
    auto_build: bool | None = wire("AutoBuild")
    oversea_build: bool | None = wire("OverseaBuild")
    disable_cache_build: bool | None = wire("DisableCacheBuild")


@dataclass
class CreateRepoSourceCodeRepoResponseBody(ResponseBody):
    pass


@dataclass
class CreateRepoSourceCodeRepoResponse(ApiResponse):
    body: CreateRepoSourceCodeRepoResponseBody | None = wire("body", required=True)


# GetRepoSourceCodeRepo


@dataclass
class GetRepoSourceCodeRepoRequest(Model):
    instance_id: str | None = wire("InstanceId", required=True)
    repo_id: str | None = wire("RepoId", required=True)


@dataclass
class GetRepoSourceCodeRepoResponseBody(ResponseBody):
    repo_id: str | None = wire("RepoId")
    code_repo_id: str | None = wire("CodeRepoId")
    code_repo_type: str | None = wire("CodeRepoType")
    code_repo_domain: str | None = wire("CodeRepoDomain")
    code_repo_namespace_name: str | None = wire("CodeRepoNamespaceName")
    code_repo_name: str | None = wire("CodeRepoName")
    auto_build: bool | None = wire("AutoBuild")
    oversea_build: bool | None = wire("OverseaBuild")
    disable_cache_build: bool | None = wire("DisableCacheBuild")


@dataclass
class GetRepoSourceCodeRepoResponse(ApiResponse):
    body: GetRepoSourceCodeRepoResponseBody | None = wire("body", required=True)


# UpdateRepoSourceCodeRepo


@dataclass
class UpdateRepoSourceCodeRepoRequest(Model):
    instance_id: str | None = wire("InstanceId", required=True)
    repo_id: str | None = wire("RepoId", required=True)
    code_repo_id: str | None = wire("CodeRepoId", required=True)
    code_repo_type: str | None = wire("CodeRepoType", required=True)
    code_repo_namespace_name: str | None = wire("CodeRepoNamespaceName", required=True)
    code_repo_name: str | None = wire("CodeRepoName", required=True)
    auto_build: bool | None = wire("AutoBuild")
    oversea_build: bool | None = wire("OverseaBuild")
    disable_cache_build: bool | None = wire("DisableCacheBuild")


@dataclass
class UpdateRepoSourceCodeRepoResponseBody(ResponseBody):
    pass


@dataclass
class UpdateRepoSourceCodeRepoResponse(ApiResponse):
    body: UpdateRepoSourceCodeRepoResponseBody | None = wire("body", required=True)


# CreateArtifactBuildRule


@dataclass
class CreateArtifactBuildRuleRequest(Model):
    instance_id: str | None = wire("InstanceId", required=True)
    artifact_type: str | None = wire("ArtifactType", required=True)
    scope_type: str | None = wire("ScopeType", required=True)
    scope_id: str | None = wire("ScopeId", required=True)
    parameters: dict[str, Any] | None = wire("Parameters", style="json")


@dataclass
class CreateArtifactBuildRuleResponseBody(ResponseBody):
    build_rule_id: str | None = wire("BuildRuleId")


@dataclass
class CreateArtifactBuildRuleResponse(ApiResponse):
    body: CreateArtifactBuildRuleResponseBody | None = wire("body", required=True)


# GetArtifactBuildRule


@dataclass
class GetArtifactBuildRuleRequest(Model):
    instance_id: str | None = wire("InstanceId", required=True)
    build_rule_id: str | None = wire("BuildRuleId")
    artifact_type: str | None = wire("ArtifactType")
    scope_type: str | None = wire("ScopeType")
    scope_id: str | None = wire("ScopeId")


@dataclass
class GetArtifactBuildRuleResponseBody(ResponseBody):
    build_rule_id: str | None = wire("BuildRuleId")
    artifact_type: str | None = wire("ArtifactType")
    scope_type: str | None = wire("ScopeType")
    scope_id: str | None = wire("ScopeId")
    parameters: dict[str, Any] | None = wire("Parameters")


@dataclass
class GetArtifactBuildRuleResponse(ApiResponse):
    body: GetArtifactBuildRuleResponseBody | None = wire("body", required=True)


# GetArtifactBuildTask


@dataclass
class GetArtifactBuildTaskRequest(Model):
    instance_id: str | None = wire("InstanceId", required=True)
    build_task_id: str | None = wire("BuildTaskId", required=True)


@dataclass
class GetArtifactBuildTaskResponseBody(ResponseBody):
    build_task_id: str | None = wire("BuildTaskId")
    task_status: str | None = wire("TaskStatus")
    task_trigger: str | None = wire("TaskTrigger")
    artifact_build_type: str | None = wire("ArtifactBuildType")
    start_time: int | None = wire("StartTime")
    end_time: int | None = wire("EndTime")
    duration: int | None = wire("Duration")
    source_artifact: Artifact | None = wire("SourceArtifact")
    target_artifact: Artifact | None = wire("TargetArtifact")
    instructions: list[str] | None = wire("Instructions")


@dataclass
class GetArtifactBuildTaskResponse(ApiResponse):
    body: GetArtifactBuildTaskResponseBody | None = wire("body", required=True)


# CancelArtifactBuildTask


@dataclass
class CancelArtifactBuildTaskRequest(Model):
    instance_id: str | None = wire("InstanceId", required=True)
    build_task_id: str | None = wire("BuildTaskId", required=True)


@dataclass
class CancelArtifactBuildTaskResponseBody(ResponseBody):
    pass


@dataclass
class CancelArtifactBuildTaskResponse(ApiResponse):
    body: CancelArtifactBuildTaskResponseBody | None = wire("body", required=True)


# ListArtifactBuildTaskLog


@dataclass
class ListArtifactBuildTaskLogRequest(Model):
    instance_id: str | None = wire("InstanceId", required=True)
    build_task_id: str | None = wire("BuildTaskId", required=True)
    page: int | None = wire("Page", required=True)
    page_size: int | None = wire("PageSize", required=True)


@dataclass
class ListArtifactBuildTaskLogResponseBody(ResponseBody):
    build_task_logs: list[BuildLogLine] | None = wire("BuildTaskLogs")
    total_count: int | None = wire("TotalCount")


@dataclass
class ListArtifactBuildTaskLogResponse(ApiResponse):
    body: ListArtifactBuildTaskLogResponseBody | None = wire("body", required=True)
